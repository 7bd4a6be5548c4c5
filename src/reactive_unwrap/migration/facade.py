"""
MigrationFacade: locate, rewrite, apply and validate for whole files.

Ties the locator, the rewriter and the in-memory editor together for the
CLI. Files are read but never written.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from reactive_unwrap.config import get_migration_config
from reactive_unwrap.logging_config import logger
from reactive_unwrap.mutation import CodeValidator, TextEditor
from reactive_unwrap.parser import SourceFile, parse_file
from reactive_unwrap.schemas import FileMigrationResult, ReferenceInfo
from .binding_elements import declaration_of
from .insertion import Unsupported, classify, context_name
from .locator import find_binding_element_references
from .object_expansion import migrate_binding_element_references, project_relative_path
from .result import MigrationResult
from .unique_names import NameRegistry, UniqueNameGenerator


class MigrationFacade:
    """
    File-level entry point for the binding element migration.

    One facade holds one NameRegistry, so temporaries stay unique across
    every file migrated through it.
    """

    def __init__(
        self,
        project_root: Union[str, Path] = ".",
        registry: Optional[NameRegistry] = None,
        config: Optional[dict] = None,
    ):
        self.project_root = Path(project_root).resolve()
        self.config = get_migration_config(config)
        self.name_generator = UniqueNameGenerator(
            registry if registry is not None else NameRegistry(),
            fallback_suffixes=self.config["name_fallback_suffixes"],
            separator=self.config["numeric_suffix_separator"],
        )
        self.editor = TextEditor()
        self.validator = CodeValidator()

    def migrate_source(self, source: SourceFile, names: Iterable[str]) -> Tuple[FileMigrationResult, str]:
        """
        Migrate all references to ``names`` in ``source``.

        Returns:
            (result, modified_content)
        """
        references = find_binding_element_references(source, names)
        result = MigrationResult()
        skipped = migrate_binding_element_references(
            references,
            self.project_root,
            self.name_generator,
            result,
            config=self.config,
        )

        relative_path = project_relative_path(source.file_path, self.project_root)
        modified_content = self.editor.apply(source.text, result.replacements)
        syntax_valid, errors = self.validator.validate_syntax(modified_content, source.language)
        if not syntax_valid:
            logger.warning(f"Rewritten {relative_path} does not parse cleanly: {errors}")

        diff = None
        if result.replacements:
            diff = self.editor.generate_unified_diff(relative_path, source.text, modified_content)

        file_result = FileMigrationResult(
            file_path=relative_path,
            references=len(references),
            replacements=result.replacements,
            skipped=skipped,
            syntax_valid=syntax_valid,
            errors=errors,
            diff=diff,
        )
        logger.info(
            f"{relative_path}: {len(references) - len(skipped)} of {len(references)} reference(s) migrated"
        )
        return file_result, modified_content

    def migrate_file(self, file_path: Union[str, Path], names: Iterable[str]) -> Tuple[FileMigrationResult, str]:
        return self.migrate_source(parse_file(Path(file_path)), names)

    def inspect_source(self, source: SourceFile, names: Iterable[str]) -> List[ReferenceInfo]:
        """Report the insertion context of every located reference."""
        relative_path = project_relative_path(source.file_path, self.project_root)
        infos = []
        for reference in find_binding_element_references(source, names):
            context = classify(declaration_of(reference.element))
            infos.append(ReferenceInfo(
                file_path=relative_path,
                name=reference.text,
                line=reference.line,
                column=source.column(reference.node),
                pattern="object" if reference.element.in_object_pattern else "array",
                context=context_name(context),
                reason=context.reason if isinstance(context, Unsupported) else None,
            ))
        return infos

    def inspect_file(self, file_path: Union[str, Path], names: Iterable[str]) -> List[ReferenceInfo]:
        return self.inspect_source(parse_file(Path(file_path)), names)
