from pathlib import Path
from typing import Dict, Optional

from tree_sitter import Language, Parser

try:
    import tree_sitter_typescript as tstypescript
    GRAMMAR_AVAILABLE = True
except ImportError:
    GRAMMAR_AVAILABLE = False

from reactive_unwrap.config import validate_extension
from reactive_unwrap.exceptions import GrammarNotFoundError, ParserError
from reactive_unwrap.logging_config import logger
from .source_file import SourceFile

# Global cache for parsers to avoid reloading the grammar per file
_parser_cache: Dict[str, Parser] = {}


def get_parser(language: str = "typescript") -> Parser:
    """
    Return a tree-sitter parser for ``typescript`` or ``tsx``.

    Raises:
        GrammarNotFoundError: If the grammar package is not installed.
    """
    if not GRAMMAR_AVAILABLE:
        raise GrammarNotFoundError(language, "pip install tree-sitter-typescript")

    if language in _parser_cache:
        return _parser_cache[language]

    if language == "tsx":
        grammar = tstypescript.language_tsx()
    else:
        grammar = tstypescript.language_typescript()

    parser = Parser()
    parser.language = Language(grammar)
    _parser_cache[language] = parser
    logger.debug(f"Initialized tree-sitter parser for '{language}'")
    return parser


def parse_source(text: str, file_path: str = "<memory>.ts", language: Optional[str] = None) -> SourceFile:
    """
    Parse TypeScript source text.

    The grammar is derived from the file extension unless ``language``
    is given explicitly.
    """
    if language is None:
        language = validate_extension(Path(file_path).suffix)

    tree = get_parser(language).parse(bytes(text, "utf8"))
    source = SourceFile(file_path=file_path, text=text, language=language, tree=tree)
    if source.has_errors:
        logger.warning(f"Syntax errors while parsing {file_path}, results may be incomplete")
    return source


def parse_file(file_path: Path) -> SourceFile:
    """
    Read and parse a TypeScript file from disk.

    Raises:
        ParserError: If the file cannot be read.
        ConfigError: If the extension is not a TypeScript one.
    """
    path = Path(file_path)
    language = validate_extension(path.suffix)
    logger.debug(f"Parsing {language} file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParserError(str(path), str(e)) from e

    return parse_source(text, str(path.resolve()), language)
