"""
Tests for MigrationFacade: whole-file migration and inspection.
"""

import pytest

from reactive_unwrap.migration import MigrationFacade
from reactive_unwrap.parser import parse_source

pytestmark = pytest.mark.fast


class TestMigrationFacade:

    def test_migrate_source(self):
        facade = MigrationFacade(project_root="/project")
        source = parse_source("const {a, b} = this;\n", "/project/src/app.ts")

        result, modified = facade.migrate_source(source, ["a"])

        assert modified == "const {a: a_1, b} = this;\nconst a = a_1();\n"
        assert result.file_path == "src/app.ts"
        assert result.references == 1
        assert result.syntax_valid
        assert result.diff.startswith("--- a/src/app.ts")

    def test_two_inputs_of_one_arrow(self):
        facade = MigrationFacade(project_root="/project")
        source = parse_source("const f = ({a, b}) => a + b;\n", "/project/app.ts")

        result, modified = facade.migrate_source(source, ["a", "b"])

        assert result.syntax_valid
        assert result.skipped == []
        assert modified.count("return a + b;") == 1

    def test_no_references_means_no_diff(self):
        facade = MigrationFacade(project_root="/project")
        source = parse_source("const a = this.a;\n", "/project/app.ts")

        result, modified = facade.migrate_source(source, ["a"])

        assert modified == source.text
        assert result.references == 0
        assert result.replacements == []
        assert result.diff is None

    def test_config_reaches_the_resolver(self):
        facade = MigrationFacade(project_root="/project", config={"content_indent_offset": 4})
        source = parse_source("const f = ({a}) => a;", "/project/app.ts")

        _, modified = facade.migrate_source(source, ["a"])

        assert modified == "const f = ({a: a_1}) => {\n    const a = a_1();\n    return a;\n};"

    def test_fallback_suffixes_from_config(self):
        facade = MigrationFacade(project_root="/project", config={"name_fallback_suffixes": ["Value"]})
        source = parse_source("const {a} = this;", "/project/app.ts")

        _, modified = facade.migrate_source(source, ["a"])

        assert modified == "const {a: aValue} = this;\nconst a = aValue();"

    def test_migrate_file(self, temp_dir):
        path = temp_dir / "component.ts"
        path.write_text("function f({a}) {\n  return a;\n}\n", encoding="utf-8")

        result, modified = MigrationFacade(project_root=temp_dir).migrate_file(path, ["a"])

        assert result.file_path == "component.ts"
        assert modified == "function f({a: a_1}) {\n  const a = a_1();\n  return a;\n}\n"

    def test_inspect_source(self):
        facade = MigrationFacade(project_root="/project")
        source = parse_source(
            "class C {\n  set v({a}) {}\n  m([a]) {}\n}",
            "/project/app.ts",
        )

        infos = facade.inspect_source(source, ["a"])

        assert [(i.line, i.pattern, i.context) for i in infos] == [
            (2, "object", "unsupported"),
            (3, "array", "block-parameter"),
        ]
        assert infos[0].reason
        assert infos[1].reason is None
