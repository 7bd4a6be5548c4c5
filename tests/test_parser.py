"""
Tests for parsing TypeScript into SourceFile objects.
"""

import pytest

from reactive_unwrap.exceptions import ConfigError, GrammarNotFoundError, ParserError
from reactive_unwrap.parser import get_parser, parse_file, parse_source, typescript_parser

pytestmark = pytest.mark.fast


class TestParseSource:

    def test_grammar_follows_extension(self):
        assert parse_source("const a = 1;", "app.ts").language == "typescript"
        assert parse_source("const a = <b/>;", "app.tsx").language == "tsx"

    def test_explicit_language(self):
        assert parse_source("const a = 1;", "snippet", language="tsx").language == "tsx"

    def test_unsupported_extension(self):
        with pytest.raises(ConfigError):
            parse_source("const a = 1;", "app.js")

    def test_syntax_errors_are_reported(self, log_messages):
        source = parse_source("const {a = this;", "app.ts")

        assert source.has_errors
        assert any("Syntax errors" in message for message in log_messages)

    def test_parsers_are_cached(self):
        assert get_parser("typescript") is get_parser("typescript")
        assert get_parser("typescript") is not get_parser("tsx")

    def test_missing_grammar(self, monkeypatch):
        monkeypatch.setattr(typescript_parser, "GRAMMAR_AVAILABLE", False)
        monkeypatch.setattr(typescript_parser, "_parser_cache", {})

        with pytest.raises(GrammarNotFoundError, match="tree-sitter-typescript"):
            get_parser("typescript")


class TestSourceFileOffsets:

    def test_ascii_offsets(self):
        source = parse_source("let x = 1;\n  let y = 2;", "app.ts")
        second = source.root.named_children[1]

        assert source.start(second) == 13
        assert source.end(second) == 23
        assert source.column(second) == 2
        assert source.text_of(second) == "let y = 2;"

    def test_non_ascii_offsets_are_characters(self):
        text = 'const s = "日本"; let y = 2;'
        source = parse_source(text, "app.ts")
        second = source.root.named_children[1]

        assert source.start(second) == text.index("let")
        assert source.end(second) == len(text)
        assert source.column(second) == text.index("let")
        assert source.text_of(source.root.named_children[0]) == 'const s = "日本";'

    def test_walk_is_pre_order(self):
        source = parse_source("a(b);", "app.ts")
        types = [node.type for node in source.walk()]

        assert types[0] == "program"
        assert types.index("call_expression") < types.index("arguments")


class TestParseFile:

    def test_parse_file(self, temp_dir):
        path = temp_dir / "component.ts"
        path.write_text("const {a} = this;\n", encoding="utf-8")

        source = parse_file(path)

        assert source.file_path == str(path.resolve())
        assert source.text == "const {a} = this;\n"
        assert not source.has_errors

    def test_missing_file(self, temp_dir):
        with pytest.raises(ParserError, match="Failed to parse"):
            parse_file(temp_dir / "missing.ts")

    def test_undecodable_file(self, temp_dir):
        path = temp_dir / "binary.ts"
        path.write_bytes(b"\xff\xfe\x00const")

        with pytest.raises(ParserError):
            parse_file(path)

    def test_wrong_extension(self, temp_dir):
        path = temp_dir / "script.js"
        path.write_text("const a = 1;", encoding="utf-8")

        with pytest.raises(ConfigError):
            parse_file(path)
