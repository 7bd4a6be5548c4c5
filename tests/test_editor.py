"""
Tests for in-memory edit application, diffs and syntax validation.
"""

import pytest

from reactive_unwrap.mutation import CodeValidator, TextEditor, apply_replacements
from reactive_unwrap.schemas import Replacement, TextUpdate

pytestmark = pytest.mark.fast


def update(position, end, to_insert):
    return TextUpdate(position=position, end=end, to_insert=to_insert)


class TestApplyReplacements:

    def test_updates_apply_against_original_offsets(self):
        text = "const a = 1; const b = 2;"
        updates = [update(6, 7, "x"), update(19, 20, "y")]
        assert apply_replacements(text, updates) == "const x = 1; const y = 2;"

    def test_insert_at_end_of_replaced_span_follows_the_replacement(self):
        assert apply_replacements("abc", [update(0, 1, "X"), update(1, 1, "Y")]) == "XYbc"

    def test_inserts_at_same_position_keep_their_order(self):
        assert apply_replacements("abc", [update(1, 1, "A"), update(1, 1, "B")]) == "aABbc"

    def test_accepts_replacement_records(self):
        replacement = Replacement(file_path="src/app.ts", update=update(3, 3, "!"))
        assert apply_replacements("abc", [replacement]) == "abc!"

    @pytest.mark.parametrize("position, end", [(-1, 0), (2, 1), (0, 4)])
    def test_out_of_range_update_raises(self, position, end):
        with pytest.raises(ValueError):
            apply_replacements("abc", [update(position, end, "")])

    def test_no_updates_returns_text_unchanged(self):
        assert apply_replacements("abc", []) == "abc"


class TestTextEditor:

    def test_apply_preserves_crlf(self):
        text = "const {a} = this;\r\nuse(a);\r\n"
        modified = TextEditor().apply(text, [
            Replacement(file_path="app.ts", update=update(17, 17, "\nconst b = 1;")),
        ])
        assert modified == "const {a} = this;\r\nconst b = 1;\r\nuse(a);\r\n"

    def test_apply_keeps_lf(self):
        modified = TextEditor().apply("a;\n", [Replacement(file_path="app.ts", update=update(2, 2, "\nb;"))])
        assert modified == "a;\nb;\n"

    def test_unified_diff_headers(self):
        diff = TextEditor().generate_unified_diff("src/app.ts", "a;\n", "a;\nb;\n")

        assert diff.startswith("--- a/src/app.ts\n+++ b/src/app.ts\n")
        assert "+b;\n" in diff

    def test_unified_diff_marks_missing_final_newline(self):
        diff = TextEditor().generate_unified_diff("app.ts", "a;", "b;")

        assert "-a;\n\\ No newline at end of file\n" in diff
        assert diff.endswith("+b;\n\\ No newline at end of file\n")

    def test_unified_diff_final_newline_added(self):
        diff = TextEditor().generate_unified_diff("app.ts", "a;", "a;\n")
        assert diff.endswith("-a;\n\\ No newline at end of file\n+a;\n")

    def test_large_diff_is_truncated(self):
        modified = "".join(f"line{i};\n" for i in range(50))
        diff = TextEditor().generate_unified_diff("app.ts", "", modified, max_diff_lines=10)

        lines = diff.splitlines()
        assert len(lines) == 11
        assert "truncated" in lines[-1]


class TestCodeValidator:

    def test_valid_typescript(self):
        valid, errors = CodeValidator().validate_syntax("const {a: a_1} = this;\nconst a = a_1();\n")
        assert valid
        assert errors == []

    def test_invalid_typescript(self):
        valid, errors = CodeValidator().validate_syntax("const {a: = this;")
        assert not valid
        assert errors

    def test_tsx_grammar(self):
        valid, _ = CodeValidator().validate_syntax("const el = <div>{a}</div>;", language="tsx")
        assert valid
