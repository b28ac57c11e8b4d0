"""Tests for array-form formatter."""

import pytest
from annotated_json.formatter import ArrayFormFormatter
from annotated_json.models import Comment, Leaf, Section, decode_nodes
from annotated_json.types import InvalidAnnotatedJsonError


class TestArrayFormFormatter:
    """Tests for ArrayFormFormatter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = ArrayFormFormatter()

    def test_format_reference(self, reference_array, reference_text):
        assert self.formatter.format(decode_nodes(reference_array)) == reference_text

    def test_format_empty_root(self):
        assert self.formatter.format([]) == "[\n\n]\n"

    def test_format_flat_nodes(self):
        text = self.formatter.format([Comment("note"), Leaf("key", "value")])

        assert text == '[\n  "note",\n  {"key": "value"}\n]\n'

    def test_empty_comment_adds_blank_line(self):
        text = self.formatter.format([Leaf("a", 1), Comment(""), Leaf("b", 2)])

        assert text == '[\n  {"a": 1},\n\n  "",\n  {"b": 2}\n]\n'

    def test_empty_comment_first(self):
        assert self.formatter.format([Comment("")]) == '[\n\n  ""\n]\n'

    def test_section_opens_inline(self):
        text = self.formatter.format([Section("s", [Leaf("k", True)])])

        assert text == '[\n  ["s", [\n    {"k": true}\n  ]]\n]\n'

    def test_empty_section(self):
        text = self.formatter.format([Section("s", [])])

        assert text == '[\n  ["s", [\n\n  ]]\n]\n'

    def test_nested_leaf_value_is_reindented(self):
        text = self.formatter.format([Section("s", [Leaf("obj", {"a": [1, 2], "b": {}})])])

        assert text == (
            '[\n'
            '  ["s", [\n'
            '    {"obj": {\n'
            '      "a": [\n'
            '        1,\n'
            '        2\n'
            '      ],\n'
            '      "b": {}\n'
            '    }}\n'
            '  ]]\n'
            ']\n'
        )

    def test_empty_containers_stay_inline(self):
        text = self.formatter.format([Leaf("a", []), Leaf("b", {})])

        assert text == '[\n  {"a": []},\n  {"b": {}}\n]\n'

    def test_scalar_leaf_values(self):
        text = self.formatter.format([Leaf("n", None), Leaf("f", 1.5), Leaf("t", False)])

        assert text == '[\n  {"n": null},\n  {"f": 1.5},\n  {"t": false}\n]\n'

    def test_non_ascii_is_not_escaped(self):
        text = self.formatter.format([Comment("héllo ☃"), Leaf("ключ", "значение")])

        assert '"héllo ☃"' in text
        assert '{"ключ": "значение"}' in text

    def test_strings_are_json_escaped(self):
        text = self.formatter.format([Comment('say "hi"\n'), Leaf("p", "a\\b")])

        assert '"say \\"hi\\"\\n"' in text
        assert '{"p": "a\\\\b"}' in text

    def test_crlf_line_terminator(self, reference_array, reference_text_crlf):
        formatter = ArrayFormFormatter(line_terminator="\r\n")

        assert formatter.format(decode_nodes(reference_array)) == reference_text_crlf

    def test_per_call_overrides(self):
        text = self.formatter.format([Leaf("o", {"k": 1})], indent=4, line_terminator="\r\n")

        assert text == '[\r\n    {"o": {\r\n        "k": 1\r\n    }}\r\n]\r\n'

    def test_custom_indent(self):
        formatter = ArrayFormFormatter(indent=4)
        text = formatter.format([Section("s", [Comment("c")])])

        assert text == '[\n    ["s", [\n        "c"\n    ]]\n]\n'

    def test_unknown_node_is_rejected(self):
        with pytest.raises(InvalidAnnotatedJsonError):
            self.formatter.format([Comment("ok"), {"raw": "dict"}])
