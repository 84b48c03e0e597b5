"""
Unit tests for string-literal unwrapping and backslash unescaping.
"""

import json
import unittest

from wrenchit.core.literals import (
    is_quote_delimited,
    unescape_backslashes,
    unescape_backslashes_once,
    unwrap_string_literal,
    wrap_and_unescape,
)


class TestUnwrapStringLiteral(unittest.TestCase):
    """Test removal of one level of string-literal wrapping."""

    def test_unwraps_escaped_document(self) -> None:
        """A quoted, escaped document loses exactly one level."""
        result = unwrap_string_literal('"{\\"a\\": 1}"')
        self.assertEqual(result, '{"a": 1}')

    def test_unwraps_only_one_level(self) -> None:
        """Double-wrapped content keeps its inner wrapper."""
        document = json.dumps({"a": 1})
        double = json.dumps(json.dumps(document))
        once = unwrap_string_literal(double)
        self.assertEqual(once, json.dumps(document))
        self.assertEqual(unwrap_string_literal(once), document)

    def test_falls_back_to_naive_strip(self) -> None:
        """Malformed literals still lose their outer quotes, without unescaping."""
        self.assertEqual(unwrap_string_literal('"{"a":1}"'), '{"a":1}')
        self.assertEqual(unwrap_string_literal('"x\\"y"z"'), 'x\\"y"z')

    def test_single_quote_character(self) -> None:
        """A lone quote is both start and end and strips to nothing."""
        self.assertEqual(unwrap_string_literal('"'), "")

    def test_non_delimited_text_unchanged(self) -> None:
        """Text that is not quote-delimited is returned as-is."""
        for text in ['{"a": 1}', '"open', 'close"', "", "plain"]:
            with self.subTest(text=text):
                self.assertEqual(unwrap_string_literal(text), text)

    def test_is_quote_delimited(self) -> None:
        self.assertTrue(is_quote_delimited('"abc"'))
        self.assertFalse(is_quote_delimited(' "abc"'))
        self.assertFalse(is_quote_delimited(""))


class TestWrapAndUnescape(unittest.TestCase):
    """Test the escape-wrap decoder."""

    def test_resolves_escaped_quotes(self) -> None:
        """Bare escaped content decodes in one shot."""
        self.assertEqual(wrap_and_unescape('{\\"k\\":\\"v\\"}'), '{"k":"v"}')

    def test_resolves_one_level_per_call(self) -> None:
        """Each call removes a single escaping level."""
        self.assertEqual(wrap_and_unescape('\\\\\\"a\\\\\\"'), '\\"a\\"')

    def test_resolves_unicode_and_slash_escapes(self) -> None:
        self.assertEqual(wrap_and_unescape("caf\\u00e9 \\/ ok"), "café / ok")

    def test_raw_quote_raises(self) -> None:
        """An unescaped quote makes the literal invalid."""
        with self.assertRaises(ValueError):
            wrap_and_unescape('{"k":"v"}')

    def test_raw_newline_raises(self) -> None:
        """Control characters are rejected like in any strict JSON string."""
        with self.assertRaises(ValueError):
            wrap_and_unescape("line1\nline2")


class TestUnescapeBackslashes(unittest.TestCase):
    """Test the bounded multi-pass unescape loop."""

    def test_single_pass_order(self) -> None:
        r"""One pass rewrites \" then \/ then \\."""
        self.assertEqual(unescape_backslashes_once('\\"a\\/b\\\\c'), '"a/b\\c')

    def test_four_levels_resolve(self) -> None:
        """Five backslashes before each quote resolve to plain quotes."""
        text = '\\\\\\\\\\"key\\\\\\\\\\"'
        self.assertEqual(unescape_backslashes(text), '"key"')

    def test_pass_cap_is_respected(self) -> None:
        """With a single pass only one level is removed."""
        text = '\\\\\\\\\\"key\\\\\\\\\\"'
        self.assertEqual(unescape_backslashes(text, max_passes=1), '\\\\"key\\\\"')

    def test_zero_passes_leaves_text(self) -> None:
        self.assertEqual(unescape_backslashes('\\"a\\"', max_passes=0), '\\"a\\"')

    def test_plain_text_unchanged(self) -> None:
        self.assertEqual(unescape_backslashes('{"a": 1}'), '{"a": 1}')


if __name__ == "__main__":
    unittest.main()
