"""
Unit tests for the multi-pass deep cleaner.
"""

import json
import unittest

from wrenchit.core.cleaner import deep_clean
from wrenchit.utils.config import CleanLimits


class TestDeepClean(unittest.TestCase):
    """Test the fixed-order deep-clean pipeline."""

    def test_slash_delimited_pairs(self) -> None:
        """Delimited key/value pairs become plain quoted pairs."""
        result = deep_clean('///"status///":///"ok///"')
        self.assertEqual(result, '"status":"ok"')
        self.assertEqual(json.loads("{" + result + "}"), {"status": "ok"})

    def test_escaped_quotes(self) -> None:
        self.assertEqual(deep_clean('{\\"a\\":\\"b\\"}'), '{"a":"b"}')

    def test_quoted_document_with_nested_string(self) -> None:
        """Whole-document quoting plus a nested document stored as a string."""
        raw = '"{\\"Content\\":\\"{\\\\\\"key\\\\\\":\\\\\\"val\\\\\\"}\\"}"'
        result = deep_clean(raw)
        self.assertEqual(json.loads(result), {"Content": {"key": "val"}})

    def test_double_wrapped_document(self) -> None:
        raw = json.dumps(json.dumps(json.dumps({"a": [1, 2]})))
        self.assertEqual(json.loads(deep_clean(raw)), {"a": [1, 2]})

    def test_unquoted_nested_object(self) -> None:
        result = deep_clean('{"Content":"{"key":"val"}"}')
        self.assertEqual(result, '{"Content":{"key":"val"}}')

    def test_trailing_commas(self) -> None:
        self.assertEqual(deep_clean('{"a":1,}'), '{"a":1}')
        self.assertEqual(deep_clean("[1,2,]"), "[1,2]")

    def test_bom_and_crlf(self) -> None:
        self.assertEqual(deep_clean('\ufeff{"a":1,\r\n}'), '{"a":1}')

    def test_trailing_slash_value(self) -> None:
        self.assertEqual(deep_clean('{"id":"CommerceId/"}'), '{"id":"CommerceId"}')

    def test_url_with_path_preserved(self) -> None:
        text = '{"url":"https://example.com/a/b","n":1}'
        self.assertEqual(deep_clean(text), text)

    def test_escaped_forward_slashes(self) -> None:
        self.assertEqual(
            deep_clean('{"url":"https:\\/\\/example.com\\/a"}'),
            '{"url":"https://example.com/a"}',
        )

    def test_idempotent_on_resolved_output(self) -> None:
        """A second pass over fully resolved output changes nothing."""
        for raw in [
            '{"Content":"{"key":"val"}",}',
            '{\\"a\\":[1,2,],\\"b\\":\\"x/\\"}',
            '"{\\"k\\":\\"https://example.com/p\\"}"',
            '{///"status///":///"ok///"}',
        ]:
            with self.subTest(raw=raw):
                once = deep_clean(raw)
                json.loads(once)
                self.assertEqual(deep_clean(once), once)

    def test_custom_limits(self) -> None:
        """Without unescape passes, escaped slashes survive."""
        limits = CleanLimits(max_unescape_passes=0)
        self.assertEqual(
            deep_clean('{"u":"a\\/b"}', limits), '{"u":"a\\/b"}'
        )


if __name__ == "__main__":
    unittest.main()
