"""
Unit tests for regex utilities with timeout protection.
"""

import re
import threading
import unittest

from wrenchit.core.regex_utils import RegexTimeout, safe_regex_sub, timeout_handler


class TestRegexUtils(unittest.TestCase):
    """Test safe regex utility functions."""

    def test_safe_regex_sub_normal_operation(self) -> None:
        """Test safe_regex_sub with string and compiled patterns."""
        self.assertEqual(safe_regex_sub(r"\d+", "X", "abc123def456"), "abcXdefX")
        self.assertEqual(
            safe_regex_sub(re.compile(r"\d+"), "X", "abc123def456"), "abcXdefX"
        )

    def test_safe_regex_sub_with_count(self) -> None:
        """Test that count limits the number of replacements."""
        self.assertEqual(safe_regex_sub(r"a", "b", "aaa", count=1), "baa")

    def test_safe_regex_sub_with_function_replacement(self) -> None:
        """Test safe_regex_sub with function replacement."""

        def replace_func(match: re.Match[str]) -> str:
            return match.group().upper()

        result = safe_regex_sub(r"[a-z]+", replace_func, "hello world")
        self.assertEqual(result, "HELLO WORLD")

    def test_safe_regex_sub_timeout_protection(self) -> None:
        """Test that safe_regex_sub returns original string on timeout."""
        catastrophic_pattern = r"(a+)+b"
        input_string = "a" * 30

        with self.assertLogs("wrenchit.core.regex_utils", level="WARNING"):
            result = safe_regex_sub(catastrophic_pattern, "X", input_string, timeout=1)
        self.assertEqual(result, input_string)

    def test_safe_regex_sub_without_timeout(self) -> None:
        """A zero timeout skips the alarm entirely."""
        self.assertEqual(safe_regex_sub(r"b", "c", "abc", timeout=0), "acc")

    def test_safe_regex_sub_off_main_thread(self) -> None:
        """Worker threads cannot install signal handlers but still substitute."""
        results = []
        worker = threading.Thread(
            target=lambda: results.append(safe_regex_sub(r"b", "c", "abc"))
        )
        worker.start()
        worker.join()
        self.assertEqual(results, ["acc"])

    def test_timeout_handler_raises(self) -> None:
        with self.assertRaises(RegexTimeout):
            timeout_handler(0, None)


if __name__ == "__main__":
    unittest.main()
