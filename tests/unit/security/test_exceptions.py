"""
Test cases for the wrenchit exception hierarchy.
"""

import unittest

from wrenchit.recovery.core.tracker import StrategyAttempt
from wrenchit.security.exceptions import (
    Base64DecodeError,
    EmptyInputError,
    RepairError,
    SecurityError,
    WrenchError,
)


class TestExceptionHierarchy(unittest.TestCase):
    """Test exception types and their bases."""

    def test_all_derive_from_wrench_error(self):
        for exc_type in [RepairError, EmptyInputError, Base64DecodeError, SecurityError]:
            with self.subTest(exc_type=exc_type):
                self.assertTrue(issubclass(exc_type, WrenchError))

    def test_input_errors_are_value_errors(self):
        self.assertTrue(issubclass(EmptyInputError, ValueError))
        self.assertTrue(issubclass(Base64DecodeError, ValueError))


class TestRepairError(unittest.TestCase):
    """Test RepairError payload and message."""

    def test_defaults(self):
        error = RepairError("failed")
        self.assertEqual(str(error), "failed")
        self.assertEqual(error.best_attempt, "")
        self.assertEqual(error.attempts, [])

    def test_message_counts_attempts(self):
        attempts = [StrategyAttempt(1, "identity", "{"), StrategyAttempt(2, "trim", "{")]
        error = RepairError("failed", "{", attempts)
        self.assertEqual(str(error), "failed (2 strategies tried)")
        self.assertEqual(error.best_attempt, "{")


if __name__ == "__main__":
    unittest.main()
