"""Minimal assertion counter and test runner for on-target unit tests."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any


class UnitTestRunner:
    """Runs test functions, counts assertions and writes a short report.

    ``write`` receives every piece of output text, line breaks included.
    """

    def __init__(self, write: Callable[[str], Any] | None = None) -> None:
        self._write = write if write is not None else sys.stdout.write
        self.asserts_in_test = 0
        self.asserts = 0
        self.asserts_failed_in_test = 0
        self.asserts_failed = 0
        self.tests = 0
        self.tests_failed = 0
        self.tests_passed = 0
        self.tests_skipped = 0

    def _line(self, text: str = "") -> None:
        if text:
            self._write(text)
        self._write("\n")

    def assert_equal(self, actual: Any, expected: Any, hint: str) -> None:
        """Count an assertion; on mismatch record a failure and write ``hint``."""
        self.asserts_in_test += 1
        self.asserts += 1
        if not actual == expected:
            self.asserts_failed_in_test += 1
            self.asserts_failed += 1
            self._line(hint)

    def assert_true(self, condition: bool, hint: str) -> None:
        self.assert_equal(bool(condition), True, hint)

    def run_test(self, func: Callable[[], Any], name: str | None = None) -> None:
        """Run ``func`` and report it as passed, failed or skipped (no assertions)."""
        if name is None:
            name = getattr(func, "__name__", repr(func))
        self.tests += 1
        self.asserts_in_test = 0
        self.asserts_failed_in_test = 0
        func()
        if self.asserts_in_test == 0:
            self.tests_skipped += 1
            tag = "[  SKIP  ] "
        elif self.asserts_failed_in_test == 0:
            self.tests_passed += 1
            tag = "[ PASSED ] "
        else:
            self.tests_failed += 1
            tag = "[ FAILED ] "
        self._line(tag + name)

    def print_result(self) -> None:
        """Write the assertion and test totals followed by OK or FAIL."""
        self._line()
        self._line(
            f"Asserts: {self.asserts_failed} failed, "
            f"{self.asserts - self.asserts_failed} passed"
        )
        self._line(
            f"Tests:   {self.tests_failed} failed, {self.tests_passed} passed, "
            f"{self.tests_skipped} skipped"
        )
        self._line("OK" if self.tests_failed == 0 else "FAIL")

    def passed(self) -> bool:
        return self.tests_failed == 0