"""Text report of check outcomes, governed by verbosity and failures-only mode.

The Reporter is the only place that decides whether a line is printed. Checks
call it for every outcome and it filters by level:

    -1  nothing
     0  final verdict only
     1  one line per check category
     2  section headers, one line per window/gas/attribute/presence test
     3  one line per variable, expected vs. actual on attribute mismatches
     4  as 3, without truncating long lists

In failures-only mode PASS lines (and per-window headings) are dropped; FAIL
lines are kept whenever the level allows them.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from phase2_check.core.enums import ReportLevel
from .config import FAIL_VERDICT, MAX_LISTED_FAILURES, MISSING_VALUE_LABEL, PASS_VERDICT
from .models import MISSING, AttributeComparison, PresenceResult, VariableComparison


def describe_variable(comparison: VariableComparison) -> str:
    """One-line description of a variable comparison."""
    if comparison.missing:
        return f"variable '{comparison.name}' is missing"
    if comparison.passed:
        return comparison.name
    return (
        f"{comparison.n_wrong}/{comparison.n_total} ({comparison.percent_wrong:.2f}%) "
        f"of {comparison.name} have incorrect values"
    )


def format_attribute_value(value: object) -> str:
    if value is MISSING:
        return MISSING_VALUE_LABEL
    return repr(value)


def describe_attribute(comparison: AttributeComparison) -> str:
    """One-line description of an attribute comparison, with both values."""
    return (
        f"{comparison.name} is {format_attribute_value(comparison.actual)} "
        f"(expected {comparison.expected!r})"
    )


def describe_presence(result: PresenceResult) -> str:
    if result.expected and result.present:
        return f"variable '{result.name}' is present as expected"
    if result.expected:
        return f"variable '{result.name}' is not present but should be"
    if result.present:
        return f"variable '{result.name}' is present but should not be"
    return f"variable '{result.name}' is absent as expected"


class Reporter:
    """Prints check outcomes according to a verbosity level.

    Args:
        verbosity: Report level; values above EXHAUSTIVE are clamped to it.
        failures_only: Suppress PASS lines.
        stream: Output stream, defaults to ``sys.stdout`` at write time.
    """

    def __init__(
        self,
        verbosity: int = ReportLevel.SUMMARY,
        failures_only: bool = False,
        stream: Optional[TextIO] = None,
    ) -> None:
        clamped = max(int(ReportLevel.SILENT), min(int(verbosity), int(ReportLevel.EXHAUSTIVE)))
        self.level = ReportLevel(clamped)
        self.failures_only = failures_only
        self.stream = stream
        self.lines_written = 0
        self._sections = 0

    def _write(self, text: str = "") -> None:
        print(text, file=self.stream if self.stream is not None else sys.stdout)
        self.lines_written += 1

    def _outcome(self, passed: bool, pass_msg: str, fail_msg: str, prefix: str) -> None:
        if passed:
            if not self.failures_only:
                self._write(f"{prefix}PASS: {pass_msg}")
        else:
            self._write(f"{prefix}FAIL: {fail_msg}")

    def section(self, title: str) -> None:
        """Header announcing a check category."""
        if self.level < ReportLevel.GROUP:
            return
        if self._sections:
            self._write()
        self._write(f"=== {title} ===")
        self._sections += 1

    def category(self, passed: bool, pass_msg: str, fail_msg: str) -> None:
        """Category verdict; higher levels show the detail lines instead."""
        if self.level == ReportLevel.CATEGORY:
            self._outcome(passed, pass_msg, fail_msg, "* ")

    def group(self, passed: bool, pass_msg: str, fail_msg: str) -> None:
        """Verdict for one window, gas or variable group."""
        if self.level == ReportLevel.GROUP:
            self._outcome(passed, pass_msg, fail_msg, "  - ")

    def heading(self, text: str) -> None:
        """Heading over the per-variable lines of one group."""
        if self.level >= ReportLevel.VARIABLE and not self.failures_only:
            self._write(f"  * {text}")

    def variable(self, comparison: VariableComparison) -> None:
        if self.level >= ReportLevel.VARIABLE:
            text = describe_variable(comparison)
            self._outcome(comparison.passed, text, text, "    - ")

    def attribute(self, comparison: AttributeComparison, label: str) -> None:
        """Attribute verdict; values are only spelled out at the per-variable level."""
        if self.level < ReportLevel.GROUP:
            return
        if self.level >= ReportLevel.VARIABLE:
            fail_msg = describe_attribute(comparison)
            prefix = "    - "
        else:
            fail_msg = f"{label} is incorrect"
            prefix = "  - "
        self._outcome(comparison.passed, f"{label} is correct", fail_msg, prefix)

    def presence(self, result: PresenceResult) -> None:
        if self.level >= ReportLevel.GROUP:
            text = describe_presence(result)
            self._outcome(result.passed, text, text, "  - ")

    def failure_list(self, failures: Sequence[str], pass_msg: str, noun: str) -> None:
        """Per-variable listing of a long enumeration.

        At most MAX_LISTED_FAILURES entries are printed followed by an elision
        notice, unless the level is EXHAUSTIVE.
        """
        if self.level < ReportLevel.VARIABLE:
            return
        if not failures:
            self._outcome(True, pass_msg, "", "    - ")
            return
        limit = None if self.level >= ReportLevel.EXHAUSTIVE else MAX_LISTED_FAILURES
        shown = failures if limit is None else failures[:limit]
        for message in shown:
            self._outcome(False, "", message, "    - ")
        hidden = len(failures) - len(shown)
        if hidden > 0:
            self._write(f"    ... and {hidden} more {noun} (use -vvvv to list all)")

    def verdict(self, passed: bool, path: Union[str, Path]) -> None:
        """Final one-line verdict, printed at every level except SILENT."""
        if self.level < ReportLevel.SUMMARY:
            return
        if self.lines_written:
            self._write()
        template = PASS_VERDICT if passed else FAIL_VERDICT
        self._write(template.format(path=path))


__all__ = [
    "Reporter",
    "describe_attribute",
    "describe_presence",
    "describe_variable",
]
