"""Validation data models.

This module defines core data structures for validation results:
- VariableComparison / AttributeComparison / PresenceResult: outcome of a
  single comparison against the file
- CheckResult: outcome of one check category
- ValidationReport: aggregated results from all categories
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional


class _Missing:
    """Sentinel type for an attribute that does not exist in the file."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class VariableComparison:
    """Element-wise comparison of one variable against a reference value.

    Attributes:
        name: Variable name.
        expected: Reference value every element should equal.
        n_total: Number of elements compared.
        n_wrong: Number of elements outside tolerance.
        missing: True if the variable does not exist (only for optional variables).
    """

    name: str
    expected: float
    n_total: int = 0
    n_wrong: int = 0
    missing: bool = False

    @property
    def passed(self) -> bool:
        return not self.missing and self.n_wrong == 0

    @property
    def percent_wrong(self) -> float:
        """Percentage of wrong elements; 0.0 for an empty variable."""
        if self.n_total == 0:
            return 0.0
        return self.n_wrong / self.n_total * 100.0


@dataclass(frozen=True)
class AttributeComparison:
    """Comparison of one global attribute against an expected string.

    ``actual`` is MISSING when the attribute is absent, which is distinct from
    an empty string.
    """

    name: str
    expected: str
    actual: object

    @property
    def passed(self) -> bool:
        return self.actual is not MISSING and self.actual == self.expected


@dataclass(frozen=True)
class PresenceResult:
    """Whether one variable's existence matches what was expected."""

    name: str
    expected: bool
    present: bool

    @property
    def passed(self) -> bool:
        return self.expected == self.present


@dataclass(frozen=True)
class CheckResult:
    """Result of a single validation check.

    Attributes:
        check_id: Unique identifier for the check (e.g., "adcf").
        passed: True if check passed without issues, False otherwise.
        fail_count: Number of failing items (0 if passed).
        messages: One message per failing item.

    Examples:
        >>> CheckResult(
        ...     check_id="window_scale_factors",
        ...     passed=False,
        ...     fail_count=1,
        ...     messages=["vsw_sf_h2o_6076: 7/100 (7.00%) values incorrect"]
        ... )
    """

    check_id: str
    passed: bool
    fail_count: int
    messages: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.passed and self.fail_count != 0:
            raise ValueError("passed=True requires fail_count=0")
        if not self.passed and self.fail_count == 0:
            raise ValueError("passed=False requires fail_count > 0")

    @classmethod
    def from_failures(cls, check_id: str, failures: List[str]) -> "CheckResult":
        """Build a result whose pass/fail state follows from its failure messages."""
        return cls(
            check_id=check_id,
            passed=not failures,
            fail_count=len(failures),
            messages=list(failures),
        )


@dataclass
class ValidationReport:
    """Aggregated validation results for one file.

    Attributes:
        results: List of check results, in the order the checks ran.
        nc_path: Path to the file that was checked.
    """

    results: List[CheckResult]
    nc_path: Path

    @property
    def passed(self) -> bool:
        """True only if every check passed."""
        return all(r.passed for r in self.results)

    def get_failed_checks(self) -> List[CheckResult]:
        """Get all failed checks, in run order."""
        return [r for r in self.results if not r.passed]

    def get_failure_count(self) -> int:
        """Count failing items across all checks."""
        return sum(r.fail_count for r in self.results)

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              File: pa20040721_20041222.private.nc
              Checks: 7 executed (6 passed, 1 failed)
              Issues: 3
        """
        total = len(self.results)
        passed = sum(1 for r in self.results if r.passed)
        return (
            f"Validation Summary:\n"
            f"  File: {self.nc_path.name}\n"
            f"  Checks: {total} executed ({passed} passed, {total - passed} failed)\n"
            f"  Issues: {self.get_failure_count()}"
        )

    def to_json(self) -> str:
        """Generate a detailed JSON validation report."""
        report_data = {
            "metadata": {
                "nc_path": str(self.nc_path),
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "passed": self.passed,
                "total_checks": len(self.results),
                "failed_checks": len(self.get_failed_checks()),
                "failures": self.get_failure_count(),
            },
            "checks": [
                {
                    "check_id": r.check_id,
                    "passed": r.passed,
                    "fail_count": r.fail_count,
                    "messages": r.messages,
                }
                for r in self.results
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)
