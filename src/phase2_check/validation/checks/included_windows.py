"""Window presence check.

Every active window must have its ``vsw_ada_x<window>`` variable, and every
window commented out of the window table must not.
"""

from __future__ import annotations

from typing import List

from phase2_check.core.enums import CheckCategory
from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..comparison import check_presence
from ..config import WINDOW_PRESENCE_VARIABLE
from ..models import CheckResult
from ..reporting import Reporter, describe_presence


class IncludedWindowsCheck:
    """Validate which windows were retrieved."""

    check_id = CheckCategory.WINDOWS_PRESENT.value
    absent_check_id = CheckCategory.WINDOWS_ABSENT.value

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        reporter.section("Checking windows present")

        expected_vars = sorted(
            WINDOW_PRESENCE_VARIABLE.format(window=win) for win in references.windows
        )
        unexpected_vars = sorted(
            WINDOW_PRESENCE_VARIABLE.format(window=win) for win in references.skipped_windows
        )

        present_results = check_presence(source, expected_vars, expected=True)
        absent_results = check_presence(source, unexpected_vars, expected=False)
        for presence in present_results + absent_results:
            reporter.presence(presence)

        present = CheckResult.from_failures(
            self.check_id, [describe_presence(r) for r in present_results if not r.passed]
        )
        absent = CheckResult.from_failures(
            self.absent_check_id, [describe_presence(r) for r in absent_results if not r.passed]
        )

        reporter.category(
            present.passed,
            "All windows expected to be present are",
            "At least one window expected to be present is missing",
        )
        reporter.category(
            absent.passed,
            "All windows expected to be removed are",
            "At least one window expected to have been removed is present",
        )
        return [present, absent]
