"""Window-to-window scale factor check.

Unlike the correction factors, a ``vsw_sf_<window>`` variable that is absent
means the file was not produced from this window list at all, so it stops the
run instead of counting as a failure.
"""

from __future__ import annotations

from typing import List

from phase2_check.core.enums import CheckCategory
from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..comparison import compare_float_variable
from ..config import WINDOW_SF_VARIABLE
from ..models import CheckResult
from ..reporting import Reporter, describe_variable


class WindowScaleFactorCheck:
    """Validate the window-to-window scale factor of every active window."""

    check_id = CheckCategory.WINDOW_SCALE_FACTORS.value

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        reporter.section("Checking window-to-window scale factors")

        failures: List[str] = []
        for win_name in sorted(references.windows):
            window = references.windows[win_name]
            comparison = compare_float_variable(
                source, WINDOW_SF_VARIABLE.format(window=win_name), window.sf, missing_ok=False
            )
            reporter.variable(comparison)
            if not comparison.passed:
                failures.append(describe_variable(comparison))
            reporter.group(
                comparison.passed,
                f"{win_name} window-to-window scale factors are correct",
                f"{win_name} window-to-window scale factors are not correct",
            )

        result = CheckResult.from_failures(self.check_id, failures)
        reporter.category(
            result.passed,
            "Window-to-window scale factors match expected values",
            "Window-to-window scale factors do not match expected values",
        )
        return [result]
