"""Airmass-independent correction factor check."""

from __future__ import annotations

from typing import List

from phase2_check.core.enums import CheckCategory
from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..comparison import compare_float_variable
from ..config import AICF_ERROR_VARIABLE, AICF_VARIABLE
from ..models import CheckResult
from ..reporting import Reporter, describe_variable


class AicfCheck:
    """Validate ``<gas>_aicf`` and ``<gas>_aicf_error`` for every gas."""

    check_id = CheckCategory.AICF.value

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        reporter.section("Checking AICF values")

        failures: List[str] = []
        for gas in sorted(references.aicfs):
            record = references.aicfs[gas]
            scale = f" ({record.wmo_scale})" if record.wmo_scale else ""
            reporter.heading(f"Checking {gas} AICFs{scale}:")
            comparisons = [
                compare_float_variable(source, AICF_VARIABLE.format(gas=gas), record.aicf),
                compare_float_variable(source, AICF_ERROR_VARIABLE.format(gas=gas), record.error),
            ]
            for comparison in comparisons:
                reporter.variable(comparison)
                if not comparison.passed:
                    failures.append(describe_variable(comparison))

            gas_ok = all(c.passed for c in comparisons)
            reporter.group(gas_ok, f"{gas} AICFs are correct", f"{gas} AICFs are not correct")

        result = CheckResult.from_failures(self.check_id, failures)
        reporter.category(
            result.passed, "AICFs match expected values", "AICFs do not match expected values"
        )
        return [result]
