"""Airmass-dependent correction factor check.

Phase 2 changed the ADCFs and their fitting parameters for several windows.
Every ``<window>_adcf``, ``_adcf_error``, ``_g`` and ``_p`` variable must hold
the reference value in every element. Missing variables count as failures.
"""

from __future__ import annotations

from typing import List

from phase2_check.core.enums import CheckCategory
from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..comparison import compare_float_variable
from ..config import ADCF_ERROR_VARIABLE, ADCF_G_VARIABLE, ADCF_P_VARIABLE, ADCF_VARIABLE
from ..models import CheckResult
from ..reporting import Reporter, describe_variable


class AdcfCheck:
    """Validate ADCF values, uncertainties and fitting exponents per window."""

    check_id = CheckCategory.ADCF.value

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        reporter.section("Checking ADCF values")

        failures: List[str] = []
        for window in sorted(references.adcfs):
            record = references.adcfs[window]
            reporter.heading(f"Checking {window} ADCFs:")
            comparisons = [
                compare_float_variable(source, ADCF_VARIABLE.format(window=window), record.adcf),
                compare_float_variable(
                    source, ADCF_ERROR_VARIABLE.format(window=window), record.error
                ),
                compare_float_variable(source, ADCF_G_VARIABLE.format(window=window), record.g),
                compare_float_variable(source, ADCF_P_VARIABLE.format(window=window), record.p),
            ]
            for comparison in comparisons:
                reporter.variable(comparison)
                if not comparison.passed:
                    failures.append(describe_variable(comparison))

            window_ok = all(c.passed for c in comparisons)
            reporter.group(
                window_ok, f"{window} ADCFs are correct", f"{window} ADCFs are incorrect"
            )

        result = CheckResult.from_failures(self.check_id, failures)
        reporter.category(
            result.passed, "ADCFs match expected values", "ADCFs do not match expected values"
        )
        return [result]
