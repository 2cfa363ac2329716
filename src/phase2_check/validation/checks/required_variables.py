"""Required variables check.

A Phase 2 private file must contain every variable listed under
``required_variables`` in ``expectations.yaml``. The list is long, so
missing names are listed only at the per-variable level and truncated
there unless the report is exhaustive.
"""

from __future__ import annotations

from typing import List

from phase2_check.core.enums import CheckCategory
from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..comparison import check_presence
from ..models import CheckResult
from ..reporting import Reporter, describe_presence


class RequiredVariablesCheck:
    """Validate that all required variables are present."""

    check_id = CheckCategory.REQUIRED_VARIABLES.value

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        reporter.section("Checking required variables")

        required = expectations.required_variables
        results = check_presence(source, required, expected=True)
        failures = [describe_presence(r) for r in results if not r.passed]

        reporter.group(
            not failures,
            f"all {len(required)} required variables are present",
            f"{len(failures)} of {len(required)} required variables are missing",
        )
        reporter.failure_list(
            failures,
            f"all {len(required)} required variables are present",
            "missing variables",
        )

        result = CheckResult.from_failures(self.check_id, failures)
        reporter.category(
            result.passed,
            "All required variables are present",
            "At least one required variable is missing",
        )
        return [result]
