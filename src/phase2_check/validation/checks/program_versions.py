"""Program version check.

Each GGG program records its version in a global attribute. The netCDF writer
additionally records the commit it was built from, embedded in a longer
description as ``... commit <hash> ...``.
"""

from __future__ import annotations

from typing import List

from phase2_check.core.enums import CheckCategory
from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..comparison import compare_commit_attribute, compare_string_attribute
from ..models import CheckResult
from ..reporting import Reporter, describe_attribute


class ProgramVersionCheck:
    """Validate program version attributes and the writer commit."""

    check_id = CheckCategory.PROGRAM_VERSIONS.value

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        reporter.section("Checking program versions")

        failures: List[str] = []
        for attr_name in sorted(expectations.program_versions):
            comparison = compare_string_attribute(
                source, attr_name, expectations.program_versions[attr_name]
            )
            reporter.attribute(comparison, attr_name)
            if not comparison.passed:
                failures.append(describe_attribute(comparison))

        commit = compare_commit_attribute(
            source, expectations.commit_attribute, expectations.commit_hash
        )
        reporter.attribute(commit, f"{expectations.commit_attribute} commit")
        if not commit.passed:
            failures.append(describe_attribute(commit))

        result = CheckResult.from_failures(self.check_id, failures)
        reporter.category(
            result.passed,
            "Program versions match expected values",
            "Program versions do not match expected values",
        )
        return [result]
