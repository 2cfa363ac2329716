"""Validation check registry and runner.

This module orchestrates validation checks:
- ALL_CHECKS: List of all validation check instances, in run order
- validate_source(): Runs every check against an open data source
- run_validation(): Opens a private file, validates it and prints the verdict
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from phase2_check.ingestion.private_nc import DataSource, PrivateFile
from phase2_check.reference.registry import (
    Expectations,
    ReferenceRegistry,
    load_expectations,
    load_references,
)
from .checks.adcf import AdcfCheck
from .checks.aicf import AicfCheck
from .checks.included_windows import IncludedWindowsCheck
from .checks.program_versions import ProgramVersionCheck
from .checks.required_variables import RequiredVariablesCheck
from .checks.window_scale_factors import WindowScaleFactorCheck
from .models import CheckResult, ValidationReport
from .reporting import Reporter

logger = logging.getLogger(__name__)


# Registry of all validation checks; every one runs even if an earlier one failed
ALL_CHECKS = [
    AdcfCheck(),
    AicfCheck(),
    WindowScaleFactorCheck(),
    IncludedWindowsCheck(),
    ProgramVersionCheck(),
    RequiredVariablesCheck(),
]


def validate_source(
    source: DataSource,
    references: ReferenceRegistry,
    expectations: Expectations,
    reporter: Reporter,
) -> List[CheckResult]:
    """Run all checks against an already opened source.

    Recoverable failures are collected; an exception from any check (missing
    required variable, bad attribute type or format) aborts the run.

    Returns:
        Results of every check, in run order.
    """
    all_results: List[CheckResult] = []
    for check in ALL_CHECKS:
        logger.debug("Running check %s", check.check_id)
        results = check.validate(source, references, expectations, reporter)
        all_results.extend(results)
    return all_results


def run_validation(
    nc_path: Union[str, Path],
    reporter: Optional[Reporter] = None,
    references: Optional[ReferenceRegistry] = None,
    expectations: Optional[Expectations] = None,
) -> ValidationReport:
    """Validate one private netCDF file.

    Args:
        nc_path: File to check.
        reporter: Receives the text report; defaults to a summary-level Reporter.
        references: Parsed reference tables; defaults to the embedded tables.
        expectations: Fixed expectations; defaults to the packaged expectations.

    Returns:
        ValidationReport with one or more results per check category.

    Raises:
        ValueError: If the reference data is malformed or an attribute lacks
            its expected format.
        OSError: If the file cannot be opened.
        LookupError: If a required variable is missing.
        TypeError: If a text attribute has another type.

    Examples:
        >>> report = run_validation("pa20040721_20041222.private.nc", Reporter(verbosity=1))
        >>> report.passed
        True
    """
    references = references if references is not None else load_references()
    expectations = expectations if expectations is not None else load_expectations()
    reporter = reporter if reporter is not None else Reporter()

    with PrivateFile(nc_path) as source:
        results = validate_source(source, references, expectations, reporter)

    report = ValidationReport(results=results, nc_path=Path(nc_path))
    reporter.verdict(report.passed, nc_path)
    logger.debug("%s: %d checks, %d failed", nc_path, len(results), len(report.get_failed_checks()))
    return report
