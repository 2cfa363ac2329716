"""Validation system for the Phase 2 checker.

- **Models**: CheckResult, ValidationReport - validation result data structures
- **Comparison**: tolerant comparisons of variables and attributes (comparison.py)
- **Reporting**: Reporter - verbosity-controlled text output (reporting.py)
- **Checks**: one class per check category (see validation/checks/)
- **Config**: tolerance constants and naming convention (import from .config)
- **Registry**: run_validation() - check orchestration and execution

Usage:
    >>> from phase2_check.validation import Reporter, run_validation
    >>> report = run_validation("pa20040721_20041222.private.nc", Reporter(verbosity=2))
    >>> report.passed
    True
"""

from __future__ import annotations

from .models import CheckResult, ValidationReport
from .registry import run_validation, validate_source
from .reporting import Reporter

__all__ = [
    # Data models
    "CheckResult",
    "ValidationReport",
    # Reporting
    "Reporter",
    # Runner functions
    "run_validation",
    "validate_source",
]
