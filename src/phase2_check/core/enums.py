"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum, IntEnum


class CheckCategory(str, Enum):
    """Check categories, in the order they are run.

    Values are strings to ease serialization into the JSON report.
    """

    ADCF = "adcf"
    AICF = "aicf"
    WINDOW_SCALE_FACTORS = "window_scale_factors"
    WINDOWS_PRESENT = "windows_present"
    WINDOWS_ABSENT = "windows_absent"
    PROGRAM_VERSIONS = "program_versions"
    REQUIRED_VARIABLES = "required_variables"


class ReportLevel(IntEnum):
    """Verbosity levels of the text report.

    - SILENT: nothing is printed, outcome is only the exit code
    - SUMMARY: one final verdict line
    - CATEGORY: one line per check category
    - GROUP: one line per window, gas or attribute
    - VARIABLE: one line per variable
    - EXHAUSTIVE: like VARIABLE, but long lists are never truncated
    """

    SILENT = -1
    SUMMARY = 0
    CATEGORY = 1
    GROUP = 2
    VARIABLE = 3
    EXHAUSTIVE = 4


__all__ = ["CheckCategory", "ReportLevel"]
