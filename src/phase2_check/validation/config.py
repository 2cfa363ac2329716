"""Validation configuration constants.

This module centralizes the comparison tolerances, the variable naming
convention of private files, and the fixed report texts.
"""

from __future__ import annotations

# ============================================================================
# TOLERANCE CONSTANTS
# ============================================================================

# ADCFs, AICFs and scale factors are written with four decimal places upstream
ABS_EPSILON = 1e-4
# Float32 steps allowed between a stored value and its reference
ULPS = 1


# ============================================================================
# VARIABLE NAMING
# ============================================================================

ADCF_VARIABLE = "{window}_adcf"
ADCF_ERROR_VARIABLE = "{window}_adcf_error"
ADCF_G_VARIABLE = "{window}_g"
ADCF_P_VARIABLE = "{window}_p"

AICF_VARIABLE = "{gas}_aicf"
AICF_ERROR_VARIABLE = "{gas}_aicf_error"

WINDOW_SF_VARIABLE = "vsw_sf_{window}"
WINDOW_PRESENCE_VARIABLE = "vsw_ada_x{window}"

COMMIT_MARKER = "commit "


# ============================================================================
# REPORTING
# ============================================================================

# Missing names listed at the per-variable level before the list is elided
MAX_LISTED_FAILURES = 10

# Shown in place of an attribute value that is absent from the file
MISSING_VALUE_LABEL = "<missing>"

PASS_VERDICT = "{path} PASSES all tests - it appears to be a correct Phase 2 file"
FAIL_VERDICT = "{path} FAILS at least one test - it may be a Phase 1 file"
