"""Reference data: embedded correction tables and fixed Phase 2 expectations."""

from __future__ import annotations

from .parser import (
    derive_window_name,
    parse_adcf_table,
    parse_aicf_table,
    parse_scale_factor,
    parse_windows_table,
)
from .records import (
    CorrectionFactorRecord,
    IndependentCorrectionRecord,
    SpectralWindowRecord,
)
from .registry import Expectations, ReferenceRegistry, load_expectations, load_references

__all__ = [
    "CorrectionFactorRecord",
    "Expectations",
    "IndependentCorrectionRecord",
    "ReferenceRegistry",
    "SpectralWindowRecord",
    "derive_window_name",
    "load_expectations",
    "load_references",
    "parse_adcf_table",
    "parse_aicf_table",
    "parse_scale_factor",
    "parse_windows_table",
]
