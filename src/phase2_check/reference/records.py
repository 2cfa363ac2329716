"""Typed records decoded from the reference tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CorrectionFactorRecord:
    """Airmass-dependent correction factor (ADCF) for one window.

    Attributes:
        window: Window key as quoted in the table, e.g. ``"xco2_6220"``.
        adcf: Central value of the correction.
        error: Uncertainty of the correction.
        g: First tuning exponent of the airmass dependence.
        p: Second tuning exponent of the airmass dependence.
    """

    window: str
    adcf: float
    error: float
    g: int
    p: int


@dataclass(frozen=True)
class IndependentCorrectionRecord:
    """Airmass-independent correction factor (AICF) for one gas.

    Attributes:
        gas: Gas key as quoted in the table, e.g. ``"xco2"``.
        aicf: Scale applied to the column average.
        error: Uncertainty of the scale.
        wmo_scale: Name of the calibration scale, ``None`` when the row omits it.
    """

    gas: str
    aicf: float
    error: float
    wmo_scale: Optional[str] = None


@dataclass(frozen=True)
class SpectralWindowRecord:
    """Active spectral window.

    Attributes:
        name: Derived key ``<primary gas>_<integer part of center>``.
        center: Center wavenumber, truncated to an integer.
        gas: Primary (first listed) gas of the window.
        sf: Window-to-window scale factor, 1.0 when the row has no ``sf=`` token.
    """

    name: str
    center: int
    gas: str
    sf: float = 1.0


__all__ = [
    "CorrectionFactorRecord",
    "IndependentCorrectionRecord",
    "SpectralWindowRecord",
]
