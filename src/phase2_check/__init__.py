"""TCCON Phase 2 checker: verify that .private.nc files carry GGG2020 Phase 2 corrections.

The package compares a processed private netCDF file against embedded reference
tables (ADCFs, AICFs and the window list) and reports which checks pass.
"""

__all__ = [
    "__version__",
]

__version__ = "1.1.0"
