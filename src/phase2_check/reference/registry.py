"""In-memory reference data for one run.

The ReferenceRegistry bundles the three parsed tables; Expectations holds the
fixed attribute and variable-list expectations from ``expectations.yaml``.
Both are built at most once per process and never mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .parser import parse_adcf_table, parse_aicf_table, parse_windows_table
from .records import (
    CorrectionFactorRecord,
    IndependentCorrectionRecord,
    SpectralWindowRecord,
)

logger = logging.getLogger(__name__)

EXPECTATIONS_RESOURCE = "expectations.yaml"


@dataclass(frozen=True)
class ReferenceRegistry:
    """Parsed reference tables.

    Attributes:
        adcfs: ADCF records keyed by window (e.g. ``xco2_6220``).
        aicfs: AICF records keyed by gas (e.g. ``xco2``).
        windows: Active windows keyed by derived name (e.g. ``h2o_6076``).
        skipped_windows: Names of windows commented out of the window table
            and not superseded by an active row, sorted.
    """

    adcfs: Mapping[str, CorrectionFactorRecord]
    aicfs: Mapping[str, IndependentCorrectionRecord]
    windows: Mapping[str, SpectralWindowRecord]
    skipped_windows: Tuple[str, ...]

    @classmethod
    def from_tables(
        cls,
        adcf_text: Optional[str] = None,
        aicf_text: Optional[str] = None,
        windows_text: Optional[str] = None,
    ) -> "ReferenceRegistry":
        """Parse the given table texts, falling back to the embedded tables."""
        adcfs = parse_adcf_table() if adcf_text is None else parse_adcf_table(adcf_text)
        aicfs = parse_aicf_table() if aicf_text is None else parse_aicf_table(aicf_text)
        if windows_text is None:
            windows, skipped = parse_windows_table()
        else:
            windows, skipped = parse_windows_table(windows_text)
        return cls(
            adcfs=MappingProxyType(dict(adcfs)),
            aicfs=MappingProxyType(dict(aicfs)),
            windows=MappingProxyType(dict(windows)),
            skipped_windows=tuple(sorted(skipped)),
        )


@dataclass(frozen=True)
class Expectations:
    """Fixed expectations that do not come from the correction tables.

    Attributes:
        program_versions: Global attribute name -> exact expected version string.
        commit_attribute: Global attribute embedding ``commit <hash>``.
        commit_hash: Hash expected after the ``commit`` marker.
        required_variables: Variables every Phase 2 file must contain.
    """

    program_versions: Mapping[str, str]
    commit_attribute: str
    commit_hash: str
    required_variables: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Expectations":
        """Build Expectations from the decoded YAML mapping.

        Raises:
            ValueError: If a key is missing or has the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError("expectations must be a mapping")
        try:
            versions = data["program_versions"]
            commit_attribute = data["commit_attribute"]
            commit_hash = data["commit_hash"]
            required = data["required_variables"]
        except KeyError as e:
            raise ValueError(f"expectations are missing the {e.args[0]!r} entry") from e

        if not isinstance(versions, dict):
            raise ValueError("'program_versions' must be a mapping")
        if not isinstance(required, list):
            raise ValueError("'required_variables' must be a list")

        return cls(
            program_versions=MappingProxyType({str(k): str(v) for k, v in versions.items()}),
            commit_attribute=str(commit_attribute),
            commit_hash=str(commit_hash),
            required_variables=tuple(str(v) for v in required),
        )


@lru_cache(maxsize=None)
def load_references() -> ReferenceRegistry:
    """Parse the embedded tables once and return the shared registry."""
    registry = ReferenceRegistry.from_tables()
    logger.debug(
        "Loaded references: %d ADCFs, %d AICFs, %d windows, %d removed windows",
        len(registry.adcfs),
        len(registry.aicfs),
        len(registry.windows),
        len(registry.skipped_windows),
    )
    return registry


@lru_cache(maxsize=None)
def load_expectations() -> Expectations:
    """Read the packaged ``expectations.yaml`` once and return it.

    Raises:
        ValueError: If the file cannot be read or decoded.
    """
    try:
        text = resources.files(__package__).joinpath(EXPECTATIONS_RESOURCE).read_text(
            encoding="utf-8"
        )
        data = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read {EXPECTATIONS_RESOURCE}: {e}") from e
    return Expectations.from_dict(data)


__all__ = [
    "Expectations",
    "ReferenceRegistry",
    "load_expectations",
    "load_references",
]
