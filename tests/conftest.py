"""Shared pytest configuration, fixtures, and utilities for Phase 2 checker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import h5py
import numpy as np
import pytest

from phase2_check.reference.registry import (
    Expectations,
    ReferenceRegistry,
    load_expectations,
    load_references,
)
from phase2_check.validation.config import (
    ADCF_ERROR_VARIABLE,
    ADCF_G_VARIABLE,
    ADCF_P_VARIABLE,
    ADCF_VARIABLE,
    AICF_ERROR_VARIABLE,
    AICF_VARIABLE,
    WINDOW_PRESENCE_VARIABLE,
    WINDOW_SF_VARIABLE,
)

N_SPECTRA = 5


class FakeSource:
    """In-memory stand-in for a private file, implementing the DataSource protocol."""

    def __init__(
        self,
        variables: Optional[Dict[str, Any]] = None,
        attributes: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.variables = dict(variables or {})
        self.attributes = dict(attributes or {})

    def has_variable(self, name: str) -> bool:
        return name in self.variables

    def get_variable(self, name: str) -> Optional[np.ndarray]:
        if name not in self.variables:
            return None
        return np.asarray(self.variables[name])

    def get_attribute(self, name: str) -> Optional[Any]:
        return self.attributes.get(name)


def build_compliant_contents(
    references: ReferenceRegistry,
    expectations: Expectations,
    n_spectra: int = N_SPECTRA,
) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
    """Variables and attributes of a file that passes every check."""
    variables: Dict[str, np.ndarray] = {}

    def full(value: float) -> np.ndarray:
        return np.full(n_spectra, value, dtype=np.float32)

    for window, record in references.adcfs.items():
        variables[ADCF_VARIABLE.format(window=window)] = full(record.adcf)
        variables[ADCF_ERROR_VARIABLE.format(window=window)] = full(record.error)
        variables[ADCF_G_VARIABLE.format(window=window)] = full(record.g)
        variables[ADCF_P_VARIABLE.format(window=window)] = full(record.p)

    for gas, record in references.aicfs.items():
        variables[AICF_VARIABLE.format(gas=gas)] = full(record.aicf)
        variables[AICF_ERROR_VARIABLE.format(gas=gas)] = full(record.error)

    for win_name, window in references.windows.items():
        variables[WINDOW_SF_VARIABLE.format(window=win_name)] = full(window.sf)
        variables[WINDOW_PRESENCE_VARIABLE.format(window=win_name)] = full(0.0)

    for name in expectations.required_variables:
        variables.setdefault(name, full(0.0))

    attributes: Dict[str, Any] = dict(expectations.program_versions)
    attributes[expectations.commit_attribute] = (
        f"write_netcdf.py (commit {expectations.commit_hash}, clean working tree)"
    )
    return variables, attributes


def write_private_file(
    path: Path,
    variables: Dict[str, np.ndarray],
    attributes: Dict[str, Any],
    dimensions: Optional[Dict[str, int]] = None,
) -> Path:
    """Write variables and global attributes to an HDF5 (netCDF-4 layout) file.

    ``dimensions`` are written the way netCDF-4 stores a dimension that has no
    coordinate variable: a zero-filled dimension scale whose NAME marks it as
    not being a variable.
    """
    with h5py.File(path, "w") as f:
        for name, values in variables.items():
            f.create_dataset(name, data=values)
        for name, size in (dimensions or {}).items():
            dataset = f.create_dataset(name, data=np.zeros(size, dtype=np.float32))
            dataset.make_scale()
            dataset.attrs["NAME"] = np.bytes_(
                b"This is a netCDF dimension but not a netCDF variable%10d" % size
            )
        for name, value in attributes.items():
            f.attrs[name] = value
    return path


@pytest.fixture
def references() -> ReferenceRegistry:
    return load_references()


@pytest.fixture
def expectations() -> Expectations:
    return load_expectations()


@pytest.fixture
def compliant_contents(references, expectations):  # pylint: disable=redefined-outer-name
    return build_compliant_contents(references, expectations)


@pytest.fixture
def compliant_source(compliant_contents) -> FakeSource:  # pylint: disable=redefined-outer-name
    variables, attributes = compliant_contents
    return FakeSource(variables, attributes)


@pytest.fixture
def compliant_file(tmp_path, compliant_contents) -> Path:  # pylint: disable=redefined-outer-name
    variables, attributes = compliant_contents
    return write_private_file(tmp_path / "pa20040721_20041222.private.nc", variables, attributes)
