"""Read-only access to TCCON private netCDF files.

GGG2020 private files are netCDF-4, which is stored as HDF5, so they are
opened with ``h5py``. Checks only see the small DataSource protocol below,
which lets tests substitute an in-memory source.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol, Union

import h5py
import numpy as np

logger = logging.getLogger(__name__)

# Prefix of the NAME attribute netCDF-4 gives to dimension-only datasets
NETCDF_DIMENSION_ONLY = b"This is a netCDF dimension but not a netCDF variable"


class DataSource(Protocol):
    """What the checks need from a file: variables by name and global attributes."""

    def has_variable(self, name: str) -> bool:
        """Return True if the variable exists."""
        ...

    def get_variable(self, name: str) -> Optional[np.ndarray]:
        """Return all values of a variable, or None if it does not exist."""
        ...

    def get_attribute(self, name: str) -> Optional[Any]:
        """Return a global attribute, or None if it does not exist.

        Text attributes are returned as ``str``; anything else is returned as stored.
        """
        ...


class PrivateFile:
    """A private netCDF file opened read-only for the duration of a ``with`` block.

    Examples:
        >>> with PrivateFile("pa20040721_20041222.private.nc") as source:
        ...     source.has_variable("xco2_aicf")
        True
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._h5: Optional[h5py.File] = None

    def open(self) -> "PrivateFile":
        """Open the file.

        Raises:
            FileNotFoundError: If the path does not exist.
            OSError: If the file exists but is not a readable netCDF-4/HDF5 file.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Unable to open {self.path}: no such file")
        try:
            self._h5 = h5py.File(self.path, "r")
        except OSError as e:
            raise OSError(f"Unable to open {self.path}: {e}") from e
        logger.debug("Opened %s", self.path)
        return self

    def close(self) -> None:
        if self._h5 is not None:
            self._h5.close()
            self._h5 = None
            logger.debug("Closed %s", self.path)

    def __enter__(self) -> "PrivateFile":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def _handle(self) -> h5py.File:
        if self._h5 is None:
            raise OSError(f"{self.path} is not open")
        return self._h5

    def _variable(self, name: str) -> Optional[h5py.Dataset]:
        """Return the dataset backing a netCDF variable, or None.

        netCDF-4 stores a dimension without a coordinate variable as an HDF5
        dimension scale; such datasets are not variables.
        """
        dataset = self._handle.get(name)
        if not isinstance(dataset, h5py.Dataset):
            return None
        label = dataset.attrs.get("NAME")
        if isinstance(label, str):
            label = label.encode("utf-8")
        if isinstance(label, (bytes, np.bytes_)) and bytes(label).startswith(
            NETCDF_DIMENSION_ONLY
        ):
            return None
        return dataset

    def has_variable(self, name: str) -> bool:
        return self._variable(name) is not None

    def get_variable(self, name: str) -> Optional[np.ndarray]:
        dataset = self._variable(name)
        if dataset is None:
            return None
        return np.asarray(dataset[()])

    def get_attribute(self, name: str) -> Optional[Any]:
        attrs = self._handle.attrs
        if name not in attrs:
            return None
        value = attrs[name]
        # netCDF NC_CHAR attributes come back from HDF5 as fixed-length bytes
        if isinstance(value, (bytes, np.bytes_)):
            return value.decode("utf-8")
        if isinstance(value, np.str_):
            return str(value)
        return value


__all__ = ["DataSource", "PrivateFile"]
