"""Comparisons between reference values and the contents of a private file.

Functions here only compute outcomes; they never print. Recoverable
differences come back as result objects, while broken file contracts raise:

- LookupError: a required variable is absent
- TypeError: a text attribute holds something other than text
- ValueError: the commit attribute lacks its ``commit <hash>`` marker
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

import numpy as np

from phase2_check.ingestion.private_nc import DataSource
from .config import ABS_EPSILON, COMMIT_MARKER, ULPS
from .models import MISSING, AttributeComparison, PresenceResult, VariableComparison

_COMMIT_HASH = re.compile(re.escape(COMMIT_MARKER) + r"([0-9a-fA-F]+)")


def approx_equal(values, expected: float) -> np.ndarray:
    """Element-wise tolerant equality against a single reference value.

    Values are compared as float32, as stored in the file. An element matches
    if it is within ABS_EPSILON of the reference or within ULPS float32 steps
    of it. NaN never matches.

    Args:
        values: Scalar or array of stored values.
        expected: Reference value.

    Returns:
        Boolean array with the shape of ``values``.

    Examples:
        >>> approx_equal([1.01005, 1.0098], 1.0101)
        array([ True, False])
    """
    actual = np.asarray(values, dtype=np.float32).astype(np.float64)
    target = np.float32(expected)
    step = float(np.spacing(np.abs(target)))
    diff = np.abs(actual - float(target))
    return (diff <= ABS_EPSILON) | (diff <= ULPS * step)


def count_mismatches(values, expected: float) -> Tuple[int, int]:
    """Return (total elements, elements not approximately equal to ``expected``)."""
    matches = approx_equal(values, expected)
    return int(matches.size), int(matches.size - np.count_nonzero(matches))


def compare_float_variable(
    source: DataSource, varname: str, expected: float, missing_ok: bool = True
) -> VariableComparison:
    """Compare every element of a variable with one expected value.

    Args:
        source: File to read from.
        varname: Variable name.
        expected: Value every element should have.
        missing_ok: If True, an absent variable is a failed comparison;
            if False it is an error.

    Raises:
        LookupError: If the variable is absent and ``missing_ok`` is False.
    """
    values = source.get_variable(varname)
    if values is None:
        if missing_ok:
            return VariableComparison(name=varname, expected=expected, missing=True)
        raise LookupError(f"Could not read variable '{varname}'")

    n_total, n_wrong = count_mismatches(values, expected)
    return VariableComparison(name=varname, expected=expected, n_total=n_total, n_wrong=n_wrong)


def _read_text_attribute(source: DataSource, name: str):
    value = source.get_attribute(name)
    if value is None:
        return MISSING
    if not isinstance(value, str):
        raise TypeError(
            f"Attribute '{name}' should be a string but is {type(value).__name__}: {value!r}"
        )
    return value


def compare_string_attribute(
    source: DataSource, name: str, expected: str
) -> AttributeComparison:
    """Compare a text attribute for exact equality.

    Raises:
        TypeError: If the attribute exists but is not text.
    """
    actual = _read_text_attribute(source, name)
    return AttributeComparison(name=name, expected=expected, actual=actual)


def extract_commit(value: str) -> str:
    """Return the hexadecimal hash that follows ``commit `` in ``value``.

    Raises:
        ValueError: If the marker followed by a hash is not present.

    Examples:
        >>> extract_commit("write_netcdf (commit 1a2b3c4) on 2021-03-01")
        '1a2b3c4'
    """
    match = _COMMIT_HASH.search(value)
    if match is None:
        raise ValueError(f"{value!r} does not contain '{COMMIT_MARKER}<hash>'")
    return match.group(1)


def compare_commit_attribute(
    source: DataSource, name: str, expected_hash: str
) -> AttributeComparison:
    """Compare the commit hash embedded in a composite attribute.

    Raises:
        TypeError: If the attribute exists but is not text.
        ValueError: If the attribute exists but has no ``commit <hash>`` part.
    """
    value = _read_text_attribute(source, name)
    if value is MISSING:
        return AttributeComparison(name=name, expected=expected_hash, actual=MISSING)
    try:
        commit = extract_commit(value)
    except ValueError as e:
        raise ValueError(f"Attribute '{name}': {e}") from e
    return AttributeComparison(name=name, expected=expected_hash, actual=commit)


def check_presence(
    source: DataSource, names: Iterable[str], expected: bool
) -> List[PresenceResult]:
    """Test existence of each variable against the expectation (present or absent)."""
    return [
        PresenceResult(name=name, expected=expected, present=source.has_variable(name))
        for name in names
    ]


__all__ = [
    "approx_equal",
    "check_presence",
    "compare_commit_attribute",
    "compare_float_variable",
    "compare_string_attribute",
    "count_mismatches",
    "extract_commit",
]
