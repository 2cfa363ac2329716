"""Parsers for the embedded reference tables.

Two table flavours are supported:

- String-keyed tables (ADCF, AICF): whitespace-delimited columns whose first
  column is a double-quoted key. Quoted columns may contain spaces.
- The window table: ``<parameters> : <gases>`` rows. A row starting with ``:``
  is commented out; it is recorded by name only so the check can assert that
  the window was removed from the file.

Any row that cannot be decoded raises ``ValueError``. The tables ship with the
package, so a bad row means the reference data itself is broken and the run
cannot continue.
"""

from __future__ import annotations

import logging
import re
import shlex
from typing import Dict, Iterator, List, Tuple

from .records import (
    CorrectionFactorRecord,
    IndependentCorrectionRecord,
    SpectralWindowRecord,
)
from .tables import ADCF_TABLE, AICF_TABLE, WINDOWS_TABLE

logger = logging.getLogger(__name__)

COMMENT_MARKER = ":"
GAS_SEPARATOR = ":"
SCALE_FACTOR_PREFIX = "sf="
DEFAULT_SCALE_FACTOR = 1.0

_SCALE_FACTOR_VALUE = re.compile(r"\d\.\d+")


def _data_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line number, line) for every row after the header, skipping blank rows."""
    for lineno, line in enumerate(text.split("\n"), start=1):
        if lineno == 1:
            continue
        if not line.strip():
            continue
        yield lineno, line


def _parse_float(token: str, column: str, table: str, lineno: int) -> float:
    try:
        return float(token)
    except ValueError as e:
        raise ValueError(
            f"{table} table line {lineno}: column '{column}' is not a number: {token!r}"
        ) from e


def _parse_int(token: str, column: str, table: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise ValueError(
            f"{table} table line {lineno}: column '{column}' is not an integer: {token!r}"
        ) from e


def _split_keyed_row(line: str, columns: int, table: str, lineno: int) -> List[str]:
    """Split a string-keyed row into its columns with the key unquoted."""
    first = line.split()[0]
    if len(first) < 2 or not (first.startswith('"') and first.endswith('"')):
        raise ValueError(f"{table} table line {lineno}: key is not a quoted string: {first!r}")
    try:
        parts = shlex.split(line)
    except ValueError as e:
        raise ValueError(f"{table} table line {lineno}: {e}") from e
    if len(parts) < columns:
        raise ValueError(
            f"{table} table line {lineno}: expected at least {columns} columns, got {len(parts)}"
        )
    return parts


def parse_adcf_table(text: str = ADCF_TABLE) -> Dict[str, CorrectionFactorRecord]:
    """Parse the ADCF table into records keyed by window.

    Args:
        text: Table text; the first line is a header.

    Returns:
        Mapping of window key to its CorrectionFactorRecord.

    Raises:
        ValueError: If a row has an unquoted key or a non-numeric value.
    """
    adcfs: Dict[str, CorrectionFactorRecord] = {}
    for lineno, line in _data_lines(text):
        parts = _split_keyed_row(line, 5, "ADCF", lineno)
        window = parts[0]
        adcfs[window] = CorrectionFactorRecord(
            window=window,
            adcf=_parse_float(parts[1], "ADCF", "ADCF", lineno),
            error=_parse_float(parts[2], "ADCF_Err", "ADCF", lineno),
            g=_parse_int(parts[3], "g", "ADCF", lineno),
            p=_parse_int(parts[4], "p", "ADCF", lineno),
        )
    logger.debug("Parsed %d ADCF rows", len(adcfs))
    return adcfs


def parse_aicf_table(text: str = AICF_TABLE) -> Dict[str, IndependentCorrectionRecord]:
    """Parse the AICF table into records keyed by gas.

    The trailing WMO scale column is optional.
    """
    aicfs: Dict[str, IndependentCorrectionRecord] = {}
    for lineno, line in _data_lines(text):
        parts = _split_keyed_row(line, 3, "AICF", lineno)
        gas = parts[0]
        aicfs[gas] = IndependentCorrectionRecord(
            gas=gas,
            aicf=_parse_float(parts[1], "AICF", "AICF", lineno),
            error=_parse_float(parts[2], "AICF_Err", "AICF", lineno),
            wmo_scale=parts[3] if len(parts) > 3 else None,
        )
    logger.debug("Parsed %d AICF rows", len(aicfs))
    return aicfs


def derive_window_name(line: str) -> Tuple[str, str, str]:
    """Derive the window key from one (uncommented) window table row.

    The key is ``<first gas>_<center>``, where ``<center>`` is everything
    before the decimal point of the first parameter column (truncation, so
    ``6177.51`` and ``6177.30`` share the key ``h2o_6177``).

    Args:
        line: Window row without its leading comment marker.

    Returns:
        Tuple of (window name, primary gas, center string).

    Raises:
        ValueError: If the row has no gas separator, no parameters or no gases.

    Examples:
        >>> derive_window_name("6076.90 3.85 15 1 1 0 ncbf=2 fs sg sf=1.018 : h2o ch4 hdo co2")
        ('h2o_6076', 'h2o', '6076')
    """
    if GAS_SEPARATOR not in line:
        raise ValueError(f"window row has no '{GAS_SEPARATOR}' separator: {line!r}")
    params, gases = line.split(GAS_SEPARATOR, 1)
    param_tokens = params.split()
    gas_tokens = gases.split()
    if not param_tokens:
        raise ValueError(f"window row has no parameter columns: {line!r}")
    if not gas_tokens:
        raise ValueError(f"window row lists no gases: {line!r}")

    center_str = param_tokens[0].split(".")[0]
    main_gas = gas_tokens[0]
    return f"{main_gas}_{center_str}", main_gas, center_str


def parse_scale_factor(params: str) -> float:
    """Return the ``sf=`` value of a parameters segment, or 1.0 if there is none.

    Raises:
        ValueError: If an ``sf=`` token is present but its value is not ``<digit>.<digits>``.
    """
    for token in params.split():
        if not token.startswith(SCALE_FACTOR_PREFIX):
            continue
        value = token[len(SCALE_FACTOR_PREFIX):]
        if not _SCALE_FACTOR_VALUE.fullmatch(value):
            raise ValueError(f"malformed scale factor token: {token!r}")
        return float(value)
    return DEFAULT_SCALE_FACTOR


def parse_windows_table(
    text: str = WINDOWS_TABLE,
) -> Tuple[Dict[str, SpectralWindowRecord], List[str]]:
    """Parse the window table into active windows and removed window names.

    Rows that derive the same name overwrite each other; the last row wins.
    A commented-out name that also has an active row is dropped from the
    removed list, since the active row supersedes it.

    Returns:
        Tuple of (active windows keyed by derived name, removed window names).

    Raises:
        ValueError: If any row is malformed.
    """
    windows: Dict[str, SpectralWindowRecord] = {}
    skipped: List[str] = []
    for lineno, line in _data_lines(text):
        try:
            if line.startswith(COMMENT_MARKER):
                win_name, _, _ = derive_window_name(line[len(COMMENT_MARKER):])
                skipped.append(win_name)
                continue

            win_name, main_gas, center_str = derive_window_name(line)
            try:
                center = int(center_str)
            except ValueError as e:
                raise ValueError(f"window center is not a number: {center_str!r}") from e
            sf = parse_scale_factor(line.split(GAS_SEPARATOR, 1)[0])
        except ValueError as e:
            raise ValueError(f"Window table line {lineno}: {e}") from e

        if win_name in windows:
            logger.debug("Window %s redefined on line %d; keeping the later row", win_name, lineno)
        windows[win_name] = SpectralWindowRecord(name=win_name, center=center, gas=main_gas, sf=sf)

    skipped = [name for name in skipped if name not in windows]
    logger.debug("Parsed %d active and %d removed windows", len(windows), len(skipped))
    return windows, skipped


__all__ = [
    "derive_window_name",
    "parse_adcf_table",
    "parse_aicf_table",
    "parse_scale_factor",
    "parse_windows_table",
]
