"""Tests for the reference table parsers.

Covers the window table conventions (derived names, ``sf=`` extraction,
commented-out rows and their override rule), the string-keyed ADCF/AICF
tables, and the fatal handling of malformed rows.
"""

import pytest

from phase2_check.reference.parser import (
    derive_window_name,
    parse_adcf_table,
    parse_aicf_table,
    parse_scale_factor,
    parse_windows_table,
)

WINDOW_HEADER = " Center   Width MIT A I F  Parameters_to_ fit  Bias      Gases_to_fit"


def _windows(*rows: str) -> str:
    return "\n".join([WINDOW_HEADER, *rows])


class TestDeriveWindowName:
    """Tests for derive_window_name()."""

    def test_name_from_first_gas_and_center(self):
        row = "6076.90 3.85 15 1 1 0 ncbf=2 fs sg sf=1.018 : h2o ch4 hdo co2"
        assert derive_window_name(row) == ("h2o_6076", "h2o", "6076")

    def test_center_is_truncated_not_rounded(self):
        name, _, center = derive_window_name("6177.51   1.26  15 1 1 0  sf=1.005 : h2o  hdo")
        assert name == "h2o_6177"
        assert center == "6177"

    def test_missing_separator_raises(self):
        with pytest.raises(ValueError, match="separator"):
            derive_window_name("6076.90 3.85 15 1 1 0 ncbf=2 fs sg sf=1.018 h2o")

    def test_no_gases_raises(self):
        with pytest.raises(ValueError, match="no gases"):
            derive_window_name("6076.90 3.85 15 1 1 0 :   ")


class TestParseScaleFactor:
    """Tests for parse_scale_factor()."""

    def test_scale_factor_found_anywhere_in_parameters(self):
        assert parse_scale_factor("6076.90 3.85 15 1 1 0 ncbf=2 fs sg sf=1.018 ") == 1.018
        assert parse_scale_factor("6255.95 3.60 sf=0.994 ncbf=2 fs sg nv") == 0.994

    def test_no_scale_factor_defaults_to_one(self):
        assert parse_scale_factor("4852.20  87.60  15 1 1 0  ncbf=3  fs  sg  nv  zo ") == 1.0

    @pytest.mark.parametrize("token", ["sf=1.0x", "sf=", "sf=abc", "sf=10.5", "sf=1."])
    def test_malformed_scale_factor_raises(self, token):
        with pytest.raises(ValueError, match="malformed scale factor"):
            parse_scale_factor(f"6076.90 3.85 15 1 1 0 {token}")


class TestParseWindowsTable:
    """Tests for parse_windows_table() on small hand-written tables."""

    def test_header_is_skipped(self):
        # The header has no ':' separator, so parsing it would raise
        windows, skipped = parse_windows_table(_windows("6146.90 1.60 0 1 1 0 sf=1.000 : luft"))
        assert list(windows) == ["luft_6146"]
        assert skipped == []

    def test_active_row_record(self):
        windows, _ = parse_windows_table(
            _windows("6076.90   3.85  15 1 1 0  ncbf=2  fs  sg     sf=1.018 : h2o  ch4 hdo co2")
        )
        window = windows["h2o_6076"]
        assert window.name == "h2o_6076"
        assert window.center == 6076
        assert window.gas == "h2o"
        assert window.sf == 1.018

    def test_row_without_sf_gets_exactly_one(self):
        windows, _ = parse_windows_table(
            _windows("4852.20  87.60  15 1 1 0  ncbf=3  fs  sg  nv          : zco2 h2o hdo")
        )
        assert windows["zco2_4852"].sf == 1.0

    def test_commented_row_is_recorded_as_skipped(self):
        windows, skipped = parse_windows_table(
            _windows(":6219.00   7.00  15 1 1 0  ncbf=2  fs  so     sf=1.000 : h2o  co2 ch4")
        )
        assert windows == {}
        assert skipped == ["h2o_6219"]

    def test_commented_row_superseded_by_active_row(self):
        windows, skipped = parse_windows_table(
            _windows(
                ":6177.30   0.83  15 1 1 0  ncbf=2  fs  so     sf=1.000 : h2o  hdo co2 ch4",
                "6177.51   1.26  15 1 1 0  ncbf=2  fs  sg     sf=1.005 : h2o  hdo co2 ch4",
            )
        )
        assert "h2o_6177" not in skipped
        assert windows["h2o_6177"].sf == 1.005
        assert windows["h2o_6177"].center == 6177

    def test_commented_row_after_active_row_is_also_dropped(self):
        _, skipped = parse_windows_table(
            _windows(
                "6177.51   1.26  15 1 1 0  sf=1.005 : h2o  hdo",
                ":6177.30   0.83  15 1 1 0  sf=1.000 : h2o  hdo",
            )
        )
        assert skipped == []

    def test_duplicate_active_rows_last_write_wins(self):
        """Duplicate derived names overwrite silently; the later row is kept."""
        windows, _ = parse_windows_table(
            _windows(
                "4852.20  87.60  15 1 1 0  ncbf=3  fs  sg  nv sf=1.001 : zco2 h2o hdo",
                "4852.90  80.00  15 1 1 0  ncbf=3  fs  sg  nv sf=0.998 : zco2 h2o",
            )
        )
        assert len(windows) == 1
        assert windows["zco2_4852"].sf == 0.998

    def test_commented_row_is_not_checked_for_numeric_center(self):
        _, skipped = parse_windows_table(_windows(":abcd.00  1.00  15 : hcl h2o"))
        assert skipped == ["hcl_abcd"]

    def test_malformed_center_raises_with_line_number(self):
        with pytest.raises(ValueError, match="line 3"):
            parse_windows_table(
                _windows(
                    "6146.90 1.60 0 1 1 0 sf=1.000 : luft",
                    "60x6.90 3.85 15 1 1 0 sf=1.018 : h2o ch4",
                )
            )

    def test_malformed_scale_factor_raises(self):
        with pytest.raises(ValueError, match="malformed scale factor"):
            parse_windows_table(_windows("6076.90 3.85 15 1 1 0 sf=one : h2o"))

    def test_blank_lines_are_ignored(self):
        windows, _ = parse_windows_table(
            _windows("", "6146.90 1.60 0 1 1 0 sf=1.000 : luft", "   ")
        )
        assert list(windows) == ["luft_6146"]


class TestEmbeddedWindowsTable:
    """Properties of the window table shipped with the package."""

    def test_overridden_window_is_active_not_skipped(self):
        windows, skipped = parse_windows_table()
        assert windows["h2o_6177"].sf == 1.005
        assert "h2o_6177" not in skipped

    def test_skipped_and_active_are_disjoint(self):
        windows, skipped = parse_windows_table()
        assert not set(skipped) & set(windows)

    def test_known_skipped_windows(self):
        _, skipped = parse_windows_table()
        for name in ["hcl_5577", "co_4233", "2ch4_6002", "wco2_6500", "fco2_12881"]:
            assert name in skipped

    def test_known_active_windows(self):
        windows, _ = parse_windows_table()
        assert windows["luft_6146"].sf == 1.0
        assert windows["th2o_4054"].sf == 1.020
        assert windows["hdo_4054"].sf == 0.995
        assert windows["fco2_6154"].sf == 1.0
        assert windows["o2_7885"].gas == "o2"


class TestParseAdcfTable:
    """Tests for parse_adcf_table()."""

    def test_embedded_table(self):
        adcfs = parse_adcf_table()
        assert len(adcfs) == 14
        record = adcfs["xco2_6220"]
        assert record.window == "xco2_6220"
        assert record.adcf == -0.00903
        assert record.error == 0.00025
        assert record.g == 15
        assert record.p == 4
        assert adcfs["xlco2_4852"].g == -45

    def test_keys_are_unquoted(self):
        adcfs = parse_adcf_table()
        assert all('"' not in key for key in adcfs)

    def test_non_numeric_value_raises(self):
        text = ' Gas  ADCF  ADCF_Err  g  p\n"xco2_6220"  -0.00903  n/a  15  4'
        with pytest.raises(ValueError, match="ADCF_Err"):
            parse_adcf_table(text)

    def test_non_integer_exponent_raises(self):
        text = ' Gas  ADCF  ADCF_Err  g  p\n"xco2_6220"  -0.00903  0.00025  1.5  4'
        with pytest.raises(ValueError, match="'g' is not an integer"):
            parse_adcf_table(text)

    def test_unquoted_key_raises(self):
        text = " Gas  ADCF  ADCF_Err  g  p\nxco2_6220  -0.00903  0.00025  15  4"
        with pytest.raises(ValueError, match="not a quoted string"):
            parse_adcf_table(text)

    def test_short_row_raises(self):
        text = ' Gas  ADCF  ADCF_Err  g  p\n"xco2_6220"  -0.00903  0.00025'
        with pytest.raises(ValueError, match="expected at least 5 columns"):
            parse_adcf_table(text)


class TestParseAicfTable:
    """Tests for parse_aicf_table()."""

    def test_embedded_table(self):
        aicfs = parse_aicf_table()
        assert len(aicfs) == 8
        assert aicfs["xco2"].aicf == 1.0101
        assert aicfs["xco2"].error == 0.0005
        assert aicfs["xco2"].wmo_scale == "WMO CO2 X2007"
        assert aicfs["xluft"].wmo_scale == "N/A"

    def test_scale_column_is_optional(self):
        aicfs = parse_aicf_table(' Gas  AICF  AICF_Err\n"xhf"  1.0000  0.0000')
        assert aicfs["xhf"].aicf == 1.0
        assert aicfs["xhf"].wmo_scale is None

    def test_non_numeric_value_raises(self):
        with pytest.raises(ValueError, match="AICF table line 2"):
            parse_aicf_table(' Gas  AICF  AICF_Err\n"xco2"  high  0.0005')
