"""Tests for reading private netCDF-4 files through h5py."""

from __future__ import annotations

import io

import h5py
import numpy as np
import pytest

from conftest import write_private_file
from phase2_check.ingestion.private_nc import PrivateFile
from phase2_check.validation import Reporter, run_validation


class TestPrivateFile:
    def test_dimension_only_dataset_is_not_a_variable(self, tmp_path):
        path = write_private_file(
            tmp_path / "dims.private.nc",
            {"xco2": np.ones(4, dtype=np.float32)},
            {},
            dimensions={"cell_index": 4},
        )
        with PrivateFile(path) as source:
            assert source.has_variable("xco2")
            assert not source.has_variable("cell_index")
            assert source.get_variable("cell_index") is None

    def test_coordinate_variable_is_a_variable(self, tmp_path):
        path = tmp_path / "coord.private.nc"
        with h5py.File(path, "w") as f:
            dataset = f.create_dataset("prior_altitude", data=np.arange(3, dtype=np.float32))
            dataset.make_scale("prior_altitude")
        with PrivateFile(path) as source:
            assert source.has_variable("prior_altitude")
            np.testing.assert_array_equal(source.get_variable("prior_altitude"), [0, 1, 2])

    def test_text_attributes_are_str(self, tmp_path):
        path = write_private_file(
            tmp_path / "attrs.private.nc",
            {},
            {"gfit_version": np.bytes_(b"2020.0.0"), "gsetup_version": "2020.0.0", "n": 3},
        )
        with PrivateFile(path) as source:
            assert source.get_attribute("gfit_version") == "2020.0.0"
            assert source.get_attribute("gsetup_version") == "2020.0.0"
            assert source.get_attribute("n") == 3
            assert source.get_attribute("absent") is None

    def test_reads_outside_with_block_raise(self, tmp_path):
        path = write_private_file(tmp_path / "closed.private.nc", {}, {})
        source = PrivateFile(path)
        with pytest.raises(OSError, match="not open"):
            source.has_variable("xco2")


def test_required_variable_present_only_as_dimension_fails(tmp_path, compliant_contents):
    variables, attributes = compliant_contents
    variables = {k: v for k, v in variables.items() if k != "ak_slant_xgas_bin"}
    path = write_private_file(
        tmp_path / "dimonly.private.nc", variables, attributes, dimensions={"ak_slant_xgas_bin": 5}
    )

    report = run_validation(path, Reporter(verbosity=-1, stream=io.StringIO()))
    assert [r.check_id for r in report.get_failed_checks()] == ["required_variables"]
    assert report.get_failed_checks()[0].messages == [
        "variable 'ak_slant_xgas_bin' is not present but should be"
    ]
