"""Tests for the tspack command line interface."""

import numpy as np
import pytest

from tspack.__main__ import main


SPEC_CSV = "timestamp,value\n0.0,100\n0.1,100\n0.2,100\n0.3,101\n0.4,101\n0.5,100\n"


@pytest.fixture
def samples_csv(tmp_path):
    path = tmp_path / "samples.csv"
    path.write_text(SPEC_CSV)
    return path


class TestPackCommand:
    """Test `tspack pack`."""

    def test_pack_writes_ranges(self, samples_csv, tmp_path):
        out = tmp_path / "packed.csv"
        assert main(["pack", str(samples_csv), "-o", str(out), "-s", "similar"]) == 0

        rows = np.loadtxt(out, delimiter=",", skiprows=1, ndmin=2)
        np.testing.assert_array_equal(rows, [
            [0.0, 0.2, 100.0],
            [0.3, 0.4, 101.0],
            [0.5, 0.5, 100.0],
        ])

    def test_pack_pipeline(self, samples_csv, tmp_path):
        out = tmp_path / "packed.csv"
        assert main(["pack", str(samples_csv), "-o", str(out),
                     "-s", "similar", "-s", "mean:5"]) == 0
        rows = np.loadtxt(out, delimiter=",", skiprows=1, ndmin=2)
        np.testing.assert_array_equal(rows, [[0.0, 0.5, 100.0]])

    def test_pack_without_header(self, tmp_path):
        src = tmp_path / "plain.csv"
        src.write_text("0.0,1.5\n1.0,1.5\n")
        out = tmp_path / "packed.csv"
        assert main(["pack", str(src), "-o", str(out), "-s", "similar", "-w", "2000000"]) == 0
        rows = np.loadtxt(out, delimiter=",", skiprows=1, ndmin=2)
        np.testing.assert_array_equal(rows, [[0.0, 1.0, 1.5]])

    @pytest.mark.filterwarnings("error")
    @pytest.mark.parametrize("content", ["", "\n", "timestamp,value\n"])
    def test_empty_input(self, tmp_path, content):
        src = tmp_path / "empty.csv"
        src.write_text(content)
        out = tmp_path / "packed.csv"
        assert main(["pack", str(src), "-o", str(out), "-s", "similar"]) == 0
        assert out.read_text().strip() == "start,end,value"

    def test_zero_window_fails(self, samples_csv, tmp_path):
        out = tmp_path / "packed.csv"
        assert main(["pack", str(samples_csv), "-o", str(out), "-w", "0"]) == 1
        assert not out.exists()

    def test_unknown_strategy_fails(self, samples_csv, tmp_path):
        out = tmp_path / "packed.csv"
        assert main(["pack", str(samples_csv), "-o", str(out), "-s", "zstd"]) == 1

    def test_missing_input_fails(self, tmp_path):
        assert main(["pack", str(tmp_path / "nope.csv"), "-o", str(tmp_path / "o.csv")]) == 1

    def test_wrong_column_count_fails(self, tmp_path):
        src = tmp_path / "three.csv"
        src.write_text("1,2,3\n4,5,6\n")
        assert main(["pack", str(src), "-o", str(tmp_path / "o.csv")]) == 1


class TestUnpackCommand:
    """Test `tspack unpack`."""

    def test_unpack_expands_ranges(self, samples_csv, tmp_path):
        packed = tmp_path / "packed.csv"
        restored = tmp_path / "restored.csv"
        assert main(["pack", str(samples_csv), "-o", str(packed), "-s", "similar"]) == 0
        assert main(["unpack", str(packed), "-o", str(restored)]) == 0

        rows = np.loadtxt(restored, delimiter=",", skiprows=1, ndmin=2)
        np.testing.assert_array_equal(rows, [
            [0.0, 100.0],
            [0.2, 100.0],
            [0.3, 101.0],
            [0.4, 101.0],
            [0.5, 100.0],
        ])


class TestCompareCommand:
    """Test `tspack compare`."""

    def test_compare_prints_table(self, samples_csv, capsys):
        assert main(["compare", str(samples_csv), "--mean-percent", "5"]) == 0
        out = capsys.readouterr().out
        assert "Strategy Comparison" in out
        assert "mean:5" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
