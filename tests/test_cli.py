"""Tests for the command line interface."""

from click.testing import CliRunner

from vol_toolkit import __version__
from vol_toolkit.cli import main

from vol_builder import SAMPLE_ITEMS, build_vol


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_extract(sample_path, tmp_path):
    output = tmp_path / "out"
    result = CliRunner().invoke(main, ["extract", str(sample_path), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Directories: 2" in result.output
    assert "Files:       3" in result.output
    assert "Extracted: DATA\\README.TXT (12 bytes)" in result.output
    assert (output / "DATA" / "SIGNS" / "STOP.BMP").read_bytes() == SAMPLE_ITEMS[3][1]


def test_extract_default_output(sample_path):
    result = CliRunner().invoke(main, ["extract", "--quiet", str(sample_path)])

    assert result.exit_code == 0, result.output
    assert "Extracted:" not in result.output
    assert (sample_path.parent / "DRIVED_extracted" / "INTRO.AVI").is_file()


def test_extract_pvol(tmp_path):
    path = tmp_path / "TRIBES.VOL"
    path.write_bytes(b"PVOL" + b"\x00" * 32)

    result = CliRunner().invoke(main, ["extract", str(path), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "PVOL" in result.output
    assert not (tmp_path / "out").exists()


def test_extract_partial_table_warns(tmp_path):
    path = tmp_path / "CUT.VOL"
    path.write_bytes(build_vol([("A.TXT", b"a"), ("B.TXT", b"b")])[:-2])

    result = CliRunner().invoke(main, ["extract", str(path), "-o", str(tmp_path / "out")])

    assert result.exit_code == 0
    assert "table ended early after 2 of 3 entries" in result.output
    assert (tmp_path / "out" / "A.TXT").is_file()


def test_report_to_stdout(sample_path, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(main, ["report", str(sample_path)])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("offset:     0x")
    assert 'name:       "INTRO.AVI"' in result.output
    # Report mode touches nothing
    assert sorted(p.name for p in tmp_path.iterdir()) == ["DRIVED.VOL"]


def test_report_to_file(sample_path, tmp_path):
    log = tmp_path / "log.txt"
    result = CliRunner().invoke(main, ["report", str(sample_path), str(log)])

    assert result.exit_code == 0, result.output
    assert "nameLength: 0x0009" in log.read_text()


def test_list(sample_path):
    result = CliRunner().invoke(main, ["list", str(sample_path)])

    assert result.exit_code == 0, result.output
    assert "Entries in archive (6):" in result.output
    assert "INTRO.AVI" in result.output


def test_missing_archive(tmp_path):
    result = CliRunner().invoke(main, ["extract", str(tmp_path / "NOPE.VOL")])
    assert result.exit_code == 2
