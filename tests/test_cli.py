"""End-to-end tests for the ucsrename command."""

import pytest
from typer.testing import CliRunner

from conftest import StubSelector
from ucs_rename.interface import cli

runner = CliRunner()

TARGET = "AMBPark_Central-Park-Bethesda-Fountain_Buddin_Phonogrifter_Clippy.wav"


@pytest.fixture
def interactive(monkeypatch):
    monkeypatch.setattr(cli, "_is_interactive", lambda: True)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "take1.wav").write_bytes(b"RIFF")
    return tmp_path


@pytest.fixture
def overrides(monkeypatch):
    monkeypatch.setenv("UCS_CAT_ID", "AMBPark")
    monkeypatch.setenv("UCS_CREATOR_ID", "Buddin")
    monkeypatch.setenv("UCS_SOURCE_ID", "Phonogrifter")


def test_listing_mode_prints_catalog(monkeypatch, override_csv):
    monkeypatch.setenv("UCS_CSV_FILE", str(override_csv))

    result = runner.invoke(cli.app, ["take1.wav"])

    assert result.exit_code == 0
    assert result.output == "AMBPark: AMBIENCE PARK -- park indoor outdoor\n"


def test_listing_mode_bad_catalog(monkeypatch, tmp_path):
    monkeypatch.setenv("UCS_CSV_FILE", str(tmp_path / "missing.csv"))

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 1
    assert "Failed to read category file" in result.output


def test_missing_filename_prints_usage(interactive):
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert "Usage" in result.output


def test_unknown_flag_is_usage_error(interactive):
    result = runner.invoke(cli.app, ["--bogus", "take1.wav"])

    assert result.exit_code == 2


def test_force_rename_with_overrides(interactive, workdir, overrides):
    result = runner.invoke(
        cli.app, ["-y", "take1.wav"], input="Central Park Bethesda Fountain\nClippy\n"
    )

    assert result.exit_code == 0, result.output
    assert (workdir / TARGET).exists()
    assert not (workdir / "take1.wav").exists()
    assert "CatID: AMBPark" in result.output


def test_confirmed_rename(interactive, workdir, overrides):
    result = runner.invoke(
        cli.app, ["take1.wav"], input="Central Park Bethesda Fountain\nClippy\nyes\n"
    )

    assert result.exit_code == 0, result.output
    assert (workdir / TARGET).exists()


def test_declined_rename(interactive, workdir, overrides):
    result = runner.invoke(
        cli.app, ["take1.wav"], input="Central Park Bethesda Fountain\nClippy\nn\n"
    )

    assert result.exit_code == 0
    assert "Rename cancelled" in result.output
    assert (workdir / "take1.wav").exists()
    assert not (workdir / TARGET).exists()


def test_unrecognized_answer_declines(interactive, workdir, overrides):
    result = runner.invoke(
        cli.app, ["take1.wav"], input="Central Park Bethesda Fountain\nClippy\nmaybe\n"
    )

    assert result.exit_code == 0
    assert (workdir / "take1.wav").exists()


def test_selector_choice_is_used(interactive, workdir, monkeypatch):
    selector = StubSelector(choice="WINDGust: WIND GUST -- wind, gust")
    monkeypatch.setattr(cli, "_create_selector", lambda: selector)

    result = runner.invoke(
        cli.app, ["-y", "take1.wav"], input="Howling Gust\nBuddin\nLib\n\n"
    )

    assert result.exit_code == 0, result.output
    assert (workdir / "WINDGust_Howling-Gust_Buddin_Lib.wav").exists()
    assert len(selector.calls) == 1


def test_selector_cancel_exits_with_error(interactive, workdir, monkeypatch):
    monkeypatch.setattr(cli, "_create_selector", lambda: StubSelector(choice=None))

    result = runner.invoke(cli.app, ["-y", "take1.wav"])

    assert result.exit_code == 1
    assert "no category selected" in result.output
    assert (workdir / "take1.wav").exists()


def test_unknown_cat_id_override(interactive, workdir, monkeypatch):
    monkeypatch.setenv("UCS_CAT_ID", "NOPEcat")

    result = runner.invoke(cli.app, ["-y", "take1.wav"], input="never read\n")

    assert result.exit_code == 1
    assert "unknown CatID: NOPEcat" in result.output
    assert "FXName" not in result.output


def test_directory_argument(interactive, workdir, overrides):
    (workdir / "sounds").mkdir()

    result = runner.invoke(cli.app, ["-y", "sounds"])

    assert result.exit_code == 1
    assert "sounds is a directory" in result.output


def test_file_without_extension(interactive, workdir, overrides):
    (workdir / "take2").write_bytes(b"RIFF")

    result = runner.invoke(cli.app, ["-y", "take2"])

    assert result.exit_code == 1
    assert "no file name extension found" in result.output


def test_input_closed_mid_prompt(interactive, workdir, overrides):
    result = runner.invoke(cli.app, ["-y", "take1.wav"], input="")

    assert result.exit_code == 1
    assert "input closed" in result.output
    assert (workdir / "take1.wav").exists()


def test_missing_filename_ignores_broken_catalog(interactive, monkeypatch, tmp_path):
    monkeypatch.setenv("UCS_CSV_FILE", str(tmp_path / "missing.csv"))

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert "Usage" in result.output
    assert "Failed to read category file" not in result.output


def test_undecodable_input_exits_with_error(interactive, workdir, overrides):
    result = runner.invoke(cli.app, ["-y", "take1.wav"], input=b"\xff\xfe\n")

    assert result.exit_code == 1
    assert "not valid text" in result.output
    assert (workdir / "take1.wav").exists()
