"""Tests for CLI functionality."""

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from codefence.ui.cli import CommandProcessor, main


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small project and make it the working directory."""

    _ = (tmp_path / "a.txt").write_text("alpha\n")
    _ = (tmp_path / "b.bin").write_bytes(b"\xff\x00\xfe")
    (tmp_path / "dir" / "skip").mkdir(parents=True)
    _ = (tmp_path / "dir" / "keep.txt").write_text("keep\n")
    _ = (tmp_path / "dir" / "skip" / "gone.txt").write_text("gone\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_prints_file_and_summary(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["a.txt"])

    captured = capsys.readouterr()
    assert captured.out == "```\n// a.txt\nalpha\n```\n\n"
    assert "Printed files:\na.txt\n" in captured.err
    assert "```" not in captured.err


def test_recursive_with_exclusion(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["./dir", "--recursive", "--exclude=dir/skip"])

    captured = capsys.readouterr()
    assert "// dir/keep.txt\nkeep\n" in captured.out
    assert "gone" not in captured.out
    assert "Printed files:\ndir/keep.txt\n" in captured.err


def test_excluded_files_are_listed(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["a.txt", "dir/keep.txt", "--exclude", "dir/keep"])

    err = capsys.readouterr().err
    assert "Excluded files:\ndir/keep.txt\nPrinted files:\na.txt\n" in err


def test_absolute_flag(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["--absolute", "a.txt"])

    assert f"// {project.resolve() / 'a.txt'}\n" in capsys.readouterr().out


def test_nothing_printed_exits_with_error(
    project: Path, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="codefence")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["b.bin", "missing.txt"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().out == ""
    messages = [record.getMessage() for record in caplog.records]
    assert "b.bin is not a text file, skipping." in messages
    assert "missing.txt does not exist" in messages
    assert messages[-1] == "No valid files found among the arguments 'b.bin', 'missing.txt'"


def test_empty_arguments(
    project: Path, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR, logger="codefence")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 1
    assert "Printed files: None" in capsys.readouterr().err
    assert [r.getMessage() for r in caplog.records] == [
        "No valid files found among the arguments ''"
    ]


def test_allow_empty_keeps_zero_exit(project: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="codefence")

    CommandProcessor.process_command(["--allow-empty", "missing.txt"])

    assert [r.getMessage() for r in caplog.records] == [
        "No valid files found among the arguments 'missing.txt'"
    ]


def test_config_can_disable_failure_exit(project: Path, isolated_config: Path) -> None:
    _ = isolated_config.write_text("fail_on_empty = false\n")

    CommandProcessor.process_command(["missing.txt"])


def test_invalid_config_is_reported(
    project: Path, isolated_config: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR, logger="codefence")
    _ = isolated_config.write_text("recursive = 'yes'\n")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["a.txt"])

    assert excinfo.value.code == 1
    assert caplog.records[-1].getMessage() == "'recursive' must be true or false"


def test_unreadable_file_argument_aborts(
    project: Path, mocker: MockerFixture, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR, logger="codefence")
    _ = mocker.patch(
        "codefence.features.selection.usecases.engine.read_as_text",
        side_effect=PermissionError(13, "Permission denied"),
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["a.txt"])

    assert excinfo.value.code == 1
    assert caplog.records[-1].getMessage().startswith("An unexpected error occurred:")


def test_keyboard_interrupt(project: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "run_selection", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["a.txt"])

    assert excinfo.value.code == 130


def test_main_returns_zero_on_success(
    project: Path, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = mocker.patch("sys.argv", ["codefence", "a.txt"])

    assert main() == 0
    assert "// a.txt" in capsys.readouterr().out


def test_warning_is_rendered_as_one_stderr_line(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    CommandProcessor.process_command(["a.txt", "missing.txt"])

    err_lines = capsys.readouterr().err.splitlines(keepends=True)
    assert "Warning: missing.txt does not exist\n" in err_lines


def test_long_diagnostics_are_not_wrapped(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Every diagnostic stays on one unpadded line, whatever the path length."""

    name = "missing_" + "x" * 90 + ".txt"

    CommandProcessor.process_command(["--allow-empty", name])

    assert capsys.readouterr().err == (
        f"Warning: {name} does not exist\n"
        "Printed files: None\n"
        f"Error: No valid files found among the arguments '{name}'\n"
    )
