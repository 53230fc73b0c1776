import subprocess
from unittest import mock

import pytest

from macrokata.cli import build_parser, main
from macrokata.diff import unified_diff


def _write_exercise(root, name, main_text, solution_text, diff_text=None):
    directory = root / "exercises" / name
    (directory / "solutions").mkdir(parents=True)
    (directory / "main.rs").write_text(main_text)
    (directory / "solutions" / "main.rs").write_text(solution_text)
    if diff_text is not None:
        (directory / "solutions" / "solution.diff").write_text(diff_text)
    return directory


@pytest.mark.parametrize("command", ["test", "goal", "update-diff"])
def test_parser_reads_exercise(command):
    args = build_parser().parse_args([command, "07_more_repetition"])
    assert args.command == command
    assert args.exercise == "07_more_repetition"


def test_parser_check_all_takes_no_exercise():
    args = build_parser().parse_args(["check-all"])
    assert args.command == "check-all"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["check-all", "extra"])


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_requires_exercise():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["test"])


def test_check_all_with_no_exercises_succeeds(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["check-all"]) == 0


def test_check_all_reports_mismatch(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write_exercise(tmp_path, "01_my_first_macro", "a\n", "b\n", "stale\n")
    assert main(["check-all"]) == 1
    assert "01_my_first_macro" in capsys.readouterr().err


def test_update_diff_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    directory = _write_exercise(tmp_path, "02_numbers", "x\ny\n", "x\nz\n")
    assert main(["update-diff", "02_numbers"]) == 0
    written = (directory / "solutions" / "solution.diff").read_text()
    assert written == unified_diff("x\ny\n", "x\nz\n")


def test_update_diff_missing_exercise_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["update-diff", "missing"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_goal_dispatches_to_cargo():
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with mock.patch.object(subprocess, "run", return_value=completed) as run:
        assert main(["goal", "05_more_complex_example"]) == 0
    assert run.call_args.args[0][3] == "05_more_complex_example_soln"


def test_test_build_failure_exits_nonzero(capsys):
    failed = subprocess.CompletedProcess(args=[], returncode=101, stdout=b"", stderr=b"boom\n")
    with mock.patch.object(subprocess, "run", return_value=failed):
        assert main(["test", "08_nested_repetition"]) == 1
    assert "Error: Build failed" in capsys.readouterr().err