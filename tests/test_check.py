import subprocess
from unittest.mock import patch

import pytest

from macrokata.check import (
    DiffFileDoesNotExist,
    DiffFileDoesNotMatch,
    MainFileDoesNotExist,
    SolutionFileDoesNotClippy,
    SolutionFileDoesNotExist,
    check,
    check_all,
    run_cargo_command,
)
from macrokata.exercise import exercise_paths
from macrokata.update_diff import update_diff

MAIN = "fn main() {\n    num!(one)\n}\n"
SOLUTION = "macro_rules! num { (one) => { 1 }; }\nfn main() {\n    num!(one)\n}\n"


def _completed(returncode):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=b"", stderr=b"")


def _make(root, name, with_diff=True):
    paths = exercise_paths(name, root)
    paths.solution.parent.mkdir(parents=True)
    paths.main.write_text(MAIN)
    paths.solution.write_text(SOLUTION)
    if with_diff:
        update_diff(name, root)
    return paths


def test_run_cargo_command_arguments():
    with patch("macrokata.check.subprocess.run", return_value=_completed(0)) as run:
        result = run_cargo_command("02_numbers", "clippy")
    assert result.returncode == 0
    assert run.call_args.args[0] == ["cargo", "clippy", "--bin", "02_numbers_soln"]


def test_consistent_exercise_passes(tmp_path):
    _make(tmp_path, "ok")
    with patch("macrokata.check.subprocess.run", return_value=_completed(0)) as run:
        assert check("ok", tmp_path) is None
    assert run.call_count == 1


def test_missing_main(tmp_path):
    with pytest.raises(MainFileDoesNotExist):
        check("absent", tmp_path)


def test_missing_solution(tmp_path):
    paths = exercise_paths("half", tmp_path)
    paths.main.parent.mkdir(parents=True)
    paths.main.write_text(MAIN)
    with pytest.raises(SolutionFileDoesNotExist):
        check("half", tmp_path)


def test_missing_diff(tmp_path):
    _make(tmp_path, "nodiff", with_diff=False)
    with pytest.raises(DiffFileDoesNotExist):
        check("nodiff", tmp_path)


def test_mismatched_diff_carries_both(tmp_path):
    paths = _make(tmp_path, "stale")
    correct = paths.diff.read_text()
    paths.diff.write_text("outdated")
    with pytest.raises(DiffFileDoesNotMatch) as info:
        check("stale", tmp_path)
    assert info.value.actual == correct
    assert info.value.expected == "outdated"


def test_mismatch_skips_linter(tmp_path):
    paths = _make(tmp_path, "stale")
    paths.diff.write_text("outdated")
    with patch("macrokata.check.subprocess.run", return_value=_completed(0)) as run:
        with pytest.raises(DiffFileDoesNotMatch):
            check("stale", tmp_path)
    assert run.call_count == 0


def test_linter_failure(tmp_path):
    _make(tmp_path, "lint")
    with patch("macrokata.check.subprocess.run", return_value=_completed(1)):
        with pytest.raises(SolutionFileDoesNotClippy):
            check("lint", tmp_path)


def test_missing_cargo_counts_as_linter_failure(tmp_path):
    _make(tmp_path, "lint")
    with patch("macrokata.check.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(SolutionFileDoesNotClippy):
            check("lint", tmp_path)


def test_check_all_reports_failures(tmp_path, capsys):
    _make(tmp_path, "a_good")
    bad = _make(tmp_path, "b_bad")
    bad.diff.write_text("outdated")
    with patch("macrokata.check.subprocess.run", return_value=_completed(0)):
        failures = check_all(tmp_path)
    assert list(failures) == ["b_bad"]
    assert isinstance(failures["b_bad"], DiffFileDoesNotMatch)
    err = capsys.readouterr().err
    assert "Check of 'b_bad' failed" in err
    assert "a_good" not in err


def test_check_all_all_passing(tmp_path, capsys):
    _make(tmp_path, "a_good")
    with patch("macrokata.check.subprocess.run", return_value=_completed(0)):
        assert check_all(tmp_path) == {}
    assert capsys.readouterr().err == ""