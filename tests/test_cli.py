import io

import pytest

from rmtool.args import RemoveArgs, parse_args
from rmtool.cli import initial_mode, main, run
from rmtool.remover import Mode


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["-f", "x"], Mode.FORCE),
        (["-I", "x"], Mode.ONCE),
        (["-f", "-i", "x"], Mode.ALWAYS),
        (["x"], Mode.ALWAYS),
        (["--interactive=never", "x"], Mode.FORCE),
        (["--interactive=ONCE", "x"], Mode.ONCE),
        (["--interactive=sometimes", "x"], Mode.UNSET),
        (["-f", "--no-preserve-root", "x"], Mode.ROOT),
    ],
)
def test_initial_mode(argv, expected):
    assert initial_mode(parse_args(argv)) == expected


def test_run_without_files_fails():
    writer = io.StringIO()
    assert run(RemoveArgs(), io.StringIO(), writer) == 1
    assert "no files were inputted" in writer.getvalue()


def test_run_rejects_bad_preserve_root(workdir):
    (workdir / "a").write_text("x")
    writer = io.StringIO()
    args = parse_args(["-f", "--preserve-root", "some", "a"])
    assert run(args, io.StringIO(), writer) == 1
    assert "is not a valid option for --preserve-root" in writer.getvalue()
    assert (workdir / "a").exists()


def test_run_force_removes_all(workdir):
    for name in ("a", "b"):
        (workdir / name).write_text("x")
    assert run(parse_args(["-f", "a", "b"]), io.StringIO(), io.StringIO()) == 0
    assert list(workdir.iterdir()) == []


def test_run_prompts_for_each_file(workdir):
    for name in ("a", "b"):
        (workdir / name).write_text("x")
    writer = io.StringIO()
    assert run(parse_args(["a", "b"]), io.StringIO("y\nn\n"), writer) == 0
    assert not (workdir / "a").exists()
    assert (workdir / "b").exists()
    assert writer.getvalue().count("To confirm this, press [y/n]: ") == 2


def test_run_recursive_force_removes_directory(workdir):
    (workdir / "d" / "e").mkdir(parents=True)
    assert run(parse_args(["-rf", "d"]), io.StringIO(), io.StringIO()) == 0
    assert not (workdir / "d").exists()


def test_run_missing_file_fails(workdir):
    writer = io.StringIO()
    assert run(parse_args(["-f", "ghost"]), io.StringIO(), writer) == 1
    assert "is either missing, or does not exist." in writer.getvalue()


def test_run_debug_reports_parameters(workdir):
    (workdir / "a").write_text("x")
    writer = io.StringIO()
    assert run(parse_args(["-f", "-D", "a"]), io.StringIO(), writer) == 0
    assert "LOOP PARAMETERS" in writer.getvalue()


def test_run_once_declined_stops(workdir):
    for name in ("a", "b"):
        (workdir / name).write_text("x")
    assert run(parse_args(["-I", "a", "b"]), io.StringIO("n\n"), io.StringIO()) == 1
    assert (workdir / "a").exists()
    assert (workdir / "b").exists()


def test_main_removes_file(workdir):
    (workdir / "gone").write_text("x")
    assert main(["-f", "gone"]) == 0
    assert not (workdir / "gone").exists()