import subprocess
from pathlib import Path

import pytest

from rustlings.cli import main

INFO = (
    '[[exercises]]\npath = "compSuccess.rs"\nmode = "compile"\n\n'
    '[[exercises]]\npath = "testSuccess.rs"\nmode = "test"\n'
)


class FakeProcesses:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        code, out, err = self.results.pop(0) if self.results else (0, b"", b"")
        return subprocess.CompletedProcess(cmd, code, out, err)


@pytest.fixture
def fixture_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("info.toml").write_text(INFO)
    Path("compSuccess.rs").write_text("fn main() {\n}\n")
    Path("compNoExercise.rs").write_text("fn main() {\n}\n")
    Path("testSuccess.rs").write_text("#[test]\nfn passing() {\n    assert!(true);\n}\n")
    Path("default_out.md").write_text("# Getting started\n\nThanks for installing!\n")
    return tmp_path


@pytest.fixture
def fake(monkeypatch):
    processes = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", processes)
    return processes


def test_runs_without_arguments(fixture_dir, capsys):
    assert main([]) == 0
    assert "welcome to..." in capsys.readouterr().out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "must be run from the rustlings directory" in capsys.readouterr().out


def test_verify_all_success(fixture_dir, fake):
    assert main(["v"]) == 0
    assert [call for call in fake.calls if call[0] == "rustc"] == [
        ["rustc", "compSuccess.rs", "-o", "temp", "--color", "always"],
        ["rustc", "--test", "testSuccess.rs", "-o", "temp", "--color", "always"],
    ]


def test_verify_failure_exits_with_one(fixture_dir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeProcesses((1, b"", b"broken")))
    assert main(["verify"]) == 1


def test_run_single_compile_success(fixture_dir, fake):
    assert main(["r", "compSuccess.rs"]) == 0
    assert fake.calls[-1] == ["./temp"]


def test_run_single_test_success(fixture_dir, fake):
    assert main(["r", "testSuccess.rs"]) == 0
    assert fake.calls[0][1] == "--test"


def test_run_single_test_no_filename(fixture_dir, fake):
    with pytest.raises(SystemExit) as caught:
        main(["r"])
    assert caught.value.code == 2


def test_run_single_test_no_exercise(fixture_dir, fake, capsys):
    assert main(["r", "compNoExercise.rs"]) == 1
    assert "No exercise found for your filename!" in capsys.readouterr().out
    assert fake.calls == []