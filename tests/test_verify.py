import subprocess
from pathlib import Path

import pytest

from rustlings.util import ExerciseFailed
from rustlings.verify import compile_only, run_tests, verify

INFO = (
    '[[exercises]]\npath = "exercises/a.rs"\nmode = "compile"\n\n'
    '[[exercises]]\npath = "exercises/b.rs"\nmode = "test"\n\n'
    '[[exercises]]\npath = "exercises/c.rs"\nmode = "compile"\n'
)


class FakeProcesses:
    """Stands in for the compiler and the built program, in call order."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] == "rustc":
            Path("temp").write_bytes(b"")
        code, out, err = self.results.pop(0) if self.results else (0, b"", b"")
        return subprocess.CompletedProcess(cmd, code, out, err)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("info.toml").write_text(INFO)
    return tmp_path


def install(monkeypatch, *results):
    fake = FakeProcesses(*results)
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def test_verify_runs_every_exercise_in_order(workdir, monkeypatch):
    fake = install(monkeypatch)
    assert verify(None) is None
    assert fake.calls == [
        ["rustc", "exercises/a.rs", "-o", "temp", "--color", "always"],
        ["rustc", "--test", "exercises/b.rs", "-o", "temp", "--color", "always"],
        ["./temp"],
        ["rustc", "exercises/c.rs", "-o", "temp", "--color", "always"],
    ]
    assert not Path("temp").exists()


def test_verify_stops_at_first_failure(workdir, monkeypatch):
    fake = install(monkeypatch, (1, b"", b"bad code"))
    with pytest.raises(ExerciseFailed) as caught:
        verify()
    assert caught.value.path == "exercises/a.rs"
    assert len(fake.calls) == 1


def test_verify_starts_at_matching_path(workdir, monkeypatch):
    fake = install(monkeypatch)
    assert verify(str(workdir / "exercises" / "b.rs")) is None
    compiled = [call[-5] for call in fake.calls if call[0] == "rustc"]
    assert compiled == ["exercises/b.rs", "exercises/c.rs"]


def test_verify_with_unmatched_start_runs_nothing(workdir, monkeypatch):
    fake = install(monkeypatch)
    assert (verify("exercises/zzz.rs"), fake.calls) == (None, [])


def test_compile_only_success(workdir, monkeypatch, capsys):
    install(monkeypatch)
    compile_only("a.rs")
    assert "Successfully compiled a.rs!" in capsys.readouterr().out
    assert not Path("temp").exists()


def test_compile_only_failure_prints_compiler_output(workdir, monkeypatch, capsys):
    install(monkeypatch, (1, b"", b"error[E0425]"))
    with pytest.raises(ExerciseFailed):
        compile_only("a.rs")
    out = capsys.readouterr().out
    assert "Compilation of a.rs failed! Compiler error message:" in out
    assert "error[E0425]" in out
    assert not Path("temp").exists()


def test_run_tests_failure_prints_test_output(workdir, monkeypatch, capsys):
    install(monkeypatch, (0, b"", b""), (101, b"assertion failed", b""))
    with pytest.raises(ExerciseFailed):
        run_tests("b.rs")
    out = capsys.readouterr().out
    assert "Testing of b.rs failed! Please try again. Here's the output:" in out
    assert "assertion failed" in out


def test_run_tests_build_failure_skips_running(workdir, monkeypatch, capsys):
    fake = install(monkeypatch, (1, b"", b"no main"))
    with pytest.raises(ExerciseFailed):
        run_tests("b.rs")
    assert all(call[0] == "rustc" for call in fake.calls)
    assert "Compiling of b.rs failed!" in capsys.readouterr().out


def test_run_tests_success(workdir, monkeypatch, capsys):
    install(monkeypatch)
    run_tests("b.rs")
    assert "Successfully tested b.rs!" in capsys.readouterr().out