"""Checking exercises in their recommended order."""

from __future__ import annotations

import subprocess

from rustlings.util import (
    TEMP_BINARY,
    ExerciseFailed,
    Mode,
    _decode,
    _say,
    _Spinner,
    _success_mark,
    _warning_mark,
    clean,
    load_exercises,
)


def verify(start_at: str | None = None) -> None:
    """Check every exercise in order, stopping at the first that fails.

    With ``start_at``, exercises before the one whose path ``start_at`` ends
    with are skipped.
    """
    hit_start_at = False
    for exercise in load_exercises():
        if start_at is not None:
            if start_at.endswith(exercise.path):
                hit_start_at = True
            elif not hit_start_at:
                continue
        if exercise.mode is Mode.TEST:
            run_tests(exercise.path)
        elif exercise.mode is Mode.COMPILE:
            compile_only(exercise.path)


def compile_only(filename: str) -> None:
    """Compile an exercise; raise ExerciseFailed if the compiler rejects it."""
    try:
        with _Spinner(f"Compiling {filename}..."):
            result = subprocess.run(
                ["rustc", filename, "-o", TEMP_BINARY, "--color", "always"],
                capture_output=True,
            )
        if result.returncode == 0:
            _say(f"{_success_mark()} Successfully compiled {filename}!", ok=True)
            return
        _say(
            f"{_warning_mark()} Compilation of {filename} failed! "
            "Compiler error message:\n",
            ok=False,
        )
        print(_decode(result.stderr))
        raise ExerciseFailed(filename)
    finally:
        clean()


def run_tests(filename: str) -> None:
    """Build an exercise's tests and run them; raise ExerciseFailed on failure."""
    try:
        with _Spinner(f"Testing {filename}...") as spinner:
            build = subprocess.run(
                ["rustc", "--test", filename, "-o", TEMP_BINARY, "--color", "always"],
                capture_output=True,
            )
            if build.returncode == 0:
                spinner.message = f"Running {filename}..."
                outcome = subprocess.run([f"./{TEMP_BINARY}"], capture_output=True)
        if build.returncode != 0:
            _say(
                f"{_warning_mark()} Compiling of {filename} failed! "
                "Please try again. Here's the output:",
                ok=False,
            )
            print(_decode(build.stderr))
            raise ExerciseFailed(filename)
        if outcome.returncode != 0:
            _say(
                f"{_warning_mark()} Testing of {filename} failed! "
                "Please try again. Here's the output:",
                ok=False,
            )
            print(_decode(outcome.stdout))
            raise ExerciseFailed(filename)
        _say(f"{_success_mark()} Successfully tested {filename}!", ok=True)
    finally:
        clean()