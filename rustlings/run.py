"""Running or testing a single exercise."""

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
from rustlings.verify import run_tests


def run(filename: str) -> None:
    """Check the exercise listed under ``filename`` according to its mode.

    Raises LookupError if no exercise has that path.
    """
    matching = [ex for ex in load_exercises() if ex.path == filename]
    if not matching:
        raise LookupError("No exercise found for your filename!")
    exercise = matching[0]
    if exercise.mode is Mode.TEST:
        run_tests(exercise.path)
    elif exercise.mode is Mode.COMPILE:
        compile_and_run(exercise.path)


def compile_and_run(filename: str) -> None:
    """Compile an exercise and run it, showing its output."""
    try:
        with _Spinner(f"Compiling {filename}...") as spinner:
            build = subprocess.run(
                ["rustc", filename, "-o", TEMP_BINARY, "--color", "always"],
                capture_output=True,
            )
            spinner.message = f"Running {filename}..."
            if build.returncode == 0:
                outcome = subprocess.run([f"./{TEMP_BINARY}"], capture_output=True)
        if build.returncode != 0:
            _say(
                f"{_warning_mark()} Compilation of {filename} failed! "
                "Compiler error message:\n",
                ok=False,
            )
            print(_decode(build.stderr))
            raise ExerciseFailed(filename)
        print(_decode(outcome.stdout))
        if outcome.returncode != 0:
            print(_decode(outcome.stderr))
            _say(f"{_warning_mark()} Ran {filename} with errors", ok=False)
            raise ExerciseFailed(filename)
        _say(f"{_success_mark()} Successfully ran {filename}", ok=True)
    finally:
        clean()