"""Shared pieces: the exercise list, the build artefact and console output."""

from __future__ import annotations

import enum
import itertools
import os
import sys
import threading
import tomllib
from dataclasses import dataclass
from typing import TextIO

TEMP_BINARY = "temp"
INFO_FILE = "info.toml"

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


class Mode(enum.Enum):
    """How an exercise is checked."""

    TEST = "test"
    COMPILE = "compile"


@dataclass(frozen=True)
class Exercise:
    """One entry of the exercise list; ``mode`` is None for an unknown mode."""

    path: str
    mode: Mode | None


class ExerciseFailed(Exception):
    """An exercise did not compile, or its program or tests failed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} did not pass")
        self.path = path


def clean() -> None:
    """Remove the temporary binary, if there is one."""
    try:
        os.remove(TEMP_BINARY)
    except OSError:
        pass


def load_exercises(info_path: str | os.PathLike[str] = INFO_FILE) -> list[Exercise]:
    """Read the ordered list of exercises from an info file."""
    with open(info_path, "rb") as handle:
        data = tomllib.load(handle)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError(f"{os.fspath(info_path)} has no list of exercises")
    exercises = []
    for entry in entries:
        try:
            path = entry["path"]
            mode_name = entry["mode"]
        except (KeyError, TypeError):
            raise ValueError("every exercise needs a path and a mode") from None
        if not isinstance(path, str) or not isinstance(mode_name, str):
            raise ValueError("exercise path and mode must be strings")
        try:
            mode: Mode | None = Mode(mode_name)
        except ValueError:
            mode = None
        exercises.append(Exercise(path, mode))
    return exercises


def _mark(fancy: str, plain: str) -> str:
    """Pick the fancy symbol when standard output can encode it."""
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        fancy.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return plain
    return fancy


def _success_mark() -> str:
    return _mark("✅", "✓")


def _warning_mark() -> str:
    return _mark("⚠️ ", "!")


def _say(text: str, *, ok: bool) -> None:
    """Print a status line, green for success and red for failure on a terminal."""
    if sys.stdout.isatty():
        text = f"{_GREEN if ok else _RED}{text}{_RESET}"
    print(text)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class _Spinner:
    """A one-line progress indicator shown while a command runs."""

    _FRAMES = "|/-\\"

    def __init__(self, message: str, stream: TextIO | None = None) -> None:
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            self._stream.write(f"\r\x1b[2K{frame} {self.message}")
            self._stream.flush()
            if self._stop.wait(0.1):
                break

    def __enter__(self) -> _Spinner:
        isatty = getattr(self._stream, "isatty", None)
        if isatty is not None and isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._thread is not None:
            self._stop.set()
            self._thread.join()
            self._stream.write("\r\x1b[2K")
            self._stream.flush()
            self._thread = None