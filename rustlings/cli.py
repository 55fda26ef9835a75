"""The command line: verify, watch and run exercises."""

from __future__ import annotations

import argparse
import os
import queue
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexers import get_lexer_by_name
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustlings.run import run
from rustlings.util import INFO_FILE, ExerciseFailed
from rustlings.verify import verify

_BANNER = [
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
]

_WELCOME_FILE = "default_out.md"
_DEBOUNCE_SECONDS = 2.0


def _package_version() -> str:
    try:
        return version("rustlings")
    except PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument("--version", action="version", version=_package_version())
    parser.set_defaults(command=None)
    commands = parser.add_subparsers(title="commands")
    verify_cmd = commands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_cmd.set_defaults(command="verify")
    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")
    run_cmd = commands.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_cmd.add_argument("file")
    run_cmd.add_argument("-t", "--test", action="store_true", help="Run the file as a test")
    run_cmd.set_defaults(command="run")
    return parser


def _print_welcome() -> None:
    text = Path(_WELCOME_FILE).read_text(encoding="utf-8")
    lexer = get_lexer_by_name("markdown")
    sys.stdout.write(highlight(text, lexer, TerminalTrueColorFormatter(style="monokai")))


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and run the chosen command; return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print()
        for line in _BANNER:
            print(line)
        print()

    if not Path(INFO_FILE).exists():
        program = sys.argv[0] or "rustlings"
        print(f"{program} must be run from the rustlings directory")
        return 1

    try:
        if args.command == "run":
            run(args.file)
        elif args.command == "verify":
            verify(None)
        elif args.command == "watch":
            watch()
    except LookupError as error:
        print(error.args[0] if error.args else error)
        return 1
    except ExerciseFailed:
        return 1
    except KeyboardInterrupt:
        return 130

    if args.command is None:
        _print_welcome()

    print("\x1b[0m")
    return 0


class _SourceChangeHandler(FileSystemEventHandler):
    """Queue the paths of created or changed source files."""

    def __init__(self, changes: queue.Queue[str]) -> None:
        super().__init__()
        self._changes = changes

    def _note(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        path = os.fsdecode(event.src_path)
        if Path(path).suffix == ".rs":
            self._changes.put(path)

    def on_created(self, event: FileSystemEvent) -> None:
        self._note(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._note(event)


def _settled_changes(changes: queue.Queue[str], quiet: float) -> list[str]:
    """Wait for a change, then gather more until none arrive for ``quiet`` seconds."""
    paths = [changes.get()]
    while True:
        try:
            path = changes.get(timeout=quiet)
        except queue.Empty:
            return paths
        if path not in paths:
            paths.append(path)


def _verify_ignoring_failure(start_at: str | None) -> None:
    try:
        verify(start_at)
    except ExerciseFailed:
        pass


def watch() -> None:
    """Verify all exercises, then verify again from each edited exercise."""
    changes: queue.Queue[str] = queue.Queue()
    observer = Observer()
    observer.schedule(_SourceChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _verify_ignoring_failure(None)
        while True:
            for path in _settled_changes(changes, _DEBOUNCE_SECONDS):
                print("----------**********----------\n")
                _verify_ignoring_failure(path)
    finally:
        observer.stop()
        observer.join()