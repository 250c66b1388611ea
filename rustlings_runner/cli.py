"""Command-line interface: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import run
from .ui import _emoji
from .verify import ExerciseFailed, verify

_VERSION = "4.3.0"
_INFO_FILE = Path("info.toml")
_DEFAULT_OUT_FILE = Path("default_out.txt")
_EXERCISES_DIR = Path("./exercises")
_DEBOUNCE_SECONDS = 2.0

_WELCOME = "\n".join(
    [
        "",
        r"       welcome to...                      ",
        r"                 _   _ _                  ",
        r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
        r" | '__| | | / __| __| | | '_ \ / _` / __| ",
        r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
        r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
        r"                               |___/      ",
        "",
    ]
)

_FINISH = "\n".join(
    [
        "",
        "+----------------------------------------------------+",
        "|          You made it to the Fe-nish line!          |",
        "+--------------------------  ------------------------+",
        "                          \\/                         ",
        "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
        "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
        "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
        " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
        "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
        "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
        "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
        "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
        "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
        "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
        "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
        "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
        "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
        "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
        "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
        "",
        "We hope you enjoyed learning about the various aspects of Rust!",
        "If you noticed any issues, please don't hesitate to report them to our repo.",
        "You can also contribute your own exercises to help the greater community!",
        "",
        "Before reporting an issue or contributing, please read our guidelines",
        "in CONTRIBUTING.md.",
    ]
)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with its subcommands and aliases."""
    parser = _ArgumentParser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--nocapture",
        action="store_true",
        help="Show outputs from the test exercises",
    )
    parser.set_defaults(command=None)
    subcommands = parser.add_subparsers(dest="subcommand")

    verify_parser = subcommands.add_parser(
        "verify",
        aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    )
    verify_parser.set_defaults(command="verify")

    watch_parser = subcommands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_parser.set_defaults(command="watch")

    run_parser = subcommands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_parser.add_argument("name")
    run_parser.set_defaults(command="run")

    hint_parser = subcommands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_parser.add_argument("name")
    hint_parser.set_defaults(command="hint")

    list_parser = subcommands.add_parser(
        "list", aliases=["l"], help="Lists the exercises available in rustlings"
    )
    list_parser.set_defaults(command="list")

    return parser


def rustc_exists() -> bool:
    """Return True if `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


def _find(exercises: Iterable[Exercise], name: str) -> Exercise | None:
    return next((exercise for exercise in exercises if exercise.name == name), None)


def _clear_screen() -> None:
    print("\x1bc")


@dataclass
class _Hint:
    """Hint of the exercise that failed last, shared with the input shell."""

    text: str


class _ChangeCollector(FileSystemEventHandler):
    """Queue the paths of files that were created or written."""

    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._collect(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._collect(event)

    def _collect(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        self._changes.put(Path(os.fsdecode(event.src_path)))


def _debounced_changes(changes: queue.Queue[Path]) -> Iterator[Path]:
    """Yield changed paths once the stream of events has been quiet for a while."""
    while True:
        batch = [changes.get()]
        while True:
            try:
                batch.append(changes.get(timeout=_DEBOUNCE_SECONDS))
            except queue.Empty:
                break
        yield from dict.fromkeys(batch)


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = Path(suffix).parts
    return 0 < len(tail) <= len(path.parts) and path.parts[-len(tail) :] == tail


def _spawn_watch_shell(hint: _Hint) -> None:
    print("Type 'hint' to get help or 'clear' to clear the screen")

    def shell() -> None:
        try:
            for line in sys.stdin:
                command = line.strip()
                if command == "hint":
                    print(hint.text)
                elif command == "clear":
                    print("\x1b[2J\x1b[1;1H")
                else:
                    print(f"unknown command: {command}")
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")

    threading.Thread(target=shell, daemon=True).start()


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Verify the exercises, then re-verify from each edited one until all pass."""
    exercises = list(exercises)
    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeCollector(changes), str(_EXERCISES_DIR), recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
            return
        except ExerciseFailed as failure:
            hint = _Hint(failure.exercise.hint)
        _spawn_watch_shell(hint)
        for path in _debounced_changes(changes):
            if path.suffix != ".rs" or not path.exists():
                continue
            filepath = path.resolve()
            pending = itertools.dropwhile(
                lambda exercise: not _ends_with(filepath, exercise.path), exercises
            )
            _clear_screen()
            try:
                verify(pending, verbose)
                return
            except ExerciseFailed as failure:
                hint.text = failure.exercise.hint
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)

    if args.command is None:
        print(_WELCOME)

    if not _INFO_FILE.exists():
        print(f"{sys.argv[0] or 'rustlings'} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(_INFO_FILE.read_text(encoding="utf-8"))
    verbose = args.nocapture

    match args.command:
        case "list":
            for exercise in exercises:
                print(exercise.name)
        case "run":
            exercise = _find(exercises, args.name)
            if exercise is None:
                print("No exercise found for your given name!")
                return 1
            try:
                run(exercise, verbose)
            except ExerciseFailed:
                return 1
        case "hint":
            exercise = _find(exercises, args.name)
            if exercise is None:
                print("No exercise found for your given name!")
                return 1
            print(exercise.hint)
        case "verify":
            try:
                verify(exercises, verbose)
            except ExerciseFailed:
                return 1
        case "watch":
            try:
                watch(exercises, verbose)
            except OSError as error:
                print(f"Error: Could not watch your progress. Error message was {error!r}.")
                print(
                    "Most likely you've run out of disk space or your "
                    "'inotify limit' has been reached."
                )
                return 1
            party = _emoji("🎉", "★")
            print(f"{party} All exercises completed! {party}")
            print(_FINISH)
        case None:
            print(_DEFAULT_OUT_FILE.read_text(encoding="utf-8"))

    return 0