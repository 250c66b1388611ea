"""Exercises: their description, compilation, execution and completion state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def _temp_file() -> str:
    """A per-process, per-thread name for the compiled binary."""
    return os.path.join(os.curdir, f"temp_{os.getpid()}_{threading.get_ident()}")


def _clean(binary: str) -> None:
    try:
        os.remove(binary)
    except OSError:
        pass


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass
class State:
    """Completion state of an exercise; pending lines are empty when done."""

    pending: list[ContextLine] = field(default_factory=list)

    def done(self) -> bool:
        return not self.pending


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a command."""

    stdout: str
    stderr: str


class CompileError(Exception):
    """Compilation of an exercise failed."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


class RunError(Exception):
    """A compiled exercise exited unsuccessfully."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )


@dataclass
class Exercise:
    """One exercise as described in the exercise list."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> "CompiledExercise":
        """Compile the exercise; raise CompileError with the compiler output on failure."""
        binary = _temp_file()
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _execute(["rustc", source, "-o", binary, *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", source, "-o", binary, *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy(binary)
        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _clean(binary)
        raise CompileError(self, _output(result))

    def _clippy(self, binary: str) -> subprocess.CompletedProcess:
        name = self.name
        CLIPPY_CARGO_TOML_PATH.write_text(
            "[package]\n"
            f'name = "{name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{name}"\n'
            f'path = "{name}.rs"'
        )
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        # An executable is built too so that clippy exercises can be run.
        _execute(["rustc", str(self.path), "-o", binary, *RUSTC_COLOR_ARGS])
        # A clean build is needed for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", manifest, *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                manifest,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ]
        )

    def state(self) -> State:
        """Read the source and report whether the pending marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self} spans several lines")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            [
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first : last + 1], start=first)
            ]
        )


@dataclass
class CompiledExercise:
    """A compiled binary; closing it removes the binary."""

    exercise: Exercise
    binary: str

    def run(self) -> ExerciseOutput:
        """Run the binary; raise RunError with its output if it fails."""
        args = [self.binary]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise RunError(self.exercise, output)
        return output

    def close(self) -> None:
        _clean(self.binary)

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the TOML exercise list."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as error:
        raise ValueError(f"invalid exercise list: {error}") from error
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("exercise list has no 'exercises' array")
    exercises = []
    for entry in entries:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as error:
            raise ValueError(f"exercise entry is missing field {error}") from error
    return exercises