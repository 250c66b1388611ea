"""Checking exercises one after another, in order."""

from __future__ import annotations

from collections.abc import Iterable

from .exercise import CompileError, CompiledExercise, Exercise, Mode, RunError
from .ui import _Spinner, blue, bold, success, warn


class ExerciseFailed(Exception):
    """An exercise did not compile, run or pass, or is still marked pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"exercise {exercise} is not complete")
        self.exercise = exercise


_SUCCESS_MESSAGES = {
    Mode.COMPILE: "The code is compiling!",
    Mode.TEST: "The code is compiling, and the tests pass!",
    Mode.CLIPPY: "The code is compiling, and 📎 Clippy 📎 is happy!",
}


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check every exercise in order; raise ExerciseFailed at the first that fails."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                ok = _compile_and_test(exercise, interactive=True, verbose=verbose)
            case Mode.COMPILE:
                ok = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                ok = _compile_only(exercise)
        if not ok:
            raise ExerciseFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    if not _compile_and_test(exercise, interactive=False, verbose=verbose):
        raise ExerciseFailed(exercise)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except CompileError as error:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        return None


def _compile_only(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        compiled.close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        with compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except RunError as error:
                spinner.finish_and_clear()
                warn(f"Ran {exercise} with errors")
                print(error.output.stdout)
                print(error.output.stderr)
                return False
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        with compiled:
            try:
                output = compiled.run()
            except RunError as error:
                spinner.finish_and_clear()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(error.output.stdout)
                return False
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return bold("====================")


def prompt_for_completion(exercise: Exercise, output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done():
        return True

    print()
    print(f"🎉 🎉  {_SUCCESS_MESSAGES[exercise.mode]} 🎉 🎉")
    print()

    if output is not None:
        print("Output:")
        print(_separator())
        print(output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in state.pending:
        text = bold(context_line.line) if context_line.important else context_line.line
        print(f"{blue(bold(f'{context_line.number:>2}'))} {blue('|')}  {text}")

    return False