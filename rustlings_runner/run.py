"""Running a single exercise without the completion prompt."""

from __future__ import annotations

from .exercise import CompileError, Exercise, Mode, RunError
from .ui import _Spinner, success, warn
from .verify import ExerciseFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) one exercise; raise ExerciseFailed on failure."""
    match exercise.mode:
        case Mode.TEST:
            test(exercise, verbose)
        case Mode.COMPILE | Mode.CLIPPY:
            _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except CompileError as error:
            spinner.finish_and_clear()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(error.output.stderr)
            raise ExerciseFailed(exercise) from error

        with compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except RunError as error:
                spinner.finish_and_clear()
                print(error.output.stdout)
                print(error.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise ExerciseFailed(exercise) from error

    print(output.stdout)
    success(f"Successfully ran {exercise}")