# rustlings-runner

A command-line companion for working through a course of small Rust
exercises. It reads the list of exercises from `info.toml`, compiles each
one with `rustc` (or lints it with `cargo clippy`), runs the result, and
tells you what is left to fix.

## Requirements

- Python 3.11 or later
- A working Rust toolchain: `rustc` must be on your `PATH`, and `cargo`
  with Clippy for the Clippy exercises

## Installation

```
pip install .
```

This installs the `rustlings` command.

## Usage

Run every command from the course directory, the one holding `info.toml`.
Started anywhere else, or when `rustc --version` cannot be run, the command
prints a message and exits with status 1.

```
rustlings                 # welcome banner, then the contents of default_out.txt
rustlings verify          # check every exercise in the listed order (alias: v)
rustlings watch           # verify, then re-verify whenever an exercise file changes (alias: w)
rustlings run NAME        # compile and run, or test, a single exercise (alias: r)
rustlings hint NAME       # print the hint for an exercise (alias: h)
rustlings list            # list all exercise names (alias: l)
rustlings --nocapture run NAME   # also show the output of test exercises
rustlings --version
```

`run` and `hint` exit with status 1 when no exercise has the given name;
`run` and `verify` exit with status 1 when an exercise fails. A usage error
on the command line also exits with status 1.

`verify` stops at the first exercise that fails to compile, fails its
tests, or still carries the `// I AM NOT DONE` marker, and shows the lines
around that marker. Remove the marker once you are happy with your answer
to move on to the next exercise. `run` never prompts about the marker.

In `watch` mode the `exercises` directory is watched; when a `.rs` file is
created or written, verification starts again from the exercise whose path
matches that file. Type `hint` to see the hint for the exercise you are
stuck on, or `clear` to clear the screen. When every exercise passes, a
closing message is printed.

## The exercise list

`info.toml` holds one `[[exercises]]` table per exercise:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

`mode` is one of `compile` (build and run a binary), `test` (build and run
the test harness) or `clippy` (build, then lint with warnings denied). The
Clippy mode writes `exercises/clippy/Cargo.toml` for the exercise it checks.

## Using it as a library

- `rustlings_runner.exercise`: `load_exercises(text)` parses the TOML list
  into `Exercise` objects. `Exercise.compile()` returns a `CompiledExercise`
  (a context manager that removes the binary on exit) or raises
  `CompileError`; `CompiledExercise.run()` returns an `ExerciseOutput` or
  raises `RunError`. `Exercise.state()` returns a `State` whose `done()`
  tells whether the marker is gone and whose `pending` holds the
  `ContextLine`s around it.
- `rustlings_runner.verify`: `verify(exercises, verbose)` and
  `test(exercise, verbose)` raise `ExerciseFailed` on the first failure;
  `prompt_for_completion(exercise, output)` prints the marker context.
- `rustlings_runner.run`: `run(exercise, verbose)` checks one exercise.
- `rustlings_runner.cli`: `main(argv)` returns the exit status.

The `rustlings_runner.solutions` package holds worked answers, written in
Python, for the quizzes and for the variables, functions, if, primitive
types, strings, collections, enums, error handling, generics, structs,
traits and standard library types sections (modules `quizzes`, `basics`,
`collections`, `enums`, `errors`, `generics`, `structs`, `traits` and
`std_types`).

## What it does not include

There are no worked answers for the conversions, move semantics, option,
macros, modules, Clippy and threads sections, nor for the first generics
exercise. The exercise files themselves and `info.toml` are not shipped
with the package; it runs against a course directory you already have.

## Running the tests

```
pip install ".[test]"
pytest
```