# rustlings

A runner that checks a series of small exercises one after another, in the
order an `info.toml` file gives. There is also a set of worked solutions
written as plain Python.

## What the runner needs

The runner is started from a directory that holds `info.toml`. Anywhere else
it prints that it must be run from the rustlings directory and exits with
status 1.

`info.toml` lists the exercises in order. Each entry has a `path` and a
`mode`:

- `compile`: `verify` checks only that the exercise compiles. `run` also runs
  the program and shows its output.
- `test`: the exercise is built as a test binary and its tests have to pass.

An entry with any other mode is skipped.

```toml
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/tests/tests1.rs"
mode = "test"
```

Exercises are compiled with `rustc`, which has to be on `PATH`. The build
output goes to a file named `temp` in the current directory, and `temp` is
removed after every check. While a command runs on a terminal, a spinner
appears on standard error.

## Installing

```
pip install .
```

## Commands

```
rustlings
```

With no command, the runner prints a welcome banner. It then prints the file
`default_out.md` from the current directory with syntax highlighting.

```
rustlings verify      # or: rustlings v
```

Checks every exercise in order and stops at the first one that fails. The
exit status is 1 if an exercise fails and 0 if all of them pass.

```
rustlings watch       # or: rustlings w
```

Verifies once, then watches `./exercises` and everything below it. When a
`.rs` file is created or changed, the runner waits until there have been no
changes for two seconds. It then verifies again, starting from the changed
exercise and skipping the exercises before it. A failing exercise does not
stop the watch. Press Ctrl-C to leave.

```
rustlings run exercises/variables/variables1.rs      # or: rustlings r ...
```

Checks one exercise, named by its path exactly as `info.toml` lists it, in
the way its mode sets. A path that is not listed prints "No exercise found
for your filename!" and exits with status 1. The `-t`/`--test` flag is
accepted, but the exercise's mode still decides what is done.

`rustlings --version` prints the installed version.

## Using it from Python

```python
from rustlings.util import ExerciseFailed, Mode, load_exercises
from rustlings.verify import verify, compile_only, run_tests
from rustlings.run import run, compile_and_run

for exercise in load_exercises("info.toml"):
    print(exercise.path, exercise.mode)   # mode is a Mode, or None if unknown

try:
    verify()                               # or verify("path/of/an/exercise.rs")
except ExerciseFailed as failure:
    print("stopped at", failure.path)

try:
    run("exercises/variables/variables1.rs")
except LookupError as error:
    print(error)                           # no exercise with that path
```

- `load_exercises` raises `ValueError` if the file has no list of exercises,
  or if an entry has no string `path` and `mode`.
- `verify`, `run`, `compile_only`, `run_tests` and `compile_and_run` read
  `info.toml` or build in the current directory. Each raises `ExerciseFailed`
  when an exercise fails.
- `rustlings.util.clean()` removes a leftover `temp` file.

## Worked solutions

`rustlings.exercises` holds solutions to the exercises, written as Python
functions:

- `errors`: `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `read_and_validate`, `describe_last_two`, `PositiveNonzeroInteger` and
  `CreationError`.
- `basics`: `call_me`, `sale_price`, `is_even`, `square`, `bigger`,
  `ten_check`, `greeting`, `classify_character`, `describe_array`,
  `nice_slice`, `describe_cat`, `second_number`, `calculate_price` and
  `times_two`.
- `language`: `current_favorite_color`, `is_a_color_word`, `string_values`,
  `hello`, `my_macro`, `make_sausage`, `favorite_snacks`, `fill_vec` and
  `describe_vec`.
- `iterators`: `divide` with `DivisionError`, `NotDivisibleError` and
  `DivideByZeroError`, plus `result_with_list`, `list_of_results` and
  `factorial`.
- `concurrency`: `offset_sums`, `run_jobs` and the thread-safe counter
  `JobStatus`.

## What it does not include

The package does not ship the exercise source files, `info.toml` or
`default_out.md`. You provide them in the directory you run from. It has no
hints command and does not keep track of your progress. Each `verify` starts
again from the beginning of the list, or from the given exercise.

## Running the tests

```
pip install .[test]
pytest
```