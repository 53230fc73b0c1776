# macrokata

MacroKata is a set of exercises for learning how to use macros well. This
package holds the `macrokata` command that drives the exercises, and a small
sub-package that shows the idea of each exercise in Python.

## What you need

The command works on an exercise tree in the current directory. Each exercise
lives in `exercises/<name>/` with a starting `main.rs`, a reference
`solutions/main.rs` and a `solutions/solution.diff` recording how the two
differ. The command calls `cargo` (and the `cargo expand` subcommand), so both
must be installed and on your `PATH`, and the Cargo project must define a binary
named `<name>` for each exercise and `<name>_soln` for its solution.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Run every command from the directory that holds `exercises/`.

Build your attempt at an exercise, show its expansion next to the expected one,
and print the diff between them:

```
macrokata test 01_my_first_macro
```

If the build fails or prints any diagnostics, they are shown and the command
exits with status 1. If the two expansions match you are told you solved it.

Show only the expansion the exercise is aiming for:

```
macrokata goal 01_my_first_macro
```

Regenerate an exercise's `solution.diff` from its starting file and its
solution:

```
macrokata update-diff 01_my_first_macro
```

Check every exercise at once, confirming that each stored diff is current and
that each solution passes `cargo clippy`:

```
macrokata check-all
```

`check-all` names every exercise that fails on stderr and exits with status 1
if any do.

## Using it from Python

- `macrokata.diff.unified_diff(before, after)` returns the diff hunks (three
  lines of context, no file headers), empty when the texts match.
- `macrokata.exercise.exercise_paths(name, root)` gives an `ExercisePaths`
  with the `main`, `solution` and `diff` paths; `discover_exercises(root)` lists
  the exercise names. `root` defaults to the current directory.
- `macrokata.update_diff.update_diff(name, root)` writes and returns the diff.
- `macrokata.check.check(name, root)` raises a `CheckError` subclass
  (`MainFileDoesNotExist`, `SolutionFileDoesNotExist`, `DiffFileDoesNotExist`,
  `DiffFileDoesNotMatch`, `SolutionFileDoesNotClippy`); `check_all(root)`
  returns the failures keyed by exercise name.
- `macrokata.runner.run_test(name)` returns the diff of the two expansions and
  raises `BuildFailed` when the build does not succeed cleanly.
- `macrokata.goal.goal(name)` returns cargo's exit status.

## The katas in Python

The `macrokata.katas` sub-package carries the ideas of each exercise over to
plain Python, for reading alongside the exercises:

- `macrokata.katas.basics`: `show_output`, `num`, `plus`, `square`, `format_result`
- `macrokata.katas.iteration`: `Coordinate`, `for_2d`, `if_any`, `hashmap`, `graph`
- `macrokata.katas.matching`: `NumberKind`, `NumberType`, `sum_values`, `get_number_type`
- `macrokata.katas.composition`: `digit`, `number`, `pair`, `hashmap`
- `macrokata.katas.currying`: `curry`, `get_example_vec`
- `macrokata.katas.hygiene`: `Coordinate`, `Coordinate3D`, `Coordinate4D`, `coord`

Each of these modules has a `demo()` function that runs its exercises and
prints the results:

```python
from macrokata.katas import composition

composition.demo()
```

## What this package does not do

The exercise files themselves and the Cargo project that builds them are not
part of this package; the command only works inside such a tree. It does not
build, expand or lint anything itself: all of that is left to `cargo`.