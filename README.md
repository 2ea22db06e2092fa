# rmtool

A small command-line tool that removes files and directories. By default
it asks before each removal. It can also ask once for the whole batch, and
it refuses to remove the root directory `/` unless told otherwise.

## Installation

```
pip install .
```

## Usage

```
rmtool [OPTIONS] FILE...
```

| Option | Meaning |
| --- | --- |
| `-f`, `--force` | Remove without prompting. |
| `-i` | Prompt before every removal. A confirmed directory (with `-r`) is removed whole; the tool does not walk into it. |
| `-I` | Prompt once. Answering `n` stops the run; answering `y` removes the file and the remaining files without further prompts. |
| `--interactive [WHEN]` | Prompt according to WHEN: `never`, `once` (like `-I`) or `always` (like `-i`). The default, and the value when WHEN is left out, is `always`. Used only when none of `-f`, `-I`, `-i` is given. |
| `-r`, `--recursive` | Remove directories and everything in them. Without `-f` each directory is confirmed first. |
| `-d`, `--dir` | Remove empty directories. A non-empty directory is reported and skipped. |
| `--no-preserve-root` | Do not treat `/` specially: every named path is removed as a whole directory tree without prompting. A regular file named in this mode is reported as an error. |
| `--preserve-root WHEN` | `all` (the default) stops the run when `/` is named with `-f`; `none` skips `/` with a warning and goes on with the other files. Any other value is an error. |
| `-v`, `--verbose` | Report each file before it is removed. |
| `-D`, `--debug` | Also show the parsed options and the current removal mode. |

Prompts, warnings and progress messages are written to standard error, and
answers are read from standard input. Answer `y` to go ahead or `n` to
decline; any other answer is asked again, and end of input counts as `n`.

A directory named without `-r` or `-d` is reported ("Is a directory") and
skipped. At least one file is required. If a named file does not exist,
or a removal fails, the tool stops with exit status 1.

### Examples

Remove two files without any prompt:

```
rmtool -f notes.txt draft.txt
```

Remove a directory tree, confirming first:

```
rmtool -r build
```

Remove an empty directory:

```
rmtool -d empty_folder
```

## Use from Python

`rmtool.cli.run(args, reader, writer)` runs the tool on a `RemoveArgs`
(from `rmtool.args.parse_args`) and returns the exit status.
`rmtool.remover.Remover` applies the rules to one path at a time, and
`rmtool.remover.remove_path` removes a single path, raising `RemovalError`
on failure.

## What it does not do

The `-i` prompt is per named path only: it never descends into a directory
to ask about each entry inside it.

## Running the tests

```
pip install ".[test]"
pytest
```