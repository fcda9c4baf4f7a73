# lvlkit

Small process and parsing utilities for POSIX systems.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Process tools

### pipeline

`lvlkit.pipeline.picoshell(cmds)` runs a list of commands, each an argument
list, with the standard output of each connected to the standard input of the
next, like `ls -la | grep .c | wc -l`. The first command reads the caller's
standard input and the last writes to the caller's standard output. It waits
for every command and returns `0` if all of them succeeded, otherwise `1`.
A command that cannot be started, exits with a non-zero status or is killed
by a signal makes the result `1`; the command after one that could not be
started reads an empty input.

```python
from lvlkit.pipeline import picoshell

status = picoshell([["ls", "-la"], ["grep", ".c"], ["wc", "-l"]])
```

### childpipe

`lvlkit.childpipe.open_pipe(file, argv, mode)` starts the program `file`
(looked up on `PATH`) with the argument vector `argv` and returns one end of
a pipe to it as a binary stream: with mode `"r"` you read what the program
writes to its standard output, and with mode `"w"` you write what it reads
on its standard input. It raises `ValueError` for a missing `file` or
`argv`, an empty `argv` or an unknown mode, and `OSError` when the program
cannot be started.

`lvlkit.childpipe.iter_lines(stream)` yields lines, each with its trailing
newline, from a file object or from a raw file descriptor (which yields
bytes). The last line comes without a newline if it has none.

```python
from lvlkit.childpipe import open_pipe, iter_lines

with open_pipe("ls", ["ls"], "r") as stream:
    for line in iter_lines(stream):
        print(line.decode(), end="")
```

## Parsers

### argo

`lvlkit.argo.argo(stream)` reads one value of a small JSON subset from a text
stream: integers (wrapped to 32 bits), strings with `\"` and `\\` escapes,
and objects, which become `dict`s. Whitespace, arrays, booleans and null are
not accepted, and nothing may follow the value. A syntax error raises
`lvlkit.argo.ParseError`, whose message is `unexpected token 'x'` or
`unexpected end of input`; its `token` attribute holds the offending
character, or `None` at the end of input.

`lvlkit.argo.serialize(value)` renders a parsed value back in the same
compact form.

```
argo input.json
```

This prints the re-serialized document with no trailing newline and exits
with status 0. On a syntax error it prints the error message and exits with
status 1; when an object key does not start with `"` it exits with status 1
without a message. A missing or unreadable file, or a wrong number of
arguments, also gives status 1.

### vbc

`lvlkit.vbc.parse_expr(text)` parses an expression made of single digits,
`+`, `*` and parentheses, where `*` binds tighter than `+` and both group to
the left, and returns a `Node` tree whose `type` is `NodeType.ADD`,
`NodeType.MULTI` or `NodeType.VAL`. `lvlkit.vbc.eval_tree(tree)` computes
its value. A syntax error raises `lvlkit.vbc.ParseError`.

```
vbc '3+4*5'
```

This prints `23`. On a syntax error it prints `Unexpected token '...'` or
`Unexpected end of input` and exits with status 1.

## What lvlkit does not do

There is no function sandbox: the package cannot run a Python callable in a
separate process under a time limit and report whether it returned, exited
with an error code or crashed. The pipeline and child pipe tools have no
command-line entry points; they are used from Python only.