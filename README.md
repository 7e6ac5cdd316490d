# slosh

`slosh` is a small interactive shell for POSIX systems. It reads one line at a
time, splits it on whitespace and runs the command. It supports:

- ordinary external commands, looked up on `PATH`;
- one pipe between two commands: `ls -l | wc -l`;
- output redirection that truncates (`>`) or appends (`>>`):
  `echo hello > out.txt`, `echo again >> out.txt`;
- the built-ins `cd <dir>` and `exit`.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
slosh
```

Example session:

```
/tmp> echo hello > greeting.txt
/tmp> cat greeting.txt | wc -c
6
/tmp> cd /
/> exit
SLOsh exiting...
```

### Behaviour

- The prompt shows the current directory, e.g. `/home/user> `. If the
  directory cannot be read, the prompt is `SLOsh> `.
- When a command exits with a non-zero status, the shell prints
  `Child exited with status N.` A command that cannot be started prints
  `name: reason` and is reported with status 1. A command killed by a signal
  is not reported.
- For a pipe, the status of each side is reported on its own.
- Pressing Ctrl+C while a command runs passes the interrupt to that command
  and keeps the shell running. At an empty prompt, Ctrl+C prints
  `No child process running` and a new prompt.
- `cd` with no argument prints `cd: missing argument`. A failed `cd` prints
  the reason and the shell carries on.
- If the file named after `>` or `>>` cannot be opened (or no file is named),
  the shell prints `open: reason` and ends with exit code 1.
- End of input (Ctrl+D) or `exit` ends the session with `SLOsh exiting...`
  and exit code 0.

## Limits

Tokens are separated only by spaces, tabs and newlines. There is no quoting,
no globbing, no variable expansion, no input redirection (`<`) and no job
control. Operators must stand apart as their own words (`a | b`, not `a|b`).

A line holds one pipe or one redirect, not both. If a line has several `|`,
the last one splits it. If it has several `>`/`>>`, the last one names the
file, and any `>` on the line makes the redirect truncate. When a line holds
both `|` and a redirect, it runs as a pipe, and the redirect words are passed
to the commands as ordinary arguments.

A line holds at most 63 arguments, and any further words are ignored. Input is
read in pieces of at most 1023 characters, so a longer line is treated as
several lines.

## Using it from Python

The parts of the shell can be used on their own:

```python
from slosh.parser import parse_input, classify, CommandKind

args = parse_input("ls -l | wc -l\n")   # ['ls', '-l', '|', 'wc', '-l']
command = classify(args)
assert command.kind is CommandKind.PIPE
assert command.argv == ["ls", "-l"] and command.right == ["wc", "-l"]
```

- `slosh.parser`: `parse_input(line)` splits a line into words.
  `classify(args)` returns a `ParsedCommand` with a `kind` (`SIMPLE`, `PIPE`
  or `REDIRECT`), `argv`, `right`, `filename` and `clobber`.
- `slosh.commands`: `handle_builtin(args, err)` runs `cd` or `exit` and
  returns a `BuiltinResult` (`EXIT`, `CONTINUE` or `NOT_BUILTIN`).
- `slosh.executor`: `Executor(out, err)` runs commands. It has `execute(args)`,
  `run_simple(argv)`, `run_pipe(left, right)` and
  `run_redirect(argv, filename, clobber)`. These return the exit status, or a
  pair of statuses for a pipe. `interrupt()` sends SIGINT to the running child,
  and `child_running()` gives its process id.
- `slosh.shell`: `Shell(stdin, out, err)` runs the read-eval loop over any text
  streams. `run()` returns the exit code. `main()` starts the shell on the
  standard streams and installs the Ctrl+C handler.

## Running the tests

```
pip install .[test]
pytest
```