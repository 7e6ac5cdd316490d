"""The interactive read-eval loop."""

from __future__ import annotations

import os
import signal
import sys
from typing import TextIO

from slosh.commands import BuiltinResult, handle_builtin
from slosh.executor import Executor
from slosh.parser import MAX_INPUT_SIZE, parse_input

FALLBACK_PROMPT = "SLOsh> "


class Shell:
    """A small shell reading commands from ``stdin``."""

    def __init__(self, stdin: TextIO | None = None, out: TextIO | None = None,
                 err: TextIO | None = None):
        self.stdin = sys.stdin if stdin is None else stdin
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.executor = Executor(self.out, self.err)

    def prompt(self) -> str:
        """Write the prompt showing the working directory and return it."""
        try:
            text = f"{os.getcwd()}> "
        except OSError as exc:
            self.err.write(f"getcwd: {exc.strerror}\n")
            self.err.flush()
            text = FALLBACK_PROMPT
        self.out.write(text)
        self.out.flush()
        return text

    def handle_sigint(self, signum=None, frame=None) -> None:
        """Pass Ctrl+C to a running child, or redraw the prompt."""
        self.out.write("\n")
        if self.executor.interrupt():
            self.out.flush()
            return
        self.out.write("No child process running\n")
        self.prompt()

    def run(self) -> int:
        """Read and run commands until ``exit`` or end of input; return the exit code."""
        while True:
            self.prompt()
            line = self.stdin.readline(MAX_INPUT_SIZE - 1)
            if not line:
                break
            args = parse_input(line)
            if not args:
                continue
            result = handle_builtin(args, self.err)
            if result is BuiltinResult.EXIT:
                break
            if result is BuiltinResult.CONTINUE:
                continue
            try:
                self.executor.execute(args)
            except OSError:
                return 1
        self.out.write("SLOsh exiting...\n")
        self.out.flush()
        return 0


def main(argv=None) -> int:
    """Start an interactive shell on the standard streams."""
    shell = Shell(sys.stdin, sys.stdout, sys.stderr)
    previous = signal.signal(signal.SIGINT, shell.handle_sigint)
    try:
        return shell.run()
    finally:
        signal.signal(signal.SIGINT, previous)


if __name__ == "__main__":
    sys.exit(main())