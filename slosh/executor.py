"""Running external commands, pipes and output redirection."""

from __future__ import annotations

import errno
import os
import signal
import subprocess
import sys
from typing import TextIO

from slosh.parser import CommandKind, classify


class Executor:
    """Starts child processes and reports their failures."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self._child: subprocess.Popen | None = None

    def child_running(self) -> int | None:
        """Process id of the child being waited for, if any."""
        return self._child.pid if self._child is not None else None

    def interrupt(self) -> bool:
        """Forward SIGINT to the running child; report whether there was one."""
        child = self._child
        if child is None:
            return False
        try:
            child.send_signal(signal.SIGINT)
        except ProcessLookupError:
            pass
        return True

    def execute(self, args: list[str]):
        """Run a tokenised command line as a pipe, a redirect or a plain command."""
        command = classify(args)
        if command.kind is CommandKind.PIPE:
            return self.run_pipe(command.argv, command.right)
        if command.kind is CommandKind.REDIRECT:
            return self.run_redirect(command.argv, command.filename, command.clobber)
        return self.run_simple(command.argv)

    def run_simple(self, argv: list[str]) -> int:
        """Run one command and return its exit status."""
        child = self._spawn(argv)
        return self._wait(child)

    def run_pipe(self, left: list[str], right: list[str]) -> tuple[int, int]:
        """Connect ``left``'s output to ``right``'s input; return both statuses."""
        left_child = self._spawn(left, stdout=subprocess.PIPE)
        right_stdin = left_child.stdout if left_child is not None else subprocess.DEVNULL
        right_child = self._spawn(right, stdin=right_stdin)
        if left_child is not None and left_child.stdout is not None:
            left_child.stdout.close()
        return self._wait(left_child), self._wait(right_child)

    def run_redirect(self, argv: list[str], filename: str | None, clobber: bool) -> int:
        """Run a command with its output written to ``filename``.

        Raises OSError after reporting it if the file cannot be opened.
        """
        flags = os.O_WRONLY | os.O_CREAT | (os.O_TRUNC if clobber else os.O_APPEND)
        try:
            if filename is None:
                raise OSError(errno.EFAULT, os.strerror(errno.EFAULT))
            fd = os.open(filename, flags, 0o644)
        except OSError as exc:
            self.err.write(f"open: {exc.strerror}\n")
            self.err.flush()
            raise
        try:
            child = self._spawn(argv, stdout=fd)
            return self._wait(child)
        finally:
            os.close(fd)

    def _spawn(self, argv: list[str], **streams) -> subprocess.Popen | None:
        self.out.flush()
        self.err.flush()
        try:
            if not argv:
                raise OSError(errno.EFAULT, os.strerror(errno.EFAULT))
            return subprocess.Popen(argv, **streams)
        except OSError as exc:
            name = argv[0] if argv else "slosh"
            self.err.write(f"{name}: {exc.strerror}\n")
            self.err.flush()
            return None

    def _wait(self, child: subprocess.Popen | None) -> int:
        if child is None:
            status = 1
        else:
            self._child = child
            try:
                code = child.wait()
            finally:
                self._child = None
            # A child killed by a signal carries no exit status.
            status = code if code > 0 else 0
        if status:
            self.out.write(f"Child exited with status {status}.\n")
            self.out.flush()
        return status