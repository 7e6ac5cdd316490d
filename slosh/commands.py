"""Built-in shell commands."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TextIO


class BuiltinResult(Enum):
    """Outcome of trying a line as a built-in command."""

    EXIT = 0
    CONTINUE = 1
    NOT_BUILTIN = -1


def handle_builtin(args: list[str], err: TextIO | None = None) -> BuiltinResult:
    """Run ``exit`` or ``cd`` if ``args`` names one of them."""
    err = sys.stderr if err is None else err
    name = args[0]
    if name == "exit":
        return BuiltinResult.EXIT
    if name == "cd":
        if len(args) < 2:
            err.write("cd: missing argument\n")
            return BuiltinResult.CONTINUE
        try:
            os.chdir(args[1])
        except OSError as exc:
            err.write(f"cd: {exc.strerror}\n")
        return BuiltinResult.CONTINUE
    return BuiltinResult.NOT_BUILTIN