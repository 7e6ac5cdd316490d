"""Tokenising input lines and classifying them into commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_INPUT_SIZE = 1024
MAX_ARGS = 64
DELIMITERS = " \t\n"

PIPE_TOKEN = "|"
CLOBBER_TOKEN = ">"
APPEND_TOKEN = ">>"


class CommandKind(Enum):
    """The shape of a command line."""

    SIMPLE = "simple"
    PIPE = "pipe"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class ParsedCommand:
    """A classified command line.

    ``argv`` is the command to run (the left side for a pipe). ``right`` holds
    the right side of a pipe, ``filename`` and ``clobber`` describe a redirect.
    """

    kind: CommandKind
    argv: list[str]
    right: list[str] = field(default_factory=list)
    filename: str | None = None
    clobber: bool = False


def _tokens(line: str):
    token: list[str] = []
    for char in line:
        if char in DELIMITERS:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(char)
    if token:
        yield "".join(token)


def parse_input(line: str) -> list[str]:
    """Split a line on spaces, tabs and newlines, keeping at most MAX_ARGS - 1 tokens."""
    args: list[str] = []
    for token in _tokens(line):
        if len(args) >= MAX_ARGS - 1:
            break
        args.append(token)
    return args


def classify(args: list[str]) -> ParsedCommand:
    """Decide whether the arguments form a pipe, a redirect or a plain command.

    The last ``|`` and the last ``>``/``>>`` win. A pipe takes precedence over
    a redirect. Once any ``>`` is seen the redirect clobbers the file.
    """
    pipe_index: int | None = None
    redirect_index: int | None = None
    clobber = False
    for index, token in enumerate(args):
        if token == PIPE_TOKEN:
            pipe_index = index
        elif token == CLOBBER_TOKEN:
            redirect_index = index
            clobber = True
        elif token == APPEND_TOKEN:
            redirect_index = index

    if pipe_index is not None:
        return ParsedCommand(
            CommandKind.PIPE,
            list(args[:pipe_index]),
            right=list(args[pipe_index + 1:]),
        )
    if redirect_index is not None:
        following = args[redirect_index + 1:]
        return ParsedCommand(
            CommandKind.REDIRECT,
            list(args[:redirect_index]),
            filename=following[0] if following else None,
            clobber=clobber,
        )
    return ParsedCommand(CommandKind.SIMPLE, list(args))