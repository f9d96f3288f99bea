"""Positional argument validation for the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Characters rejected in a path argument
INVALID_PATH_CHARS = ("\0", "<", ">", ":", '"', "|", "?", "*")


@dataclass(frozen=True)
class NoArguments:
    @property
    def message(self) -> str:
        return "No arguments provided"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class EmptyPath:
    @property
    def message(self) -> str:
        return "File path cannot be empty"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidPathArgument:
    path: str

    @property
    def message(self) -> str:
        return f"Invalid file path: '{self.path}'"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnknownFlag:
    flag: str

    @property
    def message(self) -> str:
        return f"Unknown flag: '{self.flag}'"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TooManyArguments:
    count: int

    @property
    def message(self) -> str:
        return f"Too many arguments: expected 1 file path, got {self.count}"

    def __str__(self) -> str:
        return self.message


ParseError = Union[
    NoArguments, EmptyPath, InvalidPathArgument, UnknownFlag, TooManyArguments
]

PARSE_ERROR_TYPES = (
    NoArguments,
    EmptyPath,
    InvalidPathArgument,
    UnknownFlag,
    TooManyArguments,
)


def is_valid_path(path: str) -> bool:
    """Return False for empty, blank, or reserved-character paths."""
    if not path or not path.strip():
        return False
    return not any(c in path for c in INVALID_PATH_CHARS)


def parse_arguments(argv: list[str]) -> Union[str, ParseError]:
    """Resolve the leftover command-line arguments into a single file path.

    ``argv`` holds what remains after recognised options were consumed, so
    anything here that still looks like a flag is unknown.
    """
    if not argv:
        return NoArguments()

    first = argv[0]
    if first.startswith("-"):
        return UnknownFlag(first)

    if len(argv) > 1:
        return TooManyArguments(len(argv))

    if not first.strip():
        return EmptyPath()

    if not is_valid_path(first):
        return InvalidPathArgument(first)

    return first
