"""Result and failure types for the markdown reader.

A read produces either ``Content`` or exactly one ``ReadFailure`` variant.
Failures are plain values, not exceptions: callers branch on the variant type
and decide how to present it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Content:
    """Text of a markdown file, decoded as UTF-8."""

    text: str


# ---------------------------------------------------------------------------
# Failure variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InvalidPath:
    """The path string was empty or unusable before touching the filesystem."""

    @property
    def message(self) -> str:
        return "Invalid file path provided"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FileNotFound:
    path: str

    @property
    def message(self) -> str:
        return f"File not found: '{self.path}'"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class NotAFile:
    """The path exists but is a directory or some other non-regular entry."""

    path: str

    @property
    def message(self) -> str:
        return f"Path is not a file: '{self.path}'"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidExtension:
    path: str
    extension: str

    @property
    def message(self) -> str:
        return (
            f"File '{self.path}' has invalid extension '{self.extension}', "
            "expected '.md' or '.markdown'"
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FileTooLarge:
    path: str
    size: int

    @property
    def message(self) -> str:
        return (
            f"File '{self.path}' is too large ({self.size} bytes), "
            "maximum allowed is 10MB"
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ReadError:
    """Reading or decoding failed after every validation step passed.

    ``cause`` is the low-level exception, kept for diagnostics. It only shows
    up in the message as a short description, never as a traceback.
    """

    path: str
    cause: BaseException = field(compare=False)

    @property
    def message(self) -> str:
        return f"Error reading file '{self.path}': {describe_cause(self.cause)}"

    def __str__(self) -> str:
        return self.message


ReadFailure = Union[
    InvalidPath,
    FileNotFound,
    NotAFile,
    InvalidExtension,
    FileTooLarge,
    ReadError,
]

ReadResult = Union[Content, ReadFailure]

FAILURE_TYPES = (
    InvalidPath,
    FileNotFound,
    NotAFile,
    InvalidExtension,
    FileTooLarge,
    ReadError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_failure(result: ReadResult) -> bool:
    """Return True if a read result is one of the failure variants."""
    return isinstance(result, FAILURE_TYPES)


def describe_cause(cause: BaseException) -> str:
    """Short human-readable text for a low-level error.

    OS errors carry the path in ``str()`` already, so only ``strerror`` is used
    for them.
    """
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause) or type(cause).__name__


def from_os_error(path: str, exc: OSError) -> ReadFailure:
    """Classify a filesystem fault raised while probing ``path``.

    Not-found kinds map to ``FileNotFound`` (a file used as a directory
    component means nothing exists at the path), a directory opened as a file
    maps to ``NotAFile``, and everything else is a ``ReadError`` carrying the
    original exception.
    """
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return FileNotFound(path)
    if isinstance(exc, IsADirectoryError):
        return NotAFile(path)
    return ReadError(path, exc)
