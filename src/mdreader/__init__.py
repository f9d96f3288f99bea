"""mdreader - Validate and read markdown files."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    Content,
    FileNotFound,
    FileTooLarge,
    InvalidExtension,
    InvalidPath,
    NotAFile,
    ReadError,
    ReadFailure,
    ReadResult,
    is_failure,
)
from .reader import MAX_FILE_SIZE, is_markdown_file, read_markdown_file  # noqa: E402

__all__ = [
    "Content",
    "FileNotFound",
    "FileTooLarge",
    "InvalidExtension",
    "InvalidPath",
    "NotAFile",
    "ReadError",
    "ReadFailure",
    "ReadResult",
    "MAX_FILE_SIZE",
    "is_failure",
    "is_markdown_file",
    "read_markdown_file",
]
