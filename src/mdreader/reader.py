"""Validated markdown file reading.

Checks run in a fixed order and stop at the first failure:
path -> existence -> type -> extension -> size -> read/decode.
"""

from __future__ import annotations

import os
import stat

import structlog

from .errors import (
    Content,
    FileTooLarge,
    InvalidExtension,
    InvalidPath,
    NotAFile,
    ReadError,
    ReadResult,
    from_os_error,
)

log = structlog.get_logger()

# 10 MiB
MAX_FILE_SIZE = 10 * 1024 * 1024

MARKDOWN_EXTENSIONS = ("md", "markdown")


def extract_extension(path: str) -> str:
    """Return the extension of the final path segment, without the dot.

    A dot at the very start of the name does not start an extension, so
    ``.md`` and ``README`` both yield an empty string while ``..md`` yields
    ``md``.
    """
    name = os.path.basename(path.rstrip("/" + os.sep))
    head, sep, ext = name.rpartition(".")
    if not sep or not head:
        return ""
    return ext


def is_markdown_file(path: str) -> bool:
    """Check the extension only; the path does not have to exist."""
    return extract_extension(path).lower() in MARKDOWN_EXTENSIONS


def read_markdown_file(path: str) -> ReadResult:
    """Read a markdown file and return its content or the first failure found.

    Never raises for expected conditions (missing file, wrong extension,
    oversize, permission or decode problems); those come back as a failure
    variant. The size is checked from metadata before reading, and the read
    is capped one byte past the limit so a file that grew in the meantime is
    still rejected without being loaded whole.
    """
    if not path or not path.strip() or "\0" in path:
        log.debug("markdown_read_rejected", reason="invalid_path")
        return InvalidPath()

    log.debug("markdown_read_started", path=path)

    try:
        st = os.stat(path)
    except OSError as e:
        failure = from_os_error(path, e)
        log.debug("markdown_read_rejected", path=path, reason=type(failure).__name__)
        return failure

    if not stat.S_ISREG(st.st_mode):
        log.debug("markdown_read_rejected", path=path, reason="NotAFile")
        return NotAFile(path)

    if not is_markdown_file(path):
        extension = extract_extension(path)
        log.debug(
            "markdown_read_rejected",
            path=path,
            reason="InvalidExtension",
            extension=extension,
        )
        return InvalidExtension(path, extension)

    if st.st_size > MAX_FILE_SIZE:
        log.debug(
            "markdown_read_rejected", path=path, reason="FileTooLarge", size=st.st_size
        )
        return FileTooLarge(path, st.st_size)

    try:
        with open(path, "rb") as f:
            data = f.read(MAX_FILE_SIZE + 1)
            if len(data) > MAX_FILE_SIZE:
                size = os.fstat(f.fileno()).st_size
                log.debug(
                    "markdown_read_rejected", path=path, reason="FileTooLarge", size=size
                )
                return FileTooLarge(path, max(size, len(data)))
        text = data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("markdown_read_failed", path=path, error=str(e))
        return ReadError(path, e)

    log.debug("markdown_read_finished", path=path, size=len(data))
    return Content(text)
