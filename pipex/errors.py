"""The error type of the pipeline and the clean-up of the here-document file."""

from __future__ import annotations

import os
import sys

HEREDOC_PATH = "heredoc_tmp"


class PipexError(Exception):
    """A failure that ends the program with a message and an exit code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


def indexed_message(message: str, index: int) -> str:
    """Append the command index to ``message`` as ``"<message><index> : "``."""
    return f"{message}{index} : "


def remove_heredoc(path: str | os.PathLike[str] = HEREDOC_PATH) -> bool:
    """Delete the here-document file if it exists.

    Returns True when a file was removed.  A failure to remove an existing
    file is reported on standard error but not raised.
    """
    if not os.access(path, os.F_OK):
        return False
    try:
        os.unlink(path)
    except OSError as exc:
        print(f"{os.fspath(path)} unlink error : {exc.strerror}", file=sys.stderr)
        return False
    return True