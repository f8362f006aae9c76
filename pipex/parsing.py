"""Checks on the command line: commands and the files at either end."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable
from typing import Optional

from pipex.errors import PipexError
from pipex.textops import split_words


def is_blank(text: str) -> bool:
    """Return True if ``text`` is empty or holds only spaces."""
    return all(ch == " " for ch in text)


def parse_commands(args: Iterable[str]) -> list[list[str]]:
    """Split each command string on spaces into its argument list.

    Raises PipexError if any command is empty or only spaces.
    """
    commands = list(args)
    if any(is_blank(command) for command in commands):
        raise PipexError("there is an empty cmd ")
    return [split_words(command, " ") for command in commands]


def check_access(
    infile: Optional[str], outfile: str, heredoc: bool = False
) -> None:
    """Make sure the input can be read and an existing output written.

    With ``heredoc`` the input file is not checked.  Raises PipexError.
    """
    if not heredoc and infile is not None:
        if not os.access(infile, os.F_OK):
            raise PipexError("infile : " + os.strerror(errno.ENOENT))
        if not os.access(infile, os.R_OK):
            raise PipexError("infile : " + os.strerror(errno.EACCES))
    if os.access(outfile, os.F_OK) and not os.access(outfile, os.W_OK):
        raise PipexError("outfile : " + os.strerror(errno.EACCES))