"""Find the executable file that a command name stands for."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Mapping
from typing import Optional

from pipex.errors import PipexError
from pipex.textops import split_words


def path_entries(env: Optional[Mapping[str, str]]) -> list[str]:
    """Return the non-empty directories listed in the PATH of ``env``."""
    if not env or "PATH" not in env:
        return []
    return split_words(env["PATH"], ":")


def search_path(dirs: Iterable[str], cmd: str) -> Optional[str]:
    """Look ``cmd`` up in each of ``dirs`` in turn.

    Every directory is examined.  An executable match replaces any earlier
    one; a match that exists but cannot be executed clears it.  Returns the
    surviving match, or None.
    """
    found: Optional[str] = None
    for directory in dirs:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK):
            found = candidate if os.access(candidate, os.X_OK) else None
    return found


def check_explicit(cmd: str) -> Optional[str]:
    """Check a command given as a path.

    Returns ``cmd`` if it exists and is executable, None if it does not
    exist, and raises PipexError if it exists but cannot be executed.
    """
    if not os.access(cmd, os.F_OK):
        return None
    if not os.access(cmd, os.X_OK):
        raise PipexError(
            "absolute/relative path can't be executed "
            + os.strerror(errno.EACCES)
        )
    return cmd


def resolve_command(cmd: str, env: Optional[Mapping[str, str]]) -> str:
    """Return the path to execute for ``cmd``.

    Paths starting with ``.`` or ``/``, and every command when there is no
    environment, are taken as they are; other names are searched in PATH.
    """
    if not cmd:
        raise PipexError("empty cmd ")
    if not env or cmd[0] in "./":
        path = check_explicit(cmd)
        if path is None:
            raise PipexError(f"{cmd} : {os.strerror(errno.ENOENT)}")
        return path
    path = search_path(path_entries(env), cmd)
    if path is None:
        raise PipexError(f"cmd path cannot be found {cmd}")
    return path