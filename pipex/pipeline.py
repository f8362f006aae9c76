"""Run a chain of commands joined by pipes, from an input file to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import IO, Optional, Union

from pipex.errors import HEREDOC_PATH, PipexError, indexed_message
from pipex.linereader import LineReader
from pipex.resolve import resolve_command
from pipex.textops import compare_prefix

_Stdin = Union[IO[bytes], int]


def exit_status(returncode: int) -> int:
    """Turn a subprocess return code into a shell-style exit status.

    A command killed by a signal reports 128 plus the signal number.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def write_heredoc(
    limiter: str,
    stream: IO[str],
    path: Union[str, "os.PathLike[str]"] = HEREDOC_PATH,
) -> int:
    """Copy lines from ``stream`` into ``path`` until the limiter line.

    Reading stops at end of input or at a line that is a prefix of the
    limiter followed by a newline.  Returns the number of lines written.
    Raises PipexError if ``path`` exists without read and write permission.
    """
    if os.access(path, os.F_OK) and not os.access(path, os.R_OK | os.W_OK):
        raise PipexError(
            indexed_message(
                "heredoc_tmp already exists without read & write permissions : ",
                0,
            )
        )
    terminator = limiter + "\n"
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(
            indexed_message("heredoc_tmp failed ", 0) + (exc.strerror or str(exc))
        ) from exc
    written = 0
    with os.fdopen(fd, "w") as out:
        for line in LineReader(stream):
            if compare_prefix(line, terminator, len(line)) == 0:
                break
            out.write(line)
            written += 1
    return written


@dataclass
class Pipeline:
    """Commands to run in sequence, each feeding the next.

    The first command reads ``infile``; the last writes ``outfile``, which
    is truncated, or appended to when ``append`` is set.
    """

    commands: list[list[str]]
    infile: str
    outfile: str
    env: Optional[Mapping[str, str]] = None
    append: bool = False
    _env_for_child: dict[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.commands:
            raise ValueError("a pipeline needs at least one command")
        self._env_for_child = dict(self.env) if self.env else {}

    def _open_outfile(self, index: int) -> IO[bytes]:
        flags = os.O_WRONLY | os.O_CREAT
        flags |= os.O_APPEND if self.append else os.O_TRUNC
        try:
            fd = os.open(self.outfile, flags, 0o644)
        except OSError as exc:
            raise PipexError(
                indexed_message("open outfile failed ", index)
                + (exc.strerror or str(exc))
            ) from exc
        return os.fdopen(fd, "wb")

    def _open_infile(self, index: int) -> IO[bytes]:
        try:
            return open(self.infile, "rb")
        except OSError as exc:
            raise PipexError(
                indexed_message("open infile failed ", index)
                + (exc.strerror or str(exc))
            ) from exc

    def _start(
        self, index: int, argv: list[str], stdin: Optional[IO[bytes]], last: bool
    ) -> subprocess.Popen:
        opened: list[IO[bytes]] = []
        try:
            source: _Stdin
            if index == 0:
                source = self._open_infile(index)
                opened.append(source)
            elif stdin is None:
                source = subprocess.DEVNULL
            else:
                source = stdin
            if last:
                sink = self._open_outfile(index)
                opened.append(sink)
                stdout: Union[IO[bytes], int] = sink
            else:
                stdout = subprocess.PIPE
            path = resolve_command(argv[0] if argv else "", self.env)
            try:
                return subprocess.Popen(
                    argv,
                    executable=path,
                    stdin=source,
                    stdout=stdout,
                    env=self._env_for_child,
                )
            except OSError as exc:
                raise PipexError(
                    indexed_message("exexcve failed ", index)
                    + (exc.strerror or str(exc))
                ) from exc
        finally:
            for handle in opened:
                handle.close()

    def run(self) -> int:
        """Run every command and return the exit status of the last one.

        A command that cannot be started reports its error on standard
        error and counts as status 1; the next command gets empty input.
        """
        processes: list[Optional[subprocess.Popen]] = []
        previous: Optional[IO[bytes]] = None
        last_index = len(self.commands) - 1
        for index, argv in enumerate(self.commands):
            last = index == last_index
            process: Optional[subprocess.Popen]
            try:
                process = self._start(index, argv, previous, last)
            except PipexError as exc:
                print(exc.message, file=sys.stderr)
                process = None
            finally:
                if previous is not None:
                    previous.close()
            previous = process.stdout if process is not None and not last else None
            processes.append(process)

        statuses = [
            exit_status(process.wait()) if process is not None else 1
            for process in processes
        ]
        return statuses[-1]