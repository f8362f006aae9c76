"""Command-line entry points."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from pipex.errors import HEREDOC_PATH, PipexError, remove_heredoc
from pipex.parsing import check_access, parse_commands
from pipex.pipeline import Pipeline, write_heredoc
from pipex.textops import compare_prefix

_BASIC_USAGE = "./pipex infile cmd cmd outfile\n"
_USAGE = "./pipex infile cmd cmd cmd outfile\n./pipex here_doc lim cmd cmd outfile\n"


def _environment() -> Optional[dict[str, str]]:
    env = dict(os.environ)
    return env or None


def main_basic(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``infile cmd1 cmd2 outfile`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(_BASIC_USAGE)
        return 1
    infile, outfile = args[0], args[-1]
    try:
        commands = parse_commands(args[1:-1])
        check_access(infile, outfile)
    except PipexError as exc:
        print(exc.message, file=sys.stderr)
        return exc.exit_code
    return Pipeline(commands, infile, outfile, _environment()).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run any number of commands, or a here-document, and return the status.

    ``infile cmd ... outfile`` reads a file; ``here_doc LIMITER cmd ...
    outfile`` reads standard input up to LIMITER and appends to outfile.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4 or (
        len(args) < 5 and compare_prefix(args[0], "here_doc", len(args[0])) == 0
    ):
        sys.stderr.write(_USAGE)
        return 1
    heredoc = compare_prefix(args[0], "here_doc", 8) == 0
    outfile = args[-1]
    try:
        if heredoc:
            write_heredoc(args[1], sys.stdin, HEREDOC_PATH)
            infile = HEREDOC_PATH
            first = 2
        else:
            infile = args[0]
            first = 1
        check_access(infile, outfile, heredoc)
        commands = parse_commands(args[first:-1])
        return Pipeline(
            commands, infile, outfile, _environment(), append=heredoc
        ).run()
    except PipexError as exc:
        print(exc.message, file=sys.stderr)
        return exc.exit_code
    finally:
        remove_heredoc(HEREDOC_PATH)


if __name__ == "__main__":
    raise SystemExit(main())