import errno
import os

import pytest

from pipex.errors import PipexError
from pipex.parsing import check_access, is_blank, parse_commands


@pytest.mark.parametrize("text", ["", " ", "    "])
def test_is_blank_true(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", ["ls", " ls ", "\t"])
def test_is_blank_false(text):
    assert is_blank(text) is False


def test_parse_commands_splits_on_spaces():
    assert parse_commands(["ls -l", "wc  -l "]) == [["ls", "-l"], ["wc", "-l"]]


def test_parse_commands_keeps_order_and_count():
    args = ["cat", "grep a", "sort -r", "uniq"]
    result = parse_commands(args)
    assert len(result) == len(args)
    assert [" ".join(words) for words in result] == args


def test_parse_commands_tabs_are_not_separators():
    assert parse_commands(["tr\t-d"]) == [["tr\t-d"]]


@pytest.mark.parametrize("bad", ["", "   "])
def test_parse_commands_rejects_blank(bad):
    with pytest.raises(PipexError) as info:
        parse_commands(["ls", bad])
    assert info.value.message == "there is an empty cmd "


def test_check_access_missing_infile(tmp_path):
    with pytest.raises(PipexError) as info:
        check_access(str(tmp_path / "absent"), str(tmp_path / "out"))
    assert info.value.message == "infile : " + os.strerror(errno.ENOENT)


def test_check_access_does_not_create_outfile(tmp_path):
    infile = tmp_path / "in"
    infile.write_text("data\n")
    outfile = tmp_path / "out"
    assert check_access(str(infile), str(outfile)) is None
    assert not outfile.exists()


def test_check_access_heredoc_ignores_infile(tmp_path):
    outfile = tmp_path / "out"
    assert check_access(str(tmp_path / "absent"), str(outfile), heredoc=True) is None
    assert not outfile.exists()


def test_check_access_heredoc_with_no_infile(tmp_path):
    outfile = tmp_path / "out"
    outfile.write_text("keep")
    check_access(None, str(outfile), heredoc=True)
    assert outfile.read_text() == "keep"