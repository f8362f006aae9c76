import os

import pytest

from pipex.errors import PipexError
from pipex.resolve import check_explicit, path_entries, resolve_command, search_path


def _make(path, executable=True):
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755 if executable else 0o644)
    return path


def test_path_entries_splits_and_drops_empty():
    assert path_entries({"PATH": "/usr/bin::/bin:"}) == ["/usr/bin", "/bin"]


def test_path_entries_without_path():
    assert path_entries({"HOME": "/root"}) == []
    assert path_entries(None) == []
    assert path_entries({}) == []


def test_search_path_finds_executable(tmp_path):
    first = tmp_path / "a"
    first.mkdir()
    _make(first / "tool")
    assert search_path([str(first)], "tool") == f"{first}/tool"


def test_search_path_prefers_last_match(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make(first / "tool")
    _make(second / "tool")
    assert search_path([str(first), str(second)], "tool") == f"{second}/tool"


def test_search_path_later_non_executable_clears_match(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make(first / "tool")
    _make(second / "tool", executable=False)
    assert search_path([str(first), str(second)], "tool") is None


def test_search_path_missing(tmp_path):
    assert search_path([str(tmp_path)], "nothing-here") is None


def test_check_explicit_executable(tmp_path):
    tool = _make(tmp_path / "tool")
    assert check_explicit(str(tool)) == str(tool)


def test_check_explicit_missing(tmp_path):
    assert check_explicit(str(tmp_path / "absent")) is None


def test_check_explicit_not_executable(tmp_path):
    tool = _make(tmp_path / "tool", executable=False)
    with pytest.raises(PipexError) as info:
        check_explicit(str(tool))
    assert info.value.message.startswith("absolute/relative path can't be executed ")


def test_resolve_empty_command():
    with pytest.raises(PipexError) as info:
        resolve_command("", {"PATH": "/bin"})
    assert info.value.message == "empty cmd "


def test_resolve_through_path(tmp_path):
    _make(tmp_path / "tool")
    assert resolve_command("tool", {"PATH": str(tmp_path)}) == f"{tmp_path}/tool"


def test_resolve_not_found(tmp_path):
    with pytest.raises(PipexError) as info:
        resolve_command("tool", {"PATH": str(tmp_path)})
    assert info.value.exit_code == 1
    assert "cmd path cannot be found" in info.value.message


def test_resolve_relative_path(tmp_path, monkeypatch):
    _make(tmp_path / "tool")
    monkeypatch.chdir(tmp_path)
    assert resolve_command("./tool", {"PATH": "/nonexistent"}) == "./tool"


def test_resolve_without_env_takes_name_as_path(tmp_path, monkeypatch):
    _make(tmp_path / "tool")
    monkeypatch.chdir(tmp_path)
    assert resolve_command("tool", None) == "tool"


def test_resolve_explicit_missing(tmp_path):
    missing = os.path.join(str(tmp_path), "absent")
    with pytest.raises(PipexError):
        resolve_command(missing, {"PATH": str(tmp_path)})