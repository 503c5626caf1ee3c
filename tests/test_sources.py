import pathlib

import pytest
import trio
from keyhist.commontypes import DirectoryReadError, FileReadError
from keyhist.keylog.sources import STDIN_PATH, iterate_lines, read_lines, resolve_paths

pytestmark = pytest.mark.trio


async def test_no_paths_means_stdin():
    assert await resolve_paths([]) == [STDIN_PATH]


async def test_no_paths_uses_given_default(tmp_path):
    assert await resolve_paths([], tmp_path / "fallback.log") == [tmp_path / "fallback.log"]


async def test_directories_expand_after_files(tmp_path):
    logs = tmp_path / "logs"
    logs.mkdir()
    (logs / "b.log").write_text("")
    (logs / "a.log").write_text("")
    (logs / "nested").mkdir()
    (logs / "nested" / "c.log").write_text("")
    single = tmp_path / "single.log"
    single.write_text("")
    missing = tmp_path / "missing.log"

    resolved = await resolve_paths([logs, single, missing])
    assert resolved == [single, missing, logs / "a.log", logs / "b.log"]
    assert all(isinstance(path, pathlib.Path) for path in resolved)


async def test_unreadable_directory(tmp_path, monkeypatch):
    logs = tmp_path / "logs"
    logs.mkdir()

    async def refuse(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(trio.Path, "iterdir", refuse)
    with pytest.raises(DirectoryReadError) as excinfo:
        await resolve_paths([logs])
    assert excinfo.value.path == logs
    assert str(logs) in str(excinfo.value)


async def test_read_lines(tmp_path):
    log = tmp_path / "events.log"
    log.write_text("10 (KeyPress)\n10 (KeyRelease)\n\n")
    assert await read_lines(log) == ["10 (KeyPress)", "10 (KeyRelease)", "", ""]


async def test_read_lines_splits_on_newline_only(tmp_path):
    log = tmp_path / "events.log"
    log.write_bytes(b"10 (KeyPress)\r10 (KeyPress)\n38 (KeyPress)\x0c38 (KeyPress)\r\n")
    assert await read_lines(log) == ["10 (KeyPress)\r10 (KeyPress)", "38 (KeyPress)\x0c38 (KeyPress)\r", ""]


async def test_read_missing_file(tmp_path):
    with pytest.raises(FileReadError) as excinfo:
        await read_lines(tmp_path / "missing.log")
    assert "missing.log" in str(excinfo.value)


async def test_read_binary_file(tmp_path):
    log = tmp_path / "events.bin"
    log.write_bytes(b"\xff\xfe\x00\x80")
    with pytest.raises(FileReadError):
        await read_lines(log)


async def test_iterate_lines():
    assert [line async for line in iterate_lines(["a", "b"])] == ["a", "b"]
