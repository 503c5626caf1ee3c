import collections

import pytest
from keyhist.histogram import build_histogram, format_entries, rank_entries
from keyhist.keylog.sources import resolve_paths
from keyhist.keylog.types import UnknownActionError

KEYMAP = {"10": "1", "38": "a", "50": "Shift_L", "56": "b", "61": "slash"}


@pytest.mark.trio
async def test_directory_of_files_aggregates(tmp_path):
    logs = tmp_path / "logs"
    logs.mkdir()
    (logs / "first.log").write_text("38 (KeyPress)\n")
    (logs / "second.log").write_text("38 (KeyPress)\n")
    histogram = await build_histogram(await resolve_paths([logs]), KEYMAP)
    assert histogram == {"a": 2}


@pytest.mark.trio
async def test_shift_scenario(tmp_path):
    log = tmp_path / "events.log"
    log.write_text("50 (KeyPress)\n10 (KeyPress)\n50 (KeyRelease)\n")
    assert await build_histogram([log], KEYMAP) == {"!": 1}


@pytest.mark.trio
async def test_only_noise_gives_empty_histogram(tmp_path):
    log = tmp_path / "noise.log"
    log.write_text("\n\n   \nlone\n1 2 3\n999 (KeyPress)\n")
    assert await build_histogram([log], KEYMAP) == {}


@pytest.mark.trio
@pytest.mark.parametrize("separator", (b"\r", b"\x0c", b"\x0b", b"\x1c", "\u2028".encode()))
async def test_only_newline_separates_events(tmp_path, separator: bytes):
    log = tmp_path / "events.log"
    log.write_bytes(b"10 (KeyPress)" + separator + b"10 (KeyPress)\n38 (KeyPress)\r\n")
    assert await build_histogram([log], KEYMAP) == {"a": 1}


@pytest.mark.trio
async def test_shift_does_not_leak_between_files(tmp_path):
    first = tmp_path / "first.log"
    first.write_text("50 (KeyPress)\n61 (KeyPress)\n")
    second = tmp_path / "second.log"
    second.write_text("61 (KeyPress)\n")
    assert await build_histogram([first, second], KEYMAP) == {"?": 1, "/": 1}


@pytest.mark.trio
async def test_bad_action_aborts_whole_run(tmp_path):
    good = tmp_path / "good.log"
    good.write_text("38 (KeyPress)\n38 (KeyRelease)\n")
    bad = tmp_path / "bad.log"
    bad.write_text("38 (KeyPress)\n38 (KeyRepeat)\n")
    with pytest.raises(UnknownActionError) as excinfo:
        await build_histogram([good, bad], KEYMAP)
    assert excinfo.value.origin == str(bad)


@pytest.mark.trio
async def test_histogram_is_repeatable(tmp_path):
    log = tmp_path / "events.log"
    log.write_text("38 (KeyPress)\n50 (KeyPress)\n10 (KeyPress)\n10 (KeyRelease)\n50 (KeyRelease)\n56 (KeyPress)\n")
    assert await build_histogram([log], KEYMAP) == await build_histogram([log], KEYMAP)


def test_rank_by_count():
    histogram = collections.Counter({"c": 3, "a": 1, "b": 2})
    assert rank_entries(histogram) == [("a", 1), ("b", 2), ("c", 3)]


def test_rank_keeps_first_seen_order_for_ties():
    histogram = collections.Counter()
    for character in "zyxzyx":
        histogram[character] += 1
    assert rank_entries(histogram) == [("z", 2), ("y", 2), ("x", 2)]
    assert rank_entries(histogram, break_ties=True) == [("x", 2), ("y", 2), ("z", 2)]


def test_format_entries():
    assert format_entries([("!", 1), (":", 12)]) == ["!: 1", ":: 12"]
    assert format_entries([]) == []
