# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections
import collections.abc
import logging
import operator
import pathlib
import typing

from .keylog.keystreams import make_keystream
from .keylog.sources import iterate_lines, read_lines

if typing.TYPE_CHECKING:
    from .keylog.types import AnnotatedKeyEvent

logger = logging.getLogger(__name__)


async def count_characters(
    keystream: collections.abc.AsyncIterable[AnnotatedKeyEvent], histogram: collections.Counter[str]
) -> collections.Counter[str]:
    async for event in keystream:
        if event.character is not None:
            histogram[event.character] += 1
    return histogram


async def build_histogram(
    paths: collections.abc.Iterable[pathlib.Path], keymap: collections.abc.Mapping[str, str]
) -> collections.Counter[str]:
    histogram: collections.Counter[str] = collections.Counter()
    for path in paths:
        lines = await read_lines(path)
        logger.debug("Translating %d lines from %s", len(lines), path)
        async with make_keystream(iterate_lines(lines), keymap, origin=str(path)) as keystream:
            await count_characters(keystream, histogram)
    return histogram


def rank_entries(histogram: collections.abc.Mapping[str, int], break_ties: bool = False) -> list[tuple[str, int]]:
    """Order histogram entries by ascending count.

    The sort is stable, so characters with equal counts keep the order they were first seen in.
    With break_ties, equal counts are ordered by character instead.
    """
    entries = list(histogram.items())
    if break_ties:
        entries.sort(key=operator.itemgetter(0))
    entries.sort(key=operator.itemgetter(1))
    return entries


def format_entries(entries: collections.abc.Iterable[tuple[str, int]]) -> list[str]:
    return [f"{character}: {count}" for character, count in entries]
