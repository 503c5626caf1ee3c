# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import logging
import pathlib

import trio

from ..commontypes import DirectoryReadError, FileReadError

logger = logging.getLogger(__name__)

STDIN_PATH = pathlib.Path("/dev/stdin")


async def resolve_paths(
    paths: collections.abc.Sequence[pathlib.Path], default: pathlib.Path = STDIN_PATH
) -> list[pathlib.Path]:
    if not paths:
        return [default]

    resolved = []
    dirs = []
    for path in paths:
        if await trio.Path(path).is_dir():
            dirs.append(path)
        else:
            resolved.append(path)

    for dir_path in dirs:
        try:
            entries = await trio.Path(dir_path).iterdir()
        except OSError as exc:
            raise DirectoryReadError(dir_path) from exc
        files = [pathlib.Path(entry) for entry in entries if await entry.is_file()]
        logger.debug("Found %d files in %s", len(files), dir_path)
        resolved.extend(sorted(files))
    return resolved


async def read_lines(path: pathlib.Path) -> list[str]:
    try:
        data = (await trio.Path(path).read_bytes()).decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path) from exc
    return data.split("\n")


async def iterate_lines(lines: collections.abc.Iterable[str]) -> collections.abc.AsyncIterator[str]:
    for line in lines:
        await trio.lowlevel.checkpoint()
        yield line
