# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import logging
import pathlib
import subprocess

import trio

from ..commontypes import ExternalQueryError

logger = logging.getLogger(__name__)

XMODMAP_COMMAND = ("xmodmap", "-pke")
SEPARATOR = " = "


def parse_keymap(raw: str) -> dict[str, str]:
    """Parse `xmodmap -pke` style output into a keycode to key symbol table.

    Lines look like `keycode  10 = 1 exclam 1 exclam`. Only the first symbol after the
    separator is kept; lines without exactly one separator are ignored.
    """
    keymap = {}
    for line in raw.split("\n"):
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            continue
        left, right = parts
        index_tokens = left.split()
        symbols = right.split()
        if len(index_tokens) < 2 or not symbols:
            continue
        keymap[index_tokens[1]] = symbols[0]
    return keymap


async def load_keymap(command: collections.abc.Sequence[str] = XMODMAP_COMMAND) -> dict[str, str]:
    try:
        result = await trio.run_process(list(command), capture_stdout=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ExternalQueryError(f"Could not get keycodes from `{' '.join(command)}`") from exc
    try:
        raw = result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ExternalQueryError(f"Could not parse output of `{' '.join(command)}`") from exc
    keymap = parse_keymap(raw)
    logger.debug("Loaded %d keycodes from %s", len(keymap), command[0])
    return keymap


async def load_keymap_file(path: pathlib.Path) -> dict[str, str]:
    try:
        raw = (await trio.Path(path).read_bytes()).decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExternalQueryError(f"Could not read keycodes from `{path}`") from exc
    keymap = parse_keymap(raw)
    logger.debug("Loaded %d keycodes from %s", len(keymap), path)
    return keymap
