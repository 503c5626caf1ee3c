# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import collections
import logging
import pathlib
import typing

import trio

from .commontypes import KeyhistError
from .histogram import build_histogram, format_entries, rank_entries
from .keylog.keymap import load_keymap, load_keymap_file
from .keylog.sources import resolve_paths
from .settings import Settings

logger = logging.getLogger(__name__)


async def compute_histogram(
    paths: list[pathlib.Path], settings: Settings, keymap_path: typing.Optional[pathlib.Path] = None
) -> collections.Counter[str]:
    if keymap_path is not None:
        keymap = await load_keymap_file(keymap_path)
    else:
        keymap = await load_keymap(settings.keymap_command)
    resolved = await resolve_paths(paths, settings.default_input)
    logger.debug("Reading %d input files", len(resolved))
    return await build_histogram(resolved, keymap)


histogram_parser = argparse.ArgumentParser(
    prog="keyhist", description="Count the characters typed in keylogger event files."
)
histogram_parser.add_argument("paths", nargs="*", type=pathlib.Path, metavar="PATH", help="event files or directories of them")
histogram_parser.add_argument("--settings", type=pathlib.Path, help="JSON settings file")
histogram_parser.add_argument("--keymap", type=pathlib.Path, help="saved `xmodmap -pke` output to use instead of running xmodmap")
histogram_parser.add_argument("--sort-ties", action="store_true", help="order characters with equal counts alphabetically")
histogram_parser.add_argument("-v", "--verbose", action="store_true", help="log debugging output")


def histogram_cli(argv: typing.Optional[list[str]] = None):
    args = histogram_parser.parse_args(argv)
    try:
        settings = Settings.load(args.settings) if args.settings is not None else Settings.defaults()
    except KeyhistError as exc:
        histogram_parser.exit(1, f"keyhist: error: {exc}\n")

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.logging_level)

    try:
        histogram = trio.run(compute_histogram, args.paths, settings, args.keymap)
    except KeyhistError as exc:
        logger.debug("Could not calculate histogram", exc_info=True)
        histogram_parser.exit(1, f"keyhist: error: {exc}\n")

    for line in format_entries(rank_entries(histogram, break_ties=args.sort_ties or settings.break_ties)):
        print(line)
    return 0
