# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import logging
import pathlib

import cattrs
import cattrs.gen
from cattrs.errors import BaseValidationError, ForbiddenExtraKeysError

from .commontypes import SettingsError
from .keylog.keymap import XMODMAP_COMMAND
from .keylog.sources import STDIN_PATH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

settings_converter = cattrs.Converter()
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    keymap_command: list[str] = dataclasses.field(default_factory=lambda: list(XMODMAP_COMMAND))
    default_input: pathlib.Path = STDIN_PATH
    break_ties: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.keymap_command:
            raise ValueError("keymap_command must name a program")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unexpected log level {self.log_level}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as infile:
                raw = json.load(infile)
            return settings_converter.structure(raw, cls)
        except (OSError, ValueError, BaseValidationError, ForbiddenExtraKeysError) as exc:
            raise SettingsError(src) from exc

    @classmethod
    def defaults(cls):
        return settings_converter.structure({}, cls)


settings_converter.register_structure_hook(
    Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter, _cattrs_forbid_extra_keys=True)
)
