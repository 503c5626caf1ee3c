# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

from ..commontypes import KeyhistError


class UnknownActionError(KeyhistError):
    def __init__(self, token: str, keycode: str, origin: str, line_number: int):
        self.token = token
        self.keycode = keycode
        self.origin = origin
        self.line_number = line_number
        return super().__init__(f"Unknown key action {token!r} for keycode {keycode} at {origin}:{line_number}")


class KeyPress(enum.Enum):
    PRESSED = "(KeyPress)"
    RELEASED = "(KeyRelease)"


class LoggedEvent(msgspec.Struct, frozen=True):
    keycode: str
    action: str
    line_number: int


class KeyEvent(msgspec.Struct, frozen=True):
    symbol: str
    press: KeyPress

    @classmethod
    def pressed(cls, symbol: str):
        return cls(symbol=symbol, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, symbol: str):
        return cls(symbol=symbol, press=KeyPress.RELEASED)


class ModifierAnnotation(msgspec.Struct, frozen=True):
    alt: bool = False
    ctrl: bool = False
    shift: bool = False


class AnnotatedKeyEvent(msgspec.Struct, frozen=True):
    symbol: str
    press: KeyPress
    annotation: ModifierAnnotation
    character: typing.Optional[str] = None
    is_modifier: bool = False
