# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import collections.abc
import logging
from contextlib import AsyncExitStack, aclosing, asynccontextmanager
from typing import Any, AsyncIterable, AsyncIterator, cast

import msgspec

from .symbols import MODIFIER_SYMBOLS, SHIFTED_SYMBOLS, UNSHIFTED_SYMBOLS, Modifier
from .types import AnnotatedKeyEvent, KeyEvent, KeyPress, LoggedEvent, ModifierAnnotation, UnknownActionError

logger = logging.getLogger(__name__)


class Section(abc.ABC):
    @abc.abstractmethod
    def pump(self, source: AsyncIterable[Any]) -> AsyncIterator[Any]: ...


# stage 1: split raw lines into keycode and action tokens, dropping anything else
class SplitEvents(Section):
    async def pump(self, source: AsyncIterable[str]) -> AsyncIterator[LoggedEvent]:
        line_number = 0
        async for line in source:
            line_number += 1
            tokens = line.split()
            if len(tokens) != 2:
                continue
            keycode, action = tokens
            yield LoggedEvent(keycode=keycode, action=action, line_number=line_number)


# stage 2: look up the key symbol; unknown keycodes are noise, unknown actions are fatal
class LookupSymbols(Section):
    def __init__(self, keymap: collections.abc.Mapping[str, str], origin: str = "<input>"):
        self.keymap = keymap
        self.origin = origin

    async def pump(self, source: AsyncIterable[LoggedEvent]) -> AsyncIterator[KeyEvent]:
        async for event in source:
            symbol = self.keymap.get(event.keycode)
            if symbol is None:
                logger.debug("Skipping unknown keycode %s at %s:%d", event.keycode, self.origin, event.line_number)
                continue
            try:
                press = KeyPress(event.action)
            except ValueError:
                raise UnknownActionError(event.action, event.keycode, self.origin, event.line_number) from None
            yield KeyEvent(symbol=symbol, press=press)


# stage 3: track modifier keydown/up and annotate keystream with current modifiers
class ModifierTracking(Section):
    def __init__(self):
        self.momentary_state = {modifier: False for modifier in Modifier}

    def _make_annotation(self):
        return ModifierAnnotation(
            alt=self.momentary_state[Modifier.ALT_L] or self.momentary_state[Modifier.ALT_R],
            ctrl=self.momentary_state[Modifier.CONTROL_L] or self.momentary_state[Modifier.CONTROL_R],
            shift=self.momentary_state[Modifier.SHIFT_L] or self.momentary_state[Modifier.SHIFT_R],
        )

    async def pump(self, source: AsyncIterable[KeyEvent]) -> AsyncIterator[AnnotatedKeyEvent]:
        async for event in source:
            is_modifier = event.symbol in MODIFIER_SYMBOLS
            if is_modifier:
                self.momentary_state[Modifier(event.symbol)] = event.press is KeyPress.PRESSED
            yield AnnotatedKeyEvent(
                symbol=event.symbol,
                press=event.press,
                annotation=self._make_annotation(),
                is_modifier=is_modifier,
            )


# stage 4: convert key symbol + modifier into character
class MakeCharacter(Section):
    def __init__(
        self,
        shifted: collections.abc.Mapping[str, str] = SHIFTED_SYMBOLS,
        unshifted: collections.abc.Mapping[str, str] = UNSHIFTED_SYMBOLS,
    ):
        self.shifted = shifted
        self.unshifted = unshifted

    async def pump(self, source: AsyncIterable[AnnotatedKeyEvent]) -> AsyncIterator[AnnotatedKeyEvent]:
        async for event in source:
            if event.is_modifier:
                yield event
                continue
            table = self.shifted if event.annotation.shift else self.unshifted
            yield msgspec.structs.replace(event, character=table.get(event.symbol, event.symbol))


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with AsyncExitStack() as stack:
        section_input = first_source
        for section in sections:
            section_input = await stack.enter_async_context(aclosing(section.pump(section_input)))
        yield section_input


@asynccontextmanager
async def make_keystream(
    line_source: AsyncIterable[str],
    keymap: collections.abc.Mapping[str, str],
    origin: str = "<input>",
):
    # A fresh ModifierTracking per keystream, so held modifiers never carry over between files.
    sections = [
        SplitEvents(),
        LookupSymbols(keymap, origin),
        ModifierTracking(),
        MakeCharacter(),
    ]

    async with pump_all(line_source, *sections) as keystream:
        yield cast(AsyncIterator[AnnotatedKeyEvent], keystream)
