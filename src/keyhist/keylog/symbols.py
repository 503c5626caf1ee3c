# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum
import types

# Symbol names are the ones xmodmap reports for a US layout. Letters are already
# reported in the case the keymap gives them, so only digits and punctuation are
# remapped here.


class Modifier(enum.Enum):
    SHIFT_L = "Shift_L"
    SHIFT_R = "Shift_R"
    CONTROL_L = "Control_L"
    CONTROL_R = "Control_R"
    ALT_L = "Alt_L"
    ALT_R = "Alt_R"


MODIFIER_SYMBOLS = frozenset(modifier.value for modifier in Modifier)


# Character produced while either shift key is held.
SHIFTED_SYMBOLS = types.MappingProxyType(
    {
        "1": "!",
        "2": "@",
        "3": "#",
        "4": "$",
        "5": "%",
        "6": "^",
        "7": "&",
        "8": "*",
        "9": "(",
        "0": ")",
        "minus": "_",
        "equal": "+",
        "bracketright": "{",
        "bracketleft": "}",
        "semicolon": ":",
        "apostrophe": '"',
        "backslash": "|",
        "comma": "<",
        "period": ">",
        "slash": "?",
        "grave": "~",
    }
)

# Character produced with no shift key held. Digits and letters are their own symbol.
UNSHIFTED_SYMBOLS = types.MappingProxyType(
    {
        "minus": "-",
        "equal": "=",
        "bracketright": "]",
        "bracketleft": "[",
        "semicolon": ";",
        "apostrophe": "'",
        "backslash": "\\",
        "comma": ",",
        "period": ".",
        "slash": "/",
        "grave": "`",
    }
)
