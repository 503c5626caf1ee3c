# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keylog event stages
# source level:
# stage 0: resolve input paths and read each log file into lines

# translation level:
# stage 1: split lines into (keycode, action) events
# stage 2: look up the key symbol for each keycode
# stage 3: track modifier keydown/up and annotate keystream with current modifiers
# stage 4: convert key symbol + modifiers into character
