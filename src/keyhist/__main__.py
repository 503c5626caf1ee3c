# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import sys

from .scripts import histogram_cli

sys.exit(histogram_cli())
