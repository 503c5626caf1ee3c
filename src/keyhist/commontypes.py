# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pathlib


class KeyhistError(Exception):
    pass


class ExternalQueryError(KeyhistError):
    pass


class DirectoryReadError(KeyhistError):
    def __init__(self, path: pathlib.Path):
        self.path = path
        return super().__init__(f"Could not read directory `{path}`")


class FileReadError(KeyhistError):
    def __init__(self, path: pathlib.Path):
        self.path = path
        return super().__init__(f"Could not read file `{path}`")


class SettingsError(KeyhistError):
    def __init__(self, path: pathlib.Path):
        self.path = path
        return super().__init__(f"Could not load settings from `{path}`")
