"""Flags, enumerations and signal arguments shared across the settings library."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SettingOption(enum.IntFlag):
    """Per-setting behaviour flags."""

    DEFAULT = 0
    DO_NOT_WRITE_TO_JSON = 1 << 1
    # Never saved locally, nor registered locally with any callbacks.
    REMOTE = 1 << 2
    # Compare the serialized old and new values before updating the setting.
    COMPARE_BEFORE_SET = 1 << 3


class Source(enum.Enum):
    """Where a setting change originated."""

    UNSET = enum.auto()
    SETTER = enum.auto()
    UNMARSHAL = enum.auto()
    ON_CONNECT = enum.auto()
    EXTERNAL = enum.auto()


@dataclass
class SignalArgs:
    """Extra information passed along with a setting update."""

    source: Source = Source.UNSET
    path: str = ""
    write_to_file: bool = True
    compare_before_set: bool = False


class SaveMethod(enum.IntFlag):
    """When a settings manager writes its document to disk."""

    SAVE_MANUALLY = 0
    SAVE_ON_EXIT = 1 << 1
    SAVE_ON_SETTING_CHANGE = 1 << 2
    SAVE_ALL_THE_TIME = SAVE_ON_EXIT | SAVE_ON_SETTING_CHANGE


class LoadError(enum.Enum):
    """Outcome of loading a settings file."""

    NO_ERROR = enum.auto()
    CANNOT_OPEN_FILE = enum.auto()
    FILE_HANDLE_ERROR = enum.auto()
    FILE_READ_ERROR = enum.auto()
    FILE_SEEK_ERROR = enum.auto()
    JSON_PARSE_ERROR = enum.auto()