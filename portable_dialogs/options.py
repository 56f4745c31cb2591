"""Enumerations shared by all dialog kinds."""

from __future__ import annotations

import enum


class Button(enum.IntEnum):
    """The button a user pressed to close a message box."""

    CANCEL = -1
    OK = 0
    YES = 1
    NO = 2
    ABORT = 3
    RETRY = 4
    IGNORE = 5


class Choice(enum.IntEnum):
    """The set of buttons a message box offers."""

    OK = 0
    OK_CANCEL = 1
    YES_NO = 2
    YES_NO_CANCEL = 3
    RETRY_CANCEL = 4
    ABORT_RETRY_IGNORE = 5


class Icon(enum.IntEnum):
    """The icon shown next to a message or notification."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    QUESTION = 3


class Opt(enum.IntFlag):
    """Extra option flags for file and folder dialogs."""

    NONE = 0
    # For file open, allow selecting several files.
    MULTISELECT = 0x1
    # For file save, overwrite without asking for confirmation.
    FORCE_OVERWRITE = 0x2
    # For folder select, start at the given path rather than the last one used.
    FORCE_PATH = 0x4


class FileDialogKind(enum.Enum):
    """The kind of file dialog to show."""

    OPEN = "open"
    SAVE = "save"
    FOLDER = "folder"