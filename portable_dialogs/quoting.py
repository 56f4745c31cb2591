"""String quoting and naming helpers used to build helper commands."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .options import Choice, Icon

_POWERSHELL_SPECIAL = re.compile(r"['\"]")
_OSASCRIPT_SPECIAL = re.compile(r'[\\"]')

_BUTTON_NAMES = {
    Choice.OK_CANCEL: "okcancel",
    Choice.YES_NO: "yesno",
    Choice.YES_NO_CANCEL: "yesnocancel",
    Choice.RETRY_CANCEL: "retrycancel",
    Choice.ABORT_RETRY_IGNORE: "abortretryignore",
}

_ICON_NAMES = {
    Icon.WARNING: "warning",
    Icon.ERROR: "error",
    Icon.QUESTION: "question",
}


def powershell_quote(text: str) -> str:
    """Quote a string for PowerShell by doubling every ' and "."""
    return "'" + _POWERSHELL_SPECIAL.sub(lambda m: m.group(0) * 2, text) + "'"


def osascript_quote(text: str) -> str:
    """Quote a string for AppleScript by escaping backslashes and double quotes."""
    return '"' + _OSASCRIPT_SPECIAL.sub(lambda m: "\\" + m.group(0), text) + '"'


def shell_quote(text: str) -> str:
    """Quote a string for a POSIX shell, replacing ' with '\\''."""
    return "'" + text.replace("'", "'\\''") + "'"


def buttons_to_name(choice: Choice) -> str:
    """Return the short name of a button set; plain OK is the fallback."""
    return _BUTTON_NAMES.get(choice, "ok")


def icon_name(icon: Icon, windows: bool = False) -> str:
    """Return the helper's name for an icon.

    The information icon is called "info" on Windows and "information"
    elsewhere.
    """
    if icon in _ICON_NAMES:
        return _ICON_NAMES[icon]
    return "info" if windows else "information"


def format_command(command: Iterable[str]) -> str:
    """Join command arguments with single spaces, for diagnostic output."""
    return " ".join(command)