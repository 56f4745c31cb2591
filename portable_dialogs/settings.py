"""Detection of the desktop helper programs used to show dialogs."""

from __future__ import annotations

import os
import re
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from .executor import Executor

_VERBOSE_OFF = re.compile(r"(|0|no|false)", re.IGNORECASE)
_HELPERS = ("zenity", "matedialog", "qarma", "kdialog")


def check_program(program: str) -> bool:
    """Return True if ``program`` can be found with ``which``."""
    if sys.platform == "win32":
        return False
    with Executor() as executor:
        executor.start_process(["/bin/sh", "-c", "which " + program])
        _, exit_code = executor.result()
    return exit_code == 0


def verbose_from_env(value: str) -> bool:
    """Interpret a PFD_VERBOSE value: empty, 0, no and false mean off."""
    return _VERBOSE_OFF.fullmatch(value) is None


@dataclass
class Settings:
    """Which helpers are installed, and whether commands are echoed."""

    platform: str = field(default_factory=lambda: sys.platform)
    is_scanned: bool = False
    is_verbose: bool = False
    has_zenity: bool = False
    has_matedialog: bool = False
    has_qarma: bool = False
    has_kdialog: bool = False
    is_vista: bool = False
    checker: Callable[[str], bool] = field(
        default=check_program, repr=False, compare=False
    )

    def scan(self) -> None:
        """Read the environment and look for installed helper programs."""
        if verbose_from_env(os.environ.get("PFD_VERBOSE", "")):
            self.is_verbose = True

        if self.platform == "win32":
            self.is_vista = True
        elif self.platform != "darwin":
            self.has_zenity = self.checker("zenity")
            self.has_matedialog = self.checker("matedialog")
            self.has_qarma = self.checker("qarma")
            self.has_kdialog = self.checker("kdialog")

            # With several helpers available, prefer the desktop's own.
            if self.has_zenity and self.has_kdialog:
                desktop_name = os.environ.get("XDG_SESSION_DESKTOP", "")
                if desktop_name == "gnome":
                    self.has_kdialog = False
                elif desktop_name == "KDE":
                    self.has_zenity = False

        self.is_scanned = True

    def is_osascript(self) -> bool:
        """Whether dialogs are shown through AppleScript."""
        return self.platform == "darwin"

    def is_zenity(self) -> bool:
        """Whether a zenity-compatible helper is available."""
        return self.has_zenity or self.has_matedialog or self.has_qarma

    def is_kdialog(self) -> bool:
        """Whether kdialog is available."""
        return self.has_kdialog

    def desktop_helper(self) -> list[str]:
        """Return the start of the command line for the chosen helper."""
        if self.is_osascript():
            return ["osascript"]
        if self.has_zenity:
            return ["zenity"]
        if self.has_matedialog:
            return ["matedialog"]
        if self.has_qarma:
            return ["qarma"]
        if self.has_kdialog:
            return ["kdialog"]
        return ["echo"]


_lock = threading.Lock()
_current = Settings()


def current(resync: bool = False) -> Settings:
    """Return the process-wide settings, scanning them first if needed."""
    with _lock:
        if resync:
            _current.is_scanned = False
        if not _current.is_scanned:
            _current.scan()
        return _current


def available() -> bool:
    """Whether dialogs can be shown on this platform."""
    if sys.platform in ("win32", "darwin"):
        return True
    state = current()
    return any(getattr(state, "has_" + name) for name in _HELPERS)


def verbose(value: bool) -> None:
    """Turn echoing of helper commands on or off."""
    current().is_verbose = value


def rescan() -> None:
    """Look for installed helper programs again."""
    current(resync=True)