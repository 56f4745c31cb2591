"""Platform-specific path helpers."""

from __future__ import annotations

import os
import sys


def _is_windows() -> bool:
    return sys.platform == "win32"


def home() -> str:
    """Return the current user's home directory, or "/" if it cannot be found."""
    if _is_windows():
        user_profile = os.environ.get("USERPROFILE", "")
        if user_profile:
            return user_profile
        expanded = os.path.expanduser("~")
        if expanded and expanded != "~":
            return expanded
        return "/"

    home_dir = os.environ.get("HOME", "")
    if home_dir:
        return home_dir
    try:
        import pwd

        return pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError, AttributeError):
        return "/"


def separator() -> str:
    """Return the platform's path separator."""
    return "\\" if _is_windows() else "/"


def is_directory(path: str) -> bool:
    """Return True if ``path`` names an existing directory."""
    if not path:
        return False
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False