"""Notification, message box, and file and folder selection dialogs."""

from __future__ import annotations

import sys
import warnings
from collections.abc import Sequence

from .commands import (
    file_dialog_command,
    message_command,
    notify_command,
    parse_button,
    parse_path,
    parse_paths,
)
from .executor import DEFAULT_WAIT_TIMEOUT, Executor
from .options import Button, Choice, FileDialogKind, Icon, Opt
from .quoting import format_command
from .settings import Settings, current

_ALL_FILES = ("All Files", "*")


class Dialog:
    """A dialog shown by a helper program running in the background."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else current()
        self._executor = Executor()

    def _start(self, command: list[str]) -> None:
        if self._settings.is_verbose:
            print("pfd: " + format_command(command), file=sys.stderr)
        self._executor.start_process(command)

    def ready(self, timeout: int = DEFAULT_WAIT_TIMEOUT) -> bool:
        """Wait up to ``timeout`` milliseconds; return True once the dialog is closed."""
        return self._executor.ready(timeout)

    def kill(self) -> bool:
        """Close the dialog without waiting for the user."""
        return self._executor.kill()

    def __enter__(self) -> Dialog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._executor.stop()


class Notify(Dialog):
    """A desktop notification."""

    def __init__(
        self,
        title: str,
        message: str,
        icon: Icon = Icon.INFO,
        *,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(settings=settings)
        self._start(notify_command(self._settings, title, message, icon))


class Message(Dialog):
    """A message box offering a set of buttons."""

    def __init__(
        self,
        title: str,
        text: str,
        choice: Choice = Choice.OK_CANCEL,
        icon: Icon = Icon.INFO,
        *,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(settings=settings)
        command, self._mappings = message_command(
            self._settings, title, text, choice, icon
        )
        self._start(command)

    def result(self) -> Button:
        """Wait for the user and return the button that was pressed."""
        output, exit_code = self._executor.result()
        return parse_button(output, exit_code, self._mappings)


class _FileDialog(Dialog):
    def __init__(
        self,
        kind: FileDialogKind,
        title: str,
        default_path: str,
        filters: Sequence[str],
        options: Opt,
        settings: Settings | None,
    ) -> None:
        super().__init__(settings=settings)
        self.options = options
        self._start(
            file_dialog_command(
                self._settings, kind, title, default_path, list(filters), options
            )
        )

    def _string_result(self) -> str:
        output, _ = self._executor.result()
        return parse_path(output)

    def _list_result(self) -> list[str]:
        output, _ = self._executor.result()
        return parse_paths(output)


class OpenFile(_FileDialog):
    """A dialog for choosing one or more existing files.

    Passing a bool as ``options`` is accepted for compatibility and means
    "allow several files".
    """

    def __init__(
        self,
        title: str,
        default_path: str = "",
        filters: Sequence[str] = _ALL_FILES,
        options: Opt | bool = Opt.NONE,
        *,
        settings: Settings | None = None,
    ) -> None:
        if isinstance(options, bool):
            warnings.warn(
                "use Opt.MULTISELECT instead of allow_multiselect",
                DeprecationWarning,
                stacklevel=2,
            )
            options = Opt.MULTISELECT if options else Opt.NONE
        super().__init__(
            FileDialogKind.OPEN, title, default_path, filters, Opt(options), settings
        )

    def result(self) -> list[str]:
        """Wait for the user and return the chosen files."""
        return self._list_result()


class SaveFile(_FileDialog):
    """A dialog for choosing a file name to save to.

    Passing a bool as ``options`` is accepted for compatibility and means
    "confirm overwriting".
    """

    def __init__(
        self,
        title: str,
        default_path: str = "",
        filters: Sequence[str] = _ALL_FILES,
        options: Opt | bool = Opt.NONE,
        *,
        settings: Settings | None = None,
    ) -> None:
        if isinstance(options, bool):
            warnings.warn(
                "use Opt.FORCE_OVERWRITE instead of confirm_overwrite",
                DeprecationWarning,
                stacklevel=2,
            )
            options = Opt.NONE if options else Opt.FORCE_OVERWRITE
        super().__init__(
            FileDialogKind.SAVE, title, default_path, filters, Opt(options), settings
        )

    def result(self) -> str:
        """Wait for the user and return the chosen file name, or ""."""
        return self._string_result()


class SelectFolder(_FileDialog):
    """A dialog for choosing a directory."""

    def __init__(
        self,
        title: str,
        default_path: str = "",
        options: Opt = Opt.NONE,
        *,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(
            FileDialogKind.FOLDER, title, default_path, (), Opt(options), settings
        )

    def result(self) -> str:
        """Wait for the user and return the chosen directory, or ""."""
        return self._string_result()