"""Build helper command lines for dialogs and interpret their output."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from .options import Button, Choice, FileDialogKind, Icon, Opt
from .paths import is_directory
from .quoting import icon_name, osascript_quote
from .settings import Settings

_WHITESPACE = re.compile(r"\s+")


def _osx_icon(name: str) -> str:
    return (
        "alias ((path to library folder from system domain) as text "
        '& "CoreServices:CoreTypes.bundle:Contents:Resources:' + name + '.icns")'
    )


_OSASCRIPT_BUTTONS = {
    Choice.OK_CANCEL: (
        'buttons {"OK", "Cancel"} default button "OK" cancel button "Cancel"',
        Button.CANCEL,
    ),
    Choice.YES_NO: (
        'buttons {"Yes", "No"} default button "Yes" cancel button "No"',
        Button.NO,
    ),
    Choice.YES_NO_CANCEL: (
        'buttons {"Yes", "No", "Cancel"} default button "Yes" cancel button "Cancel"',
        Button.CANCEL,
    ),
    Choice.RETRY_CANCEL: (
        'buttons {"Retry", "Cancel"} default button "Retry" cancel button "Cancel"',
        Button.CANCEL,
    ),
    Choice.ABORT_RETRY_IGNORE: (
        'buttons {"Abort", "Retry", "Ignore"} default button "Abort" cancel button "Retry"',
        Button.RETRY,
    ),
}
_OSASCRIPT_OK = ('buttons {"OK"} default button "OK" cancel button "OK"', Button.OK)

_OSASCRIPT_ICONS = {
    Icon.WARNING: "caution",
    Icon.ERROR: "stop",
    Icon.QUESTION: _osx_icon("GenericQuestionMarkIcon"),
}

_ZENITY_CHOICES = {
    Choice.OK_CANCEL: ["--question", "--cancel-label=Cancel", "--ok-label=OK"],
    # Plain --question would make "No" return -1, unlike Yes/No/Cancel.
    Choice.YES_NO: ["--question", "--switch", "--extra-button=No", "--extra-button=Yes"],
    Choice.YES_NO_CANCEL: [
        "--question", "--switch",
        "--extra-button=Cancel", "--extra-button=No", "--extra-button=Yes",
    ],
    Choice.RETRY_CANCEL: [
        "--question", "--switch", "--extra-button=Cancel", "--extra-button=Retry",
    ],
    Choice.ABORT_RETRY_IGNORE: [
        "--question", "--switch",
        "--extra-button=Ignore", "--extra-button=Abort", "--extra-button=Retry",
    ],
}

_KDIALOG_KINDS = {
    FileDialogKind.SAVE: "--getsavefilename",
    FileDialogKind.OPEN: "--getopenfilename",
    FileDialogKind.FOLDER: "--getexistingdirectory",
}

_BUTTON_SUFFIXES = (
    ("Cancel\n", Button.CANCEL),
    ("OK\n", Button.OK),
    ("Yes\n", Button.YES),
    ("No\n", Button.NO),
    ("Abort\n", Button.ABORT),
    ("Retry\n", Button.RETRY),
    ("Ignore\n", Button.IGNORE),
)


def _filter_pairs(filters: Sequence[str]) -> list[tuple[str, str]]:
    return list(zip(filters[::2], filters[1::2]))


def _osascript_file_script(
    kind: FileDialogKind,
    title: str,
    default_path: str,
    filters: Sequence[str],
    options: Opt,
) -> str:
    script = "set ret to choose"
    if kind is FileDialogKind.SAVE:
        script += " file name"
    elif kind is FileDialogKind.FOLDER:
        script += " folder"
    else:
        script += " file"
        if options & Opt.MULTISELECT:
            script += " with multiple selections allowed"

    if default_path:
        if kind is FileDialogKind.FOLDER or is_directory(default_path):
            script += " default location "
        else:
            script += " default name "
        script += osascript_quote(default_path)

    script += " with prompt " + osascript_quote(title)

    if kind is FileDialogKind.OPEN:
        patterns = "".join(" " + pattern for _, pattern in _filter_pairs(filters))
        has_filter = True
        filter_list = ""
        for pat in _WHITESPACE.split(patterns):
            if pat in ("*", "*.*"):
                # There is no way for the user to override a filter, so a
                # catch-all pattern disables filtering altogether.
                has_filter = False
            elif pat.startswith("*."):
                filter_list += "," + osascript_quote(pat[2:])
        if has_filter and filter_list:
            # AppleScript ignores extensions whose length is not 3 unless the
            # list starts with one; "///" cannot appear in a real filename.
            script += ' of type {"///"' + filter_list + "}"

    if kind is FileDialogKind.OPEN and options & Opt.MULTISELECT:
        script += '\nset s to ""'
        script += "\nrepeat with i in ret"
        script += '\n  set s to s & (POSIX path of i) & "\\n"'
        script += "\nend repeat"
        script += "\ncopy s to stdout"
    else:
        script += "\nPOSIX path of ret"
    return script


def file_dialog_command(
    settings: Settings,
    kind: FileDialogKind,
    title: str,
    default_path: str = "",
    filters: Sequence[str] = (),
    options: Opt = Opt.NONE,
) -> list[str]:
    """Return the command line that shows an open, save or folder dialog."""
    command = settings.desktop_helper()

    if settings.is_osascript():
        script = _osascript_file_script(kind, title, default_path, filters, options)
        command += ["-e", script]
    elif settings.is_zenity():
        command.append("--file-selection")
        # A directory needs a trailing slash or zenity opens its parent.
        filename_arg = "--filename=" + default_path
        if (
            kind is not FileDialogKind.FOLDER
            and not default_path.endswith("/")
            and is_directory(default_path)
        ):
            filename_arg += "/"
        command += [filename_arg, "--title", title, "--separator=\n"]
        for name, pattern in _filter_pairs(filters):
            command += ["--file-filter", name + "|" + pattern]
        if kind is FileDialogKind.SAVE:
            command.append("--save")
        if kind is FileDialogKind.FOLDER:
            command.append("--directory")
        if not options & Opt.FORCE_OVERWRITE:
            command.append("--confirm-overwrite")
        if options & Opt.MULTISELECT:
            command.append("--multiple")
    elif settings.is_kdialog():
        command.append(_KDIALOG_KINDS[kind])
        if options & Opt.MULTISELECT:
            command += ["--multiple", "--separate-output"]
        command.append(default_path)
        command.append(
            " | ".join(f"{name}({pattern})" for name, pattern in _filter_pairs(filters))
        )
        command += ["--title", title]

    return command


def notify_command(
    settings: Settings, title: str, message: str, icon: Icon = Icon.INFO
) -> list[str]:
    """Return the command line that shows a desktop notification."""
    if icon is Icon.QUESTION:
        # Notifications have no question icon.
        icon = Icon.INFO

    command = settings.desktop_helper()
    if settings.is_osascript():
        command += [
            "-e",
            "display notification " + osascript_quote(message)
            + " with title " + osascript_quote(title),
        ]
    elif settings.is_zenity():
        command += [
            "--notification",
            "--window-icon", icon_name(icon),
            "--text", title + "\n" + message,
        ]
    elif settings.is_kdialog():
        command += [
            "--icon", icon_name(icon),
            "--title", title,
            "--passivepopup", message, "5",
        ]
    return command


def message_command(
    settings: Settings,
    title: str,
    text: str,
    choice: Choice = Choice.OK_CANCEL,
    icon: Icon = Icon.INFO,
) -> tuple[list[str], dict[int, Button]]:
    """Return the command line for a message box and its exit-code mappings."""
    command = settings.desktop_helper()
    mappings: dict[int, Button] = {}

    if settings.is_osascript():
        buttons, if_cancel = _OSASCRIPT_BUTTONS.get(choice, _OSASCRIPT_OK)
        script = (
            "display dialog " + osascript_quote(text)
            + " with title " + osascript_quote(title)
            + buttons
        )
        mappings[1] = if_cancel
        mappings[256] = if_cancel
        script += " with icon " + _OSASCRIPT_ICONS.get(icon, _osx_icon("ToolBarInfo"))
        command += ["-e", script]
    elif settings.is_zenity():
        if choice in _ZENITY_CHOICES:
            command += _ZENITY_CHOICES[choice]
        elif icon is Icon.ERROR:
            command.append("--error")
        elif icon is Icon.WARNING:
            command.append("--warning")
        else:
            command.append("--info")
        command += [
            "--title", title,
            "--width=300", "--height=0",
            "--no-markup",
            "--text", text,
            "--icon-name=dialog-" + icon_name(icon),
        ]
    elif settings.is_kdialog():
        if choice is Choice.OK:
            if icon is Icon.ERROR:
                command.append("--error")
            elif icon is Icon.WARNING:
                command.append("--sorry")
            else:
                command.append("--msgbox")
        else:
            flag = "--"
            if icon in (Icon.WARNING, Icon.ERROR):
                flag += "warning"
            flag += "yesno"
            if choice is Choice.YES_NO_CANCEL:
                flag += "cancel"
            command.append(flag)
            if choice in (Choice.YES_NO, Choice.YES_NO_CANCEL):
                mappings[0] = Button.YES
                mappings[256] = Button.NO
        command += [text, "--title", title]
        if choice is Choice.OK_CANCEL:
            command += ["--yes-label", "OK", "--no-label", "Cancel"]

    return command, mappings


def parse_button(
    output: str, exit_code: int, mappings: Mapping[int, Button] | None = None
) -> Button:
    """Work out which button closed a message box."""
    # osascript prints "button returned:Cancel\n", others just "Cancel\n".
    for suffix, button in _BUTTON_SUFFIXES:
        if output.endswith(suffix):
            return button
    if mappings and exit_code in mappings:
        return mappings[exit_code]
    return Button.OK if exit_code == 0 else Button.CANCEL


def parse_path(output: str) -> str:
    """Strip trailing newlines and slashes from a single selected path."""
    return output.rstrip("\n/")


def parse_paths(output: str) -> list[str]:
    """Split helper output into paths, one per line, up to the first empty line."""
    paths = []
    while True:
        head, sep, output = output.partition("\n")
        if not sep or not head:
            return paths
        paths.append(head)