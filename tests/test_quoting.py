import re
import shlex

import pytest

from portable_dialogs.options import Choice, Icon
from portable_dialogs.quoting import (
    buttons_to_name,
    format_command,
    icon_name,
    osascript_quote,
    powershell_quote,
    shell_quote,
)

SAMPLES = [
    "",
    "plain",
    "This is ' a message, pay \" attention \\ to it!",
    "it's",
    "''''",
    '"""',
    "\\\\",
    "multi\nline",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_shell_quote_round_trip(text):
    assert shlex.split(shell_quote(text)) == [text]


def test_shell_quote_pinned():
    assert shell_quote("it's") == "'it'\\''s'"


@pytest.mark.parametrize("text", SAMPLES)
def test_osascript_quote_round_trip(text):
    quoted = osascript_quote(text)
    assert quoted.startswith('"') and quoted.endswith('"')
    inner = quoted[1:-1]
    assert re.sub(r"\\(.)", r"\1", inner, flags=re.S) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_osascript_quote_has_no_unescaped_quote(text):
    inner = osascript_quote(text)[1:-1]
    stripped = re.sub(r"\\.", "", inner, flags=re.S)
    assert '"' not in stripped
    assert "\\" not in stripped


def test_osascript_quote_pinned():
    assert osascript_quote('say "hi"') == '"say \\"hi\\""'


@pytest.mark.parametrize("text", SAMPLES)
def test_powershell_quote_round_trip(text):
    quoted = powershell_quote(text)
    assert quoted.startswith("'") and quoted.endswith("'")
    inner = quoted[1:-1]
    assert re.sub(r"''|\"\"", lambda m: m.group(0)[0], inner) == text
    assert len(inner) == len(text) + text.count("'") + text.count('"')


@pytest.mark.parametrize(
    "choice,name",
    [
        (Choice.OK, "ok"),
        (Choice.OK_CANCEL, "okcancel"),
        (Choice.YES_NO, "yesno"),
        (Choice.YES_NO_CANCEL, "yesnocancel"),
        (Choice.RETRY_CANCEL, "retrycancel"),
        (Choice.ABORT_RETRY_IGNORE, "abortretryignore"),
    ],
)
def test_buttons_to_name(choice, name):
    assert buttons_to_name(choice) == name


@pytest.mark.parametrize(
    "icon,name",
    [(Icon.WARNING, "warning"), (Icon.ERROR, "error"), (Icon.QUESTION, "question")],
)
def test_icon_name_same_everywhere(icon, name):
    assert icon_name(icon, False) == name
    assert icon_name(icon, True) == name


def test_icon_name_info_differs_by_platform():
    assert icon_name(Icon.INFO, False) == "information"
    assert icon_name(Icon.INFO, True) == "info"
    assert icon_name(Icon.INFO) == "information"


def test_format_command_joins_with_spaces():
    assert format_command(["zenity", "--info"]) == "zenity --info"


def test_format_command_empty_and_single():
    assert format_command([]) == ""
    assert format_command(["echo"]) == "echo"


def test_format_command_split_round_trip():
    args = ["kdialog", "--title", "x", "--msgbox"]
    assert format_command(args).split(" ") == args