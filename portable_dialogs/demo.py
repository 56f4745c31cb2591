"""Show one dialog of each kind and report what the user chose."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .dialogs import Message, Notify, OpenFile, SaveFile, SelectFolder
from .options import Button, Choice, Icon, Opt
from .paths import home, separator
from .settings import Settings, available, verbose

_ANSWERS = {
    Button.YES: "User agreed.",
    Button.NO: "User disagreed.",
    Button.CANCEL: "User freaked out.",
}


def _run(
    settings: Settings | None = None,
    out: TextIO | None = None,
    attempts: int = 10,
    wait_ms: int = 1000,
) -> None:
    out = out if out is not None else sys.stdout

    with Notify(
        "Important Notification",
        "This is ' a message, pay \" attention \\ to it!",
        Icon.INFO,
        settings=settings,
    ):
        pass

    message = Message(
        "Personal Message",
        "You are an amazing person, don’t let anyone make you think otherwise.",
        Choice.YES_NO_CANCEL,
        Icon.WARNING,
        settings=settings,
    )
    for _ in range(attempts):
        if message.ready(wait_ms):
            break
        print("Waited 1 second for user input...", file=out)
    answer = _ANSWERS.get(message.result())
    if answer is not None:
        print(answer, file=out)

    folder = SelectFolder("Select any directory", home(), settings=settings).result()
    print("Selected dir: " + folder, file=out)

    files = OpenFile(
        "Choose files to read",
        home(),
        ["Text Files (.txt .text)", "*.txt *.text", "All Files", "*"],
        Opt.MULTISELECT,
        settings=settings,
    ).result()
    print("Selected files:" + "".join(" " + name for name in files), file=out)

    saved = SaveFile(
        "Choose file to save",
        home() + separator() + "readme.txt",
        ["Text Files (.txt .text)", "*.txt *.text"],
        Opt.FORCE_OVERWRITE,
        settings=settings,
    ).result()
    print("Selected file: " + saved, file=out)


def main(argv: list[str] | None = None) -> int:
    """Show every dialog kind in turn; return 1 if no backend is available."""
    parser = argparse.ArgumentParser(
        prog="portable-dialogs-demo",
        description="Show one dialog of each kind.",
    )
    parser.parse_args(argv)

    if not available():
        print("Portable File Dialogs are not available on this platform.")
        return 1

    verbose(True)
    _run()
    return 0


if __name__ == "__main__":
    sys.exit(main())