"""Ask before upgrading, and go ahead anyway if nobody answers in time."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .dialogs import Message
from .options import Button, Choice, Icon
from .settings import Settings, verbose


def _run(
    settings: Settings | None = None,
    out: TextIO | None = None,
    attempts: int = 10,
    wait_ms: int = 1000,
) -> bool:
    out = out if out is not None else sys.stdout
    message = Message(
        "Upgrade software?",
        "Press OK to upgrade this software.\n"
        "\n"
        "By default, the software will update itself\n"
        "automatically in 10 seconds.",
        Choice.OK_CANCEL,
        Icon.WARNING,
        settings=settings,
    )

    for _ in range(attempts):
        if message.ready(wait_ms):
            break

    # Upgrade if the user clicked OK, or if the user did not interact.
    if message.ready():
        upgrade = message.result() is Button.OK
    else:
        upgrade = message.kill()

    print("Upgrading software!" if upgrade else "Not upgrading software.", file=out)
    return upgrade


def main(argv: list[str] | None = None) -> int:
    """Ask whether to upgrade, upgrading after ten seconds without an answer."""
    parser = argparse.ArgumentParser(
        prog="portable-dialogs-kill",
        description="Ask a question and give up waiting after ten seconds.",
    )
    parser.parse_args(argv)
    verbose(True)
    _run()
    return 0


if __name__ == "__main__":
    sys.exit(main())