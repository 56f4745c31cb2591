"""Run a helper program in the background and collect its output."""

from __future__ import annotations

import subprocess
import threading
from collections.abc import Sequence
from typing import BinaryIO

# Process wait timeout, in milliseconds.
DEFAULT_WAIT_TIMEOUT = 20

_CHUNK_SIZE = 8192
# How long to wait for the output reader once the process has exited, in seconds.
_READER_GRACE = 1.0


def _drain(stream: BinaryIO, chunks: list[bytes]) -> None:
    try:
        while chunk := stream.read1(_CHUNK_SIZE):
            chunks.append(chunk)
    except (OSError, ValueError):
        pass


class Executor:
    """A background process whose standard output is captured.

    Standard input is closed for the child and standard error is discarded.
    """

    def __init__(self) -> None:
        self._process: subprocess.Popen[bytes] | None = None
        self._reader: threading.Thread | None = None
        self._chunks: list[bytes] = []
        self._stdout = ""
        self._exit_code = -1
        self._running = False

    @property
    def running(self) -> bool:
        """Whether a started process has not been reaped yet."""
        return self._running

    @property
    def exit_code(self) -> int:
        """Exit code of the last process, or -1 if none has finished."""
        return self._exit_code

    def start_process(self, command: Sequence[str]) -> None:
        """Start ``command``, waiting first for any process already running."""
        self.stop()
        self._stdout = ""
        self._exit_code = -1
        self._chunks = []

        args = list(command)
        if not args:
            self._exit_code = 1
            return
        try:
            self._process = subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, ValueError):
            # The program could not be run; report it like a failed exec.
            self._process = None
            self._exit_code = 1
            return

        assert self._process.stdout is not None
        self._reader = threading.Thread(
            target=_drain, args=(self._process.stdout, self._chunks), daemon=True
        )
        self._reader.start()
        self._running = True

    def ready(self, timeout: int = DEFAULT_WAIT_TIMEOUT) -> bool:
        """Wait up to ``timeout`` milliseconds; return True once the process is done."""
        if not self._running or self._process is None:
            return True
        try:
            code = self._process.wait(max(timeout, 0) / 1000)
        except subprocess.TimeoutExpired:
            return False

        if self._reader is not None:
            self._reader.join(_READER_GRACE)
            if not self._reader.is_alive() and self._process.stdout is not None:
                self._process.stdout.close()
        self._stdout = b"".join(self._chunks).decode("utf-8", errors="replace")
        # A process ended by a signal has no exit status; it reads as 0.
        self._exit_code = code if code >= 0 else 0
        self._running = False
        return True

    def stop(self) -> None:
        """Block until the running process, if any, has finished."""
        while not self.ready():
            pass

    def result(self) -> tuple[str, int]:
        """Wait for the process and return its output and exit code."""
        self.stop()
        return self._stdout, self._exit_code

    def kill(self) -> bool:
        """Kill the running process, if any, and reap it."""
        if self._running and self._process is not None:
            try:
                self._process.kill()
            except ProcessLookupError:
                pass
        self.stop()
        return True

    def __enter__(self) -> Executor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()