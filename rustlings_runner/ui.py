"""Terminal styling helpers, status messages and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RED = "31"
_GREEN = "32"
_BLUE = "34"
_BOLD = "1"


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE", "")
    if force and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def _emoji(symbol: str, fallback: str) -> str:
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        symbol.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return symbol


def bold(text: object) -> str:
    """Return text rendered in bold when colours are enabled."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Return text rendered in blue when colours are enabled."""
    return _style(text, _BLUE)


def warn(message: str) -> None:
    """Print a warning line in red."""
    print(f"{_style(_emoji('⚠️ ', '!'), _RED)} {_style(message, _RED)}")


def success(message: str) -> None:
    """Print a success line in green."""
    print(f"{_style(_emoji('✅', '✓'), _GREEN)} {_style(message, _GREEN)}")


class _Spinner:
    """A steady-ticking spinner drawn on stderr when it is a terminal."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str, interval: float = 0.1) -> None:
        self._message = message
        self._interval = interval
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        isatty = getattr(sys.stderr, "isatty", None)
        if isatty and isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            with self._lock:
                sys.stderr.write(f"\r\x1b[2K{frame} {self._message}")
                sys.stderr.flush()
            if self._stop.wait(self._interval):
                break

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def finish_and_clear(self) -> None:
        if self._thread is None or self._stop.is_set():
            return
        self._stop.set()
        self._thread.join()
        sys.stderr.write("\r\x1b[2K")
        sys.stderr.flush()

    def __enter__(self) -> "_Spinner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()