"""
Shared utilities for the twpreset CLI.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Optional, TextIO

# =============================================================================
# Constants
# =============================================================================

DEFAULT_CONFIG_NAME = "twpreset.yaml"


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Colored logger with --no-color support and a switchable output stream.

    With no stream set, messages go to whatever ``sys.stdout`` is at call time.
    """

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
        "dim": "\033[2m",
    }

    def __init__(self, use_color: Optional[bool] = None, stream: Optional[TextIO] = None):
        self._use_color = sys.stdout.isatty() if use_color is None else use_color
        self._stream = stream

    def set_color(self, use_color: bool) -> None:
        self._use_color = use_color

    def set_stream(self, stream: Optional[TextIO]) -> Optional[TextIO]:
        """Redirect output (None restores stdout). Returns the previous stream."""
        previous, self._stream = self._stream, stream
        return previous

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def _emit(self, text: str) -> None:
        print(text, file=self._stream)

    def header(self, message: str) -> None:
        """Print a section header."""
        self._emit(f"\n{self._color('===', 'cyan')} {self._color(message, 'bold')} {self._color('===', 'cyan')}")

    def info(self, message: str) -> None:
        self._emit(f"  {message}")

    def success(self, message: str) -> None:
        self._emit(f"  {self._color('[OK]', 'green')} {message}")

    def warning(self, message: str) -> None:
        self._emit(f"  {self._color('[WARN]', 'yellow')} {message}")

    def error(self, message: str) -> None:
        self._emit(f"  {self._color('[ERROR]', 'red')} {message}")

    def dim(self, message: str) -> None:
        """Print a secondary message."""
        self._emit(f"  {self._color(message, 'dim')}")

    def table_row(self, col1: str, col2: str) -> None:
        """Print a two-column row."""
        self._emit(f"  {col1:<30} {col2}")


# Global logger instance
log = Logger()


# =============================================================================
# Runtime Utilities
# =============================================================================


def run_cmd(
    cmd: list[str],
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """Run a command with captured output; log and re-raise on non-zero exit."""
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        log.error(f"Command failed: {' '.join(cmd)}")
        if e.stdout:
            log.error(f"stdout: {e.stdout}")
        if e.stderr:
            log.error(f"stderr: {e.stderr}")
        raise
