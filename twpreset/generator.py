"""
External CSS generator boundary.

This is the only impure step of a run: the generator is executed as a
subprocess and its output file is read back as text. The output file is a
scoped resource and is removed when the context exits, whether or not the
checks that consume it succeed.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import GeneratorConfig
from .utils import log, run_cmd

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """The generator could not produce a stylesheet.

    Carries the command and the process output unchanged so the caller sees
    the generator's own error message.
    """

    def __init__(
        self,
        message: str,
        command: list[str],
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __str__(self) -> str:
        text = super().__str__()
        if self.stderr:
            text = f"{text}\n{self.stderr.rstrip()}"
        return text


def generate(config: GeneratorConfig, output: Path) -> str:
    """Run the generator and return the compiled CSS written to ``output``.

    Args:
        config: Command, working directory and input paths.
        output: File the generator is told to write.

    Returns:
        The compiled stylesheet text.

    Raises:
        GenerationError: If the process fails to start, exits non-zero,
            times out, or leaves no output file.
    """
    command = config.format_command(output)
    logger.debug("Running generator: %s (cwd=%s)", " ".join(command), config.cwd)

    try:
        run_cmd(command, cwd=config.cwd, timeout=config.timeout)
    except subprocess.CalledProcessError as e:
        raise GenerationError(
            f"Generator exited with status {e.returncode}: {' '.join(command)}",
            command=command,
            returncode=e.returncode,
            stdout=e.stdout or "",
            stderr=e.stderr or "",
        ) from e
    except subprocess.TimeoutExpired as e:
        raise GenerationError(
            f"Generator timed out after {e.timeout}s: {' '.join(command)}",
            command=command,
        ) from e
    except OSError as e:
        raise GenerationError(
            f"Could not start generator: {e}",
            command=command,
        ) from e

    if not output.exists():
        raise GenerationError(
            f"Generator finished but wrote no output to {output}",
            command=command,
            returncode=0,
        )

    css = output.read_text(encoding="utf-8")
    log.dim(f"Generated CSS length: {len(css)}")
    return css


@contextmanager
def compiled_stylesheet(config: GeneratorConfig) -> Iterator[str]:
    """Generate the stylesheet and yield its text, removing the file afterwards.

    When ``config.output`` is None the generator writes into a temporary
    directory that is deleted on exit. An explicit output path is unlinked on
    exit if it exists.
    """
    if config.output is None:
        with tempfile.TemporaryDirectory(prefix="twpreset_") as tmpdir:
            yield generate(config, Path(tmpdir) / "output.css")
        return

    output = config.output
    try:
        yield generate(config, output)
    finally:
        if output.exists():
            output.unlink()
            logger.debug("Removed %s", output)
