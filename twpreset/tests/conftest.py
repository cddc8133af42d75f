"""
Shared pytest fixtures for twpreset tests.

Provides literal CSS fixtures, a stand-in generator command that runs the
current Python interpreter, and an in-process CLI runner. No test needs
Node or the Tailwind CLI.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
  @pytest.mark.dev       - Development/WIP tests, toggle-able
  @pytest.mark.temporary - Tests with explicit discard flag
"""

from __future__ import annotations

import io
import re
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path
from typing import Generator

import pytest

from twpreset.config import GeneratorConfig
from twpreset.preset import iter_mapping_entries


# =============================================================================
# Stand-in Generator Scripts
# =============================================================================

# argv: input, output, config
COPY_SCRIPT = "import shutil, sys; shutil.copyfile(sys.argv[1], sys.argv[2])"
FAIL_SCRIPT = "import sys; sys.stderr.write('error: invalid preset config\\n'); sys.exit(2)"
NO_OUTPUT_SCRIPT = "import sys; sys.exit(0)"


def python_command(script: str) -> list[str]:
    """Build a generator command that runs ``script`` with the generator placeholders."""
    return [sys.executable, "-c", script, "{input}", "{output}", "{config}"]


# =============================================================================
# CSS Builders
# =============================================================================


def camel_to_kebab(name: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "-" + m.group(1).lower(), name)


def build_full_css() -> str:
    """Compiled-looking CSS with one rule per utility mapping entry."""
    rules = [
        f".{utility}{{{camel_to_kebab(prop)}:{value}}}"
        for prop, value, utility in iter_mapping_entries()
    ]
    # Generator-internal custom properties appear in real output too
    rules.append("*,:before,:after{--tw-translate-x:0;--tw-rotate:0}")
    return "\n".join(rules)


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )
    config.addinivalue_line(
        "markers",
        "dev: development/WIP tests, toggle-able for active development"
    )
    config.addinivalue_line(
        "markers",
        "temporary: tests with explicit discard flag"
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def full_css() -> str:
    """A stylesheet that satisfies every mapping entry and the allowlist."""
    return build_full_css()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary working directory.

    Yields the path to the temp directory, then cleans up after the test.
    """
    with tempfile.TemporaryDirectory(prefix="twpreset_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def preset_project(temp_dir: Path, full_css: str) -> Path:
    """A project directory with an input stylesheet and a preset config file.

    The stand-in generator copies the input to the output, so the input holds
    the CSS the "compiled" stylesheet should contain.
    """
    (temp_dir / "styles.css").write_text(full_css, encoding="utf-8")
    (temp_dir / "tailwind.config.ts").write_text("export default {}\n", encoding="utf-8")
    return temp_dir


@pytest.fixture
def copy_generator(preset_project: Path) -> GeneratorConfig:
    """GeneratorConfig whose command copies styles.css to the output."""
    return GeneratorConfig(
        command=python_command(COPY_SCRIPT),
        cwd=preset_project,
        config=preset_project / "tailwind.config.ts",
        input=preset_project / "styles.css",
    )


@pytest.fixture
def failing_generator(preset_project: Path) -> GeneratorConfig:
    """GeneratorConfig whose command exits non-zero with a message on stderr."""
    return GeneratorConfig(
        command=python_command(FAIL_SCRIPT),
        cwd=preset_project,
        config=preset_project / "tailwind.config.ts",
        input=preset_project / "styles.css",
    )


# =============================================================================
# CLI Runner
# =============================================================================


class CLIResult:
    """Result of running a CLI command."""

    def __init__(self, returncode: int, stdout: str):
        self.returncode = returncode
        self.stdout = stdout

    def __repr__(self) -> str:
        return f"CLIResult(returncode={self.returncode}, stdout={self.stdout[:100]!r}...)"


class CLIRunner:
    """Helper class to run CLI commands in-process with captured output."""

    def __init__(self, cwd: Path, monkeypatch: pytest.MonkeyPatch):
        self.cwd = cwd
        monkeypatch.chdir(cwd)

    def run(self, args: list[str]) -> CLIResult:
        """Run CLI with given args (without the 'twpreset' prefix)."""
        from twpreset.cli import main

        stdout_capture = io.StringIO()

        with redirect_stdout(stdout_capture):
            try:
                returncode = main(["--no-color", *args])
            except SystemExit as e:
                returncode = e.code if isinstance(e.code, int) else 1

        return CLIResult(
            returncode=returncode or 0,
            stdout=stdout_capture.getvalue(),
        )


@pytest.fixture
def cli_runner(preset_project: Path, monkeypatch: pytest.MonkeyPatch) -> CLIRunner:
    """Create a CLI runner working inside the preset project directory."""
    return CLIRunner(preset_project, monkeypatch)
