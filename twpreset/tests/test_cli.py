"""
CLI commands run in-process.

Pass condition: `check` exits 0 only when every check passes and prints
every failure otherwise.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from .conftest import COPY_SCRIPT, FAIL_SCRIPT, CLIRunner, python_command


def write_config(directory: Path, script: str, output: str | None = None) -> Path:
    """Write a twpreset.yaml that runs ``script`` as the generator."""
    command = ", ".join(json.dumps(part) for part in python_command(script))
    lines = [
        "generator:",
        f"  command: [{command}]",
        "  config: tailwind.config.ts",
        "  input: styles.css",
    ]
    if output is not None:
        lines.append(f"  output: {output}")
    path = directory / "twpreset.yaml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestCheckCommand:
    """Tests for `twpreset check`."""

    @pytest.mark.evergreen
    def test_passes_with_generated_stylesheet(self, cli_runner: CLIRunner) -> None:
        write_config(cli_runner.cwd, COPY_SCRIPT)

        result = cli_runner.run(["check"])

        assert result.returncode == 0, result.stdout
        assert "All checks passed" in result.stdout

    @pytest.mark.evergreen
    def test_failures_listed_and_exit_nonzero(self, cli_runner: CLIRunner) -> None:
        (cli_runner.cwd / "styles.css").write_text(".flx{display:flex}\n.foo{color:red}", encoding="utf-8")
        write_config(cli_runner.cwd, COPY_SCRIPT, output="output.css")

        result = cli_runner.run(["check"])

        assert result.returncode == 1
        assert "missing utility '.flex' for display: flex" in result.stdout
        assert "property 'color'" in result.stdout
        assert not (cli_runner.cwd / "output.css").exists()

    @pytest.mark.evergreen
    def test_generation_failure_reported_verbatim(self, cli_runner: CLIRunner) -> None:
        write_config(cli_runner.cwd, FAIL_SCRIPT)

        result = cli_runner.run(["check"])

        assert result.returncode == 1
        assert "invalid preset config" in result.stdout

    @pytest.mark.evergreen
    def test_css_flag_skips_generator(self, cli_runner: CLIRunner, full_css: str) -> None:
        css_path = cli_runner.cwd / "prebuilt.css"
        css_path.write_text(full_css, encoding="utf-8")

        result = cli_runner.run(["check", "--css", str(css_path)])

        assert result.returncode == 0, result.stdout

    @pytest.mark.evergreen
    def test_json_report(self, cli_runner: CLIRunner) -> None:
        css_path = cli_runner.cwd / "prebuilt.css"
        css_path.write_text(".foo{color:red}", encoding="utf-8")

        result = cli_runner.run(["check", "--css", str(css_path), "--json", "--only", "property-allowlist"])

        assert result.returncode == 1
        report = json.loads(result.stdout)
        assert report["passed"] is False
        failures = report["validators"]["property-allowlist"]["failures"]
        assert failures == [
            {
                "property": "color",
                "check": "property-allowlist",
                "message": "property 'color' is not in the supported or allowed-unsupported sets",
            }
        ]

    @pytest.mark.evergreen
    def test_json_stays_parseable_when_validator_raises(
        self, cli_runner: CLIRunner, full_css: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from twpreset.validators.registry import discover_validators, registry

        discover_validators()

        def broken_validate(context):
            raise KeyError("display")

        monkeypatch.setattr(registry.get("mapping-consistency"), "validate", broken_validate)
        css_path = cli_runner.cwd / "prebuilt.css"
        css_path.write_text(full_css, encoding="utf-8")

        result = cli_runner.run(["check", "--css", str(css_path), "--json"])

        assert result.returncode == 1
        report = json.loads(result.stdout)
        assert report["passed"] is False
        assert any("KeyError" in error for error in report["errors"])

    @pytest.mark.evergreen
    def test_json_generation_failure(self, cli_runner: CLIRunner) -> None:
        write_config(cli_runner.cwd, FAIL_SCRIPT)

        result = cli_runner.run(["check", "--json"])

        assert result.returncode == 1
        report = json.loads(result.stdout)
        assert report["passed"] is False
        assert "invalid preset config" in report["error"]

    @pytest.mark.evergreen
    def test_json_log_output_goes_to_stderr(
        self, cli_runner: CLIRunner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_config(cli_runner.cwd, COPY_SCRIPT)

        result = cli_runner.run(["check", "--json"])

        assert result.returncode == 0, result.stdout
        assert json.loads(result.stdout)["passed"] is True
        assert "Generated CSS length" in capsys.readouterr().err

    @pytest.mark.evergreen
    def test_cli_flags_override_config(self, cli_runner: CLIRunner) -> None:
        (cli_runner.cwd / "other.css").write_text(".foo{color:red}", encoding="utf-8")
        write_config(cli_runner.cwd, COPY_SCRIPT)

        result = cli_runner.run(["check", "--input", "other.css"])

        assert result.returncode == 1
        assert "property 'color'" in result.stdout

    @pytest.mark.evergreen
    def test_missing_config_file(self, cli_runner: CLIRunner) -> None:
        result = cli_runner.run(["check", "--config", "absent.yaml"])
        assert result.returncode == 1
        assert "Config file not found" in result.stdout


class TestOtherCommands:
    """Tests for `list` and bare invocation."""

    @pytest.mark.evergreen
    def test_list(self, cli_runner: CLIRunner) -> None:
        result = cli_runner.run(["list"])
        assert result.returncode == 0
        for name in ("utility-coverage", "property-allowlist", "mapping-consistency"):
            assert name in result.stdout

    @pytest.mark.evergreen
    def test_no_command_prints_help(self, cli_runner: CLIRunner) -> None:
        result = cli_runner.run([])
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()
