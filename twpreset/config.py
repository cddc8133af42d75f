"""
Run configuration loaded from ``twpreset.yaml``.

The file is optional. Every key has a default matching a stock Tailwind CLI
setup; relative paths resolve against the directory holding the file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .utils import DEFAULT_CONFIG_NAME
from .validators.css_extract import DEFAULT_INTERNAL_PREFIX

DEFAULT_COMMAND = [
    "npx", "tailwindcss",
    "-i", "{input}",
    "-o", "{output}",
    "-c", "{config}",
]

_PLACEHOLDER = re.compile(r"\{(input|output|config)\}")

_SECTIONS = {
    "generator": {"command", "cwd", "config", "input", "output", "timeout"},
    "extract": {"internal_prefix"},
    "allowlist": {"extra_supported", "extra_allowed_unsupported"},
}


class ConfigError(ValueError):
    """Raised when a configuration file is missing or malformed."""


@dataclass
class GeneratorConfig:
    """How to invoke the external CSS generator."""

    command: list[str] = field(default_factory=lambda: list(DEFAULT_COMMAND))
    cwd: Path = field(default_factory=Path.cwd)
    config: Path = Path("tailwind.config.ts")
    input: Path = Path("styles.css")
    output: Optional[Path] = None
    """Where the generator writes; None means a temporary directory."""
    timeout: Optional[float] = None

    def format_command(self, output: Path) -> list[str]:
        """Substitute ``{input}``, ``{output}`` and ``{config}`` into the command.

        Only those three placeholders are replaced; any other braces, such as
        a ``--content`` glob like ``./src/**/*.{ts,tsx}``, pass through unchanged.
        """
        values = {
            "input": str(self.input),
            "output": str(output),
            "config": str(self.config),
        }
        return [
            _PLACEHOLDER.sub(lambda m: values[m.group(1)], part)
            for part in self.command
        ]


@dataclass
class CheckConfig:
    """Complete configuration of one validation run."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    internal_prefix: str = DEFAULT_INTERNAL_PREFIX
    extra_supported: frozenset[str] = frozenset()
    extra_allowed_unsupported: frozenset[str] = frozenset()


# =============================================================================
# Loading
# =============================================================================


def _resolve(base: Path, value: Any, key: str) -> Path:
    if not isinstance(value, str):
        raise ConfigError(f"generator.{key} must be a string path, got {type(value).__name__}")
    path = Path(value).expanduser()
    return path if path.is_absolute() else (base / path).resolve()


def _string_set(section: dict, key: str) -> frozenset[str]:
    values = section.get(key) or []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ConfigError(f"allowlist.{key} must be a list of property names")
    return frozenset(values)


def parse_config(data: Optional[dict[str, Any]], base_dir: Path) -> CheckConfig:
    """Build a CheckConfig from parsed YAML data.

    Args:
        data: Mapping loaded from YAML (None for an empty file).
        base_dir: Directory relative paths are resolved against.

    Raises:
        ConfigError: On unknown sections/keys or wrongly typed values.
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError("configuration root must be a mapping")

    for section, body in data.items():
        if section not in _SECTIONS:
            raise ConfigError(
                f"unknown section '{section}'. "
                f"Known sections: {', '.join(sorted(_SECTIONS))}"
            )
        if body is not None and not isinstance(body, dict):
            raise ConfigError(f"section '{section}' must be a mapping")
        unknown = set(body or {}) - _SECTIONS[section]
        if unknown:
            raise ConfigError(f"unknown keys in '{section}': {', '.join(sorted(unknown))}")

    gen_data = data.get("generator") or {}
    generator = GeneratorConfig(cwd=base_dir.resolve())

    if "command" in gen_data:
        command = gen_data["command"]
        if not isinstance(command, list) or not command or not all(isinstance(p, str) for p in command):
            raise ConfigError("generator.command must be a non-empty list of strings")
        generator.command = list(command)
    if gen_data.get("cwd") is not None:
        generator.cwd = _resolve(base_dir, gen_data["cwd"], "cwd")
    for key in ("config", "input", "output"):
        if gen_data.get(key) is not None:
            setattr(generator, key, _resolve(base_dir, gen_data[key], key))
    if gen_data.get("timeout") is not None:
        timeout = gen_data["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("generator.timeout must be a positive number of seconds")
        generator.timeout = float(timeout)

    extract = data.get("extract") or {}
    prefix = extract.get("internal_prefix", DEFAULT_INTERNAL_PREFIX)
    if not isinstance(prefix, str):
        raise ConfigError("extract.internal_prefix must be a string")

    allowlist = data.get("allowlist") or {}

    return CheckConfig(
        generator=generator,
        internal_prefix=prefix,
        extra_supported=_string_set(allowlist, "extra_supported"),
        extra_allowed_unsupported=_string_set(allowlist, "extra_allowed_unsupported"),
    )


def load_config(path: Optional[Path] = None) -> CheckConfig:
    """Load configuration from ``path``.

    With no path, ``twpreset.yaml`` in the current directory is used if it
    exists, otherwise defaults apply.

    Raises:
        ConfigError: If an explicit path is missing or the YAML is invalid.
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            return CheckConfig()
        path = candidate

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return parse_config(data, path.resolve().parent)
