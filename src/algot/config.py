"""TOML config loading for algot.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "algot.toml"


@dataclass
class LexerConfig:
    legacy_integers: bool = False


@dataclass
class OutputConfig:
    color: bool = True


@dataclass
class AlgotConfig:
    lexer: LexerConfig = field(default_factory=LexerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find algot.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def _get_bool(table: dict, section: str, key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"[{section}] {key} must be true or false, got {value!r}")
    return value


def load_config(path: Path) -> AlgotConfig:
    """Parse an algot.toml file into an AlgotConfig.

    Raises ValueError for malformed TOML or a setting of the wrong type.
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = AlgotConfig()

    if "lexer" in data:
        lex = data["lexer"]
        config.lexer = LexerConfig(
            legacy_integers=_get_bool(lex, "lexer", "legacy_integers", False),
        )

    if "output" in data:
        out = data["output"]
        config.output = OutputConfig(
            color=_get_bool(out, "output", "color", True),
        )

    return config


def resolve_config(start_path: Path | None = None) -> AlgotConfig:
    """Load the nearest algot.toml, or the defaults when there is none."""
    try:
        return load_config(find_config(start_path))
    except FileNotFoundError:
        return AlgotConfig()
