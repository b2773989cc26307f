from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Comparison options passed into every engine call."""

    ignore_case: bool = False
    ignore_punctuation: bool = False
    memoriser: bool = False
    context_radius: int = 3
    preview_words: int = 3
    ellipsis: str = "..."
    virtual_spaces: bool = True

    def __post_init__(self) -> None:
        if self.context_radius < 0:
            raise ValueError("context_radius must be zero or positive.")
        if self.preview_words < 0:
            raise ValueError("preview_words must be zero or positive.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(DiffConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> DiffConfig:
    """Build a DiffConfig from a dictionary-like input."""
    if data is None:
        return DiffConfig()
    return DiffConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> DiffConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> DiffConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return DiffConfig()
    return config_from_yaml(path)
