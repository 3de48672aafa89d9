"""Configuration loading for controlgen (.controlgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

from .constants import (
    DEFAULT_EXCLUDED_SUFFIX,
    DEFAULT_NAMESPACE_ROOT,
    DEFAULT_OUTPUT_VARIABLE,
    EVENT_NAME_CAPITALIZATION,
    EXCLUDED_NAMESPACES,
)
from .errors import ControlGenError

CONFIG_FILENAME = ".controlgen.yml"
BASELINE_PATH = Path(__file__).parent / "environment" / "lib.d.ts"


class ConfigError(ControlGenError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class ControlGenConfig:
    """Immutable settings injected into a catalog run."""

    namespace_root: str = DEFAULT_NAMESPACE_ROOT
    excluded_namespaces: frozenset[str] = frozenset(EXCLUDED_NAMESPACES)
    event_capitalization: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(EVENT_NAME_CAPITALIZATION))
    )
    excluded_suffix: str = DEFAULT_EXCLUDED_SUFFIX
    baseline: Path = BASELINE_PATH
    output_variable: str = DEFAULT_OUTPUT_VARIABLE

    @property
    def namespace_prefix(self) -> str:
        return f"{self.namespace_root}."


def load_config(config_path: Optional[Path] = None) -> ControlGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    if config_path is None:
        return ControlGenConfig()

    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return ControlGenConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    root = config_file.parent
    kwargs: Dict[str, Any] = {}

    namespace_root = _as_str(data.get("namespace_root"))
    if namespace_root:
        kwargs["namespace_root"] = namespace_root.rstrip(".")

    extra_exclusions = _as_str_list(data.get("exclude_namespaces"), "exclude_namespaces")
    if extra_exclusions:
        kwargs["excluded_namespaces"] = frozenset(EXCLUDED_NAMESPACES) | frozenset(extra_exclusions)

    events = _as_str_mapping(data.get("events"), "events")
    if events:
        for key in events:
            if key != key.lower():
                raise ConfigError(f"events keys must be lowercase: {key}")
        merged = dict(EVENT_NAME_CAPITALIZATION)
        merged.update(events)
        kwargs["event_capitalization"] = MappingProxyType(merged)

    suffix = _as_str(data.get("excluded_suffix"))
    if suffix:
        kwargs["excluded_suffix"] = suffix.lower()

    baseline = _as_str(data.get("baseline"))
    if baseline:
        kwargs["baseline"] = (root / baseline).resolve()

    output_data = data.get("output")
    if output_data is not None and not isinstance(output_data, dict):
        raise ConfigError("output must be a mapping")
    variable = _as_str((output_data or {}).get("variable"))
    if variable:
        kwargs["output_variable"] = variable

    return ControlGenConfig(**kwargs)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"{key} must be a list of strings")


def _as_str_mapping(value: Any, key: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return {str(name): str(canonical) for name, canonical in value.items()}


__all__ = ["CONFIG_FILENAME", "ConfigError", "ControlGenConfig", "load_config"]
