"""Converter configuration: user-facing options and their resolved form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from tailwindify.errors import ConfigError
from tailwindify.theme import ThemeMapping, build_theme_mapping, resolve_theme

__all__ = ["ConverterConfig", "ResolvedConfig", "load_config", "resolve_config"]


@dataclass(frozen=True)
class ConverterConfig:
    """Options for one converter.

    ``tailwind_config`` follows the shape of a ``tailwind.config.js`` export:
    ``theme`` (with optional ``extend``), ``prefix``, ``separator`` and
    ``corePlugins``.
    """

    tailwind_config: Mapping[str, Any] = field(default_factory=dict)
    rem_in_px: float | None = None
    arbitrary_properties: bool = False
    flatten_nesting: bool = True
    reduce: bool = True


@dataclass(frozen=True)
class ResolvedConfig:
    """A :class:`ConverterConfig` with its theme inverted into lookup tables."""

    mapping: ThemeMapping
    prefix: str = ""
    separator: str = ":"
    core_plugins: Mapping[str, bool] = field(default_factory=dict)
    rem_in_px: float | None = None
    arbitrary_properties: bool = False
    flatten_nesting: bool = True
    reduce: bool = True

    def is_plugin_enabled(self, plugin: str) -> bool:
        return self.core_plugins.get(plugin, True)


def _core_plugins(value: Any) -> dict[str, bool]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {str(name): bool(enabled) for name, enabled in value.items()}
    if isinstance(value, (list, tuple)):
        # A list enables exactly the named plugins.
        from tailwindify.declarations import all_core_plugins

        enabled = {str(name) for name in value}
        return {name: name in enabled for name in all_core_plugins()}
    raise ConfigError(f"corePlugins must be an object or a list, got {type(value).__name__}")


def resolve_config(config: ConverterConfig | None = None) -> ResolvedConfig:
    """Resolve *config* (defaults when ``None``) into a :class:`ResolvedConfig`."""
    config = config or ConverterConfig()
    tailwind = dict(config.tailwind_config or {})

    try:
        theme = resolve_theme(tailwind.get("theme"))
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigError(f"Invalid theme: {exc}") from exc

    separator = tailwind.get("separator") or ":"
    prefix = tailwind.get("prefix") or ""
    if not isinstance(prefix, str) or not isinstance(separator, str):
        raise ConfigError("prefix and separator must be strings")

    return ResolvedConfig(
        mapping=build_theme_mapping(theme, config.rem_in_px),
        prefix=prefix,
        separator=separator,
        core_plugins=MappingProxyType(_core_plugins(tailwind.get("corePlugins"))),
        rem_in_px=config.rem_in_px,
        arbitrary_properties=config.arbitrary_properties,
        flatten_nesting=config.flatten_nesting,
        reduce=config.reduce,
    )


def load_config(path: str | Path) -> ConverterConfig:
    """Read a :class:`ConverterConfig` from a JSON file.

    Recognized keys: ``tailwind``, ``remInPx``, ``arbitraryProperties``,
    ``flattenNesting`` and ``reduce``.
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    rem_in_px = data.get("remInPx")
    if rem_in_px is not None and not isinstance(rem_in_px, (int, float)):
        raise ConfigError("remInPx must be a number")

    return ConverterConfig(
        tailwind_config=data.get("tailwind") or {},
        rem_in_px=float(rem_in_px) if rem_in_px is not None else None,
        arbitrary_properties=bool(data.get("arbitraryProperties", False)),
        flatten_nesting=bool(data.get("flattenNesting", True)),
        reduce=bool(data.get("reduce", True)),
    )
