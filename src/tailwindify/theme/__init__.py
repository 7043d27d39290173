"""Theme resolution and inversion into lookup tables."""

from __future__ import annotations

from typing import Any, Mapping

from tailwindify.theme.defaults import DEFAULT_THEME
from tailwindify.theme.mapper import (
    DEFAULT_TOKEN,
    ThemeMapping,
    build_media_query,
    build_theme_mapping,
    flatten_tokens,
)

__all__ = [
    "DEFAULT_THEME",
    "DEFAULT_TOKEN",
    "ThemeMapping",
    "build_media_query",
    "build_theme_mapping",
    "flatten_tokens",
    "resolve_theme",
]


def _deep_merge(base: Any, extension: Any) -> Any:
    if isinstance(base, Mapping) and isinstance(extension, Mapping):
        merged = dict(base)
        for key, value in extension.items():
            merged[key] = _deep_merge(merged[key], value) if key in merged else value
        return merged
    return extension


class _ThemeResolver:
    """Evaluates callable theme entries against the merged theme, lazily."""

    def __init__(self, theme: Mapping[str, Any], extend: Mapping[str, Any]):
        self._raw = theme
        self._extend = extend
        self._resolved: dict[str, Any] = {}
        self._resolving: set[str] = set()

    def _evaluate(self, value: Any) -> Any:
        return value(self.get) if callable(value) else value

    def category(self, name: str) -> Any:
        if name in self._resolved:
            return self._resolved[name]
        if name in self._resolving:
            raise ValueError(f"Circular theme reference to {name!r}")
        self._resolving.add(name)
        try:
            value = self._evaluate(self._raw.get(name))
            if name in self._extend:
                value = _deep_merge(value or {}, self._evaluate(self._extend[name]))
        finally:
            self._resolving.discard(name)
        self._resolved[name] = value
        return value

    def get(self, path: str, default: Any = None) -> Any:
        """The ``theme("colors.gray.200")`` getter handed to callables."""
        head, *rest = path.split(".")
        value = self.category(head)
        for key in rest:
            if not isinstance(value, Mapping) or key not in value:
                return default
            value = value[key]
        return default if value is None else value

    def resolve(self) -> dict[str, Any]:
        names = list(self._raw) + [name for name in self._extend if name not in self._raw]
        return {name: self.category(name) for name in names}


def resolve_theme(user_theme: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge *user_theme* over :data:`DEFAULT_THEME` and evaluate it.

    Top-level categories in *user_theme* replace the defaults; categories
    under ``extend`` are deep-merged into them.  Callable entries receive a
    ``theme(path, default=None)`` getter and are evaluated after merging, so
    a replaced ``colors`` flows into ``backgroundColor`` and friends.
    """
    user_theme = dict(user_theme or {})
    extend = user_theme.pop("extend", None) or {}
    merged = {**DEFAULT_THEME, **user_theme}
    return _ThemeResolver(merged, extend).resolve()
