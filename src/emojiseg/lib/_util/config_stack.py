# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Layered config resolution.

- **Scope**: one config layer ("defaults", "global", "cli").
- **Stack**: scopes ordered lowest-priority first.
- **deep_merge**: recursive dict merge where ``None`` removes a key.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base*, returning a **new** dict.

    * Nested dicts are merged key by key.
    * A ``None`` value in *override* deletes the key.
    * Anything else in *override* replaces the base value.
    """
    merged = dict(base)
    for key, ov in override.items():
        if ov is None:
            merged.pop(key, None)
            continue
        bv = merged.get(key)
        if isinstance(ov, dict) and isinstance(bv, dict):
            merged[key] = deep_merge(bv, ov)
        else:
            merged[key] = ov
    return merged


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the config stack."""

    level: str
    source: Path | None
    data: dict


class ConfigStack:
    """Ordered collection of config scopes, lowest-priority first.

    Usage::

        stack = ConfigStack()
        stack.push(ConfigScope("defaults", None, DEFAULTS))
        stack.push(load_yaml_scope("global", path))
        options = stack.resolve_section("stringify")
    """

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve(self) -> dict:
        result: dict = {}
        for scope in self._scopes:
            result = deep_merge(result, scope.data)
        return result

    def resolve_section(self, key: str) -> dict:
        """Resolve one top-level section; non-dict values at *key* are skipped."""
        result: dict = {}
        for scope in self._scopes:
            section = scope.data.get(key)
            if isinstance(section, dict):
                result = deep_merge(result, section)
        return result

    @property
    def scopes(self) -> list[ConfigScope]:
        """Read-only access to the scope list (for ``emojiseg config``)."""
        return list(self._scopes)


def load_yaml_scope(level: str, path: Path) -> ConfigScope:
    """Load a YAML file into a ConfigScope.  Returns empty data if missing."""
    if path.is_file():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        data = {}
    return ConfigScope(level=level, source=path, data=data)
