# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Global configuration file discovery and typed accessors.

The file is YAML with optional top-level sections::

    stringify:
      sep: "-"
      pad: 4
      lower: false
      unqualify: true
    display:
      pad_width: 2
    probe:
      font: /usr/share/fonts/noto/NotoColorEmoji.ttf
      font_size: 109
"""

import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .._util.config_stack import ConfigScope, ConfigStack, load_yaml_scope
from .paths import config_root
from .stringify import StringifyOptions

DEFAULTS: dict[str, Any] = {
    "stringify": {"sep": "_", "pad": 0, "lower": True, "unqualify": True},
    "display": {"pad_width": 2},
    "probe": {"font": None, "font_size": 109},
}


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If EMOJISEG_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml
        2) sys.prefix/etc/emojiseg/config.yml
        3) /etc/emojiseg/config.yml
    """
    env_file = os.environ.get("EMOJISEG_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "emojiseg" / "config.yml"
    etc_cfg = Path("/etc/emojiseg/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit EMOJISEG_CONFIG_FILE is returned even if missing to make
    intent visible to the user.  If nothing exists, the last candidate is
    returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("expected a string")
    return value


def _as_int(value: Any, minimum: int = 0) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer")
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ValueError("expected an integer") from None
    if result < minimum:
        raise ValueError(f"must be at least {minimum}")
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValueError("expected true or false")


# section -> key -> converter; keys not listed pass through untouched
_CONVERTERS: dict[str, dict[str, Any]] = {
    "stringify": {"sep": _as_str, "pad": _as_int, "lower": _as_bool, "unqualify": _as_bool},
    "display": {"pad_width": _as_int},
    "probe": {"font": _as_str, "font_size": lambda v: _as_int(v, minimum=1)},
}


def _sanitize(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Drop sections that are not mappings and coerce known values.

    ``pad: '4'`` becomes ``4`` and ``lower: "false"`` becomes ``False``; a
    value that cannot be converted aborts with ``SystemExit``.
    """
    result: dict[str, Any] = {}
    for section, values in data.items():
        if not isinstance(values, dict):
            continue
        converters = _CONVERTERS.get(section, {})
        clean = dict(values)
        for key, convert in converters.items():
            value = clean.get(key)
            if value is None:
                continue
            try:
                clean[key] = convert(value)
            except ValueError as e:
                raise SystemExit(f"Error: invalid {section}.{key} in {path}: {value!r} ({e})")
        result[section] = clean
    return result


def build_stack(cli_overrides: dict[str, Any] | None = None) -> ConfigStack:
    """Layer built-in defaults, the global config file and CLI flags."""
    stack = ConfigStack()
    stack.push(ConfigScope("defaults", None, DEFAULTS))

    path = global_config_path()
    try:
        file_scope = load_yaml_scope("global", path)
    except (OSError, yaml.YAMLError) as e:
        raise SystemExit(f"Error: cannot read config file {path}: {e}")
    if isinstance(file_scope.data, dict):
        stack.push(ConfigScope("global", file_scope.source, _sanitize(file_scope.data, path)))

    if cli_overrides:
        stack.push(ConfigScope("cli", None, cli_overrides))
    return stack


def get_stringify_options(overrides: dict[str, Any] | None = None) -> StringifyOptions:
    """Resolve stringify options: defaults < config file < *overrides*.

    Keys in *overrides* whose value is None are ignored so unset CLI flags do
    not mask the config file.
    """
    cli = {k: v for k, v in (overrides or {}).items() if v is not None}
    section = build_stack({"stringify": cli} if cli else None).resolve_section("stringify")
    return StringifyOptions.from_mapping(section)


def get_display_pad_width() -> int:
    return build_stack().resolve_section("display").get("pad_width", 2)


def get_probe_font() -> tuple[str | None, int]:
    """Return ``(font_path, font_size)`` from the ``probe:`` section."""
    section = build_stack().resolve_section("probe")
    return section.get("font"), section.get("font_size", 109)
