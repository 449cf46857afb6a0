# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Hex labels for code point sequences (e.g. ``1f575_fe0f_200d_2642``)."""

from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import Any

from .points import VS16


@dataclass(frozen=True)
class StringifyOptions:
    """Formatting knobs for :func:`stringify`.

    Attributes:
        sep: Separator placed between hex groups.
        pad: Minimum number of hex digits per group (left zero padded).
        lower: Lowercase hex digits when True, uppercase otherwise.
        unqualify: Drop every VS16 before formatting.
    """

    sep: str = "_"
    pad: int = 0
    lower: bool = True
    unqualify: bool = True

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "StringifyOptions":
        """Build options from a config section, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_OPTIONS = StringifyOptions()


def stringify(
    points: Sequence[int],
    *,
    options: StringifyOptions | None = None,
    **overrides: Any,
) -> str:
    """Render *points* as a separator-joined hex label.

    Keyword overrides (``sep``, ``pad``, ``lower``, ``unqualify``) take
    precedence over *options*::

        >>> stringify([0x23, 0xFE0F, 0x20E3])
        '23_20e3'
        >>> stringify([0x23, 0xFE0F, 0x20E3], sep="-", pad=4, lower=False, unqualify=False)
        '0023-FE0F-20E3'
    """
    opts = options or DEFAULT_OPTIONS
    sep = overrides.pop("sep", opts.sep)
    pad = overrides.pop("pad", opts.pad)
    lower = overrides.pop("lower", opts.lower)
    unqualify = overrides.pop("unqualify", opts.unqualify)
    if overrides:
        raise TypeError(f"unexpected option(s): {', '.join(sorted(overrides))}")

    if unqualify:
        points = [p for p in points if p != VS16]
    spec = "x" if lower else "X"
    if pad > 0:
        spec = f"0{int(pad)}{spec}"
    return sep.join(format(p, spec) for p in points)
