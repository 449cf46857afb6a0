# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""String-level helpers over the code point core.

Python strings already hold Unicode scalar values, so decoding is ``ord`` per
character.  The wrappers here accept ``str`` so callers do not have to.
"""

import re
from collections.abc import Iterator, Sequence

from .points import VS16
from .segment import count_width, iter_clusters, pair_flags as _pair_flags
from .stringify import StringifyOptions, stringify

_ANY_SEP = re.compile(r"[_\-,\s]+")
_PREFIX = re.compile(r"^(?:[uU]\+|0[xX])")


def decode(text: str) -> list[int]:
    return [ord(ch) for ch in text]


def encode(points: Sequence[int]) -> str:
    return "".join(chr(p) for p in points)


def parse_label(label: str, sep: str | None = "_") -> list[int]:
    """Parse a hex label produced by :func:`stringify` back into points.

    With *sep* None, groups may be separated by any mix of ``_``, ``-``,
    ``,`` and whitespace.  A leading ``U+`` or ``0x`` on a group is accepted.

    Raises:
        ValueError: A group is not hexadecimal or is outside the Unicode range.
    """
    label = label.strip()
    if not label:
        return []
    points = []
    groups = _ANY_SEP.split(label) if sep is None else label.split(sep)
    for group in groups:
        digits = _PREFIX.sub("", group)
        try:
            p = int(digits, 16)
        except ValueError:
            raise ValueError(f"invalid hex group {group!r} in label {label!r}") from None
        if not 0 <= p <= 0x10FFFF:
            raise ValueError(f"code point {group!r} is outside the Unicode range")
        points.append(p)
    return points


def iterate_emoji(text: str) -> Iterator[list[int]]:
    """Yield the emoji clusters of *text* as lists of code points."""
    yield from iter_clusters(decode(text))


def split(text: str, *, pair_flags: bool = False) -> list[list[int]]:
    """Return the clusters of *text* with presentation selectors removed.

    ``"#\\ufe0f\\u20e3"`` becomes ``[[0x23, 0x20E3]]``.  With *pair_flags*
    runs of regional indicators are broken into two-letter flags.
    """
    out: list[list[int]] = []
    for cluster in iterate_emoji(text):
        groups = _pair_flags(cluster) if pair_flags else [cluster]
        for group in groups:
            group = [p for p in group if p != VS16]
            if group:
                out.append(group)
    return out


def emoji_point_count(text: str) -> int:
    """Estimated display width of *text*, see :func:`count_width`."""
    return count_width(decode(text))


def stringify_text(text: str, options: StringifyOptions | None = None, **overrides) -> str:
    return stringify(decode(text), options=options, **overrides)
