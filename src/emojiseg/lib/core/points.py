# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Code point classification for emoji sequences.

Every predicate here is a plain integer comparison over a single Unicode
scalar value.  None of them raise: values outside the known ranges (including
negative numbers and values above ``0x10FFFF``) simply classify as ordinary
content.
"""

from dataclasses import dataclass
from enum import Enum

ZWJ = 0x200D
KEYCAP = 0x20E3
VS16 = 0xFE0F
TAG_CANCEL = 0xE007F

# Points that never start a cluster and never add width on their own.
SKIPPABLE: frozenset[int] = frozenset({VS16, KEYCAP, TAG_CANCEL})


def is_skin_tone(p: int) -> bool:
    """Whether *p* is one of the five diversity (skin tone) modifiers."""
    return 0x1F3FB <= p <= 0x1F3FF


def is_flag_point(p: int) -> bool:
    """Whether *p* is a regional indicator letter (A-Z) used in flags."""
    return 0x1F1E6 <= p <= 0x1F1FF


def is_tag(p: int) -> bool:
    """Whether *p* is a tag character, as used in subdivision flags."""
    return 0xE0020 <= p < TAG_CANCEL


def is_before_cap(p: int) -> bool:
    """Whether *p* may precede a combining enclosing keycap (``#``, ``*``, ``0``-``9``)."""
    return p == 0x23 or p == 0x2A or 0x30 <= p <= 0x39


def is_skippable(p: int) -> bool:
    return p in SKIPPABLE


def is_zwj(p: int) -> bool:
    return p == ZWJ


@dataclass(frozen=True)
class PointClass:
    """Range predicates evaluated for a single code point."""

    is_skin_tone: bool
    is_flag_point: bool
    is_tag: bool
    is_before_cap: bool


def classify(p: int) -> PointClass:
    """Evaluate all range predicates for *p* at once."""
    return PointClass(
        is_skin_tone=is_skin_tone(p),
        is_flag_point=is_flag_point(p),
        is_tag=is_tag(p),
        is_before_cap=is_before_cap(p),
    )


class PointKind(Enum):
    """How the segmenter and width estimator treat a point in context."""

    FLAG = "flag"
    ZWJ = "zwj"
    MODIFIER = "modifier"
    CONTENT = "content"


def point_kind(p: int, next_point: int | None = None) -> PointKind:
    """Return the scanning category of *p* given the point that follows it.

    A regional indicator followed by VS16 is styled as a standalone letter,
    not half of a flag, so it counts as ordinary content.
    """
    if p == ZWJ:
        return PointKind.ZWJ
    if p in SKIPPABLE or is_tag(p) or is_skin_tone(p):
        return PointKind.MODIFIER
    if is_flag_point(p) and next_point != VS16:
        return PointKind.FLAG
    return PointKind.CONTENT
