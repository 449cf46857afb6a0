# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Emoji display-width utilities for terminal alignment.

Rich's ``cell_len`` sums per-character widths, so a ZWJ family such as
woman + ZWJ + woman + ZWJ + boy counts as three glyphs while a terminal that
fuses the sequence draws one.  The cluster-aware estimator in
:mod:`emojiseg.lib.core.segment` counts emoji-sized units, each drawn
``EMOJI_COLUMNS`` terminal columns wide; ``cell_len`` handles everything
else (plain text, CJK, box drawing).
"""

from dataclasses import dataclass

from rich.cells import cell_len

from ..core.encoding import decode, encode
from ..core.points import PointKind, point_kind
from ..core.segment import count_width, iter_clusters
from ..core.stringify import stringify

EMOJI_COLUMNS = 2


@dataclass(frozen=True)
class ClusterWidth:
    """Width of a single cluster as seen by the estimator and by Rich."""

    points: tuple[int, ...]
    label: str
    estimated: int
    rich: int

    @property
    def text(self) -> str:
        return encode(self.points)

    @property
    def columns(self) -> int:
        return self.estimated * EMOJI_COLUMNS


def _is_emoji_like(points: list[int]) -> bool:
    if len(points) > 1:
        return True
    return point_kind(points[0]) is not PointKind.CONTENT or points[0] > 0xFFFF


def display_width(text: str) -> int:
    """Cells *text* occupies: estimator for emoji clusters, Rich for the rest."""
    total = 0
    for cluster in iter_clusters(decode(text)):
        if _is_emoji_like(cluster):
            total += count_width(cluster) * EMOJI_COLUMNS
        else:
            total += cell_len(encode(cluster))
    return total


def compare_widths(text: str) -> list[ClusterWidth]:
    """Per-cluster estimated width next to Rich's ``cell_len``."""
    rows = []
    for cluster in iter_clusters(decode(text)):
        rows.append(
            ClusterWidth(
                points=tuple(cluster),
                label=stringify(cluster, unqualify=False),
                estimated=count_width(cluster),
                rich=cell_len(encode(cluster)),
            )
        )
    return rows


def draw_emoji(emoji: str, width: int = 2) -> str:
    """Pad *emoji* with spaces to a consistent cell width for list alignment."""
    if not emoji:
        return ""
    try:
        emoji_width = display_width(emoji)
    except (TypeError, ValueError):
        return emoji
    if emoji_width >= width:
        return emoji
    return f"{emoji}{' ' * (width - emoji_width)}"
