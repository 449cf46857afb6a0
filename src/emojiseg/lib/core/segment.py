# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Emoji cluster segmentation and display-width estimation.

Both operations make a single forward pass over a sequence of code points and
share the categorisation in :func:`~emojiseg.lib.core.points.point_kind`, so
the width of a whole sequence always equals the sum of the widths of its
clusters.

Cluster boundaries are only known once the first point of the *next* cluster
has been seen.  :func:`iter_clusters` therefore keeps a small queue of
accumulators and releases every one except the newest after each point.
"""

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .points import ZWJ, PointKind, is_flag_point, point_kind


@dataclass
class _Accumulator:
    flag: bool = False
    points: list[int] = field(default_factory=list)


def _lookahead(points: Sequence[int], i: int) -> int | None:
    return points[i + 1] if i + 1 < len(points) else None


def iter_clusters(points: Sequence[int]) -> Iterator[list[int]]:
    """Yield the emoji clusters of *points* in order.

    Clusters are non-empty and concatenate back to *points*.  Runs of three or
    more regional indicators stay together; pairing them into flags is left to
    :func:`pair_flags`.
    """
    curr = _Accumulator()
    pending: deque[_Accumulator] = deque([curr])

    for i, p in enumerate(points):
        kind = point_kind(p, _lookahead(points, i))

        if kind is PointKind.CONTENT:
            # new cluster unless we follow a ZWJ
            if curr.points and curr.points[-1] != ZWJ:
                curr = _Accumulator(points=[p])
                pending.append(curr)
            else:
                curr.points.append(p)
        else:
            flag = kind is PointKind.FLAG
            if curr.flag != flag:
                curr = _Accumulator(flag=flag)
                pending.append(curr)
            curr.points.append(p)

        while len(pending) > 1:
            done = pending.popleft()
            if done.points:
                yield done.points

    tail = pending[0]
    if tail.points:
        yield tail.points


segment = iter_clusters


def count_width(points: Sequence[int]) -> int:
    """Estimate how many terminal cells *points* occupy once rendered.

    Works in half cells: a standalone glyph is 2, a flag letter 1, and a ZWJ
    takes back 2 because the two glyphs it joins render as one.  Any non-empty
    input is at least 1 cell wide.
    """
    if not points:
        return 0

    half = 0
    for i, p in enumerate(points):
        kind = point_kind(p, _lookahead(points, i))
        if kind is PointKind.ZWJ:
            half -= 2
        elif kind is PointKind.MODIFIER:
            continue
        elif kind is PointKind.FLAG:
            half += 1
        else:
            half += 2

    if half <= 2:
        return 1
    return (half + 1) >> 1


def pair_flags(cluster: Sequence[int]) -> list[list[int]]:
    """Split a run of regional indicators into two-letter flags.

    Pairing is purely positional: letters are taken two at a time from the
    left with no check that a pair names a real region, so ``[A, A, U]``
    becomes ``[[A, A], [U]]`` rather than keeping an invalid run together.
    Clusters that are not made up solely of regional indicators are returned
    unchanged as a single group.  An odd trailing letter stays on its own.
    """
    if not cluster or not all(is_flag_point(p) for p in cluster):
        return [list(cluster)]
    return [list(cluster[i : i + 2]) for i in range(0, len(cluster), 2)]
