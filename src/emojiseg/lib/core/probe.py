# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Guess which emoji release an environment can render.

The probe needs a way to measure rendered text (for instance
:func:`emojiseg.lib.measure.font_measure`).  A ZWJ sequence the renderer
understands collapses into one glyph, so it measures narrower than its parts
drawn side by side.  A fixed battery of sequences, each introduced in a known
emoji release, is checked newest first.

This is a heuristic: a missing or failing measurement yields 0 ("unknown")
rather than an error.
"""

from collections.abc import Callable
from dataclasses import dataclass

from ..util.logging_utils import _log_debug
from .points import ZWJ

Measure = Callable[[str], float]

_ZWJ_CHAR = chr(ZWJ)


class ProbeContractError(TypeError):
    """A probe string has no ZWJ to split on (a bug in the probe table)."""


@dataclass(frozen=True)
class ProbeTier:
    """Sequences introduced in one emoji release.

    The tier passes when at least ``minimum`` of its ``probes`` render fused.
    """

    version: int
    probes: tuple[str, ...]
    minimum: int


# Newest first.  Some platforms shipped partial E13 support (no polar bear or
# transgender flag), hence only two of five are required there.
PROBE_TIERS: tuple[ProbeTier, ...] = (
    ProbeTier(
        version=13,
        probes=(
            "\U0001f470\u200d\u2642\ufe0f",  # man with veil
            "\U0001f9d1\u200d\U0001f384",  # mx claus
            "\U0001f43b\u200d\u2744\ufe0f",  # polar bear
            "\U0001f3f3\ufe0f\u200d\u26a7\ufe0f",  # transgender flag
            "\U0001f9d1\U0001f3ff\u200d\U0001f37c",  # person feeding baby: dark skin tone
        ),
        minimum=2,
    ),
    ProbeTier(
        version=12,  # really E12.1
        probes=(
            "\U0001f415\u200d\U0001f9ba",  # service dog
            "\U0001f9d1\u200d\u2696\ufe0f",  # judge
        ),
        minimum=2,
    ),
    ProbeTier(
        version=11,
        probes=(
            "\U0001f469\u200d\U0001f9b1",  # woman: curly hair
            "\U0001f9b8\u200d\u2642\ufe0f",  # man superhero
        ),
        minimum=2,
    ),
    ProbeTier(
        version=5,
        probes=("\U0001f9d8\U0001f3fd\u200d\u2640\ufe0f",),  # woman in lotus position: medium
        minimum=1,
    ),
    ProbeTier(
        version=4,
        probes=("\U0001f3f3\u200d\U0001f308",),  # rainbow flag
        minimum=1,
    ),
)


def zwj_supported(text: str, measure: Measure) -> bool:
    """Whether *text* renders narrower than its ZWJ-separated parts combined.

    Raises:
        ProbeContractError: *text* contains no ZWJ.
    """
    parts = text.split(_ZWJ_CHAR)
    if len(parts) == 1:
        raise ProbeContractError(f"not a real ZWJ sequence: {text!r}")
    total = sum(measure(part) for part in parts)
    return measure(text) < total


def tier_passes(tier: ProbeTier, measure: Measure) -> bool:
    passed = sum(1 for probe in tier.probes if zwj_supported(probe, measure))
    return passed >= tier.minimum


def probe_version(
    measure: Measure | None,
    tiers: tuple[ProbeTier, ...] = PROBE_TIERS,
) -> int:
    """Return the newest emoji release *measure* appears to support, or 0.

    Args:
        measure: Maps a string to its rendered width (any unit), or None when
            no measurement is available in this environment.
        tiers: Probe battery, newest first.

    Returns:
        The release number of the first passing tier, 0 if none passes, the
        measurement is unavailable, or measuring fails.

    Raises:
        ProbeContractError: A probe string in *tiers* is not a ZWJ sequence.
    """
    if measure is None:
        return 0

    for tier in tiers:
        try:
            ok = tier_passes(tier, measure)
        except ProbeContractError:
            raise
        except Exception as e:
            _log_debug(f"probe: measuring tier {tier.version} failed: {e!r}")
            return 0
        if ok:
            _log_debug(f"probe: tier {tier.version} passed")
            return tier.version
    _log_debug("probe: no tier passed")
    return 0
