# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Text measurement backed by Pillow fonts, for the version probe.

Fusing ZWJ sequences into a single glyph needs complex text layout, so the
Raqm layout engine is requested when Pillow was built with it; the basic
engine lays out each code point separately and every probe fails (version 0).
"""

from collections.abc import Callable
from pathlib import Path

from PIL import ImageFont, features

from .util.logging_utils import _log_debug

# Bitmap emoji fonts (Noto Color Emoji) only load at their strike size.
DEFAULT_FONT_SIZE = 109


def _layout_engine() -> int:
    if features.check("raqm"):
        return ImageFont.Layout.RAQM
    return ImageFont.Layout.BASIC


def load_font(font_path: str | Path, size: int = DEFAULT_FONT_SIZE) -> ImageFont.FreeTypeFont | None:
    """Load a TrueType/OpenType font, or return None if it cannot be read."""
    try:
        return ImageFont.truetype(str(font_path), size, layout_engine=_layout_engine())
    except OSError as e:
        _log_debug(f"measure: cannot load font {font_path}: {e}")
        return None


def font_measure(
    font_path: str | Path | None, size: int = DEFAULT_FONT_SIZE
) -> Callable[[str], float] | None:
    """Return a ``text -> advance width`` callable for *font_path*.

    Returns None when no font is given or it fails to load, which makes
    :func:`~emojiseg.lib.core.probe.probe_version` report 0.
    """
    if not font_path:
        return None
    font = load_font(font_path, size)
    if font is None:
        return None

    def measure(text: str) -> float:
        return float(font.getlength(text))

    return measure
