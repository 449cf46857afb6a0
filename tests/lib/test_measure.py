# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Tests for Pillow-backed text measurement."""

import os
import tempfile
import unittest
import unittest.mock

from emojiseg.lib import measure
from emojiseg.lib.core.probe import PROBE_TIERS, probe_version


class FakeFont:
    """Stand-in for ImageFont.FreeTypeFont that fuses the given strings."""

    def __init__(self, fused: set[str]) -> None:
        self.fused = fused

    def getlength(self, text: str) -> float:
        if text in self.fused:
            return 136.0
        return 136.0 * sum(1 for ch in text if ch != "\u200d")


class FontMeasureTests(unittest.TestCase):
    def setUp(self) -> None:
        td = tempfile.TemporaryDirectory()
        self.addCleanup(td.cleanup)
        patcher = unittest.mock.patch.dict(os.environ, {"EMOJISEG_STATE_DIR": td.name})
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_no_font_path(self) -> None:
        self.assertIsNone(measure.font_measure(None))
        self.assertIsNone(measure.font_measure(""))

    def test_unloadable_font(self) -> None:
        with unittest.mock.patch.object(
            measure.ImageFont, "truetype", side_effect=OSError("cannot open resource")
        ):
            self.assertIsNone(measure.load_font("/missing.ttf"))
            self.assertIsNone(measure.font_measure("/missing.ttf"))

    def test_measure_uses_getlength(self) -> None:
        with unittest.mock.patch.object(
            measure.ImageFont, "truetype", return_value=FakeFont(set())
        ) as truetype:
            fn = measure.font_measure("/emoji.ttf", 32)
            self.assertEqual(fn("ab"), 272.0)
            args, kwargs = truetype.call_args
            self.assertEqual(args, ("/emoji.ttf", 32))
            self.assertIn("layout_engine", kwargs)

    def test_probe_with_font(self) -> None:
        fused = set(PROBE_TIERS[1].probes)
        with unittest.mock.patch.object(
            measure.ImageFont, "truetype", return_value=FakeFont(fused)
        ):
            self.assertEqual(probe_version(measure.font_measure("/emoji.ttf")), 12)


if __name__ == "__main__":
    unittest.main()
