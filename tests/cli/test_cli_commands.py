# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

import sys
import unittest
import unittest.mock
from contextlib import redirect_stdout
from io import StringIO

from test_utils import config_env

from emojiseg.cli.main import main


def run_cli(*args: str, yaml_text: str | None = None) -> str:
    buffer = StringIO()
    with (
        config_env(yaml_text),
        unittest.mock.patch.object(sys, "argv", ["emojiseg", *args]),
        unittest.mock.patch("emojiseg.cli.main._supports_color", return_value=False),
        redirect_stdout(buffer),
    ):
        main()
    return buffer.getvalue()


class SplitCommandTests(unittest.TestCase):
    def test_split_hex(self) -> None:
        out = run_cli("split", "--hex", "1f469_200d_2764_200d_1f468_1f1e6_1f1fa")
        labels = [line.split("\t")[0] for line in out.splitlines()]
        self.assertEqual(labels, ["1f469_200d_2764_200d_1f468", "1f1e6_1f1fa"])

    def test_split_raw_text(self) -> None:
        out = run_cli("split", "\U0001f602\U0001f602")
        self.assertEqual(len(out.splitlines()), 2)

    def test_split_pair_flags(self) -> None:
        out = run_cli("split", "--pair-flags", "--hex", "1f1e6 1f1fa 1f1fa")
        labels = [line.split("\t")[0] for line in out.splitlines()]
        self.assertEqual(labels, ["1f1e6_1f1fa", "1f1fa"])

    def test_split_uses_config_separator(self) -> None:
        out = run_cli("split", "--hex", "1f1e6_1f1fa", yaml_text="stringify:\n  sep: '-'\n")
        self.assertTrue(out.startswith("1f1e6-1f1fa\t"))

    def test_bad_hex_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            run_cli("split", "--hex", "xyz")
        self.assertIn("invalid hex group", str(ctx.exception.code))


class WidthAndLabelTests(unittest.TestCase):
    def test_width(self) -> None:
        self.assertEqual(run_cli("width", "--hex", "1f469_200d_1f469_200d_1f466").strip(), "1")
        self.assertEqual(run_cli("width", "--hex", "1f602_1f602_1f602").strip(), "3")
        self.assertEqual(run_cli("width", "").strip(), "0")

    def test_label_defaults(self) -> None:
        self.assertEqual(run_cli("label", "--hex", "23_fe0f_20e3").strip(), "23_20e3")

    def test_label_flags(self) -> None:
        out = run_cli("label", "--upper", "--pad", "4", "--sep", "-", "--keep-vs16", "--hex", "23_fe0f_20e3")
        self.assertEqual(out.strip(), "0023-FE0F-20E3")

    def test_label_config_then_flag(self) -> None:
        yaml_text = "stringify:\n  sep: ' '\n  lower: false\n"
        self.assertEqual(run_cli("label", "--hex", "1f602_1f44d", yaml_text=yaml_text).strip(), "1F602 1F44D")
        self.assertEqual(
            run_cli("label", "--sep", "+", "--hex", "1f602_1f44d", yaml_text=yaml_text).strip(),
            "1F602+1F44D",
        )

    def test_label_with_bad_config_value_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            run_cli("label", "--hex", "23", yaml_text="stringify:\n  pad: 'x'\n")
        self.assertIn("stringify.pad", str(ctx.exception.code))


class InspectProbeConfigTests(unittest.TestCase):
    def test_inspect_table(self) -> None:
        out = run_cli("inspect", "--hex", "1f469_200d_1f469_200d_1f466_1f602")
        self.assertIn("2 cluster(s)", out)
        self.assertIn("1f469_200d_1f469_200d_1f466", out)
        self.assertIn("total width: 2", out)

    def test_probe_without_font(self) -> None:
        out = run_cli("probe")
        self.assertEqual(out.splitlines()[-1], "0")

    def test_probe_with_unloadable_font(self) -> None:
        with unittest.mock.patch("emojiseg.lib.measure.font_measure", return_value=None):
            with self.assertRaises(SystemExit):
                run_cli("probe", "--font", "/missing.ttf")

    def test_probe_with_font(self) -> None:
        with (
            unittest.mock.patch("emojiseg.lib.measure.font_measure", return_value=len),
            unittest.mock.patch("emojiseg.cli.main.probe_version", return_value=13) as probe,
        ):
            out = run_cli("probe", "--font", "/emoji.ttf", "--size", "64")
        self.assertEqual(out.strip(), "13")
        probe.assert_called_once_with(len)

    def test_config_output(self) -> None:
        out = run_cli("config", yaml_text="stringify:\n  pad: 4\n")
        self.assertIn("Global config file:", out)
        self.assertIn("stringify", out)
        self.assertIn("pad: 4", out)
        self.assertIn("defaults, global", out)


if __name__ == "__main__":
    unittest.main()
