#!/usr/bin/env python3

import argparse
import os
from pathlib import Path

from ..lib.core.config import (
    build_stack,
    get_display_pad_width,
    get_probe_font,
    get_stringify_options,
    global_config_path,
    global_config_search_paths,
)
from ..lib.core.encoding import decode, encode, parse_label
from ..lib.core.paths import config_root, state_root
from ..lib.core.probe import PROBE_TIERS, probe_version
from ..lib.core.segment import count_width, iter_clusters, pair_flags
from ..lib.core.stringify import stringify
from ..lib.core.version import format_version_string, get_version_info
from ..lib.util.emoji import draw_emoji
from ..lib.util.logging_utils import _log_debug
from ..ui_utils.terminal import (
    gray as _gray,
    supports_color as _supports_color,
    violet as _violet,
    yes_no as _yes_no,
)

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except Exception:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore


def _read_points(text: str, as_hex: bool) -> list[int]:
    """Turn the TEXT argument into code points (raw text or a hex label)."""
    if not as_hex:
        return decode(text)
    try:
        return parse_label(text, sep=None)
    except ValueError as e:
        raise SystemExit(f"Error: {e}")


def _cmd_split(points: list[int], pairs: bool) -> None:
    """Print one cluster per line: label, then the cluster padded for alignment."""
    options = get_stringify_options()
    pad_width = get_display_pad_width()
    for cluster in iter_clusters(points):
        groups = pair_flags(cluster) if pairs else [cluster]
        for group in groups:
            print(f"{stringify(group, options=options)}\t{draw_emoji(encode(group), pad_width)}")


def _cmd_inspect(points: list[int]) -> None:
    """Render a per-cluster table comparing the estimator with Rich."""
    from rich.console import Console
    from rich.table import Table

    from ..lib.util.emoji import compare_widths

    rows = compare_widths(encode(points))
    table = Table(title=f"{len(rows)} cluster(s)", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("label", no_wrap=True)
    table.add_column("glyph")
    table.add_column("est", justify="right")
    table.add_column("cols", justify="right")
    table.add_column("rich", justify="right")
    for i, row in enumerate(rows, 1):
        mismatch = row.columns != row.rich
        table.add_row(
            str(i),
            row.label,
            row.text,
            str(row.estimated),
            str(row.columns),
            f"[yellow]{row.rich}[/yellow]" if mismatch else str(row.rich),
        )
    console = Console()
    console.print(table)
    console.print(f"total width: [bold]{count_width(points)}[/bold]")


def _cmd_probe(font: str | None, size: int | None) -> None:
    from ..lib.measure import font_measure

    cfg_font, cfg_size = get_probe_font()
    font = font or cfg_font
    size = size or cfg_size
    if not font:
        print("No font given (use --font or probe.font in config.yml); version unknown")
        print(0)
        return
    measure = font_measure(font, size)
    if measure is None:
        raise SystemExit(f"Error: could not load font {font}")
    version = probe_version(measure)
    _log_debug(f"cli probe: font={font} size={size} -> {version}")
    print(version)


def _print_config() -> None:
    """Display config search paths and the resolved settings."""
    color_enabled = _supports_color()
    print("Configuration (read):")
    gcfg = global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    print("- Global config search order:")
    for p in global_config_search_paths():
        print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(p.is_file(), color_enabled)})")
    print(f"- Config root: {_gray(str(config_root()), color_enabled)}")

    print("Writable locations (write):")
    log_path = state_root() / "emojiseg.log"
    print(f"- Debug log: {_gray(str(log_path), color_enabled)}")

    stack = build_stack()
    print("Resolved settings:")
    for section, values in sorted(stack.resolve().items()):
        print(f"- {_violet(section, color_enabled)}:")
        for key, value in sorted(values.items()):
            print(f"  • {key}: {value!r}")
    levels = [s.level for s in stack.scopes]
    print(f"- Layers (low → high): {', '.join(levels)}")

    print(f"Probe tiers: {', '.join(str(t.version) for t in PROBE_TIERS)}")

    print("Environment overrides (if set):")
    for var in (
        "EMOJISEG_CONFIG_FILE",
        "EMOJISEG_CONFIG_DIR",
        "EMOJISEG_STATE_DIR",
        "EMOJISEG_NO_LOG",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")


def _add_text_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", help="Text to analyse (or a hex label with --hex)")
    p.add_argument(
        "--hex",
        action="store_true",
        help="Interpret TEXT as hex code points, e.g. 1f469_200d_1f4bb or 'U+1F1E6 U+1F1FA'",
    )


def main(argv: list[str] | None = None) -> None:
    version, revision = get_version_info()
    version_string = format_version_string(version, revision)

    parser = argparse.ArgumentParser(
        prog="emojiseg",
        description="emojiseg – split emoji sequences into clusters and estimate their width",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  emojiseg split --hex 1f469_200d_2764_200d_1f468_1f1e6_1f1fa\n"
            "  emojiseg width --hex 1f469_200d_1f469_200d_1f466\n"
            "  emojiseg label --upper --pad 4 --hex 23_fe0f_20e3\n"
            "  emojiseg probe --font /usr/share/fonts/noto/NotoColorEmoji.ttf\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"emojiseg {version_string}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_split = sub.add_parser("split", help="Print the emoji clusters of TEXT, one per line")
    _add_text_argument(p_split)
    p_split.add_argument(
        "--pair-flags",
        action="store_true",
        help="Break runs of regional indicators into two-letter flags",
    )

    p_width = sub.add_parser("width", help="Print the estimated display width of TEXT")
    _add_text_argument(p_width)

    p_label = sub.add_parser("label", help="Print the hex label of TEXT")
    _add_text_argument(p_label)
    p_label.add_argument("--sep", default=None, help="Separator between groups (default: _)")
    p_label.add_argument("--pad", type=int, default=None, help="Minimum hex digits per group")
    p_label.add_argument("--upper", action="store_true", help="Uppercase hex digits")
    p_label.add_argument(
        "--keep-vs16", action="store_true", help="Keep U+FE0F variation selectors in the label"
    )

    p_inspect = sub.add_parser("inspect", help="Show a per-cluster width table for TEXT")
    _add_text_argument(p_inspect)

    p_probe = sub.add_parser("probe", help="Guess the emoji release a font can render")
    p_probe.add_argument("--font", default=None, help="Path to a TrueType/OpenType emoji font")
    p_probe.add_argument("--size", type=int, default=None, help="Font size (default: 109)")

    sub.add_parser("config", help="Show configuration paths and resolved settings")

    if argcomplete is not None:  # pragma: no cover - shell integration
        argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)

    if args.cmd == "split":
        _cmd_split(_read_points(args.text, args.hex), args.pair_flags)
    elif args.cmd == "width":
        print(count_width(_read_points(args.text, args.hex)))
    elif args.cmd == "label":
        options = get_stringify_options(
            {
                "sep": args.sep,
                "pad": args.pad,
                "lower": False if args.upper else None,
                "unqualify": False if args.keep_vs16 else None,
            }
        )
        print(stringify(_read_points(args.text, args.hex), options=options))
    elif args.cmd == "inspect":
        _cmd_inspect(_read_points(args.text, args.hex))
    elif args.cmd == "probe":
        _cmd_probe(args.font, args.size)
    elif args.cmd == "config":
        _print_config()
    else:
        parser.error("Unknown command")


if __name__ == "__main__":
    main()
