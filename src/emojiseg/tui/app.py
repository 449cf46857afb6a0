#!/usr/bin/env python3

import sys

from ..lib.core.encoding import decode, parse_label
from ..lib.core.segment import count_width
from ..lib.util.emoji import ClusterWidth, compare_widths

# Try to detect whether 'textual' is available. We avoid importing it at
# import time so the package can be installed without the optional TUI
# dependencies.
try:  # pragma: no cover - simple availability probe
    import importlib.util

    _HAS_TEXTUAL = importlib.util.find_spec("textual") is not None
except Exception:  # pragma: no cover - textual not installed
    _HAS_TEXTUAL = False


def analyse(value: str) -> tuple[list[ClusterWidth], int, str | None]:
    """Split the input box contents into rows for the cluster table.

    Input starting with ``hex:`` is parsed as a label.  Returns
    ``(rows, total_width, error)``; on a parse error rows are empty.
    """
    if value.startswith("hex:"):
        try:
            points = parse_label(value[4:], sep=None)
        except ValueError as e:
            return [], 0, str(e)
        text = "".join(chr(p) for p in points)
    else:
        text = value
        points = decode(text)
    return compare_widths(text), count_width(points), None


def status_line(rows: list[ClusterWidth], total: int, error: str | None) -> str:
    if error:
        return f"error: {error}"
    mismatches = sum(1 for r in rows if r.columns != r.rich)
    return f"{len(rows)} cluster(s) · width {total} · {mismatches} differ from rich"


if _HAS_TEXTUAL:
    from textual import on
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import DataTable, Footer, Header, Input, Static

    from ..lib.core.version import get_version_info as _get_version_info

    class EmojisegTUI(App):
        """Live cluster inspector: type text, see clusters and widths."""

        CSS = """
        Screen {
            layout: vertical;
            background: $background;
        }

        #clusters {
            border: round $primary;
            border-title-align: right;
            height: 1fr;
        }

        #status {
            height: 1;
            padding: 0 1;
            color: $text-muted;
        }
        """

        BINDINGS = [
            ("q", "quit", "Quit"),
            ("ctrl+l", "clear", "Clear"),
        ]

        def compose(self) -> ComposeResult:
            yield Header()
            with Vertical():
                yield Input(placeholder="Type or paste emoji (prefix with hex: for labels)", id="entry")
                yield DataTable(id="clusters")
                yield Static("", id="status")
            yield Footer()

        def on_mount(self) -> None:
            version, revision = _get_version_info()
            self.title = f"emojiseg {version}" + (f" [{revision}]" if revision else "")
            table = self.query_one("#clusters", DataTable)
            table.border_title = "Clusters"
            table.add_columns("#", "label", "glyph", "estimate", "columns", "rich")
            table.cursor_type = "row"

        @on(Input.Changed, "#entry")
        def _entry_changed(self, event: Input.Changed) -> None:
            self._refresh(event.value)

        def action_clear(self) -> None:
            self.query_one("#entry", Input).value = ""

        def _refresh(self, value: str) -> None:
            rows, total, error = analyse(value)
            table = self.query_one("#clusters", DataTable)
            table.clear()
            for i, row in enumerate(rows, 1):
                table.add_row(
                    str(i), row.label, row.text, str(row.estimated), str(row.columns), str(row.rich)
                )
            self.query_one("#status", Static).update(status_line(rows, total, error))

    def main() -> None:
        """Entry point for ``emojiseg-tui``."""
        EmojisegTUI().run()

else:

    def main() -> None:
        print(
            "emojiseg TUI requires the 'textual' package.\n"
            "Install it with: pip install textual",
            file=sys.stderr,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
