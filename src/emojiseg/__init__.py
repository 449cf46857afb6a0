"""emojiseg package.

Emoji cluster segmentation and display-width estimation over Unicode code
points.

Modules:
- emojiseg.lib.core.points: code point classification
- emojiseg.lib.core.segment: cluster iterator and width estimator
- emojiseg.lib.core.stringify: hex labels for sequences
- emojiseg.lib.core.probe: emoji release probe over a measurement callable
- emojiseg.lib.core.encoding: ``str`` wrappers (decode, split, parse_label)
- emojiseg.lib.core.config: global config file (YAML)
- emojiseg.lib.measure: Pillow-backed measurement
- emojiseg.lib.util.emoji: terminal padding helpers (Rich)
- emojiseg.cli: CLI entry point (emojiseg)
- emojiseg.tui: Text UI entry point (emojiseg-tui)
"""

from .lib.core.points import (
    classify,
    is_before_cap,
    is_flag_point,
    is_skin_tone,
    is_tag,
)
from .lib.core.probe import ProbeContractError, probe_version
from .lib.core.segment import count_width, iter_clusters, pair_flags, segment
from .lib.core.stringify import StringifyOptions, stringify

__all__ = [
    "classify",
    "is_skin_tone",
    "is_flag_point",
    "is_tag",
    "is_before_cap",
    "count_width",
    "segment",
    "iter_clusters",
    "pair_flags",
    "stringify",
    "StringifyOptions",
    "probe_version",
    "ProbeContractError",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("emojiseg")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
