# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a timestamped debug line to ``state_root()/emojiseg.log``.

    Best-effort: any IO error is ignored so this never affects callers.  Set
    ``EMOJISEG_NO_LOG`` to disable logging entirely.
    """
    try:
        import os
        import time

        if os.environ.get("EMOJISEG_NO_LOG"):
            return

        from ..core.paths import state_root

        log_path = state_root() / "emojiseg.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
