# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""TUI entry point for ``python -m emojiseg.tui``."""

from .app import main

if __name__ == "__main__":
    main()
