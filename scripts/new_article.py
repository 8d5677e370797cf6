#!/usr/bin/env python3
"""Create a new Zenn article stub from a source checkout.

Usage:
    python scripts/new_article.py [--dir articles] [--topic TAG ...] [--dry-run]

Same flags as the installed ``zenn-new-article`` command.
"""
from __future__ import annotations

import sys
from pathlib import Path

# ── Make sure the project root is on sys.path ────────────────────────────────
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from zenn_scaffold.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
