#!/usr/bin/env python3
"""
Generate the desktop app icons from src-tauri/icons/icon.svg.

Requires the svgexport renderer on PATH (npm install -g svgexport).

Usage:
    python scripts/generate_icons.py
"""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# Ensure src is importable when running as a script
sys.path.insert(0, str(PROJECT_ROOT))

from src.app_shell.cli import main  # noqa: E402

if __name__ == "__main__":
    main(["--project-root", str(PROJECT_ROOT), "icons"])
