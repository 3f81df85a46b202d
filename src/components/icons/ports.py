"""
Icons component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ProcessRunnerPort(Protocol):
    """Port for running an external program to completion."""

    def run(self, argv: Sequence[str]) -> None:
        """Run argv and block until it exits. Raises IconExportError on failure."""
        ...


class DirectoryPort(Protocol):
    """Port for output directory management."""

    def ensure_dir(self, path: Path) -> None:
        """Create path (and parents) if missing. Safe to call repeatedly."""
        ...
