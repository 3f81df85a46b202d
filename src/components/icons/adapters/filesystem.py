"""
Local file system adapter for the icons component.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalDirectoryAdapter:
    """Adapter for creating output directories on the local disk."""

    def ensure_dir(self, path: Path) -> None:
        if not path.exists():
            logger.debug("Creating icon directory %s", path)
        path.mkdir(parents=True, exist_ok=True)


default_directories = LocalDirectoryAdapter()
