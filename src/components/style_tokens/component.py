"""
Style tokens component - writes the rendered Tailwind config.

Validation and rendering stay in the functional core; this module only
orchestrates them with file output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .fc import TAILWIND_CONFIG, render_tailwind_config, validate_style_config
from .models import StyleConfig, WriteConfigInput, WriteConfigOutput

logger = logging.getLogger(__name__)


class TextFilePort(Protocol):
    """Port for writing text files."""

    def write_text(self, path: Path, content: str) -> None:
        """Write content to path, creating parent directories."""
        ...


class LocalTextFileAdapter:
    """Adapter for writing text files on the local disk."""

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)


default_files = LocalTextFileAdapter()


def run_write(
    inp: WriteConfigInput,
    *,
    fs: TextFilePort,
    config: StyleConfig = TAILWIND_CONFIG,
) -> WriteConfigOutput:
    """
    Validate the declaration and write it as tailwind.config.js.

    Args:
        inp: Target directory and file name.
        fs: Text file port.
        config: Declaration to write. Defaults to TAILWIND_CONFIG.

    Returns:
        WriteConfigOutput with the written path, or errors if the
        declaration is invalid (nothing is written in that case).
    """
    result = validate_style_config(config)
    if not result.is_valid:
        return WriteConfigOutput(path=None, errors=result.violations, success=False)

    for warning in result.warnings:
        logger.warning(warning)

    path = inp.output_dir / inp.filename
    fs.write_text(path, render_tailwind_config(config))
    logger.info("Wrote %s", path)
    return WriteConfigOutput(path=path, errors=[], success=True)


__all__ = [
    "TextFilePort",
    "LocalTextFileAdapter",
    "default_files",
    "run_write",
]
