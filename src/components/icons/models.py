"""
Icons component input/output models.

The target table is fixed: three PNG sizes for the app bundle plus the
Windows and macOS multi-resolution containers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

IconKind = Literal["png", "ico", "icns"]

DEFAULT_TOOL = "svgexport"
DEFAULT_ICON_DIR = Path("src-tauri") / "icons"
DEFAULT_SOURCE_NAME = "icon.svg"


# --- Targets ---


@dataclass(frozen=True)
class IconTarget:
    """One rendered output file."""

    filename: str
    width: int
    height: int
    kind: IconKind

    @property
    def dimension_spec(self) -> str:
        """Size argument in the renderer's "<width>:<height>" form."""
        return f"{self.width}:{self.height}"


ICON_TARGETS: tuple[IconTarget, ...] = (
    IconTarget("32x32.png", 32, 32, "png"),
    IconTarget("128x128.png", 128, 128, "png"),
    # High-density variant of the 128px icon
    IconTarget("128x128@2x.png", 256, 256, "png"),
    IconTarget("icon.ico", 256, 256, "ico"),
    IconTarget("icon.icns", 1024, 1024, "icns"),
)


@dataclass(frozen=True)
class RenderCommand:
    """A single renderer invocation."""

    target: IconTarget
    destination: Path
    argv: tuple[str, ...]


# --- Input / Output ---


@dataclass(frozen=True)
class ExportIconsInput:
    """Input for exporting the icon set."""

    icon_dir: Path
    source: Path


@dataclass(frozen=True)
class ExportIconsOutput:
    """Output from a completed export."""

    icon_dir: Path
    written: tuple[Path, ...]


# --- Errors ---


class IconExportError(Exception):
    """Raised when an external renderer invocation fails."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr

        if returncode is None:
            reason = "could not be started"
        else:
            reason = f"exited with status {returncode}"
        message = f"Renderer {reason}: {' '.join(self.command)}"
        if stderr.strip():
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)
