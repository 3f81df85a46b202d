"""
Icons component - Render the desktop app icon set from one SVG.

Invariants:
- The icon directory exists before any renderer invocation
- Invocations run one at a time, in target table order
- The first failed invocation aborts the export; nothing after it runs
- Files already written are left in place on failure
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .models import (
    DEFAULT_ICON_DIR,
    DEFAULT_SOURCE_NAME,
    DEFAULT_TOOL,
    ICON_TARGETS,
    ExportIconsInput,
    ExportIconsOutput,
    IconTarget,
    RenderCommand,
)
from .ports import DirectoryPort, ProcessRunnerPort

logger = logging.getLogger(__name__)


def default_icon_input(
    project_root: Path,
    *,
    icon_dir: Path | str = DEFAULT_ICON_DIR,
    source_name: str = DEFAULT_SOURCE_NAME,
) -> ExportIconsInput:
    """
    Resolve the conventional icon paths under a project root.

    The source SVG lives inside the icon directory it is rendered into.
    """
    resolved_dir = project_root / icon_dir
    return ExportIconsInput(icon_dir=resolved_dir, source=resolved_dir / source_name)


def build_render_commands(
    source: Path,
    icon_dir: Path,
    *,
    tool: str = DEFAULT_TOOL,
    targets: Sequence[IconTarget] = ICON_TARGETS,
) -> list[RenderCommand]:
    """
    Build one renderer command per target.

    Pure function - no I/O operations.
    """
    commands = []
    for target in targets:
        destination = icon_dir / target.filename
        argv = (tool, str(source), str(destination), target.dimension_spec)
        commands.append(RenderCommand(target=target, destination=destination, argv=argv))
    return commands


def run(
    inp: ExportIconsInput,
    *,
    runner: ProcessRunnerPort,
    fs: DirectoryPort,
    tool: str = DEFAULT_TOOL,
) -> ExportIconsOutput:
    """
    Export the full icon set.

    Args:
        inp: Icon directory and source SVG.
        runner: Process runner port used for each renderer call.
        fs: Directory port used to create the icon directory.
        tool: Renderer executable name or path.

    Returns:
        ExportIconsOutput listing the written files in order.

    Raises:
        IconExportError: On the first failed invocation.
    """
    fs.ensure_dir(inp.icon_dir)

    written: list[Path] = []
    for command in build_render_commands(inp.source, inp.icon_dir, tool=tool):
        runner.run(command.argv)
        written.append(command.destination)
        logger.info("Wrote %s (%s)", command.destination.name, command.target.dimension_spec)

    return ExportIconsOutput(icon_dir=inp.icon_dir, written=tuple(written))
