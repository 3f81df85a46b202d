"""
Icons component - Render platform app icons with an external SVG renderer.
"""

from .component import (
    build_render_commands,
    default_icon_input,
    run,
)
from .models import (
    DEFAULT_ICON_DIR,
    DEFAULT_SOURCE_NAME,
    DEFAULT_TOOL,
    ICON_TARGETS,
    ExportIconsInput,
    ExportIconsOutput,
    IconExportError,
    IconTarget,
    RenderCommand,
)
from .ports import DirectoryPort, ProcessRunnerPort

__all__ = [
    # Component entry points
    "run",
    "build_render_commands",
    "default_icon_input",
    # Models
    "IconTarget",
    "RenderCommand",
    "ExportIconsInput",
    "ExportIconsOutput",
    # Ports
    "ProcessRunnerPort",
    "DirectoryPort",
    # Exceptions
    "IconExportError",
    # Constants
    "ICON_TARGETS",
    "DEFAULT_TOOL",
    "DEFAULT_ICON_DIR",
    "DEFAULT_SOURCE_NAME",
]
