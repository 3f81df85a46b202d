"""
Style tokens component - Tailwind scan paths, colour and font tokens.

Provides the static declaration, its validation and rendering to the
tailwind.config.js file read by the frontend build.
"""

from src.components.style_tokens.component import (
    LocalTextFileAdapter,
    TextFilePort,
    default_files,
    run_write,
)
from src.components.style_tokens.fc import (
    GENERIC_FONT_FAMILIES,
    TAILWIND_CONFIG,
    render_tailwind_config,
    to_tailwind_dict,
    validate_color_token,
    validate_font_stack,
    validate_style_config,
)
from src.components.style_tokens.models import (
    DEFAULT_CONFIG_FILENAME,
    StyleConfig,
    ThemeExtension,
    ValidationResult,
    WriteConfigInput,
    WriteConfigOutput,
)

__all__ = [
    "TAILWIND_CONFIG",
    "StyleConfig",
    "ThemeExtension",
    "ValidationResult",
    "WriteConfigInput",
    "WriteConfigOutput",
    "validate_color_token",
    "validate_font_stack",
    "validate_style_config",
    "to_tailwind_dict",
    "render_tailwind_config",
    "run_write",
    "TextFilePort",
    "LocalTextFileAdapter",
    "default_files",
    "GENERIC_FONT_FAMILIES",
    "DEFAULT_CONFIG_FILENAME",
]
