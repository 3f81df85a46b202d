"""
Style tokens Functional Core: the declaration and pure helpers.

No I/O operations - rendering returns text, validation returns results.
"""

from __future__ import annotations

import re
from typing import Any

from ..models import StyleConfig, ThemeExtension, ValidationResult

# ═══════════════════════════════════════════════════════════════════════════
# DECLARATION
# ═══════════════════════════════════════════════════════════════════════════

TAILWIND_CONFIG = StyleConfig(
    content=(
        "./index.html",
        "./src/**/*.{vue,js,ts,jsx,tsx}",
    ),
    extend=ThemeExtension(
        colors={
            "apple-gray": "#f5f5f7",
            "apple-blue": "#0071e3",
            "apple-dark": "#1d1d1f",
        },
        font_family={
            "sans": ("SF Pro Display", "system-ui", "sans-serif"),
        },
    ),
    plugins=(),
)
"""Styling configuration consumed by the Tailwind build."""


# ═══════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════

HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")

GENERIC_FONT_FAMILIES = (
    "serif",
    "sans-serif",
    "monospace",
    "cursive",
    "fantasy",
    "system-ui",
    "ui-serif",
    "ui-sans-serif",
    "ui-monospace",
    "ui-rounded",
)
"""CSS generic families; every font stack must end with one."""


def validate_color_token(hex_color: str) -> ValidationResult:
    """
    Validate a hex color token format.

    Args:
        hex_color: Color in hex format (#RGB or #RRGGBB)

    Returns:
        ValidationResult with violations if format is invalid
    """
    if HEX_COLOR_PATTERN.match(hex_color):
        return ValidationResult(is_valid=True)

    return ValidationResult(
        is_valid=False,
        violations=[f"Invalid hex color format: {hex_color}. Expected #RGB or #RRGGBB"],
    )


def validate_font_stack(role: str, stack: tuple[str, ...]) -> ValidationResult:
    """Check a font stack is non-empty and falls back to a generic family."""
    if not stack:
        return ValidationResult(
            is_valid=False,
            violations=[f"Font role '{role}' has an empty stack"],
        )

    if stack[-1].lower() not in GENERIC_FONT_FAMILIES:
        return ValidationResult(
            is_valid=False,
            violations=[f"Font role '{role}' must end with a generic family, got '{stack[-1]}'"],
        )

    return ValidationResult(is_valid=True)


def validate_style_config(config: StyleConfig) -> ValidationResult:
    """
    Validate the whole declaration.

    Collects every violation rather than stopping at the first.
    """
    violations: list[str] = []
    warnings: list[str] = []

    if not config.content:
        violations.append("content must list at least one scan pattern")
    for pattern in config.content:
        if not pattern.strip():
            violations.append("content contains an empty scan pattern")

    for name, value in config.extend.colors.items():
        result = validate_color_token(value)
        violations.extend(f"colors.{name}: {v}" for v in result.violations)

    for role, stack in config.extend.font_family.items():
        result = validate_font_stack(role, tuple(stack))
        violations.extend(result.violations)

    if not config.extend.colors and not config.extend.font_family:
        warnings.append("Theme extension declares no tokens")

    return ValidationResult(
        is_valid=len(violations) == 0,
        violations=violations,
        warnings=warnings,
    )


# ═══════════════════════════════════════════════════════════════════════════
# RENDERING
# Output mirrors a hand-written tailwind.config.js
# ═══════════════════════════════════════════════════════════════════════════

CONFIG_TYPE_ANNOTATION = "/** @type {import('tailwindcss').Config} */"

DOUBLE_QUOTE = '"'

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def to_tailwind_dict(config: StyleConfig) -> dict[str, Any]:
    """Return the plain mapping shape Tailwind reads (camelCase keys)."""
    return {
        "content": list(config.content),
        "theme": {
            "extend": {
                "colors": dict(config.extend.colors),
                "fontFamily": {
                    role: list(stack) for role, stack in config.extend.font_family.items()
                },
            },
        },
        "plugins": list(config.plugins),
    }


def _js_string(value: str, quote: str = "'") -> str:
    escaped = value.replace("\\", "\\\\").replace(quote, "\\" + quote)
    return f"{quote}{escaped}{quote}"


def _js_key(key: str) -> str:
    return key if _JS_IDENTIFIER.match(key) else _js_string(key)


def render_tailwind_config(config: StyleConfig) -> str:
    """
    Render the declaration as an ES module tailwind.config.js.

    Plugin entries are JavaScript expressions and are emitted verbatim.
    """
    lines = [CONFIG_TYPE_ANNOTATION, "export default {", "  content: ["]
    lines += [f"    {_js_string(pattern, quote=DOUBLE_QUOTE)}," for pattern in config.content]
    lines += ["  ],", "  theme: {", "    extend: {", "      colors: {"]
    lines += [
        f"        {_js_key(name)}: {_js_string(value)},"
        for name, value in config.extend.colors.items()
    ]
    lines += ["      },", "      fontFamily: {"]
    for role, stack in config.extend.font_family.items():
        fonts = ", ".join(_js_string(font) for font in stack)
        lines.append(f"        {_js_key(role)}: [{fonts}],")
    lines += ["      },", "    },", "  },"]
    plugins = ", ".join(config.plugins)
    lines += [f"  plugins: [{plugins}],", "}"]
    return "\n".join(lines) + "\n"


__all__ = [
    "TAILWIND_CONFIG",
    "GENERIC_FONT_FAMILIES",
    "validate_color_token",
    "validate_font_stack",
    "validate_style_config",
    "to_tailwind_dict",
    "render_tailwind_config",
]
