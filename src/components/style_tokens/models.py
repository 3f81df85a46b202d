"""
Style tokens component models.

The declaration is immutable: dataclasses are frozen and mapping fields
are stored as read-only views.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

DEFAULT_CONFIG_FILENAME = "tailwind.config.js"


@dataclass(frozen=True)
class ThemeExtension:
    """Tokens added on top of the Tailwind default theme."""

    colors: Mapping[str, str] = field(default_factory=dict)
    font_family: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))
        stacks = {role: tuple(stack) for role, stack in self.font_family.items()}
        object.__setattr__(self, "font_family", MappingProxyType(stacks))


@dataclass(frozen=True)
class StyleConfig:
    """Tailwind configuration: scan paths, theme extension and plugins."""

    content: tuple[str, ...]
    extend: ThemeExtension
    plugins: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))
        object.__setattr__(self, "plugins", tuple(self.plugins))


@dataclass
class ValidationResult:
    """Result of a style declaration check."""

    is_valid: bool
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# --- Input / Output ---


@dataclass(frozen=True)
class WriteConfigInput:
    """Input for writing the Tailwind config file."""

    output_dir: Path
    filename: str = DEFAULT_CONFIG_FILENAME


@dataclass(frozen=True)
class WriteConfigOutput:
    """Output from writing the Tailwind config file."""

    path: Path | None
    errors: list[str] = field(default_factory=list)
    success: bool = True
