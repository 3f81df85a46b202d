"""
Adapters for the icons component.
"""

from .filesystem import LocalDirectoryAdapter, default_directories
from .subprocess_runner import SubprocessRunner

__all__ = [
    "LocalDirectoryAdapter",
    "SubprocessRunner",
    "default_directories",
]
