from __future__ import annotations

# Re-export common schema classes for convenient imports
from .options import ModeDefaults, SlugDefaults, SlugOptions  # noqa: F401

__all__ = [
    "ModeDefaults",
    "SlugDefaults",
    "SlugOptions",
]
