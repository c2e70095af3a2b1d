from slugkit.repositories.charmap import (
    BUILTIN_MODES,
    CharmapRegistry,
    build_defaults,
)

__all__ = [
    "BUILTIN_MODES",
    "CharmapRegistry",
    "build_defaults",
]
