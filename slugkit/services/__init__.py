from slugkit.services.slug import Slugifier, coerce_options, resolve_options, slugify
from slugkit.services.transliteration import ResolvedOptions, transliterate

__all__ = [
    "ResolvedOptions",
    "Slugifier",
    "coerce_options",
    "resolve_options",
    "slugify",
    "transliterate",
]
