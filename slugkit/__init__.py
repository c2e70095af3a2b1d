"""Turn arbitrary text into URL-safe slugs.

    >>> from slugkit import slug
    >>> slug("Hello World!")
    'hello-world'
    >>> slug.extend({"☢": "radioactive"})
    >>> slug("NO ☢")
    'no-radioactive'
    >>> slug.reset()

``slug`` is a module-level :class:`Slugifier` seeded from :class:`Config`.
Code that needs isolated tables builds its own ``Slugifier(CharmapRegistry())``.
"""
from __future__ import annotations

from slugkit.charmaps import INITIAL_CHARMAP, INITIAL_MULTICHARMAP, LOCALES
from slugkit.config import Config
from slugkit.exceptions import CoherenceError, InvalidArgumentError, SlugError, UnknownModeError
from slugkit.repositories.charmap import CharmapRegistry
from slugkit.schemas import ModeDefaults, SlugDefaults, SlugOptions
from slugkit.services.slug import Slugifier

__version__ = "1.0.0"

_config = Config()
slug: Slugifier = Slugifier(
    CharmapRegistry(mode=_config.DEFAULT_MODE, fallback=_config.FALLBACK, locale=_config.LOCALE)
)

__all__ = [
    "INITIAL_CHARMAP",
    "INITIAL_MULTICHARMAP",
    "LOCALES",
    "CharmapRegistry",
    "CoherenceError",
    "InvalidArgumentError",
    "ModeDefaults",
    "SlugDefaults",
    "SlugError",
    "SlugOptions",
    "Slugifier",
    "UnknownModeError",
    "slug",
]
