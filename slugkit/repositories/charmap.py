from __future__ import annotations

from typing import Mapping, Optional

from pydantic import TypeAdapter

from slugkit.charmaps import INITIAL_CHARMAP, INITIAL_MULTICHARMAP, LOCALES
from slugkit.logging_config import get_logger
from slugkit.schemas.options import ModeDefaults, SlugDefaults

logger = get_logger(__name__)

BUILTIN_MODES = ("pretty", "rfc3986")

_custom_map_adapter = TypeAdapter(dict[str, str])


def build_defaults(
    charmap: dict[str, str],
    multicharmap: dict[str, str],
    *,
    mode: str = "pretty",
    fallback: bool = True,
) -> SlugDefaults:
    defaults = SlugDefaults(mode=mode, fallback=fallback, charmap=charmap, multicharmap=multicharmap)
    for name in BUILTIN_MODES:
        defaults.modes[name] = ModeDefaults(charmap=charmap, multicharmap=multicharmap)
    return defaults


class CharmapRegistry:
    """Character tables, mode defaults and the ambient locale for one slugifier.

    ``charmap`` and ``multicharmap`` are plain dicts shared by reference with
    ``defaults`` and the built-in modes, so editing them in place affects every
    subsequent slug computed through this registry.
    """

    def __init__(self, *, mode: str = "pretty", fallback: bool = True, locale: Optional[str] = None) -> None:
        self.charmap: dict[str, str] = dict(INITIAL_CHARMAP)
        self.multicharmap: dict[str, str] = dict(INITIAL_MULTICHARMAP)
        self.defaults: SlugDefaults = build_defaults(
            self.charmap, self.multicharmap, mode=mode, fallback=fallback
        )
        self.ambient_locale: Mapping[str, str] = {}
        if locale:
            self.set_locale(locale)

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(sorted(LOCALES))

    def extend(self, custom_map: Mapping[str, str]) -> None:
        """Merge ``custom_map`` into the tables, routing each key by its length."""
        entries = _custom_map_adapter.validate_python(dict(custom_map))
        single = {key: value for key, value in entries.items() if len(key) <= 1}
        multi = {key: value for key, value in entries.items() if len(key) > 1}
        self.charmap.update(single)
        self.multicharmap.update(multi)
        logger.debug("registry.extended", single=len(single), multi=len(multi))

    def reset(self) -> None:
        """Drop every extension and the ambient locale."""
        self.charmap = dict(INITIAL_CHARMAP)
        self.multicharmap = dict(INITIAL_MULTICHARMAP)
        self.defaults.charmap = self.charmap
        self.defaults.multicharmap = self.multicharmap
        for name in BUILTIN_MODES:
            mode = self.defaults.modes.get(name)
            if mode is None:
                mode = self.defaults.modes[name] = ModeDefaults()
            mode.charmap = self.charmap
            mode.multicharmap = self.multicharmap
        self.ambient_locale = {}
        logger.debug("registry.reset")

    def set_locale(self, tag: str) -> None:
        """Make ``tag`` the locale used by calls that do not pass one."""
        tag = tag.strip().lower()
        table = LOCALES.get(tag)
        if table is None:
            logger.warning("registry.unknown_locale", locale=tag, available=list(self.locales))
            self.ambient_locale = {}
            return
        self.ambient_locale = table
        logger.debug("registry.locale_set", locale=tag)

    def locale_map(self, tag: Optional[str] = None) -> Mapping[str, str]:
        """Table for ``tag`` if it is a known locale, else the ambient one."""
        if tag and tag in LOCALES:
            return LOCALES[tag]
        return self.ambient_locale
