from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from slugkit.exceptions import UnknownModeError
from slugkit.logging_config import get_logger
from slugkit.repositories.charmap import CharmapRegistry
from slugkit.schemas.options import SlugDefaults, SlugOptions
from slugkit.services.transliteration import ResolvedOptions, transliterate
from slugkit.utils.encoding import base64_encode
from slugkit.utils.surrogates import sanitize_surrogates

logger = get_logger(__name__)

OptionsArg = Union[SlugOptions, Mapping[str, Any], str, None]

# Fields where an explicit None is meaningful rather than "use the default"
_NULLABLE_FIELDS = frozenset({"remove"})


def coerce_options(options: OptionsArg = None, **overrides: Any) -> SlugOptions:
    """Build a :class:`SlugOptions` from any accepted options form.

    A bare string is shorthand for the ``replacement`` delimiter. Keyword
    ``overrides`` win over whatever ``options`` carries.
    """
    if isinstance(options, SlugOptions):
        if not overrides:
            return options
        explicit = options.explicit()
    elif isinstance(options, str):
        explicit = {"replacement": options}
    elif options is None:
        explicit = {}
    else:
        explicit = dict(options)
    explicit.update(overrides)
    return SlugOptions(**explicit)


def resolve_options(options: SlugOptions, registry: CharmapRegistry) -> ResolvedOptions:
    """Merge call options over the active mode's defaults over global defaults."""
    defaults: SlugDefaults = registry.defaults
    explicit = {
        name: value
        for name, value in options.explicit().items()
        if value is not None or name in _NULLABLE_FIELDS
    }

    mode_name = explicit.get("mode") or defaults.mode
    mode = defaults.modes.get(mode_name)
    if mode is None:
        raise UnknownModeError(mode_name, list(defaults.modes))

    def pick(name: str) -> Any:
        return explicit[name] if name in explicit else getattr(mode, name)

    charmap = pick("charmap")
    if charmap is None:
        charmap = registry.charmap
    multicharmap = pick("multicharmap")
    if multicharmap is None:
        multicharmap = registry.multicharmap

    return ResolvedOptions(
        mode=mode_name,
        replacement=pick("replacement"),
        charmap=charmap,
        multicharmap=multicharmap,
        locale_map=registry.locale_map(explicit.get("locale")),
        remove=pick("remove"),
        lower=pick("lower"),
        trim=pick("trim"),
        fallback=explicit.get("fallback", defaults.fallback),
    )


def slugify(text: str, options: OptionsArg = None, *, registry: CharmapRegistry, **overrides: Any) -> str:
    """Slugify ``text`` against ``registry``.

    When the pass yields an empty string and ``fallback`` is on, the input is
    stripped of lone surrogates, base64-encoded and run through the pass
    once more; that second result is returned even if it is empty too.
    """
    resolved = resolve_options(coerce_options(options, **overrides), registry)
    result = transliterate(text, resolved)
    if result == "" and resolved.fallback:
        encoded = base64_encode(sanitize_surrogates(text))
        logger.debug("slug.fallback", length=len(text), encoded=encoded)
        result = transliterate(encoded, resolved)
    return result


class Slugifier:
    """Callable slug generator bound to one :class:`CharmapRegistry`.

        >>> slug = Slugifier()
        >>> slug("Hello World!")
        'hello-world'
        >>> slug("input string", "_")
        'input_string'
        >>> slug("Hello World!", lower=False)
        'Hello-World'
    """

    def __init__(self, registry: Optional[CharmapRegistry] = None) -> None:
        self.registry = registry if registry is not None else CharmapRegistry()

    def __call__(self, text: str, options: OptionsArg = None, **overrides: Any) -> str:
        return slugify(text, options, registry=self.registry, **overrides)

    def __repr__(self) -> str:
        return f"<Slugifier mode={self.defaults.mode!r} fallback={self.defaults.fallback!r}>"

    @property
    def charmap(self) -> dict[str, str]:
        return self.registry.charmap

    @property
    def multicharmap(self) -> dict[str, str]:
        return self.registry.multicharmap

    @property
    def defaults(self) -> SlugDefaults:
        return self.registry.defaults

    def extend(self, custom_map: Mapping[str, str]) -> None:
        self.registry.extend(custom_map)

    def reset(self) -> None:
        self.registry.reset()

    def set_locale(self, tag: str) -> None:
        self.registry.set_locale(tag)
