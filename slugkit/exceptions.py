from __future__ import annotations


class SlugError(Exception):
    """Base class for every error raised by slugkit."""


class InvalidArgumentError(SlugError, TypeError):
    """The text to slugify is not a string."""


class UnknownModeError(SlugError, ValueError):
    def __init__(self, mode: str, available: list[str] | None = None) -> None:
        self.mode = mode
        self.available = sorted(available or [])
        message = f"Unknown slug mode {mode!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class CoherenceError(SlugError, RuntimeError):
    """An internal invariant was broken.

    Valid input going through the public API never triggers this; seeing it
    means a bug in slugkit itself.
    """
