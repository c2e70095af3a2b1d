"""Test configuration and fixtures for slugkit."""

from typing import Generator

import pytest

from slugkit import CharmapRegistry, Slugifier, slug
from slugkit.logging_config import configure_logging
from slugkit.services.transliteration import ResolvedOptions


@pytest.fixture
def registry() -> CharmapRegistry:
    """A registry with the built-in tables and no ambient locale."""
    return CharmapRegistry()


@pytest.fixture
def slugifier(registry: CharmapRegistry) -> Slugifier:
    """A slugifier with state isolated from the module-level instance."""
    return Slugifier(registry)


@pytest.fixture
def make_options(registry: CharmapRegistry):
    """Factory for resolved engine options using the pretty-mode defaults."""
    def _make(**fields) -> ResolvedOptions:
        values = {
            "mode": "pretty",
            "replacement": "-",
            "charmap": registry.charmap,
            "multicharmap": registry.multicharmap,
            "locale_map": {},
        }
        values.update(fields)
        return ResolvedOptions(**values)

    return _make


@pytest.fixture(autouse=True)
def restore_default_slug() -> Generator[None, None, None]:
    """Undo any change a test makes to the module-level ``slug`` instance."""
    mode = slug.defaults.mode
    fallback = slug.defaults.fallback
    ambient = slug.registry.ambient_locale
    yield
    slug.reset()
    slug.registry.ambient_locale = ambient
    slug.defaults.mode = mode
    slug.defaults.fallback = fallback


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Put logging back to the quiet default after a test."""
    yield
    configure_logging("WARNING")
