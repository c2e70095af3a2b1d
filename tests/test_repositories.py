"""Tests for the charmap registry."""

import pytest
from pydantic import ValidationError

from slugkit.charmaps import INITIAL_CHARMAP, INITIAL_MULTICHARMAP, LOCALES
from slugkit.repositories.charmap import BUILTIN_MODES, CharmapRegistry


class TestCharmapRegistry:
    """Test cases for registry construction."""

    def test_starts_from_builtin_tables(self, registry):
        """Test that a new registry holds copies of the built-in tables."""
        assert registry.charmap == dict(INITIAL_CHARMAP)
        assert registry.multicharmap == dict(INITIAL_MULTICHARMAP)
        assert registry.charmap is not INITIAL_CHARMAP

    def test_modes_share_tables(self, registry):
        """Test that built-in modes and defaults reference the live tables."""
        assert set(BUILTIN_MODES) <= set(registry.defaults.modes)
        for name in BUILTIN_MODES:
            assert registry.defaults.modes[name].charmap is registry.charmap
            assert registry.defaults.modes[name].multicharmap is registry.multicharmap
        assert registry.defaults.charmap is registry.charmap
        assert registry.defaults.multicharmap is registry.multicharmap

    def test_default_settings(self, registry):
        """Test the global defaults."""
        assert registry.defaults.mode == "pretty"
        assert registry.defaults.fallback is True
        pretty = registry.defaults.modes["pretty"]
        assert pretty.replacement == "-"
        assert pretty.remove is None
        assert pretty.lower is True
        assert pretty.trim is True

    def test_constructor_arguments(self):
        """Test seeding mode, fallback and locale."""
        registry = CharmapRegistry(mode="rfc3986", fallback=False, locale="de")
        assert registry.defaults.mode == "rfc3986"
        assert registry.defaults.fallback is False
        assert registry.locale_map() == LOCALES["de"]

    def test_registries_are_independent(self):
        """Test that two registries do not share tables."""
        first, second = CharmapRegistry(), CharmapRegistry()
        first.extend({"☢": "radioactive"})
        assert "☢" not in second.charmap

    def test_locales(self, registry):
        """Test listing built-in locale tags."""
        assert registry.locales == ("bg", "de", "sr", "uk")


class TestExtend:
    """Test cases for extending the tables."""

    def test_single_character_goes_to_charmap(self, registry):
        """Test routing of single-character keys."""
        registry.extend({"☢": "radioactive"})
        assert registry.charmap["☢"] == "radioactive"
        assert "☢" not in registry.multicharmap

    def test_sequences_go_to_multicharmap(self, registry):
        """Test routing of multi-character keys."""
        registry.extend({"<3": "love", "♥": "heart"})
        assert registry.multicharmap["<3"] == "love"
        assert registry.charmap["♥"] == "heart"
        assert "<3" not in registry.charmap

    def test_astral_character_is_single(self, registry):
        """Test that an astral character counts as one character."""
        registry.extend({"🎉": "party"})
        assert registry.charmap["🎉"] == "party"

    def test_last_write_wins(self, registry):
        """Test that later extensions overwrite earlier ones."""
        registry.extend({"☢": "radioactive"})
        registry.extend({"☢": "nuclear"})
        assert registry.charmap["☢"] == "nuclear"

    def test_existing_entries_kept(self, registry):
        """Test that extending never removes entries."""
        size = len(registry.charmap)
        registry.extend({"☢": "radioactive"})
        assert len(registry.charmap) == size + 1
        assert registry.charmap["अ"] == "a"

    def test_modes_see_extensions(self, registry):
        """Test that the in-place update is visible through the modes."""
        registry.extend({"☢": "radioactive", "abc": "x"})
        assert registry.defaults.modes["pretty"].charmap["☢"] == "radioactive"
        assert registry.defaults.modes["rfc3986"].multicharmap["abc"] == "x"

    def test_rejects_non_string_values(self, registry):
        """Test that replacement values must be strings."""
        with pytest.raises(ValidationError):
            registry.extend({"☢": 42})


class TestReset:
    """Test cases for resetting the registry."""

    def test_restores_builtin_tables(self, registry):
        """Test that reset discards every extension."""
        registry.extend({"☢": "radioactive", "abc": "x"})
        registry.reset()
        assert registry.charmap == dict(INITIAL_CHARMAP)
        assert registry.multicharmap == dict(INITIAL_MULTICHARMAP)

    def test_restores_after_in_place_edits(self, registry):
        """Test that reset also undoes direct edits and deletions."""
        del registry.charmap["अ"]
        registry.multicharmap.clear()
        registry.reset()
        assert registry.charmap == dict(INITIAL_CHARMAP)
        assert registry.multicharmap == dict(INITIAL_MULTICHARMAP)

    def test_rebinds_modes(self, registry):
        """Test that modes and defaults point at the new tables."""
        registry.reset()
        for name in BUILTIN_MODES:
            assert registry.defaults.modes[name].charmap is registry.charmap
            assert registry.defaults.modes[name].multicharmap is registry.multicharmap
        assert registry.defaults.charmap is registry.charmap

    def test_clears_ambient_locale(self, registry):
        """Test that reset forgets the ambient locale."""
        registry.set_locale("de")
        registry.reset()
        assert registry.locale_map() == {}

    def test_builtin_data_untouched(self, registry):
        """Test that extending a registry never leaks into the built-in data."""
        registry.extend({"☢": "radioactive"})
        assert "☢" not in INITIAL_CHARMAP


class TestLocales:
    """Test cases for locale selection."""

    def test_set_locale(self, registry):
        """Test selecting a built-in locale."""
        registry.set_locale("uk")
        assert registry.locale_map()["г"] == "h"

    def test_set_locale_is_case_insensitive(self, registry):
        """Test that locale tags are normalized."""
        registry.set_locale("DE")
        assert registry.locale_map()["ä"] == "ae"

    def test_unknown_locale_is_empty(self, registry):
        """Test that an unknown tag selects an empty table."""
        registry.set_locale("de")
        registry.set_locale("xx")
        assert registry.locale_map() == {}

    def test_explicit_tag_wins(self, registry):
        """Test that an explicit tag overrides the ambient locale."""
        registry.set_locale("de")
        assert registry.locale_map("sr") == LOCALES["sr"]

    def test_unknown_explicit_tag_uses_ambient(self, registry):
        """Test that an unknown explicit tag falls back to the ambient locale."""
        registry.set_locale("de")
        assert registry.locale_map("xx") == LOCALES["de"]
        assert registry.locale_map(None) == LOCALES["de"]

    def test_tables_are_read_only(self):
        """Test that the built-in locale tables cannot be modified."""
        with pytest.raises(TypeError):
            LOCALES["de"]["ä"] = "a"
