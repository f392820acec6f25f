from __future__ import annotations

from dataclasses import replace

import pytest

from sstdr_twin.catalog import (
    BUILTIN_PRESETS,
    DEFAULT_CATALOG,
    DEFAULT_PRESET,
    ConfigurationCatalog,
    lookup,
)
from sstdr_twin.errors import PresetValidationError, UnknownConfigurationError


def test_catalog_ships_expected_presets_in_order() -> None:
    assert DEFAULT_CATALOG.names() == ["default", "sine_fast", "unmodulated", "high_res"]
    assert len(DEFAULT_CATALOG) == 4


def test_lookup_is_case_insensitive() -> None:
    presets = [lookup("Default"), lookup("DEFAULT"), lookup("default")]

    assert all(preset is DEFAULT_PRESET for preset in presets)
    assert "Sine_Fast" in DEFAULT_CATALOG
    assert lookup("HIGH_RES").name == "High Resolution SSTDR"


def test_lookup_requires_full_name() -> None:
    with pytest.raises(UnknownConfigurationError):
        lookup("def")
    with pytest.raises(UnknownConfigurationError):
        lookup(" default")


def test_unknown_name_lists_available_presets() -> None:
    with pytest.raises(UnknownConfigurationError) as excinfo:
        lookup("bogus")

    message = str(excinfo.value)
    assert "bogus" in message
    for name in ("default", "sine_fast", "unmodulated", "high_res"):
        assert name in message
    assert excinfo.value.name == "bogus"
    assert excinfo.value.available == ("default", "sine_fast", "unmodulated", "high_res")
    assert isinstance(excinfo.value, LookupError)


def test_catalog_rejects_inconsistent_preset() -> None:
    broken = replace(
        DEFAULT_PRESET,
        key="broken",
        pn_params=replace(DEFAULT_PRESET.pn_params, sample_rate=300e3),
    )

    with pytest.raises(PresetValidationError) as excinfo:
        ConfigurationCatalog([broken])

    assert excinfo.value.key == "broken"
    assert any("4x chip_rate" in problem for problem in excinfo.value.problems)


def test_catalog_rejects_duplicate_keys() -> None:
    with pytest.raises(PresetValidationError):
        ConfigurationCatalog([DEFAULT_PRESET, DEFAULT_PRESET])


def test_extend_returns_new_catalog() -> None:
    extra = replace(DEFAULT_PRESET, key="default_copy", name="Default Copy")

    extended = DEFAULT_CATALOG.extend([extra])

    assert extended.names()[-1] == "default_copy"
    assert extended.lookup("DEFAULT_COPY") is extra
    assert "default_copy" not in DEFAULT_CATALOG
    assert len(DEFAULT_CATALOG) == len(BUILTIN_PRESETS)


@pytest.mark.parametrize("name", [None, 42, b"default"])
def test_non_string_name_is_unknown(name) -> None:
    with pytest.raises(UnknownConfigurationError):
        DEFAULT_CATALOG.lookup(name)
