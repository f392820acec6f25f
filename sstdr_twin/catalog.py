"""Catalog of named SSTDR configuration presets."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from sstdr_twin.config import (
    ConfigurationPreset,
    CorrelationMethod,
    CorrelationParams,
    Modulation,
    PnParams,
    SimulationParams,
    max_step_for,
    validate_preset,
)
from sstdr_twin.errors import PresetValidationError, UnknownConfigurationError

# Chip rate equals the carrier when modulated; sampling is 4x the chip rate.
DEFAULT_PRESET = ConfigurationPreset(
    key="default",
    name="Default SSTDR",
    pn_params=PnParams(
        modulation=Modulation.SINE,
        carrier_freq=100e3,
        chip_rate=100e3,
        sample_rate=400e3,
        pn_bits=10,
        polynomial=(10, 3, 0),
        magnitude=1.0,
    ),
    correlation_params=CorrelationParams(method=CorrelationMethod.FREQ, peak_threshold=0.1),
    simulation_params=SimulationParams(
        stop_time=10.23e-3,  # 1023 chips at 100 kHz
        solver="ode45",
        max_step=max_step_for(400e3),
    ),
)

SINE_FAST_PRESET = ConfigurationPreset(
    key="sine_fast",
    name="Fast Sine Wave SSTDR",
    pn_params=PnParams(
        modulation=Modulation.SINE,
        carrier_freq=250e3,
        chip_rate=250e3,
        sample_rate=1e6,
        pn_bits=10,
        polynomial=(10, 3, 0),
        magnitude=1.0,
    ),
    correlation_params=CorrelationParams(method=CorrelationMethod.FREQ, peak_threshold=0.15),
    simulation_params=SimulationParams(
        stop_time=4.092e-3,  # 1023 chips at 250 kHz
        solver="ode45",
        max_step=max_step_for(1e6),
    ),
)

UNMODULATED_PRESET = ConfigurationPreset(
    key="unmodulated",
    name="Unmodulated PN SSTDR",
    pn_params=PnParams(
        modulation=Modulation.NONE,
        carrier_freq=0.0,
        chip_rate=125e3,
        sample_rate=500e3,
        pn_bits=10,
        polynomial=(10, 3, 0),
        magnitude=2.0,
    ),
    correlation_params=CorrelationParams(method=CorrelationMethod.BOTH, peak_threshold=0.2),
    simulation_params=SimulationParams(
        stop_time=8.184e-3,  # 1023 chips at 125 kHz
        solver="ode23t",
        max_step=max_step_for(500e3),
    ),
)

HIGH_RES_PRESET = ConfigurationPreset(
    key="high_res",
    name="High Resolution SSTDR",
    pn_params=PnParams(
        modulation=Modulation.SINE,
        carrier_freq=200e3,
        chip_rate=200e3,
        sample_rate=800e3,
        pn_bits=11,
        polynomial=(11, 2, 0),
        magnitude=1.0,
    ),
    correlation_params=CorrelationParams(method=CorrelationMethod.FREQ, peak_threshold=0.05),
    simulation_params=SimulationParams(
        stop_time=10.235e-3,  # 2047 chips at 200 kHz
        solver="ode45",
        max_step=max_step_for(800e3),
    ),
)

BUILTIN_PRESETS = (DEFAULT_PRESET, SINE_FAST_PRESET, UNMODULATED_PRESET, HIGH_RES_PRESET)


class ConfigurationCatalog:
    """Immutable, case-insensitive registry of validated presets."""

    def __init__(self, presets: Iterable[ConfigurationPreset]) -> None:
        entries: dict[str, ConfigurationPreset] = {}
        for preset in presets:
            validate_preset(preset)
            if preset.key in entries:
                raise PresetValidationError(preset.key, ["duplicate preset key"])
            entries[preset.key] = preset
        self._presets = MappingProxyType(entries)

    def lookup(self, name: str) -> ConfigurationPreset:
        """Return the preset whose key matches ``name`` ignoring case."""

        preset = self._presets.get(name.lower()) if isinstance(name, str) else None
        if preset is None:
            raise UnknownConfigurationError(name, self.names())
        return preset

    def names(self) -> list[str]:
        return list(self._presets)

    def presets(self) -> list[ConfigurationPreset]:
        return list(self._presets.values())

    def extend(self, presets: Iterable[ConfigurationPreset]) -> ConfigurationCatalog:
        """Return a new catalog with ``presets`` appended."""

        return ConfigurationCatalog([*self._presets.values(), *presets])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._presets

    def __iter__(self) -> Iterator[str]:
        return iter(self._presets)

    def __len__(self) -> int:
        return len(self._presets)


DEFAULT_CATALOG = ConfigurationCatalog(BUILTIN_PRESETS)


def lookup(name: str, catalog: ConfigurationCatalog = DEFAULT_CATALOG) -> ConfigurationPreset:
    """Look up a preset in the shipped catalog (or ``catalog``)."""

    return catalog.lookup(name)
