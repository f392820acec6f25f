"""Resolution outputs and the PN generator interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

import numpy as np

from sstdr_twin.config import (
    ConfigurationPreset,
    CorrelationParams,
    Modulation,
    PnParams,
    SimulationParams,
)

EXPORT_KEYS = (
    "sim_stop_time",
    "sim_solver",
    "sim_max_step",
    "sim_fs",
    "sim_ts",
    "sim_decimation",
    "sim_chip_rate",
)


@dataclass(frozen=True)
class GeneratorSettings:
    """Settings the PN generator derived from its inputs."""

    interpolation_factor: int
    taps: tuple[int, ...]
    modulation: Modulation


@dataclass(frozen=True)
class GenerationResult:
    """Output of one PN generator call."""

    pn_sequence_length: int
    total_duration: float
    settings: GeneratorSettings
    pn_sequence: np.ndarray = field(compare=False, repr=False)
    waveform: np.ndarray = field(compare=False, repr=False)

    @property
    def interpolation_factor(self) -> int:
        return self.settings.interpolation_factor


@dataclass(frozen=True)
class ResolvedConfiguration:
    """A catalog preset together with the generator output it produced."""

    preset: ConfigurationPreset
    generation_result: GenerationResult

    @property
    def key(self) -> str:
        return self.preset.key

    @property
    def name(self) -> str:
        return self.preset.name

    @property
    def pn_params(self) -> PnParams:
        return self.preset.pn_params

    @property
    def correlation_params(self) -> CorrelationParams:
        return self.preset.correlation_params

    @property
    def simulation_params(self) -> SimulationParams:
        return self.preset.simulation_params


@dataclass(frozen=True)
class ExportedParameterSet:
    """Flat parameter set read by the downstream simulator (SI units)."""

    sim_stop_time: float
    sim_solver: str
    sim_max_step: float
    sim_fs: float
    sim_ts: float
    sim_decimation: int
    sim_chip_rate: float

    def as_dict(self) -> dict[str, float | int | str]:
        return {key: getattr(self, key) for key in EXPORT_KEYS}


class PnGenerator(Protocol):
    """Interface for PN code generators."""

    def __call__(
        self,
        *,
        modulation: Modulation,
        carrier_freq: float,
        chip_rate: float,
        sample_rate: float,
        pn_bits: int,
        polynomial: Sequence[int],
        magnitude: float,
    ) -> GenerationResult:
        """Generate one PN sequence period and its sampled waveform."""
