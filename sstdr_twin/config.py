"""Configuration records for SSTDR simulations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from sstdr_twin.errors import PresetValidationError

OVERSAMPLING_FACTOR = 4
SOLVER_STEPS_PER_SAMPLE = 10
MIN_PN_BITS = 2
MAX_PN_BITS = 24
STOP_TIME_REL_TOL = 1e-6


class Modulation(str, Enum):
    """Carrier modulation applied to the PN chips."""

    SINE = "sine"
    NONE = "none"


class CorrelationMethod(str, Enum):
    """Domain used by the downstream correlation analysis."""

    FREQ = "freq"
    TIME = "time"
    BOTH = "both"


@dataclass(frozen=True)
class PnParams:
    """Independent parameters handed to the PN code generator."""

    modulation: Modulation
    carrier_freq: float
    chip_rate: float
    sample_rate: float
    pn_bits: int
    polynomial: tuple[int, ...]
    magnitude: float

    @property
    def samples_per_chip(self) -> float:
        return self.sample_rate / self.chip_rate

    @property
    def sequence_length(self) -> int:
        """Chips in one maximal-length sequence period."""

        return 2**self.pn_bits - 1

    @property
    def sequence_period(self) -> float:
        return self.sequence_length / self.chip_rate


@dataclass(frozen=True)
class CorrelationParams:
    """Stored correlation-analysis preferences."""

    method: CorrelationMethod
    peak_threshold: float
    normalize: bool = True
    plot_results: bool = True


@dataclass(frozen=True)
class SimulationParams:
    """Solver settings for the downstream simulator."""

    stop_time: float
    solver: str
    max_step: float


@dataclass(frozen=True)
class ConfigurationPreset:
    """Named SSTDR configuration."""

    key: str
    name: str
    pn_params: PnParams
    correlation_params: CorrelationParams
    simulation_params: SimulationParams


def max_step_for(sample_rate: float) -> float:
    """Return the solver max step giving ten sub-steps per sample period."""

    return 1.0 / (SOLVER_STEPS_PER_SAMPLE * sample_rate)


def preset_problems(preset: ConfigurationPreset) -> list[str]:
    """Return every invariant the preset violates (empty when valid)."""

    problems: list[str] = []
    pn = preset.pn_params
    corr = preset.correlation_params
    sim = preset.simulation_params

    if not preset.key or preset.key != preset.key.lower():
        problems.append(f"key must be a non-empty lower-case string, got {preset.key!r}")
    if not isinstance(pn.modulation, Modulation):
        problems.append(f"unsupported modulation {pn.modulation!r}")
    if not isinstance(corr.method, CorrelationMethod):
        problems.append(f"unsupported correlation method {corr.method!r}")

    if pn.chip_rate <= 0:
        problems.append(f"chip_rate must be > 0 Hz, got {pn.chip_rate}")
    if pn.sample_rate <= 0:
        problems.append(f"sample_rate must be > 0 Hz, got {pn.sample_rate}")
    if pn.magnitude <= 0:
        problems.append(f"magnitude must be > 0, got {pn.magnitude}")
    if pn.carrier_freq < 0:
        problems.append(f"carrier_freq must be >= 0 Hz, got {pn.carrier_freq}")
    if not MIN_PN_BITS <= pn.pn_bits <= MAX_PN_BITS:
        problems.append(f"pn_bits must be in [{MIN_PN_BITS}, {MAX_PN_BITS}], got {pn.pn_bits}")
    problems.extend(_polynomial_problems(pn.pn_bits, pn.polynomial))

    if not 0.0 < corr.peak_threshold <= 1.0:
        problems.append(f"peak_threshold must be in (0, 1], got {corr.peak_threshold}")
    if not sim.solver:
        problems.append("solver must be a non-empty identifier")
    if sim.stop_time <= 0:
        problems.append(f"stop_time must be > 0 s, got {sim.stop_time}")
    if sim.max_step <= 0:
        problems.append(f"max_step must be > 0 s, got {sim.max_step}")

    # Derived-parameter conventions only make sense with positive rates.
    if pn.chip_rate > 0 and pn.sample_rate > 0:
        if pn.sample_rate != OVERSAMPLING_FACTOR * pn.chip_rate:
            problems.append(
                f"sample_rate must be {OVERSAMPLING_FACTOR}x chip_rate "
                f"({OVERSAMPLING_FACTOR * pn.chip_rate} Hz), got {pn.sample_rate}"
            )
        expected_step = max_step_for(pn.sample_rate)
        if not math.isclose(sim.max_step, expected_step, rel_tol=1e-9):
            problems.append(f"max_step must be 1/(10*sample_rate) = {expected_step:.6g} s, got {sim.max_step}")
        if pn.modulation is Modulation.NONE and pn.carrier_freq != 0:
            problems.append(f"carrier_freq must be 0 for unmodulated presets, got {pn.carrier_freq}")
        if pn.modulation is Modulation.SINE and pn.carrier_freq != pn.chip_rate:
            problems.append(f"carrier_freq must equal chip_rate for sine presets, got {pn.carrier_freq}")
        if MIN_PN_BITS <= pn.pn_bits <= MAX_PN_BITS:
            period = pn.sequence_period
            if not math.isclose(sim.stop_time, period, rel_tol=STOP_TIME_REL_TOL):
                problems.append(
                    f"stop_time must cover one PN period ({pn.sequence_length} chips = {period:.6g} s), "
                    f"got {sim.stop_time}"
                )
    return problems


def validate_preset(preset: ConfigurationPreset) -> ConfigurationPreset:
    """Raise PresetValidationError if the preset is not internally consistent."""

    problems = preset_problems(preset)
    if problems:
        raise PresetValidationError(preset.key, problems)
    return preset


def _polynomial_problems(pn_bits: int, polynomial: tuple[int, ...]) -> list[str]:
    if len(polynomial) < 3:
        return [f"polynomial needs the degree, at least one tap and 0, got {list(polynomial)}"]
    problems = []
    if polynomial[0] != pn_bits:
        problems.append(f"polynomial degree {polynomial[0]} does not match pn_bits {pn_bits}")
    if polynomial[-1] != 0:
        problems.append(f"polynomial must end with 0, got {list(polynomial)}")
    if any(a <= b for a, b in zip(polynomial, polynomial[1:])):
        problems.append(f"polynomial exponents must be strictly decreasing, got {list(polynomial)}")
    return problems
