"""Resolve a named preset into generator output and exported simulator parameters."""

from __future__ import annotations

from sstdr_twin.catalog import DEFAULT_CATALOG, ConfigurationCatalog
from sstdr_twin.config import validate_preset
from sstdr_twin.errors import GenerationError
from sstdr_twin.models import ExportedParameterSet, PnGenerator, ResolvedConfiguration
from sstdr_twin.pn.generator import generate_pn_code
from sstdr_twin.utils.logging import get_logger

_LOGGER = get_logger()


def resolve(
    name: str = "default",
    *,
    catalog: ConfigurationCatalog = DEFAULT_CATALOG,
    generator: PnGenerator = generate_pn_code,
) -> ResolvedConfiguration:
    """Look up ``name`` and attach the PN generator output to the preset.

    UnknownConfigurationError and GenerationError propagate to the caller.
    Errors of other kinds raised by an injected generator on bad parameters
    are re-raised as GenerationError with the original exception as cause.
    """

    _LOGGER.info("Loading SSTDR configuration: %s", name)
    preset = validate_preset(catalog.lookup(name))
    _LOGGER.info("Applying configuration: %s", preset.name)

    pn = preset.pn_params
    try:
        result = generator(
            modulation=pn.modulation,
            carrier_freq=pn.carrier_freq,
            chip_rate=pn.chip_rate,
            sample_rate=pn.sample_rate,
            pn_bits=pn.pn_bits,
            polynomial=pn.polynomial,
            magnitude=pn.magnitude,
        )
    except GenerationError:
        raise
    except (ValueError, TypeError) as exc:
        raise GenerationError(f"PN generation failed for '{preset.key}': {exc}") from exc

    _LOGGER.debug(
        "Generated %d chips (%d samples per chip, %.6g s)",
        result.pn_sequence_length,
        result.interpolation_factor,
        result.total_duration,
    )
    return ResolvedConfiguration(preset=preset, generation_result=result)


def export_parameters(resolved: ResolvedConfiguration) -> ExportedParameterSet:
    """Project a resolved configuration onto the simulator parameter set."""

    sim = resolved.simulation_params
    fs = resolved.pn_params.sample_rate
    return ExportedParameterSet(
        sim_stop_time=sim.stop_time,
        sim_solver=sim.solver,
        sim_max_step=sim.max_step,
        sim_fs=fs,
        sim_ts=1.0 / fs,
        sim_decimation=int(resolved.generation_result.interpolation_factor),
        sim_chip_rate=resolved.pn_params.chip_rate,
    )
