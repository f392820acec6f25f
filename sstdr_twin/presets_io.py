"""JSON preset files for extending the configuration catalog."""

from __future__ import annotations

import json
from dataclasses import MISSING, asdict, fields
from pathlib import Path
from typing import Any, Iterable

from sstdr_twin.catalog import DEFAULT_CATALOG, ConfigurationCatalog
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
from sstdr_twin.errors import PresetValidationError

_TOP_LEVEL_KEYS = {"key", "name", "pn_params", "correlation_params", "simulation_params"}


def preset_from_dict(data: dict[str, Any]) -> ConfigurationPreset:
    """Build and validate a preset from its JSON representation."""

    if not isinstance(data, dict):
        raise PresetValidationError("<unnamed>", [f"preset entry must be an object, got {type(data).__name__}"])
    key = str(data.get("key", "")).lower()
    _check_keys(key, "preset", data, required=_TOP_LEVEL_KEYS, allowed=_TOP_LEVEL_KEYS)
    pn_raw = _section(key, data, "pn_params", PnParams)
    corr_raw = _section(key, data, "correlation_params", CorrelationParams)
    sim_raw = _section(key, data, "simulation_params", SimulationParams, optional={"max_step"})
    flags = {flag: corr_raw.get(flag, True) for flag in ("normalize", "plot_results")}
    not_bool = [
        f"correlation_params.{flag} must be true or false, got {value!r}"
        for flag, value in flags.items()
        if not isinstance(value, bool)
    ]
    if not_bool:
        raise PresetValidationError(key or "<unnamed>", not_bool)

    try:
        pn = PnParams(
            modulation=Modulation(pn_raw["modulation"]),
            carrier_freq=float(pn_raw["carrier_freq"]),
            chip_rate=float(pn_raw["chip_rate"]),
            sample_rate=float(pn_raw["sample_rate"]),
            pn_bits=int(pn_raw["pn_bits"]),
            polynomial=tuple(int(value) for value in pn_raw["polynomial"]),
            magnitude=float(pn_raw["magnitude"]),
        )
        corr = CorrelationParams(
            method=CorrelationMethod(corr_raw["method"]),
            peak_threshold=float(corr_raw["peak_threshold"]),
            normalize=flags["normalize"],
            plot_results=flags["plot_results"],
        )
        max_step = sim_raw.get("max_step")
        sim = SimulationParams(
            stop_time=float(sim_raw["stop_time"]),
            solver=str(sim_raw["solver"]),
            max_step=float(max_step) if max_step is not None else max_step_for(pn.sample_rate),
        )
    except (TypeError, ValueError) as exc:
        raise PresetValidationError(key, [str(exc)]) from exc

    return validate_preset(
        ConfigurationPreset(
            key=key,
            name=str(data["name"]),
            pn_params=pn,
            correlation_params=corr,
            simulation_params=sim,
        )
    )


def preset_to_dict(preset: ConfigurationPreset) -> dict[str, Any]:
    """Return the JSON-serialisable representation of ``preset``."""

    payload = asdict(preset)
    payload["pn_params"]["modulation"] = preset.pn_params.modulation.value
    payload["pn_params"]["polynomial"] = list(preset.pn_params.polynomial)
    payload["correlation_params"]["method"] = preset.correlation_params.method.value
    return payload


def load_presets_json(path: str | Path) -> list[ConfigurationPreset]:
    """Load presets from a JSON list, or an object with a ``presets`` list."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PresetValidationError(str(path), [f"cannot read preset file: {exc}"]) from exc
    if isinstance(payload, dict):
        payload = payload.get("presets")
    if not isinstance(payload, list):
        raise PresetValidationError(str(path), ["preset file must hold a list of presets"])
    return [preset_from_dict(entry) for entry in payload]


def save_presets_json(path: str | Path, presets: Iterable[ConfigurationPreset]) -> None:
    payload = {"presets": [preset_to_dict(preset) for preset in presets]}
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")


def load_catalog(
    paths: Iterable[str | Path],
    base: ConfigurationCatalog = DEFAULT_CATALOG,
) -> ConfigurationCatalog:
    """Return ``base`` extended with the presets of every file in ``paths``."""

    catalog = base
    for path in paths:
        catalog = catalog.extend(load_presets_json(path))
    return catalog


def _section(
    key: str,
    data: dict[str, Any],
    section: str,
    record: type,
    optional: set[str] | frozenset[str] = frozenset(),
) -> dict[str, Any]:
    raw = data[section]
    if not isinstance(raw, dict):
        raise PresetValidationError(key, [f"{section} must be an object"])
    allowed = {item.name for item in fields(record)}
    required = {
        item.name for item in fields(record) if item.default is MISSING and item.default_factory is MISSING
    } - set(optional)
    _check_keys(key, section, raw, required=required, allowed=allowed)
    return raw


def _check_keys(
    key: str,
    section: str,
    raw: dict[str, Any],
    *,
    required: set[str],
    allowed: set[str],
) -> None:
    problems = []
    missing = required - raw.keys()
    if missing:
        problems.append(f"{section} missing required keys: {sorted(missing)}")
    unknown = raw.keys() - allowed
    if unknown:
        problems.append(f"{section} has unknown keys: {sorted(unknown)}")
    if problems:
        raise PresetValidationError(key or "<unnamed>", problems)
