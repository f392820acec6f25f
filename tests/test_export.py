from __future__ import annotations

import json

from sstdr_twin.models import EXPORT_KEYS
from sstdr_twin.resolver import export_parameters, resolve


def test_export_default_scenario(default_resolved) -> None:
    exported = export_parameters(default_resolved)

    assert exported.sim_fs == 400000
    assert exported.sim_ts == 2.5e-6
    assert exported.sim_decimation == 4
    assert isinstance(exported.sim_decimation, int)
    assert exported.sim_chip_rate == 100000
    assert exported.sim_stop_time == 10.23e-3
    assert exported.sim_solver == "ode45"
    assert exported.sim_max_step == default_resolved.simulation_params.max_step


def test_export_sine_fast_max_step() -> None:
    exported = export_parameters(resolve("sine_fast"))

    assert exported.sim_max_step == 1e-7
    assert exported.sim_decimation == 4


def test_export_has_exactly_seven_keys(unmodulated_resolved) -> None:
    params = export_parameters(unmodulated_resolved).as_dict()

    assert list(params) == list(EXPORT_KEYS)
    assert len(params) == 7
    assert not any("carrier" in key for key in params)
    assert params["sim_solver"] == "ode23t"
    assert params["sim_fs"] == 500e3


def test_export_is_a_pure_projection(default_resolved) -> None:
    first = export_parameters(default_resolved)
    second = export_parameters(default_resolved)

    assert first == second
    assert first is not second
    assert json.dumps(first.as_dict()) == json.dumps(second.as_dict())
