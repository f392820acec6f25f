from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest

from sim.cli import main
from sstdr_twin.models import EXPORT_KEYS


def test_cli_list(capsys) -> None:
    main(["list"])

    out = capsys.readouterr().out
    for name in ("default", "sine_fast", "unmodulated", "high_res"):
        assert name in out


def test_cli_show_defaults_to_default(capsys) -> None:
    main(["show"])

    out = capsys.readouterr().out
    assert "Configuration: Default SSTDR" in out


def test_cli_export_json(tmp_path: Path) -> None:
    out = tmp_path / "run" / "params.json"

    main(["export", "Sine_Fast", "--out", str(out)])

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert list(payload) == list(EXPORT_KEYS)
    assert payload["sim_fs"] == 1e6
    assert payload["sim_max_step"] == 1e-7


def test_cli_export_csv(tmp_path: Path) -> None:
    out = tmp_path / "params.csv"

    main(["export", "unmodulated", "--out", str(out), "--format", "csv"])

    with out.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert rows[0]["sim_solver"] == "ode23t"


def test_cli_unknown_name_exits_without_output(tmp_path: Path) -> None:
    out = tmp_path / "params.json"

    with pytest.raises(SystemExit) as excinfo:
        main(["export", "bogus", "--out", str(out)])

    assert "Available: default, sine_fast, unmodulated, high_res" in str(excinfo.value.code)
    assert not out.exists()


def test_cli_presets_file(tmp_path: Path, capsys) -> None:
    presets = tmp_path / "presets.json"
    presets.write_text(
        json.dumps(
            {
                "presets": [
                    {
                        "key": "lab",
                        "name": "Lab Bench SSTDR",
                        "pn_params": {
                            "modulation": "sine",
                            "carrier_freq": 50e3,
                            "chip_rate": 50e3,
                            "sample_rate": 200e3,
                            "pn_bits": 7,
                            "polynomial": [7, 1, 0],
                            "magnitude": 1,
                        },
                        "correlation_params": {"method": "freq", "peak_threshold": 0.1},
                        "simulation_params": {"stop_time": 2.54e-3, "solver": "ode45"},
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    main(["--presets", str(presets), "show", "LAB"])

    assert "Configuration: Lab Bench SSTDR" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ('{"name": "x"}', "list of presets"),
        ('["lab"]', "must be an object"),
        ("{not json", "cannot read preset file"),
        (None, "cannot read preset file"),
    ],
)
def test_cli_bad_presets_file_exits_with_message(tmp_path: Path, content: str | None, message: str) -> None:
    presets = tmp_path / "presets.json"
    if content is not None:
        presets.write_text(content, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--presets", str(presets), "list"])

    assert message in str(excinfo.value.code)
