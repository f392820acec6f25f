"""Publishing resolved configurations for a downstream simulator."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from sstdr_twin.catalog import DEFAULT_CATALOG, ConfigurationCatalog
from sstdr_twin.models import EXPORT_KEYS, ExportedParameterSet, PnGenerator, ResolvedConfiguration
from sstdr_twin.pn.generator import generate_pn_code
from sstdr_twin.resolver import export_parameters, resolve
from sstdr_twin.summary import format_summary
from sstdr_twin.utils.logging import get_logger

CONFIG_VARIABLE = "sstdr_config"

_LOGGER = get_logger()


class SimulationWorkspace:
    """Named-variable store shared with a downstream simulator."""

    def __init__(self) -> None:
        self._variables: dict[str, Any] = {}

    def assign(self, name: str, value: Any) -> None:
        self._variables[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self._variables.get(name, default)

    def names(self) -> list[str]:
        return list(self._variables)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._variables)

    def clear(self) -> None:
        self._variables.clear()

    def __getitem__(self, name: str) -> Any:
        return self._variables[name]

    def __contains__(self, name: object) -> bool:
        return name in self._variables


def publish(workspace: SimulationWorkspace, resolved: ResolvedConfiguration) -> ExportedParameterSet:
    """Assign the exported parameters and the resolved configuration into ``workspace``."""

    exported = export_parameters(resolved)
    for key, value in exported.as_dict().items():
        workspace.assign(key, value)
    workspace.assign(CONFIG_VARIABLE, resolved)
    return exported


def load_configuration(
    name: str = "default",
    *,
    workspace: SimulationWorkspace | None = None,
    catalog: ConfigurationCatalog = DEFAULT_CATALOG,
    generator: PnGenerator = generate_pn_code,
    report: bool = True,
) -> ResolvedConfiguration:
    """Resolve ``name`` and, once resolution succeeded, publish into ``workspace``."""

    resolved = resolve(name, catalog=catalog, generator=generator)
    if workspace is not None:
        publish(workspace, resolved)
    if report:
        _LOGGER.info("\n%s", format_summary(resolved))
    return resolved


def save_exported_json(path: str | Path, exported: ExportedParameterSet) -> None:
    """Write the exported parameters as a single JSON object."""

    Path(path).write_text(json.dumps(exported.as_dict(), indent=2), encoding="utf-8")


def save_exported_csv(path: str | Path, exported: ExportedParameterSet) -> None:
    """Write the exported parameters as a CSV header plus one row."""

    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(EXPORT_KEYS))
        writer.writeheader()
        writer.writerow(exported.as_dict())
