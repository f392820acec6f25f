"""SSTDR configuration twin package."""

from sstdr_twin.catalog import DEFAULT_CATALOG, ConfigurationCatalog, lookup
from sstdr_twin.config import ConfigurationPreset
from sstdr_twin.errors import GenerationError, PresetValidationError, UnknownConfigurationError
from sstdr_twin.resolver import export_parameters, resolve
from sstdr_twin.workspace import SimulationWorkspace, load_configuration, publish

__all__ = [
    "ConfigurationCatalog",
    "ConfigurationPreset",
    "DEFAULT_CATALOG",
    "GenerationError",
    "PresetValidationError",
    "SimulationWorkspace",
    "UnknownConfigurationError",
    "export_parameters",
    "load_configuration",
    "lookup",
    "publish",
    "resolve",
]
