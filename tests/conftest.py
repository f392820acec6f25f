from __future__ import annotations

"""Shared pytest fixtures.

Resolving a preset runs the PN generator, so resolved configurations used
by several tests are built once per session.
"""

import pytest

from sstdr_twin.models import ResolvedConfiguration
from sstdr_twin.resolver import resolve
from sstdr_twin.workspace import SimulationWorkspace


@pytest.fixture(scope="session")
def default_resolved() -> ResolvedConfiguration:
    return resolve("default")


@pytest.fixture(scope="session")
def unmodulated_resolved() -> ResolvedConfiguration:
    return resolve("unmodulated")


@pytest.fixture
def workspace() -> SimulationWorkspace:
    return SimulationWorkspace()
