"""Shared fixtures for the road budget planner tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from roadplan.adapters.export import TextFileExporter
from roadplan.adapters.rendering import ConsoleTableRenderer
from roadplan.config import StorageConfig, reset_config
from roadplan.container import reset_container
from roadplan.graph.network import RoadNetwork
from roadplan.services import RoadPlanService


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def network() -> RoadNetwork:
    return RoadNetwork()


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    return StorageConfig(data_dir=tmp_path)


@pytest.fixture
def service(network: RoadNetwork, storage: StorageConfig) -> RoadPlanService:
    return RoadPlanService(
        network=network,
        exporter=TextFileExporter(storage),
        renderer=ConsoleTableRenderer(),
    )


@pytest.fixture
def scripted() -> Callable[..., Callable[[], str]]:
    """Build read() callables that replay the given lines, then signal EOF."""

    def build(*lines: str) -> Callable[[], str]:
        remaining: List[str] = list(lines)

        def read() -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return read

    return build
