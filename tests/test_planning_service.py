"""Tests for the write-through road plan service."""

from pathlib import Path

import pytest

from roadplan.adapters.export import TextFileExporter
from roadplan.adapters.rendering import ConsoleTableRenderer
from roadplan.config import StorageConfig
from roadplan.domain.errors import (
    DuplicateCityError,
    ExportError,
    InvalidBudgetError,
    InvalidCountError,
    InvalidIndexError,
    NoRoadError,
    SameCityError,
)
from roadplan.graph.network import RoadNetwork
from roadplan.services import RoadPlanService


class RecordingExporter:
    """Exporter double that records calls instead of writing files."""

    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def export_cities(self, network):
        return self._record("cities", network)

    def export_roads(self, network):
        return self._record("roads", network)

    def _record(self, kind, network):
        self.calls.append(kind)
        path = Path(f"{kind}.txt")
        if self.fail:
            raise ExportError(
                f"Could not open {path.name} for writing",
                file_path=str(path),
                cause=PermissionError("denied"),
            )
        return path


@pytest.fixture
def recorder():
    return RecordingExporter()


@pytest.fixture
def recorded_service(recorder):
    return RoadPlanService(RoadNetwork(), recorder, ConsoleTableRenderer())


def _with_cities(service, *names):
    for name in names:
        assert service.add_city(name).success
    return service


class TestCities:
    def test_add_city_messages(self, recorded_service, recorder):
        ok = recorded_service.add_city("Kigali")
        dup = recorded_service.add_city("Kigali")

        assert ok.success
        assert ok.message == "City 'Kigali' added with index 1."
        assert ok.value.display_id == 1
        assert not dup.success
        assert dup.message == "City 'Kigali' already exists. Skipping."
        assert isinstance(dup.error, DuplicateCityError)
        assert recorder.calls == []

    def test_add_city_blank_name(self, recorded_service):
        result = recorded_service.add_city("  ")
        assert not result.success
        assert result.message == "City name must not be empty."

    def test_add_cities_exports_once(self, recorded_service, recorder):
        result = recorded_service.add_cities(["Kigali", "Huye", "Kigali", "Rubavu"])

        assert not result.success
        assert result.message == "3 of 4 cities added."
        assert [r.success for r in result.value] == [True, True, False, True]
        assert recorded_service.network.city_count == 3
        assert recorder.calls == ["cities"]
        assert result.export.message == "Cities saved to cities.txt."

    def test_add_cities_all_accepted(self, recorded_service):
        result = recorded_service.add_cities(["Kigali", "Huye"])
        assert result.success
        assert result.message == "2 of 2 cities added."

    def test_add_cities_requires_names(self, recorded_service, recorder):
        with pytest.raises(InvalidCountError):
            recorded_service.add_cities([])
        assert recorder.calls == []

    def test_rename_city_exports_on_success(self, recorded_service, recorder):
        _with_cities(recorded_service, "Kigali", "Huye")

        result = recorded_service.rename_city(2, "Butare")

        assert result.success
        assert result.message == "City updated successfully."
        assert result.export.success
        assert recorder.calls == ["cities"]
        assert recorded_service.network.index_of("Butare") == 1
        assert recorded_service.network.index_of("Huye") is None

    def test_rename_city_collision_is_reported(self, recorded_service, recorder):
        _with_cities(recorded_service, "Kigali", "Huye")

        result = recorded_service.rename_city(2, "Kigali")

        assert not result.success
        assert result.message == "City 'Kigali' already exists."
        assert recorder.calls == []

    @pytest.mark.parametrize("index", [0, 3])
    def test_rename_city_bad_index(self, recorded_service, index):
        _with_cities(recorded_service, "Kigali", "Huye")
        result = recorded_service.rename_city(index, "Rubavu")
        assert not result.success
        assert isinstance(result.error, InvalidIndexError)

    def test_find_city(self, recorded_service):
        _with_cities(recorded_service, "Kigali", "Huye")

        found = recorded_service.find_city(2)
        missing = recorded_service.find_city(5)

        assert found.message == "City at index 2: Huye"
        assert found.value.name == "Huye"
        assert not missing.success
        assert missing.message == "Error: Index 5 is outside 1..2."

    def test_find_city_on_empty_network(self, recorded_service):
        result = recorded_service.find_city(1)
        assert not result.success
        assert isinstance(result.error, InvalidIndexError)


class TestRoads:
    def test_add_road_exports_roads(self, recorded_service, recorder):
        _with_cities(recorded_service, "Kigali", "Huye")

        result = recorded_service.add_road("Kigali", "Huye")

        assert result.success
        assert result.message == "Road added between Kigali and Huye."
        assert result.export.message == "Roads and budgets saved to roads.txt."
        assert recorder.calls == ["roads"]

    @pytest.mark.parametrize("pair", [("Kigali", "Nowhere"), ("Kigali", "Kigali")])
    def test_add_road_failure_still_exports(self, recorded_service, recorder, pair):
        _with_cities(recorded_service, "Kigali", "Huye")

        result = recorded_service.add_road(*pair)

        assert not result.success
        assert result.message == "Error: One or both cities not found, or same city."
        assert recorder.calls == ["roads"]
        assert recorded_service.network.roads() == ()

    def test_set_budget_without_road_fails_and_exports(self, recorded_service, recorder):
        _with_cities(recorded_service, "A", "B")

        result = recorded_service.set_budget("A", "B", 3.0)

        assert not result.success
        assert result.message == "Error: No road exists between A and B."
        assert isinstance(result.error, NoRoadError)
        assert recorder.calls == ["roads"]
        assert recorded_service.network.budget_matrix() == [[0.0, 0.0], [0.0, 0.0]]

    def test_set_budget_after_add_road(self, recorded_service, recorder):
        _with_cities(recorded_service, "A", "B")
        recorded_service.add_road("A", "B")

        result = recorded_service.set_budget("A", "B", 3.0)

        assert result.success
        assert result.message == "Budget added for the road between A and B."
        assert result.value.budget == 3.0
        assert recorder.calls == ["roads", "roads"]

    def test_set_budget_same_city(self, recorded_service):
        _with_cities(recorded_service, "A", "B")
        result = recorded_service.set_budget("A", "A", 3.0)
        assert result.message == "Error: One or both cities not found, or same city."
        assert isinstance(result.error, SameCityError)

    def test_set_budget_negative_amount(self, recorded_service, recorder):
        _with_cities(recorded_service, "A", "B")
        recorded_service.add_road("A", "B")

        result = recorded_service.set_budget("A", "B", -1.0)

        assert not result.success
        assert isinstance(result.error, InvalidBudgetError)
        assert recorded_service.network.budget_between("A", "B") == 0.0
        assert recorder.calls == ["roads", "roads"]

    def test_find_road(self, recorded_service):
        _with_cities(recorded_service, "A", "B")
        assert not recorded_service.find_road("A", "B").success
        recorded_service.add_road("B", "A")
        found = recorded_service.find_road("A", "B")
        assert found.success
        assert found.value.label == "A-B"


class TestExports:
    def test_export_failure_is_reported_not_raised(self, caplog):
        service = RoadPlanService(
            RoadNetwork(), RecordingExporter(fail=True), ConsoleTableRenderer()
        )
        _with_cities(service, "A", "B")

        with caplog.at_level("ERROR"):
            result = service.add_road("A", "B")

        assert result.success
        assert not result.export.success
        assert result.export.message == "Error: Could not open roads.txt for writing."
        assert isinstance(result.export.error, ExportError)
        assert service.network.has_road("A", "B")
        assert "Export failed" in caplog.text

    def test_round_trip_to_files(self, service, storage):
        _with_cities(service, "A", "B", "C")
        service.export_cities()
        service.add_road("A", "B")
        service.set_budget("A", "B", 12.5)

        assert storage.cities_path.read_text(encoding="utf-8") == (
            "Index Cityname\n1 A\n2 B\n3 C\n"
        )
        road_lines = storage.roads_path.read_text(encoding="utf-8").splitlines()[1:]
        assert road_lines == ["1. A-B 12.50"]

    def test_missing_directory_keeps_memory_state(self, tmp_path):
        exporter = TextFileExporter(StorageConfig(data_dir=tmp_path / "gone"))
        service = RoadPlanService(RoadNetwork(), exporter, ConsoleTableRenderer())

        result = service.add_cities(["Kigali"])

        assert result.success
        assert not result.export.success
        assert result.export.message == "Error: Could not open cities.txt for writing."
        assert service.network.index_of("Kigali") == 0


def test_read_outs_delegate_to_renderer(service):
    _with_cities(service, "Kigali", "Huye")
    service.add_road("Kigali", "Huye")
    service.set_budget("Kigali", "Huye", 5.0)

    assert service.list_cities()[-2:] == ["1. Kigali", "2. Huye"]
    assert service.render_road_matrix()[-2:] == [
        "Kigali         0  1  ",
        "Huye           1  0  ",
    ]
    report = service.render_full_report()
    assert "Kigali         0.0    5.0    " in report
    assert "Huye           5.0    0.0    " in report
