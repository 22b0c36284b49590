"""Tests for the fixed-width console tables."""

import pytest

from roadplan.adapters.rendering import ConsoleTableRenderer
from roadplan.graph.network import RoadNetwork


@pytest.fixture
def renderer():
    return ConsoleTableRenderer()


@pytest.fixture
def kigali_huye():
    network = RoadNetwork()
    network.add_city("Kigali")
    network.add_city("Huye")
    network.add_road("Kigali", "Huye")
    network.set_budget("Kigali", "Huye", 5.0)
    return network


def test_cities_list(renderer, kigali_huye):
    assert renderer.render_cities(kigali_huye) == [
        "",
        "Cities:",
        "---------------------",
        "1. Kigali",
        "2. Huye",
    ]


def test_cities_list_when_empty(renderer, network):
    assert renderer.render_cities(network)[-1] == "No cities recorded yet."


def test_road_matrix(renderer, kigali_huye):
    lines = renderer.render_road_matrix(kigali_huye)

    assert lines[:3] == ["", "Roads Adjacency Matrix", "----------------------"]
    assert lines[3] == " " * 15 + "KigHuy"
    assert lines[4] == "Kigali         0  1  "
    assert lines[5] == "Huye           1  0  "


def test_road_matrix_when_empty(renderer, network):
    assert renderer.render_road_matrix(network) == [
        "No cities to display roads for. Add cities first."
    ]


def test_budget_matrix(renderer, kigali_huye):
    lines = renderer.render_budget_matrix(kigali_huye)

    assert lines[:3] == ["", "Budgets Adjacency Matrix", "------------------------"]
    assert lines[3] == " " * 15 + "Kigal  Huye   "
    assert lines[4] == "Kigali         0.0    5.0    "
    assert lines[5] == "Huye           5.0    0.0    "


def test_budget_matrix_when_empty(renderer, network):
    assert renderer.render_budget_matrix(network) == ["No cities to display budgets for."]


def test_long_names_are_abbreviated_in_headers_only(renderer):
    network = RoadNetwork()
    network.add_city("Nyagatare District")
    lines = renderer.render_road_matrix(network)

    assert lines[3] == " " * 15 + "Nya"
    assert lines[4] == "Nyagatare District0  "


def test_full_report_is_cities_then_roads_then_budgets(renderer, kigali_huye):
    report = renderer.render_full_report(kigali_huye)

    assert report == [
        *renderer.render_cities(kigali_huye),
        *renderer.render_road_matrix(kigali_huye),
        *renderer.render_budget_matrix(kigali_huye),
    ]
    assert report.index("Cities:") < report.index("Roads Adjacency Matrix")
    assert report.index("Roads Adjacency Matrix") < report.index("Budgets Adjacency Matrix")


def test_full_report_when_empty(renderer, network):
    assert renderer.render_full_report(network) == [
        "",
        "Cities:",
        "---------------------",
        "No cities recorded yet.",
        "No cities to display roads for. Add cities first.",
        "No cities to display budgets for.",
    ]


def test_budget_precision_is_configurable(kigali_huye):
    renderer = ConsoleTableRenderer(budget_cell_width=8, budget_precision=2)
    assert renderer.render_budget_matrix(kigali_huye)[4] == "Kigali         0.00    5.00    "
