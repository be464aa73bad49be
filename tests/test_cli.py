# tests/test_cli.py
import json

import pytest

from graph_search.__main__ import PROBLEMS, build_problem, main
from graph_search.errors import UnknownProblemError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MAX_EXPANSIONS", "EARLY_GOAL_TEST", "LOG_LEVEL", "TREE_LIMIT"):
        monkeypatch.delenv("GRAPH_SEARCH_" + name, raising=False)


def test_ucs_prints_route(capsys):
    assert main(["romania", "--frontier", "ucs"]) == 0

    out = capsys.readouterr().out
    assert "UCS/graph: OK cost=418.0" in out
    assert "Sibiu -> Rimnicu Vilcea -> Pitesti -> Bucharest" in out


def test_json_output(capsys):
    assert main(["romania", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["success"] is True
    assert data["cost"] == 450.0
    assert data["actions"] == ["Sibiu", "Fagaras", "Bucharest"]


def test_unreachable_grid_goal_exits_nonzero(capsys):
    # (1, 3) is a wall cell
    assert main(["grid", "--goal", "1,3"]) == 1
    assert "FAIL" in capsys.readouterr().out


def test_expansion_limit_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("GRAPH_SEARCH_MAX_EXPANSIONS", "1")

    assert main(["romania", "--strategy", "tree"]) == 1
    assert "expansion limit reached" in capsys.readouterr().out


def test_unknown_city_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["romania", "--goal", "Atlantis"])

    assert exc.value.code == 2


def test_negative_expansion_limit_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["romania", "--max-expansions", "-1"])

    assert exc.value.code == 2


def test_build_problem_rejects_unknown_name():
    with pytest.raises(UnknownProblemError):
        build_problem("atlantis", None, None)


def test_build_problem_uses_registry():
    assert set(PROBLEMS) == {"romania", "grid"}
    grid = build_problem("grid", "0,1", "2,2")
    assert (grid.start, grid.goal) == ((0, 1), (2, 2))
