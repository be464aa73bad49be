# tests/test_benchmarks.py
from graph_search.benchmarks.plot_results import render
from graph_search.benchmarks.run_all import ALGOS, PROBLEMS, run_benchmarks
from graph_search.config import SearchSettings


def test_every_pair_is_run_and_graph_search_always_succeeds(capsys):
    rows = run_benchmarks(SearchSettings(tree_limit=200))

    assert len(rows) == len(PROBLEMS) * len(ALGOS) * 2
    assert all(r["success"] for r in rows if r["strategy"] == "graph")
    assert all(r["nodes_expanded"] <= 200 for r in rows if r["strategy"] == "tree")


def test_render_writes_table_and_charts(tmp_path, capsys):
    rows = run_benchmarks(SearchSettings(tree_limit=50))

    written = render(rows, tmp_path)

    assert (tmp_path / "results.md").exists()
    assert (tmp_path / "romania_nodes_expanded.png").exists()
    assert (tmp_path / "grid_max_frontier_size.png").exists()
    assert all(p.stat().st_size > 0 for p in written)
    assert "| romania | UCS/graph | graph | yes | 418.000000 |" in (tmp_path / "results.md").read_text()
