# tests/test_queue_search.py
from graph_search import FIFOQueue, GraphSearch, LIFOStack, SearchMetrics, TreeSearch, queue_search
from graph_search.algorithms.astar import a_star_search
from graph_search.algorithms.best_first import best_first_search
from graph_search.algorithms.bfs import breadth_first_search
from graph_search.algorithms.dfs import depth_first_search
from graph_search.algorithms.greedy import greedy_best_first_search
from graph_search.algorithms.ucs import uniform_cost_search
from graph_search.problems.graph import from_edges
from graph_search.problems.grid import make_grid_problem
from graph_search.problems.romania import romania_problem


def test_diamond_expands_d_once(diamond, recording):
    strategy = recording(GraphSearch())

    r = queue_search(diamond, FIFOQueue(), strategy)

    assert r.success
    assert strategy.removed == ["A", "B", "C", "D"]
    assert r.actions == ["B", "D"]
    assert r.cost == 2.0
    assert r.nodes_expanded == 3


def test_diamond_without_goal_never_expands_a_state_twice(diamond_no_goal, recording):
    strategy = recording(GraphSearch())

    r = queue_search(diamond_no_goal, FIFOQueue(), strategy)

    assert not r.success
    assert r.error is None
    assert strategy.removed == ["A", "B", "C", "D"]
    assert strategy.runs[0].stale_discarded == 1


def test_tree_search_expands_shared_state_twice(diamond_no_goal, recording):
    strategy = recording(TreeSearch())

    queue_search(diamond_no_goal, FIFOQueue(), strategy)

    assert strategy.removed == ["A", "B", "C", "D", "D"]


def test_cycle_with_unreachable_goal_terminates(cycle, recording):
    strategy = recording(GraphSearch())

    r = queue_search(cycle, FIFOQueue(), strategy)

    assert not r.success
    assert r.actions == []
    assert r.cost == float("inf")
    assert r.nodes_expanded == 2
    assert strategy.removed == ["A", "B"]


def test_tree_search_on_cycle_needs_expansion_limit(cycle):
    r = queue_search(cycle, FIFOQueue(), TreeSearch(), max_expansions=50)

    assert not r.success
    assert r.error == "expansion limit reached"
    assert r.nodes_expanded == 50


def test_fifo_finds_shallowest_goal():
    p = from_edges([("S", "X"), ("X", "Y"), ("Y", "G"), ("S", "G")], start="S", goal="G")

    r = breadth_first_search(p)

    assert r.success
    assert r.actions == ["G"]


def test_lifo_reproduces_depth_first_order(recording):
    p = from_edges([("A", "B"), ("A", "C"), ("B", "D"), ("C", "E")], start="A", goal=None)
    strategy = recording(GraphSearch())

    queue_search(p, LIFOStack(), strategy)

    assert strategy.removed == ["A", "C", "E", "B", "D"]


def test_root_goal_is_found_without_expanding():
    p = from_edges([("A", "B")], start="A", goal="A")

    late = breadth_first_search(p)
    early = breadth_first_search(p, early_goal_test=True)

    for r in (late, early):
        assert r.success
        assert r.actions == []
        assert r.nodes_expanded == 0


def test_early_goal_test_stops_when_goal_is_generated(diamond):
    r = breadth_first_search(diamond, early_goal_test=True)

    assert r.success
    assert r.actions == ["B", "D"]
    assert r.nodes_expanded == 2


def test_zero_expansion_budget_fails(diamond):
    r = breadth_first_search(diamond, max_expansions=0)

    assert not r.success
    assert r.error == "expansion limit reached"


def test_metrics_follow_the_run(diamond):
    metrics = SearchMetrics()

    r = queue_search(diamond, FIFOQueue(), GraphSearch(), metrics=metrics)

    assert metrics.as_dict() == {"nodesExpanded": 3, "queueSize": 1, "maxQueueSize": 2, "pathCost": 2.0}
    assert r.max_frontier_size == 2


def test_bfs_on_romania_takes_fewest_roads():
    r = breadth_first_search(romania_problem())

    assert r.success
    assert r.actions == ["Sibiu", "Fagaras", "Bucharest"]
    assert r.cost == 450.0


def test_ucs_on_romania_lets_cheaper_duplicate_win():
    # Bucharest enters the frontier via Fagaras (450) before the Pitesti route (418)
    r = uniform_cost_search(romania_problem())

    assert r.success
    assert r.actions == ["Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]
    assert r.cost == 418.0


def test_a_star_on_romania_is_optimal():
    r = a_star_search(romania_problem())

    assert r.cost == 418.0
    assert r.algo == "A*/graph"


def test_greedy_on_romania_follows_heuristic():
    r = greedy_best_first_search(romania_problem())

    assert r.actions == ["Sibiu", "Fagaras", "Bucharest"]


def test_grid_graph_search_visits_each_cell_at_most_once():
    p = make_grid_problem()
    open_cells = p.rows * p.cols - len(p.walls)

    for search in (breadth_first_search, depth_first_search, uniform_cost_search, a_star_search):
        r = search(p)
        assert r.success
        assert r.nodes_expanded <= open_cells

    assert breadth_first_search(p).cost == 10.0
    assert a_star_search(p).cost == 10.0


def test_wrappers_accept_tree_strategy(diamond):
    r = depth_first_search(diamond, strategy=TreeSearch())

    assert r.success
    assert r.algo == "DFS/tree"


def test_every_wrapper_honours_name(diamond):
    wrappers = [breadth_first_search, depth_first_search, uniform_cost_search,
                greedy_best_first_search, a_star_search]

    for search in wrappers:
        assert search(diamond, name="mine").algo == "mine"
    assert best_first_search(diamond, f=lambda n: n.path_cost, name="mine").algo == "mine"


def test_default_names_carry_strategy_suffix(diamond):
    assert uniform_cost_search(diamond).algo == "UCS/graph"
    assert greedy_best_first_search(diamond, strategy=TreeSearch()).algo == "Greedy/tree"
    assert best_first_search(diamond, f=lambda n: n.path_cost).algo == "BestFirst/graph"
