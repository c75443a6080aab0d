import pytest

from config.pydantic_models import SearchOptions
from Pathstar.astar import AstarCalculator, RunState
from Pathstar.core.errors import ConfigurationError, ContractViolation, NotAdjacent
from Pathstar.core.result import ResultKind


def _line(graph_policy, undirected_edges, **kwargs):
    edges = undirected_edges(("a", "b", 1), ("b", "c", 1), ("c", "d", 1))
    return graph_policy(edges, "a", "d", **kwargs)


def test_new_calculator_is_waiting_without_result(graph_policy, undirected_edges):
    calculator = AstarCalculator(_line(graph_policy, undirected_edges))

    assert calculator.state == RunState.WAITING
    assert calculator.max_nodes_to_expand == 0
    with pytest.raises(ConfigurationError):
        calculator.get_result()


@pytest.mark.parametrize("value", [-1, 1.5, "10", True, None])
def test_invalid_expansion_bound_is_rejected(graph_policy, undirected_edges, value):
    calculator = AstarCalculator(_line(graph_policy, undirected_edges))
    with pytest.raises(ConfigurationError):
        calculator.set_max_nodes_to_expand(value)
    assert calculator.max_nodes_to_expand == 0


def test_configuration_error_is_a_value_error(graph_policy, undirected_edges):
    with pytest.raises(ValueError):
        AstarCalculator(_line(graph_policy, undirected_edges), max_nodes_to_expand=-3)


def test_from_options_reads_expansion_bound(graph_policy, undirected_edges):
    options = SearchOptions(max_nodes_to_expand=2)
    calculator = AstarCalculator.from_options(_line(graph_policy, undirected_edges), options)

    assert calculator.max_nodes_to_expand == 2
    assert calculator.run().kind == ResultKind.FAIL_MAX_NODES_EXPANDED


def test_calculator_is_reusable_after_finishing(graph_policy, undirected_edges):
    calculator = AstarCalculator(_line(graph_policy, undirected_edges), max_nodes_to_expand=1)
    first = calculator.run()
    assert first.kind == ResultKind.FAIL_MAX_NODES_EXPANDED

    calculator.max_nodes_to_expand = 0
    second = calculator.run()
    assert second.kind == ResultKind.SUCCESS
    assert second.path == ("a", "b", "c", "d")
    assert calculator.get_result() is second
    assert calculator.nodes_expanded == 3


def test_configuration_and_reentry_are_refused_while_running(graph_policy, undirected_edges):
    errors = []

    class _MeddlingPolicy(graph_policy):
        calculator = None

        def expand(self, node):
            assert self.calculator.state == RunState.RUNNING
            attempts = (lambda: self.calculator.set_max_nodes_to_expand(5), self.calculator.run)
            for attempt in attempts:
                try:
                    attempt()
                except ConfigurationError as e:
                    errors.append(e)
            return super().expand(node)

    edges = undirected_edges(("a", "b", 1))
    policy = _MeddlingPolicy(edges, "a", "b")
    calculator = AstarCalculator(policy)
    policy.calculator = calculator

    result = calculator.run()

    assert result.is_success
    assert calculator.max_nodes_to_expand == 0
    # two validation expansions plus the expansion of "a"
    assert len(errors) == 6


def test_contract_violation_leaves_calculator_waiting(graph_policy, undirected_edges):
    policy = _line(graph_policy, undirected_edges, monotonic=True, heuristics={"d": 1})
    calculator = AstarCalculator(policy)

    with pytest.raises(ContractViolation):
        calculator.run()
    assert calculator.state == RunState.WAITING
    with pytest.raises(ConfigurationError):
        calculator.get_result()


def test_not_adjacent_aborts_the_run(graph_policy):
    class _LyingPolicy(graph_policy):
        def expand(self, node):
            neighbours = super().expand(node)
            if node == "b":
                neighbours.append("ghost")
            return neighbours

    policy = _LyingPolicy({"a": {"b": 1}, "b": {"c": 1}}, "a", "c")
    calculator = AstarCalculator(policy)

    with pytest.raises(NotAdjacent):
        calculator.run()
    assert calculator.state == RunState.WAITING

    with pytest.raises(ConfigurationError):
        calculator.get_result()
