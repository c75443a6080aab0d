import pytest

from Pathstar.core.path_state import PathState
from Pathstar.core.result import ResultKind, SearchResult


def test_result_kind_flags():
    assert ResultKind.SUCCESS.is_success
    for kind in (
        ResultKind.FAIL_ALL_NODES_EXPANDED,
        ResultKind.FAIL_MAX_NODES_EXPANDED,
        ResultKind.FAIL_USER_STOP_CRITERION,
    ):
        assert not kind.is_success
    assert ResultKind.FAIL_MAX_NODES_EXPANDED.description == "max nodes expanded"


def test_successful_result_exposes_cost_and_path():
    root = PathState("a", 0, 2)
    goal = PathState("b", 3, 0, PathState("m", 1, 1, root))
    result = SearchResult(ResultKind.SUCCESS, goal, nodes_expanded=2, elapsed_time=0.01)

    assert result.is_success
    assert result.cost == 3
    assert result.path == ("a", "m", "b")
    assert result.path_length == 2
    assert result.summary()["kind"] == "SUCCESS"
    assert "cost=3" in str(result)


def test_failed_result_has_no_cost_or_path():
    result = SearchResult(
        ResultKind.FAIL_ALL_NODES_EXPANDED, None, nodes_expanded=7, elapsed_time=0.0
    )

    assert not result.is_success
    assert result.cost is None
    assert result.path is None
    assert result.path_length == 0
    assert result.summary()["nodes_expanded"] == 7
    assert str(result) == "SearchResult(kind=FAIL_ALL_NODES_EXPANDED)"


def test_result_rejects_inconsistent_terminal_state():
    with pytest.raises(ValueError):
        SearchResult(ResultKind.SUCCESS, None, 0, 0.0)
    with pytest.raises(ValueError):
        SearchResult(ResultKind.FAIL_MAX_NODES_EXPANDED, PathState("a", 0, 0), 1, 0.0)
