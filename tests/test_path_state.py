import pytest

from Pathstar.core.errors import ArchivedStateError, ContractViolation
from Pathstar.core.path_state import PathState


def _chain(*nodes):
    state = PathState(nodes[0], 0, 0)
    for idx, node in enumerate(nodes[1:], start=1):
        state = PathState(node, idx, 0, state)
    return state


def test_root_state_has_empty_route():
    root = PathState("s", 0, 5)

    assert root.path_length == 0
    assert root.previous is None
    assert root.ancestry == ()
    assert root.ancestor_nodes == frozenset()
    assert root.path() == ("s",)
    assert root.score == 5


def test_child_extends_parent_route():
    state = _chain("a", "b", "c")

    assert state.path_length == 2
    assert state.ancestry == ("a", "b")
    assert state.path() == ("a", "b", "c")
    assert state.previous.node == "b"
    assert state.has_node_in_path("a")
    assert state.has_node_in_path("b")
    # own node is not part of the route leading to it
    assert not state.has_node_in_path("c")


def test_score_is_recomputed_from_cost_and_heuristic():
    state = PathState("n", 2.5, 1.5)
    assert state.score == 4.0


@pytest.mark.parametrize(
    "args",
    [(None, 0, 0), ("n", None, 0), ("n", 0, None)],
)
def test_constructor_rejects_missing_fields(args):
    with pytest.raises(ValueError):
        PathState(*args)


def test_archive_releases_everything_but_node_and_length():
    parent = PathState("a", 0, 3)
    child = PathState("b", 1, 2, parent)
    parent.archive()

    assert parent.is_archived
    assert parent.node == "a"
    assert parent.path_length == 0
    for field in ("accumulated_cost", "heuristic", "score", "previous", "ancestry"):
        with pytest.raises(ArchivedStateError):
            getattr(parent, field)
    with pytest.raises(ArchivedStateError):
        parent.has_node_in_path("a")

    # children keep their own copy of the route
    assert child.path() == ("a", "b")
    assert child.accumulated_cost == 1


def test_archived_state_error_is_a_contract_violation():
    state = PathState("a", 0, 0)
    state.archive()
    with pytest.raises(ContractViolation):
        state.accumulated_cost
    assert "a" in repr(state)


def test_children_share_the_parent_route():
    root = PathState("a", 0, 0)
    parent = PathState("b", 1, 0, root)
    left = PathState("c", 2, 0, parent)
    right = PathState("d", 2, 0, parent)

    assert left._route[1] is parent._route
    assert right._route[1] is parent._route
    assert left.ancestor_nodes == frozenset({"a", "b"})
    assert right.path() == ("a", "b", "d")


def test_long_routes_are_reconstructed_in_order():
    state = PathState(0, 0, 0)
    for node in range(1, 5001):
        previous = state
        state = PathState(node, node, 0, previous)
        previous.archive()

    assert state.path_length == 5000
    assert state.path() == tuple(range(5001))
    assert state.has_node_in_path(0)
    assert not state.has_node_in_path(5000)
