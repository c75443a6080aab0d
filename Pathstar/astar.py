import logging
import threading
import time
from enum import Enum
from typing import Optional

from config.pydantic_models import SearchOptions
from Pathstar.core.contracts import validate_policy
from Pathstar.core.errors import ConfigurationError
from Pathstar.core.expansion import expand_path_state, merge_children
from Pathstar.core.frontier import Frontier
from Pathstar.core.loop import termination_kind
from Pathstar.core.path_state import PathState
from Pathstar.core.result import ResultKind, SearchResult
from Pathstar.core.search_strategy import ExpansionPolicy

logger = logging.getLogger(__name__)


class RunState(Enum):
    WAITING = "waiting"
    RUNNING = "running"
    FINISHED = "finished"


class AstarCalculator:
    """
    Best-first (A*) search over the implicit graph described by an expansion policy.

    A calculator runs one search at a time and can be reused sequentially; every run
    starts from a fresh frontier. The result of the last finished run is available from
    `get_result()`.

    Args:
        policy: Domain policy that expands nodes and supplies costs and heuristics.
        max_nodes_to_expand: Stop with FAIL_MAX_NODES_EXPANDED after this many
            expansions. 0 means unbounded (default: 0).
    """

    def __init__(self, policy: ExpansionPolicy, max_nodes_to_expand: int = 0):
        self._policy = policy
        self._state = RunState.WAITING
        self._lock = threading.Lock()
        self._max_nodes_to_expand = 0
        self.max_nodes_to_expand = max_nodes_to_expand

        self._frontier = Frontier()
        self._closed: set = set()
        self._nodes_expanded = 0
        self._result: Optional[SearchResult] = None
        self._goal = None
        self._monotonic = False
        self._stop_criterion_enabled = False

    @classmethod
    def from_options(
        cls, policy: ExpansionPolicy, search_options: SearchOptions
    ) -> "AstarCalculator":
        return cls(policy, max_nodes_to_expand=search_options.max_nodes_to_expand)

    @property
    def policy(self) -> ExpansionPolicy:
        return self._policy

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def max_nodes_to_expand(self) -> int:
        return self._max_nodes_to_expand

    @max_nodes_to_expand.setter
    def max_nodes_to_expand(self, value: int):
        if self._state == RunState.RUNNING:
            raise ConfigurationError("Cannot change max_nodes_to_expand while running.")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"max_nodes_to_expand must be an integer, got {type(value).__name__}."
            )
        if value < 0:
            raise ConfigurationError(f"max_nodes_to_expand must be at least 0, got {value}.")
        self._max_nodes_to_expand = value

    def set_max_nodes_to_expand(self, value: int) -> None:
        self.max_nodes_to_expand = value

    @property
    def nodes_expanded(self) -> int:
        return self._nodes_expanded

    def get_result(self) -> SearchResult:
        if self._state != RunState.FINISHED:
            raise ConfigurationError(
                f"No result available, calculator is {self._state.value}."
            )
        return self._result

    def run(self) -> SearchResult:
        """
        Run the search to completion and return its result.

        Raises:
            ConfigurationError: if this calculator is already running.
            ContractViolation: if the policy fails the pre-run validation.
            NotAdjacent: if the policy cannot cost one of its own neighbours.
        """
        if not self._lock.acquire(blocking=False):
            raise ConfigurationError("Calculator is already running.")
        try:
            self._state = RunState.RUNNING
            self._result = None
            start_time = time.time()
            try:
                self._initialize()
                kind = self._expand_all()
            except BaseException:
                self._state = RunState.WAITING
                raise
            self._result = self._create_result(kind, time.time() - start_time)
            self._state = RunState.FINISHED
        finally:
            self._lock.release()

        logger.info(
            "Search finished: %s after %d expansions in %.4f s",
            self._result.kind.name,
            self._result.nodes_expanded,
            self._result.elapsed_time,
        )
        return self._result

    def _initialize(self) -> None:
        policy = self._policy
        self._frontier.clear()
        self._closed = set()
        self._nodes_expanded = 0

        validate_policy(policy)

        start = policy.start_node()
        self._goal = policy.goal_node()
        self._monotonic = bool(policy.monotonic_heuristic())
        self._stop_criterion_enabled = bool(policy.stop_criterion_enabled())
        self._frontier.push(PathState(start, policy.zero_cost(), policy.heuristic(start)))
        logger.info(
            "Starting search from %r to %r (monotonic=%s, max_nodes=%d)",
            start,
            self._goal,
            self._monotonic,
            self._max_nodes_to_expand,
        )

    def _expand_all(self) -> ResultKind:
        frontier = self._frontier
        while True:
            kind = termination_kind(
                frontier,
                self._policy,
                self._goal,
                self._nodes_expanded,
                self._max_nodes_to_expand,
                self._stop_criterion_enabled,
            )
            if kind is not None:
                return kind

            parent = frontier.pop()
            logger.debug("Expanding %r", parent)
            children = expand_path_state(self._policy, parent)
            if self._monotonic:
                self._closed.add(parent.node)
            merge_children(frontier, children, self._monotonic, self._closed)

            self._nodes_expanded += 1
            parent.archive()

    def _create_result(self, kind: ResultKind, elapsed_time: float) -> SearchResult:
        terminal_state = None
        if kind.is_success:
            terminal_state = self._frontier.pop()
        return SearchResult(
            kind=kind,
            terminal_state=terminal_state,
            nodes_expanded=self._nodes_expanded,
            elapsed_time=elapsed_time,
        )
