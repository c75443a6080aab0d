"""
Pathstar Core Errors
"""


class PathstarError(Exception):
    """Base class for every error raised by the search engine."""


class ConfigurationError(PathstarError, ValueError):
    """Invalid or out-of-phase configuration of a calculator."""


class ContractViolation(PathstarError):
    """An expansion policy (or a caller) broke the engine's contract."""


class ArchivedStateError(ContractViolation):
    """A released field of an archived path state was read."""


class NotAdjacent(PathstarError):
    """`cost_between` was asked for a pair of nodes that are not adjacent."""

    def __init__(self, from_node=None, to_node=None):
        self.from_node = from_node
        self.to_node = to_node
        if from_node is None and to_node is None:
            super().__init__("Nodes are not adjacent.")
        else:
            super().__init__(f"Nodes are not adjacent: {from_node!r} -> {to_node!r}")
