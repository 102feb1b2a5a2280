"""
In-place value propagation across a graph of shared mutable nodes.

A Node holds a mutable integer and references to other Nodes. Several nodes
may reference the same Node: mutating it through one path is visible through
every path, and propagation increments it once per path that reaches it.

Functions:
    propagate(node, delta)           - Recursive pre-order increment
    preorder(node)                   - Nodes in propagation order, once per path
    propagate_iterative(node, delta) - Same visitation with an explicit stack
    reachable_paths(node)            - Increments each node would receive
    node_graph(node)                 - Adjacency mapping of the reachable subgraph
    find_cycle(node)                 - Cycle reachable from node, if any

Propagation never checks for cycles: on a cyclic graph the recursive form
raises RecursionError and the iterative form does not terminate. Callers that
cannot rule cycles out should check `find_cycle` first.

Nothing here is synchronized. Concurrent propagations touching overlapping
nodes must be serialized by the caller.
"""

import logging
from collections import Counter, deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from utils.algorithms import dag

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """
    Mutable integer cell with non-owning references to other nodes.

    Equality and hashing are by identity.
    """

    value: int
    nodes: list["Node"] = field(default_factory=list)
    name: str = ""

    @property
    def label(self) -> str:
        return self.name or hex(id(self))

    def __repr__(self) -> str:
        refs = ", ".join(n.label for n in self.nodes)
        return f"Node({self.label}, value={self.value}, nodes=[{refs}])"


def preorder(node: Node) -> Iterator[Node]:
    """
    Yields `node`, then what it references, depth-first and left to right.

    No seen-set: a shared node is yielded once per path reaching it.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.nodes))


def propagate(node: Node, delta: int) -> None:
    """
    Adds `delta` to `node` then, left to right, to everything it references.

    A node reachable along several paths is incremented once per path.
    """
    node.value += delta
    logger.debug(f"{node.label} += {delta} -> {node.value}")

    for child in node.nodes:
        propagate(child, delta)


def propagate_iterative(node: Node, delta: int) -> None:
    """Same increments, in the same order, as `propagate`, without recursion."""
    for current in preorder(node):
        current.value += delta
        logger.debug(f"{current.label} += {delta} -> {current.value}")


def reachable_paths(node: Node) -> Counter[Node]:
    """Number of distinct paths from `node` to each node it reaches, itself included."""
    return Counter(preorder(node))


def node_graph(node: Node) -> dict[Node, list[Node]]:
    """
    Maps every node reachable from `node` to the nodes it references.

    Each node is visited once, so this terminates on cyclic graphs too.
    """
    graph: dict[Node, list[Node]] = {}
    queue = deque([node])
    while queue:
        current = queue.popleft()

        # Avoid cycles
        if current in graph:
            continue

        graph[current] = list(current.nodes)
        queue.extend(current.nodes)
    return graph


def find_cycle(node: Node) -> tuple[Node, ...] | None:
    """Returns a cycle reachable from `node`, or None if the subgraph is acyclic."""
    return dag.find_cycle(node_graph(node))


__all__ = [
    "Node",
    "preorder",
    "propagate",
    "propagate_iterative",
    "reachable_paths",
    "node_graph",
    "find_cycle",
]
