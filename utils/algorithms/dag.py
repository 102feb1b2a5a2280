"""
DAG (Directed Acyclic Graph) utilities.

Functions:
    find_cycle(graph) - One cycle of the graph, if any
"""

from collections.abc import Collection, Hashable, Mapping
from typing import TypeVar

T = TypeVar("T", bound=Hashable)

_EXHAUSTED = object()


def _all_nodes(parent_to_children: Mapping[T, Collection[T]]) -> list[T]:
    # Keys first, then child-only nodes, in discovery order
    nodes = dict.fromkeys(parent_to_children)
    for children in parent_to_children.values():
        nodes.update(dict.fromkeys(children))
    return list(nodes)


def find_cycle(parent_to_children: Mapping[T, Collection[T]]) -> tuple[T, ...] | None:
    """
    Finds one cycle in the graph.

    Returns:
        The nodes of the cycle in edge order, starting and ending before the
        repeated node (a self-loop gives a one-element tuple), or None for a DAG.
    """
    # Iterative DFS with white/grey/black colouring
    state: dict[T, int] = {}
    for root in _all_nodes(parent_to_children):
        if root in state:
            continue
        path: list[T] = [root]
        state[root] = 1
        iterators = [iter(parent_to_children.get(root, ()))]
        while iterators:
            child = next(iterators[-1], _EXHAUSTED)
            if child is _EXHAUSTED:
                state[path.pop()] = 2
                iterators.pop()
            elif state.get(child) == 1:
                return tuple(path[path.index(child) :])
            elif child not in state:
                state[child] = 1
                path.append(child)
                iterators.append(iter(parent_to_children.get(child, ())))

    return None


__all__ = ["find_cycle"]
