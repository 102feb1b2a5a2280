"""
Module used to build the demonstration inputs
"""

from collections.abc import Mapping, Sequence

from constants import NODE_VALUES, SEARCH_SEQUENCE
from utils.algorithms.propagation import Node


def nodes_from_values(
    values: Mapping[str, tuple[int, Sequence[str]]],
) -> dict[str, Node]:
    """
    Builds named nodes and wires their references.

    Args:
        values: Node name -> (initial value, names of referenced nodes)

    Raises:
        KeyError: If a node references a name that is not defined.
    """
    nodes = {name: Node(value, name=name) for name, (value, _) in values.items()}
    for name, (_, references) in values.items():
        nodes[name].nodes.extend(nodes[reference] for reference in references)
    return nodes


def demo_nodes() -> dict[str, Node]:
    return nodes_from_values(NODE_VALUES)


def demo_sequence() -> list[int]:
    return list(SEARCH_SEQUENCE)
