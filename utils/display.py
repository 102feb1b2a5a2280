from collections.abc import Mapping

from typing_extensions import Iterable

from localtypes import Index, SearchStep
from utils.algorithms.propagation import Node


def search_result_line(target: int, index: Index | None) -> str:
    if index is None:
        return f"{target} not found in the list"
    return f"Found {target} at index {index}"


def node_line(node: Node) -> str:
    return f"{node.label}: {node!r}"


def display_search_result(target: int, index: Index | None):
    print(search_result_line(target, index))


def display_trace(steps: Iterable[SearchStep]):
    for i, step in enumerate(steps):
        print(
            f"Step n°{i}: range [{step.start}, {step.end}], mid {step.mid}, value {step.probe}"
        )


def display_nodes(nodes: Mapping[str, Node]):
    for node in nodes.values():
        print(node_line(node))
