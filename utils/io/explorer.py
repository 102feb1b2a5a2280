"""
TUI for stepping through the demonstrations.

Usage:
    uv run python -m utils.io.explorer
"""

from collections.abc import Mapping, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.widgets import DataTable, Footer, Header, Label

from constants import PROPAGATION_DELTA, PROPAGATION_ORDER, SEARCH_TARGET
from localtypes import SearchStep
from utils.algorithms.propagation import Node, propagate
from utils.algorithms.search import bisection_trace
from utils.loader import demo_nodes, demo_sequence


def trace_rows(steps: Sequence[SearchStep], target: int) -> list[tuple[str | Text, ...]]:
    """One row per probe, the hit highlighted."""
    rows: list[tuple[str | Text, ...]] = []
    for i, step in enumerate(steps):
        probe: str | Text = str(step.probe)
        if step.probe == target:
            probe = Text(probe, style="bold green")
        rows.append((str(i), str(step.start), str(step.end), str(step.mid), probe))
    return rows


def propagation_rows(
    nodes: Mapping[str, Node], order: Sequence[str], delta: int
) -> list[tuple[str, ...]]:
    """
    Propagates from each name in `order` and snapshots every node's value.

    The first row holds the initial values. Mutates `nodes`.
    """
    rows = [("initial", "") + tuple(str(node.value) for node in nodes.values())]
    for name in order:
        propagate(nodes[name], delta)
        rows.append(
            (f"+{delta}", name) + tuple(str(node.value) for node in nodes.values())
        )
    return rows


class ExplorerApp(App):
    """TUI application showing a bisection trace and a propagation run."""

    TITLE = "Algorithm Explorer"
    SUB_TITLE = "Bounded search and shared-node propagation"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }

    .section-title {
        text-style: bold;
        padding: 1 0;
        color: $secondary;
    }

    DataTable {
        height: auto;
    }

    DataTable > .datatable--header {
        text-style: bold;
        background: $primary;
    }

    #content {
        height: 100%;
        padding: 1 2;
    }
    """

    def __init__(
        self,
        target: int = SEARCH_TARGET,
        delta: int = PROPAGATION_DELTA,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.target = target
        self.delta = delta

    def compose(self) -> ComposeResult:
        yield Header()
        with ScrollableContainer(id="content"):
            yield Label("", id="search-title", classes="section-title")
            yield DataTable(id="search-table")
            yield Label("", id="propagation-title", classes="section-title")
            yield DataTable(id="propagation-table")
        yield Footer()

    def on_mount(self) -> None:
        """Populate both tables."""
        sequence = demo_sequence()
        steps = bisection_trace(sequence, self.target, 0, len(sequence) - 1)
        self.query_one("#search-title", Label).update(
            f"Search for {self.target} in {sequence}"
        )
        search_table = self.query_one("#search-table", DataTable)
        search_table.add_columns("Step", "Start", "End", "Mid", "Value")
        search_table.add_rows(trace_rows(steps, self.target))

        nodes = demo_nodes()
        self.query_one("#propagation-title", Label).update(
            f"Propagate {self.delta} from {', '.join(PROPAGATION_ORDER)}"
        )
        propagation_table = self.query_one("#propagation-table", DataTable)
        propagation_table.add_columns("Step", "From", *nodes)
        propagation_table.add_rows(
            propagation_rows(nodes, PROPAGATION_ORDER, self.delta)
        )

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def main():
    """Run the explorer."""
    app = ExplorerApp()
    app.run()


if __name__ == "__main__":
    main()
