"""State diagrams drawn with networkx on matplotlib axes."""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import networkx as nx

from dfasim.analysis.metrics import automaton_graph
from dfasim.core.types import Automaton, Evaluation

NODE_SIZE = 1200
BASE_COLOR = "#4c72b0"
PATH_COLOR = "#dd8452"


def edge_labels(graph: nx.MultiDiGraph) -> dict[tuple[str, str], str]:
    """Merge parallel edges into one "g1, g2" label per (origin, destination)."""
    labels: dict[tuple[str, str], list[str]] = {}
    for origin, destination, data in graph.edges(data=True):
        labels.setdefault((origin, destination), []).append(data["group"])
    return {pair: ", ".join(groups) for pair, groups in labels.items()}


def plot_automaton(
    automaton: Automaton,
    ax=None,
    highlight: Optional[Evaluation] = None,
    title: Optional[str] = None,
):
    """
    Draw the state diagram of automaton.

    Accepting states get a double ring, the initial state a thicker border.
    When highlight is given, the states and edges it visits are colored.

    Args:
        automaton: Automaton to draw.
        ax: Matplotlib axes object (optional, a new figure is made otherwise).
        highlight: Evaluation whose path is emphasized.
        title: Plot title, defaults to the automaton description.

    Returns:
        The matplotlib axes drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 5))

    # parallel edges are drawn once with a merged label
    labels = edge_labels(automaton_graph(automaton))
    graph = nx.DiGraph()
    graph.add_nodes_from(automaton.states)
    graph.add_edges_from(labels)
    pos = nx.circular_layout(graph)

    visited_states: set[str] = set()
    visited_edges: set[tuple[str, str]] = set()
    if highlight is not None:
        states = highlight.states
        visited_states = set(states)
        visited_edges = set(zip(states, states[1:]))

    node_colors = [PATH_COLOR if s in visited_states else BASE_COLOR for s in graph.nodes]
    widths = [3.0 if s == automaton.initial else 1.0 for s in graph.nodes]
    nx.draw_networkx_nodes(
        graph, pos, ax=ax, node_size=NODE_SIZE, node_color=node_colors,
        edgecolors="black", linewidths=widths,
    )
    accepting = [s for s in graph.nodes if s in automaton.accepting]
    if accepting:
        nx.draw_networkx_nodes(
            graph, pos, nodelist=accepting, ax=ax, node_size=NODE_SIZE * 1.6,
            node_color="none", edgecolors="black", linewidths=1.0,
        )
    nx.draw_networkx_labels(graph, pos, ax=ax, font_color="white")

    pairs = list(labels)
    edge_colors = [PATH_COLOR if pair in visited_edges else "black" for pair in pairs]
    nx.draw_networkx_edges(
        graph, pos, edgelist=pairs, ax=ax, edge_color=edge_colors,
        node_size=NODE_SIZE, arrows=True, connectionstyle="arc3,rad=0.15",
    )
    nx.draw_networkx_edge_labels(graph, pos, edge_labels=labels, ax=ax, label_pos=0.4)

    ax.set_title(title if title is not None else automaton.description)
    ax.set_axis_off()
    return ax


def save_automaton_plot(
    automaton: Automaton,
    path: str,
    highlight: Optional[Evaluation] = None,
) -> None:
    fig, ax = plt.subplots(figsize=(6, 5))
    try:
        plot_automaton(automaton, ax=ax, highlight=highlight)
        fig.savefig(path, bbox_inches="tight")
    finally:
        plt.close(fig)
