"""Plotting utilities: state diagrams with networkx/matplotlib and Graphviz DOT export."""

from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx

from dfakit.core.automaton import Automaton
from dfakit.core.types import EvaluationResult

INITIAL_COLOR = "orange"
STATE_COLOR = "skyblue"
TRACE_COLOR = "crimson"


def automaton_to_graph(automaton: Automaton) -> nx.DiGraph:
    """
    Directed graph with one node per state and one edge per (source, target).

    Symbols sharing an edge are merged into a single comma-separated label.
    Node attributes: initial, final. Edge attributes: symbols, label.
    """
    G = nx.DiGraph()
    for name in automaton.state_names:
        G.add_node(name, initial=automaton.is_initial(name), final=automaton.is_final(name))

    for (source, symbol), target in automaton.transitions.items():
        if G.has_edge(source, target):
            G[source][target]["symbols"].append(symbol)
        else:
            G.add_edge(source, target, symbols=[symbol])

    for _, _, data in G.edges(data=True):
        data["label"] = ",".join(sorted(data["symbols"]))
    return G


def plot_automaton(
    automaton: Automaton,
    ax=None,
    title: str = "Automaton",
    layout: str = "circular",
    highlight: EvaluationResult | None = None,
):
    """
    Draw the state diagram of automaton.

    Args:
        automaton: Automaton to draw.
        ax: Matplotlib axes object (optional, a new figure is created if None).
        title: Plot title.
        layout: "circular" or "spring" (seeded, reproducible).
        highlight: Evaluation result whose path is drawn in TRACE_COLOR.

    Returns:
        The axes the diagram was drawn on.
    """
    if layout not in {"circular", "spring"}:
        raise ValueError("layout must be 'circular' or 'spring'")

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    G = automaton_to_graph(automaton)
    if layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    else:
        pos = nx.circular_layout(G)

    initial = [n for n, d in G.nodes(data=True) if d["initial"]]
    finals = [n for n, d in G.nodes(data=True) if d["final"]]

    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=STATE_COLOR, node_size=900)
    if initial:
        nx.draw_networkx_nodes(G, pos, nodelist=initial, ax=ax, node_color=INITIAL_COLOR, node_size=900)
    if finals:
        # Accepting states get a thick outline in place of the double circle.
        nx.draw_networkx_nodes(
            G, pos, nodelist=finals, ax=ax, node_color="none",
            node_size=1200, edgecolors="black", linewidths=2.5,
        )
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=11, font_weight="bold")

    trace_edges = set()
    if highlight is not None:
        trace_edges = {(step.source, step.target) for step in highlight.trace}
    edge_colors = [TRACE_COLOR if (u, v) in trace_edges else "gray" for u, v in G.edges()]

    nx.draw_networkx_edges(
        G, pos, ax=ax, edge_color=edge_colors, arrows=True,
        arrowstyle="-|>", arrowsize=18, node_size=1200,
        connectionstyle="arc3,rad=0.1",
    )
    nx.draw_networkx_edge_labels(
        G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "label"), font_size=10,
    )

    ax.set_title(title, fontsize=14, fontweight="bold", pad=15)
    ax.set_axis_off()
    return ax


def save_figure(path: str, dpi: int = 200) -> None:
    plt.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close()


def to_dot(automaton: Automaton) -> str:
    """
    Generate Graphviz DOT representation.

    Returns:
        DOT format string for visualization
    """
    lines = ["digraph Automaton {", "    rankdir=LR;", "    node [shape=circle];"]

    for name in automaton.final_state_names:
        lines.append(f'    "{name}" [shape=doublecircle];')

    initial = automaton.initial_state
    if initial is not None:
        lines.append('    __start__ [shape=none, label=""];')
        lines.append(f'    __start__ -> "{initial.name}";')

    G = automaton_to_graph(automaton)
    for name in automaton.state_names:
        if name not in automaton.final_state_names:
            lines.append(f'    "{name}";')
    for source, target in sorted(G.edges()):
        label = G.edges[source, target]["label"]
        lines.append(f'    "{source}" -> "{target}" [label="{label}"];')

    lines.append("}")
    return "\n".join(lines)
