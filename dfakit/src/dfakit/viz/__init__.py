"""State-diagram rendering."""

from .plotting import automaton_to_graph, plot_automaton, save_figure, to_dot

__all__ = ["automaton_to_graph", "plot_automaton", "save_figure", "to_dot"]
