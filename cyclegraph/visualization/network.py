"""
Functions for drawing cycle graphs.
"""

import matplotlib.pyplot as plt
import networkx as nx

from ..config import GraphConfig
from ..io.exporters import to_networkx

__all__ = ["plot_cycle_graph"]


def plot_cycle_graph(graph, figsize=None, node_size=None, node_color=None,
                     edge_color=None, with_labels=None, highlight=None,
                     highlight_color='orange', title=None, ax=None, config=None):
    """
    Plot a cycle graph with its vertices on a circle.

    Style arguments left as None are taken from the ``plot`` section of
    ``config``.

    Parameters
    ----------
    graph : CycleGraph
        Graph to plot
    figsize : tuple, optional
        Figure size (width, height) in inches, used when ``ax`` is None
    node_size : int or float, optional
        Size of nodes
    node_color : str, optional
        Color of nodes
    edge_color : str, optional
        Color of edges
    with_labels : bool, optional
        Whether to draw the vertex numbers
    highlight : int, optional
        Vertex whose neighbors are drawn in ``highlight_color``
    highlight_color : str, optional
        Color of the highlighted neighbors
    title : str, optional
        Plot title
    ax : matplotlib.axes.Axes, optional
        Axes to plot on
    config : GraphConfig or dict, optional
        Settings providing the style defaults

    Returns
    -------
    matplotlib.axes.Axes
        The axes containing the plot
    """
    if not isinstance(config, GraphConfig):
        config = GraphConfig(config_dict=config)
    style = config.get_plot_config()

    figsize = style['figsize'] if figsize is None else figsize
    node_size = style['node_size'] if node_size is None else node_size
    node_color = style['node_color'] if node_color is None else node_color
    edge_color = style['edge_color'] if edge_color is None else edge_color
    with_labels = style['with_labels'] if with_labels is None else with_labels

    G = to_networkx(graph)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    colors = node_color
    if highlight is not None:
        marked = {int(u) for u in graph.neighbors(highlight)}
        colors = [highlight_color if v in marked else node_color for v in G.nodes()]

    nx.draw_circular(G, ax=ax, node_size=node_size, node_color=colors,
                     edge_color=edge_color, with_labels=with_labels)

    ax.set_title(title or f"Cycle graph C{len(graph)}")
    ax.set_aspect('equal')

    return ax
