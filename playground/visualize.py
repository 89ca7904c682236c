from typing import Dict, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from .features import construct_input
from .network import Network, for_each_node


def to_networkx(network: Network) -> nx.DiGraph:
    """Snapshot of the network's current values as a directed graph."""
    G = nx.DiGraph()

    for layer_idx, layer in enumerate(network.layers):
        for nid in layer:
            node = network.nodes[nid]
            G.add_node(nid, layer=layer_idx, bias=node.bias, output=node.output)

    for link in network.links.values():
        G.add_edge(link.source, link.dest, id=link.id, weight=link.weight, is_dead=link.is_dead)

    return G


def visualize_network(network: Network, ax=None):
    """
    Visualize a Network layer by layer.
    Inputs = green, hidden = blue, output = red.
    Live links = solid, dead links = dashed, width grows with |weight|.
    """
    G = to_networkx(network)
    last_layer = network.num_layers - 1

    # Layout: one column per layer
    pos = {}
    for layer_idx, layer in enumerate(network.layers):
        for i, nid in enumerate(layer):
            pos[nid] = (layer_idx, -i)

    node_colors = []
    for nid in G.nodes():
        layer = G.nodes[nid]["layer"]
        if layer == 0:
            node_colors.append("lightgreen")
        elif layer == last_layer:
            node_colors.append("salmon")
        else:
            node_colors.append("lightblue")
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=800, ax=ax)

    styles = []
    widths = []
    for u, v, data in G.edges(data=True):
        styles.append("dashed" if data["is_dead"] else "solid")
        widths.append(0.5 + 2.0 * min(abs(data["weight"]), 2.0))
    nx.draw_networkx_edges(G, pos, edgelist=list(G.edges()), edge_color="black", style=styles, width=widths, ax=ax)

    labels = {n: str(n) for n in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, ax=ax)

    if ax is None:
        plt.show()


def node_output_grid(
    network: Network,
    feature_ids: Sequence[str],
    density: int = 50,
    domain: Tuple[float, float] = (-6.0, 6.0),
) -> Dict[str, np.ndarray]:
    """Output of every node over a ``density`` x ``density`` grid of points.

    Arrays are indexed ``[row, col]`` with rows following y and columns
    following x, both spanning ``domain``.
    """
    xs = np.linspace(domain[0], domain[1], density)
    ys = np.linspace(domain[0], domain[1], density)
    grid = {nid: np.zeros((density, density)) for nid in network.nodes}

    for row, y in enumerate(ys):
        for col, x in enumerate(xs):
            network.forward(construct_input(float(x), float(y), feature_ids))

            def record(node):
                grid[node.id][row, col] = node.output

            for_each_node(network, False, record)

    return grid
