from typing import Callable, Dict, Iterator, List

from .genes import Link, Node
from .propagation import back_prop, forward_prop
from .update import update_weights


class Network:
    """A layered feedforward network that owns all of its nodes and links.

    Nodes and links refer to each other by id only; ``nodes`` and ``links`` are
    the single place those ids resolve to objects.
    """
    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.links: Dict[str, Link] = {}
        self.layers: List[List[str]] = []

    # --- construction ---
    def add_layer(self) -> List[str]:
        layer: List[str] = []
        self.layers.append(layer)
        return layer

    def add_node(self, node: Node, layer_idx: int):
        if node.id in self.nodes:
            raise ValueError(f"Duplicate node id: {node.id}")
        self.nodes[node.id] = node
        self.layers[layer_idx].append(node.id)

    def connect(self, link: Link):
        self.links[link.id] = link
        self.nodes[link.source].outputs.append(link.id)
        self.nodes[link.dest].input_links.append(link.id)

    # --- lookup ---
    def layer(self, idx: int) -> List[Node]:
        return [self.nodes[nid] for nid in self.layers[idx]]

    @property
    def num_layers(self) -> int:
        return len(self.layers)

    @property
    def shape(self) -> List[int]:
        return [len(layer) for layer in self.layers]

    @property
    def output_node(self) -> Node:
        return self.nodes[self.layers[-1][0]]

    def input_links_of(self, node: Node) -> List[Link]:
        return [self.links[lid] for lid in node.input_links]

    def output_links_of(self, node: Node) -> List[Link]:
        return [self.links[lid] for lid in node.outputs]

    def dead_links(self) -> List[Link]:
        return [link for link in self.links.values() if link.is_dead]

    # --- training calls ---
    def forward(self, inputs) -> float:
        return forward_prop(self, inputs)

    def backward(self, target: float, error_func):
        back_prop(self, target, error_func)

    def update(self, learning_rate: float, regularization_rate: float):
        update_weights(self, learning_rate, regularization_rate)

    def __repr__(self):
        return f"Network(shape={self.shape}, links={len(self.links)}, dead={len(self.dead_links())})"


def iter_nodes(network: Network, ignore_inputs: bool = False) -> Iterator[Node]:
    """Yields every node, layer by layer, optionally skipping the input layer."""
    start = 1 if ignore_inputs else 0
    for layer in network.layers[start:]:
        for nid in layer:
            yield network.nodes[nid]


def for_each_node(network: Network, ignore_inputs: bool, visit: Callable[[Node], object]):
    for node in iter_nodes(network, ignore_inputs):
        visit(node)
