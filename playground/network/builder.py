from typing import List, Optional, Sequence

from .genes import Link, Node
from .network import Network


def build_network(
    network_shape: Sequence[int],
    activation,
    output_activation,
    regularization,
    input_ids: List[str],
    init_zero: bool = False,
    rng=None,
) -> Network:
    """Builds a fully connected layered network.

    ``network_shape`` lists the number of nodes per layer, input layer first:
    ``[2, 3, 1]`` means two inputs, one hidden layer of three nodes and a single
    output. Input nodes take their ids from ``input_ids`` (one per input); all
    other nodes are numbered "1", "2", ... in creation order. ``regularization``
    may be None for no weight decay.
    """
    network = Network()
    num_layers = len(network_shape)
    node_idx = 1

    for layer_idx in range(num_layers):
        is_input_layer = layer_idx == 0
        is_output_layer = layer_idx == num_layers - 1
        network.add_layer()

        for i in range(network_shape[layer_idx]):
            if is_input_layer:
                node_id = input_ids[i]
            else:
                node_id = str(node_idx)
                node_idx += 1

            node = Node(node_id, output_activation if is_output_layer else activation, init_zero)
            network.add_node(node, layer_idx)

            # Incoming links ordered by source position
            if not is_input_layer:
                for prev_id in network.layers[layer_idx - 1]:
                    network.connect(Link(prev_id, node_id, regularization, init_zero, rng))

    return network
