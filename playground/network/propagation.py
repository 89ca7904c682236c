"""
Forward and backward passes over a layered Network.

Both passes mutate node and link state in place. ``back_prop`` reads the
``total_input``/``output`` values cached by the preceding ``forward_prop`` on
the same example, so the two must be called in that order.
"""
from typing import Sequence

from ..errors import ShapeMismatchError


def _update_output(network, node) -> float:
    node.total_input = node.bias
    for lid in node.input_links:
        link = network.links[lid]
        if link.is_dead:
            continue
        node.total_input += link.weight * network.nodes[link.source].output
    node.output = node.activation.value(node.total_input)
    return node.output


def forward_prop(network, inputs: Sequence[float]) -> float:
    """Runs ``inputs`` through the network and returns the output node's value."""
    input_layer = network.layers[0]
    if len(inputs) != len(input_layer):
        raise ShapeMismatchError(len(input_layer), len(inputs))

    for nid, value in zip(input_layer, inputs):
        network.nodes[nid].output = value

    for layer in network.layers[1:]:
        for nid in layer:
            _update_output(network, network.nodes[nid])

    return network.output_node.output


def back_prop(network, target: float, error_func):
    """Computes error derivatives for ``target`` and adds them to the accumulators."""
    nodes, links = network.nodes, network.links

    output_node = network.output_node
    output_node.output_der = error_func.derivative(output_node.output, target)

    for layer_idx in range(len(network.layers) - 1, 0, -1):
        current_layer = [nodes[nid] for nid in network.layers[layer_idx]]

        # dE/d(total input), which is also dE/d(bias)
        for node in current_layer:
            node.input_der = node.output_der * node.activation.derivative(node.total_input)
            node.acc_input_der += node.input_der
            node.num_accumulated_ders += 1

        # dE/d(weight) for every live incoming link
        for node in current_layer:
            for lid in node.input_links:
                link = links[lid]
                if link.is_dead:
                    continue
                link.error_der = node.input_der * nodes[link.source].output
                link.acc_error_der += link.error_der
                link.num_accumulated_ders += 1

        if layer_idx == 1:
            continue

        for nid in network.layers[layer_idx - 1]:
            node = nodes[nid]
            node.output_der = 0.0
            for lid in node.outputs:
                link = links[lid]
                node.output_der += link.weight * nodes[link.dest].input_der
