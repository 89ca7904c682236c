from .network import Network, iter_nodes, for_each_node
from .builder import build_network
from .propagation import forward_prop, back_prop
from .update import update_weights
from .genes import Node, Link
from .functions import (
    ActivationFunction,
    ErrorFunction,
    RegularizationFunction,
    TANH,
    RELU,
    SIGMOID,
    LINEAR,
    SQUARE,
    L1,
    L2,
)

__all__ = [
    "Network",
    "Node",
    "Link",
    "build_network",
    "forward_prop",
    "back_prop",
    "update_weights",
    "iter_nodes",
    "for_each_node",
    "ActivationFunction",
    "ErrorFunction",
    "RegularizationFunction",
    "TANH",
    "RELU",
    "SIGMOID",
    "LINEAR",
    "SQUARE",
    "L1",
    "L2",
]
