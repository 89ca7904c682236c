from .config import Config
from .errors import PlaygroundError, ShapeMismatchError
from .network import Network, build_network, forward_prop, back_prop, update_weights, iter_nodes, for_each_node
from .trainer import Trainer, setup_logging

__all__ = [
    "Config",
    "PlaygroundError",
    "ShapeMismatchError",
    "Network",
    "build_network",
    "forward_prop",
    "back_prop",
    "update_weights",
    "iter_nodes",
    "for_each_node",
    "Trainer",
    "setup_logging",
]
