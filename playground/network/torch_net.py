import copy
import torch
import torch.nn as nn
from typing import Dict, List

from .network import Network, iter_nodes

_TORCH_ACTIVATIONS = {
    "tanh": torch.tanh,
    "relu": torch.relu,
    "sigmoid": torch.sigmoid,
    "linear": lambda x: x,
}


class TorchNet(nn.Module):
    def __init__(self, network: Network):
        """Mirror a Network as a torch module with one parameter per link and per bias."""
        super().__init__()
        self.network = network

        self.links = list(network.links.values())
        self.sorted_nodes = list(iter_nodes(network))
        self.node_index = {n.id: idx for idx, n in enumerate(self.sorted_nodes)}
        link_index = {link.id: idx for idx, link in enumerate(self.links)}

        # Per-node activation, matched by name
        self.activation_fns = {}
        for node in iter_nodes(network, ignore_inputs=True):
            name = getattr(node.activation, "name", None)
            if name not in _TORCH_ACTIVATIONS:
                raise ValueError(f"Unknown activation function: {name}. "
                                 f"Must be one of {list(_TORCH_ACTIVATIONS.keys())}")
            self.activation_fns[node.id] = _TORCH_ACTIVATIONS[name]

        # Register weights and biases
        self.weights = nn.Parameter(torch.tensor([l.weight for l in self.links], dtype=torch.float64))
        self.biases = nn.Parameter(torch.tensor([n.bias for n in self.sorted_nodes], dtype=torch.float64))

        # Dead links stay at 0
        self.register_buffer(
            "alive", torch.tensor([0.0 if l.is_dead else 1.0 for l in self.links], dtype=torch.float64)
        )

        # Incoming edges per node, in the network's link order
        self.incoming: Dict[str, List[int]] = {
            node.id: [link_index[lid] for lid in node.input_links] for node in self.sorted_nodes
        }
        self.input_ids = list(network.layers[0])
        self.output_id = network.output_node.id

    def forward(self, x):
        x = torch.as_tensor(x, dtype=torch.float64)
        values = {nid: x[:, i] for i, nid in enumerate(self.input_ids)}

        for node in self.sorted_nodes[len(self.input_ids):]:
            idx = self.incoming[node.id]
            total = self.biases[self.node_index[node.id]].expand(x.size(0))
            if idx:
                sources = torch.stack([values[self.links[i].source] for i in idx], dim=1)
                weights = self.weights[idx] * self.alive[idx]
                total = total + (sources * weights).sum(dim=1)
            values[node.id] = self.activation_fns[node.id](total)

        return values[self.output_id].unsqueeze(1)

    def link_grads(self) -> Dict[str, float]:
        """Gradient of each link's weight after ``backward`` on this module's output."""
        grads = self.weights.grad
        return {link.id: grads[i].item() for i, link in enumerate(self.links)}

    def bias_grads(self) -> Dict[str, float]:
        grads = self.biases.grad
        return {n.id: grads[i].item() for i, n in enumerate(self.sorted_nodes)}

    def export_network(self) -> Network:
        """
        Return a new network with the module's weights and biases written back.
        """
        new_network = copy.deepcopy(self.network)

        for i, link in enumerate(self.links):
            target = new_network.links[link.id]
            if not target.is_dead:
                target.weight = self.weights[i].detach().item()

        for node in iter_nodes(new_network, ignore_inputs=True):
            node.bias = self.biases[self.node_index[node.id]].detach().item()

        return new_network
