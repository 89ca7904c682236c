from typing import List


class Node:
    """Represents a node (neuron) in the network.

    ``total_input``, ``output`` and the two derivatives are overwritten by every
    forward/backward pass. ``acc_input_der`` and ``num_accumulated_ders`` only
    grow during backprop and are cleared by ``update_weights``.
    """
    def __init__(self, id: str, activation, init_zero: bool = False):
        self.id = id
        self._activation = activation
        self.bias = 0.0 if init_zero else 0.1

        # Link ids, resolved through the owning Network
        self.input_links: List[str] = []
        self.outputs: List[str] = []

        self.total_input = 0.0
        self.output = 0.0
        self.output_der = 0.0
        self.input_der = 0.0

        self.acc_input_der = 0.0
        self.num_accumulated_ders = 0

    @property
    def activation(self):
        return self._activation

    def __repr__(self):
        return f"Node(id={self.id!r}, bias={self.bias:.3f}, output={self.output:.3f})"
