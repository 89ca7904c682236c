import random


class Link:
    """Represents a weighted connection between nodes in adjacent layers."""
    def __init__(self, source: str, dest: str, regularization=None, init_zero: bool = False, rng=None):
        self.id = f"{source}-{dest}"
        self.source = source
        self.dest = dest
        self.regularization = regularization
        rng = rng if rng is not None else random
        self.weight = 0.0 if init_zero else rng.random() - 0.5
        self._is_dead = False

        self.error_der = 0.0
        self.acc_error_der = 0.0
        self.num_accumulated_ders = 0

    @property
    def is_dead(self) -> bool:
        return self._is_dead

    def prune(self):
        """Pins the weight to 0 and takes the link out of training for good."""
        self.weight = 0.0
        self._is_dead = True

    def __repr__(self):
        status = "D" if self._is_dead else "A"
        return f"Link({self.source}->{self.dest}, w={self.weight:.2f}, {status})"
