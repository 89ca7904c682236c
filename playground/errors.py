class PlaygroundError(Exception):
    """Base class for errors raised by the playground engine."""


class ShapeMismatchError(PlaygroundError, ValueError):
    """Raised when an input vector does not match the input layer size."""
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The number of inputs must match the number of nodes in the input layer "
            f"(expected {expected}, got {actual})"
        )
