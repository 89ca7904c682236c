"""
Activation, error and regularization functions, each paired with its derivative.

The built-ins are immutable module constants. Any object exposing ``value`` and
``derivative`` can be passed to the engine in their place.
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional


class _Constant:
    # Immutable; copies share the instance
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


@dataclass(frozen=True)
class ActivationFunction(_Constant):
    """Maps a node's total input to its output."""
    name: str
    value: Callable[[float], float]
    derivative: Callable[[float], float]


@dataclass(frozen=True)
class ErrorFunction(_Constant):
    """Error of a single output against its target."""
    name: str
    value: Callable[[float, float], float]
    derivative: Callable[[float, float], float]


@dataclass(frozen=True)
class RegularizationFunction(_Constant):
    """Penalty on a weight's magnitude.

    When ``prune_on_zero_crossing`` is set, a decay step that flips the sign of
    a weight kills the link instead (the L1 behaviour).
    """
    name: str
    value: Callable[[float], float]
    derivative: Callable[[float], float]
    prune_on_zero_crossing: bool = False


def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1 / (1 + math.exp(-x))
    e = math.exp(x)
    return e / (1 + e)


def _tanh_der(x: float) -> float:
    output = math.tanh(x)
    return 1 - output * output


def _sigmoid_der(x: float) -> float:
    output = _sigmoid(x)
    return output * (1 - output)


def _sign(w: float) -> float:
    if w < 0:
        return -1.0
    if w > 0:
        return 1.0
    return 0.0


# =====================
# Activations
# =====================
TANH = ActivationFunction("tanh", math.tanh, _tanh_der)
RELU = ActivationFunction("relu", lambda x: max(0.0, x), lambda x: 0.0 if x <= 0 else 1.0)
SIGMOID = ActivationFunction("sigmoid", _sigmoid, _sigmoid_der)
LINEAR = ActivationFunction("linear", lambda x: x, lambda x: 1.0)

# =====================
# Errors
# =====================
SQUARE = ErrorFunction(
    "square",
    lambda output, target: 0.5 * (output - target) ** 2,
    lambda output, target: output - target,
)

# =====================
# Regularization
# =====================
L1 = RegularizationFunction("L1", abs, _sign, prune_on_zero_crossing=True)
L2 = RegularizationFunction("L2", lambda w: 0.5 * w * w, lambda w: w)


ACTIVATIONS: Dict[str, ActivationFunction] = {
    "relu": RELU,
    "tanh": TANH,
    "sigmoid": SIGMOID,
    "linear": LINEAR,
}

REGULARIZATIONS: Dict[str, Optional[RegularizationFunction]] = {
    "none": None,
    "L1": L1,
    "L2": L2,
}

ERRORS: Dict[str, ErrorFunction] = {
    "square": SQUARE,
}


def _lookup(table: Dict, name: str, kind: str):
    if name not in table:
        raise ValueError(f"Unknown {kind}: {name}. Must be one of {list(table.keys())}")
    return table[name]


def get_activation(name: str) -> ActivationFunction:
    return _lookup(ACTIVATIONS, name, "activation function")


def get_regularization(name: Optional[str]) -> Optional[RegularizationFunction]:
    if name is None:
        return None
    return _lookup(REGULARIZATIONS, name, "regularization")


def get_error_function(name: str) -> ErrorFunction:
    return _lookup(ERRORS, name, "error function")


def name_of(table: Dict, value) -> Optional[str]:
    """Reverse lookup of a function table; None when the value is not listed."""
    for key, candidate in table.items():
        if candidate is value:
            return key
    return None
