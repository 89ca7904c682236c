"""
Named input features computed from a 2-D point.

Feature names double as the ids of the network's input nodes.
"""
import math
from typing import Callable, Dict, List, Sequence

INPUTS: Dict[str, Callable[[float, float], float]] = {
    "x": lambda x, y: x,
    "y": lambda x, y: y,
    "xSquared": lambda x, y: x * x,
    "ySquared": lambda x, y: y * y,
    "xTimesY": lambda x, y: x * y,
    "sinX": lambda x, y: math.sin(x),
    "cosX": lambda x, y: math.cos(x),
    "sinY": lambda x, y: math.sin(y),
    "cosY": lambda x, y: math.cos(y),
}


def check_features(feature_ids: Sequence[str]):
    for fid in feature_ids:
        if fid not in INPUTS:
            raise ValueError(f"Unknown input feature: {fid}. Must be one of {list(INPUTS.keys())}")


def construct_input(x: float, y: float, feature_ids: Sequence[str]) -> List[float]:
    check_features(feature_ids)
    return [INPUTS[fid](x, y) for fid in feature_ids]
