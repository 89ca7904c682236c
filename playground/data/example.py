from dataclasses import dataclass


@dataclass
class Example:
    x: float
    y: float
    label: float
