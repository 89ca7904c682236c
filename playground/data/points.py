from typing import List, Optional, Tuple
import os
import random

import pandas as pd

from .example import Example

COLUMNS = ["x", "y", "label"]


def load_examples(path: str) -> List[Example]:
    df = pd.read_csv(path)
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {missing}")
    return [Example(float(row.x), float(row.y), float(row.label)) for row in df.itertuples(index=False)]


def save_examples(examples: List[Example], path: str):
    dirname = os.path.dirname(path)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    df = pd.DataFrame(
        {
            "x": [e.x for e in examples],
            "y": [e.y for e in examples],
            "label": [e.label for e in examples],
        },
        columns=COLUMNS,
    )
    df.to_csv(path, index=False)


def split_examples(
    examples: List[Example],
    perc_train: float = 50,
    rng: Optional[random.Random] = None
) -> Tuple[List[Example], List[Example]]:
    """Shuffles a copy of ``examples`` and splits it into (train, test)."""
    if not 0 <= perc_train <= 100:
        raise ValueError(f"perc_train must be between 0 and 100, got {perc_train}")

    rng = rng if rng is not None else random
    shuffled = list(examples)
    rng.shuffle(shuffled)
    split_index = int(len(shuffled) * perc_train / 100)
    return shuffled[:split_index], shuffled[split_index:]
