"""
test_data.py
~~~~~~~~~~~~

Unit tests for loading and splitting labeled points.
"""

import random

import pandas as pd
import pytest

from playground.data import Example, load_examples, save_examples, split_examples


@pytest.fixture
def points():
    return [Example(float(i), float(-i), 1.0 if i % 2 else -1.0) for i in range(10)]


@pytest.mark.unit
class TestPoints:
    """Test CSV persistence and train/test splitting."""

    def test_save_then_load(self, points, tmp_path):
        """Test that saved points load back unchanged."""
        path = str(tmp_path / "data" / "points.csv")
        save_examples(points, path)
        assert load_examples(path) == points

    def test_missing_column(self, tmp_path):
        """Test that a CSV without labels is rejected."""
        path = tmp_path / "bad.csv"
        pd.DataFrame({"x": [1.0], "y": [2.0]}).to_csv(path, index=False)
        with pytest.raises(ValueError, match="label"):
            load_examples(str(path))

    def test_split_sizes(self, points):
        """Test the split proportions and that nothing is lost."""
        train, test = split_examples(points, 70, random.Random(3))
        assert len(train) == 7
        assert len(test) == 3
        assert sorted(e.x for e in train + test) == sorted(e.x for e in points)

    def test_split_leaves_input_alone(self, points):
        """Test that splitting shuffles a copy."""
        original = list(points)
        split_examples(points, 50, random.Random(3))
        assert points == original

    def test_split_out_of_range(self, points):
        """Test that percentages outside [0, 100] raise."""
        with pytest.raises(ValueError):
            split_examples(points, 120)
