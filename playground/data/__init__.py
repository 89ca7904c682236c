from .example import Example
from .points import load_examples, save_examples, split_examples

__all__ = ["Example", "load_examples", "save_examples", "split_examples"]
