import asyncio
import logging
import os
import random
from typing import List, Optional, Tuple

import pandas as pd

from .config import Config, network_shape, output_activation_name
from .data import Example
from .features import check_features, construct_input
from .network import Network, build_network, iter_nodes
from .network.functions import SQUARE, get_activation, get_regularization

# -------------------------------
# Logging helpers
# -------------------------------
LOG_FORMAT = "[%(asctime)s][%(name)s][%(levelname)s] %(message)s"


def setup_logging(log_file: Optional[str] = None) -> logging.Logger:
    """Routes the package logger (and every engine module under it) to stderr and ``log_file``."""
    logger = logging.getLogger("playground")
    logger.setLevel(logging.DEBUG)

    # Calling again replaces the handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        dirname = os.path.dirname(log_file)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


class Trainer:
    def __init__(self, config: Config, network: Optional[Network] = None) -> None:
        self.config = config
        seed = getattr(config, "seed", None)
        self.rng = random.Random(seed) if seed is not None else random.Random()
        self.error_func = SQUARE
        self.logger = logging.getLogger(__name__)

        check_features(config.input_features)
        if network is None:
            network = build_network(
                network_shape(config),
                get_activation(config.activation),
                get_activation(output_activation_name(config)),
                get_regularization(config.regularization),
                list(config.input_features),
                init_zero=config.init_zero,
                rng=self.rng,
            )
        self.network = network
        self.iteration = 0

    def one_step(self, examples: List[Example]) -> None:
        """One pass over ``examples``, updating weights after every full mini-batch."""
        self.iteration += 1
        batch_size = self.config.batch_size
        for i, example in enumerate(examples):
            inputs = construct_input(example.x, example.y, self.config.input_features)
            self.network.forward(inputs)
            self.network.backward(example.label, self.error_func)
            if (i + 1) % batch_size == 0:
                self.network.update(self.config.learning_rate, self.config.regularization_rate)

    def get_loss(self, examples: List[Example]) -> float:
        if not examples:
            return 0.0
        loss = 0.0
        for example in examples:
            inputs = construct_input(example.x, example.y, self.config.input_features)
            output = self.network.forward(inputs)
            loss += self.error_func.value(output, example.label)
        return loss / len(examples)

    async def run(
        self,
        train: List[Example],
        test: List[Example],
        epochs: Optional[int] = None
    ) -> Tuple[float, float]:
        epochs = self.config.epochs if epochs is None else epochs
        stats_path = getattr(self.config, "stats_path", None)

        if stats_path:
            self._prepare_stats_file(stats_path)

        self.logger.info(f"Starting training: shape={self.network.shape}, epochs={epochs}")

        train_loss = self.get_loss(train)
        test_loss = self.get_loss(test)
        for _ in range(epochs):
            try:
                self.one_step(train)
            except Exception:
                self.logger.exception(f"Epoch {self.iteration}: training step failed")
                raise

            train_loss = self.get_loss(train)
            test_loss = self.get_loss(test)
            if stats_path:
                self.log_stats(train_loss, test_loss)
            self.logger.info(
                f"Epoch {self.iteration}: train_loss={train_loss:.6f}, test_loss={test_loss:.6f}, "
                f"dead_links={len(self.network.dead_links())}"
            )
            await asyncio.sleep(0)

        self.logger.info("Training complete")
        return train_loss, test_loss

    def _prepare_stats_file(self, stats_path: str) -> None:
        headers = self._stats_headers()
        if os.path.exists(stats_path):
            existing = list(pd.read_csv(stats_path, nrows=0).columns)
            if existing == headers:
                return
            self.logger.warning(f"Stats columns changed from {existing} to {headers}; rewriting {stats_path}")

        dirname = os.path.dirname(stats_path)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        df = pd.DataFrame(columns=headers)
        df.to_csv(stats_path, index=False)

    def _stats_headers(self) -> List[str]:
        headers = ["epoch", "train_loss", "test_loss", "dead_links"]
        if self.config.collect_stats:
            headers += ["mean_abs_weight", "mean_bias"]
        return headers

    def log_stats(self, train_loss: float, test_loss: float) -> None:
        row = {
            "epoch": [self.iteration],
            "train_loss": [train_loss],
            "test_loss": [test_loss],
            "dead_links": [len(self.network.dead_links())],
        }
        if self.config.collect_stats:
            weights = [abs(link.weight) for link in self.network.links.values()]
            biases = [node.bias for node in iter_nodes(self.network, ignore_inputs=True)]
            row["mean_abs_weight"] = [sum(weights) / len(weights) if weights else 0.0]
            row["mean_bias"] = [sum(biases) / len(biases) if biases else 0.0]

        df = pd.DataFrame(row, columns=self._stats_headers())
        df.to_csv(self.config.stats_path, mode="a", header=False, index=False)
