"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the engine tests.
"""

import random

import pytest

from playground.network import build_network, TANH, LINEAR, SIGMOID


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def deep_network(rng):
    """A [2, 3, 2, 1] tanh network with a linear output and random weights."""
    return build_network([2, 3, 2, 1], TANH, LINEAR, None, ["x", "y"], rng=rng)


@pytest.fixture
def zero_network():
    """The zero-initialised [2, 2, 1] sigmoid/linear network."""
    return build_network([2, 2, 1], SIGMOID, LINEAR, None, ["x", "y"], init_zero=True)


@pytest.fixture
def snapshot():
    """Captures every mutable value of every node and link."""
    return _snapshot


def _snapshot(network):
    nodes = {
        nid: (n.bias, n.total_input, n.output, n.output_der, n.input_der,
              n.acc_input_der, n.num_accumulated_ders)
        for nid, n in network.nodes.items()
    }
    links = {
        lid: (l.weight, l.is_dead, l.error_der, l.acc_error_der, l.num_accumulated_ders)
        for lid, l in network.links.items()
    }
    return nodes, links
