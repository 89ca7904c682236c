"""
test_functions.py
~~~~~~~~~~~~~~~~~

Unit tests for the activation, error and regularization tables.
"""

import copy
import math

import pytest

from playground.network import functions as fn


@pytest.mark.unit
class TestActivations:
    """Test built-in activation functions and their derivatives."""

    def test_tanh(self):
        """Test tanh value and derivative."""
        assert fn.TANH.value(0.5) == pytest.approx(math.tanh(0.5))
        assert fn.TANH.derivative(0.5) == pytest.approx(1 - math.tanh(0.5) ** 2)

    def test_relu_derivative_is_zero_at_and_below_zero(self):
        """Test that relu is flat at 0 and below."""
        assert fn.RELU.value(-2.0) == 0.0
        assert fn.RELU.value(3.0) == 3.0
        assert fn.RELU.derivative(0.0) == 0.0
        assert fn.RELU.derivative(-1.0) == 0.0
        assert fn.RELU.derivative(1e-9) == 1.0

    def test_sigmoid(self):
        """Test sigmoid value and derivative around 0."""
        assert fn.SIGMOID.value(0.0) == 0.5
        assert fn.SIGMOID.derivative(0.0) == pytest.approx(0.25)

    def test_sigmoid_handles_large_inputs(self):
        """Test that sigmoid saturates instead of overflowing."""
        assert fn.SIGMOID.value(-1000.0) == pytest.approx(0.0)
        assert fn.SIGMOID.value(1000.0) == pytest.approx(1.0)
        assert fn.SIGMOID.derivative(-1000.0) == pytest.approx(0.0)

    def test_linear(self):
        """Test the identity activation."""
        assert fn.LINEAR.value(-7.25) == -7.25
        assert fn.LINEAR.derivative(123.0) == 1.0


@pytest.mark.unit
class TestErrorAndRegularization:
    """Test the squared error and the L1/L2 penalties."""

    def test_square_error(self):
        """Test squared error value and derivative."""
        assert fn.SQUARE.value(3.0, 1.0) == pytest.approx(2.0)
        assert fn.SQUARE.derivative(3.0, 1.0) == pytest.approx(2.0)
        assert fn.SQUARE.derivative(-1.0, 1.0) == pytest.approx(-2.0)

    def test_l1(self):
        """Test that L1 uses the sign of the weight, 0 at 0."""
        assert fn.L1.value(-0.3) == pytest.approx(0.3)
        assert fn.L1.derivative(-0.3) == -1.0
        assert fn.L1.derivative(0.3) == 1.0
        assert fn.L1.derivative(0.0) == 0.0
        assert fn.L1.prune_on_zero_crossing is True

    def test_l2(self):
        """Test L2 value and derivative."""
        assert fn.L2.value(0.4) == pytest.approx(0.08)
        assert fn.L2.derivative(0.4) == pytest.approx(0.4)
        assert fn.L2.prune_on_zero_crossing is False


@pytest.mark.unit
class TestLookups:
    """Test name tables used by the configuration layer."""

    def test_get_activation(self):
        """Test lookup of each built-in activation by name."""
        for name, activation in fn.ACTIVATIONS.items():
            assert fn.get_activation(name) is activation

    def test_unknown_names_raise(self):
        """Test that unknown names raise ValueError listing valid options."""
        with pytest.raises(ValueError, match="Must be one of"):
            fn.get_activation("softplus")
        with pytest.raises(ValueError):
            fn.get_regularization("L3")
        with pytest.raises(ValueError):
            fn.get_error_function("hinge")

    def test_get_regularization_none(self):
        """Test that both None and "none" mean no regularization."""
        assert fn.get_regularization(None) is None
        assert fn.get_regularization("none") is None
        assert fn.get_regularization("L1") is fn.L1

    def test_name_of(self):
        """Test reverse lookup of built-ins."""
        assert fn.name_of(fn.ACTIVATIONS, fn.SIGMOID) == "sigmoid"
        assert fn.name_of(fn.REGULARIZATIONS, fn.L2) == "L2"
        custom = fn.ActivationFunction("cube", lambda x: x ** 3, lambda x: 3 * x ** 2)
        assert fn.name_of(fn.ACTIVATIONS, custom) is None

    def test_copies_share_the_constant(self):
        """Test that copying a network's functions keeps the built-in instances."""
        assert copy.deepcopy(fn.L1) is fn.L1
        assert copy.copy(fn.TANH) is fn.TANH
