"""
Neuron Module

This module implements the Neuron class, the elementary computational unit
of an evonet network.

Classes:
    Neuron: A weight vector and a bias, computing a weighted sum of its inputs
"""

import numpy as np

from evonet.genetic import Genetic, uniform

class Neuron(Genetic):
    """
    A single neuron in a Layer.

    The neuron computes the weighted sum of its inputs plus its bias. It does
    not apply the activation function itself: activations such as softmax need
    the weighted sums of the whole layer, so the Layer applies them.

    Public Attributes:
        weights: One weight per input (float64 vector)
        bias:    Value added to the weighted sum
        output:  The last weighted sum computed (0.0 until calculated)

    Public Properties:
        input_size: Number of inputs this neuron accepts

    Public Methods:
        random(size):         Create a neuron with uniformly random parameters
        weighted_sum(inputs): Compute, store and return the weighted sum
        mutate(alpha):        Perturb the weights and the bias
    """

    def __init__(self, weights, bias: float, output: float = 0.0):
        """
        Parameters:
            weights: one weight per input
            bias:    value added to the weighted sum
            output:  initial value of the memoized weighted sum
        """
        self.weights: np.ndarray = np.array(weights, dtype=np.float64)
        self.bias   : float      = float(bias)
        self.output : float      = float(output)

        if self.weights.ndim != 1:
            raise ValueError(f"Expected a 1D weight vector, got an array of shape {self.weights.shape}")

    @classmethod
    def random(cls, size: int) -> "Neuron":
        """
        Create a neuron accepting 'size' inputs, with every weight
        and the bias drawn independently from U[-1, 1).
        """
        return cls(uniform(-1.0, 1.0, size), uniform(-1.0, 1.0))

    @property
    def input_size(self) -> int:
        """The number of inputs this neuron accepts."""
        return len(self.weights)

    def weighted_sum(self, inputs) -> float:
        """
        Calculate the weighted sum of the inputs, plus the bias.
        The result is also saved in 'self.output'.

        Parameters:
            inputs: as many values as this neuron has weights

        Returns:
            the weighted sum
        """
        inputs = np.asarray(inputs, dtype=np.float64)
        if len(inputs) != len(self.weights):
            raise ValueError(f"Expected {len(self.weights)} inputs, got {len(inputs)}")

        self.output = float(np.dot(self.weights, inputs) + self.bias)
        return self.output

    def mutate(self, alpha: float) -> None:
        self.weights += uniform(-1.0, 1.0, len(self.weights)) * alpha
        self.bias    += uniform(-1.0, 1.0) * alpha

    def __eq__(self, other):
        if not isinstance(other, Neuron):
            return NotImplemented
        return self.bias == other.bias and np.array_equal(self.weights, other.weights)

    def __repr__(self):
        return f"Neuron(weights=<{len(self.weights)} values>, bias={self.bias:+.6f}, output={self.output:+.6f})"
