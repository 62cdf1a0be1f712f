"""
Layer Module

This module implements the Layer class: an ordered group of neurons sharing
one input width and one activation function.

Classes:
    Layer: Neurons plus the activation applied to their weighted sums
"""

import numpy as np

from evonet.activations import ActivationFunction
from evonet.genetic import Genetic
from evonet.network.neuron import Neuron

class Layer(Genetic):
    """
    A fully connected layer of neurons.

    Every neuron receives the whole input vector. The layer collects the
    weighted sums of its neurons (in neuron order) into a vector and applies
    its activation function to that vector as a whole.

    Public Attributes:
        neurons:    The neurons of this layer, in output order (a tuple: the width is fixed)
        activation: The activation applied to the vector of weighted sums

    Public Properties:
        input_size: Number of inputs each neuron accepts
        size:       Number of neurons, which is the width of the layer output

    Public Methods:
        random(input_size, size, activation): Create a layer of random neurons
        forward(inputs): Compute the activated output vector
        outputs():       The weighted sums memoized by the last forward pass
        mutate(alpha):   Mutate every neuron
    """

    def __init__(self,
                 input_size: int,
                 neurons   : list[Neuron],
                 activation: ActivationFunction = ActivationFunction.default()):
        """
        Parameters:
            input_size: number of inputs each neuron accepts
            neurons:    the neurons of the layer
            activation: activation applied to the neurons' weighted sums
        """
        for index, neuron in enumerate(neurons):
            if neuron.input_size != input_size:
                raise ValueError(f"Neuron {index} has {neuron.input_size} weights, expected {input_size}")

        self._input_size: int                = input_size
        self.neurons    : tuple[Neuron, ...] = tuple(neurons)
        self.activation : ActivationFunction = activation

    @classmethod
    def random(cls, input_size: int, size: int, activation: ActivationFunction) -> "Layer":
        """
        Create a layer of 'size' randomly initialized neurons,
        each accepting 'input_size' inputs.
        """
        return cls(input_size, [Neuron.random(input_size) for _ in range(size)], activation)

    @property
    def input_size(self) -> int:
        """The number of inputs each neuron of this layer accepts."""
        return self._input_size

    @property
    def size(self) -> int:
        """The number of neurons, i.e. the width of the layer output."""
        return len(self.neurons)

    def get_size(self) -> int:
        return self.size

    def outputs(self) -> np.ndarray:
        """The weighted sums computed by the neurons during the last forward pass."""
        return np.array([neuron.output for neuron in self.neurons], dtype=np.float64)

    def forward(self, inputs) -> np.ndarray:
        """
        Propagate an input vector through the layer.

        Parameters:
            inputs: as many values as the layer 'input_size'

        Returns:
            the activated output vector (as many values as neurons)
        """
        weighted_sums = np.array([neuron.weighted_sum(inputs) for neuron in self.neurons], dtype=np.float64)
        return self.activation.apply(weighted_sums)

    def mutate(self, alpha: float) -> None:
        for neuron in self.neurons:
            neuron.mutate(alpha)

    def __repr__(self):
        return f"Layer(input_size={self._input_size}, size={self.size}, activation={self.activation.name})"
