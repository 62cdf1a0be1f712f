"""
Activation Functions Module

This module implements the activation functions applied by a Layer to the
vector of weighted sums computed by its neurons.

Every function maps a whole vector to a vector of the same length. Softmax is
the reason the functions operate on vectors rather than on single values: its
output for one neuron depends on the weighted sums of all the neurons in the
layer.

Classes:
    ActivationFunction: Closed enumeration of the supported activations
"""

import numpy as np
from enum import Enum

def linear_activation(z):
    return np.array(z, dtype=np.float64)

def relu_activation(z):
    return np.maximum(0.0, z)

def sigmoid_activation(z):
    return 1.0 / (1.0 + np.exp(-np.asarray(z, dtype=np.float64)))

def softmax_activation(z):
    # no max-subtraction: large inputs overflow to inf/nan
    exponentials = np.exp(z)
    return exponentials / np.sum(exponentials)

activations = {
    "linear" : linear_activation,
    "relu"   : relu_activation,
    "sigmoid": sigmoid_activation,
    "softmax": softmax_activation
    }

# three-letter codes, used when drawing networks
activation_codes = {
    "linear" : "LIN",
    "relu"   : "RLU",
    "sigmoid": "SIG",
    "softmax": "SMX"
    }

class ActivationFunction(Enum):
    """
    The activation functions a Layer can apply.

    The set of members is fixed: networks are serialized by the member value,
    so adding a member is a format change, not a plugin registration.

    Public Methods:
        apply(values): Apply the activation to a vector of weighted sums
        default():     The activation used when none is specified (LINEAR)
    """
    LINEAR  = "linear"
    RELU    = "relu"
    SIGMOID = "sigmoid"
    SOFTMAX = "softmax"

    @classmethod
    def default(cls) -> "ActivationFunction":
        return cls.LINEAR

    @property
    def code(self) -> str:
        """Three-letter code identifying the activation."""
        return activation_codes[self.value]

    def apply(self, values) -> np.ndarray:
        """
        Apply the activation to a vector of weighted sums.

        Parameters:
            values: the weighted sums computed by the neurons of a layer

        Returns:
            a new float64 vector with as many entries as 'values'
        """
        z = np.asarray(values, dtype=np.float64)
        if z.ndim != 1:
            raise ValueError(f"Expected a 1D vector, got an array of shape {z.shape}")
        return activations[self.value](z)
