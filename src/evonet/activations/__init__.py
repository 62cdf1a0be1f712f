"""
Activations Package

This package provides the activation and cost functions of evonet networks.

Exported:
    ActivationFunction: Enumeration of layer activations (LINEAR, RELU, SIGMOID, SOFTMAX)
    CostFunction:       Enumeration of network costs (MSE, CCE)
    activations:        Dictionary mapping activation names to functions
    activation_codes:   Dictionary mapping activation names to three-letter codes
    Individual activation functions: linear_activation, relu_activation,
                                     sigmoid_activation, softmax_activation
"""

from evonet.activations.activation_functions import (
    ActivationFunction,
    activations,
    activation_codes,
    linear_activation,
    relu_activation,
    sigmoid_activation,
    softmax_activation
)
from evonet.activations.cost_functions import CostFunction

__all__ = [
    'ActivationFunction',
    'CostFunction',
    'activations',
    'activation_codes',
    'linear_activation',
    'relu_activation',
    'sigmoid_activation',
    'softmax_activation'
]
