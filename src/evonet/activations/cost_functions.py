"""
Cost Functions Module

This module implements the cost functions used to score the outputs of a
network against the targets of a labeled datapoint.

Classes:
    CostFunction: Closed enumeration of the supported cost functions
"""

import numpy as np
from enum import Enum

from evonet.activations.activation_functions import softmax_activation

def mse_cost(outputs, targets):
    return np.sum((targets - outputs) ** 2) / len(outputs)

def cce_cost(outputs, targets):
    # softmax is applied here, on top of the output activation
    return -np.sum(targets * np.log(softmax_activation(outputs)))

costs = {
    "mse": mse_cost,
    "cce": cce_cost
    }

class CostFunction(Enum):
    """
    The cost functions a Network can be built with.

    MSE: mean squared error between outputs and targets
    CCE: categorical cross entropy of softmax(outputs) against the targets

    Public Methods:
        apply(outputs, targets): Compute the scalar cost
        default():               The cost used when none is specified (MSE)
    """
    MSE = "mse"
    CCE = "cce"

    @classmethod
    def default(cls) -> "CostFunction":
        return cls.MSE

    def apply(self, outputs, targets) -> float:
        """
        Compute the cost of a single output vector.

        Parameters:
            outputs: the vector produced by the network
            targets: the expected vector (one-hot encoding of the label)

        Returns:
            the scalar cost
        """
        outputs = np.asarray(outputs, dtype=np.float64)
        targets = np.asarray(targets, dtype=np.float64)
        if len(outputs) != len(targets):
            raise ValueError(f"Expected {len(targets)} outputs, got {len(outputs)}")

        return float(costs[self.value](outputs, targets))
