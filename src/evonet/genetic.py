"""
Genetic Module

This module defines the mutation capability shared by Neuron, Layer and
Network, and the uniform random source every random draw in evonet goes
through (weight initialization, mutation, noise injection).

Randomness comes from numpy's process-wide generator. Call 'seed()' to make
a run reproducible.

Classes:
    Genetic: Abstract capability of perturbing numeric parameters in place
"""

import numpy as np
import random
from abc import ABC, abstractmethod

def uniform(low=-1.0, high=1.0, size=None):
    """
    Draw independent samples uniformly from [low, high).

    Parameters:
        low:  lower bound (scalar or array, broadcast against 'size')
        high: upper bound (scalar or array, broadcast against 'size')
        size: output shape; None draws a single float

    Returns:
        a float if 'size' is None, otherwise a float64 array
    """
    if size is None:
        return float(np.random.uniform(low, high))
    return np.random.uniform(low, high, size)

def seed(value: int | None) -> None:
    """
    Seed the process-wide random generators (numpy and 'random').
    Passing None re-seeds them from fresh entropy.
    """
    np.random.seed(value)
    random.seed(value)

class Genetic(ABC):
    """
    Something whose numeric parameters can be randomly perturbed.

    Implementations delegate to the parts they own, so mutating a Network
    mutates each of its layers, which in turn mutate each of their neurons.

    Public Methods (must be implemented by subclasses):
        mutate(alpha): Perturb every parameter by alpha * U[-1, 1)
    """

    @abstractmethod
    def mutate(self, alpha: float) -> None:
        """
        Perturb every numeric parameter in place.

        Each parameter receives an independent additive perturbation drawn
        uniformly from [-1, 1) and scaled by 'alpha'. The mutation is neither
        idempotent nor reversible; 'alpha' equal to 0 leaves all values unchanged.

        Parameters:
            alpha: the perturbation scale
        """
        pass
