"""
evonet - Feedforward neural networks tuned by evolutionary search.

This package provides a small feedforward network engine built for
non-gradient (evolutionary) parameter search: networks are assembled with a
builder, frozen, evaluated on labeled datapoints, scored with a cost function
and perturbed with a mutation operator.

Main components:
- activations: Activation and cost functions (closed enumerations)
- network:     Neurons, layers, the network builder and the ready network
- data:        Labels, datapoints, datasets and the pixel <=> vector codec
- run:         Configuration, network factory and evolutionary trial

Example:
    >>> from evonet import ActivationFunction, CostFunction, Network
    >>> network = (Network.new(16)
    ...            .add_layer(8, ActivationFunction.RELU)
    ...            .add_layer(2, ActivationFunction.SIGMOID)
    ...            .build(CostFunction.MSE))
    >>> label, outputs = network.run(datapoint)
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evonet.activations import ActivationFunction, CostFunction
from evonet.genetic import Genetic, seed
from evonet.data import Label, Datapoint, Dataset
from evonet.network import Neuron, Layer, Network, NetworkBuilder
from evonet.run import Config, Trial, create_network

__all__ = [
    "ActivationFunction",
    "CostFunction",
    "Genetic",
    "seed",
    "Label",
    "Datapoint",
    "Dataset",
    "Neuron",
    "Layer",
    "Network",
    "NetworkBuilder",
    "Config",
    "Trial",
    "create_network",
]
