"""
Network Package

This package provides the feedforward network engine.

Exported:
    Neuron:         Weight vector and bias computing a weighted sum
    Layer:          Neurons sharing one input width and one activation
    NetworkBuilder: A network under construction (layers can be added)
    Network:        A network ready to run (frozen topology)
"""

from evonet.network.neuron  import Neuron
from evonet.network.layer   import Layer
from evonet.network.network import Network, NetworkBuilder

__all__ = [
    'Neuron',
    'Layer',
    'NetworkBuilder',
    'Network'
]
