"""
Network Module

This module implements the two states of an evonet feedforward network:

    NetworkBuilder (building): layers can be added, nothing can be evaluated
    Network        (ready):    the topology is frozen, the network can be
                               evaluated, scored, mutated and saved

The only transition is NetworkBuilder.build(), which moves the layers into a
new Network and retires the builder. A Network never goes back to building,
and exposes no operation that adds or removes layers.

Typical use:
    >>> network = (Network.new(64 * 64 * 4)
    ...            .add_layer(64, ActivationFunction.SIGMOID)
    ...            .add_layer(2,  ActivationFunction.SIGMOID)
    ...            .build(CostFunction.MSE))
    >>> label, outputs = network.run(datapoint)

Classes:
    NetworkBuilder: A network under construction
    Network:        A network ready to run
"""

import copy
import graphviz  # type: ignore
import json
import numpy as np
from pathlib import Path
from typing  import Any

from evonet.activations import ActivationFunction, CostFunction
from evonet.data import Datapoint, Dataset, Label
from evonet.genetic import Genetic
from evonet.network.layer import Layer
from evonet.network.neuron import Neuron

class NetworkBuilder:
    """
    A feedforward network under construction.

    Each added layer takes as input the output of the previous layer (or the
    network inputs, for the first layer), so adjacent layers always agree on
    their widths.

    Public Properties:
        input_size:  Number of network inputs
        output_size: Width of the last layer added (input_size if there is none)
        layers:      The layers added so far (read-only view)

    Public Methods:
        add_layer(size, activation): Append a layer of randomly initialized neurons
        build(cost_function):        Freeze the topology and return a Network
    """

    def __init__(self, input_size: int):
        """
        Parameters:
            input_size: the number of network inputs
        """
        if input_size < 1:
            raise ValueError(f"A network needs at least one input, got {input_size}")

        self._input_size: int         = input_size
        self._layers    : list[Layer] = []
        self._built     : bool        = False

    @property
    def input_size(self) -> int:
        return self._input_size

    @property
    def output_size(self) -> int:
        return self._layers[-1].size if self._layers else self._input_size

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def add_layer(self, size: int, activation: ActivationFunction = ActivationFunction.default()) -> "NetworkBuilder":
        """
        Append a layer of 'size' randomly initialized neurons.

        Parameters:
            size:       the number of neurons in the new layer
            activation: the activation function of the new layer

        Returns:
            this builder, so that calls can be chained
        """
        self._check_not_built()
        if size < 1:
            raise ValueError(f"A layer needs at least one neuron, got {size}")

        self._layers.append(Layer.random(self.output_size, size, activation))
        return self

    def build(self, cost_function: CostFunction = CostFunction.default()) -> "Network":
        """
        Freeze the topology.

        The layers are handed over to the returned Network; this builder cannot
        be used afterwards.

        Parameters:
            cost_function: the cost function used by Network.cost()

        Returns:
            the Network, ready to run
        """
        self._check_not_built()
        if not self._layers:
            raise ValueError("Cannot build a network without layers")

        layers, self._layers = self._layers, []
        self._built = True
        return Network(self._input_size, layers, cost_function)

    def _check_not_built(self):
        if self._built:
            raise RuntimeError("This builder has already been built into a Network")

    def __repr__(self):
        return f"NetworkBuilder(input_size={self._input_size}, layers={self._layers})"

class Network(Genetic):
    """
    A feedforward network with a frozen topology.

    Evaluating the network forwards the input vector through every layer in
    order. As a side effect every neuron keeps its last weighted sum in its
    'output' attribute, which can be inspected after a run.

    Public Properties:
        input_size:        Number of network inputs
        output_size:       Width of the last layer
        layers:            The layers, in evaluation order (a tuple)
        cost_function:     The cost function used by cost()
        number_neurons:    Total number of neurons
        number_parameters: Total number of weights and biases

    Public Methods:
        new(input_size):       Start building a network
        forward(inputs):       Compute the output vector for an input vector
        run(datapoint):        Compute the label and output vector for a datapoint
        cost(dataset):         Average cost over a dataset
        mutate(alpha):         Mutate every layer
        clone():               Create an independent deep copy
        to_dict(), from_dict(data): Convert to/from plain Python containers
        serialize(path), deserialize(path): Save/load as a JSON file
        visualize(view):       Draw the layer topology with Graphviz
    """

    def __init__(self, input_size: int, layers: list[Layer], cost_function: CostFunction = CostFunction.default()):
        """
        Use Network.new(...).add_layer(...).build(...) to create a new network;
        this constructor only checks that the given layers fit together.

        Parameters:
            input_size:    the number of network inputs
            layers:        the layers, in evaluation order
            cost_function: the cost function used by cost()
        """
        if not layers:
            raise ValueError("A network needs at least one layer")

        width = input_size
        for index, layer in enumerate(layers):
            if layer.input_size != width:
                raise ValueError(f"Layer {index} expects {layer.input_size} inputs, but receives {width}")
            width = layer.size

        self._input_size   : int                = input_size
        self._layers       : tuple[Layer, ...]  = tuple(layers)
        self._cost_function: CostFunction       = cost_function

    @staticmethod
    def new(input_size: int) -> NetworkBuilder:
        """Start building a network with 'input_size' inputs."""
        return NetworkBuilder(input_size)

    @property
    def input_size(self) -> int:
        return self._input_size

    @property
    def output_size(self) -> int:
        return self._layers[-1].size

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def cost_function(self) -> CostFunction:
        return self._cost_function

    @property
    def number_neurons(self) -> int:
        """Total number of neurons, across all layers."""
        return sum(layer.size for layer in self._layers)

    @property
    def number_parameters(self) -> int:
        """Total number of weights and biases, across all layers."""
        return sum(layer.size * (layer.input_size + 1) for layer in self._layers)

    def forward(self, inputs) -> np.ndarray:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: the network inputs (as many as 'input_size')

        Returns:
            the output vector of the last layer
        """
        values = np.asarray(inputs, dtype=np.float64)
        if values.ndim != 1 or len(values) != self._input_size:
            raise ValueError(f"Expected {self._input_size} inputs, got an array of shape {values.shape}")

        for layer in self._layers:
            values = layer.forward(values)
        return values

    def run(self, datapoint: Datapoint) -> tuple[Label, np.ndarray]:
        """
        Classify a datapoint.

        Parameters:
            datapoint: the datapoint to classify; its label is ignored

        Returns:
            the label derived from the output vector, and the output vector itself
        """
        outputs = self.forward(datapoint.inputs)
        return Label.from_outputs(outputs), outputs

    def cost(self, dataset: Dataset) -> float:
        """
        Average cost of the network over a dataset.

        Each datapoint is run through the network and its outputs are scored
        against the one-hot encoding of the datapoint label.

        Parameters:
            dataset: the labeled datapoints

        Returns:
            the mean cost per datapoint
        """
        if len(dataset) == 0:
            raise ValueError("Cannot compute the cost over an empty dataset")

        total = 0.0
        for datapoint in dataset:
            _, outputs = self.run(datapoint)
            total += self._cost_function.apply(outputs, datapoint.targets())

        return total / len(dataset)

    def mutate(self, alpha: float) -> None:
        for layer in self._layers:
            layer.mutate(alpha)

    def clone(self) -> "Network":
        """Create an independent copy of this network (all neurons copied)."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Describe the network with plain Python containers (suitable for JSON).
        Memoized neuron outputs are not included.
        """
        return {
            "input_size"   : self._input_size,
            "cost_function": self._cost_function.value,
            "layers"       : [
                {
                    "activation": layer.activation.value,
                    "neurons"   : [{"weights": neuron.weights.tolist(), "bias": neuron.bias}
                                   for neuron in layer.neurons]
                }
                for layer in self._layers
            ]
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Network":
        """
        Rebuild a network from the output of 'to_dict'.

        Raises ValueError if the description is incomplete, uses an unknown
        activation or cost tag, or has layers whose widths do not fit together.
        """
        try:
            input_size    = int(data["input_size"])
            cost_function = CostFunction(data["cost_function"])

            layers = []
            width  = input_size
            for layer_data in data["layers"]:
                activation = ActivationFunction(layer_data["activation"])
                neurons    = [Neuron(n["weights"], n["bias"]) for n in layer_data["neurons"]]
                layers.append(Layer(width, neurons, activation))
                width = len(neurons)

        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed network description: {exc!r}") from exc

        return cls(input_size, layers, cost_function)

    def serialize(self, path: str | Path) -> None:
        """
        Save the network to a JSON file.
        Floats are written with their shortest exact representation, so
        'deserialize' reproduces every weight and bias bit for bit.
        """
        Path(path).write_text(json.dumps(self.to_dict()))

    @classmethod
    def deserialize(cls, path: str | Path) -> "Network":
        """
        Load a network saved with 'serialize'.

        Raises FileNotFoundError if the file does not exist, and ValueError
        if its content is not a valid network description.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Network file '{path}' not found")

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ValueError(f"Network file '{path}' is not valid JSON: {exc}") from exc

        return cls.from_dict(data)

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the layer topology using Graphviz.

        Networks built for images have thousands of inputs, so each layer is
        drawn as a single node labeled with its width and activation code, and
        each edge is labeled with the number of parameters (weights and biases)
        of the layer it enters.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout

        # Define node colors and shapes
        node_attrs = {
            'INPUT':  {'fillcolor': 'lightgrey', 'color': 'black', 'style': 'filled', 'shape': 'box'},
            'HIDDEN': {'fillcolor': 'lightblue', 'color': 'black', 'style': 'filled', 'shape': 'box'},
            'OUTPUT': {'fillcolor': 'white'    , 'color': 'black', 'style': 'filled', 'shape': 'box'}
        }

        dot.node('input', label=f"inputs\\n{self._input_size}", **node_attrs['INPUT'])

        previous = 'input'
        last     = len(self._layers) - 1
        for index, layer in enumerate(self._layers):
            name = f"layer{index}"
            kind = 'OUTPUT' if index == last else 'HIDDEN'
            dot.node(name, label=f"{layer.size}\\n{layer.activation.code}", **node_attrs[kind])
            dot.edge(previous, name, label=f"{layer.size * (layer.input_size + 1)}")
            previous = name

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        layers_str = "\n".join(f"  {layer}" for layer in self._layers)
        return f"Network(input_size={self._input_size}, cost_function={self._cost_function.name})\n{layers_str}"

    def __repr__(self):
        return (f"Network(input_size={self._input_size}, layers={list(self._layers)}, "
                f"cost_function=CostFunction.{self._cost_function.name})")
