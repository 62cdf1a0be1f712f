"""
Network Factory Module

Builds networks whose topology is described by a Config.
"""

from evonet.data import Label
from evonet.network import Network
from evonet.run.config import Config

def create_network(config: Config | None = None) -> Network:
    """
    Create a randomly initialized classification network.

    The network has 'config.input_size' inputs, one layer per entry of
    'config.hidden_layers' (using 'config.hidden_activation'), and an output
    layer with one neuron per Label (using 'config.output_activation').
    With the default Config this is:
        16384 => 64 => 64 => 64 => 2, sigmoid everywhere, mean squared error

    Parameters:
        config: the configuration; None uses the defaults

    Returns:
        the Network, ready to run
    """
    if config is None:
        config = Config()

    builder = Network.new(config.input_size)
    for size in config.hidden_layers:
        builder.add_layer(size, config.hidden_activation)
    builder.add_layer(len(Label), config.output_activation)

    return builder.build(config.cost_function)
