import configparser
import os
from evonet.activations import ActivationFunction, CostFunction

class Config:

    @staticmethod
    def _parse_layer_sizes(raw_sizes):
        """
        Parse hidden_layers from string to list.

        Parameters:
            raw_sizes: Either a comma-separated list of integers, "none"/"" for
                       no hidden layer, or already a list

        Returns:
            List of layer sizes
        """
        # If already a list, return as-is
        if isinstance(raw_sizes, list):
            sizes = raw_sizes
        elif raw_sizes is None or raw_sizes.strip() == '':
            sizes = []
        else:
            try:
                sizes = [int(size.strip()) for size in raw_sizes.split(',')]
            except ValueError as exc:
                raise ValueError(f"Invalid layer size in hidden_layers '{raw_sizes}'") from exc

        for size in sizes:
            if size < 1:
                raise ValueError(f"Invalid layer size {size} in hidden_layers")
        return sizes

    @staticmethod
    def _parse_activation(raw_name):
        if isinstance(raw_name, ActivationFunction):
            return raw_name
        try:
            return ActivationFunction(raw_name.strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in ActivationFunction)
            raise ValueError(f"Invalid activation function '{raw_name}', expected one of: {valid}") from None

    @staticmethod
    def _parse_cost(raw_name):
        if isinstance(raw_name, CostFunction):
            return raw_name
        try:
            return CostFunction(raw_name.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in CostFunction)
            raise ValueError(f"Invalid cost function '{raw_name}', expected one of: {valid}") from None

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding default values.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.settings_path = './config/network.json'
            self.test_path     = None
            self.dataset_path  = None

            # 64x64 RGBA images => 3 hidden layers of 64 => REAL/FAKE
            self.input_size        = 64 * 64 * 4
            self.hidden_layers     = [64, 64, 64]
            self.hidden_activation = ActivationFunction.SIGMOID
            self.output_activation = ActivationFunction.SIGMOID
            self.cost_function     = CostFunction.MSE

            self.population_size        = 10
            self.mutation_alpha         = 0.1
            self.max_number_generations = 100
            self.cost_threshold         = None
            self.noise_alpha            = 0.0

            self.seed = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        try:
            parser.read(config_file)
        except configparser.Error as exc:
            raise ValueError(f"Configuration file '{config_file}' is malformed: {exc}") from exc

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError) as exc:
                if default is not _NO_DEFAULT:
                    return default
                raise ValueError(f"Configuration file '{config_file}' is missing [{section}] {key}") from exc

        # [PATHS]

        # The JSON file holding the saved network.
        self.settings_path = get_value('PATHS', 'settings_path', str)

        # The pixel buffer ('.npy') classified by 'scripts/classify.py'.
        self.test_path = get_value('PATHS', 'test_path', str, default=None)

        # The dataset directory (with 'real/' and 'fake/' sub-directories)
        # used by 'scripts/evolve.py'. Use "None" if not applicable.
        self.dataset_path = get_value('PATHS', 'dataset_path', str, default=None)

        # [NETWORK]

        # The number of network inputs: width * height * 4 for RGBA images.
        self.input_size = get_value('NETWORK', 'input_size', int)

        # Comma-separated sizes of the hidden layers, in order.
        # The output layer always has one neuron per label.
        self.hidden_layers = get_value('NETWORK', 'hidden_layers', str)

        # Activation functions of the hidden layers and of the output layer.
        # Allowed values: linear, relu, sigmoid, softmax
        self.hidden_activation = get_value('NETWORK', 'hidden_activation', str, default='sigmoid')
        self.output_activation = get_value('NETWORK', 'output_activation', str, default='sigmoid')

        # The cost function used to score the network over a dataset.
        # Allowed values: mse (mean squared error), cce (categorical cross entropy)
        self.cost_function = get_value('NETWORK', 'cost_function', str, default='mse')

        # [EVOLUTION]

        # The number of mutated candidates spawned from the champion each generation.
        self.population_size = get_value('EVOLUTION', 'population_size', int, default=10)

        # The scale of the uniform perturbation applied to each weight and bias.
        self.mutation_alpha = get_value('EVOLUTION', 'mutation_alpha', float, default=0.1)

        # The number of generations after which to stop the run.
        self.max_number_generations = get_value('EVOLUTION', 'max_number_generations', int, default=100)

        # The cost at or below which the run stops early.
        # Use "None" to always run for 'max_number_generations'.
        self.cost_threshold = get_value('EVOLUTION', 'cost_threshold', float, default=None)

        # The scale of the noise used to augment the dataset with one noisy copy
        # of each datapoint before the run starts. Set to 0.0 to disable.
        self.noise_alpha = get_value('EVOLUTION', 'noise_alpha', float, default=0.0)

        # [RANDOM]

        # Seed for the random generators, for reproducible runs.
        # Use "None" to seed from fresh entropy.
        self.seed = get_value('RANDOM', 'seed', int, default=None)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse layer sizes, activations and
        cost functions when set. This allows users to write
        config.hidden_activation = "relu" and have it converted to the enumeration.
        """
        if name == 'hidden_layers':
            value = self._parse_layer_sizes(value)
        elif name in ('hidden_activation', 'output_activation'):
            value = self._parse_activation(value)
        elif name == 'cost_function':
            value = self._parse_cost(value)
        super().__setattr__(name, value)
