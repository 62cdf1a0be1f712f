"""
Unit tests for Config class.
"""

import pytest
from evonet.activations import ActivationFunction, CostFunction
from evonet.run.config import Config


# ============================================================================
# Fixtures
# ============================================================================

FULL_INI = """
[PATHS]
settings_path = networks/realfake.json
test_path     = samples/test.npy
dataset_path  = samples/

[NETWORK]
input_size        = 64
hidden_layers     = 8, 4
hidden_activation = relu
output_activation = softmax
cost_function     = cce

[EVOLUTION]
population_size        = 20
mutation_alpha         = 0.05
max_number_generations = 7
cost_threshold         = 0.01
noise_alpha            = 0.2

[RANDOM]
seed = 123
"""

MINIMAL_INI = """
[PATHS]
settings_path = network.json

[NETWORK]
input_size    = 16
hidden_layers = 4
"""

@pytest.fixture
def write_config(tmp_path):
    """Return a function writing an INI file and returning its path."""
    def _write(content, name='config.ini'):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return _write


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_uses_defaults(self):
        config = Config()

        assert config.settings_path == './config/network.json'
        assert config.test_path is None
        assert config.dataset_path is None
        assert config.input_size == 64 * 64 * 4
        assert config.hidden_layers == [64, 64, 64]
        assert config.hidden_activation is ActivationFunction.SIGMOID
        assert config.output_activation is ActivationFunction.SIGMOID
        assert config.cost_function is CostFunction.MSE
        assert config.population_size == 10
        assert config.cost_threshold is None
        assert config.noise_alpha == 0.0
        assert config.seed is None

    def test_init_with_nonexistent_file_raises_error(self):
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_init_with_malformed_file_raises_error(self, write_config):
        with pytest.raises(ValueError, match="malformed"):
            Config(write_config("this is not an ini file"))


# ============================================================================
# Test Config Sections
# ============================================================================

class TestConfigFull:
    """Test parsing of a configuration file with every key set."""

    @pytest.fixture
    def config(self, write_config):
        return Config(write_config(FULL_INI))

    def test_paths(self, config):
        assert config.settings_path == 'networks/realfake.json'
        assert config.test_path     == 'samples/test.npy'
        assert config.dataset_path  == 'samples/'

    def test_network(self, config):
        assert config.input_size == 64
        assert config.hidden_layers == [8, 4]
        assert config.hidden_activation is ActivationFunction.RELU
        assert config.output_activation is ActivationFunction.SOFTMAX
        assert config.cost_function is CostFunction.CCE

    def test_evolution(self, config):
        assert config.population_size == 20
        assert config.mutation_alpha == pytest.approx(0.05)
        assert config.max_number_generations == 7
        assert config.cost_threshold == pytest.approx(0.01)
        assert config.noise_alpha == pytest.approx(0.2)

    def test_random(self, config):
        assert config.seed == 123


class TestConfigMinimal:
    """Test that optional keys fall back to their defaults."""

    @pytest.fixture
    def config(self, write_config):
        return Config(write_config(MINIMAL_INI))

    def test_optional_paths(self, config):
        assert config.test_path is None
        assert config.dataset_path is None

    def test_optional_network_keys(self, config):
        assert config.hidden_layers == [4]
        assert config.hidden_activation is ActivationFunction.SIGMOID
        assert config.output_activation is ActivationFunction.SIGMOID
        assert config.cost_function is CostFunction.MSE

    def test_optional_evolution_keys(self, config):
        assert config.population_size == 10
        assert config.mutation_alpha == pytest.approx(0.1)
        assert config.max_number_generations == 100
        assert config.cost_threshold is None
        assert config.noise_alpha == 0.0
        assert config.seed is None

    def test_none_values(self, write_config):
        content = MINIMAL_INI + "\n[EVOLUTION]\ncost_threshold = None\n\n[RANDOM]\nseed = none\n"
        config = Config(write_config(content))
        assert config.cost_threshold is None
        assert config.seed is None

    def test_missing_required_section_raises(self, write_config):
        with pytest.raises(ValueError, match=r"missing \[NETWORK\] input_size"):
            Config(write_config("[PATHS]\nsettings_path = network.json\n"))

    def test_missing_required_key_raises(self, write_config):
        content = MINIMAL_INI.replace("hidden_layers = 4", "")
        with pytest.raises(ValueError, match=r"missing \[NETWORK\] hidden_layers"):
            Config(write_config(content))

    def test_missing_settings_path_raises(self, write_config):
        content = MINIMAL_INI.replace("settings_path = network.json", "")
        with pytest.raises(ValueError, match=r"missing \[PATHS\] settings_path"):
            Config(write_config(content))


# ============================================================================
# Test Attribute Parsing
# ============================================================================

class TestConfigSetattr:
    """Test automatic parsing when attributes are set."""

    def test_hidden_layers_from_string(self):
        config = Config()
        config.hidden_layers = "32, 16,8"
        assert config.hidden_layers == [32, 16, 8]

    def test_hidden_layers_empty(self):
        config = Config()
        config.hidden_layers = ""
        assert config.hidden_layers == []

    def test_hidden_layers_invalid_raises(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid layer size"):
            config.hidden_layers = "32, abc"

    def test_hidden_layers_zero_raises(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid layer size 0"):
            config.hidden_layers = [4, 0]

    def test_activation_case_insensitive(self):
        config = Config()
        config.hidden_activation = " ReLU "
        assert config.hidden_activation is ActivationFunction.RELU

    def test_invalid_activation_raises(self):
        config = Config()
        with pytest.raises(ValueError, match="expected one of: linear, relu, sigmoid, softmax"):
            config.output_activation = "tanh"

    def test_cost_function(self):
        config = Config()
        config.cost_function = "CCE"
        assert config.cost_function is CostFunction.CCE

    def test_invalid_cost_function_raises(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid cost function"):
            config.cost_function = "hinge"

    def test_invalid_activation_in_file_raises(self, write_config):
        content = MINIMAL_INI.replace("hidden_layers = 4", "hidden_layers = 4\nhidden_activation = gelu")
        with pytest.raises(ValueError, match="Invalid activation function 'gelu'"):
            Config(write_config(content))
