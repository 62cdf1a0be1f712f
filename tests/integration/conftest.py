"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np


@pytest.fixture
def image_dataset_dir(tmp_path):
    """
    A dataset directory of 4x4 RGBA pixel buffers.

    REAL images are dark, FAKE images are bright, so that a small network
    can learn to separate them within a few generations.
    """
    rng = np.random.default_rng(0)
    for label, low, high in (('real', 0, 64), ('fake', 192, 256)):
        directory = tmp_path / "dataset" / label
        directory.mkdir(parents=True)
        for index in range(3):
            pixels = rng.integers(low, high, size=(4, 4, 4), dtype=np.uint8)
            np.save(directory / f"{label}_{index}.npy", pixels)
    return tmp_path / "dataset"


@pytest.fixture
def config_file(tmp_path, image_dataset_dir):
    """An INI configuration for the 4x4 image dataset."""
    path = tmp_path / "config.ini"
    path.write_text(f"""
[PATHS]
settings_path = {tmp_path / 'network.json'}
test_path     = {image_dataset_dir / 'fake' / 'fake_0.npy'}
dataset_path  = {image_dataset_dir}

[NETWORK]
input_size        = 64
hidden_layers     = 8
hidden_activation = sigmoid
output_activation = sigmoid
cost_function     = mse

[EVOLUTION]
population_size        = 8
mutation_alpha         = 0.3
max_number_generations = 15
noise_alpha            = 0.1

[RANDOM]
seed = 42
""")
    return path
