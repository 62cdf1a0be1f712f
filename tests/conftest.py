"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility."""
    from evonet.genetic import seed

    seed(42)
    yield
    seed(None)


@pytest.fixture
def small_network():
    """A 4 => 3 => 2 network with sigmoid activations and MSE cost."""
    from evonet import ActivationFunction, CostFunction, Network

    return (Network.new(4)
            .add_layer(3, ActivationFunction.SIGMOID)
            .add_layer(2, ActivationFunction.SIGMOID)
            .build(CostFunction.MSE))


@pytest.fixture
def small_dataset():
    """Four 4-value datapoints, two of each label."""
    from evonet import Datapoint, Dataset, Label

    return Dataset([
        Datapoint([0.1, 0.2, 0.3, 0.4], Label.REAL),
        Datapoint([0.9, 0.8, 0.7, 0.6], Label.FAKE),
        Datapoint([0.0, 0.5, 0.0, 0.5], Label.REAL),
        Datapoint([0.5, 0.0, 0.5, 0.0], Label.FAKE),
    ])


@pytest.fixture
def rgba_2x2():
    """A 2x2 RGBA pixel buffer, shape (height, width, 4)."""
    return np.array([[[255,   0,   0, 255], [  0, 255,   0, 255]],
                     [[  0,   0, 255, 128], [ 17,  34,  51,   0]]], dtype=np.uint8)
