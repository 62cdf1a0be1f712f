"""
Brightness Problem Implementation for evonet

This module implements a synthetic REAL/FAKE problem used to exercise the
evolutionary search without an image dataset on disk.

The Brightness Problem:
    Each datapoint is a small RGBA image. REAL images are drawn from dark
    pixel values, FAKE images from bright ones:
        REAL: channels uniformly drawn from [0, 96)
        FAKE: channels uniformly drawn from [160, 256)

    A network with one small hidden layer separates both classes after a
    few dozen generations.

Classes:
    Trial_Brightness: Trial that also reports the classification accuracy

Usage:
    python examples/trial_brightness.py
"""

import sys
import numpy as np
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evonet import Config, Datapoint, Dataset, Label, Trial, create_network, seed

def make_dataset(count: int, width: int = 4, height: int = 4) -> Dataset:
    """
    Create 'count' datapoints of each label.

    Parameters:
        count:  the number of images per label
        width:  the image width, in pixels
        height: the image height, in pixels

    Returns:
        the Dataset, REAL datapoints first
    """
    datapoints = []
    for label, low, high in ((Label.REAL, 0, 96), (Label.FAKE, 160, 256)):
        for _ in range(count):
            pixels = np.random.randint(low, high, size=(height, width, 4)).astype(np.uint8)
            datapoints.append(Datapoint.from_pixels(pixels, label))
    return Dataset(datapoints)

class Trial_Brightness(Trial):
    """
    Trial for the brightness problem.

    Implemented Methods:
        _report_progress(): Display the champion cost and accuracy
        _final_report():    Display the outputs of the champion for each datapoint
    """

    def accuracy(self) -> float:
        """Fraction of the dataset the champion labels correctly."""
        hits = sum(self.champion.run(datapoint)[0] is datapoint.label for datapoint in self._base_dataset)
        return hits / len(self._base_dataset)

    def _report_progress(self):
        if self._generation_counter % 10 == 0:
            print(f"Generation {self._generation_counter:4d}: "
                  f"cost={self.champion_cost:.6f} accuracy={self.accuracy():.2f}")

    def _final_report(self):
        super()._final_report()
        print("\nDatapoint outputs:")
        for datapoint in self._base_dataset:
            label, outputs = self.champion.run(datapoint)
            mark = "ok" if label is datapoint.label else "WRONG"
            print(f"  {datapoint.label.name:4s} => {label.name:4s} {np.round(outputs, 3)} {mark}")


if __name__ == '__main__':

    config = Config()
    config.input_size             = 4 * 4 * 4
    config.hidden_layers          = [8]
    config.population_size        = 20
    config.mutation_alpha         = 0.2
    config.max_number_generations = 200
    config.cost_threshold         = 0.01
    config.noise_alpha            = 0.1
    config.seed                   = 42

    seed(config.seed)

    dataset = make_dataset(10)
    network = create_network(config)
    print(network)

    trial = Trial_Brightness(config, network, dataset)
    trial.run(num_jobs=1)
