"""
Datapoint Module

This module implements the Datapoint class, the unit of data a network
classifies: an input vector and the label it is expected to produce.

Classes:
    Datapoint: An immutable input vector with its label
"""

import numpy as np
from pathlib import Path

from evonet.data.codec import buffer_to_pixels, pixels_to_vector, vector_to_pixels
from evonet.data.label import Label
from evonet.genetic import uniform

class Datapoint:
    """
    An input vector (values in [0, 1)) and its label.

    Datapoints are immutable: the input vector is stored as a read-only array,
    and adding noise creates a new Datapoint.

    Public Properties:
        inputs: The input vector (read-only float64 array)
        label:  The expected label

    Public Methods:
        from_pixels(pixels, label):               Encode a (height, width, 4) pixel buffer
        from_buffer(width, height, data, label):  Encode raw RGBA8 bytes
        load(path, label):                        Encode a pixel buffer saved as '.npy'
        to_pixels():                              Decode back to a pixel buffer
        targets():                                One-hot encoding of the label
        add_noise(alpha):                         Create a noisy copy
    """

    def __init__(self, inputs, label: Label = Label.REAL):
        """
        Parameters:
            inputs: the input vector
            label:  the label the network is expected to produce
        """
        inputs = np.array(inputs, dtype=np.float64)
        if inputs.ndim != 1:
            raise ValueError(f"Expected a 1D input vector, got an array of shape {inputs.shape}")
        inputs.flags.writeable = False

        self._inputs: np.ndarray = inputs
        self._label : Label      = label

    @classmethod
    def from_pixels(cls, pixels, label: Label = Label.REAL) -> "Datapoint":
        return cls(pixels_to_vector(pixels), label)

    @classmethod
    def from_buffer(cls, width: int, height: int, data: bytes, label: Label = Label.REAL) -> "Datapoint":
        return cls.from_pixels(buffer_to_pixels(width, height, data), label)

    @classmethod
    def load(cls, path: str | Path, label: Label = Label.REAL) -> "Datapoint":
        """
        Load a pixel buffer stored with 'numpy.save' and encode it.

        Parameters:
            path:  the '.npy' file holding a (height, width, 4) uint8 array
            label: the label of the datapoint

        Returns:
            the encoded Datapoint
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Pixel buffer '{path}' not found")

        try:
            pixels = np.load(path, allow_pickle=False)
        except (OSError, ValueError) as exc:
            raise ValueError(f"Cannot read pixel buffer '{path}': {exc}") from exc

        return cls.from_pixels(pixels, label)

    @property
    def inputs(self) -> np.ndarray:
        return self._inputs

    @property
    def label(self) -> Label:
        return self._label

    def targets(self) -> np.ndarray:
        """The vector the network should output for this datapoint."""
        return self._label.one_hot()

    def to_pixels(self) -> np.ndarray:
        """Decode the input vector into a (height, width, 4) uint8 pixel buffer."""
        return vector_to_pixels(self._inputs)

    def add_noise(self, alpha: float) -> tuple["Datapoint", np.ndarray]:
        """
        Create a noisy copy of this datapoint.

        For each input value v, a perturbation is drawn uniformly from [-v, 1-v)
        (so that v plus the perturbation stays in [0, 1)) and scaled by 'alpha'.
        This datapoint is left untouched.

        Parameters:
            alpha: the noise scale, usually in [0, 1]

        Returns:
            the noisy datapoint (same label) and the noise vector that was added
        """
        noise = uniform(-self._inputs, 1.0 - self._inputs, len(self._inputs)) * alpha
        return Datapoint(self._inputs + noise, self._label), noise

    def __len__(self):
        return len(self._inputs)

    def __repr__(self):
        return f"Datapoint(inputs=<{len(self._inputs)} values>, label=Label.{self._label.name})"
