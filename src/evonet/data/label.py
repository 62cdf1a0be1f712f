"""
Label Module

Classes:
    Label: The two classes a classification network tells apart
"""

import numpy as np
from enum import Enum

class Label(Enum):
    """
    The class of a datapoint: REAL or FAKE.

    The number of members is the output width of a classification network,
    and the member value is the index of its entry in the one-hot encoding:
        REAL => [1, 0]
        FAKE => [0, 1]
    """
    REAL = 0
    FAKE = 1

    def one_hot(self) -> np.ndarray:
        """The one-hot encoding of this label, used as training target."""
        encoding = np.zeros(len(Label), dtype=np.float64)
        encoding[self.value] = 1.0
        return encoding

    @classmethod
    def from_outputs(cls, outputs) -> "Label":
        """
        Derive the label from a network output vector.

        The entry with the highest value wins; on ties the earliest entry wins.
        NaN entries never win a comparison, so NaN outputs resolve to REAL.
        Index 0 maps to REAL, any other index to FAKE.

        Parameters:
            outputs: a vector with one entry per label

        Returns:
            the label selected by the output vector
        """
        outputs = np.asarray(outputs, dtype=np.float64)
        if outputs.ndim != 1 or len(outputs) != len(cls):
            raise ValueError(f"Expected {len(cls)} outputs, got an array of shape {outputs.shape}")

        # strict greater-than scan: ties and NaN never replace an earlier entry
        index = 0
        for i in range(1, len(outputs)):
            if outputs[i] > outputs[index]:
                index = i
        return cls.REAL if index == 0 else cls.FAKE
