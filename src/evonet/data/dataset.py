"""
Dataset Module

Classes:
    Dataset: An ordered collection of Datapoints
"""

from pathlib import Path
from typing  import Iterable, Iterator

from evonet.data.datapoint import Datapoint
from evonet.data.label import Label

class Dataset:
    """
    An ordered collection of datapoints, used to compute the cost of a network.

    No deduplication or indexing is performed: datapoints are kept in the order
    in which they were added.

    Public Properties:
        datapoints: The datapoints, in order
        size:       Number of datapoints

    Public Methods:
        from_directory(path): Load labeled pixel buffers from 'real/' and 'fake/' sub-directories
        append(datapoint):    Add a datapoint at the end
    """

    def __init__(self, datapoints: Iterable[Datapoint] = ()):
        self._datapoints: list[Datapoint] = list(datapoints)

    @classmethod
    def from_directory(cls, path: str | Path) -> "Dataset":
        """
        Load a dataset of pixel buffers saved with 'numpy.save'.

        The directory is expected to contain one sub-directory per label, named
        after the label in lower case ('real', 'fake'). Each '.npy' file in a
        sub-directory becomes a datapoint with that label. Files are read in
        name order, REAL first; a missing sub-directory contributes nothing.

        Parameters:
            path: the dataset root directory

        Returns:
            the loaded Dataset
        """
        root = Path(path)
        if not root.is_dir():
            raise FileNotFoundError(f"Dataset directory '{root}' not found")

        datapoints = []
        for label in Label:
            for file in sorted((root / label.name.lower()).glob("*.npy")):
                datapoints.append(Datapoint.load(file, label))

        return cls(datapoints)

    @property
    def datapoints(self) -> list[Datapoint]:
        return self._datapoints

    @property
    def size(self) -> int:
        return len(self._datapoints)

    def append(self, datapoint: Datapoint) -> None:
        self._datapoints.append(datapoint)

    def __len__(self):
        return len(self._datapoints)

    def __iter__(self) -> Iterator[Datapoint]:
        return iter(self._datapoints)

    def __getitem__(self, index: int) -> Datapoint:
        return self._datapoints[index]

    def __repr__(self):
        return f"Dataset(size={self.size})"
