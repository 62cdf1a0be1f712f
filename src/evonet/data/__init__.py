"""
Data Package

This package provides the data model consumed by evonet networks.

Exported:
    Label:     REAL / FAKE classification label with one-hot encoding
    Datapoint: Immutable input vector with its label
    Dataset:   Ordered collection of datapoints
    pixels_to_vector, vector_to_pixels, buffer_to_pixels, image_dimensions: pixel codec
"""

from evonet.data.label     import Label
from evonet.data.codec     import buffer_to_pixels, image_dimensions, pixels_to_vector, vector_to_pixels
from evonet.data.datapoint import Datapoint
from evonet.data.dataset   import Dataset

__all__ = [
    'Label',
    'Datapoint',
    'Dataset',
    'buffer_to_pixels',
    'image_dimensions',
    'pixels_to_vector',
    'vector_to_pixels'
]
