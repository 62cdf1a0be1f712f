"""
Run Package

This package provides configuration, network construction from a
configuration, and the evolutionary search loop.

Exported:
    Config:         Configuration parameters parsed from an INI file
    Trial:          One run of the evolutionary search
    create_network: Build a randomly initialized network from a Config
"""

from evonet.run.config  import Config
from evonet.run.factory import create_network
from evonet.run.trial   import Trial

__all__ = [
    'Config',
    'Trial',
    'create_network'
]
