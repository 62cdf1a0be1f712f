#!/usr/bin/env python3
"""
Utility script to classify a pixel buffer with a saved network.

The configuration file names the saved network ('settings_path') and the
pixel buffer to classify ('test_path', a '.npy' file holding a
(height, width, 4) uint8 array).

Usage:
    python scripts/classify.py
    python scripts/classify.py --config config/config.ini --input sample.npy
"""

import sys
import argparse
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evonet import Config, Datapoint, Network


def main():
    parser = argparse.ArgumentParser(description='Classify a pixel buffer as REAL or FAKE')
    parser.add_argument('--config', type=str, default='config/config.ini',
                        help='Path to the INI configuration file')
    parser.add_argument('--input', type=str, default=None,
                        help="Pixel buffer to classify (overrides 'test_path')")

    args = parser.parse_args()

    config     = Config(args.config)
    input_path = args.input or config.test_path
    if input_path is None:
        print("Error: no input given and 'test_path' is not set in the configuration")
        sys.exit(1)

    datapoint = Datapoint.load(input_path)
    network   = Network.deserialize(config.settings_path)

    label, outputs = network.run(datapoint)

    print(f"Label: {label.name}, Outputs: {outputs.tolist()}")


if __name__ == '__main__':
    main()
