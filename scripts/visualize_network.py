#!/usr/bin/env python3
"""
Utility script to visualize the layer topology of a saved network.

Usage:
    python scripts/visualize_network.py --network config/network.json
"""

import sys
import argparse
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evonet import Network


def visualize_network(network, output_file='network', format='png', view=True):
    """
    Render a network's layer topology to a file.

    Args:
        network: The Network to visualize
        output_file: Output filename (without extension)
        format: Output format (png, pdf, svg, etc.)
        view: Whether to automatically open the generated file
    """
    dot = network.visualize(view=False)
    dot.format = format
    dot.render(output_file, view=view)
    print(f"Network visualization saved to {output_file}.{format}")


def main():
    parser = argparse.ArgumentParser(description='Visualize a saved network')
    parser.add_argument('--network', type=str, required=True,
                        help='Path to the JSON network file')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    network = Network.deserialize(args.network)
    visualize_network(network, args.output, args.format, not args.no_view)


if __name__ == '__main__':
    main()
