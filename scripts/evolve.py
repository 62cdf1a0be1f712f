#!/usr/bin/env python3
"""
Utility script to tune a network by evolutionary search.

The network saved at 'settings_path' is used as starting point if it exists;
otherwise a new random network is created from the [NETWORK] section. The
champion of the trial is saved back to 'settings_path'.

Usage:
    python scripts/evolve.py --config config/config.ini
    python scripts/evolve.py --config config/config.ini --dataset data/ --num-jobs 4
"""

import sys
import argparse
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evonet import Config, Dataset, Network, Trial, create_network, seed


def main():
    parser = argparse.ArgumentParser(description='Tune a network by evolutionary search')
    parser.add_argument('--config', type=str, default='config/config.ini',
                        help='Path to the INI configuration file')
    parser.add_argument('--dataset', type=str, default=None,
                        help="Dataset directory with 'real/' and 'fake/' sub-directories (overrides 'dataset_path')")
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs used to score candidates')
    parser.add_argument('--fresh', action='store_true',
                        help="Ignore the network saved at 'settings_path' and start from a random one")

    args = parser.parse_args()

    config       = Config(args.config)
    dataset_path = args.dataset or config.dataset_path
    if dataset_path is None:
        print("Error: no dataset given and 'dataset_path' is not set in the configuration")
        sys.exit(1)

    seed(config.seed)

    dataset = Dataset.from_directory(dataset_path)
    if len(dataset) == 0:
        print(f"Error: no '.npy' pixel buffers found under {dataset_path}")
        sys.exit(1)
    print(f"Loaded {len(dataset)} datapoints from {dataset_path}")

    settings_path = Path(config.settings_path)
    if settings_path.exists() and not args.fresh:
        network = Network.deserialize(settings_path)
        print(f"Starting from {settings_path}")
    else:
        network = create_network(config)
        print("Starting from a random network")

    trial    = Trial(config, network, dataset)
    champion = trial.run(num_jobs=args.num_jobs)

    settings_path.parent.mkdir(parents=True, exist_ok=True)
    champion.serialize(settings_path)
    print(f"Network saved to {settings_path}")


if __name__ == '__main__':
    main()
