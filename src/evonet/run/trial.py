"""
Evolution Trial Module

This module defines the Trial class, an evolutionary search over the weights
and biases of a Network, with built-in support for CPU-based parallelization
using joblib.

A trial keeps a champion network. Every generation it spawns mutated clones
of the champion, scores them on a dataset, and promotes the best clone if it
is strictly better. The cost of a network over the dataset plays the role of
an (inverse) fitness: lower is better.
"""

from joblib import Parallel, delayed

from evonet.data import Dataset
from evonet.network import Network
from evonet.run.config import Config

def _evaluate_cost(network: Network, dataset: Dataset) -> float:
    return network.cost(dataset)

class Trial:
    """
    One run of the evolutionary search.

    Subclasses can override:
    - _report_progress(): Display progress after each generation
    - _final_report():    Display final results
    - _terminate():       Custom termination logic (default: max generations + cost threshold)

    Public Attributes:
        champion:      The best network found so far
        champion_cost: The cost of the champion over the dataset
        history:       The champion cost after each generation (initial network first)
        failed:        Whether the trial ended without reaching 'cost_threshold'
                       (always True when no threshold is configured)

    Public Properties:
        dataset:       The datapoints candidates are scored on during the current run
                       (the given dataset, plus its noisy copies when 'noise_alpha' is set)

    Public Methods:
        run(): Execute the trial and return the champion

    Parallelization of cost evaluation for candidates:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, network: Network, dataset: Dataset, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters ([EVOLUTION] section)
            network:         The starting network; it is cloned, never modified
            dataset:         The labeled datapoints the networks are scored on
            suppress_output: If True, suppress progress and final reports
        """
        if len(dataset) == 0:
            raise ValueError("Cannot run a trial on an empty dataset")
        if config.population_size < 1:
            raise ValueError(f"population_size must be at least 1, got {config.population_size}")

        self._config            : Config   = config
        self._initial_network   : Network  = network
        self._base_dataset      : Dataset  = dataset
        self._dataset           : Dataset  = dataset
        self._generation_counter: int      = 0
        self._suppress_output   : bool     = suppress_output

        self.champion     : Network | None = None
        self.champion_cost: float | None   = None
        self.history      : list[float]    = []
        self.failed       : bool           = True

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def run(self, num_jobs: int = 1) -> Network:
        """
        Run the trial.

        Resets the trial state and runs the evolutionary
        search until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for cost evaluation of candidates
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes

        Returns:
            the champion network
        """
        # Reset the trial state before starting a new run
        self._reset()

        # Score the starting network
        self.champion_cost = self.champion.cost(self._dataset)
        self.history.append(self.champion_cost)

        # Display progress for the starting network
        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self._generation_counter += 1

            candidates = self._spawn_candidates()
            costs      = self._evaluate_cost_all(candidates, num_jobs)

            # Promote the best candidate, only if strictly better
            best = min(range(len(candidates)), key=lambda i: costs[i])
            if costs[best] < self.champion_cost:
                self.champion      = candidates[best]
                self.champion_cost = costs[best]
            self.history.append(self.champion_cost)

            # Display progress after each generation
            if not self._suppress_output:
                self._report_progress()

        # Produce final report
        if not self._suppress_output:
            self._final_report()

        return self.champion

    def _reset(self):
        """
        Reset the trial state before starting a new run.
        """
        self._generation_counter = 0
        self.champion      = self._initial_network.clone()
        self.champion_cost = None
        self.history       = []
        self.failed        = True

        self._dataset = self._base_dataset

        # Augment the dataset with one noisy copy of each datapoint
        if self._config.noise_alpha:
            noisy = [datapoint.add_noise(self._config.noise_alpha)[0] for datapoint in self._base_dataset]
            self._dataset = Dataset(list(self._base_dataset) + noisy)

    def _spawn_candidates(self) -> list[Network]:
        """
        Create 'population_size' mutated clones of the champion.
        """
        candidates = []
        for _ in range(self._config.population_size):
            candidate = self.champion.clone()
            candidate.mutate(self._config.mutation_alpha)
            candidates.append(candidate)
        return candidates

    def _evaluate_cost_all(self, candidates: list[Network], num_jobs: int) -> list[float]:
        """
        Evaluate the cost of all candidates over the dataset.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib
        """
        if num_jobs == 1:
            return [_evaluate_cost(candidate, self._dataset) for candidate in candidates]
        return Parallel(num_jobs)(delayed(_evaluate_cost)(c, self._dataset) for c in candidates)

    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        print(f"Generation {self._generation_counter:4d}: cost={self.champion_cost:.6f}")

    def _final_report(self):
        """
        Produce final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        status = "FAILED" if self.failed else "SUCCEEDED"
        print(f"\nTrial {status} after {self._generation_counter} generations")
        print(f"Initial cost: {self.history[0]:.6f}")
        print(f"Final cost  : {self.champion_cost:.6f}")

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if the champion cost
        has reached a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the cost has reached a target threshold
        if self._config.cost_threshold is not None:
            success   = self.champion_cost <= self._config.cost_threshold
            terminate = terminate or success
            if terminate:
                self.failed = not success

        return terminate
