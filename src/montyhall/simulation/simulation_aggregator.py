# src/montyhall/simulation/simulation_aggregator.py
"""
Simulation Aggregator - repeats single trials and tabulates the outcomes
Runs serially or across a worker pool, collects records in trial order
"""

import logging
from datetime import datetime
from multiprocessing import Pool
from typing import List, Optional, TextIO, Tuple

import numpy as np

from src.montyhall.config.unified_config import UnifiedConfig
from src.montyhall.game.errors import InvalidArgumentError
from src.montyhall.game.types import TrialRecord
from src.montyhall.results.result_set import ResultSet
from src.montyhall.results.results_formatter import ResultsFormatter
from src.montyhall.simulation.trial_runner import play_game
from src.montyhall.utils.random_source import ensure_rng, spawn_generators

logger = logging.getLogger(__name__)


def _play_chunk(args: Tuple[int, int, np.random.Generator]) -> List[TrialRecord]:
    """Worker function for multiprocessing (must be picklable)"""
    start, count, rng = args
    records = []
    for trial in range(start, start + count):
        records.extend(play_game(rng, trial=trial))
    return records


def _validate_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class SimulationAggregator:
    """
    Runs n Monty Hall trials and reports win proportions per strategy

    Responsibilities:
    - Drive play_game n times with an injected random source
    - Split trials across workers with independent random streams
    - Collect records in trial order and print the summary table
    """

    def __init__(self, config: Optional[UnifiedConfig] = None):
        """
        Args:
            config: Simulation configuration (None = built-in defaults)
        """
        self.config = config or UnifiedConfig()
        self.config.validate_config()
        self.formatter = ResultsFormatter(self.config)

        simulation_config = self.config.get_section('simulation', {})
        self.default_games = simulation_config.get('default_games', 100)
        self.default_workers = simulation_config.get('n_workers', 1)
        self.random_state = self.config.get_section('general', {}).get('random_state')

    def run(self,
            n: Optional[int] = None,
            rng: Optional[np.random.Generator] = None,
            seed: Optional[int] = None,
            n_workers: Optional[int] = None,
            stream: Optional[TextIO] = None,
            report: bool = True) -> ResultSet:
        """
        Run the simulation

        Args:
            n: Number of games (None = simulation.default_games)
            rng: Random source for the serial path
            seed: Seed used when rng is None (None = general.random_state)
            n_workers: Worker processes (None = simulation.n_workers)
            stream: Where the summary table is printed (None = stdout)
            report: Print and log the summary table

        Returns:
            ResultSet with 2n records, STAY then SWITCH for each trial
        """
        n = _validate_positive_int(self.default_games if n is None else n, "n")
        n_workers = _validate_positive_int(self.default_workers if n_workers is None else n_workers, "n_workers")
        if seed is None:
            seed = self.random_state

        logger.info(f"Starting simulation: games={n}, workers={n_workers}, seed={seed}")
        start_time = datetime.now()

        if n_workers == 1:
            records = _play_chunk((0, n, ensure_rng(rng, seed)))
        else:
            if rng is not None:
                # Derive the root seed from the caller's generator
                seed = int(rng.integers(2 ** 63))
            records = self._distribute_work(n, n_workers, seed)

        result_set = ResultSet(records)

        duration = (datetime.now() - start_time).total_seconds()
        logger.info(f"Simulation completed in {duration:.2f}s: {len(result_set)} records from {n} games")

        if report:
            self.formatter.print_summary(result_set, stream)

        return result_set

    def _distribute_work(self, n: int, n_workers: int, seed) -> List[TrialRecord]:
        """Split trials into contiguous chunks, one random stream per chunk"""
        n_chunks = min(n_workers, n)
        chunk_sizes = [len(chunk) for chunk in np.array_split(np.arange(n), n_chunks)]
        starts = np.cumsum([0] + chunk_sizes[:-1])
        generators = spawn_generators(seed, n_chunks)

        worker_args = [(int(start), size, generator)
                       for start, size, generator in zip(starts, chunk_sizes, generators)]

        logger.info(f"Distributing {n} games to {n_chunks} workers...")
        with Pool(n_chunks) as pool:
            chunks = pool.map(_play_chunk, worker_args)

        return [record for chunk in chunks for record in chunk]


def play_n_games(n: int = 100,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 n_workers: int = 1,
                 config: Optional[UnifiedConfig] = None,
                 stream: Optional[TextIO] = None) -> ResultSet:
    """
    Play n games and print the row-normalised WIN/LOSE table per strategy

    Args:
        n: Number of games, must be positive
        rng: Random source (serial runs draw every trial from it)
        seed: Seed when rng is None
        n_workers: Worker processes, 1 runs serially
        config: Configuration for reporting and defaults
        stream: Where the summary table is printed (None = stdout)

    Returns:
        ResultSet with 2n records in trial order
    """
    aggregator = SimulationAggregator(config)
    return aggregator.run(n=n, rng=rng, seed=seed, n_workers=n_workers, stream=stream)
