"""
Random Source Module
Creates and partitions numpy random generators so every draw comes from an
injected source instead of global state
"""

import logging
from typing import List, Optional, Union

import numpy as np

logger = logging.getLogger(__name__)

SeedLike = Union[None, int, np.random.SeedSequence]


def ensure_rng(rng: Optional[np.random.Generator] = None, seed: SeedLike = None) -> np.random.Generator:
    """
    Return a usable generator

    Args:
        rng: Generator to use as-is when given
        seed: Seed for a new generator when rng is None (None = OS entropy)
    """
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def spawn_generators(seed: SeedLike, n_streams: int) -> List[np.random.Generator]:
    """
    Split one seed into independent generators, one per worker

    Args:
        seed: Root seed (None = OS entropy)
        n_streams: Number of independent streams to create
    """
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    children = root.spawn(n_streams)
    logger.debug(f"Spawned {n_streams} random streams from entropy {root.entropy}")
    return [np.random.default_rng(child) for child in children]
