# src/montyhall/monty_hall.py
"""
Command-line entry point

Usage: python -m src.montyhall.monty_hall [--games N] [--seed S] [--workers W]
                                          [--config PATH] [--environment ENV] [--verbose]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from src.montyhall.config.unified_config import get_config
from src.montyhall.game.errors import InvalidArgumentError
from src.montyhall.simulation.simulation_aggregator import SimulationAggregator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo simulation of the Monty Hall game: stay vs switch")
    parser.add_argument('--games', '-n', type=int, default=None,
                        help="Number of games to play (default: simulation.default_games)")
    parser.add_argument('--seed', type=int, default=None,
                        help="Random seed (default: general.random_state)")
    parser.add_argument('--workers', type=int, default=None,
                        help="Number of worker processes (default: simulation.n_workers)")
    parser.add_argument('--config', default=None,
                        help="Config directory or JSON file")
    parser.add_argument('--environment', default="prod",
                        help="Environment overrides to apply")
    parser.add_argument('--verbose', '-v', action='store_true',
                        help="Log every trial")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        config = get_config(config_path=args.config, environment=args.environment)
        aggregator = SimulationAggregator(config)
        aggregator.run(n=args.games, seed=args.seed, n_workers=args.workers)
    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        return 2
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
