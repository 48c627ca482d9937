from src.montyhall.simulation.trial_runner import play_game
from src.montyhall.simulation.simulation_aggregator import SimulationAggregator, play_n_games

__all__ = [
    'play_game',
    'play_n_games',
    'SimulationAggregator',
]
