# src/montyhall/results/results_formatter.py
# Summary table rendering, values come from configuration

import logging
import sys
from typing import Optional, TextIO

import pandas as pd

from src.montyhall.config.unified_config import UnifiedConfig
from src.montyhall.game.types import Outcome, Strategy
from src.montyhall.results.result_set import ResultSet

logger = logging.getLogger(__name__)

# LOSE before WIN, as in a sorted frequency table
_OUTCOME_COLUMNS = [Outcome.LOSE, Outcome.WIN]


class ResultsFormatter:
    """
    Render strategy x outcome tables for a ResultSet
    """

    def __init__(self, config: Optional[UnifiedConfig] = None):
        self.config = config or UnifiedConfig()
        self._cache_config_values()

    def _cache_config_values(self):
        """Cache reporting configuration values"""
        reporting = self.config.get_section('reporting', {})
        self.decimals = reporting.get('decimals', 2)
        self.show_counts = reporting.get('show_counts', False)

    def proportion_frame(self, result_set: ResultSet) -> pd.DataFrame:
        """Strategies as rows, outcomes as columns, each row sums to 1"""
        table = result_set.proportion_table(self.decimals)
        frame = pd.DataFrame(
            [[table[strategy][outcome] for outcome in _OUTCOME_COLUMNS] for strategy in table],
            index=pd.Index([strategy.value for strategy in table], name='strategy'),
            columns=pd.Index([outcome.value for outcome in _OUTCOME_COLUMNS], name='outcome')
        )
        return frame

    def count_frame(self, result_set: ResultSet) -> pd.DataFrame:
        """Raw WIN/LOSE counts per strategy"""
        counts = result_set.counts()
        return pd.DataFrame(
            [[counts[strategy][outcome] for outcome in _OUTCOME_COLUMNS] for strategy in Strategy],
            index=pd.Index([strategy.value for strategy in Strategy], name='strategy'),
            columns=pd.Index([outcome.value for outcome in _OUTCOME_COLUMNS], name='outcome')
        )

    def format_table(self, result_set: ResultSet) -> str:
        frame = self.proportion_frame(result_set)
        text = frame.to_string(float_format=lambda value: f"{value:.{self.decimals}f}")
        if self.show_counts:
            text += "\n\n" + self.count_frame(result_set).to_string()
        return text

    def print_summary(self, result_set: ResultSet, stream: Optional[TextIO] = None) -> str:
        """
        Write the proportion table to stream (stdout by default)

        Returns:
            The rendered table
        """
        text = self.format_table(result_set)
        stream = stream or sys.stdout
        print(text, file=stream)
        win_rates = {strategy.value: rate
                     for strategy, rate in result_set.win_proportions(self.decimals).items()}
        logger.info(f"Win proportions over {result_set.n_trials} games: {win_rates}")
        return text
