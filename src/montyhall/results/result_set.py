# src/montyhall/results/result_set.py
"""
ResultSet - ordered collection of trial records

Every trial contributes one STAY and one SWITCH record, drawn from the same
hidden game, so the collection always holds 2n records for n trials.
Proportions are an explicit reduction over per-strategy counters; pandas is
only used for the tabular view.
"""

from typing import Dict, Iterable, Iterator, List, Optional

import pandas as pd

from src.montyhall.game.errors import InvalidArgumentError
from src.montyhall.game.types import Outcome, Strategy, TrialRecord


class ResultSet:
    """Append-only, trial-ordered list of TrialRecord"""

    def __init__(self, records: Optional[Iterable[TrialRecord]] = None):
        self._records: List[TrialRecord] = []
        if records is not None:
            self.extend(records)

    def append(self, record: TrialRecord) -> None:
        if not isinstance(record, TrialRecord):
            raise InvalidArgumentError(f"ResultSet only accepts TrialRecord, got {type(record).__name__}")
        self._records.append(record)

    def extend(self, records: Iterable[TrialRecord]) -> None:
        for record in records:
            self.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TrialRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"ResultSet(records={len(self._records)}, trials={self.n_trials})"

    @property
    def records(self) -> tuple:
        return tuple(self._records)

    @property
    def n_trials(self) -> int:
        """Records per strategy; trial indices may repeat across concatenated runs"""
        return len(self._records) // len(Strategy)

    def trials(self) -> Dict[int, Dict[Strategy, Outcome]]:
        """Outcomes grouped by trial index, in trial order"""
        grouped: Dict[int, Dict[Strategy, Outcome]] = {}
        for record in self._records:
            grouped.setdefault(record.trial, {})[record.strategy] = record.outcome
        return grouped

    def counts(self) -> Dict[Strategy, Dict[Outcome, int]]:
        """WIN/LOSE counts per strategy, zero-filled for every strategy"""
        counts = {strategy: {outcome: 0 for outcome in Outcome} for strategy in Strategy}
        for record in self._records:
            counts[record.strategy][record.outcome] += 1
        return counts

    def proportion_table(self, decimals: int = 2) -> Dict[Strategy, Dict[Outcome, float]]:
        """
        Row-normalised outcome proportions per strategy

        Strategies without records are left out.
        """
        table = {}
        for strategy, outcome_counts in self.counts().items():
            total = sum(outcome_counts.values())
            if total == 0:
                continue
            table[strategy] = {outcome: round(count / total, decimals)
                               for outcome, count in outcome_counts.items()}
        return table

    def win_proportions(self, decimals: int = 2) -> Dict[Strategy, float]:
        """Share of WIN outcomes per strategy"""
        return {strategy: row[Outcome.WIN]
                for strategy, row in self.proportion_table(decimals).items()}

    def to_dataframe(self) -> pd.DataFrame:
        """One row per record with trial, strategy and outcome columns"""
        return pd.DataFrame(
            [(record.trial, record.strategy.value, record.outcome.value) for record in self._records],
            columns=['trial', 'strategy', 'outcome']
        )
