from src.montyhall.results.result_set import ResultSet
from src.montyhall.results.results_formatter import ResultsFormatter

__all__ = [
    'ResultSet',
    'ResultsFormatter',
]
