"""
PharmGap domain package
Rule-based metrics, ranking, statistics and presentation logic.
No I/O happens in this layer.
"""

from .metrics import ScoringPolicy, derive_metrics, ideal_facility_count, priority_score
from .ranking import RankingEngine
from .statistics import StatisticsEngine
from .presentation import PresentationEngine

__all__ = [
    "ScoringPolicy",
    "derive_metrics",
    "ideal_facility_count",
    "priority_score",
    "RankingEngine",
    "StatisticsEngine",
    "PresentationEngine",
]
