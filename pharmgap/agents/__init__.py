"""
PharmGap agent package
Each agent has a single responsibility and fixed input/output schemas.
"""

from .base import BaseAgent
from .ranking_agent import RankingAgent, RankingInput
from .statistics_agent import StatisticsAgent, StatisticsInput
from .detail_agent import DetailAgent

__all__ = [
    "BaseAgent",
    "RankingAgent",
    "RankingInput",
    "StatisticsAgent",
    "StatisticsInput",
    "DetailAgent",
]
