"""
Ranking Agent
Ranks areas by pharmacy need.
"""

from typing import Optional

from .base import BaseAgent
from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import RankingResult
from pharmgap.domain.metrics import ScoringPolicy
from pharmgap.domain.ranking import RankingEngine


class RankingInput:
    """Ranking Agent input"""
    def __init__(self, areas: list[AreaRecord], top_k: Optional[int] = None):
        self.areas = areas
        self.top_k = top_k


class RankingAgent(BaseAgent[RankingInput, RankingResult]):
    """
    Ranking Agent

    Wraps the rule-based RankingEngine and logs where every area without
    a pharmacy ended up.
    """

    name = "RankingAgent"

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        super().__init__()
        self.engine = RankingEngine(policy=policy)

    def _process(self, input_data: RankingInput) -> RankingResult:
        result = self.engine.rank(input_data.areas, top_k=input_data.top_k)

        for entry in result.zero_facility_areas:
            position = entry.rank if entry.rank is not None else "filtered out"
            self.logger.debug(
                f"No pharmacy: {entry.name} pop={entry.population} "
                f"deficit={entry.deficit} score={entry.priority_score:.2f} "
                f"rank={position} top={entry.in_top}"
            )

        self.logger.info(f"Underserved areas: {result.underserved_count}")
        return result
