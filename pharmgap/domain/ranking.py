"""
Ranking engine
Ranks areas by how urgently they need a new pharmacy.
"""

from typing import Iterable, Optional

from loguru import logger

from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import RankedArea, RankingResult, ZeroFacilityEntry

from .metrics import DEFAULT_POLICY, ScoringPolicy, derive_metrics, priority_score


class RankingEngine:
    """
    Rule-based ranking engine

    Every area is scored independently. Underserved areas (positive
    deficit, or no pharmacy at all) are kept and sorted by descending
    priority score. Ties keep their input order (stable sort); there is
    no secondary key.
    """

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        self.policy = policy or DEFAULT_POLICY

    def derive(self, area: AreaRecord) -> RankedArea:
        """Attach the derived ranking fields to one area."""
        metrics = derive_metrics(area.population, area.existing_facilities, self.policy)
        score = priority_score(
            area.population,
            area.existing_facilities,
            metrics.deficit,
            self.policy,
        )

        return RankedArea(
            **area.model_dump(),
            ideal_facility_count=metrics.ideal_facility_count,
            deficit=metrics.deficit,
            priority_score=score,
            is_underserved=metrics.is_underserved,
        )

    def rank(self, areas: Iterable[AreaRecord], top_k: Optional[int] = None) -> RankingResult:
        """
        Rank areas.

        Args:
            areas: area records, treated as read-only
            top_k: size of the primary result (policy default when None)

        Returns:
            RankingResult: top-K, all underserved areas, and all derived areas
        """
        limit = self.policy.top_k if top_k is None else top_k

        derived = [self.derive(area) for area in areas]
        underserved = [area for area in derived if area.is_underserved]

        # sorted() is stable, reverse=True included
        ranked = sorted(underserved, key=lambda a: a.priority_score, reverse=True)
        top = ranked[:limit]

        result = RankingResult(
            top=top,
            ranked=ranked,
            areas=derived,
            zero_facility_areas=self._zero_facility_report(derived, ranked, limit),
        )

        logger.debug(
            f"Ranked {len(derived)} areas: {len(ranked)} underserved, top {len(top)}"
        )
        return result

    def _zero_facility_report(
        self,
        derived: list[RankedArea],
        ranked: list[RankedArea],
        limit: int,
    ) -> list[ZeroFacilityEntry]:
        """Rank position of every area that has no pharmacy at all."""
        positions = {id(area): i + 1 for i, area in enumerate(ranked)}

        entries = []
        for area in derived:
            if area.existing_facilities != 0:
                continue
            rank = positions.get(id(area))
            entries.append(ZeroFacilityEntry(
                name=area.name,
                population=area.population,
                ideal_facility_count=area.ideal_facility_count,
                deficit=area.deficit,
                priority_score=area.priority_score,
                rank=rank,
                in_top=rank is not None and rank <= limit,
            ))
        return entries
