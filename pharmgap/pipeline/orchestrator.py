"""
Pipeline Orchestrator
Runs the dashboard steps in order and assembles the report.
"""

from typing import Any, Optional

from loguru import logger

from pharmgap.config import settings
from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import (
    AreaDetail,
    DashboardReport,
    DashboardStatistics,
    DensityBin,
    RankingResult,
)
from pharmgap.data_sources.geojson_source import DataUnavailableError, GeoJSONSource
from pharmgap.domain.metrics import ScoringPolicy
from pharmgap.domain.presentation import EMPTY_TABLE_MESSAGE, PresentationEngine
from pharmgap.agents.ranking_agent import RankingAgent, RankingInput
from pharmgap.agents.statistics_agent import StatisticsAgent, StatisticsInput
from pharmgap.agents.detail_agent import DetailAgent

LOAD_ERROR_MESSAGE = "Gagal memuat data. Pastikan file data tersedia di folder ./data/"

# official_population default: read settings when the orchestrator is built
_FROM_SETTINGS = object()


class DashboardOrchestrator:
    """
    Dashboard orchestrator

    [Load]        business insight layer -> area records (once per orchestrator)
    [Rank]        derive -> filter underserved -> sort -> top-K
    [Statistics]  headline numbers
    [Layers]      optional map layers, each one may be missing
    [Present]     recommendation rows / empty state

    A DataUnavailableError on the business layer turns the whole report
    into the error state; nothing is rendered partially.
    """

    def __init__(
        self,
        source: Optional[GeoJSONSource] = None,
        policy: Optional[ScoringPolicy] = None,
        official_population: Any = _FROM_SETTINGS,
        top_k: Optional[int] = None,
    ):
        self.source = source or GeoJSONSource()
        self.top_k = top_k if top_k is not None else settings.RECOMMENDATION_LIMIT
        if official_population is _FROM_SETTINGS:
            official_population = settings.OFFICIAL_POPULATION_TOTAL

        self.ranking_agent = RankingAgent(policy=policy)
        self.statistics_agent = StatisticsAgent(official_population=official_population)
        self.detail_agent = DetailAgent(policy=policy)
        self.presentation = PresentationEngine(policy=policy)

        self._areas: Optional[list[AreaRecord]] = None
        self.logger = logger.bind(component="Pipeline")

    # === individual steps ===

    def load_areas(self) -> list[AreaRecord]:
        """Area records of the business layer; raises DataUnavailableError."""
        if self._areas is None:
            self._areas = self.source.load_areas()
        return self._areas

    def rank(self, top_k: Optional[int] = None) -> RankingResult:
        limit = self.top_k if top_k is None else top_k
        return self.ranking_agent.run(RankingInput(areas=self.load_areas(), top_k=limit))

    def statistics(self, ranking: Optional[RankingResult] = None) -> DashboardStatistics:
        underserved = ranking.underserved_count if ranking is not None else None
        return self.statistics_agent.run(
            StatisticsInput(areas=self.load_areas(), underserved_areas=underserved)
        )

    def detail(self, name: str) -> Optional[AreaDetail]:
        """Detail view of the first area with this name, None when unknown."""
        for area in self.load_areas():
            if area.name == name:
                return self.detail_agent.run(area)
        return None

    def legend(self) -> list[DensityBin]:
        return self.presentation.legend()

    # === full run ===

    def run(self, include_layers: bool = True) -> DashboardReport:
        """Build the whole dashboard."""
        self.logger.info("Starting dashboard pipeline")

        try:
            self.logger.info("Step 1: Loading areas...")
            self.load_areas()

            self.logger.info("Step 2: Ranking areas...")
            ranking = self.rank()

            self.logger.info("Step 3: Computing statistics...")
            stats = self.statistics(ranking)

            layers = []
            if include_layers:
                self.logger.info("Step 4: Loading map layers...")
                layers = self.source.load_layers()

        except DataUnavailableError as e:
            self.logger.error(f"Error loading data: {e}")
            return self._error_report(LOAD_ERROR_MESSAGE)

        self.logger.info("Step 5: Building recommendations...")
        rows = self.presentation.rows(ranking.top)

        report = DashboardReport(
            statistics=stats,
            layers=layers,
            recommendations=rows,
            empty_message=None if rows else EMPTY_TABLE_MESSAGE,
            map_center=settings.MAP_CENTER,
            map_zoom=settings.MAP_ZOOM,
        )

        self.logger.info(
            f"Pipeline complete: {len(rows)} recommendations from {stats.district_count} areas"
        )
        return report

    def _error_report(self, message: str) -> DashboardReport:
        """Report in the error state"""
        return DashboardReport(
            error=message,
            map_center=settings.MAP_CENTER,
            map_zoom=settings.MAP_ZOOM,
        )
