"""
Statistics Agent
Computes the dashboard headline numbers.
"""

from typing import Optional

from .base import BaseAgent
from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import DashboardStatistics
from pharmgap.domain.statistics import StatisticsEngine


class StatisticsInput:
    """Statistics Agent input"""
    def __init__(self, areas: list[AreaRecord], underserved_areas: Optional[int] = None):
        self.areas = areas
        self.underserved_areas = underserved_areas


class StatisticsAgent(BaseAgent[StatisticsInput, DashboardStatistics]):
    """Statistics Agent"""

    name = "StatisticsAgent"

    def __init__(self, official_population: Optional[int] = None):
        super().__init__()
        self.engine = StatisticsEngine(official_population=official_population)

    def _process(self, input_data: StatisticsInput) -> DashboardStatistics:
        stats = self.engine.compute(
            input_data.areas,
            underserved_areas=input_data.underserved_areas,
        )
        self.logger.info(
            f"{stats.district_count} areas, {stats.total_pharmacies} pharmacies, "
            f"{stats.total_hospitals} hospitals, {stats.potential_areas} with reported deficit"
        )
        return stats
