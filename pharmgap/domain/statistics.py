"""
Statistics engine
Headline numbers for the dashboard cards.
"""

from typing import Iterable, Optional

from loguru import logger

from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import DashboardStatistics


class StatisticsEngine:
    """
    Dashboard statistics

    `potential_areas` counts the dataset's own DEFISIT column (> 0). It is
    not the ranking engine's underserved count, which also flags every
    area without a pharmacy; both are reported side by side.
    """

    def __init__(self, official_population: Optional[int] = None):
        self.official_population = official_population

    def compute(
        self,
        areas: Iterable[AreaRecord],
        underserved_areas: Optional[int] = None,
    ) -> DashboardStatistics:
        total_population = 0
        total_pharmacies = 0
        total_hospitals = 0
        potential_areas = 0
        district_count = 0

        for area in areas:
            district_count += 1
            total_population += area.population
            total_pharmacies += area.existing_facilities
            total_hospitals += area.hospitals
            if area.reported_deficit > 0:
                potential_areas += 1

        reported_population = total_population
        if self.official_population is not None:
            reported_population = self.official_population

        stats = DashboardStatistics(
            total_population=total_population,
            reported_population=reported_population,
            total_pharmacies=total_pharmacies,
            total_hospitals=total_hospitals,
            potential_areas=potential_areas,
            underserved_areas=underserved_areas,
            district_count=district_count,
        )

        logger.debug(f"Statistics: {stats.model_dump()}")
        return stats
