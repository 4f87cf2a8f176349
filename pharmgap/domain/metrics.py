"""
Facility need metrics
The single home of the ideal-count, deficit and priority formulas.
Both the ranking pass and the single-area detail view call into here.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict

from pharmgap.parsing import parse_count
from pharmgap.schemas.results import AreaMetrics


class ScoringPolicy(BaseModel):
    """
    Ranking policy constants

    priority = deficit_weight * deficit
             + population_weight * (population / population_unit)
             + no_facility_weight * no_facility_points   (no pharmacy, population > threshold)
    """
    model_config = ConfigDict(frozen=True)

    population_per_facility: int = 8333
    deficit_weight: float = 0.7
    population_weight: float = 0.2
    population_unit: int = 10000
    no_facility_weight: float = 0.1
    no_facility_points: float = 10
    no_facility_min_population: int = 1000
    top_k: int = 10


DEFAULT_POLICY = ScoringPolicy()


def round_half_up(value: float) -> int:
    """Round .5 upwards, as the dataset's ideal counts were computed."""
    return math.floor(value + 0.5)


def ideal_facility_count(population: int, policy: ScoringPolicy = DEFAULT_POLICY) -> int:
    """Number of pharmacies the population would ideally support."""
    return round_half_up(population / policy.population_per_facility)


def derive_metrics(
    population: Any,
    existing_facilities: Any,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> AreaMetrics:
    """
    Derive ideal count and deficit for one area.

    Args:
        population: resident population, parsed leniently
        existing_facilities: pharmacies present, parsed leniently
        policy: ranking constants

    Returns:
        AreaMetrics: an area with no pharmacy always needs at least one,
        so its deficit is 1 even when the population rounds to an ideal of 0.
    """
    population = parse_count(population)
    existing_facilities = parse_count(existing_facilities)

    ideal = ideal_facility_count(population, policy)
    raw_deficit = ideal - existing_facilities

    if existing_facilities == 0 and ideal == 0:
        deficit = 1
    else:
        deficit = raw_deficit

    return AreaMetrics(
        ideal_facility_count=ideal,
        raw_deficit=raw_deficit,
        deficit=deficit,
        is_underserved=deficit > 0 or existing_facilities == 0,
    )


def priority_score(
    population: int,
    existing_facilities: int,
    deficit: int,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """Weighted priority of an area; the no-pharmacy bonus is one deficit unit."""
    deficit_score = deficit * policy.deficit_weight
    population_score = (population / policy.population_unit) * policy.population_weight

    bonus = 0.0
    if existing_facilities == 0 and population > policy.no_facility_min_population:
        bonus = policy.no_facility_weight * policy.no_facility_points

    return deficit_score + population_score + bonus
