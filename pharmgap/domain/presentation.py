"""
Presentation engine
Turns ranking output into table rows, detail views and legend bins.
Produces plain data only; drawing is left to the UI layer.
"""

from typing import Optional

from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import (
    AreaDetail,
    DensityBin,
    MarketStatus,
    RankedArea,
    RecommendationRow,
)

from .metrics import DEFAULT_POLICY, ScoringPolicy, derive_metrics

EMPTY_TABLE_MESSAGE = "Tidak ada data area defisit"


def market_status(is_underserved: bool) -> MarketStatus:
    return MarketStatus.POTENTIAL if is_underserved else MarketStatus.SATURATED


def format_population(value: int) -> str:
    """Group thousands with dots (id-ID locale): 1477861 -> 1.477.861"""
    return f"{value:,}".replace(",", ".")


def signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


class PresentationEngine:
    """
    Presentation data builder

    The density classes match the choropleth legend of the dashboard map:
    a density falls in the first class whose threshold it strictly exceeds.
    """

    # (threshold, colour), highest first
    DENSITY_CLASSES = [
        (15000, "#800026"),
        (12000, "#BD0026"),
        (10000, "#E31A1C"),
        (8000, "#FC4E2A"),
        (6000, "#FD8D3C"),
        (4000, "#FEB24C"),
        (2000, "#FED976"),
    ]
    LOWEST_COLOR = "#FFEDA0"

    RANK_CLASSES = {1: "gold", 2: "silver", 3: "bronze"}

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        self.policy = policy or DEFAULT_POLICY

    # === Recommendations table ===

    def rows(self, ranked: list[RankedArea]) -> list[RecommendationRow]:
        """Table rows for ranked areas, rank 1 first."""
        return [self.row(area, i + 1) for i, area in enumerate(ranked)]

    def row(self, area: RankedArea, rank: int) -> RecommendationRow:
        status = market_status(area.is_underserved)

        if area.existing_facilities == 0 and area.deficit == 0:
            deficit_display = "-"
        else:
            deficit_display = f"+{area.deficit}"

        return RecommendationRow(
            rank=rank,
            rank_class=self.RANK_CLASSES.get(rank, "default"),
            name=area.name or "N/A",
            population=area.population,
            population_display=format_population(area.population),
            existing_facilities=area.existing_facilities,
            deficit=area.deficit,
            deficit_display=deficit_display,
            priority_score=round(area.priority_score, 2),
            status=status,
            status_label=status.label,
            no_facility=area.existing_facilities == 0,
        )

    # === Detail view ===

    def detail(self, area: AreaRecord) -> AreaDetail:
        """
        Detail view of one area (map popup).

        Recomputes ideal count and deficit through derive_metrics, the same
        function the ranking pass uses; no priority score is involved.
        """
        metrics = derive_metrics(area.population, area.existing_facilities, self.policy)
        status = market_status(metrics.is_underserved)
        no_facility = area.existing_facilities == 0

        return AreaDetail(
            name=area.name or "Unknown",
            population=area.population,
            population_display=format_population(area.population),
            existing_facilities=area.existing_facilities,
            ideal_facility_count=metrics.ideal_facility_count,
            ideal_display=max(metrics.ideal_facility_count, 1 if no_facility else 0),
            deficit=metrics.deficit,
            deficit_display=signed(metrics.deficit),
            is_potential=metrics.is_underserved,
            status=status,
            status_label=status.label,
        )

    # === Choropleth ===

    def density_color(self, density: float) -> str:
        for threshold, color in self.DENSITY_CLASSES:
            if density > threshold:
                return color
        return self.LOWEST_COLOR

    def legend(self) -> list[DensityBin]:
        """Legend bins, densest first."""
        bins = []
        upper = None
        for threshold, color in self.DENSITY_CLASSES:
            if upper is None:
                label = f"> {threshold:,}/km²"
            else:
                label = f"{threshold:,} - {upper:,}"
            bins.append(DensityBin(lower=threshold, upper=upper, color=color, label=label))
            upper = threshold

        bins.append(DensityBin(
            lower=None,
            upper=upper,
            color=self.LOWEST_COLOR,
            label=f"< {upper:,}",
        ))
        return bins
