"""
Result schemas
Outputs of the metrics, ranking, statistics and presentation engines.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .area import AreaRecord


class MarketStatus(str, Enum):
    """Market status of an area"""
    POTENTIAL = "potential"
    SATURATED = "saturated"

    @property
    def label(self) -> str:
        return "PASAR POTENSIAL" if self is MarketStatus.POTENTIAL else "PASAR JENUH"


class AreaMetrics(BaseModel):
    """Facility need of one area"""
    model_config = ConfigDict(frozen=True)

    ideal_facility_count: int = Field(ge=0, description="round(population / 8333)")
    raw_deficit: int = Field(description="ideal - existing, before the override")
    deficit: int = Field(description="Deficit with the zero-provision override applied")
    is_underserved: bool = Field(description="deficit > 0 or no facility present")


class RankedArea(AreaRecord):
    """
    Area record with its derived ranking fields
    Derived fresh for every ranking request.
    """
    ideal_facility_count: int = Field(ge=0)
    deficit: int
    priority_score: float = Field(description="Weighted priority, higher ranks first")
    is_underserved: bool


class ZeroFacilityEntry(BaseModel):
    """Where an area without any pharmacy landed in the ranking"""
    name: Optional[str]
    population: int
    ideal_facility_count: int
    deficit: int
    priority_score: float
    rank: Optional[int] = Field(
        default=None,
        description="1-based rank among underserved areas, None if filtered out"
    )
    in_top: bool = Field(default=False, description="Made the top-K list")


class RankingResult(BaseModel):
    """
    Ranking Engine output

    `top` is the primary result. `areas` keeps every derived record in
    input order for statistics and debugging.
    """
    top: list[RankedArea] = Field(default_factory=list, description="Top-K underserved areas")
    ranked: list[RankedArea] = Field(
        default_factory=list,
        description="All underserved areas, by descending priority"
    )
    areas: list[RankedArea] = Field(
        default_factory=list,
        description="Every area with derived fields, input order"
    )
    zero_facility_areas: list[ZeroFacilityEntry] = Field(default_factory=list)

    @property
    def underserved_count(self) -> int:
        return len(self.ranked)


class DashboardStatistics(BaseModel):
    """Headline numbers of the dashboard"""
    total_population: int = Field(description="Sum of area populations")
    reported_population: int = Field(
        description="Population shown on the dashboard (official figure when configured)"
    )
    total_pharmacies: int
    total_hospitals: int
    potential_areas: int = Field(
        description="Areas whose reported DEFISIT is positive (not the ranking's underserved count)"
    )
    underserved_areas: Optional[int] = Field(
        default=None,
        description="Areas flagged by the ranking engine"
    )
    district_count: int = Field(description="Number of areas in the dataset")


class RecommendationRow(BaseModel):
    """One row of the recommendations table"""
    model_config = ConfigDict(use_enum_values=True)

    rank: int = Field(ge=1)
    rank_class: str = Field(examples=["gold", "silver", "bronze", "default"])
    name: str
    population: int
    population_display: str = Field(examples=["23.510"])
    existing_facilities: int
    deficit: int
    deficit_display: str = Field(examples=["+3", "-"])
    priority_score: float
    status: MarketStatus
    status_label: str
    no_facility: bool = Field(description="Show the 'Tanpa Apotek' badge")


class AreaDetail(BaseModel):
    """Single-feature detail view (map popup data)"""
    model_config = ConfigDict(use_enum_values=True)

    name: str
    population: int
    population_display: str
    existing_facilities: int
    ideal_facility_count: int
    ideal_display: int = Field(description="Ideal count, at least 1 when no facility exists")
    deficit: int
    deficit_display: str = Field(examples=["+2", "0", "-1"])
    is_potential: bool
    status: MarketStatus
    status_label: str


class DensityBin(BaseModel):
    """Choropleth class"""
    lower: Optional[float] = Field(description="Exclusive lower bound, None for the lowest bin")
    upper: Optional[float] = Field(description="Inclusive upper bound, None for the highest bin")
    color: str
    label: str


class LayerKind(str, Enum):
    """Role of a layer in the layer-toggle control"""
    BASE = "base"
    OVERLAY = "overlay"
    POINT = "point"


class MapLayer(BaseModel):
    """A dataset loaded for the map"""
    model_config = ConfigDict(use_enum_values=True)

    key: str
    title: str
    kind: LayerKind
    pane_z_index: int
    feature_count: int
    data: dict = Field(default_factory=dict, exclude=True)


class DashboardReport(BaseModel):
    """
    Dashboard Orchestrator output

    When `error` is set every other region is empty: the page shows the
    error state instead of partial results.
    """
    created_at: datetime = Field(default_factory=datetime.now)
    error: Optional[str] = None
    statistics: Optional[DashboardStatistics] = None
    layers: list[MapLayer] = Field(default_factory=list)
    recommendations: list[RecommendationRow] = Field(default_factory=list)
    empty_message: Optional[str] = Field(
        default=None,
        description="Shown instead of the table when nothing qualifies"
    )
    map_center: tuple[float, float] = (-5.1477, 119.4327)
    map_zoom: int = 12

    @property
    def ok(self) -> bool:
        return self.error is None
