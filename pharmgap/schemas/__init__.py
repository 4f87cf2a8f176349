"""
PharmGap schema package
Input and output models shared by the engines, the API and the UI.
"""

from .area import AreaRecord
from .results import (
    AreaDetail,
    AreaMetrics,
    DashboardReport,
    DashboardStatistics,
    DensityBin,
    LayerKind,
    MapLayer,
    MarketStatus,
    RankedArea,
    RankingResult,
    RecommendationRow,
    ZeroFacilityEntry,
)

__all__ = [
    "AreaRecord",
    "AreaMetrics",
    "RankedArea",
    "RankingResult",
    "ZeroFacilityEntry",
    "DashboardStatistics",
    "MarketStatus",
    "RecommendationRow",
    "AreaDetail",
    "DensityBin",
    "LayerKind",
    "MapLayer",
    "DashboardReport",
]
