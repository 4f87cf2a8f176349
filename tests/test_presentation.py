"""
PharmGap tests - Presentation Engine
"""

import pytest
import sys
sys.path.insert(0, ".")

from pharmgap.domain.presentation import (
    PresentationEngine,
    format_population,
    market_status,
)
from pharmgap.domain.ranking import RankingEngine
from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import MarketStatus


class TestStatus:
    """Status label is a pure function of the underserved flag"""

    def test_labels(self):
        assert market_status(True) == MarketStatus.POTENTIAL
        assert market_status(False) == MarketStatus.SATURATED
        assert MarketStatus.POTENTIAL.label == "PASAR POTENSIAL"
        assert MarketStatus.SATURATED.label == "PASAR JENUH"

    def test_format_population(self):
        assert format_population(1477861) == "1.477.861"
        assert format_population(999) == "999"
        assert format_population(0) == "0"


class TestRecommendationRows:
    """Recommendations table"""

    def setup_method(self):
        self.engine = PresentationEngine()
        self.ranking = RankingEngine()

    def test_rank_classes(self):
        areas = [AreaRecord(name=f"a{i}", population=60000 - i * 1000) for i in range(5)]
        rows = self.engine.rows(self.ranking.rank(areas).top)

        assert [r.rank for r in rows] == [1, 2, 3, 4, 5]
        assert [r.rank_class for r in rows] == ["gold", "silver", "bronze", "default", "default"]

    def test_row_fields(self):
        area = self.ranking.derive(
            AreaRecord(name="Bontoala", population=25000, existing_facilities=1)
        )
        row = self.engine.row(area, 1)

        assert row.name == "Bontoala"
        assert row.population_display == "25.000"
        assert row.deficit == 2
        assert row.deficit_display == "+2"
        assert row.status == "potential"
        assert row.status_label == "PASAR POTENSIAL"
        assert row.no_facility is False

    def test_no_facility_badge(self):
        area = self.ranking.derive(AreaRecord(name=None, population=300))
        row = self.engine.row(area, 4)

        assert row.name == "N/A"
        assert row.no_facility is True
        assert row.deficit_display == "+1"

    def test_empty(self):
        assert self.engine.rows([]) == []


class TestAreaDetail:
    """Single-feature detail view"""

    def setup_method(self):
        self.engine = PresentationEngine()

    def test_ideal_display_minimum_one(self):
        detail = self.engine.detail(AreaRecord(name="Kodingareng", population=700))

        assert detail.ideal_facility_count == 0
        assert detail.ideal_display == 1
        assert detail.deficit == 1
        assert detail.deficit_display == "+1"
        assert detail.is_potential is True

    def test_saturated(self):
        detail = self.engine.detail(
            AreaRecord(name="Karuwisi", population=8333, existing_facilities=3)
        )

        assert detail.ideal_display == 1
        assert detail.deficit == -2
        assert detail.deficit_display == "-2"
        assert detail.status == "saturated"
        assert detail.status_label == "PASAR JENUH"

    def test_missing_name(self):
        assert self.engine.detail(AreaRecord()).name == "Unknown"


class TestDensityLegend:
    """Choropleth classes"""

    def setup_method(self):
        self.engine = PresentationEngine()

    @pytest.mark.parametrize("density,color", [
        (20000, "#800026"),
        (15000.5, "#800026"),
        (15000, "#BD0026"),
        (11000, "#E31A1C"),
        (9000, "#FC4E2A"),
        (7000, "#FD8D3C"),
        (5000, "#FEB24C"),
        (3000, "#FED976"),
        (2000, "#FFEDA0"),
        (0, "#FFEDA0"),
    ])
    def test_density_color(self, density, color):
        assert self.engine.density_color(density) == color

    def test_legend(self):
        legend = self.engine.legend()

        assert len(legend) == 8
        assert legend[0].upper is None
        assert legend[0].label == "> 15,000/km²"
        assert legend[1].label == "12,000 - 15,000"
        assert legend[-1].lower is None
        assert legend[-1].label == "< 2,000"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
