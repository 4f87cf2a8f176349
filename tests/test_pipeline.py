"""
PharmGap tests - Dashboard pipeline
"""

import json

import pytest
import sys
sys.path.insert(0, ".")

from pharmgap.config import settings
from pharmgap.data_sources.geojson_source import DataUnavailableError, GeoJSONSource
from pharmgap.pipeline import DashboardOrchestrator, LOAD_ERROR_MESSAGE


class TestDashboardOrchestrator:
    """End-to-end over the fixture dataset"""

    def _orchestrator(self, base, **kwargs):
        return DashboardOrchestrator(source=GeoJSONSource(base=str(base)), **kwargs)

    def test_full_run(self, data_dir):
        report = self._orchestrator(data_dir, official_population=None).run()

        assert report.ok
        assert report.error is None

        stats = report.statistics
        assert stats.total_population == 185830
        assert stats.reported_population == 185830
        assert stats.total_pharmacies == 20
        assert stats.total_hospitals == 4
        assert stats.potential_areas == 2
        assert stats.underserved_areas == 4
        assert stats.district_count == 5

        names = [row.name for row in report.recommendations]
        assert names == ["Mariso", "Barrang Lompo", "Lae-Lae", "Rusak"]
        assert report.recommendations[0].deficit_display == "+2"
        assert report.recommendations[0].rank_class == "gold"
        assert report.empty_message is None

        assert {layer.key for layer in report.layers} == {
            "business_insight", "pharmacy_coverage", "pharmacy_points"
        }

    def test_official_population(self, data_dir):
        report = self._orchestrator(data_dir, official_population=1477861).run()

        assert report.statistics.total_population == 185830
        assert report.statistics.reported_population == 1477861

    def test_official_population_from_settings(self, data_dir, monkeypatch):
        """Settings are read when the orchestrator is built, not at import"""
        monkeypatch.setattr(settings, "OFFICIAL_POPULATION_TOTAL", 500000)
        assert self._orchestrator(data_dir).statistics().reported_population == 500000

        monkeypatch.setattr(settings, "OFFICIAL_POPULATION_TOTAL", None)
        assert self._orchestrator(data_dir).statistics().reported_population == 185830

    def test_odd_geometry_still_renders(self, tmp_path):
        (tmp_path / "Layer5_Business_Insight.geojson").write_text(
            json.dumps({"type": "FeatureCollection", "features": [{
                "type": "Feature",
                "properties": {"nm_kelurah": "A", "data_fin_1": "9" * 5000, "JML_EXIST": "0"},
                "geometry": [1, 2],
            }]}),
            encoding="utf-8",
        )
        report = self._orchestrator(tmp_path).run()

        assert report.ok
        assert [row.name for row in report.recommendations] == ["A"]
        assert report.recommendations[0].population == 0

    def test_top_k(self, data_dir):
        report = self._orchestrator(data_dir, top_k=2).run(include_layers=False)

        assert len(report.recommendations) == 2
        assert report.layers == []

    def test_error_state(self, tmp_path):
        """Missing data: one error, nothing else rendered"""
        report = self._orchestrator(tmp_path).run()

        assert not report.ok
        assert report.error == LOAD_ERROR_MESSAGE
        assert report.statistics is None
        assert report.layers == []
        assert report.recommendations == []

    def test_empty_state(self, tmp_path):
        (tmp_path / "Layer5_Business_Insight.geojson").write_text(
            '{"type": "FeatureCollection", "features": ['
            '{"type": "Feature", "properties": {"nm_kelurah": "Full",'
            ' "data_fin_1": 83330, "JML_EXIST": 10}, "geometry": null}]}',
            encoding="utf-8",
        )
        report = self._orchestrator(tmp_path).run(include_layers=False)

        assert report.ok
        assert report.recommendations == []
        assert report.empty_message == "Tidak ada data area defisit"

    def test_detail(self, data_dir):
        orchestrator = self._orchestrator(data_dir)

        detail = orchestrator.detail("Lae-Lae")
        assert detail.deficit == 1
        assert detail.ideal_display == 1
        assert detail.status_label == "PASAR POTENSIAL"

        assert orchestrator.detail("Atlantis") is None

    def test_detail_matches_ranking(self, data_dir):
        orchestrator = self._orchestrator(data_dir)
        ranking = orchestrator.rank()

        for area in ranking.areas:
            if area.name is None:
                continue
            detail = orchestrator.detail(area.name)
            assert detail.deficit == area.deficit
            assert detail.ideal_facility_count == area.ideal_facility_count

    def test_rank_raises_without_data(self, tmp_path):
        with pytest.raises(DataUnavailableError):
            self._orchestrator(tmp_path).rank()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
