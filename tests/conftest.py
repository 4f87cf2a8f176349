"""
Shared fixtures: a small Makassar-like dataset written to tmp_path
"""

import json

import pytest


def feature(name, population, pharmacies, hospitals=0, deficit=None, density=None):
    props = {
        "nm_kelurah": name,
        "data_fin_1": population,
        "JML_EXIST": pharmacies,
        "JML_RS": hospitals,
    }
    if deficit is not None:
        props["DEFISIT"] = deficit
    if density is not None:
        props["Kepadataan"] = density

    return {
        "type": "Feature",
        "properties": props,
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[119.40, -5.10], [119.41, -5.10], [119.41, -5.11], [119.40, -5.10]]],
        },
    }


def collection(features):
    return {"type": "FeatureCollection", "features": features}


BUSINESS_FEATURES = [
    feature("Mariso", "100000", "10", hospitals="1", deficit="2", density="15500.2"),
    feature("Lae-Lae", 500, 0, deficit=0, density=9000),
    feature("Barrang Lompo", 2000, None, deficit="1", density="3100"),
    feature("Panakkukang", 83330, 10, hospitals=3, deficit=0, density=12500),
    feature("Rusak", "tidak ada", None),
]


@pytest.fixture
def business_collection():
    return collection(BUSINESS_FEATURES)


@pytest.fixture
def data_dir(tmp_path, business_collection):
    """Data folder with the business layer and two optional layers"""
    (tmp_path / "Layer5_Business_Insight.geojson").write_text(
        json.dumps(business_collection), encoding="utf-8"
    )
    (tmp_path / "titik_ap.geojson").write_text(
        json.dumps(collection([
            {"type": "Feature", "properties": {"NAMA": "Apotek Kimia Farma"},
             "geometry": {"type": "Point", "coordinates": [119.43, -5.14]}},
        ])),
        encoding="utf-8",
    )
    (tmp_path / "jangkauan_apotek.geojson").write_text(
        json.dumps(collection([])), encoding="utf-8"
    )
    # broken optional layer
    (tmp_path / "celah_pasar.geojson").write_text("{not json", encoding="utf-8")
    return tmp_path
