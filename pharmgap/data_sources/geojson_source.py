"""
GeoJSON data source
Loads the pre-computed datasets of the dashboard from a local directory
or an http(s) base URL.
- business insight layer (required): one feature per kelurah
- coverage, market-gap, road and facility point layers (optional)
"""

import json
from pathlib import Path
from typing import Any, Optional

import httpx
from loguru import logger

from pharmgap.config import settings
from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import LayerKind, MapLayer


class DataUnavailableError(Exception):
    """The primary dataset could not be loaded"""
    pass


class GeoJSONSource:
    """
    GeoJSON dataset loader

    Each dataset is fetched at most once per source instance. A failure on
    the business insight layer raises DataUnavailableError; a failure on an
    optional layer is logged and the layer skipped.
    """

    PRIMARY_DATASET = "business_insight"

    # key -> (title, kind, pane z-index), in layer-control order
    LAYERS = {
        "business_insight": ("Kepadatan Penduduk (Choropleth)", LayerKind.BASE, 400),
        "road_network": ("Jaringan Jalan", LayerKind.OVERLAY, 450),
        "market_gap": ("Celah Pasar", LayerKind.OVERLAY, 450),
        "pharmacy_coverage": ("Jangkauan Apotek", LayerKind.OVERLAY, 450),
        "hospital_coverage": ("Jangkauan Rumah Sakit", LayerKind.OVERLAY, 450),
        "pharmacy_points": ("Lokasi Apotek", LayerKind.POINT, 500),
        "hospital_points": ("Lokasi Rumah Sakit", LayerKind.POINT, 500),
    }

    def __init__(
        self,
        base: Optional[str] = None,
        files: Optional[dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base = base or settings.DATA_DIR
        self.files = files or dict(settings.DATASET_FILES)
        self._client = client
        self._cache: dict[str, dict] = {}
        self.logger = logger.bind(source="GeoJSONSource")

    @property
    def is_remote(self) -> bool:
        return self.base.startswith(("http://", "https://"))

    def close(self):
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ==================== Areas ====================

    def load_areas(self) -> list[AreaRecord]:
        """
        Load the business insight layer as area records.

        Raises:
            DataUnavailableError: the dataset is missing, unreadable or
                not a FeatureCollection-shaped object
        """
        collection = self.load_collection(self.PRIMARY_DATASET)
        areas = [self.to_area(feature) for feature in collection["features"]]
        self.logger.info(f"Loaded {len(areas)} areas")
        return areas

    @staticmethod
    def to_area(feature: dict) -> AreaRecord:
        """Map one feature onto an area record using the configured field names."""
        props = feature.get("properties")
        if not isinstance(props, dict):
            props = {}

        return AreaRecord(
            name=props.get(settings.FIELD_NAME),
            population=props.get(settings.FIELD_POPULATION),
            existing_facilities=props.get(settings.FIELD_PHARMACIES),
            hospitals=props.get(settings.FIELD_HOSPITALS),
            reported_deficit=props.get(settings.FIELD_REPORTED_DEFICIT),
            density=props.get(settings.FIELD_DENSITY),
            geometry=feature.get("geometry"),
            properties=props,
        )

    # ==================== Layers ====================

    def load_layers(self) -> list[MapLayer]:
        """Load every configured layer that is available."""
        layers = []

        for key, (title, kind, z_index) in self.LAYERS.items():
            if key not in self.files:
                continue
            try:
                collection = self.load_collection(key)
            except DataUnavailableError as e:
                if key == self.PRIMARY_DATASET:
                    raise
                self.logger.warning(f"{title} not found: {e}")
                continue

            layers.append(MapLayer(
                key=key,
                title=title,
                kind=kind,
                pane_z_index=z_index,
                feature_count=len(collection["features"]),
                data=collection,
            ))
            self.logger.info(f"{title} loaded")

        return layers

    # ==================== Fetching ====================

    def load_collection(self, key: str) -> dict:
        """Load and validate one dataset, cached per instance."""
        if key in self._cache:
            return self._cache[key]

        if key not in self.files:
            raise DataUnavailableError(f"Unknown dataset: {key}")

        location = self._location(self.files[key])
        payload = self._read(location)
        collection = self._validate(payload, location)

        self._cache[key] = collection
        return collection

    def _location(self, filename: str) -> str:
        if self.is_remote:
            return f"{self.base.rstrip('/')}/{filename}"
        return str(Path(self.base) / filename)

    def _read(self, location: str) -> Any:
        if self.is_remote:
            return self._read_remote(location)
        return self._read_local(location)

    def _read_local(self, location: str) -> Any:
        path = Path(location)
        if not path.exists():
            raise DataUnavailableError(f"File not found: {location}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise DataUnavailableError(f"Cannot read {location}: {e}") from e

    def _read_remote(self, location: str) -> Any:
        if self._client is None:
            self._client = httpx.Client(timeout=settings.HTTP_TIMEOUT)

        try:
            response = self._client.get(location)
        except httpx.HTTPError as e:
            raise DataUnavailableError(f"Request failed for {location}: {e}") from e

        if response.status_code != 200:
            raise DataUnavailableError(f"HTTP {response.status_code} for {location}")

        try:
            return response.json()
        except ValueError as e:
            raise DataUnavailableError(f"Invalid JSON from {location}: {e}") from e

    @staticmethod
    def _validate(payload: Any, location: str) -> dict:
        """Top-level shape check; feature contents are never validated here."""
        if not isinstance(payload, dict):
            raise DataUnavailableError(f"{location}: expected a GeoJSON object")

        features = payload.get("features")
        if not isinstance(features, list):
            raise DataUnavailableError(f"{location}: missing 'features' list")

        if any(not isinstance(feature, dict) for feature in features):
            raise DataUnavailableError(f"{location}: every feature must be an object")

        return payload
