"""
Data source module
"""

from .geojson_source import GeoJSONSource, DataUnavailableError

__all__ = [
    "GeoJSONSource",
    "DataUnavailableError",
]
