"""
PharmGap settings

All values can be overridden from the .env file.
Usage:
    from pharmgap.config import settings
    path = settings.DATA_DIR
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore variables not declared here
    )

    # === Environment ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === Datasets ===
    # A local directory or an http(s) base URL
    DATA_DIR: str = "./data"
    HTTP_TIMEOUT: int = 30

    DATASET_FILES: dict = {
        "business_insight": "Layer5_Business_Insight.geojson",
        "market_gap": "celah_pasar.geojson",
        "pharmacy_coverage": "jangkauan_apotek.geojson",
        "hospital_coverage": "jangkauan_rs.geojson",
        "pharmacy_points": "titik_ap.geojson",
        "hospital_points": "titik_rs.geojson",
        "road_network": "jaringan_jalan.geojson",
    }

    # === Feature property names (business insight layer) ===
    FIELD_NAME: str = "nm_kelurah"
    FIELD_POPULATION: str = "data_fin_1"
    FIELD_PHARMACIES: str = "JML_EXIST"
    FIELD_HOSPITALS: str = "JML_RS"
    FIELD_REPORTED_DEFICIT: str = "DEFISIT"
    FIELD_DENSITY: str = "Kepadataan"

    # === Dashboard ===
    # Official BPS population for Makassar; replaces the summed figure when set
    OFFICIAL_POPULATION_TOTAL: Optional[int] = 1477861
    RECOMMENDATION_LIMIT: int = 10

    # === Map (Makassar) ===
    MAP_CENTER: tuple[float, float] = (-5.1477, 119.4327)
    MAP_ZOOM: int = 12


# singleton instance
settings = Settings()
