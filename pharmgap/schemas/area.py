"""
Area schema
One record per administrative area (kelurahan) of the business insight layer.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pharmgap.parsing import parse_count, parse_int, parse_measure


class AreaRecord(BaseModel):
    """
    Area record

    Built from one GeoJSON feature. Numeric fields are coerced on the way
    in, so construction never fails on bad data: anything unreadable is 0.
    Geometry and the raw properties are carried through untouched.
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(
        default=None,
        description="Area display name",
        examples=["Bontoala"]
    )
    population: int = Field(
        default=0,
        ge=0,
        description="Resident population",
        examples=[23510]
    )
    existing_facilities: int = Field(
        default=0,
        ge=0,
        description="Pharmacies already operating in the area",
        examples=[2]
    )
    hospitals: int = Field(
        default=0,
        ge=0,
        description="Hospitals in the area"
    )
    reported_deficit: int = Field(
        default=0,
        description="Deficit as pre-computed in the dataset (statistics only)"
    )
    density: float = Field(
        default=0.0,
        description="Population density (people/km²)"
    )
    geometry: Any = Field(
        default=None,
        description="GeoJSON geometry, never inspected"
    )
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw feature properties"
    )

    @field_validator("population", "existing_facilities", "hospitals", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return parse_count(value)

    @field_validator("reported_deficit", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return parse_int(value)

    @field_validator("density", mode="before")
    @classmethod
    def _coerce_measure(cls, value: Any) -> float:
        return parse_measure(value)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value)
