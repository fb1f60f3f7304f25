"""
Plant record model shared by codecs, transforms and the dispatcher.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlantField(str, Enum):
    """Plant fields addressable from command tokens."""
    LANDSCAPING_ZONE = "LandscapingZone"
    LOCATION_PLACE = "LocationPlace"
    PROSPERITY_PERIOD = "ProsperityPeriod"
    LATIN_NAME = "LatinName"


class Plant(BaseModel):
    """
    Single botanical-garden plant record.

    All fields are opaque strings. Aliases are the JSON keys; the CSV column
    for `global_id` differs and is handled by the CSV codec.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(default="", alias="ID")
    name: str = Field(default="", alias="Name")
    latin_name: str = Field(default="", alias="LatinName")
    photo: str = Field(default="", alias="Photo")
    landscaping_zone: str = Field(default="", alias="LandscapingZone")
    prosperity_period: str = Field(default="", alias="ProsperityPeriod")
    description: str = Field(default="", alias="Description")
    location_place: str = Field(default="", alias="LocationPlace")
    view_form: str = Field(default="", alias="ViewForm")
    global_id: str = Field(default="", alias="GlobalId")

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def value_of(self, field: PlantField) -> str:
        """Get value of an addressable field."""
        return getattr(self, _ATTRIBUTES[field])


_ATTRIBUTES = {
    PlantField.LANDSCAPING_ZONE: "landscaping_zone",
    PlantField.LOCATION_PLACE: "location_place",
    PlantField.PROSPERITY_PERIOD: "prosperity_period",
    PlantField.LATIN_NAME: "latin_name",
}
