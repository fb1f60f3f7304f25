"""
Filtering and sorting of plant working sets.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from src.core.plants.commands import SortOrder
from src.core.plants.models import Plant, PlantField


SINGLE_FILTER_FIELDS = frozenset({
    PlantField.LANDSCAPING_ZONE,
    PlantField.LOCATION_PLACE,
    PlantField.PROSPERITY_PERIOD,
})

COMPOSITE_FILTER_FIELDS = (PlantField.LANDSCAPING_ZONE, PlantField.PROSPERITY_PERIOD)


@dataclass(frozen=True)
class FieldFilter:
    """Keep plants whose field contains the value (case-insensitive)."""
    field: PlantField
    value: str


@dataclass(frozen=True)
class CompositeFilter:
    """Keep plants matching both landscaping zone and prosperity period."""
    landscaping_zone: str
    prosperity_period: str


@dataclass(frozen=True)
class UnsupportedFilter:
    """Field combination without a filter; leaves plants unchanged."""
    fields: tuple[str, ...]


PlantFilter = Union[FieldFilter, CompositeFilter, UnsupportedFilter]


def contains_ignore_case(text: str, value: str) -> bool:
    """Substring check ignoring case. Empty value matches anything."""
    return value.casefold() in text.casefold()


def build_filter(fields: Sequence[str], values: Sequence[str]) -> PlantFilter:
    """Resolve selected field names and collected values into a filter."""
    fields = tuple(fields)

    if len(fields) == 1 and len(values) == 1:
        try:
            field = PlantField(fields[0])
        except ValueError:
            return UnsupportedFilter(fields)
        if field in SINGLE_FILTER_FIELDS:
            return FieldFilter(field, values[0])
        return UnsupportedFilter(fields)

    if fields == tuple(f.value for f in COMPOSITE_FILTER_FIELDS) and len(values) == 2:
        return CompositeFilter(values[0], values[1])

    return UnsupportedFilter(fields)


def apply_filter(plants: list[Plant], plant_filter: PlantFilter) -> list[Plant]:
    """
    Apply filter to plants.

    Returns a new list, except for UnsupportedFilter which returns
    the input list itself.
    """
    if isinstance(plant_filter, FieldFilter):
        return [
            p for p in plants
            if contains_ignore_case(p.value_of(plant_filter.field), plant_filter.value)
        ]
    if isinstance(plant_filter, CompositeFilter):
        return [
            p for p in plants
            if contains_ignore_case(p.landscaping_zone, plant_filter.landscaping_zone)
            and contains_ignore_case(p.prosperity_period, plant_filter.prosperity_period)
        ]
    return plants


def sort_by_latin_name(plants: list[Plant], order: SortOrder) -> None:
    """Sort plants in place by Latin name using code point comparison."""
    plants.sort(key=lambda p: p.latin_name, reverse=order is SortOrder.DESCENDING)
