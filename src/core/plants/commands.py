"""
Callback command tokens.

Tokens arriving from inline buttons are parsed once into command objects,
the dispatcher then routes by command type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from src.core.plants.errors import UnrecognizedToken


SELECT_PREFIX = "select_"
FIELD_SEPARATOR = "+"


class SortOrder(Enum):
    """Sort direction."""
    ASCENDING = "asc"
    DESCENDING = "desc"


class ExportFormat(Enum):
    """Download format."""
    CSV = "csv"
    JSON = "json"

    @property
    def filename(self) -> str:
        return f"plants.{self.value}"


@dataclass(frozen=True)
class SelectFilter:
    """User picked a field (or field pair) to filter by."""
    fields: tuple[str, ...]


@dataclass(frozen=True)
class Sort:
    """Sort working set by Latin name."""
    order: SortOrder


@dataclass(frozen=True)
class Download:
    """Send working set back as a file."""
    format: ExportFormat


Command = Union[SelectFilter, Sort, Download]


_EXACT_COMMANDS: dict[str, Command] = {
    "sort_LatinName_asc": Sort(SortOrder.ASCENDING),
    "sort_LatinName_desc": Sort(SortOrder.DESCENDING),
    "download_csv": Download(ExportFormat.CSV),
    "download_json": Download(ExportFormat.JSON),
}


def parse_command(token: str) -> Command:
    """
    Parse callback token into a command.

    Raises:
        UnrecognizedToken: If token matches no known command
    """
    if token.startswith(SELECT_PREFIX):
        fields = tuple(
            part for part in token[len(SELECT_PREFIX):].split(FIELD_SEPARATOR) if part
        )
        if 1 <= len(fields) <= 2:
            return SelectFilter(fields)
        raise UnrecognizedToken(token)

    try:
        return _EXACT_COMMANDS[token]
    except KeyError:
        raise UnrecognizedToken(token) from None


def select_token(*fields: str) -> str:
    """Build filter selection token for given fields."""
    return SELECT_PREFIX + FIELD_SEPARATOR.join(fields)
