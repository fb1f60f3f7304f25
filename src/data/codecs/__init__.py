"""
Plant file codecs for different file formats.
"""

from pathlib import PurePath

from src.data.codecs.base import BaseCodec
from src.data.codecs.csv_codec import CSVPlantCodec
from src.data.codecs.json_codec import JSONPlantCodec


def default_codecs() -> dict[str, BaseCodec]:
    """Codecs keyed by lowercase file extension."""
    codecs: list[BaseCodec] = [CSVPlantCodec(), JSONPlantCodec()]
    return {codec.extension: codec for codec in codecs}


def get_codec(filename: str, codecs: dict[str, BaseCodec]) -> BaseCodec | None:
    """
    Pick codec by file extension.

    Returns:
        Matching codec or None if format is not supported
    """
    suffix = PurePath(filename).suffix.lower()
    return codecs.get(suffix)


__all__ = [
    "BaseCodec",
    "CSVPlantCodec",
    "JSONPlantCodec",
    "default_codecs",
    "get_codec",
]
