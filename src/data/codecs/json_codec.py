"""
JSON codec for plant datasets.
"""

import json
import logging
from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from src.core.plants.errors import DecodeError
from src.core.plants.models import Plant
from src.data.codecs.base import BaseCodec

logger = logging.getLogger(__name__)

_plant_list = TypeAdapter(list[Plant])


class JSONPlantCodec(BaseCodec):
    """Codec for JSON arrays of plant objects."""

    INDENT = 2

    @property
    def extension(self) -> str:
        return ".json"

    def decode(self, payload: bytes) -> list[Plant]:
        try:
            text = payload.decode("utf-8-sig")
            plants = _plant_list.validate_json(text)
        except (UnicodeDecodeError, ValidationError) as e:
            raise DecodeError(f"Malformed JSON: {e}") from e

        logger.debug(f"Decoded {len(plants)} plants from JSON")
        return plants

    def encode(self, plants: Sequence[Plant]) -> bytes:
        data = [plant.model_dump(by_alias=True) for plant in plants]
        return json.dumps(data, ensure_ascii=False, indent=self.INDENT).encode("utf-8")
