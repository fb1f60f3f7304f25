"""
CSV codec for plant datasets.
Semicolon separated, UTF-8 with BOM, all fields quoted, English header row
followed by a Russian one.
"""

import csv
import io
import logging
from typing import Sequence

import pandas as pd

from src.core.plants.errors import DecodeError
from src.core.plants.models import Plant
from src.data.codecs.base import BaseCodec

logger = logging.getLogger(__name__)


class CSVPlantCodec(BaseCodec):
    """Codec for semicolon separated plant files."""

    DELIMITER = ";"
    ENCODING = "utf-8-sig"
    LINE_TERMINATOR = "\r\n"

    # CSV column -> Plant attribute
    COLUMNS = {
        "ID": "id",
        "Name": "name",
        "LatinName": "latin_name",
        "Photo": "photo",
        "LandscapingZone": "landscaping_zone",
        "ProsperityPeriod": "prosperity_period",
        "Description": "description",
        "LocationPlace": "location_place",
        "ViewForm": "view_form",
        "global_id": "global_id",
    }

    RUSSIAN_HEADER = [
        "Код",
        "Название",
        "Латинское название",
        "Фотография",
        "Ландшафтная зона",
        "Период цветения",
        "Описание",
        "Расположение в парке",
        "Форма осмотра",
        "global_id",
    ]

    # First cell of the Russian header row
    RUSSIAN_HEADER_MARKER = "Код"

    @property
    def extension(self) -> str:
        return ".csv"

    def decode(self, payload: bytes) -> list[Plant]:
        try:
            df = pd.read_csv(
                io.BytesIO(payload),
                sep=self.DELIMITER,
                encoding=self.ENCODING,
                index_col=False,
                dtype=str,
                keep_default_na=False,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise DecodeError(f"Malformed CSV: {e}") from e

        missing = [column for column in self.COLUMNS if column not in df.columns]
        if missing:
            raise DecodeError(f"CSV header is missing columns: {', '.join(missing)}")

        df = df[df["ID"] != self.RUSSIAN_HEADER_MARKER]

        plants = [
            Plant(**{attr: row[column] for column, attr in self.COLUMNS.items()})
            for row in df.to_dict("records")
        ]
        logger.debug(f"Decoded {len(plants)} plants from CSV")
        return plants

    def encode(self, plants: Sequence[Plant]) -> bytes:
        rows = [self.RUSSIAN_HEADER]
        for plant in plants:
            rows.append([getattr(plant, attr) for attr in self.COLUMNS.values()])

        df = pd.DataFrame(rows, columns=list(self.COLUMNS))
        buffer = io.BytesIO()
        df.to_csv(
            buffer,
            sep=self.DELIMITER,
            index=False,
            quoting=csv.QUOTE_ALL,
            encoding=self.ENCODING,
            lineterminator=self.LINE_TERMINATOR,
        )
        return buffer.getvalue()
