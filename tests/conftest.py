import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for `import src`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.core.plants.models import Plant


class RecordingSink:
    """Chat sink that keeps everything it was asked to send."""

    def __init__(self):
        self.texts: list[tuple[int, str]] = []
        self.buttons: list[tuple[int, str, list]] = []
        self.documents: list[tuple[int, str, bytes]] = []

    async def send_text(self, chat_id, text):
        self.texts.append((chat_id, text))

    async def send_buttons(self, chat_id, text, buttons):
        self.buttons.append((chat_id, text, [list(row) for row in buttons]))

    async def send_document(self, chat_id, filename, payload):
        self.documents.append((chat_id, filename, payload))

    @property
    def last_text(self) -> str:
        return self.texts[-1][1]


def make_plant(
    id: str,
    latin_name: str = "",
    landscaping_zone: str = "",
    prosperity_period: str = "",
    location_place: str = "",
    **extra,
) -> Plant:
    return Plant(
        id=id,
        name=extra.pop("name", f"Растение {id}"),
        latin_name=latin_name,
        photo=extra.pop("photo", ""),
        landscaping_zone=landscaping_zone,
        prosperity_period=prosperity_period,
        description=extra.pop("description", ""),
        location_place=location_place,
        view_form=extra.pop("view_form", ""),
        global_id=extra.pop("global_id", f"10{id}"),
    )


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def plants() -> list[Plant]:
    return [
        make_plant(
            "1",
            latin_name="Rosa canina",
            landscaping_zone="Rose Alley",
            prosperity_period="июнь-июль",
            location_place="Северный вход",
            description="Шиповник; \"дикая\" роза",
        ),
        make_plant(
            "2",
            latin_name="Acer platanoides",
            landscaping_zone="Парк",
            prosperity_period="май",
            location_place="Центральная аллея",
        ),
        make_plant(
            "3",
            latin_name="Tilia cordata",
            landscaping_zone="ALLEY of limes",
            prosperity_period="июль",
            location_place="Южный вход",
        ),
    ]
