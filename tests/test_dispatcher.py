import asyncio

import pytest

from conftest import make_plant
from src.core.plants import messages
from src.core.plants.dispatcher import PlantDispatcher
from src.core.plants.errors import TransportFailure
from src.core.plants.events import CallbackEvent, DocumentEvent, TextEvent
from src.data.codecs import CSVPlantCodec, JSONPlantCodec

CHAT = 100


@pytest.fixture
def dispatcher(sink) -> PlantDispatcher:
    return PlantDispatcher(sink=sink)


@pytest.fixture
def loaded(dispatcher, plants) -> PlantDispatcher:
    dispatcher.store.set_plants(CHAT, plants)
    return dispatcher


@pytest.mark.asyncio
async def test_start_sends_welcome(dispatcher, sink):
    await dispatcher.handle(TextEvent(CHAT, "/start"))
    assert sink.texts == [(CHAT, messages.WELCOME_MESSAGE)]


@pytest.mark.asyncio
async def test_unknown_text(dispatcher, sink):
    await dispatcher.handle(TextEvent(CHAT, "hello"))
    assert sink.last_text == messages.UNKNOWN_COMMAND_MESSAGE


@pytest.mark.asyncio
async def test_none_event_is_ignored(dispatcher, sink):
    await dispatcher.handle(None)
    assert sink.texts == [] and sink.buttons == [] and sink.documents == []


@pytest.mark.asyncio
async def test_upload_csv_and_filter_scenario(dispatcher, sink, plants):
    payload = CSVPlantCodec().encode(plants)

    await dispatcher.handle(DocumentEvent(CHAT, "garden.csv", payload))
    assert dispatcher.store.get_plants(CHAT) == plants
    chat_id, text, rows = sink.buttons[-1]
    assert (chat_id, text) == (CHAT, messages.CHOOSE_ACTION_MESSAGE)
    assert rows == [list(row) for row in messages.ACTION_BUTTONS]

    await dispatcher.handle(CallbackEvent(CHAT, "select_LandscapingZone"))
    assert sink.last_text == messages.field_prompt("LandscapingZone")
    assert "LandscapingZone" in sink.last_text

    await dispatcher.handle(TextEvent(CHAT, "Alley"))
    assert [p.id for p in dispatcher.store.get_plants(CHAT)] == ["1", "3"]
    assert sink.last_text == messages.filter_done("LandscapingZone", 2)
    assert dispatcher.store.get_pending_filter(CHAT) is None

    # Filter input is over, text is unknown again
    await dispatcher.handle(TextEvent(CHAT, "Alley"))
    assert sink.last_text == messages.UNKNOWN_COMMAND_MESSAGE


@pytest.mark.asyncio
async def test_upload_json(dispatcher, sink, plants):
    payload = JSONPlantCodec().encode(plants)
    await dispatcher.handle(DocumentEvent(CHAT, "PLANTS.JSON", payload))
    assert dispatcher.store.get_plants(CHAT) == plants
    assert len(sink.buttons) == 1


@pytest.mark.asyncio
async def test_upload_unsupported_extension(loaded, sink, plants):
    await loaded.handle(DocumentEvent(CHAT, "plants.xlsx", b"whatever"))
    assert sink.last_text == messages.UNSUPPORTED_FORMAT_MESSAGE
    assert loaded.store.get_plants(CHAT) == plants


@pytest.mark.asyncio
async def test_upload_malformed_keeps_working_set(loaded, sink, plants):
    await loaded.handle(DocumentEvent(CHAT, "plants.json", b"{broken"))
    assert sink.last_text == messages.UNREADABLE_FILE_MESSAGE
    assert loaded.store.get_plants(CHAT) == plants
    assert sink.buttons == []


@pytest.mark.asyncio
async def test_new_upload_replaces_working_set(loaded, sink):
    other = [make_plant("9", "Quercus robur")]
    await loaded.handle(DocumentEvent(CHAT, "new.json", JSONPlantCodec().encode(other)))
    assert loaded.store.get_plants(CHAT) == other


@pytest.mark.asyncio
async def test_callback_without_data(dispatcher, sink):
    await dispatcher.handle(CallbackEvent(CHAT, "sort_LatinName_asc"))
    assert sink.texts == [(CHAT, messages.NO_DATA_MESSAGE)]
    assert dispatcher.store.get_plants(CHAT) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["select_LandscapingZone", "download_csv", "nonsense"])
async def test_any_callback_without_data_reports_no_data(dispatcher, sink, token):
    await dispatcher.handle(CallbackEvent(CHAT, token))
    assert sink.last_text == messages.NO_DATA_MESSAGE
    assert dispatcher.store.get_pending_filter(CHAT) is None


@pytest.mark.asyncio
async def test_unknown_token_is_silently_dropped(loaded, sink, plants, caplog):
    await loaded.handle(CallbackEvent(CHAT, "explode"))
    assert sink.texts == [] and sink.documents == []
    assert loaded.store.get_plants(CHAT) == plants
    assert "explode" in caplog.text


@pytest.mark.asyncio
async def test_sort_callbacks(loaded, sink):
    await loaded.handle(CallbackEvent(CHAT, "sort_LatinName_asc"))
    ascending = [p.id for p in loaded.store.get_plants(CHAT)]
    assert ascending == ["2", "1", "3"]
    assert sink.last_text == "✅Данные отсортированы по полю LatinName в прямом порядке"

    await loaded.handle(CallbackEvent(CHAT, "sort_LatinName_desc"))
    assert [p.id for p in loaded.store.get_plants(CHAT)] == list(reversed(ascending))
    assert sink.last_text == "✅Данные отсортированы по полю LatinName в обратном порядке"


@pytest.mark.asyncio
async def test_download_csv_round_trips(dispatcher, sink, plants):
    dispatcher.store.set_plants(CHAT, plants[:2])

    await dispatcher.handle(CallbackEvent(CHAT, "download_csv"))

    chat_id, filename, payload = sink.documents[-1]
    assert (chat_id, filename) == (CHAT, "plants.csv")
    assert CSVPlantCodec().decode(payload) == plants[:2]
    assert dispatcher.store.get_plants(CHAT) == plants[:2]


@pytest.mark.asyncio
async def test_download_json(loaded, sink, plants):
    await loaded.handle(CallbackEvent(CHAT, "download_json"))
    chat_id, filename, payload = sink.documents[-1]
    assert filename == "plants.json"
    assert JSONPlantCodec().decode(payload) == plants


@pytest.mark.asyncio
async def test_composite_filter_waits_for_second_value(loaded, sink):
    await loaded.handle(CallbackEvent(CHAT, "select_LandscapingZone+ProsperityPeriod"))
    assert sink.last_text == messages.field_prompt("LandscapingZone")

    await loaded.handle(TextEvent(CHAT, "alley"))
    assert sink.last_text == messages.field_prompt("ProsperityPeriod")
    assert len(loaded.store.get_plants(CHAT)) == 3
    assert loaded.store.get_pending_filter(CHAT).values == ["alley"]

    await loaded.handle(TextEvent(CHAT, "ИЮЛЬ"))
    assert [p.id for p in loaded.store.get_plants(CHAT)] == ["1", "3"]
    assert sink.last_text == messages.filter_done("LandscapingZone+ProsperityPeriod", 2)
    assert loaded.store.get_pending_filter(CHAT) is None


@pytest.mark.asyncio
async def test_start_during_filter_input_keeps_pending(loaded, sink):
    await loaded.handle(CallbackEvent(CHAT, "select_LocationPlace"))
    await loaded.handle(TextEvent(CHAT, "/start"))
    assert sink.last_text == messages.WELCOME_MESSAGE
    assert loaded.store.get_pending_filter(CHAT) is not None


@pytest.mark.asyncio
async def test_new_selection_overwrites_pending(loaded, sink):
    await loaded.handle(CallbackEvent(CHAT, "select_LandscapingZone+ProsperityPeriod"))
    await loaded.handle(TextEvent(CHAT, "alley"))
    await loaded.handle(CallbackEvent(CHAT, "select_LocationPlace"))

    await loaded.handle(TextEvent(CHAT, "южный"))
    assert [p.id for p in loaded.store.get_plants(CHAT)] == ["3"]
    assert sink.last_text == messages.filter_done("LocationPlace", 1)


@pytest.mark.asyncio
async def test_unsupported_field_keeps_working_set(loaded, sink, plants):
    await loaded.handle(CallbackEvent(CHAT, "select_Color"))
    assert sink.last_text == messages.field_prompt("Color")

    await loaded.handle(TextEvent(CHAT, "red"))
    assert loaded.store.get_plants(CHAT) == plants
    assert sink.last_text == messages.filter_done("Color", 3)


@pytest.mark.asyncio
async def test_filter_to_nothing_then_callback_reports_no_data(loaded, sink):
    await loaded.handle(CallbackEvent(CHAT, "select_LandscapingZone"))
    await loaded.handle(TextEvent(CHAT, "пустыня"))
    assert sink.last_text == messages.filter_done("LandscapingZone", 0)

    await loaded.handle(CallbackEvent(CHAT, "download_csv"))
    assert sink.last_text == messages.NO_DATA_MESSAGE
    assert sink.documents == []


@pytest.mark.asyncio
async def test_chats_do_not_share_state(loaded, sink):
    await loaded.handle(CallbackEvent(CHAT + 1, "sort_LatinName_asc"))
    assert sink.texts == [(CHAT + 1, messages.NO_DATA_MESSAGE)]

    await loaded.handle(CallbackEvent(CHAT, "select_LandscapingZone"))
    await loaded.handle(TextEvent(CHAT + 1, "Alley"))
    assert sink.last_text == messages.UNKNOWN_COMMAND_MESSAGE
    assert len(loaded.store.get_plants(CHAT)) == 3


class FailingSink:
    async def send_text(self, chat_id, text):
        raise TransportFailure("network down")

    async def send_buttons(self, chat_id, text, buttons):
        raise RuntimeError("boom")

    async def send_document(self, chat_id, filename, payload):
        raise TransportFailure("network down")


@pytest.mark.asyncio
async def test_send_failures_are_logged_not_raised(plants, caplog):
    dispatcher = PlantDispatcher(sink=FailingSink())
    dispatcher.store.set_plants(CHAT, plants)

    await dispatcher.handle(CallbackEvent(CHAT, "select_LandscapingZone"))
    # State changed before the failed prompt
    assert dispatcher.store.get_pending_filter(CHAT) is not None
    assert "network down" in caplog.text

    await dispatcher.handle(DocumentEvent(CHAT, "p.json", JSONPlantCodec().encode(plants[:1])))
    assert "boom" in caplog.text
    assert dispatcher.store.get_plants(CHAT) == plants[:1]


@pytest.mark.asyncio
async def test_same_chat_events_are_serialized(plants):
    order = []

    class SlowSink:
        async def send_text(self, chat_id, text):
            order.append(("start", text))
            await asyncio.sleep(0.01)
            order.append(("end", text))

        async def send_buttons(self, chat_id, text, buttons):
            pass

        async def send_document(self, chat_id, filename, payload):
            pass

    dispatcher = PlantDispatcher(sink=SlowSink())
    dispatcher.store.set_plants(CHAT, plants)

    await asyncio.gather(
        dispatcher.handle(CallbackEvent(CHAT, "select_LandscapingZone")),
        dispatcher.handle(TextEvent(CHAT, "alley")),
    )

    assert [step for step, _ in order] == ["start", "end", "start", "end"]
    assert [p.id for p in dispatcher.store.get_plants(CHAT)] == ["1", "3"]
