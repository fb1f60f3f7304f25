"""
User-facing texts and the action keyboard layout.
"""

from src.core.plants.commands import SortOrder, select_token
from src.core.plants.models import PlantField


START_COMMAND = "/start"

WELCOME_MESSAGE = (
    "✋Добро пожаловать!\n"
    "Пожалуйста, загрузите ваш файл в формате CSV или JSON."
)

UNKNOWN_COMMAND_MESSAGE = (
    "⚠️Извините, я не понимаю эту команду. "
    "Пожалуйста, загрузите файл или используйте команду /start."
)

NO_DATA_MESSAGE = (
    "❗️У вас нет данных для обработки. "
    "Пожалуйста, загрузите файл формата csv или json."
)

UNSUPPORTED_FORMAT_MESSAGE = (
    "❗️Формат файла не поддерживается. "
    "Пожалуйста, загрузите файл в формате CSV или JSON."
)

UNREADABLE_FILE_MESSAGE = (
    "❗️Не удалось прочитать файл. "
    "Проверьте, что он соответствует формату CSV или JSON."
)

CHOOSE_ACTION_MESSAGE = "Выберите действие:"


def field_prompt(field: str) -> str:
    return f"Введите значение для поля {field}:"


def filter_done(fields: str, count: int) -> str:
    return f"✅Выборка по полю {fields} выполнена. Количество выбранных объектов: {count}"


def sort_done(field: str, order: SortOrder) -> str:
    direction = "прямом" if order is SortOrder.ASCENDING else "обратном"
    return f"✅Данные отсортированы по полю {field} в {direction} порядке"


_ZONE = PlantField.LANDSCAPING_ZONE.value
_PLACE = PlantField.LOCATION_PLACE.value
_PERIOD = PlantField.PROSPERITY_PERIOD.value

ACTION_BUTTONS = [
    [(f"🔍Выборка по {_ZONE}", select_token(_ZONE))],
    [(f"🔍Выборка по {_PLACE}", select_token(_PLACE))],
    [(f"🔍Выборка по {_PERIOD}", select_token(_PERIOD))],
    [(f"🔍Выборка по {_ZONE} & {_PERIOD}", select_token(_ZONE, _PERIOD))],
    [
        ("📊Сортировка LatinName ↑", "sort_LatinName_asc"),
        ("📊Сортировка LatinName ↓", "sort_LatinName_desc"),
    ],
    [
        ("⬇️Скачать CSV", "download_csv"),
        ("⬇️Скачать JSON", "download_json"),
    ],
]
