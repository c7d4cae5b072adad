"""
Базовые реализации хранилищ документов.

Репозитории держат записи в словаре и поддерживают простую транзакционность:
``flush`` фиксирует текущее состояние, ``discard`` возвращает последнее
зафиксированное.
"""

import json
from pathlib import Path
from typing import ClassVar, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from .domain import EntityId

T = TypeVar("T", bound=BaseModel)


class InMemoryRepository(Generic[T]):
    """Базовый репозиторий документов в памяти."""

    entity_name: ClassVar[str] = "Entity"

    def __init__(self) -> None:
        self._items: Dict[EntityId, T] = {}
        self._snapshot: Dict[EntityId, T] = {}

    def add(self, item: T) -> None:
        if item.id in self._items:
            raise ValueError(f"{self.entity_name} with id {item.id} already exists")
        self._items[item.id] = item

    def get_by_id(self, item_id: EntityId) -> Optional[T]:
        return self._items.get(item_id)

    def list_all(self) -> List[T]:
        return list(self._items.values())

    def update(self, item: T) -> None:
        if item.id not in self._items:
            raise KeyError(f"{self.entity_name} with id {item.id} not found")
        self._items[item.id] = item

    def delete(self, item_id: EntityId) -> Optional[T]:
        """Удаляет запись и возвращает её, либо None, если записи не было."""
        return self._items.pop(item_id, None)

    def flush(self) -> None:
        """Фиксирует текущее состояние."""
        self._snapshot = dict(self._items)

    def discard(self) -> None:
        """Отбрасывает незафиксированные изменения."""
        self._items = dict(self._snapshot)


class JsonFileRepository(InMemoryRepository[T]):
    """Базовый класс для репозиториев, работающих с JSON-файлами."""

    def __init__(self, file_path: Union[str, Path], model_class: Type[T]):
        """
        Инициализирует репозиторий.

        Args:
            file_path: Путь к JSON-файлу с данными
            model_class: Класс модели данных
        """
        super().__init__()
        self._file_path = Path(file_path)
        self._model_class = model_class
        self._load_data()

    def _load_data(self) -> None:
        """Загружает данные из JSON-файла."""
        self._items = {}
        if self._file_path.exists():
            raw_data = self._file_path.read_text(encoding="utf-8")
            if raw_data.strip():
                for document in json.loads(raw_data):
                    item = self._model_class.model_validate(document)
                    self._items[item.id] = item
        self._snapshot = dict(self._items)

    def _save_data(self) -> None:
        """Сохраняет данные в JSON-файл."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = [item.model_dump(by_alias=True, mode="json") for item in self._items.values()]

        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def flush(self) -> None:
        self._save_data()
        super().flush()

    def discard(self) -> None:
        self._load_data()


def newest_first(items: List[T]) -> List[T]:
    """Сортирует записи по ``created_at``; при равенстве позже добавленная идет первой."""
    return sorted(reversed(items), key=lambda item: item.created_at, reverse=True)
