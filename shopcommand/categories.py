"""Category entity, its value objects and the repository contract."""

from __future__ import annotations

import re
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from shopcommand.errors import DomainError

_ID_LENGTH = 36
_UUID_PATTERN = re.compile(
    r"([0-9a-f]{8})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{12})"
)
_NAME_MIN_LENGTH = 2
_NAME_MAX_LENGTH = 20


@dataclass(frozen=True)
class CategoryId:
    """Category identifier holding a UUID string."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != _ID_LENGTH:
            raise DomainError(f"カテゴリIDの長さは{_ID_LENGTH}文字でなければなりません。")
        if not _UUID_PATTERN.search(self.value):
            raise DomainError("カテゴリIDはUUIDの形式でなければなりません。")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryName:
    """Category name of 2 to 20 characters."""

    value: str

    def __post_init__(self) -> None:
        if not _NAME_MIN_LENGTH <= len(self.value) <= _NAME_MAX_LENGTH:
            raise DomainError(
                f"カテゴリ名の長さは{_NAME_MIN_LENGTH}文字以上、{_NAME_MAX_LENGTH}文字以内です。"
            )

    def __str__(self) -> str:
        return self.value


@dataclass
class Category:
    """A product category; constructing it directly rebuilds an existing one."""

    id: CategoryId | None
    name: CategoryName | None = None

    @classmethod
    def new(cls, name: CategoryName | None) -> Category:
        """Create a new category with a freshly generated identifier."""
        return cls(id=CategoryId(str(uuid.uuid4())), name=name)

    def change_name(self, name: CategoryName | None) -> None:
        self.name = name

    def equals(self, other: Category | None) -> bool:
        """Return whether both categories share the same identifier."""
        if other is None:
            raise DomainError("引数でnilが指定されました。")
        return self.id == other.id


class CategoryRepository(ABC):
    """Persistence contract for categories."""

    @abstractmethod
    def exists(self, tran: Any, category: Category) -> None:
        """Raise CRUDError if a category with the same name is stored."""

    @abstractmethod
    def create(self, tran: Any, category: Category) -> None:
        """Persist a new category."""

    @abstractmethod
    def update_by_id(self, tran: Any, category: Category) -> None:
        """Update the stored category with the same identifier."""

    @abstractmethod
    def delete_by_id(self, tran: Any, category: Category) -> None:
        """Delete the stored category with the same identifier."""