"""Product entity, its value objects and the repository contract."""

from __future__ import annotations

import re
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from shopcommand.categories import Category
from shopcommand.errors import DomainError

_ID_LENGTH = 36
_UUID_PATTERN = re.compile(
    r"([0-9a-f]{8})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{12})"
)
_NAME_MIN_LENGTH = 5
_NAME_MAX_LENGTH = 30
_PRICE_MIN = 50
_PRICE_MAX = 10000


@dataclass(frozen=True)
class ProductId:
    """Product identifier holding a UUID string."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != _ID_LENGTH:
            raise DomainError(f"商品IDの長さは{_ID_LENGTH}文字でなければなりません。")
        if not _UUID_PATTERN.search(self.value):
            raise DomainError("商品IDはUUIDの形式でなければなりません。")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductName:
    """Product name of 5 to 30 characters."""

    value: str

    def __post_init__(self) -> None:
        if not _NAME_MIN_LENGTH <= len(self.value) <= _NAME_MAX_LENGTH:
            raise DomainError(
                f"商品名の長さは{_NAME_MIN_LENGTH}文字以上、{_NAME_MAX_LENGTH}文字以内です。"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductPrice:
    """Unit price between 50 and 10000 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if not _PRICE_MIN <= self.value <= _PRICE_MAX:
            raise DomainError(f"単価は{_PRICE_MIN}以上、{_PRICE_MAX}以下です。")


@dataclass
class Product:
    """A product; constructing it directly rebuilds an existing one."""

    id: ProductId | None
    name: ProductName | None = None
    price: ProductPrice | None = None
    category: Category | None = None

    @classmethod
    def new(
        cls,
        name: ProductName | None,
        price: ProductPrice | None,
        category: Category | None,
    ) -> Product:
        """Create a new product with a freshly generated identifier."""
        return cls(
            id=ProductId(str(uuid.uuid4())), name=name, price=price, category=category
        )

    def change_name(self, name: ProductName | None) -> None:
        self.name = name

    def change_price(self, price: ProductPrice | None) -> None:
        self.price = price

    def change_category(self, category: Category | None) -> None:
        self.category = category

    def equals(self, other: Product | None) -> bool:
        """Return whether both products share the same identifier."""
        if other is None:
            raise DomainError("引数でnilが指定されました。")
        return self.id == other.id


class ProductRepository(ABC):
    """Persistence contract for products."""

    @abstractmethod
    def exists(self, tran: Any, product: Product) -> None:
        """Raise CRUDError if a product with the same name is stored."""

    @abstractmethod
    def create(self, tran: Any, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def update_by_id(self, tran: Any, product: Product) -> None:
        """Update the stored product with the same identifier."""

    @abstractmethod
    def delete_by_id(self, tran: Any, product: Product) -> None:
        """Delete the stored product with the same identifier."""