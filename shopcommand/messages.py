"""Request and result messages exchanged with the command service's clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto


class Crud(Enum):
    """Kind of change a client asks for."""

    UNKNOWN = auto()
    INSERT = auto()
    UPDATE = auto()
    DELETE = auto()


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CategoryUpParam:
    """Parameters of a category change request."""

    crud: Crud = Crud.UNKNOWN
    id: str = ""
    name: str = ""


@dataclass
class ProductUpParam:
    """Parameters of a product change request."""

    crud: Crud = Crud.UNKNOWN
    id: str = ""
    name: str = ""
    price: int = 0
    category_id: str = ""


@dataclass
class CategoryMessage:
    """A category as sent back to the client."""

    id: str = ""
    name: str = ""


@dataclass
class ProductMessage:
    """A product as sent back to the client."""

    id: str = ""
    name: str = ""
    price: int = 0
    category: CategoryMessage | None = None


@dataclass
class ErrorMessage:
    """An error as sent back to the client."""

    type: str = ""
    message: str = ""


@dataclass
class CategoryUpResult:
    """Outcome of a category change: either the category or an error."""

    category: CategoryMessage | None = None
    error: ErrorMessage | None = None
    timestamp: datetime = field(default_factory=_now)


@dataclass
class ProductUpResult:
    """Outcome of a product change: either the product or an error."""

    product: ProductMessage | None = None
    error: ErrorMessage | None = None
    timestamp: datetime = field(default_factory=_now)