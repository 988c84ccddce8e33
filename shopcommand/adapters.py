"""Conversion between client messages and domain entities."""

from __future__ import annotations

from typing import Any

from shopcommand.categories import Category, CategoryId, CategoryName
from shopcommand.errors import CRUDError, DomainError, InternalError
from shopcommand.messages import (
    CategoryMessage,
    CategoryUpParam,
    CategoryUpResult,
    Crud,
    ErrorMessage,
    ProductMessage,
    ProductUpParam,
    ProductUpResult,
)
from shopcommand.products import Product, ProductId, ProductName, ProductPrice

_UNKNOWN_OPERATION = "不明な操作を受信しました。"
_UNAVAILABLE = "只今、サービスを提供できません。"


def _error_message(result: Any) -> ErrorMessage | None:
    if isinstance(result, DomainError):
        return ErrorMessage(type="Domain Error", message=str(result))
    if isinstance(result, CRUDError):
        return ErrorMessage(type="CRUD Error", message=str(result))
    if isinstance(result, InternalError):
        return ErrorMessage(type="Internal Error", message=_UNAVAILABLE)
    return None


class CategoryAdapter:
    """Turns category requests into entities and outcomes into results."""

    def to_entity(self, param: CategoryUpParam) -> Category:
        """Build the category a request describes; raises DomainError if invalid."""
        match param.crud:
            case Crud.INSERT:
                return Category.new(CategoryName(param.name))
            case Crud.UPDATE:
                return Category(CategoryId(param.id), CategoryName(param.name))
            case Crud.DELETE:
                return Category(CategoryId(param.id), None)
            case _:
                raise DomainError(_UNKNOWN_OPERATION)

    def to_result(self, result: Any) -> CategoryUpResult:
        """Wrap a category or a service error into a result message."""
        if isinstance(result, Category):
            name = result.name.value if result.name is not None else ""
            return CategoryUpResult(category=CategoryMessage(id=result.id.value, name=name))
        return CategoryUpResult(error=_error_message(result))


class ProductAdapter:
    """Turns product requests into entities and outcomes into results."""

    def to_entity(self, param: ProductUpParam) -> Product:
        """Build the product a request describes; raises DomainError if invalid."""
        match param.crud:
            case Crud.INSERT:
                name = ProductName(param.name)
                price = ProductPrice(param.price)
                category_id = CategoryId(param.category_id)
                return Product.new(name, price, Category(category_id, None))
            case Crud.UPDATE:
                product_id = ProductId(param.id)
                name = ProductName(param.name)
                price = ProductPrice(param.price)
                category_id = CategoryId(param.category_id)
                return Product(product_id, name, price, Category(category_id, None))
            case Crud.DELETE:
                return Product(ProductId(param.id))
            case _:
                raise DomainError(_UNKNOWN_OPERATION)

    def to_result(self, result: Any) -> ProductUpResult:
        """Wrap a product or a service error into a result message."""
        if isinstance(result, Product):
            if result.category is None:
                category = CategoryMessage(id="", name="")
            else:
                category = CategoryMessage(id=result.category.id.value, name="")
            message = ProductMessage(
                id=result.id.value,
                name=result.name.value if result.name is not None else "",
                price=int(result.price.value) if result.price is not None else 0,
                category=category,
            )
            return ProductUpResult(product=message)
        return ProductUpResult(error=_error_message(result))