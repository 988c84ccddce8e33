"""Command endpoints that turn client requests into service calls."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from shopcommand.adapters import CategoryAdapter, ProductAdapter
from shopcommand.errors import CommandError
from shopcommand.messages import (
    CategoryUpParam,
    CategoryUpResult,
    ProductUpParam,
    ProductUpResult,
)
from shopcommand.services import CategoryService, ProductService


def _run(adapter: Any, action: Callable[[Any], None], param: Any) -> Any:
    """Convert, act and report; service errors end up inside the result."""
    try:
        entity = adapter.to_entity(param)
        action(entity)
    except CommandError as err:
        return adapter.to_result(err)
    return adapter.to_result(entity)


class CategoryServer:
    """Handles category create, update and delete requests."""

    def __init__(self, adapter: CategoryAdapter, service: CategoryService) -> None:
        self._adapter = adapter
        self._service = service

    def create(self, param: CategoryUpParam) -> CategoryUpResult:
        """Add the category a request describes."""
        return _run(self._adapter, self._service.add, param)

    def update(self, param: CategoryUpParam) -> CategoryUpResult:
        """Change the category a request describes."""
        return _run(self._adapter, self._service.update, param)

    def delete(self, param: CategoryUpParam) -> CategoryUpResult:
        """Remove the category a request describes."""
        return _run(self._adapter, self._service.delete, param)


class ProductServer:
    """Handles product create, update and delete requests."""

    def __init__(self, adapter: ProductAdapter, service: ProductService) -> None:
        self._adapter = adapter
        self._service = service

    def create(self, param: ProductUpParam) -> ProductUpResult:
        """Add the product a request describes."""
        return _run(self._adapter, self._service.add, param)

    def update(self, param: ProductUpParam) -> ProductUpResult:
        """Change the product a request describes."""
        return _run(self._adapter, self._service.update, param)

    def delete(self, param: ProductUpParam) -> ProductUpResult:
        """Remove the product a request describes."""
        return _run(self._adapter, self._service.delete, param)