"""Application services that change categories and products inside transactions."""

from __future__ import annotations

from shopcommand.categories import Category, CategoryRepository
from shopcommand.database import Database
from shopcommand.products import Product, ProductRepository


class CategoryService:
    """Adds, updates and deletes categories, one transaction per call."""

    def __init__(self, repository: CategoryRepository, database: Database) -> None:
        self._repository = repository
        self._database = database

    def add(self, category: Category) -> None:
        """Store a new category; raises CRUDError if its name is already taken."""
        with self._database.transaction() as tran:
            self._repository.exists(tran, category)
            self._repository.create(tran, category)

    def update(self, category: Category) -> None:
        """Change the stored category with the same identifier."""
        with self._database.transaction() as tran:
            self._repository.update_by_id(tran, category)

    def delete(self, category: Category) -> None:
        """Remove the stored category with the same identifier."""
        with self._database.transaction() as tran:
            self._repository.delete_by_id(tran, category)


class ProductService:
    """Adds, updates and deletes products, one transaction per call."""

    def __init__(self, repository: ProductRepository, database: Database) -> None:
        self._repository = repository
        self._database = database

    def add(self, product: Product) -> None:
        """Store a new product; raises CRUDError if its name is already taken."""
        with self._database.transaction() as tran:
            self._repository.exists(tran, product)
            self._repository.create(tran, product)

    def update(self, product: Product) -> None:
        """Change the stored product with the same identifier."""
        with self._database.transaction() as tran:
            self._repository.update_by_id(tran, product)

    def delete(self, product: Product) -> None:
        """Remove the stored product with the same identifier."""
        with self._database.transaction() as tran:
            self._repository.delete_by_id(tran, product)