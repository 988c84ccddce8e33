"""Assembly of repositories, services, adapters and servers."""

from __future__ import annotations

from dataclasses import dataclass

from shopcommand.adapters import CategoryAdapter, ProductAdapter
from shopcommand.database import Database
from shopcommand.repository import SqlCategoryRepository, SqlProductRepository
from shopcommand.servers import CategoryServer, ProductServer
from shopcommand.services import CategoryService, ProductService


@dataclass
class CommandApp:
    """The wired command service: its database and both request handlers."""

    database: Database
    category_server: CategoryServer
    product_server: ProductServer

    def close(self) -> None:
        """Close the underlying database connection."""
        self.database.close()

    def __enter__(self) -> CommandApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def build_app(database: Database) -> CommandApp:
    """Wire SQL repositories, services, adapters and servers over a database."""
    category_service = CategoryService(SqlCategoryRepository(), database)
    product_service = ProductService(SqlProductRepository(), database)
    return CommandApp(
        database=database,
        category_server=CategoryServer(CategoryAdapter(), category_service),
        product_server=ProductServer(ProductAdapter(), product_service),
    )