"""SQL-backed repositories for categories and products."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from shopcommand.categories import Category, CategoryRepository
from shopcommand.database import handle_db_error
from shopcommand.errors import CommandError, CRUDError
from shopcommand.products import Product, ProductRepository

logger = logging.getLogger(__name__)


def _execute(tran: Any, sql: str, params: Sequence[Any] = ()) -> None:
    logger.debug("%s %s", sql, params)
    try:
        tran.execute(sql, tuple(params))
    except CommandError:
        raise
    except Exception as exc:
        raise handle_db_error(exc) from exc


def _fetch_one(tran: Any, sql: str, params: Sequence[Any]) -> Any:
    _execute(tran, sql, params)
    try:
        return tran.fetchone()
    except Exception as exc:
        raise handle_db_error(exc) from exc


class SqlCategoryRepository(CategoryRepository):
    """Category repository over the ``category`` table."""

    def exists(self, tran: Any, category: Category) -> None:
        name = category.name.value
        if _fetch_one(tran, "SELECT 1 FROM category WHERE name = %s LIMIT 1", (name,)):
            raise CRUDError(f"{name}は既に登録されています。")

    def create(self, tran: Any, category: Category) -> None:
        obj_id, name = category.id.value, category.name.value
        _execute(tran, "INSERT INTO category (obj_id, name) VALUES (%s, %s)", (obj_id, name))
        logger.info("カテゴリID:%s カテゴリ名:%sを登録しました。", obj_id, name)

    def _find(self, tran: Any, obj_id: str) -> Any:
        return _fetch_one(
            tran, "SELECT id, obj_id, name FROM category WHERE obj_id = %s", (obj_id,)
        )

    def update_by_id(self, tran: Any, category: Category) -> None:
        obj_id = category.id.value
        row = self._find(tran, obj_id)
        if row is None:
            raise CRUDError(f"カテゴリ番号:{obj_id}は存在しないため、更新できませんでした。")
        name = category.name.value
        _execute(
            tran,
            "UPDATE category SET obj_id = %s, name = %s WHERE id = %s",
            (obj_id, name, row[0]),
        )
        logger.info("カテゴリID:%s カテゴリ名:%sを変更しました。", obj_id, name)

    def delete_by_id(self, tran: Any, category: Category) -> None:
        obj_id = category.id.value
        row = self._find(tran, obj_id)
        if row is None:
            raise CRUDError(f"カテゴリ番号:{obj_id}は存在しないため、削除できませんでした。")
        _execute(tran, "DELETE FROM category WHERE id = %s", (row[0],))
        logger.info("カテゴリID:%s カテゴリ名:%sを削除しました。", row[1], row[2])


class SqlProductRepository(ProductRepository):
    """Product repository over the ``product`` table."""

    def exists(self, tran: Any, product: Product) -> None:
        name = product.name.value
        if _fetch_one(tran, "SELECT 1 FROM product WHERE name = %s LIMIT 1", (name,)):
            raise CRUDError(f"{name}は既に登録されています。")

    def create(self, tran: Any, product: Product) -> None:
        values = (
            product.id.value,
            product.name.value,
            int(product.price.value),
            product.category.id.value,
        )
        _execute(
            tran,
            "INSERT INTO product (obj_id, name, price, category_id) VALUES (%s, %s, %s, %s)",
            values,
        )
        logger.info(
            "商品ID:%s 商品名:%s 単価:%d カテゴリ番号: %s を登録しました。", *values
        )

    def _find(self, tran: Any, obj_id: str) -> Any:
        return _fetch_one(
            tran,
            "SELECT id, obj_id, name, price, category_id FROM product WHERE obj_id = %s",
            (obj_id,),
        )

    def update_by_id(self, tran: Any, product: Product) -> None:
        obj_id = product.id.value
        row = self._find(tran, obj_id)
        if row is None:
            raise CRUDError(f"商品番号:{obj_id}は存在しないため、更新できませんでした。")
        name, price = product.name.value, int(product.price.value)
        _execute(
            tran,
            "UPDATE product SET obj_id = %s, name = %s, price = %s WHERE id = %s",
            (row[1], name, price, row[0]),
        )
        logger.info(
            "商品ID:%s 商品名:%s 単価:%d カテゴリ番号: %s を変更しました。",
            row[1], name, price, row[4],
        )

    def delete_by_id(self, tran: Any, product: Product) -> None:
        obj_id = product.id.value
        row = self._find(tran, obj_id)
        if row is None:
            raise CRUDError(f"商品番号:{obj_id}は存在しないため、削除できませんでした。")
        _execute(tran, "DELETE FROM product WHERE id = %s", (row[0],))
        logger.info(
            "商品ID:%s 商品名:%s 単価:%d カテゴリ番号: %s を削除しました。",
            row[1], row[2], row[3], row[4],
        )