import copy
import re

import pymysql
import pytest

from shopcommand.adapters import CategoryAdapter, ProductAdapter
from shopcommand.database import Database
from shopcommand.messages import (
    CategoryUpParam,
    Crud,
    ErrorMessage,
    ProductUpParam,
)
from shopcommand.repository import SqlCategoryRepository, SqlProductRepository
from shopcommand.servers import CategoryServer, ProductServer
from shopcommand.services import CategoryService, ProductService

_SELECT = re.compile(r"SELECT (?P<cols>.+?) FROM (?P<table>\w+) WHERE (?P<key>\w+) = %s")
_INSERT = re.compile(r"INSERT INTO (?P<table>\w+) \((?P<cols>[^)]*)\) VALUES")
_UPDATE = re.compile(r"UPDATE (?P<table>\w+) SET (?P<sets>.+) WHERE id = %s")
_DELETE = re.compile(r"DELETE FROM (?P<table>\w+) WHERE id = %s")


class FakeStore:
    def __init__(self):
        self.tables = {"category": [], "product": []}
        self.next_id = 1
        self.failure = None
        self.commits = 0
        self.rollbacks = 0
        self._snapshot = None

    def begin(self):
        self._snapshot = (copy.deepcopy(self.tables), self.next_id)

    def restore(self):
        self.tables, self.next_id = self._snapshot


class FakeCursor:
    def __init__(self, store):
        self.store = store
        self._row = None

    def execute(self, sql, params):
        if self.store.failure is not None:
            raise self.store.failure
        if m := _SELECT.match(sql):
            table = self.store.tables[m["table"]]
            found = next((r for r in table if r[m["key"]] == params[0]), None)
            if found is None:
                self._row = None
            else:
                cols = [c.strip() for c in m["cols"].split(",")]
                self._row = tuple(1 if c == "1" else found[c] for c in cols)
        elif m := _INSERT.match(sql):
            table = self.store.tables[m["table"]]
            row = dict(zip([c.strip() for c in m["cols"].split(",")], params))
            if any(r["obj_id"] == row["obj_id"] for r in table):
                raise pymysql.err.IntegrityError(1062, "Duplicate entry")
            row["id"] = self.store.next_id
            self.store.next_id += 1
            table.append(row)
        elif m := _UPDATE.match(sql):
            table = self.store.tables[m["table"]]
            cols = [s.split("=")[0].strip() for s in m["sets"].split(",")]
            for row in table:
                if row["id"] == params[-1]:
                    row.update(zip(cols, params[:-1]))
        elif m := _DELETE.match(sql):
            name = m["table"]
            self.store.tables[name] = [r for r in self.store.tables[name] if r["id"] != params[0]]
        else:
            raise AssertionError(f"unexpected statement: {sql}")

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, store):
        self.store = store

    def begin(self):
        self.store.begin()

    def cursor(self):
        return FakeCursor(self.store)

    def commit(self):
        self.store.commits += 1

    def rollback(self):
        self.store.rollbacks += 1
        self.store.restore()

    def close(self):
        pass


UNKNOWN_ID = "b1524011-b6af-417e-8bf2-f449dd58b5c1"
CATEGORY_ID = "b1524011-b6af-417e-8bf2-f449dd58b5c0"


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def category_server(store):
    service = CategoryService(SqlCategoryRepository(), Database(FakeConnection(store)))
    return CategoryServer(CategoryAdapter(), service)


@pytest.fixture
def product_server(store):
    service = ProductService(SqlProductRepository(), Database(FakeConnection(store)))
    return ProductServer(ProductAdapter(), service)


def test_category_create_succeeds(category_server, store):
    result = category_server.create(CategoryUpParam(crud=Crud.INSERT, id="", name="飲料水"))
    assert result.error is None
    assert result.category.name == "飲料水"
    assert len(result.category.id) == 36
    assert [r["name"] for r in store.tables["category"]] == ["飲料水"]
    assert store.commits == 1


def test_category_create_duplicate_name(category_server, store):
    first = category_server.create(CategoryUpParam(crud=Crud.INSERT, name="飲料水"))
    param = CategoryUpParam(crud=Crud.INSERT, id=first.category.id, name=first.category.name)
    result = category_server.create(param)
    assert result.category is None
    assert result.error == ErrorMessage(type="CRUD Error", message="飲料水は既に登録されています。")
    assert store.rollbacks == 1
    assert len(store.tables["category"]) == 1


def test_category_update_succeeds(category_server, store):
    created = category_server.create(CategoryUpParam(crud=Crud.INSERT, name="飲料水"))
    param = CategoryUpParam(crud=Crud.UPDATE, id=created.category.id, name="衣料品")
    result = category_server.update(param)
    assert result.error is None
    assert result.category.name == "衣料品"
    assert store.tables["category"][0]["name"] == "衣料品"


def test_category_update_unknown_id(category_server):
    result = category_server.update(CategoryUpParam(crud=Crud.UPDATE, id=UNKNOWN_ID, name="衣料品"))
    assert result.error == ErrorMessage(
        type="CRUD Error",
        message=f"カテゴリ番号:{UNKNOWN_ID}は存在しないため、更新できませんでした。",
    )


def test_category_delete_succeeds(category_server, store):
    created = category_server.create(CategoryUpParam(crud=Crud.INSERT, name="飲料水"))
    param = CategoryUpParam(crud=Crud.DELETE, id=created.category.id, name=created.category.name)
    result = category_server.delete(param)
    assert result.error is None
    assert result.category.id == created.category.id
    assert result.category.name == ""
    assert store.tables["category"] == []


def test_category_delete_unknown_id(category_server):
    result = category_server.delete(CategoryUpParam(crud=Crud.DELETE, id=UNKNOWN_ID, name="衣料品"))
    assert result.error == ErrorMessage(
        type="CRUD Error",
        message=f"カテゴリ番号:{UNKNOWN_ID}は存在しないため、削除できませんでした。",
    )


def test_category_invalid_name_is_domain_error(category_server, store):
    result = category_server.create(CategoryUpParam(crud=Crud.INSERT, name="文"))
    assert result.error == ErrorMessage(
        type="Domain Error", message="カテゴリ名の長さは2文字以上、20文字以内です。"
    )
    assert store.commits == 0


def test_category_unknown_operation(category_server):
    result = category_server.create(CategoryUpParam(crud=Crud.UNKNOWN, name="飲料水"))
    assert result.error == ErrorMessage(type="Domain Error", message="不明な操作を受信しました。")


def test_category_internal_error_hides_details(category_server, store):
    store.failure = pymysql.err.OperationalError(2013, "Lost connection")
    result = category_server.create(CategoryUpParam(crud=Crud.INSERT, name="飲料水"))
    assert result.error == ErrorMessage(
        type="Internal Error", message="只今、サービスを提供できません。"
    )


def test_product_create_succeeds(product_server, store):
    param = ProductUpParam(
        crud=Crud.INSERT, name="水性ボールペン(黒)", price=120, category_id=CATEGORY_ID
    )
    result = product_server.create(param)
    assert result.error is None
    assert result.product.name == "水性ボールペン(黒)"
    assert result.product.price == 120
    assert result.product.category.id == CATEGORY_ID
    assert store.tables["product"][0]["category_id"] == CATEGORY_ID


def test_product_create_duplicate_name(product_server):
    param = ProductUpParam(
        crud=Crud.INSERT, name="水性ボールペン(黒)", price=120, category_id=CATEGORY_ID
    )
    product_server.create(param)
    result = product_server.create(param)
    assert result.product is None
    assert result.error == ErrorMessage(
        type="CRUD Error", message="水性ボールペン(黒)は既に登録されています。"
    )


def test_product_update_and_delete(product_server, store):
    created = product_server.create(
        ProductUpParam(crud=Crud.INSERT, name="ボールペン", price=150, category_id=CATEGORY_ID)
    )
    updated = product_server.update(
        ProductUpParam(
            crud=Crud.UPDATE,
            id=created.product.id,
            name="ボールペン(黒)",
            price=200,
            category_id=CATEGORY_ID,
        )
    )
    assert updated.error is None
    assert store.tables["product"][0]["name"] == "ボールペン(黒)"
    assert store.tables["product"][0]["price"] == 200
    deleted = product_server.delete(ProductUpParam(crud=Crud.DELETE, id=created.product.id))
    assert deleted.error is None
    assert deleted.product.name == ""
    assert deleted.product.price == 0
    assert store.tables["product"] == []


def test_product_update_unknown_id(product_server):
    product_id = "ac413f22-0cf1-490a-9635-7e9ca810e544"
    result = product_server.update(
        ProductUpParam(
            crud=Crud.UPDATE, id=product_id, name="ボールペン", price=200, category_id=CATEGORY_ID
        )
    )
    assert result.error == ErrorMessage(
        type="CRUD Error",
        message=f"商品番号:{product_id}は存在しないため、更新できませんでした。",
    )


def test_product_invalid_price(product_server):
    result = product_server.create(
        ProductUpParam(crud=Crud.INSERT, name="ボールペン", price=49, category_id=CATEGORY_ID)
    )
    assert result.error == ErrorMessage(type="Domain Error", message="単価は50以上、10000以下です。")