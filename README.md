# shopcommand

The command side of a small product catalogue. It accepts requests to
register, change and delete **categories** and **products**, checks them
against the catalogue's rules, and writes them to a MySQL database inside a
transaction that is committed on success and rolled back on failure.

## Rules enforced

| Value          | Rule                                            |
|----------------|-------------------------------------------------|
| Category id    | 36 characters in lower-case UUID form           |
| Category name  | 2 to 20 characters                              |
| Product id     | 36 characters in lower-case UUID form           |
| Product name   | 5 to 30 characters                              |
| Product price  | 50 to 10000 inclusive                           |

A value that breaks a rule raises `DomainError`. A name that is already
registered or an id that does not exist raises `CRUDError`, and so does a
duplicate key reported by MySQL (error 1062). Connection and other database
failures raise `InternalError`. All three are in `shopcommand.errors` and
derive from `CommandError`; two errors compare equal when they have the same
type and message.

## Domain objects

`shopcommand.categories` holds `CategoryId`, `CategoryName` and `Category`;
`shopcommand.products` holds `ProductId`, `ProductName`, `ProductPrice` and
`Product`. The value objects are frozen dataclasses that validate on
construction. Constructing an entity directly rebuilds an existing one;
`new()` creates one with a freshly generated UUID id.

```python
from shopcommand.categories import Category, CategoryId, CategoryName
from shopcommand.errors import DomainError

stationery = Category.new(CategoryName("文房具"))
same = Category(CategoryId(stationery.id.value), stationery.name)
assert stationery.equals(same)      # compares ids only

try:
    CategoryName("文")
except DomainError as err:
    print(err)   # カテゴリ名の長さは2文字以上、20文字以内です。
```

Products are built the same way with `Product.new(name, price, category)`.
`equals(None)` raises `DomainError`. Entities can be changed with
`change_name()`, and for products also `change_price()` and
`change_category()`.

`CategoryRepository` and `ProductRepository` are the abstract persistence
contracts; `shopcommand.repository` implements them over SQL as
`SqlCategoryRepository` and `SqlProductRepository`.

## Database configuration

`shopcommand.database.read_config(path)` reads a TOML file whose `[mysql]`
table describes the connection and returns a `DBConfig`. Without a path it
reads the file named by the environment variable `DATABSE_TOML_PATH`, or
`infra/sqlboiler/config/database.toml` if that is unset.

```toml
[mysql]
dbname = "sample_db"
host   = "localhost"
port   = 3306
user   = "user"
pass   = "password"
```

`connect(config)` opens and pings the connection and returns a `Database`
(with no config it calls `read_config()` itself). Its `transaction()`
context manager yields a cursor, commits when the block finishes and rolls
back when an exception leaves it; `close()` releases the connection, and a
`Database` can also be used in a `with` statement. `handle_db_error(err)`
turns a low-level failure into `CRUDError` or `InternalError`.

The repositories expect existing tables `category (id, obj_id, name)` and
`product (id, obj_id, name, price, category_id)`.

## Handling requests

`shopcommand.messages` defines the request messages (`CategoryUpParam`,
`ProductUpParam`, with a `Crud` kind of `INSERT`, `UPDATE` or `DELETE`) and
the result messages (`CategoryUpResult`, `ProductUpResult`, carrying a
`CategoryMessage`/`ProductMessage` or an `ErrorMessage`, plus a UTC
timestamp).

`shopcommand.app.build_app(database)` wires repositories, services
(`CategoryService`, `ProductService`), adapters (`CategoryAdapter`,
`ProductAdapter`) and servers (`CategoryServer`, `ProductServer`) into a
`CommandApp`. A server's `create()`, `update()` and `delete()` turn a request
into a domain object through the adapter, run the matching service call, and
answer with a result message:

```python
from shopcommand.app import build_app
from shopcommand.database import connect
from shopcommand.messages import CategoryUpParam, Crud

with build_app(connect()) as app:
    result = app.category_server.create(CategoryUpParam(crud=Crud.INSERT, name="飲料水"))
    if result.error is None:
        print(result.category.id, result.category.name)
    else:
        print(result.error.type, result.error.message)
```

Service errors are reported in the result rather than raised: a
`DomainError` becomes type `"Domain Error"`, a `CRUDError` becomes
`"CRUD Error"`, and an `InternalError` becomes `"Internal Error"` with a
generic message that hides the database details. A request with an unknown
`Crud` kind is answered with a `"Domain Error"`.

## What this package does not do

It has no network listener and no command to start one: the servers are
plain Python objects that you call with request messages. It does not create
the database or its tables, and it has no read side for querying the
catalogue.