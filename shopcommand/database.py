"""Database configuration, connection and error translation."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pymysql

from shopcommand.errors import CommandError, CRUDError, InternalError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "DATABSE_TOML_PATH"
DEFAULT_CONFIG_PATH = "infra/sqlboiler/config/database.toml"
_DUPLICATE_ENTRY = 1062


@dataclass(frozen=True)
class DBConfig:
    """Connection settings read from the ``mysql`` table of database.toml."""

    dbname: str = ""
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""


def read_config(path: str | os.PathLike[str] | None = None) -> DBConfig:
    """Read connection settings from a TOML file.

    Without a path, the file named by DATABSE_TOML_PATH is used, falling back
    to the default location.
    """
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
    with Path(path).open("rb") as handle:
        data = tomllib.load(handle)
    section = data.get("mysql", {})
    return DBConfig(
        dbname=section.get("dbname", ""),
        host=section.get("host", ""),
        port=int(section.get("port", 0)),
        user=section.get("user", ""),
        password=section.get("pass", ""),
    )


def handle_db_error(err: BaseException) -> CommandError:
    """Translate a low-level database failure into a service error."""
    if isinstance(err, pymysql.err.MySQLError) and err.args and isinstance(err.args[0], int):
        code = err.args[0]
        message = str(err.args[1]) if len(err.args) > 1 else str(err)
        logger.error("Code:%d Message:%s", code, message)
        if code == _DUPLICATE_ENTRY:
            return CRUDError("一意制約違反です。")
        return InternalError(message)
    logger.error("%s", err)
    return InternalError(str(err))


class Database:
    """A database connection that hands out transactions."""

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    @property
    def connection(self) -> Any:
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        """Yield a cursor inside a transaction; commit on success, roll back on error."""
        conn = self._connection
        try:
            conn.begin()
            cursor = conn.cursor()
        except Exception as exc:
            raise handle_db_error(exc) from exc
        try:
            yield cursor
        except BaseException as exc:
            try:
                conn.rollback()
            except Exception:
                raise handle_db_error(exc) from exc
            logger.info("トランザクションをロールバックしました。")
            raise
        else:
            try:
                conn.commit()
            except Exception as exc:
                raise handle_db_error(exc) from exc
            logger.info("トランザクションをコミットしました。")
        finally:
            cursor.close()

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def connect(config: DBConfig | None = None) -> Database:
    """Open and verify a MySQL connection; failures raise service errors."""
    try:
        if config is None:
            config = read_config()
        connection = pymysql.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.dbname,
            autocommit=False,
        )
        connection.ping(reconnect=False)
    except Exception as exc:
        raise handle_db_error(exc) from exc
    return Database(connection)