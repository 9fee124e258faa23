from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, TextIO

import pandas as pd
import psycopg2

from cafe.config import AppConfig


logger = logging.getLogger(__name__)


class CafeError(RuntimeError):
    pass


class DatabaseConnectionError(CafeError):
    pass


class QueryError(CafeError):
    pass


def _cell(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "t" if value else "f"
    return str(value)


class SqlClient:
    """
    Thin query façade over one PostgreSQL connection.

    The connection runs in autocommit; `transaction()` groups statements
    that must succeed or fail together.
    """

    def __init__(self, conn):
        self._conn = conn
        self._conn.autocommit = True
        self._in_transaction = False

    @classmethod
    def connect(cls, cfg: AppConfig) -> "SqlClient":
        try:
            conn = psycopg2.connect(cfg.dsn)
        except psycopg2.Error as e:
            raise DatabaseConnectionError(str(e).strip()) from e
        return cls(conn)

    @contextmanager
    def _cursor(self, sql: str):
        logger.debug("SQL: %s", sql)
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql)
                yield cur
        except psycopg2.Error as e:
            raise QueryError(str(e).strip()) from e

    def execute_update(self, sql: str) -> int:
        """Runs CREATE, INSERT, UPDATE, DELETE or DROP. Returns affected rows."""
        with self._cursor(sql) as cur:
            return cur.rowcount

    def query(self, sql: str) -> pd.DataFrame:
        """Returns a pandas.DataFrame for a SELECT."""
        with self._cursor(sql) as cur:
            rows = cur.fetchall()
            cols = [d[0] for d in (cur.description or [])]
            return pd.DataFrame(rows, columns=cols)

    def execute_query_print(self, sql: str, out: Optional[TextIO] = None) -> int:
        """
        Prints the result of a SELECT and returns the number of rows.
        The header line is only written when at least one row came back.
        """
        out = out or sys.stdout
        df = self.query(sql)
        if len(df):
            print("\t".join(str(c) for c in df.columns), file=out)
            for row in df.itertuples(index=False, name=None):
                print("\t".join(_cell(v) for v in row), file=out)
        return len(df)

    def execute_query_collect(self, sql: str) -> List[list]:
        with self._cursor(sql) as cur:
            return [list(r) for r in cur.fetchall()]

    def execute_query_count(self, sql: str) -> int:
        """1 if the query yields any row, else 0."""
        with self._cursor(sql) as cur:
            return 1 if cur.fetchone() is not None else 0

    def get_current_sequence_value(self, sequence: str) -> int:
        rows = self.execute_query_collect(f"SELECT currval('{sequence}')")
        if rows:
            return int(rows[0][0])
        return -1

    @contextmanager
    def transaction(self) -> Iterator["SqlClient"]:
        if self._in_transaction:
            yield self
            return
        self._conn.autocommit = False
        self._in_transaction = True
        try:
            yield self
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise
        finally:
            self._in_transaction = False
            self._conn.autocommit = True

    def close(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.close()
        except psycopg2.Error as e:
            logger.warning("Error while closing connection: %s", e)
        finally:
            self._conn = None


def get_sql_client(cfg: AppConfig) -> SqlClient:
    return SqlClient.connect(cfg)
