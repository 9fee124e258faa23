from __future__ import annotations

from contextlib import contextmanager

import pytest

from cafe.components.session import SessionState
from cafe.config import AppConfig


class FakeClient:
    """
    Stands in for SqlClient. SELECT results are keyed by exact SQL text,
    so tests build the expected statements with the same `queries` helpers.
    """

    def __init__(self):
        self.executed = []
        self.updates = []
        self.results = {}
        self.rowcounts = {}
        self.seq = 41
        self.transactions = 0
        self.closed = False

    def on(self, sql, rows):
        self.results[sql] = [list(r) for r in rows]
        return self

    def _rows(self, sql):
        self.executed.append(sql)
        return [list(r) for r in self.results.get(sql, [])]

    def execute_update(self, sql):
        self.executed.append(sql)
        self.updates.append(sql)
        return self.rowcounts.get(sql, 1)

    def execute_query_collect(self, sql):
        return self._rows(sql)

    def execute_query_count(self, sql):
        return 1 if self._rows(sql) else 0

    def execute_query_print(self, sql, out=None):
        rows = self._rows(sql)
        for r in rows:
            print("\t".join(str(v) for v in r), file=out)
        return len(rows)

    def get_current_sequence_value(self, sequence):
        self.executed.append(f"currval:{sequence}")
        return self.seq

    @contextmanager
    def transaction(self):
        self.transactions += 1
        yield self

    def close(self):
        self.closed = True


@pytest.fixture
def cfg():
    return AppConfig(
        db_host="127.0.0.1",
        db_port=5432,
        db_name="cafe_test",
        db_user=None,
        db_password=None,
        log_level="WARNING",
        history_limit=5,
    )


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def state(cfg, client):
    return SessionState(cfg=cfg, client=client, login="alice", user_type="Customer")


@pytest.fixture
def feed(monkeypatch):
    """Script stdin: feed(["1", "Latte", ...]). Running out raises EOFError."""

    def _feed(lines):
        it = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
