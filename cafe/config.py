from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv
from psycopg2.extensions import make_dsn


USER_TYPES = ("Customer", "Employee", "Manager")

# Sequence behind Orders.orderid (serial column)
ORDER_SEQUENCE = "orders_orderid_seq"

NEW_ITEM_STATUS = "Hasn't started"


@dataclass(frozen=True)
class AppConfig:
    # Required to reach PostgreSQL
    db_host: str
    db_port: int
    db_name: str

    # Optional auth. If unset, libpq falls back to the OS user / .pgpass.
    db_user: Optional[str]
    db_password: Optional[str]

    # Defaults
    log_level: str
    history_limit: int

    @property
    def dsn(self) -> str:
        # make_dsn quotes values and drops the unset ones
        return make_dsn(
            host=self.db_host,
            port=self.db_port,
            dbname=self.db_name,
            user=self.db_user,
            password=self.db_password,
        )

    @property
    def url(self) -> str:
        # Display form only, never carries the password
        return f"postgresql://{self.db_host}:{self.db_port}/{self.db_name}"

    def with_overrides(
        self,
        db_name: Optional[str] = None,
        db_port: Optional[int] = None,
        db_host: Optional[str] = None,
        db_user: Optional[str] = None,
    ) -> "AppConfig":
        changes = {
            k: v
            for k, v in {"db_name": db_name, "db_port": db_port, "db_host": db_host, "db_user": db_user}.items()
            if v is not None
        }
        return replace(self, **changes)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - CLI arguments are applied afterwards with `AppConfig.with_overrides`
    """
    load_dotenv(override=False)

    return AppConfig(
        db_host=_getenv("CAFE_DB_HOST", "127.0.0.1") or "127.0.0.1",
        db_port=_getint("CAFE_DB_PORT", 5432),
        db_name=_getenv("CAFE_DB_NAME", "cafe") or "cafe",
        db_user=_getenv("CAFE_DB_USER"),
        db_password=_getenv("CAFE_DB_PASSWORD"),
        log_level=(_getenv("CAFE_LOG_LEVEL", "WARNING") or "WARNING").upper(),
        history_limit=_getint("CAFE_HISTORY_LIMIT", 5),
    )
