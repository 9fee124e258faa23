from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cafe.config import AppConfig
from cafe.data.connection import SqlClient


@dataclass(frozen=True)
class SessionState:
    cfg: AppConfig
    client: SqlClient
    login: Optional[str] = None
    user_type: Optional[str] = None
