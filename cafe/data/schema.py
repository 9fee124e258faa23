from __future__ import annotations

from typing import List

from cafe.data.connection import SqlClient


# Dependency order: Menu/Users before Orders before ItemStatus
TABLES = ["Users", "Menu", "Orders", "ItemStatus"]

DDL = {
    "Users": """
    CREATE TABLE IF NOT EXISTS Users (
      login     text NOT NULL,
      password  text NOT NULL,
      phoneNum  text,
      favItems  text,
      type      text NOT NULL,
      PRIMARY KEY (login)
    )
    """,
    "Menu": """
    CREATE TABLE IF NOT EXISTS Menu (
      itemName     text NOT NULL,
      type         text NOT NULL,
      price        real NOT NULL,
      description  text,
      imageURL     text,
      PRIMARY KEY (itemName)
    )
    """,
    "Orders": """
    CREATE TABLE IF NOT EXISTS Orders (
      orderid            serial UNIQUE NOT NULL,
      login              text REFERENCES Users (login),
      paid               boolean NOT NULL DEFAULT false,
      timeStampRecieved  timestamp NOT NULL,
      total              real NOT NULL,
      PRIMARY KEY (orderid)
    )
    """,
    "ItemStatus": """
    CREATE TABLE IF NOT EXISTS ItemStatus (
      orderid      integer REFERENCES Orders (orderid),
      itemName     text REFERENCES Menu (itemName),
      lastUpdated  timestamp NOT NULL,
      status       text,
      comments     text,
      PRIMARY KEY (orderid, itemName)
    )
    """,
}


def create_statements() -> List[str]:
    return [DDL[t].strip() for t in TABLES]


def drop_statements() -> List[str]:
    return [f"DROP TABLE IF EXISTS {t} CASCADE" for t in reversed(TABLES)]


def ensure_schema(client: SqlClient, drop: bool = False) -> None:
    with client.transaction():
        if drop:
            for stmt in drop_statements():
                client.execute_update(stmt)
        for stmt in create_statements():
            client.execute_update(stmt)
