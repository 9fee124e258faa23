from __future__ import annotations

from cafe.components.prompts import read_line
from cafe.components.session import SessionState
from cafe.data import service


def by_name(state: SessionState) -> None:
    name = read_line("\tEnter item name: ")
    rows = service.browse_menu_by_name(state.client, name)
    print(f"\ttotal row(s): {rows}")


def by_type(state: SessionState) -> None:
    item_type = read_line("\tEnter item type: ")
    rows = service.browse_menu_by_type(state.client, item_type)
    print(f"\ttotal row(s): {rows}")
