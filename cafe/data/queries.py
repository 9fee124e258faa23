from __future__ import annotations

import math
from typing import Optional


def lit(value: Optional[str]) -> str:
    """Quote a value as a SQL string literal."""
    if value is None:
        return "NULL"
    return "'" + str(value).replace("'", "''") + "'"


def num(value: float) -> str:
    # float() rejects anything that is not a plain number
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {value!r}")
    return repr(value)


# --- Users ---

def q_insert_user(login: str, password: str, phone: str, fav_items: str = "", user_type: str = "Customer") -> str:
    return (
        "INSERT INTO Users (phoneNum, login, password, favItems, type) "
        f"VALUES ({lit(phone)}, {lit(login)}, {lit(password)}, {lit(fav_items)}, {lit(user_type)})"
    )


def q_login(login: str, password: str) -> str:
    return f"SELECT * FROM Users WHERE login = {lit(login)} AND password = {lit(password)}"


def q_user_type(login: str) -> str:
    return f"SELECT u.type FROM Users u WHERE u.login = {lit(login)}"


def q_user_exists(login: str) -> str:
    return f"SELECT 1 FROM Users WHERE login = {lit(login)}"


def q_user_profile(login: str) -> str:
    return f"SELECT login, password, phoneNum, favItems FROM Users WHERE login = {lit(login)}"


def q_user_row(login: str) -> str:
    return f"SELECT * FROM Users WHERE login = {lit(login)}"


# Editable Users columns, keyed by what the prompts call them
USER_FIELDS = {
    "password": "password",
    "phone": "phoneNum",
    "favorites": "favItems",
    "type": "type",
}


def q_update_user_field(login: str, field: str, value: str) -> str:
    column = USER_FIELDS[field]
    return f"UPDATE Users SET {column} = {lit(value)} WHERE login = {lit(login)}"


# --- Menu ---

MENU_COLUMNS = "M.itemName, M.type, M.price, M.description"


def q_menu_by_name(name: str) -> str:
    return f"SELECT {MENU_COLUMNS} FROM Menu M WHERE M.itemName = {lit(name)}"


def q_menu_by_type(item_type: str) -> str:
    return f"SELECT {MENU_COLUMNS} FROM Menu M WHERE M.type = {lit(item_type)}"


def q_menu_item(name: str) -> str:
    return f"SELECT * FROM Menu M WHERE M.itemName = {lit(name)}"


def q_menu_price(name: str) -> str:
    return f"SELECT M.price FROM Menu M WHERE M.itemName = {lit(name)}"


def q_insert_menu_item(name: str, item_type: str, price: float, description: str, image_url: str) -> str:
    return (
        "INSERT INTO Menu (itemName, type, price, description, imageURL) "
        f"VALUES ({lit(name)}, {lit(item_type)}, {num(price)}, {lit(description)}, {lit(image_url)})"
    )


def q_delete_menu_item(name: str) -> str:
    return f"DELETE FROM Menu WHERE itemName = {lit(name)}"


MENU_FIELDS = {
    "type": "type",
    "price": "price",
    "description": "description",
    "imageurl": "imageURL",
}


def q_update_menu_field(name: str, field: str, value) -> str:
    column = MENU_FIELDS[field]
    rendered = num(value) if field == "price" else lit(value)
    return f"UPDATE Menu SET {column} = {rendered} WHERE itemName = {lit(name)}"


# --- Orders ---

def q_insert_order(login: str) -> str:
    return (
        "INSERT INTO Orders (login, paid, timeStampRecieved, total) "
        f"VALUES ({lit(login)}, false, CURRENT_TIMESTAMP, 0)"
    )


def q_order(order_id: int) -> str:
    return f"SELECT * FROM Orders WHERE orderid = {int(order_id)}"


def q_order_header(order_id: int) -> str:
    return f"SELECT o.login, o.paid, o.total FROM Orders o WHERE o.orderid = {int(order_id)}"


def q_order_total(order_id: int, for_update: bool = False) -> str:
    lock = " FOR UPDATE" if for_update else ""
    return f"SELECT o.total FROM Orders o WHERE o.orderid = {int(order_id)}{lock}"


def q_set_order_total(order_id: int, total: float) -> str:
    return f"UPDATE Orders SET total = {num(total)} WHERE orderid = {int(order_id)}"


def q_mark_paid(order_id: int) -> str:
    return f"UPDATE Orders SET paid = true WHERE orderid = {int(order_id)}"


def q_order_history(login: str, limit: int = 5) -> str:
    return (
        f"SELECT * FROM Orders WHERE login = {lit(login)} "
        f"ORDER BY timeStampRecieved DESC LIMIT {int(limit)}"
    )


def q_current_orders() -> str:
    # Unpaid orders from the past 24 hours
    return (
        "SELECT * FROM Orders WHERE paid = false "
        "AND timeStampRecieved >= NOW() - '1 day'::INTERVAL "
        "ORDER BY timeStampRecieved DESC"
    )


# --- ItemStatus ---

def q_order_items(order_id: int) -> str:
    return f"SELECT i.itemName FROM ItemStatus i WHERE i.orderid = {int(order_id)}"


def q_order_item_status(order_id: int) -> str:
    return f"SELECT * FROM ItemStatus WHERE orderid = {int(order_id)}"


def q_order_has_item(order_id: int, name: str) -> str:
    return f"SELECT 1 FROM ItemStatus i WHERE i.itemName = {lit(name)} AND i.orderid = {int(order_id)}"


def q_insert_item_status(order_id: int, name: str, status: str) -> str:
    return (
        "INSERT INTO ItemStatus (orderid, itemName, lastUpdated, status) "
        f"VALUES ({int(order_id)}, {lit(name)}, CURRENT_TIMESTAMP, {lit(status)})"
    )


def q_delete_item_status(order_id: int, name: str) -> str:
    return f"DELETE FROM ItemStatus WHERE itemName = {lit(name)} AND orderid = {int(order_id)}"


def q_update_item_status(order_id: int, name: str, status: str) -> str:
    return (
        f"UPDATE ItemStatus SET status = {lit(status)}, lastUpdated = CURRENT_TIMESTAMP "
        f"WHERE itemName = {lit(name)} AND orderid = {int(order_id)}"
    )


def q_item_on_paid_order(name: str) -> str:
    return (
        "SELECT 1 FROM ItemStatus i JOIN Orders o ON o.orderid = i.orderid "
        f"WHERE i.itemName = {lit(name)} AND o.paid = true"
    )


def q_deduct_item_from_open_orders(name: str, price: float) -> str:
    # Unpaid orders holding the item lose its price
    return (
        f"UPDATE Orders SET total = GREATEST(total - {num(price)}, 0) "
        f"WHERE paid = false AND orderid IN (SELECT orderid FROM ItemStatus WHERE itemName = {lit(name)})"
    )


def q_delete_item_from_open_orders(name: str) -> str:
    return (
        f"DELETE FROM ItemStatus WHERE itemName = {lit(name)} "
        "AND orderid IN (SELECT orderid FROM Orders WHERE paid = false)"
    )
