from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, TextIO

from cafe.config import NEW_ITEM_STATUS, ORDER_SEQUENCE, USER_TYPES
from cafe.data import queries
from cafe.data.connection import CafeError, SqlClient


logger = logging.getLogger(__name__)


class InvalidInputError(CafeError):
    pass


class NotFoundError(CafeError):
    pass


class OrderLockedError(CafeError):
    pass


class NotOrderOwnerError(CafeError):
    pass


@dataclass(frozen=True)
class OrderInfo:
    order_id: int
    login: str
    paid: bool
    total: float


# --- Users ---

def create_user(client: SqlClient, login: str, password: str, phone: str = "") -> None:
    # Self-registration always creates a Customer
    if not login or not password:
        raise InvalidInputError("Login and password cannot be empty")
    client.execute_update(queries.q_insert_user(login, password, phone, "", "Customer"))
    logger.info("Created user %s", login)


def log_in(client: SqlClient, login: str, password: str) -> Optional[str]:
    if client.execute_query_count(queries.q_login(login, password)) > 0:
        return login
    return None


def find_type(client: SqlClient, login: str) -> Optional[str]:
    rows = client.execute_query_collect(queries.q_user_type(login))
    if not rows or rows[0][0] is None:
        return None
    # Stored values may be padded ("Manager ")
    return str(rows[0][0]).strip()


def user_exists(client: SqlClient, login: str) -> bool:
    return client.execute_query_count(queries.q_user_exists(login)) > 0


def show_profile(client: SqlClient, login: str, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_user_profile(login), out)


def show_user(client: SqlClient, login: str, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_user_row(login), out)


def update_user_field(client: SqlClient, login: str, field: str, value: str) -> None:
    if field not in queries.USER_FIELDS:
        raise InvalidInputError(f"Unknown user field: {field}")
    if field == "password" and not value:
        raise InvalidInputError("Password cannot be empty")
    if field == "type" and value not in USER_TYPES:
        raise InvalidInputError(f"User type must be one of {', '.join(USER_TYPES)}")
    client.execute_update(queries.q_update_user_field(login, field, value))
    logger.info("Updated %s for %s", field, login)


# --- Menu ---

def browse_menu_by_name(client: SqlClient, name: str, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_menu_by_name(name), out)


def browse_menu_by_type(client: SqlClient, item_type: str, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_menu_by_type(item_type), out)


def menu_item_exists(client: SqlClient, name: str) -> bool:
    return client.execute_query_count(queries.q_menu_item(name)) > 0


def show_menu_item(client: SqlClient, name: str, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_menu_item(name), out)


def parse_price(raw: str) -> float:
    try:
        price = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Not a valid price: {raw!r}") from None
    if not math.isfinite(price):
        raise InvalidInputError(f"Not a valid price: {raw!r}")
    if price < 0:
        raise InvalidInputError("Price cannot be negative")
    return price


def add_menu_item(
    client: SqlClient,
    name: str,
    item_type: str,
    price: float,
    description: str = "",
    image_url: str = "",
) -> None:
    if not name or not item_type:
        raise InvalidInputError("Item name and type cannot be empty")
    client.execute_update(queries.q_insert_menu_item(name, item_type, price, description, image_url))
    logger.info("Added menu item %s", name)


def delete_menu_item(client: SqlClient, name: str) -> None:
    """
    Removes an item from the menu.

    Unpaid orders that hold the item drop it and lose its price from their
    total. Items that appear on paid orders are kept, since those totals
    are final.
    """
    if not menu_item_exists(client, name):
        raise NotFoundError("The item does not exist")
    if client.execute_query_count(queries.q_item_on_paid_order(name)) > 0:
        raise InvalidInputError(f"{name} is on paid orders and cannot be deleted")
    with client.transaction():
        price = _item_price(client, name)
        client.execute_update(queries.q_deduct_item_from_open_orders(name, price))
        client.execute_update(queries.q_delete_item_from_open_orders(name))
        client.execute_update(queries.q_delete_menu_item(name))
    logger.info("Deleted menu item %s", name)


def update_menu_item(client: SqlClient, name: str, field: str, value) -> None:
    if field not in queries.MENU_FIELDS:
        raise InvalidInputError(f"Unknown menu field: {field}")
    if field == "price":
        value = parse_price(value) if isinstance(value, str) else float(value)
    elif field == "type" and not value:
        raise InvalidInputError("Item type cannot be empty")
    client.execute_update(queries.q_update_menu_field(name, field, value))


# --- Orders ---

def start_order(client: SqlClient, login: str) -> int:
    """Creates an empty unpaid order and returns its id."""
    client.execute_update(queries.q_insert_order(login))
    order_id = client.get_current_sequence_value(ORDER_SEQUENCE)
    logger.info("Started order %s for %s", order_id, login)
    return order_id


def get_order(client: SqlClient, order_id: int) -> Optional[OrderInfo]:
    rows = client.execute_query_collect(queries.q_order_header(order_id))
    if not rows:
        return None
    login, paid, total = rows[0]
    return OrderInfo(order_id=int(order_id), login=login, paid=bool(paid), total=float(total))


def order_exists(client: SqlClient, order_id: int) -> bool:
    return client.execute_query_count(queries.q_order(order_id)) > 0


def open_order_for_edit(client: SqlClient, order_id: int, login: Optional[str] = None) -> OrderInfo:
    """
    Returns the order if it may still be changed.
    With `login` set, the order must also belong to that user.
    """
    order = get_order(client, order_id)
    if order is None:
        raise NotFoundError("The order ID does not exist")
    if login is not None and order.login != login:
        raise NotOrderOwnerError("This order belongs to another user")
    if order.paid:
        raise OrderLockedError("Sorry, the order has been processed")
    return order


def order_items(client: SqlClient, order_id: int) -> List[str]:
    return [r[0] for r in client.execute_query_collect(queries.q_order_items(order_id))]


def print_order_items(client: SqlClient, order_id: int, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_order_items(order_id), out)


def order_total(client: SqlClient, order_id: int) -> float:
    rows = client.execute_query_collect(queries.q_order_total(order_id))
    if not rows:
        raise NotFoundError("The order ID does not exist")
    return float(rows[0][0])


def _item_price(client: SqlClient, name: str) -> float:
    rows = client.execute_query_collect(queries.q_menu_price(name))
    if not rows:
        raise NotFoundError(f"Invalid name: {name}")
    return float(rows[0][0])


def add_item(client: SqlClient, order_id: int, name: str) -> float:
    """
    Puts a menu item on the order and adds its price to the running total.
    Returns the new total.
    """
    if not menu_item_exists(client, name):
        raise NotFoundError(f"Invalid name: {name}")
    if client.execute_query_count(queries.q_order_has_item(order_id, name)) > 0:
        raise InvalidInputError(f"{name} is already in this order")

    with client.transaction():
        client.execute_update(queries.q_insert_item_status(order_id, name, NEW_ITEM_STATUS))
        price = _item_price(client, name)
        total = float(client.execute_query_collect(queries.q_order_total(order_id, for_update=True))[0][0])
        new_total = round(total + price, 2)
        client.execute_update(queries.q_set_order_total(order_id, new_total))
    logger.debug("Order %s: +%s (%.2f), total %.2f", order_id, name, price, new_total)
    return new_total


def remove_item(client: SqlClient, order_id: int, name: str) -> float:
    """Takes an item off the order and subtracts its price. Returns the new total."""
    if client.execute_query_count(queries.q_order_has_item(order_id, name)) == 0:
        raise NotFoundError("The item is not in your order list")

    with client.transaction():
        client.execute_update(queries.q_delete_item_status(order_id, name))
        price = _item_price(client, name)
        total = float(client.execute_query_collect(queries.q_order_total(order_id, for_update=True))[0][0])
        new_total = max(round(total - price, 2), 0.0)
        client.execute_update(queries.q_set_order_total(order_id, new_total))
    logger.debug("Order %s: -%s (%.2f), total %.2f", order_id, name, price, new_total)
    return new_total


def set_item_status(client: SqlClient, order_id: int, name: str, status: str) -> None:
    if not status:
        raise InvalidInputError("Status cannot be empty")
    if client.execute_update(queries.q_update_item_status(order_id, name, status)) == 0:
        raise NotFoundError("The item is not in this order")


def mark_paid(client: SqlClient, order_id: int) -> None:
    if client.execute_update(queries.q_mark_paid(order_id)) == 0:
        raise NotFoundError("The order ID does not exist")
    logger.info("Order %s marked paid", order_id)


def order_history(client: SqlClient, login: str, limit: int = 5, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_order_history(login, limit), out)


def order_status(client: SqlClient, order_id: int, out: Optional[TextIO] = None) -> bool:
    """Prints the order row and its item statuses. False if there is no such order."""
    if not order_exists(client, order_id):
        return False
    client.execute_query_print(queries.q_order(order_id), out)
    client.execute_query_print(queries.q_order_item_status(order_id), out)
    return True


def current_orders(client: SqlClient, out: Optional[TextIO] = None) -> int:
    return client.execute_query_print(queries.q_current_orders(), out)
