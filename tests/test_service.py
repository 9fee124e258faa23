import pytest

from cafe.config import NEW_ITEM_STATUS
from cafe.data import queries, service
from cafe.data.service import (
    InvalidInputError,
    NotFoundError,
    NotOrderOwnerError,
    OrderInfo,
    OrderLockedError,
)


def test_create_user_is_always_customer(client):
    service.create_user(client, "bob", "pw", "555")
    assert client.updates == [queries.q_insert_user("bob", "pw", "555", "", "Customer")]


@pytest.mark.parametrize("login,password", [("", "pw"), ("bob", "")])
def test_create_user_requires_credentials(client, login, password):
    with pytest.raises(InvalidInputError):
        service.create_user(client, login, password)
    assert client.updates == []


def test_log_in(client):
    client.on(queries.q_login("bob", "pw"), [("555", "bob", "pw", "", "Customer")])
    assert service.log_in(client, "bob", "pw") == "bob"
    assert service.log_in(client, "bob", "wrong") is None


def test_find_type_strips_padding(client):
    client.on(queries.q_user_type("boss"), [("Manager ",)])
    assert service.find_type(client, "boss") == "Manager"
    assert service.find_type(client, "ghost") is None


def test_update_user_field_validation(client):
    with pytest.raises(InvalidInputError):
        service.update_user_field(client, "bob", "password", "")
    with pytest.raises(InvalidInputError):
        service.update_user_field(client, "bob", "type", "Owner")
    with pytest.raises(InvalidInputError):
        service.update_user_field(client, "bob", "login", "eve")
    service.update_user_field(client, "bob", "type", "Employee")
    assert client.updates == [queries.q_update_user_field("bob", "type", "Employee")]


def test_browse_returns_row_count(client, capsys):
    client.on(queries.q_menu_by_type("Drinks"), [("Latte", "Drinks", 4.25, ""), ("Tea", "Drinks", 3.0, "")])
    assert service.browse_menu_by_type(client, "Drinks") == 2
    assert service.browse_menu_by_name(client, "Pizza") == 0
    assert "Latte" in capsys.readouterr().out


def test_parse_price():
    assert service.parse_price("3.5") == 3.5
    with pytest.raises(InvalidInputError):
        service.parse_price("cheap")
    with pytest.raises(InvalidInputError):
        service.parse_price("-1")


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "Infinity"])
def test_parse_price_rejects_non_finite(raw):
    with pytest.raises(InvalidInputError):
        service.parse_price(raw)


def test_menu_crud(client):
    service.add_menu_item(client, "Mocha", "Drinks", 4.75, "Chocolate", "")
    with pytest.raises(InvalidInputError):
        service.add_menu_item(client, "", "Drinks", 1.0)
    with pytest.raises(NotFoundError):
        service.delete_menu_item(client, "Mocha")

    client.on(queries.q_menu_item("Mocha"), [("Mocha", "Drinks", 4.75, "Chocolate", "")])
    client.on(queries.q_menu_price("Mocha"), [(4.75,)])
    service.delete_menu_item(client, "Mocha")
    service.update_menu_item(client, "Mocha", "price", "5")
    assert client.updates == [
        queries.q_insert_menu_item("Mocha", "Drinks", 4.75, "Chocolate", ""),
        queries.q_deduct_item_from_open_orders("Mocha", 4.75),
        queries.q_delete_item_from_open_orders("Mocha"),
        queries.q_delete_menu_item("Mocha"),
        queries.q_update_menu_field("Mocha", "price", 5.0),
    ]


def test_delete_menu_item_on_open_order_fixes_totals(client):
    client.on(queries.q_menu_item("Latte"), [("Latte", "Drinks", 4.25, "", "")])
    client.on(queries.q_menu_price("Latte"), [(4.25,)])

    service.delete_menu_item(client, "Latte")

    assert client.transactions == 1
    assert client.updates == [
        queries.q_deduct_item_from_open_orders("Latte", 4.25),
        queries.q_delete_item_from_open_orders("Latte"),
        queries.q_delete_menu_item("Latte"),
    ]
    assert "GREATEST(total - 4.25, 0)" in client.updates[0]
    assert "paid = false" in client.updates[0]


def test_delete_menu_item_on_paid_order_is_refused(client):
    client.on(queries.q_menu_item("Latte"), [("Latte", "Drinks", 4.25, "", "")])
    client.on(queries.q_item_on_paid_order("Latte"), [(1,)])

    with pytest.raises(InvalidInputError, match="paid orders"):
        service.delete_menu_item(client, "Latte")
    assert client.updates == []
    assert client.transactions == 0


def test_update_menu_item_rejects_bad_values(client):
    with pytest.raises(InvalidInputError):
        service.update_menu_item(client, "Latte", "price", "free")
    with pytest.raises(InvalidInputError):
        service.update_menu_item(client, "Latte", "type", "")
    with pytest.raises(InvalidInputError):
        service.update_menu_item(client, "Latte", "itemName", "Mocha")


def test_start_order_reads_sequence(client):
    client.seq = 99
    assert service.start_order(client, "alice") == 99
    assert client.updates == [queries.q_insert_order("alice")]
    assert "currval:orders_orderid_seq" in client.executed


def _menu(client, name, price):
    client.on(queries.q_menu_item(name), [(name, "Drinks", price, "", "")])
    client.on(queries.q_menu_price(name), [(price,)])


def test_add_item_updates_running_total(client):
    _menu(client, "Latte", 4.25)
    client.on(queries.q_order_total(7, for_update=True), [(3.5,)])

    assert service.add_item(client, 7, "Latte") == 7.75
    assert client.transactions == 1
    assert client.updates == [
        queries.q_insert_item_status(7, "Latte", NEW_ITEM_STATUS),
        queries.q_set_order_total(7, 7.75),
    ]


def test_add_item_unknown_name(client):
    with pytest.raises(NotFoundError):
        service.add_item(client, 7, "Pizza")
    assert client.updates == []


def test_add_item_twice_is_rejected(client):
    _menu(client, "Latte", 4.25)
    client.on(queries.q_order_has_item(7, "Latte"), [(1,)])
    with pytest.raises(InvalidInputError, match="already"):
        service.add_item(client, 7, "Latte")
    assert client.updates == []


def test_remove_item_subtracts_price(client):
    _menu(client, "Latte", 4.25)
    client.on(queries.q_order_has_item(7, "Latte"), [(1,)])
    client.on(queries.q_order_total(7, for_update=True), [(7.75,)])

    assert service.remove_item(client, 7, "Latte") == 3.5
    assert client.updates == [
        queries.q_delete_item_status(7, "Latte"),
        queries.q_set_order_total(7, 3.5),
    ]


def test_remove_item_not_on_order(client):
    with pytest.raises(NotFoundError, match="not in your order"):
        service.remove_item(client, 7, "Latte")


def test_get_order(client):
    client.on(queries.q_order_header(5), [("alice", False, 12.0)])
    assert service.get_order(client, 5) == OrderInfo(order_id=5, login="alice", paid=False, total=12.0)
    assert service.get_order(client, 6) is None


def test_open_order_for_edit(client):
    client.on(queries.q_order_header(5), [("alice", False, 12.0)])
    client.on(queries.q_order_header(6), [("alice", True, 3.0)])

    assert service.open_order_for_edit(client, 5, login="alice").total == 12.0
    assert service.open_order_for_edit(client, 5).login == "alice"
    with pytest.raises(NotOrderOwnerError):
        service.open_order_for_edit(client, 5, login="bob")
    with pytest.raises(OrderLockedError, match="processed"):
        service.open_order_for_edit(client, 6, login="alice")
    with pytest.raises(NotFoundError):
        service.open_order_for_edit(client, 404)


def test_order_items_and_total(client):
    client.on(queries.q_order_items(5), [("Latte",), ("Tea",)])
    client.on(queries.q_order_total(5), [(7.25,)])
    assert service.order_items(client, 5) == ["Latte", "Tea"]
    assert service.order_total(client, 5) == 7.25
    with pytest.raises(NotFoundError):
        service.order_total(client, 6)


def test_set_item_status(client):
    service.set_item_status(client, 5, "Latte", "Ready")
    assert client.updates == [queries.q_update_item_status(5, "Latte", "Ready")]

    client.rowcounts[queries.q_update_item_status(5, "Pizza", "Ready")] = 0
    with pytest.raises(NotFoundError):
        service.set_item_status(client, 5, "Pizza", "Ready")
    with pytest.raises(InvalidInputError):
        service.set_item_status(client, 5, "Latte", "")


def test_mark_paid(client):
    service.mark_paid(client, 5)
    assert client.updates == [queries.q_mark_paid(5)]
    client.rowcounts[queries.q_mark_paid(6)] = 0
    with pytest.raises(NotFoundError):
        service.mark_paid(client, 6)


def test_order_status(client, capsys):
    client.on(queries.q_order(5), [(5, "alice", False, "2026-10-19 08:00", 4.25)])
    client.on(queries.q_order_item_status(5), [(5, "Latte", "2026-10-19 08:00", "Ready", None)])
    assert service.order_status(client, 5) is True
    assert service.order_status(client, 6) is False
    out = capsys.readouterr().out
    assert "alice" in out
    assert "Ready" in out


def test_history_and_current_orders(client):
    client.on(queries.q_order_history("alice", 3), [(1,), (2,)])
    assert service.order_history(client, "alice", limit=3) == 2
    assert service.current_orders(client) == 0
