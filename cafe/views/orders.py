from __future__ import annotations

from cafe.components.header import render_options
from cafe.components.prompts import ask_yes_no, read_int, read_line, read_nonempty
from cafe.components.session import SessionState
from cafe.data import service
from cafe.data.service import InvalidInputError, NotFoundError, NotOrderOwnerError, OrderLockedError


def _add_one(state: SessionState, order_id: int) -> None:
    name = read_line("\tPlease enter the item name: ")
    try:
        total = service.add_item(state.client, order_id, name)
    except (NotFoundError, InvalidInputError) as e:
        print(f"\t{e}")
        return
    print(f"\tAdded {name}. Running total: ${total:.2f}")


def _remove_one(state: SessionState, order_id: int) -> None:
    name = read_line("\tWhich item would you like to delete? ")
    try:
        service.remove_item(state.client, order_id, name)
    except NotFoundError as e:
        print(f"\t{e}")
        return
    print("\tDeleted!")


def add_order(state: SessionState) -> int:
    client = state.client
    order_id = service.start_order(client, state.login)
    _add_one(state, order_id)

    while ask_yes_no(
        "\tIs there any other order to make? (Y/N) ",
        "\tUnrecognized choice\n\tIs there any other order to make? (Y/N) ",
    ):
        _add_one(state, order_id)

    print("\tYour order:")
    rows = service.print_order_items(client, order_id)
    print(f"\tTotal Items: {rows}")
    print(f"\tOrder total: ${service.order_total(client, order_id):.2f}")
    print(f"\tOrder id is: {order_id}")
    print("\tThank you for your order!")
    return order_id


def update_order(state: SessionState) -> None:
    """Customers edit their own unpaid orders."""
    order_id = read_int("\tPlease enter your order id: ")
    try:
        service.open_order_for_edit(state.client, order_id, login=state.login)
    except (NotFoundError, NotOrderOwnerError, OrderLockedError) as e:
        print(f"\t{e}")
        return

    while True:
        print("Your order:")
        service.print_order_items(state.client, order_id)
        render_options(
            "What changes would you like to make?",
            [(1, "Add another item"), (2, "Delete an item"), (3, "Finish editing")],
        )
        choice = read_line()
        if choice == "1":
            _add_one(state, order_id)
        elif choice == "2":
            _remove_one(state, order_id)
        elif choice == "3":
            print("\tThank you for checking your order")
            return
        else:
            print("\tUnrecognized choice. Please enter again")


def employee_update_order(state: SessionState) -> None:
    """Staff change item preparation status, edit items and take payment."""
    client = state.client
    order_id = read_int("\tPlease enter the order id: ")
    order = service.get_order(client, order_id)
    if order is None:
        print("\tThe order ID does not exist")
        return

    while True:
        service.order_status(client, order_id)
        render_options(
            "What changes would you like to make?",
            [
                (1, "Add an item"),
                (2, "Delete an item"),
                (3, "Update an item status"),
                (4, "Mark order as paid"),
                (9, "Finish editing"),
            ],
        )
        choice = read_line()
        if choice in ("1", "2", "4") and order.paid:
            print("\tSorry, the order has been processed")
        elif choice == "1":
            _add_one(state, order_id)
        elif choice == "2":
            _remove_one(state, order_id)
        elif choice == "3":
            name = read_line("\tWhich item would you like to update? ")
            status = read_nonempty("\tPlease enter the new status: ")
            try:
                service.set_item_status(client, order_id, name, status)
            except NotFoundError as e:
                print(f"\t{e}")
        elif choice == "4":
            service.mark_paid(client, order_id)
            order = service.get_order(client, order_id)
            print(f"\tOrder {order_id} paid. Total: ${order.total:.2f}")
        elif choice == "9":
            print("\tThank you for updating the order")
            return
        else:
            print("\tUnrecognized choice. Please enter again")


def order_history(state: SessionState) -> None:
    if service.order_history(state.client, state.login, state.cfg.history_limit) == 0:
        print("\tThere is no past order")


def order_status(state: SessionState) -> None:
    order_id = read_int("\tPlease enter your order ID: ")
    if not service.order_status(state.client, order_id):
        print("\tThe order ID does not exist")


def current_orders(state: SessionState) -> None:
    # unpaid orders from the past 24 hours
    if service.current_orders(state.client) == 0:
        print("\tThere is no current order")
