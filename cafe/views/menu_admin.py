from __future__ import annotations

from cafe.components.header import render_options
from cafe.components.prompts import ask_yes_no, read_line, read_nonempty, read_price
from cafe.components.session import SessionState
from cafe.data import service
from cafe.data.service import InvalidInputError, NotFoundError


ACTIONS = [(1, "Add an item"), (2, "Delete an item"), (3, "Edit an item"), (9, "Finished updating")]
EDIT_FIELDS = [(1, "Type"), (2, "Price"), (3, "Description"), (4, "imageurl"), (5, "Nothing")]


def _add_item(state: SessionState) -> None:
    name = read_nonempty("\tPlease enter the name of the item: ")
    item_type = read_nonempty("\tPlease enter the type of the item: ")
    price = read_price("\tPlease enter the price of the item: ")
    description = read_line("\tPlease enter the description of the item: (Press enter to skip) ")
    image_url = read_line("\tPlease enter the imageurl of the item: (Press enter to skip) ")
    service.add_menu_item(state.client, name, item_type, price, description, image_url)
    print("\tItem Added")


def _delete_item(state: SessionState) -> None:
    name = read_line("\tPlease enter the name of the item you want to delete: ")
    if not service.menu_item_exists(state.client, name):
        print("\tThe item does not exist")
        return
    service.show_menu_item(state.client, name)
    if ask_yes_no("\tAre you sure you want to delete this item? (Y/N) "):
        service.delete_menu_item(state.client, name)
        print("\tItem Deleted")
    else:
        print("\tItem Kept")


def _edit_item(state: SessionState) -> None:
    name = read_line("Please enter the name of the item you want to update: ")
    if not service.menu_item_exists(state.client, name):
        print("\tThe item does not exist")
        return
    service.show_menu_item(state.client, name)

    while True:
        render_options("What would you like to update?", EDIT_FIELDS)
        choice = read_line()
        if choice == "1":
            service.update_menu_item(state.client, name, "type", read_nonempty("\tPlease enter the new type of the item: "))
        elif choice == "2":
            service.update_menu_item(state.client, name, "price", read_price("\tPlease enter the new price of the item: "))
        elif choice == "3":
            service.update_menu_item(state.client, name, "description", read_line("\tPlease enter the new description of the item: "))
        elif choice == "4":
            service.update_menu_item(state.client, name, "imageurl", read_line("\tPlease enter the new imageurl of the item: "))
        elif choice == "5":
            print("\tThank you for updating")
            return
        else:
            print("Unrecognized choice. Please enter again: ")


def update_menu(state: SessionState) -> None:
    while True:
        render_options("Which action would you like to take today?", ACTIONS)
        choice = read_line()
        try:
            if choice == "1":
                _add_item(state)
            elif choice == "2":
                _delete_item(state)
            elif choice == "3":
                _edit_item(state)
            elif choice == "9":
                print("\tThank you for updating the menu")
                return
            else:
                print("\tUnrecognized choice. Please enter again: ")
        except (NotFoundError, InvalidInputError) as e:
            print(f"\t{e}")
