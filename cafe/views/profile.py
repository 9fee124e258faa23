from __future__ import annotations

from cafe.components.header import render_options
from cafe.components.prompts import UNRECOGNIZED, ask_yes_no, read_line, read_nonempty
from cafe.components.session import SessionState
from cafe.config import USER_TYPES
from cafe.data import service


SELF_FIELDS = [(1, "Password"), (2, "Phone Number"), (3, "Favorite Items"), (9, "Nothing")]
MANAGER_FIELDS = [(1, "Password"), (2, "Phone Number"), (3, "Favorite Items"), (4, "Type"), (9, "Nothing")]

# menu choice -> (users field, prompt)
FIELD_PROMPTS = {
    "1": ("password", "\tPlease enter the new password: "),
    "2": ("phone", "\tPlease enter the new phone number: "),
    "3": ("favorites", "\tPlease enter the favorite items: "),
}


def _read_field(choice: str) -> tuple[str, str]:
    field, prompt = FIELD_PROMPTS[choice]
    # password cannot be empty
    value = read_nonempty(prompt) if field == "password" else read_line(prompt)
    return field, value


def _read_user_type() -> str:
    options = dict((str(i), t) for i, t in enumerate(reversed(USER_TYPES), start=1))
    while True:
        print("\tPlease enter the type: ")
        for key, user_type in options.items():
            print(f"\t{key}. {user_type}")
        answer = read_line()
        if answer in options:
            return options[answer]
        print("\tUnrecognized choice! Please enter again: ")


def update_user_info(state: SessionState) -> None:
    while True:
        service.show_profile(state.client, state.login)
        render_options("Which would you like to update?", SELF_FIELDS)
        choice = read_line()
        if choice in FIELD_PROMPTS:
            field, value = _read_field(choice)
            service.update_user_field(state.client, state.login, field, value)
        elif choice == "9":
            print("\tThank you for updating your info")
            return
        else:
            print(UNRECOGNIZED, end="")


def _update_one_user(state: SessionState, login: str) -> None:
    while True:
        render_options("Which would you like to update?", MANAGER_FIELDS)
        choice = read_line()
        if choice in FIELD_PROMPTS:
            field, value = _read_field(choice)
            service.update_user_field(state.client, login, field, value)
        elif choice == "4":
            service.update_user_field(state.client, login, "type", _read_user_type())
        elif choice == "9":
            print("\tThank you for updating the info")
            return
        else:
            print(UNRECOGNIZED, end="")


def manager_update_user_info(state: SessionState) -> None:
    while True:
        login = read_line("Please enter the login you want to check: ")
        if service.user_exists(state.client, login):
            service.show_user(state.client, login)
            _update_one_user(state, login)
            service.show_user(state.client, login)
        else:
            print("\tThe user does not exist")

        if not ask_yes_no("Is there another user info you want to update? (Y/N) "):
            return
