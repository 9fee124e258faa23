from __future__ import annotations

from typing import Optional

from cafe.components.prompts import read_line
from cafe.components.session import SessionState
from cafe.data import service


def create_user(state: SessionState) -> None:
    login = read_line("\tEnter user login: ")
    password = read_line("\tEnter user password: ")
    phone = read_line("\tEnter user phone: (can be left blank) ")
    service.create_user(state.client, login, password, phone)
    print("User successfully created!")


def log_in(state: SessionState) -> Optional[str]:
    """Returns the login on success, None otherwise."""
    login = read_line("\tEnter user login: ")
    password = read_line("\tEnter user password: ")
    if service.log_in(state.client, login, password):
        print("\tLogged in successfully!")
        return login
    print("\tWrong user login or password")
    return None
