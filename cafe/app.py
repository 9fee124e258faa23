"""
Routing only.

All screen logic lives in cafe/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from cafe.components.header import render_header, render_menu
from cafe.components.prompts import read_choice
from cafe.components.session import SessionState
from cafe.config import get_config
from cafe.data import service
from cafe.data.connection import CafeError, DatabaseConnectionError, get_sql_client
from cafe.views import browse, landing, menu_admin, orders, profile


logger = logging.getLogger(__name__)

Action = Callable[[SessionState], object]

LOGOUT = 9

CUSTOMER_MENU: List[Tuple[int, str, Action]] = [
    (1, "Browse Menu by ItemName", browse.by_name),
    (2, "Browse Menu by Type", browse.by_type),
    (3, "Add Order", orders.add_order),
    (4, "Update Order", orders.update_order),
    (5, "View Order History", orders.order_history),
    (6, "View Order Status", orders.order_status),
    (7, "Update User Info", profile.update_user_info),
]

EMPLOYEE_MENU: List[Tuple[int, str, Action]] = [
    (1, "Browse Menu by ItemName", browse.by_name),
    (2, "Browse Menu by Type", browse.by_type),
    (3, "Add Order", orders.add_order),
    (4, "Update Order", orders.employee_update_order),
    (5, "View Current Orders", orders.current_orders),
    (6, "View Order Status", orders.order_status),
    (7, "Update User Info", profile.update_user_info),
]

MANAGER_MENU: List[Tuple[int, str, Action]] = EMPLOYEE_MENU[:6] + [
    (7, "Update User Info", profile.manager_update_user_info),
    (8, "Update Menu", menu_admin.update_menu),
]

ROLE_MENUS = {
    "Customer": CUSTOMER_MENU,
    "Employee": EMPLOYEE_MENU,
    "Manager": MANAGER_MENU,
}


def run_action(action: Action, state: SessionState) -> None:
    # A failed action never ends the session
    try:
        action(state)
    except CafeError as e:
        logger.error("%s", e)


def user_loop(state: SessionState) -> None:
    menu = ROLE_MENUS.get(state.user_type or "")
    if menu is None:
        logger.error("Unknown user type %r for %s", state.user_type, state.login)
        return
    handlers = {key: action for key, _, action in menu}

    while True:
        render_menu("MAIN MENU", [(key, label) for key, label, _ in menu])
        choice = read_choice()
        if choice == LOGOUT:
            return
        action = handlers.get(choice)
        if action is None:
            print("Unrecognized choice!")
            continue
        run_action(action, state)


def main_loop(state: SessionState) -> None:
    while True:
        render_menu("MAIN MENU", [(1, "Create user"), (2, "Log in")], exit_item=(9, "< EXIT"))
        choice = read_choice()
        if choice == 1:
            run_action(landing.create_user, state)
        elif choice == 2:
            try:
                login = landing.log_in(state)
                user_type = service.find_type(state.client, login) if login else None
            except CafeError as e:
                logger.error("%s", e)
                continue
            if login:
                user_loop(replace(state, login=login, user_type=user_type))
        elif choice == 9:
            return
        else:
            print("Unrecognized choice!")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="cafe", description="Cafe ordering console")
    ap.add_argument("dbname")
    ap.add_argument("port", type=int)
    ap.add_argument("--host", default=None)
    ap.add_argument("--user", default=None)
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        cfg = get_config().with_overrides(db_name=args.dbname, db_port=args.port, db_host=args.host, db_user=args.user)
    except ValueError as e:
        logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
        logger.error("Invalid configuration: %s", e)
        return -1
    logging.basicConfig(stream=sys.stderr, level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    render_header("User Interface")
    print("Connecting to database...", end="")
    print(f"Connection URL: {cfg.url}\n")
    try:
        client = get_sql_client(cfg)
    except DatabaseConnectionError as e:
        logger.error("Error - Unable to Connect to Database: %s", e)
        print("Make sure you started postgres on this machine")
        return -1
    print("Done")

    try:
        main_loop(SessionState(cfg=cfg, client=client))
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        print("Disconnecting from database...", end="")
        client.close()
        print("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    sys.exit(main())
