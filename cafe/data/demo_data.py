from __future__ import annotations

import random

import pandas as pd
from faker import Faker

from cafe.config import NEW_ITEM_STATUS, ORDER_SEQUENCE
from cafe.data import queries
from cafe.data.connection import SqlClient


fake = Faker()


MENU = [
    # name, type, price, description
    ("Espresso", "Drinks", 2.5, "Single shot"),
    ("Americano", "Drinks", 3.0, "Espresso with hot water"),
    ("Latte", "Drinks", 4.25, "Espresso with steamed milk"),
    ("Cappuccino", "Drinks", 4.0, "Espresso, milk and foam"),
    ("Chai Tea", "Drinks", 3.75, "Spiced black tea"),
    ("Croissant", "Bakery", 2.75, "Butter croissant"),
    ("Blueberry Muffin", "Bakery", 3.25, "Baked daily"),
    ("Cheesecake", "Sweets", 5.5, "New York style"),
    ("Bagel", "Bakery", 3.0, "With cream cheese"),
    ("Tomato Soup", "Soup", 5.0, "With basil"),
]

STAFF = [
    # login, password, type
    ("manager", "manager", "Manager"),
    ("barista", "barista", "Employee"),
]


def menu_demo() -> pd.DataFrame:
    rows = [
        {
            "itemName": name,
            "type": item_type,
            "price": price,
            "description": desc,
            "imageURL": f"https://example.com/menu/{name.lower().replace(' ', '_')}.jpg",
        }
        for name, item_type, price, desc in MENU
    ]
    return pd.DataFrame(rows)


def users_demo(n_customers: int = 20) -> pd.DataFrame:
    random.seed(11)
    Faker.seed(11)
    rows = [
        {"login": login, "password": pw, "phoneNum": fake.phone_number(), "favItems": "", "type": t}
        for login, pw, t in STAFF
    ]
    seen = {r["login"] for r in rows}
    while len(rows) < len(STAFF) + n_customers:
        login = fake.user_name()
        if login in seen:
            continue
        seen.add(login)
        favs = ",".join(random.sample([m[0] for m in MENU], k=2))
        rows.append(
            {
                "login": login,
                "password": fake.password(length=10, special_chars=False),
                "phoneNum": fake.phone_number(),
                "favItems": favs,
                "type": "Customer",
            }
        )
    return pd.DataFrame(rows)


def load_demo_data(client: SqlClient, n_customers: int = 20, orders_per_customer: int = 2) -> int:
    """
    Inserts demo users, the menu and a few open orders.
    Returns the number of orders created.
    """
    random.seed(13)
    users = users_demo(n_customers)
    menu = menu_demo()
    prices = dict(zip(menu["itemName"], menu["price"]))

    with client.transaction():
        for r in menu.itertuples(index=False):
            client.execute_update(queries.q_insert_menu_item(r.itemName, r.type, r.price, r.description, r.imageURL))
        for r in users.itertuples(index=False):
            client.execute_update(queries.q_insert_user(r.login, r.password, r.phoneNum, r.favItems, r.type))

        n_orders = 0
        for login in users.loc[users["type"] == "Customer", "login"]:
            for _ in range(orders_per_customer):
                client.execute_update(queries.q_insert_order(login))
                order_id = client.get_current_sequence_value(ORDER_SEQUENCE)
                picks = random.sample(list(prices), k=random.randint(1, 3))
                for name in picks:
                    client.execute_update(queries.q_insert_item_status(order_id, name, NEW_ITEM_STATUS))
                client.execute_update(queries.q_set_order_total(order_id, sum(prices[n] for n in picks)))
                n_orders += 1
    return n_orders
