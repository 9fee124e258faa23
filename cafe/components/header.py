from __future__ import annotations

from typing import Iterable, Tuple


def render_header(app_name: str, subtitle: str = "") -> None:
    bar = "*" * 55
    print(f"\n\n{bar}")
    print(f"{app_name:^55}")
    if subtitle:
        print(f"{subtitle:^55}")
    print(f"{bar}\n")


def render_menu(title: str, items: Iterable[Tuple[int, str]], exit_item: Tuple[int, str] = (9, "Log out")) -> None:
    """
    Numbered menu as used by every screen:
    title, underline, one line per entry, separator, exit entry.
    """
    print(title)
    print("-" * len(title))
    for key, label in items:
        print(f"{key}. {label}")
    print(".........................")
    print(f"{exit_item[0]}. {exit_item[1]}")


def render_options(question: str, options: Iterable[Tuple[int, str]]) -> None:
    print(f"\t{question}")
    for key, label in options:
        print(f"\t\t{key}. {label}")
