from __future__ import annotations

from cafe.data.service import InvalidInputError, parse_price


UNRECOGNIZED = "\tUnrecognized choice! Please enter again: "


def read_line(prompt: str = "") -> str:
    """One line from stdin. EOFError propagates so the caller can shut down."""
    return input(prompt).strip()


def read_choice(prompt: str = "Please make your choice: ") -> int:
    # returns only once a number is given
    while True:
        raw = read_line(prompt)
        try:
            return int(raw)
        except ValueError:
            print("Your input is invalid!")


def read_nonempty(prompt: str) -> str:
    while True:
        value = read_line(prompt)
        if value:
            return value


def read_int(prompt: str) -> int:
    while True:
        raw = read_line(prompt)
        try:
            return int(raw)
        except ValueError:
            print("\tPlease enter a number.")


def read_price(prompt: str) -> float:
    while True:
        raw = read_nonempty(prompt)
        try:
            return parse_price(raw)
        except InvalidInputError as e:
            print(f"\t{e}")


def ask_yes_no(prompt: str, retry_prompt: str = UNRECOGNIZED) -> bool:
    answer = read_line(prompt)
    while answer not in ("y", "Y", "n", "N"):
        answer = read_line(retry_prompt)
    return answer in ("y", "Y")
