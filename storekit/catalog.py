"""A small interactive catalog of goods with a fixed capacity."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from storekit.prompts import (
    ask_question_int,
    ask_question_shelf,
    ask_question_string,
    is_in_list,
)

DEFAULT_CAPACITY = 16
MENU = (
    "[L]ägga till en vara\n"
    "[T]a bort en vara\n"
    "[R]edigera en vara\n"
    "Ån[g]ra senaste ändringen\n"
    "Lista [h]ela varukatalogen\n"
    "[A]vsluta"
)
MENU_CHOICES = ("L", "T", "R", "G", "H", "A")
_MAGICK_LIMIT = 254


@dataclass
class Item:
    """A catalog entry; the price is in öre."""

    name: str
    desc: str
    price: int
    shelf: str

    def format(self) -> str:
        """Return the item as labelled lines, the price shown in kronor."""
        whole = abs(self.price) // 100 * (-1 if self.price < 0 else 1)
        cents = self.price - whole * 100
        return (
            f"Name:  {self.name}\n"
            f"Desc:  {self.desc}\n"
            f"Price: {whole}.{cents:02d} SEK\n"
            f"Shelf: {self.shelf}\n"
        )


class Catalog:
    """An ordered collection of items; positions are numbered from 1."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: List[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def _index(self, position: int) -> int:
        if not 1 <= position <= len(self._items):
            raise IndexError(f"no item at position {position}")
        return position - 1

    def add(self, item: Item) -> None:
        """Append ``item``; raise ValueError when the catalog is full."""
        if len(self._items) >= self.capacity:
            raise ValueError("catalog is full")
        self._items.append(item)

    def remove(self, position: int) -> Item:
        """Remove and return the item at ``position``."""
        return self._items.pop(self._index(position))

    def replace(self, position: int, item: Item) -> Item:
        """Put ``item`` at ``position`` and return the item it replaced."""
        index = self._index(position)
        old = self._items[index]
        self._items[index] = item
        return old

    def listing(self) -> List[str]:
        """Return numbered lines with the name of every item."""
        return [f"{number}. {item.name}" for number, item in enumerate(self._items, 1)]


def magick(first_words, second_words, third_words, rng=None) -> str:
    """Combine one random word from each list as ``first-second third``."""
    chooser = random if rng is None else rng
    text = (
        f"{chooser.choice(first_words)}-{chooser.choice(second_words)} "
        f"{chooser.choice(third_words)}"
    )
    return text[:_MAGICK_LIMIT]


def ask_menu_choice() -> str:
    """Show the menu and ask until one of its letters is chosen; return it upper-case."""
    print(MENU)
    answer = ask_question_string("Ange val: ")
    while len(answer) != 1 or not is_in_list(answer, MENU_CHOICES):
        print(
            "Valet är fel, du får endast välja mellan det som är i menyn med [] runt"
        )
        answer = ask_question_string("Ange val:")
    return answer.upper()


def input_item() -> Item:
    """Ask for the name, description, price and shelf of an item."""
    name = ask_question_string("Enter name of product:")
    desc = ask_question_string("Enter description:")
    price = ask_question_int("Enter price of item (in ören):")
    shelf = ask_question_shelf()
    return Item(name, desc, price, shelf)


def _print_listing(catalog: Catalog) -> None:
    for line in catalog.listing():
        print(line)


def _remove_item(catalog: Catalog) -> None:
    _print_listing(catalog)
    question = "Välj vilken vara du vill ta bort:"
    choice = ask_question_int(question)
    while not 1 <= choice <= len(catalog):
        print("Valet är utanför intervall av artiklar, försök igen")
        _print_listing(catalog)
        choice = ask_question_int(question)
    catalog.remove(choice)
    print("Vara borttagen.")


def _edit_item(catalog: Catalog) -> None:
    question = "Choose which item to edit:"
    choice = ask_question_int(question)
    while not 1 <= choice <= len(catalog):
        print("Invalid choice, try again. Valid items:")
        _print_listing(catalog)
        choice = ask_question_int(question)
    print(catalog._items[choice - 1].format())
    catalog.replace(choice, input_item())


def event_loop(catalog: Catalog) -> None:
    """Run the menu until the user chooses to quit."""
    while True:
        event = ask_menu_choice()
        if event == "L":
            if len(catalog) >= catalog.capacity:
                print("Catalog is full")
                continue
            catalog.add(input_item())
        elif event == "T":
            _remove_item(catalog)
        elif event == "R":
            _edit_item(catalog)
        elif event == "G":
            print("Not yet implemented!")
        elif event == "H":
            _print_listing(catalog)
        else:
            print("Exiting program.")
            break


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the catalog menu on standard input and output."""
    try:
        event_loop(Catalog())
    except EOFError:
        print(file=sys.stdout)
        return 1
    return 0