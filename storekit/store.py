"""Warehouse database: merchandise, shelf stock and shopping carts."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from storekit.common import hash_str, str_eq
from storekit.hash_table import HashTable
from storekit.sort import sort_keys, sort_stock

PAGE_SIZE = 20


class StoreError(Exception):
    """Raised when a database operation cannot be carried out."""


@dataclass
class Stock:
    """A quantity of one merchandise kept on one shelf."""

    shelf: str
    quantity: int


@dataclass
class Merch:
    """A piece of merchandise and where it is stored."""

    name: str
    desc: str
    price: int
    locations: List[Stock] = field(default_factory=list)
    shelf_map: Dict[str, Stock] = field(default_factory=dict)
    total_stock: int = 0
    reserved: int = 0

    def available(self) -> int:
        """Return how many items are in stock and not reserved by a cart."""
        return self.total_stock - self.reserved


@dataclass
class Cart:
    """A shopping cart mapping merchandise names to quantities."""

    id: int
    items: HashTable = field(default_factory=lambda: HashTable(hash_str, str_eq))


def _confirm(confirmation: str) -> None:
    if confirmation[:1] not in ("Y", "y"):
        raise StoreError("Wrong confirmation code")


class Database:
    """Merchandise keyed by name, shelves keyed by location, and carts."""

    def __init__(self) -> None:
        self.merch_table = HashTable(hash_str, str_eq)
        self.shelf_table = HashTable(hash_str, str_eq)
        self.carts: List[Cart] = []
        self.next_cart_id = 1

    def merch(self, name: str) -> Merch:
        """Return the merchandise called ``name``."""
        try:
            return self.merch_table.lookup(name)
        except KeyError:
            raise StoreError("Merchandise does not exist") from None

    def _cart_or_none(self, cart_id: int) -> Optional[Cart]:
        return next((cart for cart in self.carts if cart.id == cart_id), None)

    def cart(self, cart_id: int) -> Cart:
        """Return the cart with id ``cart_id``."""
        cart = self._cart_or_none(cart_id)
        if cart is None:
            raise StoreError("The requested cart does not exist")
        return cart

    def add_merch(self, name: str, desc: str, price: int) -> Merch:
        """Add new merchandise; its name must not be taken."""
        if self.merch_table.has_key(name):
            raise StoreError("Merch already exists")
        merch = Merch(name, desc, price)
        self.merch_table.insert(name, merch)
        return merch

    def merchandise(self) -> List[str]:
        """Return all merchandise names in sorted order."""
        return sort_keys(self.merch_table.keys())

    def print_merchandise(self) -> None:
        """Print merchandise names, asking before each further page of 20."""
        names = self.merchandise()
        if not names:
            print("(no merchandise)")
            return
        for start in range(0, len(names), PAGE_SIZE):
            if start:
                print("Continue listing? (N/n to stop): ", end="", flush=True)
                answer = sys.stdin.readline()
                if not answer or answer[0] in ("N", "n"):
                    break
            for name in names[start:start + PAGE_SIZE]:
                print(name)

    def remove_merch(self, name: str, confirmation: str) -> Merch:
        """Delete merchandise and its shelves; refused while any cart holds it."""
        _confirm(confirmation)
        merch = self.merch(name)
        if any(cart.items.has_key(merch.name) for cart in self.carts):
            raise StoreError("Cannot delete: item present in one or more carts")
        self.merch_table.remove(name)
        for stock in merch.locations:
            self.shelf_table.remove(stock.shelf)
        merch.locations.clear()
        merch.shelf_map.clear()
        return merch

    def change_merch(
        self,
        old_name: str,
        new_name: str,
        new_price: int,
        new_desc: str,
        confirmation: str,
    ) -> Merch:
        """Rename and re-describe merchandise, updating every cart holding it."""
        _confirm(confirmation)
        merch = self.merch(old_name)
        if old_name != new_name and self.merch_table.has_key(new_name):
            raise StoreError("Merchandise with this new name already exist")
        self.merch_table.remove(old_name)
        merch.name = new_name
        merch.desc = new_desc
        merch.price = new_price
        self.merch_table.insert(new_name, merch)
        for cart in self.carts:
            if cart.items.has_key(old_name):
                quantity = cart.items.remove(old_name)
                cart.items.insert(new_name, quantity)
        return merch

    def stock(self, name: str) -> List[Stock]:
        """Return the stock entries of merchandise ``name`` sorted by shelf."""
        return sort_stock(self.merch(name).locations)

    def print_stock(self, name: str) -> None:
        """Print ``shelf: quantity`` lines for merchandise ``name``."""
        stocks = self.stock(name)
        if not stocks:
            print("(no stock)")
            return
        for stock in stocks:
            print(f"{stock.shelf}: {stock.quantity}")

    def replenish_stock(self, shelf: str, name: str, amount: int) -> Stock:
        """Add ``amount`` items of ``name`` to ``shelf``; a shelf holds one merchandise."""
        if amount < 1:
            raise StoreError("No items to be added should be at least 1")
        merch = self.merch(name)
        owner = self.shelf_table.get(shelf)
        if owner is not None and owner is not merch:
            raise StoreError(
                f"Storage location {shelf} already stores a different merchandise"
            )
        stock = merch.shelf_map.get(shelf)
        if stock is None:
            stock = Stock(shelf, amount)
            merch.locations.append(stock)
            merch.shelf_map[shelf] = stock
            self.shelf_table.insert(shelf, merch)
        else:
            stock.quantity += amount
        merch.total_stock += amount
        return stock

    def create_cart(self) -> Cart:
        """Create an empty cart with the next free id."""
        cart = Cart(self.next_cart_id)
        self.next_cart_id += 1
        self.carts.append(cart)
        return cart

    def remove_cart(self, cart_id: int, confirmation: str) -> Cart:
        """Delete the cart with id ``cart_id``."""
        _confirm(confirmation)
        cart = self.cart(cart_id)
        self.carts.remove(cart)
        return cart

    def add_to_cart(self, merch: Merch, amount: int, cart: Cart) -> int:
        """Reserve ``amount`` of ``merch`` in ``cart``; return the cart's new quantity."""
        if merch is None or cart is None:
            raise StoreError("Invalid argument(s)")
        if self._cart_or_none(cart.id) is None:
            raise StoreError("Cart does not exist in this database")
        if amount <= 0:
            raise StoreError("Amount must be positive")
        if amount > merch.available():
            raise StoreError("The wanted quantity is more than quantity in stock")
        quantity = cart.items.get(merch.name, 0) + amount
        cart.items.insert(merch.name, quantity)
        merch.reserved += amount
        return quantity

    def remove_from_cart(self, merch: Merch, amount: int, cart_id: int) -> int:
        """Take ``amount`` of ``merch`` out of a cart; return what is left in it."""
        if amount < 0:
            raise StoreError("Amount must be non-negative")
        cart = self.cart(cart_id)
        in_cart = cart.items.get(merch.name)
        if in_cart is None:
            raise StoreError("Merchandise not in cart")
        if amount >= in_cart:
            cart.items.remove(merch.name)
            merch.reserved -= in_cart
            return 0
        cart.items.insert(merch.name, in_cart - amount)
        merch.reserved -= amount
        return in_cart - amount

    def calculate_cost(self, cart_id: int) -> int:
        """Return the total price of everything in the cart."""
        cart = self._cart_or_none(cart_id)
        if cart is None:
            raise StoreError("Cart does not exist")
        total = 0
        for name, quantity in cart.items.items():
            merch = self.merch_table.get(name)
            if merch is None:
                print(f"Warning: merchandise {name} in cart no longer exists")
                continue
            total += merch.price * quantity
        return total

    def checkout_cart(self, cart_id: int) -> None:
        """Take the cart's items off the shelves, in stocking order, and drop the cart."""
        cart = self._cart_or_none(cart_id)
        if cart is None:
            raise StoreError("Cart does not exist")
        items = cart.items.items()
        for name, quantity in items:
            merch = self.merch_table.get(name)
            if merch is None:
                raise StoreError(f"Merchandise {name} no longer exists")
            if quantity > merch.total_stock:
                raise StoreError(f"Not enough stock for {merch.name}")
        for name, quantity in items:
            merch = self.merch_table.lookup(name)
            remaining = quantity
            while merch.locations and remaining > 0:
                stock = merch.locations[0]
                if stock.quantity > remaining:
                    stock.quantity -= remaining
                    remaining = 0
                else:
                    remaining -= stock.quantity
                    del merch.shelf_map[stock.shelf]
                    self.shelf_table.remove(stock.shelf)
                    merch.locations.pop(0)
            if remaining:
                raise StoreError(
                    f"Checkout failed: inconsistent stock for {merch.name}"
                )
            merch.total_stock -= quantity
            merch.reserved -= quantity
        self.carts.remove(cart)