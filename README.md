# storekit

storekit is a set of small building blocks and the programs built on them:

- `storekit.linked_list`: `LinkedList` is a singly linked list that compares
  elements with an equality function you supply. It supports `append`,
  `prepend`, and `insert`, `remove` and `get` by index. It also has `contains`
  (and `in`), `len()`, iteration, `is_empty`, `clear`, `all`, `any`,
  `apply_to_all`, and `iterator()`. A bad index raises `IndexError`.
- `storekit.iterator`: `ListIterator` is a cursor over a `LinkedList`. It has
  `current`, `next`, `has_next`, `reset`, `insert` and `remove`. Once the
  cursor has moved past the last element, `current`, `next` and `remove`
  raise `IndexError`.
- `storekit.hash_table`: `HashTable` is a separately chained table with a
  fixed number of buckets (5). You supply its hash function and its equality
  function. It has `insert`, `insert_freq`, `get`, `lookup` (which raises
  `KeyError` for a missing key), `remove`, `keys`, `values`, `items`,
  `has_key`, `has_value`, `all`, `any`, `apply_to_all`, `clear` and `len()`.
- `storekit.common`: ready-made equality functions (`int_eq`, `str_eq`,
  `ptr_eq`) and bucket hash functions (`hash_int`, `hash_str`).
- `storekit.freq_count`: counts how often each word appears across text files.
- `storekit.sort`: `get_keys`, `sort_keys`, `sort_stock` and
  `shelf_sort_key`. Shelves sort by their letter first and then by their
  number, so `A2` comes before `A10`.
- `storekit.store`: a warehouse `Database` with merchandise, shelves, stock
  and shopping carts.
- `storekit.prompts`: input checks (`is_number`, `is_float`, `is_string`,
  `is_in_list`, `is_shelf`, `not_empty`), converters (`make_int`,
  `make_float`, `make_string`, `trim`) and question helpers
  (`ask_question_int`, `ask_question_float`, `ask_question_string`,
  `ask_question_shelf`). A question asks again until it gets a valid answer,
  and raises `EOFError` if input runs out first.
- `storekit.geometry`: `Point` and `Rectangle`, with `area` and `intersects`.
- `storekit.exercises`: small functions such as `fizzbuzz`, `fib`, `gcd`,
  `is_prime`, `staircase`, `foldl`, `total`, `cat` and `passthrough`.
- `storekit.guess` and `storekit.catalog`: two interactive console programs.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Collections

```python
from storekit.common import hash_str, int_eq, str_eq
from storekit.hash_table import HashTable
from storekit.linked_list import LinkedList

numbers = LinkedList(int_eq)
numbers.append(10)
numbers.append(20)
numbers.prepend(5)
list(numbers)          # [5, 10, 20]
20 in numbers          # True

table = HashTable(hash_str, str_eq)
table.insert("apple", 3)
table.insert_freq("pear")   # a new key starts at 1; returns the new count
table.has_key("apple")      # True
len(table)                  # 2
```

The iterator walks a list and can change it in place:

```python
it = numbers.iterator()
it.current()   # 5
it.next()      # returns 5 and moves on to 10
it.remove()    # removes 10 and returns it; 20 becomes current
```

## Word frequencies

`storekit-freq-count` reads one or more text files. It splits each line on
spaces, tabs, line breaks and the characters `+-#@()[]{}.,:;!?`, lowercases
every word, and prints each word with its count in sorted order:

```
storekit-freq-count notes.txt chapter1.txt
```

Each output line has the form `word: count`. A file that cannot be opened is
reported on standard error and skipped. Started without a file, the command
prints a usage line and exits with status 1.

The same steps are available as functions: `tokenize`, `count_words`,
`count_files` and `format_frequencies`.

## The warehouse store

`storekit.store.Database` keeps merchandise by name. Each item can be stocked
on any number of shelves, but a shelf holds one kind of merchandise only.
Carts reserve stock. Checking out a cart takes the items from the shelves in
the order they were stocked, and drops each shelf once it is empty.

```python
from storekit.store import Database

db = Database()
db.add_merch("Book", "Novel", 50)
db.replenish_stock("S1", "Book", 10)

cart = db.create_cart()
db.add_to_cart(db.merch("Book"), 2, cart)
db.calculate_cost(cart.id)   # 100
db.checkout_cart(cart.id)
db.merch("Book").total_stock # 8
```

When an operation cannot be carried out it raises `StoreError`. This happens
for a duplicate name, an unknown merchandise or cart, a shelf that already
holds other merchandise, not enough stock, or merchandise that is still in a
cart when you try to remove it. `remove_merch`, `change_merch` and
`remove_cart` also need a confirmation string that starts with `Y` or `y`.
`merchandise()` and `stock(name)` return sorted listings, and
`print_merchandise()` and `print_stock(name)` print them.

## Interactive programs

- `storekit-guess` asks for your name, then gives you 15 tries to guess a
  number from 0 to 1023. After each guess it says whether you were too low
  (`För litet!`) or too high (`För stort!`).
- `storekit-catalog` opens a menu-driven catalogue that holds up to 16
  products. Each product has a name, a description, a price in öre and a
  shelf such as `A25`. From the menu you can add, remove, edit and list
  products. The undo choice only prints `Not yet implemented!`.

Both programs exit with status 1 if their input ends partway through.

## What storekit does not do

Everything is kept in memory: neither the warehouse `Database` nor the
catalogue is saved to disk. The warehouse store is a library only. There is
no command or menu program for it.