# drillbook

Small exercises in modelling with classes, working with files and applying
classic algorithms to sorted sequences, together with two interactive
console programs: a contact book and a computer-room reservation system.

The console programs talk to the user in Chinese.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Console programs

Both programs read whitespace-separated answers from standard input and
stop when the user chooses `0` at the main menu or when input runs out.

### Contact book

```
drillbook-contact
```

A menu-driven address book: `1` add, `2` list, `3` delete, `4` find,
`5` modify, `6` clear, `0` quit. It holds at most 1000 contacts.

The same logic is available as a library:

```python
from drillbook.contact import AddressBook, Person, format_person

book = AddressBook()
book.add(Person(name="alice", sex="F", age=30, phone="none", addr="home"))
print(format_person(book.find("alice")))
book.remove("alice")
```

`AddressBook` also offers `index_of`, `modify` and `clear`, supports `len()`
and iteration, and has a `full` property. Looking up a missing name raises
`ContactNotFoundError` (a `KeyError`); adding to a full book raises
`BookFullError`. `run(read, write)` drives the menu with any pair of
callables and returns the book.

### Computer-room reservations

```
drillbook-reserve [DATA_DIR]
```

`DATA_DIR` is the directory holding the data files; it defaults to the
current directory. At the main menu choose `1` student representative,
`2` teacher, `3` administrator or `0` to quit, then log in.

- Students apply for a room (weekday 1 to 5, interval 1 morning or
  2 afternoon, room 1 to 3), list their own orders, list all orders, and
  cancel one of their orders that is under review or approved.
- Teachers list all orders and approve or reject an order under review.
- Administrators add student or teacher accounts (ids must be unique per
  kind), list accounts, list rooms and clear all orders.

The data files are plain text:

| file               | contents                               |
|--------------------|----------------------------------------|
| `admin.txt`        | `name password` per entry              |
| `student.txt`      | `id name password` per entry           |
| `teacher.txt`      | `id name password` per entry           |
| `computerRoom.txt` | `room_id capacity` per entry           |
| `order.txt`        | one order per line, `key:value` fields |

An order line looks like:

```
date:1 interval:2 stuId:1 stuName:alice roomId:3 status:1
```

Status `1` is under review, `2` approved, `-1` rejected and `0` cancelled;
any other code is read as cancelled.

The parts can be used directly:

- `drillbook.reserve.orders` – `Order`, `OrderStatus`, `parse_order_line`,
  `OrderBook` (`load`, `save`, `append`), `ComputerRoom`, `load_rooms` and
  the `Identity` base class.
- `drillbook.reserve.student.Student` – `apply_order`, `my_orders`,
  `all_orders`, `cancellable_orders`, `cancel_order`.
- `drillbook.reserve.teacher.Teacher` – `all_orders`, `pending_orders`,
  `review_order`.
- `drillbook.reserve.manager` – `AccountKind`, `Account`, `load_accounts`
  and `Manager` (`check_repeat`, `add_account`, `accounts`,
  `clear_orders`).
- `drillbook.reserve.app` – `login(data_dir, kind, account_id, name,
  password)`, which raises `FileNotFoundError` when the role's file is
  missing and `LoginError` when no account matches, and
  `run_console(data_dir, read, write)`.

```python
from drillbook.reserve.app import login

student = login("data", 1, 1, "alice", "password")
student.apply_order(date=2, interval=1, room=3)
```

### What it does not do

The contact book keeps its contacts in memory only; nothing is saved when
the program ends. The reservation system stores accounts and passwords as
plain text and does no locking, so it is meant for one user at a time.

## Library modules

- `drillbook.geometry` – `circumference` (with pi taken as 3.14), `Cube`
  with `surface_area`, `volume` and `same_as`, `is_same`, and `locate`,
  which places a `Point` inside, on or outside a `Circle` as a `Position`.
- `drillbook.calculators` – `Calculator.get_result` for `+`, `-` and `*`
  (other operators raise `ValueError`), and `AddCalculator`,
  `SubCalculator` and `MulCalculator` built on `AbstractCalculator.result`.
- `drillbook.drinks` – `Coffee` and `Tea`, whose `make` returns the four
  recipe steps of `Drink`.
- `drillbook.computer` – a `Computer` of interchangeable Intel and Lenovo
  CPU, video-card and memory parts; `work` returns what each part did.
- `drillbook.people` – `sort_people` (age ascending, then height
  descending), `sort_heroes` (age ascending), `make_tutors` (up to five
  tutors, each with five pupils scored 40 to 99) and `format_tutors`.
- `drillbook.records` – `write_profile_text` and `read_text`, and a
  `PersonRecord` stored as a 64-byte name plus a little-endian 32-bit age
  through `pack`/`unpack`, `write_person` and `read_person`.
- `drillbook.seqalgo` – `adjacent_find`, `binary_search`, `set_union`,
  `set_intersection`, `set_difference` and `merge` over sorted sequences.