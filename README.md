# sclib

A set of small, independent building blocks. It uses only the standard library.

| Module | What it gives you |
| --- | --- |
| `sclib.crc32` | `crc32c`: the CRC-32C (Castagnoli) checksum. You can compute it over data in several pieces. |
| `sclib.heap` | `Heap`: a min-heap of `HeapEntry(key, data)`. |
| `sclib.ini` | `parse_string`, `parse_file`, `parse_lines`: a small INI reader that yields `IniItem`s. |
| `sclib.linked_list` | `LinkedList` of `ListNode`s: a circular doubly linked list. A node can move from one list to another. |
| `sclib.array` | `Array`: a growable array with ordered and unordered deletion and an optional size limit. |

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## CRC-32C

```python
from sclib.crc32 import crc32c

whole = crc32c(b"\0" * 100)
part = crc32c(b"\0" * 10)
assert crc32c(b"\0" * 90, part) == whole
```

`crc32c(data, crc=0)` accepts `bytes`, `bytearray` or a `memoryview`. To continue a checksum over several pieces, pass the previous result as `crc`.

## Heap

```python
from sclib.heap import Heap

heap = Heap()
for priority, name in [(1, "first"), (4, "fourth"), (2, "second")]:
    heap.add(priority, name)

while len(heap):
    entry = heap.pop()
    print(entry.key, entry.data)
```

`peek()` returns the entry with the smallest key and leaves it in the heap. `pop()` removes that entry and returns it. Both return `None` when the heap is empty. `clear()` removes every entry. For a max-heap, negate each key when you add it.

## INI

```python
from sclib.ini import parse_string, IniSyntaxError

for item in parse_string("[Network]\nhostname = example.com\nport = 443\n"):
    print(item.line, item.section, item.key, item.value)
```

The reader follows these rules:

- Sections are written `[name]`.
- A key and its value are separated by `=` or `:`.
- A line that begins with `;` or `#` is a comment. So is anything that follows a space and then `;` or `#`.
- An indented line after a key is a continuation. It yields one more value for the same key.
- A UTF-8 byte order mark on the first line is ignored.
- Lines longer than 1023 characters are cut short without warning.

`parse_string` stops at the first NUL character. If the text is empty or `None`, it yields nothing. `parse_file` reads a file from a path. If the file cannot be opened or read, you get an `OSError`. To stop parsing early, stop iterating.

A line that cannot be parsed raises `IniSyntaxError`, which is a subclass of `ValueError`. The error carries `.line` and `.text`.

## Linked list

```python
from sclib.linked_list import LinkedList, ListNode

items = LinkedList()
for name in ("first", "second", "third"):
    items.add_tail(ListNode(name))

print([node.value for node in items])
print([node.value for node in reversed(items)])
```

You can insert a node with these methods:

- `add_head`
- `add_tail`
- `add_after(prev, node)`
- `add_before(next_node, node)`

Before any of them inserts a node, it unlinks that node from wherever it was. So a node is never in a list twice.

The list also has these methods:

- `pop_head()` and `pop_tail()` remove a node and return it. They return `None` when the list is empty.
- `remove(node)` unlinks a node.
- `head()` and `tail()` return the first and last node.
- `is_empty()` says whether the list has no nodes.
- `len()` gives the number of nodes.
- `clear()` unlinks every node.

Each node has `next` and `prev`. They are `None` at the ends of the list and on a node that is not linked. You can remove the current node while you iterate, in either direction.

## Array

```python
from sclib.array import Array

arr = Array([3, 4, 5])
arr.delete(0)
arr.add(1)
arr.sort()
print(list(arr))        # [1, 4, 5]
```

The array has these operations:

- `delete(index)` removes an item and keeps the order of the rest.
- `delete_unordered(index)` moves the last item into the freed slot.
- `delete_last()` and `last()` remove and read the final item.
- `clear()` removes every item. The capacity stays the same.

Capacity starts at 8 and doubles when the array is full. With `Array(limit=n)`, the array stops growing once its capacity is more than half of `n`. After that, `add` raises `OverflowError` when no slot is free. An index that is out of range raises `IndexError`.

## What is not included

This package holds only the five modules above. It has none of the following:

- a binary serialization buffer
- a thread hand-off primitive
- a logger

It also has no command-line program.