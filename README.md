# crdtdoc

Building blocks for a replicated JSON document. Every element carries
logical-clock tickets, so that edits from several actors can be ordered
the same way everywhere.

## Install

```
pip install crdtdoc
```

Tests need the `test` extra:

```
pip install "crdtdoc[test]"
```

## What is inside

- `crdtdoc.actor_id`: `ActorID`, an immutable twelve-byte identifier shown as
  lower-case hex, and the helpers `actor_id_from_hex` and `actor_id_from_bytes`.
  Empty input gives `None`. Malformed hex or a wrong length raises
  `InvalidHexStringError`.
- `crdtdoc.ticket`: `Ticket`, a timestamp made of a lamport value, a delimiter
  and an actor. Tickets are compared by lamport value first, then by actor,
  then by delimiter, through `compare`, `after` and the usual comparison
  operators. `key()` gives the string used to index elements.
  `INITIAL_TICKET` and `MAX_TICKET` are the smallest and largest tickets.
- `crdtdoc.key`: `Key`, made of a collection name and a document name, and
  `from_bson_key`, which parses `"collection$document"`. Any other shape
  raises `InvalidBSONKeyError`.
- `crdtdoc.element`: the abstract bases `Element`, `Container` and
  `TextElement`. An element is removed only by a ticket later than both its
  creation and any earlier removal.
- `crdtdoc.primitive`: `Primitive` values (null, boolean, integer, long,
  double, string, bytes, date) with their little-endian byte encoding
  (`to_bytes`, `value_from_bytes`) and their JSON form (`marshal`).
- `crdtdoc.counter`: `Counter`, a number that grows by `increase`. An integer
  counter becomes a long counter once it leaves the 32-bit range.
- `crdtdoc.rht`: `RHT`, a replicated hashtable of string keys and string
  values. The latest update wins.
- `crdtdoc.rht_pq_map`: `RHTPriorityQueueMap`, which keeps every element set
  under a key and exposes the most recently created one.
- `crdtdoc.rga_tree_list`: `RGATreeList`, an ordered list with tombstones that
  merges concurrent inserts and moves by logical time.
- `crdtdoc.json_array`: `Array`, the array element built on `RGATreeList`.

## Example

```python
from crdtdoc.actor_id import actor_id_from_hex
from crdtdoc.counter import Counter
from crdtdoc.json_array import Array
from crdtdoc.primitive import Primitive
from crdtdoc.rga_tree_list import RGATreeList
from crdtdoc.ticket import Ticket

actor = actor_id_from_hex("000000000000000000000001")
tick = iter(Ticket(lamport, 0, actor) for lamport in range(1, 100))

array = Array(RGATreeList(), next(tick))
array.add(Primitive("1", next(tick)))
array.add(Primitive("2", next(tick)))
print(array.marshal())  # ["1","2"]

array.delete(0, next(tick))
print(array.marshal())  # ["2"]

counter = Counter(5, next(tick))
counter.increase(Primitive(10, next(tick)))
print(counter.marshal())  # 15
```

## What it does not do

The package holds the data types only. It has no object element built on
`RHTPriorityQueueMap`, no text or rich-text element, no document root that
indexes elements by ticket, and no garbage collection of removed elements.
It records no operations or changes, keeps nothing in storage, and talks to
no server.