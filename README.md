# crstructs

Plain-Python implementations of classic data structures, each with the
familiar container interface (`len()`, truth value, `str()`, and iteration
where it makes sense). No third-party dependencies.

| Module               | Class      | What it is                                                |
|----------------------|------------|-----------------------------------------------------------|
| `crstructs.slist`    | `SList`    | Singly linked list with head and tail                     |
| `crstructs.stack`    | `Stack`    | LIFO stack                                                |
| `crstructs.fifo`     | `Queue`    | FIFO queue                                                |
| `crstructs.pqueue`   | `PQueue`   | Binary-heap priority queue (largest on top by default)    |
| `crstructs.hashmap`  | `HashMap`  | Separate-chaining hash multimap with power-of-two buckets |
| `crstructs.bstree`   | `BSTree`   | Unbalanced binary search tree with unique keys            |

`crstructs.treenode` holds the tree's `Node` and the `Position` handle that
`BSTree` hands out. `crstructs.utils` has small helpers: `is_sorted`,
`median_of_3`, `is_odd`, `is_even`, `random_int`, the printing helpers
`print_contents`, `print_associative_contents`, `print_container` and
`print_associative_container`, and the error-text builder `err_msg` with its
`ErrorMsg` enum.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it

```python
from crstructs.slist import SList
from crstructs.stack import Stack
from crstructs.fifo import Queue
from crstructs.pqueue import PQueue

lst = SList()
lst.push_front(5)
lst.push_back(6)
lst.insert_after(1, 7)
lst.reverse()
print(lst)            # 7 --> 6 --> 5 -->
lst.at(0)             # 7

stk = Stack()
stk.push(1)
stk.push(2)
stk.top()             # 2

q = Queue()
q.push(1)
q.push(2)
q.front(), q.back()   # (1, 2)

pq = PQueue()
for v in (3, 6, 9, 5, 4, 12, 10):
    pq.push(v)
pq.top()              # 12
```

`PQueue` takes an optional `compare(a, b)` that returns True when `a` has
lower priority than `b`; pass `operator.gt` to keep the smallest on top.

### Hash multimap

Inserting the same key twice keeps both entries, and `erase` returns how many
were removed. `find` returns the first `(key, value)` pair for a key, or
`None`.

```python
from crstructs.hashmap import HashMap

m = HashMap(10)       # bucket count rounded up to a power of two: 16
m.insert("apple", 1)
m.insert("orange", 2)
m.count("apple")      # 1
"apple" in m          # True
m.find("apple")       # ("apple", 1)
m.erase("apple")      # 1
```

`max_load_factor` is a property (default `1.0`, must be positive); an
insertion that pushes the load factor above it doubles the table. `rehash`,
`bucket_count`, `bucket_size`, `bucket` and `load_factor` expose the table
itself. A custom `hash_function` and `key_eq` can be given to the constructor.

### Binary search tree

Keys are unique and ordered by a "less than" function, which can be swapped
(for example `operator.gt`) to reverse the order. Iterating a tree yields
`(key, value)` pairs in key order.

```python
from crstructs.bstree import BSTree

t = BSTree()
for key, fruit in [(13, "blueberry"), (11, "tangerine"), (7, "grapefruit")]:
    t.insert(key, fruit)          # returns (Position, inserted)
list(t)                           # [(7, ...), (11, ...), (13, ...)]
pos = t.search(11)
pos.key, pos.value                # (11, "tangerine")
pos.successor().key               # 13
t.erase_key(7)                    # 1
```

Traversals return lists of pairs: `in_order`, `in_order_morris`,
`in_order_successor`, `in_order_r`, `pre_order`, `pre_order_r`,
`post_order`, `post_order_r` and `level_order`; each can start from a given
`Position`. `begin()`, `end()` and `root()` return positions, and
`erase(position)` removes an element and returns the position that followed it.

### Errors

Operations that cannot be answered — reading or removing from an empty
structure, an index past the end, erasing from an empty map — raise
`IndexError` with a message built by `crstructs.utils.err_msg`. Negative
counts given to constructors or `rehash` raise `ValueError`.

## Demonstrations

Each structure comes with a short walkthrough that prints its state step by
step:

```
crstructs-slist-demo
crstructs-stack-demo
crstructs-queue-demo
crstructs-pqueue-demo
crstructs-hashmap-demo
crstructs-bstree-demo
```

## Limits

The search tree is not self-balancing, so sorted insertions make it degrade
to a list. The structures live in memory only; nothing is saved or loaded.