"""Demonstration runs of the hash map, the search tree and the priority queue."""

from __future__ import annotations

import operator
import sys

from crstructs.bstree import BSTree
from crstructs.hashmap import HashMap
from crstructs.pqueue import PQueue
from crstructs.utils import print_associative_contents, print_container

__all__ = ["hashmap_main", "bstree_main", "pqueue_main"]

_RULE = "-" * 41
_SHORT_RULE = "-" * 29

_FRUITS = (
    (13, "blueberry"),
    (11, "tangerine"),
    (7, "grapefruit"),
    (3, "orange"),
    (5, "banana"),
    (22, "cherry"),
    (1, "apple"),
)


def _map_stats(hmap: HashMap) -> None:
    print(f"size: {len(hmap)}")
    print(f"empty: {int(not hmap)}")
    print(f"bucket count: {hmap.bucket_count()}")
    print(f"load factor: {hmap.load_factor():g}")


def hashmap_main(argv: list[str] | None = None) -> int:
    """Exercise the hash map operations and print the results."""
    _ = sys.argv[1:] if argv is None else argv

    print("TEST BEGIN")

    print(_RULE)
    print("DEFAULT CONSTRUCTOR...")
    dmap = HashMap()
    _map_stats(dmap)
    print("printing...")
    dmap.print()
    print(_RULE)

    print(_RULE)
    print("PARAMETERIZED CONSTRUCTOR...")
    pmap = HashMap(10)
    _map_stats(pmap)
    print("printing...")
    pmap.print()
    print(_RULE)

    print(_RULE)
    print("INSERTING...")
    pmap.insert("apple", 1)
    pmap.insert("orange", 2)
    pmap.insert("banana", 3)
    _map_stats(pmap)
    print("printing...")
    pmap.print()
    print(_RULE)

    print(_RULE)
    print("COPY CONSTRUCTOR...")
    cmap = pmap.copy()
    _map_stats(cmap)
    print("printing new map...")
    cmap.print()
    print("printing copied map...")
    pmap.print()
    print(_RULE)

    print(_RULE)
    print("MOVE CONSTRUCTOR...")
    mmap, pmap = pmap, HashMap()
    _map_stats(mmap)
    print("printing new map...")
    mmap.print()
    print("printing moved map...")
    pmap.print()
    print(_RULE)

    print(_RULE)
    print("COPY ASSIGNMENT OPERATOR...")
    pmap = mmap.copy()
    _map_stats(pmap)
    print("printing copied to map...")
    pmap.print()
    print("printing copied from map...")
    mmap.print()
    print(_RULE)

    print(_RULE)
    print("MOVE ASSIGNMENT OPERATOR...")
    dmap, mmap = mmap, HashMap()
    _map_stats(dmap)
    print("printing moved to map...")
    dmap.print()
    print("printing moved from map...")
    mmap.print()
    print(_RULE)

    print(_RULE)
    print("ERASING...")
    for key in ("apple", "orange", "banana"):
        cmap.erase(key)
    _map_stats(cmap)
    print("printing...")
    cmap.print()
    print(_RULE)

    print(_RULE)
    print("ADDITIONAL TESTS...")
    _map_stats(pmap)
    print(f"max load factor: {pmap.max_load_factor:g}")
    print(f"count of key = apple: {pmap.count('apple')}")
    found = pmap.find("apple")
    print(f"value for key = apple: {found[1] if found is not None else 0}")
    print(f"contains key = apple: {'true' if pmap.contains('apple') else 'false'}")
    bucket = pmap.bucket("apple")
    print(f"bucket which contains key = apple: {bucket}")
    print(f"bucket size of bucket {bucket}: {pmap.bucket_size(bucket)}")
    print("resetting max load factor...")
    pmap.max_load_factor = 2.0
    print(f"max load factor: {pmap.max_load_factor:g}")
    print("printing...")
    pmap.print()
    print("rehashing...")
    pmap.rehash(4)
    print(f"bucket count: {pmap.bucket_count()}")
    print("printing...")
    pmap.print()
    print(_RULE)

    print(_RULE)
    print("CLEARING...")
    pmap.clear()
    _map_stats(pmap)
    print("printing...")
    pmap.print()
    print(_RULE)
    return 0


def _tree_stats(tree: BSTree) -> None:
    print(f"size: {len(tree)}")
    print(f"empty: {int(not tree)}")


def bstree_main(argv: list[str] | None = None) -> int:
    """Exercise the search tree operations and print the results."""
    _ = sys.argv[1:] if argv is None else argv

    print("TEST BEGIN")

    print(_RULE)
    print("DEFAULT CONSTRUCTOR...")
    dtree = BSTree()
    print("Standard Tree")
    _tree_stats(dtree)
    print("printing...")
    dtree.print()
    rtree = BSTree(operator.gt)
    print("Reversed Tree")
    _tree_stats(rtree)
    print("printing...")
    rtree.print()
    print(_RULE)

    print(_RULE)
    print("INSERTING...")
    for key, value in _FRUITS:
        dtree.insert(key, value)
    print("attempting to insert duplicate...")
    _, inserted = dtree.insert(1, "apple")
    print(f"inserted: {'true' if inserted else 'false'}")
    print("Standard Tree")
    _tree_stats(dtree)
    print("printing...")
    dtree.print()
    for key, value in _FRUITS:
        rtree.insert(key, value)
    print("Reversed Tree")
    _tree_stats(rtree)
    print("printing...")
    rtree.print()
    print(_RULE)

    print(_RULE)
    print("COPY CONSTRUCTOR...")
    ctree = dtree.copy()
    _tree_stats(ctree)
    print("printing new tree...")
    ctree.print()
    print("printing copied tree...")
    dtree.print()
    print(_RULE)

    print(_RULE)
    print("MOVE CONSTRUCTOR...")
    mtree, ctree = ctree, BSTree()
    _tree_stats(mtree)
    print("printing new tree...")
    mtree.print()
    print("printing moved tree...")
    ctree.print()
    print(_RULE)

    print(_RULE)
    print("COPY ASSIGNMENT OPERATOR...")
    ctree = mtree.copy()
    _tree_stats(rtree)
    print("printing copied to tree...")
    ctree.print()
    print("printing copied from tree...")
    mtree.print()
    print(_RULE)

    print(_RULE)
    print("MOVE ASSIGNMENT OPERATOR...")
    mtree, ctree = ctree, BSTree()
    _tree_stats(mtree)
    print("printing moved to tree...")
    mtree.print()
    print("printing moved from tree...")
    ctree.print()
    print(_RULE)

    print(_RULE)
    print("ITERATOR FUNCTIONS...")
    beg = dtree.begin()
    end = dtree.end()
    root = dtree.root()
    state = "nullptr" if end == None else ""  # noqa: E711
    print(f"begin: {{{beg.key}, {beg.value}}}")
    print(f"end: {state}")
    print(f"root: {{{root.key}, {root.value}}}")
    print("printing...")
    dtree.print()
    print(_RULE)

    print(_RULE)
    print("LOOKUP FUNCTIONS...")
    print("searching for key 5...")
    banana = dtree.search(5)
    banana_r = dtree.search_r(5, root)
    print(f"search: {{{banana.key}, {banana.value}}}")
    print(f"recursive search: {{{banana_r.key}, {banana_r.value}}}")
    print("printing...")
    dtree.print()
    print(_RULE)

    print(_RULE)
    print("TRAVERSALS...")
    traversals = (
        ("in-order traversal using auxiliary stack approach...", dtree.in_order()),
        ("in-order traversal using morris approach...", dtree.in_order_morris()),
        ("in-order traversal using successor approach...", dtree.in_order_successor()),
        ("in-order traversal using recursive approach...", dtree.in_order_r(root)),
        ("pre-order traversal using auxiliary stack approach...", dtree.pre_order()),
        ("pre-order traversal using recursive approach...", dtree.pre_order_r(root)),
        ("post-order traversal using auxiliary stack approach...", dtree.post_order()),
        ("post-order traversal using recursive approach...", dtree.post_order_r(root)),
        ("level-order traversal using auxiliary stack approach...", dtree.level_order()),
    )
    for heading, pairs in traversals:
        print(heading)
        print_associative_contents(pairs)
    _tree_stats(dtree)
    print("printing...")
    dtree.print()
    print(_RULE)

    print(_RULE)
    print("ERASING...")
    print("erasing root...")
    dtree.erase(root)
    print("erasing key 7...")
    count7 = dtree.erase_key(7)
    print("attempting to erase non-existent key...")
    count69 = dtree.erase_key(69)
    new_root = dtree.root()
    print(f"successor of root: {{{new_root.key}, {new_root.value}}}")
    print(f"count erased with key 7: {count7}")
    print(f"count erased with key 69: {count69}")
    _tree_stats(dtree)
    print("printing...")
    dtree.print()
    print(_RULE)

    print(_RULE)
    print("ITERATING...")
    position = dtree.begin()
    while position != dtree.end():
        position.value = "apple"
        position = position.successor()
    _tree_stats(dtree)
    print("printing...")
    dtree.print()
    print(_RULE)

    print(_RULE)
    print("CLEARING...")
    dtree.clear()
    _tree_stats(dtree)
    print("printing...")
    dtree.print()
    print(_RULE)
    return 0


def pqueue_main(argv: list[str] | None = None) -> int:
    """Exercise the priority queue operations and print the results."""
    _ = sys.argv[1:] if argv is None else argv
    vec = [3, 6, 9, 5, 4, 12, 10]
    pq = PQueue()

    print("BEGIN TEST")
    print("PUSHING...")
    for value in vec:
        pq.push(value)
    print(_SHORT_RULE)
    print(f"size: {len(pq)}")
    print(f"empty: {int(not pq)}")
    print(f"top: {pq.top()}")
    print("printing...")
    print("order of push: ", end="")
    print_container(vec)
    print("order of queue: ", end="")
    pq.print()
    print(_SHORT_RULE)

    print("POPPING...")
    for _ in range(3):
        pq.pop()
    print(_SHORT_RULE)
    print(f"size: {len(pq)}")
    print(f"empty: {int(not pq)}")
    print(f"top: {pq.top()}")
    print("printing...")
    print("queue: ", end="")
    pq.print()
    print(_SHORT_RULE)

    print("TEST COMPLETE")
    return 0


if __name__ == "__main__":
    sys.exit(hashmap_main())