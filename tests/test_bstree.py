import operator

import pytest

from crstructs.bstree import BSTree

FRUIT = [
    (13, "blueberry"),
    (11, "tangerine"),
    (7, "grapefruit"),
    (3, "orange"),
    (5, "banana"),
    (22, "cherry"),
    (1, "apple"),
]


def build(compare=None):
    tree = BSTree(compare)
    for key, value in FRUIT:
        tree.insert(key, value)
    return tree


def test_empty_tree():
    tree = BSTree()
    assert len(tree) == 0
    assert not tree
    assert tree.begin() == tree.end()
    assert tree.pre_order() == []
    assert tree.level_order() == []
    assert tree.in_order_successor() == []


def test_empty_print(capsys):
    BSTree().print()
    assert capsys.readouterr().out == "Nothing to print, tree is empty\n"


def test_insert_and_in_order_sorted():
    tree = build()
    assert len(tree) == len(FRUIT)
    assert tree.in_order() == sorted(FRUIT)
    assert list(tree) == sorted(FRUIT)


def test_duplicate_insert_rejected():
    tree = build()
    position, inserted = tree.insert(1, "other")
    assert inserted is False
    assert position.key == 1
    assert position.value == "apple"
    assert len(tree) == len(FRUIT)


def test_all_in_order_variants_agree():
    tree = build()
    expected = tree.in_order()
    assert tree.in_order_morris() == expected
    assert tree.in_order_successor() == expected
    assert tree.in_order_r() == expected
    # Morris traversal must leave the tree intact
    assert tree.in_order() == expected


def test_pre_order_shape():
    tree = build()
    assert [k for k, _ in tree.pre_order()] == [13, 11, 7, 3, 1, 5, 22]
    assert tree.pre_order_r() == tree.pre_order()


def test_post_and_level_order_invariants():
    tree = build()
    post = tree.post_order()
    assert post == tree.post_order_r()
    assert post[-1] == (13, "blueberry")
    level = tree.level_order()
    assert level[0] == (13, "blueberry")
    assert sorted(level) == tree.in_order()
    assert sorted(post) == tree.in_order()


def test_subtree_traversals():
    tree = build()
    start = tree.search(3)
    assert [k for k, _ in tree.in_order(start)] == [1, 3, 5]
    assert tree.in_order_r(start) == tree.in_order(start)
    assert tree.in_order_morris(start) == tree.in_order(start)
    assert tree.pre_order(start)[0] == (3, "orange")
    assert tree.post_order(start)[-1] == (3, "orange")
    # successor walk continues beyond the subtree to the last key
    assert tree.in_order_successor(start)[-1] == (22, "cherry")


def test_begin_end_root():
    tree = build()
    assert tree.begin().key == 1
    assert tree.begin().value == "apple"
    assert tree.end() == None  # noqa: E711
    assert tree.root().key == 13


def test_search_and_search_r():
    tree = build()
    found = tree.search(5)
    assert found.value == "banana"
    assert tree.search_r(5, tree.root()) == found
    assert tree.search_r(5) == found
    assert tree.search(69) == tree.end()
    assert tree.search_r(69) == tree.end()
    assert 5 in tree
    assert 69 not in tree


def test_erase_root_returns_successor():
    tree = build()
    following = tree.erase(tree.root())
    assert following.key == 22
    assert tree.root().key == 22
    assert len(tree) == len(FRUIT) - 1
    assert 13 not in tree
    assert tree.in_order() == sorted(p for p in FRUIT if p[0] != 13)


def test_erase_key_counts():
    tree = build()
    tree.erase(tree.root())
    assert tree.erase_key(7) == 1
    assert tree.erase_key(69) == 0
    assert len(tree) == len(FRUIT) - 2
    assert tree.in_order() == sorted(p for p in FRUIT if p[0] not in (7, 13))


def test_erase_every_key_empties_tree():
    tree = build()
    for key, _ in FRUIT:
        assert tree.erase_key(key) == 1
        assert [k for k, _ in tree] == sorted(k for k, _ in tree)
    assert len(tree) == 0
    assert tree.root() == tree.end()


def test_erase_end_raises():
    tree = build()
    with pytest.raises(IndexError):
        tree.erase(tree.end())


def test_iterate_and_assign_values():
    tree = build()
    position = tree.begin()
    while position != tree.end():
        position.value = "apple"
        position = position.successor()
    assert all(value == "apple" for _, value in tree)
    assert [k for k, _ in tree] == sorted(k for k, _ in FRUIT)


def test_reversed_ordering():
    tree = build(operator.gt)
    assert tree.in_order() == sorted(FRUIT, reverse=True)
    assert tree.begin().key == 22
    assert tree.key_comp() is operator.gt


def test_copy_is_independent_and_same_shape():
    tree = build()
    duplicate = tree.copy()
    assert duplicate.pre_order() == tree.pre_order()
    assert len(duplicate) == len(tree)
    duplicate.erase_key(13)
    assert 13 in tree
    assert len(tree) == len(FRUIT)


def test_clear():
    tree = build()
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []


def test_str_and_print(capsys):
    tree = BSTree()
    tree.insert(2, "b")
    tree.insert(1, "a")
    assert str(tree) == "{1: a} -> {2: b} -> "
    tree.print()
    assert capsys.readouterr().out == "{1: a} -> {2: b} -> \n"