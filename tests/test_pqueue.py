import operator

import pytest

from crstructs.pqueue import PQueue

VALUES = [3, 6, 9, 5, 4, 12, 10]


def _filled(compare=None):
    pq = PQueue(compare)
    for v in VALUES:
        pq.push(v)
    return pq


def _drain(pq):
    out = []
    while pq:
        out.append(pq.top())
        pq.pop()
    return out


def test_default_is_max_heap():
    pq = _filled()
    assert len(pq) == 7
    assert pq.top() == max(VALUES)


def test_pops_in_descending_order():
    assert _drain(_filled()) == sorted(VALUES, reverse=True)


def test_greater_compare_gives_min_heap():
    pq = _filled(operator.gt)
    assert pq.top() == min(VALUES)
    assert _drain(pq) == sorted(VALUES)


def test_heap_property_holds_after_pushes_and_pops():
    pq = _filled()
    pq.pop()
    pq.pop()
    pq.pop()
    heap = list(pq)
    assert len(heap) == 4
    for i in range(1, len(heap)):
        assert heap[(i - 1) // 2] >= heap[i]
    assert pq.top() == sorted(VALUES, reverse=True)[3]


def test_iteration_holds_every_element():
    assert sorted(_filled()) == sorted(VALUES)


def test_empty_top_and_pop_raise():
    pq = PQueue()
    assert not pq
    with pytest.raises(IndexError):
        pq.top()
    with pytest.raises(IndexError):
        pq.pop()


def test_print_empty(capsys):
    PQueue().print()
    assert capsys.readouterr().out == "Nothing to print, priority_queue is empty\n"


def test_print_matches_str(capsys):
    pq = _filled()
    pq.print()
    out = capsys.readouterr().out
    assert out == str(pq) + "\n"
    assert sorted(int(t) for t in out.split()) == sorted(VALUES)