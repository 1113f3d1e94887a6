import random

import pytest

from meshkit.heap import Heap, HeapInterface


class KeyedInterface(HeapInterface):
    def __init__(self, keys):
        self.keys = keys
        self.positions = {k: -1 for k in keys}

    def less(self, a, b):
        return self.keys[a] < self.keys[b]

    def greater(self, a, b):
        return self.keys[a] > self.keys[b]

    def get_heap_position(self, h):
        return self.positions[h]

    def set_heap_position(self, h, pos):
        self.positions[h] = pos


def make_heap(values):
    keys = dict(enumerate(values))
    iface = KeyedInterface(keys)
    heap = Heap(iface)
    for k in keys:
        heap.insert(k)
    return heap, iface


def drain(heap, iface):
    out = []
    while not heap.is_empty():
        out.append(iface.keys[heap.front()])
        heap.pop_front()
    return out


def test_pop_yields_sorted_order():
    rng = random.Random(1)
    values = [rng.random() for _ in range(50)]
    heap, iface = make_heap(values)
    assert len(heap) == 50
    assert heap.check()
    assert drain(heap, iface) == sorted(values)


def test_positions_track_entries():
    heap, iface = make_heap([5, 3, 8, 1, 9])
    for entry, pos in iface.positions.items():
        assert heap.is_stored(entry)
        assert pos >= 0
    front = heap.front()
    assert iface.keys[front] == 1
    heap.pop_front()
    assert not heap.is_stored(front)


def test_remove_middle_entry():
    heap, iface = make_heap([4, 2, 7, 1, 6, 3])
    heap.remove(4)  # key 6
    assert not heap.is_stored(4)
    assert heap.check()
    assert drain(heap, iface) == [1, 2, 3, 4, 7]


def test_remove_last_entry():
    heap, iface = make_heap([1, 2])
    last = max(iface.positions, key=iface.positions.get)
    heap.remove(last)
    assert len(heap) == 1
    assert heap.check()


def test_update_after_key_change():
    heap, iface = make_heap([10, 20, 30, 40])
    iface.keys[3] = 0
    heap.update(3)
    assert heap.front() == 3
    iface.keys[3] = 100
    heap.update(3)
    assert heap.check()
    assert drain(heap, iface) == [10, 20, 30, 100]


def test_reset_heap_position():
    heap, iface = make_heap([1])
    heap.reset_heap_position(0)
    assert not heap.is_stored(0)


def test_clear_empties_heap():
    heap, _ = make_heap([3, 1, 2])
    heap.clear()
    assert heap.is_empty()
    assert len(heap) == 0


def test_empty_front_and_pop_raise():
    heap = Heap(KeyedInterface({}))
    with pytest.raises(IndexError):
        heap.front()
    with pytest.raises(IndexError):
        heap.pop_front()


def test_remove_unstored_raises():
    heap, _ = make_heap([1, 2])
    heap.pop_front()
    with pytest.raises(ValueError):
        heap.remove(0)
    with pytest.raises(ValueError):
        heap.update(0)


def test_check_detects_violation():
    heap, iface = make_heap([1, 2, 3])
    iface.keys[heap.front()] = 99
    assert not heap.check()