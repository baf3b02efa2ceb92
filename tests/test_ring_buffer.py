import pytest

from ctrlalt.ring_buffer import RingBuffer


def test_new_buffer_is_empty():
    rb = RingBuffer(4)
    assert rb.is_empty()
    assert not rb.is_full()
    assert len(rb) == 0
    assert rb.capacity == 4


def test_fifo_order():
    rb = RingBuffer(3)
    for value in (1, 2, 3):
        rb.put(value)
    assert rb.is_full()
    assert [rb.get() for _ in range(3)] == [1, 2, 3]
    assert rb.is_empty()


def test_overwrites_oldest_when_full():
    rb = RingBuffer(3)
    for value in (1, 2, 3, 4):
        rb.put(value)
    assert rb.is_full()
    assert [rb.get() for _ in range(3)] == [2, 3, 4]


def test_length_tracks_entries():
    rb = RingBuffer(5)
    rb.put(9)
    rb.put(8)
    assert len(rb) == 2
    rb.get()
    assert len(rb) == 1


def test_values_are_bytes():
    rb = RingBuffer(2)
    rb.put(0x1FF)
    assert rb.get() == 0xFF


def test_get_from_fresh_buffer_returns_stored_zero():
    rb = RingBuffer(3)
    assert rb.get() == 0


def test_reset_empties():
    rb = RingBuffer(2)
    rb.put(5)
    rb.put(6)
    rb.reset()
    assert rb.is_empty()
    assert not rb.is_full()
    rb.put(7)
    assert rb.get() == 7


def test_single_slot_buffer():
    rb = RingBuffer(1)
    rb.put(10)
    assert rb.is_full()
    rb.put(11)
    assert rb.get() == 11


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        RingBuffer(size)