import pytest

from practicum.priority_queue import EmptyQueueError, PriorityQueue


@pytest.fixture
def filled():
    q = PriorityQueue()
    for value in (15, 1, -3, 100, 10, -2, -15):
        q.put(value)
    return q


def test_size_zero_when_empty():
    assert len(PriorityQueue()) == 0


def test_new_queue_is_empty():
    assert PriorityQueue().empty() is True


def test_cant_top_when_empty():
    with pytest.raises(EmptyQueueError, match="top"):
        PriorityQueue().top()


def test_cant_pop_when_empty():
    with pytest.raises(EmptyQueueError, match="pop"):
        PriorityQueue().pop()


def test_cant_get_when_empty():
    with pytest.raises(EmptyQueueError, match="get"):
        PriorityQueue().get()


def test_can_put_one_element():
    q = PriorityQueue()
    q.put(5)
    assert q.top() == 5


def test_can_get_one_element():
    q = PriorityQueue()
    q.put(5)
    assert q.get() == 5


def test_empty_when_pop_removes_last_element():
    q = PriorityQueue()
    q.put(5)
    q.pop()
    assert q.empty()


def test_empty_when_get_removes_last_element():
    q = PriorityQueue()
    q.put(5)
    q.get()
    assert q.empty()


def test_top_returns_highest(filled):
    assert filled.top() == 100


def test_get_returns_highest(filled):
    assert filled.get() == 100


def test_pop_removes_highest(filled):
    filled.pop()
    assert filled.top() == 15


def test_pop_changes_size(filled):
    size = len(filled)
    filled.pop()
    assert len(filled) == size - 1


def test_get_changes_size(filled):
    size = len(filled)
    filled.get()
    assert len(filled) == size - 1


def test_top_does_not_change_size(filled):
    size = len(filled)
    filled.top()
    assert len(filled) == size


def test_empty_when_clear(filled):
    filled.clear()
    assert filled.empty()


def test_copy_top_same(filled):
    duplicate = filled.copy()
    assert duplicate.top() == filled.top()


def test_copy_has_own_memory(filled):
    duplicate = filled.copy()
    filled.pop()
    assert duplicate.top() == 100
    assert filled.top() == 15


def test_get_drains_in_descending_order(filled):
    drained = [filled.get() for _ in range(len(filled))]
    assert drained == [100, 15, 10, 1, -2, -3, -15]


def test_create_with_initial_value():
    q = PriorityQueue(3)
    assert q.top() == 3
    assert len(q) == 1


def test_too_many_initial_values():
    with pytest.raises(TypeError):
        PriorityQueue(1, 2)