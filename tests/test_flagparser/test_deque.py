from flagparser.deque import Deque


def test_deque_empty():
    deque: Deque[int] = Deque()
    assert deque.empty()
    assert len(deque) == 0
    assert deque.front() == (None, False)
    deque.pop_front()
    assert deque.empty()


def test_deque_push_and_pop():
    deque: Deque[int] = Deque([1, 2])
    deque.push_back(3)
    assert deque.values == [1, 2, 3]
    assert deque.front() == (1, True)
    deque.pop_front()
    assert deque.front() == (2, True)
    assert list(deque) == [2, 3]
    deque.pop_front()
    deque.pop_front()
    assert deque.empty()


def test_deque_values_is_a_snapshot():
    deque: Deque[str] = Deque(["a"])
    values = deque.values
    values.append("b")
    assert deque.values == ["a"]
