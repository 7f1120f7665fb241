import pytest

from algokit.stack import DEFAULT_CAPACITY, Stack


def test_push_peek_pop_string():
    stack = Stack()
    text = "abcd"
    stack.push(text)
    assert stack.peek() == text
    assert stack.pop() == text
    assert len(stack) == 0


def test_empty_pop_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_empty_peek_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_invalid_initial_capacity():
    with pytest.raises(ValueError):
        Stack(0)


def test_capacity_starts_empty_then_reserves_initial():
    stack = Stack()
    assert stack.capacity() == 0
    stack.push(1)
    assert stack.capacity() == DEFAULT_CAPACITY


def test_capacity_doubles_when_full():
    stack = Stack()
    for i in range(1, DEFAULT_CAPACITY + 1):
        stack.push(i)
    assert stack.capacity() == DEFAULT_CAPACITY
    stack.push(DEFAULT_CAPACITY + 1)
    assert stack.capacity() == 2 * DEFAULT_CAPACITY


def test_size_and_capacity_invariant_over_many_pushes():
    stack = Stack()
    for i in range(1, 10001):
        stack.push(i)
        assert len(stack) == i
        capacity = stack.capacity()
        assert capacity >= len(stack)
        ratio, remainder = divmod(capacity, DEFAULT_CAPACITY)
        assert remainder == 0
        assert ratio & (ratio - 1) == 0


def test_push_pop_chars_with_shrinking():
    stack = Stack()
    for i in range(1, 256):
        stack.push(chr(i))
    for i in range(255, 0, -1):
        assert stack.peek() == chr(i)
        assert stack.pop() == chr(i)
        if i == DEFAULT_CAPACITY:
            assert stack.capacity() == 2 * i
    assert len(stack) == 0


def test_push_pop_negative_ints():
    stack = Stack()
    for i in range(1, 1001):
        stack.push(-i)
    for i in range(1000, 0, -1):
        assert stack.peek() == -i
        assert stack.pop() == -i
    with pytest.raises(IndexError):
        stack.pop()


def test_capacity_never_below_size_while_shrinking():
    stack = Stack()
    for i in range(500):
        stack.push(i)
    while len(stack):
        stack.pop()
        assert stack.capacity() > len(stack) or stack.capacity() == len(stack) == 0


def test_single_push_pop_halves_capacity():
    stack = Stack()
    stack.push(7)
    assert stack.pop() == 7
    assert stack.capacity() == DEFAULT_CAPACITY // 2


def test_push_after_drain_restores_usable_capacity():
    stack = Stack(initial_capacity=4)
    for i in range(50):
        stack.push(i)
    for _ in range(50):
        stack.pop()
    stack.push("x")
    assert stack.peek() == "x"
    assert stack.capacity() >= 1


def test_no_shrink_keeps_capacity():
    stack = Stack(100000, shrink=False)
    for i in range(5):
        stack.push(i)
    for _ in range(5):
        stack.pop()
    assert stack.capacity() == 100000


def test_sort_puts_smallest_on_top():
    stack = Stack()
    for value in [5, 3, 9, 1, 7]:
        stack.push(value)
    stack.sort()
    popped = [stack.pop() for _ in range(5)]
    assert popped == sorted(popped)
    assert popped[0] == 1


def test_sort_with_key_is_stable():
    stack = Stack()
    items = [("a", 2), ("b", 1), ("c", 2), ("d", 1)]
    for item in items:
        stack.push(item)
    stack.sort(key=lambda item: item[1])
    popped = [stack.pop() for _ in range(len(items))]
    assert [p[1] for p in popped] == sorted(p[1] for p in popped)
    ones = [p[0] for p in popped if p[1] == 1]
    twos = [p[0] for p in popped if p[1] == 2]
    # Equal keys keep their push order in storage, so the later one is on top.
    assert ones == ["d", "b"]
    assert twos == ["c", "a"]