import pytest

from leetsolutions.structures import AllOne, MaxPriorityQueue, TreeNode


def test_all_one_empty_returns_empty_strings():
    counter = AllOne()
    assert counter.get_max_key() == ""
    assert counter.get_min_key() == ""


def test_all_one_tracks_max_and_min():
    counter = AllOne()
    counter.inc("hello")
    counter.inc("hello")
    counter.inc("leet")
    assert counter.get_max_key() == "hello"
    assert counter.get_min_key() == "leet"


def test_all_one_ties_keep_insertion_order_then_dec_reorders():
    counter = AllOne()
    counter.inc("a")
    counter.inc("b")
    assert counter.get_max_key() == "a"
    assert counter.get_min_key() == "b"
    counter.inc("a")
    counter.inc("b")
    assert counter.get_max_key() == "a"
    counter.dec("a")
    assert counter.get_max_key() == "b"
    assert counter.get_min_key() == "a"


def test_all_one_promotes_key_past_lower_counts():
    counter = AllOne()
    for key in ("x", "y", "z"):
        counter.inc(key)
    counter.inc("z")
    assert counter.get_max_key() == "z"
    assert counter.get_min_key() == "y"


def test_all_one_dec_removes_key_at_zero():
    counter = AllOne()
    counter.inc("only")
    counter.dec("only")
    assert counter.get_max_key() == ""
    assert counter.get_min_key() == ""


def test_all_one_dec_missing_key_leaves_state():
    counter = AllOne()
    counter.inc("k")
    counter.inc("k")
    counter.inc("m")
    counter.dec("absent")
    assert counter.get_max_key() == "k"
    assert counter.get_min_key() == "m"


def test_priority_queue_pops_in_descending_order():
    values = [1, 4, 3, 12, 6, 7]
    queue = MaxPriorityQueue()
    for value in values:
        queue.push(value, f"item{value}")
    popped = [queue.pop() for _ in values]
    assert [value for value, _ in popped] == sorted(values, reverse=True)
    assert all(payload == f"item{value}" for value, payload in popped)
    assert len(queue) == 0


def test_priority_queue_peek_does_not_remove():
    values = [5, 9, 2]
    queue = MaxPriorityQueue()
    for value in values:
        queue.push(value, None)
    assert queue.peek() == (max(values), None)
    assert len(queue) == len(values)


def test_priority_queue_equal_values_are_fifo():
    queue = MaxPriorityQueue()
    queue.push(3, "first")
    queue.push(3, "second")
    assert queue.pop() == (3, "first")
    assert queue.pop() == (3, "second")


def test_priority_queue_empty_raises():
    queue = MaxPriorityQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


def test_tree_node_defaults_and_links():
    leaf = TreeNode(2)
    root = TreeNode(1, leaf, None)
    assert leaf.left is None and leaf.right is None
    assert root.left.val == 2
    assert root == TreeNode(1, TreeNode(2))