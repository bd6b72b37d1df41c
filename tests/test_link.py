from dataclasses import dataclass

import pytest

from edf.link import DeQueue, List, Queue, Stack


@dataclass(eq=False)
class Section:
    index: int


def make_sections(*indexes):
    return [Section(i) for i in indexes]


# Stack


def test_stack_one_item():
    stack = Stack()
    item = Section(1)
    stack.push(item)
    popped = stack.pop()
    assert popped is item
    assert popped.index == 1
    assert stack.pop() is None


def test_stack_five_items():
    stack = Stack()
    for section in make_sections(1, 2, 3, 4, 5):
        stack.push(section)
    assert [stack.pop().index for _ in range(5)] == [5, 4, 3, 2, 1]
    assert stack.pop() is None


def test_stack_interleaved():
    stack = Stack()
    s1, s2, s3, s4, s5 = make_sections(1, 2, 3, 4, 5)
    stack.push(s1)
    stack.push(s2)
    stack.push(s3)
    assert stack.pop().index == 3
    assert stack.pop().index == 2
    stack.push(s4)
    stack.push(s5)
    assert stack.pop().index == 5
    assert stack.pop().index == 4
    assert stack.pop().index == 1
    assert stack.pop() is None


# Queue


def test_queue_one_item():
    queue = Queue()
    item = Section(1)
    queue.push(item)
    assert queue.pop().index == 1
    assert queue.pop() is None


def test_queue_five_items():
    queue = Queue()
    for section in make_sections(1, 2, 3, 4, 5):
        queue.push(section)
    assert [queue.pop().index for _ in range(5)] == [1, 2, 3, 4, 5]
    assert queue.pop() is None


def test_queue_interleaved():
    queue = Queue()
    s1, s2, s3, s4, s5 = make_sections(1, 2, 3, 4, 5)
    queue.push(s1)
    queue.push(s2)
    queue.push(s3)
    assert queue.pop().index == 1
    assert queue.pop().index == 2
    queue.push(s4)
    queue.push(s5)
    assert queue.pop().index == 3
    assert queue.pop().index == 4
    assert queue.pop().index == 5
    assert queue.pop() is None


# List


def test_list_one_item_all_ends():
    lst = List()
    item = Section(1)

    lst.add_head(item)
    assert lst.remove_head().index == 1
    assert lst.remove_head() is None

    lst.add_head(item)
    assert lst.remove_tail().index == 1
    assert lst.remove_head() is None

    lst.add_tail(item)
    assert lst.remove_head().index == 1
    assert lst.remove_head() is None

    lst.add_tail(item)
    assert lst.remove_tail().index == 1
    assert lst.remove_head() is None


def test_list_remove_head_order():
    lst = List()
    for section in make_sections(1, 2, 3, 4, 5):
        lst.add_head(section)
    assert [lst.remove_head().index for _ in range(5)] == [5, 4, 3, 2, 1]
    assert lst.remove_head() is None


def test_list_remove_tail_order():
    lst = List()
    for section in make_sections(1, 2, 3, 4, 5):
        lst.add_head(section)
    assert [lst.remove_tail().index for _ in range(5)] == [1, 2, 3, 4, 5]
    assert lst.remove_head() is None


def test_list_remove_by_predicate():
    lst = List()
    sections = make_sections(1, 2, 3, 4, 5)
    for section in sections:
        lst.add_head(section)
    seen = []
    lst.for_each(lambda s: seen.append(s.index))
    assert seen == [5, 4, 3, 2, 1]

    target = sections[1]
    assert lst.exists(lambda s: s.index == target.index)
    removed = lst.remove_item(lambda s: s.index == target.index)
    assert not lst.exists(lambda s: s.index == target.index)
    assert removed.index == 2
    assert len(lst) == 4


def _sorted_insert(lst, sections, before_factory):
    for section in sections:
        lst.add_sort(section, before_factory(section))
    return [s.index for s in lst]


def test_list_sort_descending():
    lst = List()
    sections = make_sections(10, 40, 20, 50, 30)
    result = _sorted_insert(lst, sections, lambda new: lambda item: item.index < new.index)
    assert result == [50, 40, 30, 20, 10]


def test_list_sort_ascending():
    lst = List()
    sections = make_sections(10, 40, 20, 50, 30)
    result = _sorted_insert(lst, sections, lambda new: lambda item: item.index > new.index)
    assert result == [10, 20, 30, 40, 50]


def test_list_sort_intermediate_steps():
    lst = List()
    s10, s40, s20 = make_sections(10, 40, 20)
    lst.add_sort(s10, lambda item: item.index > 10)
    assert [s.index for s in lst] == [10]
    lst.add_sort(s40, lambda item: item.index > 40)
    assert [s.index for s in lst] == [10, 40]
    lst.add_sort(s20, lambda item: item.index > 20)
    assert [s.index for s in lst] == [10, 20, 40]


def test_list_sort_equal_goes_before_when_predicate_inclusive():
    lst = List()
    first, second = make_sections(5, 5)
    lst.add_sort(first, lambda item: item.index >= 5)
    lst.add_sort(second, lambda item: item.index >= 5)
    assert lst.head() is second
    assert lst.tail() is first


def test_list_remove_item_by_identity():
    lst = List()
    a, b, c = make_sections(1, 1, 1)
    for s in (a, b, c):
        lst.add_tail(s)
    assert lst.remove_item(b) is b
    assert list(lst) == [a, c]
    assert lst.remove_item(b) is None
    assert len(lst) == 2


def test_list_remove_tail_item_updates_tail():
    lst = List()
    a, b, c = make_sections(1, 2, 3)
    for s in (a, b, c):
        lst.add_tail(s)
    lst.remove_item(c)
    assert lst.tail() is b
    lst.add_tail(c)
    assert [s.index for s in lst] == [1, 2, 3]


def test_remove_item_rejects_none():
    lst = List()
    with pytest.raises(ValueError):
        lst.remove_item(None)


# Shared behaviour


def test_head_tail_and_empty():
    lst = List()
    assert lst.is_empty()
    assert lst.head() is None
    assert lst.tail() is None
    a, b = make_sections(1, 2)
    lst.add_tail(a)
    lst.add_tail(b)
    assert not lst.is_empty()
    assert lst.head() is a
    assert lst.tail() is b
    assert len(lst) == 2


def test_get_and_getitem():
    lst = List()
    sections = make_sections(7, 8, 9)
    for s in sections:
        lst.add_tail(s)
    assert lst.get(0) is sections[0]
    assert lst.get(2) is sections[2]
    assert lst.get(3) is None
    assert lst[1].index == 8
    with pytest.raises(IndexError):
        lst[5]


def test_get_on_empty():
    assert List().get(0) is None


def test_find():
    lst = List()
    a, b = make_sections(1, 2)
    lst.add_tail(a)
    lst.add_tail(b)
    assert lst.find(b) is b
    assert lst.find(lambda s: s.index == 1) is a
    assert lst.find(lambda s: s.index == 3) is None
    assert lst.exists(a)
    assert not lst.exists(Section(1))


def test_for_each_may_remove_current():
    lst = List()
    sections = make_sections(1, 2, 3)
    for s in sections:
        lst.add_tail(s)
    visited = []

    def visit(s):
        visited.append(s.index)
        lst.remove_item(s)

    lst.for_each(visit)
    assert visited == [1, 2, 3]
    assert lst.is_empty()


def test_clean_calls_and_empties():
    queue = Queue()
    for s in make_sections(1, 2, 3):
        queue.push(s)
    cleaned = []
    queue.clean(lambda s: cleaned.append(s.index))
    assert cleaned == [1, 2, 3]
    assert len(queue) == 0
    assert queue.pop() is None


def test_push_none_rejected():
    with pytest.raises(ValueError):
        Queue().push(None)
    with pytest.raises(ValueError):
        Stack().push(None)


def test_dequeue_both_ends():
    dq = DeQueue()
    a, b, c = make_sections(1, 2, 3)
    dq.push_tail(b)
    dq.push_head(a)
    dq.push_tail(c)
    assert [s.index for s in dq] == [1, 2, 3]
    assert dq.pop_tail() is c
    assert dq.pop_head() is a
    assert dq.pop_tail() is b
    assert dq.pop_tail() is None
    assert dq.pop_head() is None