import pytest

from coursekit.linked import LinkedList, Node, Stack, StackUnderflowError


def _pairs(items):
    return [(node.id, node.data) for node in items]


@pytest.fixture
def two_list():
    lst = LinkedList()
    lst.append(1, 1.5)
    lst.append(2, 2.5)
    return lst


def test_append_keeps_order(two_list):
    assert _pairs(two_list) == [(1, 1.5), (2, 2.5)]
    assert len(two_list) == 2


def test_prepend_puts_node_first(two_list):
    two_list.prepend(0, 0.5)
    assert _pairs(two_list) == [(0, 0.5), (1, 1.5), (2, 2.5)]
    assert len(two_list) == 3


def test_search_id_found_and_missing(two_list):
    node = two_list.search_id(2)
    assert node is not None and node.data == 2.5
    assert two_list.search_id(99) is None


def test_insert_before(two_list):
    two_list.insert_before(2, 7)
    assert [node.id for node in two_list] == [1, 7, 2]
    assert len(two_list) == 3


def test_insert_before_missing_raises(two_list):
    with pytest.raises(KeyError):
        two_list.insert_before(42, 7)
    assert len(two_list) == 2


def test_remove(two_list):
    two_list.remove(1)
    assert [node.id for node in two_list] == [2]
    assert len(two_list) == 1


def test_remove_missing_raises(two_list):
    with pytest.raises(KeyError):
        two_list.remove(5)


def test_remove_all_reports_ids(two_list):
    assert two_list.remove_all() == [1, 2]
    assert len(two_list) == 0
    assert list(two_list) == []


def test_format_lines(two_list):
    text = two_list.format()
    assert text.startswith("=======================================\n")
    assert "node0: id=1, data=1.500000\n" in text
    assert text.endswith("\n\n")


def test_format_empty():
    assert LinkedList().format() == "=======================================\n\n\n"


def test_stack_lifo():
    stack = Stack()
    stack.push(1, 1.5)
    stack.push(2, 2.5)
    assert len(stack) == 2
    assert stack.pop() == Node(2, 2.5)
    assert stack.pop() == Node(1, 1.5)
    assert len(stack) == 0


def test_stack_underflow():
    stack = Stack()
    stack.push(1, 1.5)
    stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_stack_format_top_first():
    stack = Stack()
    stack.push(1, 1.5)
    stack.push(2, 2.5)
    lines = stack.format().splitlines()
    assert lines[1].startswith("node0: id=2")
    assert lines[2].startswith("node1: id=1")