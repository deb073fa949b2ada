import pytest

from algoshelf.linked_list import (
    ListNode,
    detect_cycle,
    detect_cycle_two_pointers,
    get_intersection_node,
    get_intersection_node_by_negation,
    get_intersection_node_two_pointers,
    reverse_list,
)


def build(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def values_of(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


def cyclic_list():
    nodes = {v: ListNode(v) for v in range(1, 9)}
    for v in range(2, 9):
        nodes[v].next = nodes[v - 1]
    nodes[1].next = nodes[4]
    return nodes[8], nodes[4]


@pytest.mark.parametrize("finder", [detect_cycle, detect_cycle_two_pointers])
def test_detect_cycle_source_case(finder):
    head, entry = cyclic_list()
    found = finder(head)
    assert found is entry
    assert found.val == 4


@pytest.mark.parametrize("finder", [detect_cycle, detect_cycle_two_pointers])
def test_detect_cycle_none(finder):
    assert finder(build([1, 2, 3, 4])) is None
    assert finder(build([1])) is None
    assert finder(None) is None


@pytest.mark.parametrize("finder", [detect_cycle, detect_cycle_two_pointers])
def test_detect_cycle_whole_list(finder):
    head = build([1, 2, 3])
    head.next.next.next = head
    assert finder(head) is head


def intersecting_lists():
    nodes = [ListNode(v) for v in range(8)]
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 4), (5, 6), (6, 7), (7, 3)]:
        nodes[a].next = nodes[b]
    return nodes[0], nodes[5], nodes[3]


@pytest.mark.parametrize(
    "finder",
    [
        get_intersection_node,
        get_intersection_node_two_pointers,
        get_intersection_node_by_negation,
    ],
)
def test_intersection_source_case(finder):
    head_a, head_b, shared = intersecting_lists()
    found = finder(head_a, head_b)
    assert found is shared
    assert found.val == 3


@pytest.mark.parametrize(
    "finder",
    [
        get_intersection_node,
        get_intersection_node_two_pointers,
        get_intersection_node_by_negation,
    ],
)
def test_no_intersection(finder):
    assert finder(build([1, 2, 3]), build([4, 5])) is None
    assert finder(build([1, 2]), None) is None


def test_negation_restores_values():
    head_a, head_b, _ = intersecting_lists()
    get_intersection_node_by_negation(head_a, head_b)
    assert values_of(head_a) == [0, 1, 2, 3, 4]
    assert values_of(head_b) == [5, 6, 7, 3, 4]


def test_reverse_list_source_case():
    head = build([3, 2, 1])
    result = reverse_list(head)
    assert values_of(result) == [1, 2, 3]


def test_reverse_list_short():
    assert reverse_list(None) is None
    single = ListNode(7)
    assert reverse_list(single) is single
    assert values_of(reverse_list(build([1, 2]))) == [2, 1]


def test_reverse_twice_restores():
    head = build([5, 4, 3, 2, 1])
    assert values_of(reverse_list(reverse_list(head))) == [5, 4, 3, 2, 1]