import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Element, Stacks

ALL_OPS = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]

value_lists = st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=20)


def _pairs(stack):
    return sorted((e.value, e.index) for e in stack)


def test_initial_state_holds_values_in_order():
    stacks = Stacks([5, -3, 8], [2, 0, 1])
    assert stacks.values_a() == [5, -3, 8]
    assert stacks.values_b() == []
    assert stacks.operations == []
    assert [e.index for e in stacks.a] == [2, 0, 1]


def test_default_indexes_are_zero():
    stacks = Stacks([4, 7])
    assert all(e.index == 0 for e in stacks.a)


def test_new_element_defaults():
    element = Element(42)
    assert element.value == 42
    assert element.index == 0
    assert element.pos == -1
    assert element.target == -1
    assert element.cost_a == -1
    assert element.cost_b == -1


def test_mismatched_indexes_raise():
    with pytest.raises(ValueError):
        Stacks([1, 2, 3], [0, 1])


def test_sa_swaps_top_two():
    stacks = Stacks([1, 2, 3], [0, 1, 2])
    stacks.sa()
    assert stacks.values_a() == [2, 1, 3]
    assert [e.index for e in stacks.a][:2] == [1, 0]
    assert stacks.operations == ["sa"]


def test_ra_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.ra()
    assert stacks.values_a() == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.rra()
    assert stacks.values_a() == [3, 1, 2]


@pytest.mark.parametrize("op", ["sa", "ra", "rra"])
def test_single_element_unchanged_but_logged(op):
    stacks = Stacks([9])
    stacks.apply(op)
    assert stacks.values_a() == [9]
    assert stacks.operations == [op]


def test_push_from_empty_is_logged_and_harmless():
    stacks = Stacks([1, 2])
    stacks.pa()
    assert stacks.values_a() == [1, 2]
    assert stacks.values_b() == []
    assert stacks.operations == ["pa"]


def test_pb_moves_top_of_a_onto_b():
    stacks = Stacks([7, 8, 9])
    stacks.pb()
    stacks.pb()
    assert stacks.values_b()[0] == 8
    assert stacks.values_b()[1] == 7
    assert stacks.values_a() == [9]


@given(value_lists)
def test_sa_twice_is_identity(values):
    stacks = Stacks(values, range(len(values)))
    stacks.sa()
    stacks.sa()
    assert stacks.values_a() == values
    assert [e.index for e in stacks.a] == list(range(len(values)))


@given(value_lists)
def test_ra_then_rra_is_identity(values):
    stacks = Stacks(values)
    stacks.ra()
    stacks.rra()
    assert stacks.values_a() == values


@given(value_lists)
def test_rotating_full_length_is_identity(values):
    stacks = Stacks(values)
    for _ in values:
        stacks.ra()
    assert stacks.values_a() == values
    assert stacks.operations == ["ra"] * len(values)


@given(value_lists)
def test_pb_then_pa_is_identity(values):
    stacks = Stacks(values)
    stacks.pb()
    stacks.pa()
    assert stacks.values_a() == values
    assert stacks.values_b() == []


@given(value_lists, st.lists(st.sampled_from(ALL_OPS), max_size=40))
def test_operations_preserve_elements(values, ops):
    indexes = list(range(len(values)))
    stacks = Stacks(values, indexes)
    before = _pairs(stacks.a)
    for op in ops:
        stacks.apply(op)
    assert _pairs(list(stacks.a) + list(stacks.b)) == before
    assert stacks.operations == ops


def _with_b(values_a, values_b):
    stacks = Stacks(values_a + values_b)
    for _ in values_a + values_b:
        stacks.pb()
    for _ in values_a:
        stacks.pa()
    stacks.operations.clear()
    return stacks


@pytest.mark.parametrize(
    "combined, parts",
    [("ss", ("sa", "sb")), ("rr", ("ra", "rb")), ("rrr", ("rra", "rrb"))],
)
def test_combined_operations_match_their_parts(combined, parts):
    left = _with_b([1, 2, 3, 4], [5, 6, 7])
    right = _with_b([1, 2, 3, 4], [5, 6, 7])
    left.apply(combined)
    for op in parts:
        right.apply(op)
    assert left.values_a() == right.values_a()
    assert left.values_b() == right.values_b()
    assert left.operations == [combined]
    assert right.operations == list(parts)


@pytest.mark.parametrize("op", ALL_OPS)
def test_apply_matches_direct_call(op):
    by_name = _with_b([3, 1, 4], [1, 5, 9, 2])
    direct = _with_b([3, 1, 4], [1, 5, 9, 2])
    by_name.apply(op)
    getattr(direct, op)()
    assert by_name.values_a() == direct.values_a()
    assert by_name.values_b() == direct.values_b()
    assert by_name.operations == direct.operations == [op]


def test_apply_unknown_operation_raises():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("rrx")
    assert stacks.operations == []