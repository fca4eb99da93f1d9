"""The strategy that produces a sequence of operations sorting stack ``a``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from pushswap.parsing import index_values
from pushswap.stacks import Element, Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """Whether the values never decrease from first to last."""
    values = list(values)
    return all(left <= right for left, right in zip(values, values[1:]))


def _values(stack: deque[Element]) -> list[int]:
    return [element.value for element in stack]


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three elements with at most two moves."""
    a = stacks.a
    if is_sorted(_values(a)):
        return
    high = max(_values(a))
    if a[0].value == high:
        stacks.ra()
    elif a[1].value == high:
        stacks.rra()
    if a[0].value > a[1].value:
        stacks.sa()


def _push_to_b(stacks: Stacks) -> None:
    """Move all but three elements to ``b``, the lower half first."""
    size = len(stacks.a)
    half = size // 2
    pushed = 0
    if size > 6:
        for _ in range(size):
            if pushed >= half:
                break
            if stacks.a[0].index <= half:
                stacks.pb()
                pushed += 1
            else:
                stacks.ra()
    while size - pushed > 3:
        stacks.pb()
        pushed += 1


def _number_positions(stack: deque[Element]) -> None:
    for position, element in enumerate(stack):
        element.pos = position


def _target_position(a: deque[Element], b_index: int, fallback: int) -> int:
    """Position in ``a`` in front of which an element of ``b`` belongs."""
    above = [element for element in a if element.index > b_index]
    if above:
        return min(above, key=lambda element: element.index).pos
    if a:
        return min(a, key=lambda element: element.index).pos
    return fallback


def _assign_targets(stacks: Stacks) -> None:
    _number_positions(stacks.a)
    _number_positions(stacks.b)
    target = 0
    for element in stacks.b:
        target = _target_position(stacks.a, element.index, target)
        element.target = target


def _rotation_cost(position: int, size: int) -> int:
    """Positive: rotations needed; negative: reverse rotations needed."""
    if position > size // 2:
        return -(size - position)
    return position


def _assign_costs(stacks: Stacks) -> None:
    a_size = len(stacks.a)
    b_size = len(stacks.b)
    for element in stacks.b:
        element.cost_b = _rotation_cost(element.pos, b_size)
        element.cost_a = _rotation_cost(element.target, a_size)


def _move(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    """Bring both targets to the top, sharing rotations, then push to ``a``."""
    while cost_a < 0 and cost_b < 0:
        cost_a += 1
        cost_b += 1
        stacks.rrr()
    while cost_a > 0 and cost_b > 0:
        cost_a -= 1
        cost_b -= 1
        stacks.rr()
    while cost_a > 0:
        stacks.ra()
        cost_a -= 1
    while cost_a < 0:
        stacks.rra()
        cost_a += 1
    while cost_b > 0:
        stacks.rb()
        cost_b -= 1
    while cost_b < 0:
        stacks.rrb()
        cost_b += 1
    stacks.pa()


def _push_cheapest(stacks: Stacks) -> None:
    if not stacks.b:
        return
    cheapest = min(
        stacks.b, key=lambda element: abs(element.cost_a) + abs(element.cost_b)
    )
    _move(stacks, cheapest.cost_a, cheapest.cost_b)


def _shift_to_lowest(stacks: Stacks) -> None:
    """Rotate ``a`` the short way until its lowest-ranked element is on top."""
    a = stacks.a
    size = len(a)
    _number_positions(a)
    lowest = min(a, key=lambda element: element.index).pos
    if lowest > size // 2:
        for _ in range(size - lowest):
            stacks.rra()
    else:
        for _ in range(lowest):
            stacks.ra()


def sort_large(stacks: Stacks) -> None:
    """Sort stack ``a`` by ranks, using ``b`` as scratch space."""
    _push_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _assign_targets(stacks)
        _assign_costs(stacks)
        _push_cheapest(stacks)
    if stacks.a and not is_sorted(_values(stacks.a)):
        _shift_to_lowest(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operation names that sort the given values on stack ``a``."""
    values = list(values)
    stacks = Stacks(values, index_values(values))
    size = len(values)
    if not is_sorted(values):
        if size == 2:
            stacks.sa()
        elif size == 3:
            sort_three(stacks)
        elif size > 3:
            sort_large(stacks)
    return list(stacks.operations)