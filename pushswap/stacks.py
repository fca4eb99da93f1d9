"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable


@dataclass(slots=True)
class Element:
    """One number on a stack, with the bookkeeping the sorter fills in."""

    value: int
    index: int = 0
    pos: int = -1
    target: int = -1
    cost_a: int = -1
    cost_b: int = -1


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its leftmost element.

    Every operation is recorded by name in ``operations``, in the order it
    was performed, whether or not it changed anything.
    """

    def __init__(self, values: Iterable[int], indexes: Iterable[int] | None = None) -> None:
        values = list(values)
        if indexes is None:
            indexes = [0] * len(values)
        else:
            indexes = list(indexes)
            if len(indexes) != len(values):
                raise ValueError("values and indexes must have the same length")
        self.a: deque[Element] = deque(
            Element(value, index) for value, index in zip(values, indexes)
        )
        self.b: deque[Element] = deque()
        self.operations: list[str] = []
        self._dispatch: dict[str, Callable[[], None]] = {
            "sa": self.sa,
            "sb": self.sb,
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": self.ra,
            "rb": self.rb,
            "rr": self.rr,
            "rra": self.rra,
            "rrb": self.rrb,
            "rrr": self.rrr,
        }

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={self.values_b()!r})"

    def values_a(self) -> list[int]:
        """Values of stack ``a`` from top to bottom."""
        return [element.value for element in self.a]

    def values_b(self) -> list[int]:
        """Values of stack ``b`` from top to bottom."""
        return [element.value for element in self.b]

    @staticmethod
    def _swap(stack: deque[Element]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(src: deque[Element], dest: deque[Element]) -> None:
        if src:
            dest.appendleft(src.popleft())

    @staticmethod
    def _rotate(stack: deque[Element]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[Element]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a)
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b)
        self._record("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._record("rrr")

    def apply(self, operation: str) -> None:
        """Perform the operation with the given name, such as ``"ra"``."""
        try:
            method = self._dispatch[operation]
        except KeyError:
            raise ValueError(f"unknown operation: {operation!r}") from None
        method()