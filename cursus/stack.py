"""The two-stack machine on which push_swap operates."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class Element:
    """A stack entry: its value and its rank among all values (-1 if unranked)."""

    value: int
    index: int = -1


class PushSwap:
    """Stacks a and b plus the log of operations performed on them."""

    def __init__(self, values, indices=None):
        values = list(values)
        indices = [-1] * len(values) if indices is None else list(indices)
        if len(indices) != len(values):
            raise ValueError("values and indices differ in length")
        self.a: deque[Element] = deque(Element(v, i) for v, i in zip(values, indices))
        self.b: deque[Element] = deque()
        self.operations: list[str] = []

    def is_sorted(self) -> bool:
        """True if the values in a are in ascending order from top to bottom."""
        values = self.values_a()
        return all(x <= y for x, y in zip(values, values[1:]))

    def values_a(self) -> list[int]:
        return [element.value for element in self.a]

    def indices_a(self) -> list[int]:
        return [element.index for element in self.a]

    @staticmethod
    def _swap(stack: deque) -> None:
        if len(stack) < 2:
            raise IndexError("swap needs at least two elements")
        stack[0], stack[1] = stack[1], stack[0]

    def sa(self) -> None:
        if not self.a:
            return
        self._swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        if not self.b:
            return
        self._swap(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        if len(self.a) < 2 or len(self.b) < 2:
            raise IndexError("ss needs at least two elements on each stack")
        self._swap(self.a)
        self._swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.operations.append("pa")

    def pb(self) -> None:
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.operations.append("pb")

    def ra(self) -> None:
        self.a.rotate(-1)
        self.operations.append("ra")

    def rb(self) -> None:
        self.b.rotate(-1)
        self.operations.append("rb")

    def rr(self) -> None:
        self.a.rotate(-1)
        self.b.rotate(-1)
        self.operations.append("rr")

    def rra(self) -> None:
        self.a.rotate(1)
        self.operations.append("rra")

    def rrb(self) -> None:
        self.b.rotate(1)
        self.operations.append("rrb")

    def rrr(self) -> None:
        self.a.rotate(1)
        self.b.rotate(1)
        self.operations.append("rrr")