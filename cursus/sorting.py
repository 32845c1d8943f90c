"""The push_swap sorting strategies and the command that drives them."""

from __future__ import annotations

import sys

from .args import ArgumentError, parse_args
from .stack import PushSwap


def assign_indices(values) -> list[int]:
    """Return the rank of every value, 0 for the smallest."""
    values = list(values)
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [-1] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks


def maximum_bits(max_num: int) -> int:
    """Return how many bits are needed to write max_num."""
    if max_num < 0:
        raise ValueError("max_num must not be negative")
    return max_num.bit_length()


def search_lowest_pos(machine: PushSwap, nb: int) -> int:
    """Return the 1-based position in a of the element ranked nb (0 or 1).

    When there is no such element the position just past the bottom is returned.
    """
    if nb in (0, 1):
        for position, element in enumerate(machine.a, start=1):
            if element.index == nb:
                return position
    return len(machine.a) + 1


def sort_three(machine: PushSwap) -> None:
    """Sort the top three values of a with at most two operations."""
    top, middle, bottom = machine.values_a()[:3]
    if bottom > top > middle:
        machine.sa()
    elif top > middle > bottom:
        machine.sa()
        machine.rra()
    elif top > bottom > middle:
        machine.ra()
    elif middle > bottom > top:
        machine.sa()
        machine.ra()
    elif middle > top > bottom:
        machine.rra()


def sort_four(machine: PushSwap, nb: int) -> None:
    """Sort four elements by parking the one ranked nb on b."""
    position = search_lowest_pos(machine, nb)
    if position == 2:
        machine.sa()
    elif position == 3:
        machine.rra()
        machine.rra()
    elif position == 4:
        machine.rra()
    machine.pb()
    sort_three(machine)
    machine.pa()


def sort_five(machine: PushSwap) -> None:
    """Sort five elements by parking the smallest on b."""
    position = search_lowest_pos(machine, 0)
    if position == 2:
        machine.sa()
    elif position == 3:
        machine.ra()
        machine.ra()
    elif position == 4:
        machine.rra()
        machine.rra()
    elif position == 5:
        machine.rra()
    machine.pb()
    sort_four(machine, 1)
    machine.pa()


def sort_small(machine: PushSwap) -> None:
    """Sort an unsorted stack of two to five indexed elements."""
    size = len(machine.a)
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_three(machine)
    elif size == 4:
        sort_four(machine, 0)
    elif size == 5:
        sort_five(machine)


def sort_big(machine: PushSwap) -> None:
    """Radix-sort the indexed elements of a, one bit of the rank per pass."""
    size = len(machine.a)
    if size == 0:
        return
    for bit in range(maximum_bits(size - 1)):
        for _ in range(size):
            if (machine.a[0].index >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while machine.b:
            machine.pa()


def push_swap(values) -> list[str]:
    """Return the operations that sort the given distinct values."""
    values = list(values)
    machine = PushSwap(values)
    if not machine.is_sorted():
        machine = PushSwap(values, assign_indices(values))
        if len(values) <= 5:
            sort_small(machine)
        else:
            sort_big(machine)
    return machine.operations


def main(argv=None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    for operation in push_swap(values):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())