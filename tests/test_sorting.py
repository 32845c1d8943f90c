import itertools
import random

import pytest

from cursus.sorting import (
    assign_indices,
    main,
    maximum_bits,
    push_swap,
    search_lowest_pos,
    sort_big,
    sort_five,
    sort_four,
    sort_small,
    sort_three,
)
from cursus.stack import PushSwap


def _replay(values, operations):
    machine = PushSwap(values)
    for operation in operations:
        getattr(machine, operation)()
    return machine


def test_assign_indices_are_a_permutation_of_ranks():
    values = [42, -7, 1000, 3, 0]
    ranks = assign_indices(values)
    assert sorted(ranks) == list(range(len(values)))
    by_rank = [value for _, value in sorted(zip(ranks, values))]
    assert by_rank == sorted(values)


def test_assign_indices_empty():
    assert assign_indices([]) == []


@pytest.mark.parametrize("number", [1, 2, 5, 99, 499, 1023, 1024])
def test_maximum_bits_bounds(number):
    bits = maximum_bits(number)
    assert 2 ** (bits - 1) <= number < 2 ** bits


def test_maximum_bits_zero():
    assert maximum_bits(0) == 0


def test_maximum_bits_negative_raises():
    with pytest.raises(ValueError):
        maximum_bits(-1)


def test_search_lowest_pos_finds_rank():
    machine = PushSwap([5, 1, 3], [2, 0, 1])
    assert search_lowest_pos(machine, 0) == 2
    assert search_lowest_pos(machine, 1) == 3


def test_search_lowest_pos_other_ranks_fall_past_bottom():
    machine = PushSwap([5, 1, 3], [2, 0, 1])
    assert search_lowest_pos(machine, 2) == len(machine.a) + 1


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_every_permutation(values):
    machine = PushSwap(values, assign_indices(values))
    sort_three(machine)
    assert machine.values_a() == sorted(values)
    assert len(machine.operations) <= 2


@pytest.mark.parametrize("values", list(itertools.permutations([10, 20, 30, 40])))
def test_sort_four_every_permutation(values):
    machine = PushSwap(values, assign_indices(values))
    sort_four(machine, 0)
    assert machine.values_a() == sorted(values)
    assert not machine.b


@pytest.mark.parametrize("values", list(itertools.permutations([-2, -1, 0, 1, 2])))
def test_sort_five_every_permutation(values):
    machine = PushSwap(values, assign_indices(values))
    sort_five(machine)
    assert machine.values_a() == sorted(values)
    assert not machine.b
    assert len(machine.operations) <= 12


def test_sort_small_two_elements():
    machine = PushSwap([2, 1], [1, 0])
    sort_small(machine)
    assert machine.operations == ["sa"]
    assert machine.values_a() == [1, 2]


def test_sort_big_random():
    rng = random.Random(7)
    values = rng.sample(range(-10000, 10000), 100)
    machine = PushSwap(values, assign_indices(values))
    sort_big(machine)
    assert machine.values_a() == sorted(values)
    assert set(machine.operations) <= {"ra", "pb", "pa"}


def test_push_swap_sorted_input_needs_nothing():
    assert push_swap([1, 2, 3, 4, 5, 6, 7]) == []


def test_push_swap_empty_and_single():
    assert push_swap([]) == []
    assert push_swap([9]) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 17, 64])
def test_push_swap_operations_sort_the_input(size):
    rng = random.Random(size)
    values = rng.sample(range(-500, 500), size)
    while values == sorted(values):
        rng.shuffle(values)
    operations = push_swap(values)
    machine = _replay(values, operations)
    assert machine.values_a() == sorted(values)
    assert not machine.b


def test_main_prints_operations(capsys):
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_duplicate_is_error(capsys):
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_non_numeric_is_error(capsys):
    assert main(["1", "abc"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_output_replays_to_sorted(capsys):
    values = ["5", "-3", "12", "0", "7", "1", "-8"]
    assert main(values) == 0
    operations = capsys.readouterr().out.split()
    machine = _replay([int(v) for v in values], operations)
    assert machine.values_a() == sorted(int(v) for v in values)