import pytest

from iterkit.adaptors import (
    PutBack,
    batching,
    cartesian_product,
    interleave,
    interleave_shortest,
    positions,
    put_back,
    step,
    take_while_ref,
    tuple_combinations,
    update,
    while_some,
)


def test_interleave_shortest_second_longer():
    assert list(interleave_shortest([0, 2, 4], [1, 3, 5, 7])) == [0, 1, 2, 3, 4, 5]


def test_interleave_shortest_first_longer():
    assert list(interleave_shortest([0, 2, 4, 6, 8], [1, 3, 5])) == [0, 1, 2, 3, 4, 5, 6]


def test_interleave_shortest_with_infinite():
    from itertools import repeat

    assert list(interleave_shortest(repeat(0), [1, 3, 5])) == [0, 1, 0, 3, 0, 5, 0]
    assert list(interleave_shortest([0, 2, 4], repeat(1))) == [0, 1, 2, 1, 4, 1]


def test_interleave_runs_both_out():
    assert list(interleave([0, 2, 4], [1, 3, 5, 7, 9])) == [0, 1, 2, 3, 4, 5, 7, 9]
    assert list(interleave([0, 2, 4, 6], [1])) == [0, 1, 2, 4, 6]
    assert list(interleave([], [])) == []


def test_put_back_with_value_comes_first():
    pb = put_back([2, 3]).with_value(1)
    assert list(pb) == [1, 2, 3]


def test_put_back_overwrites_slot():
    pb = PutBack([0, 1, 1, 1, 2, 1, 3, 3])
    assert next(pb) == 0
    assert next(pb) == 1
    pb.put_back(9)
    pb.put_back(1)
    assert list(pb) == [1, 1, 1, 2, 1, 3, 3]


def test_put_back_into_parts():
    pb = put_back([5, 6]).with_value(4)
    top, rest = pb.into_parts()
    assert top == 4
    assert list(rest) == [5, 6]
    top, rest = put_back([7]).into_parts()
    assert top is None
    assert list(rest) == [7]


def test_put_back_matches_plain_iteration():
    data = [3, 1, 4, 1, 5]
    assert list(put_back(data)) == data
    assert sum(1 for _ in put_back(data)) == len(data)


def test_cartesian_product_order():
    assert list(cartesian_product(range(3), range(2))) == [
        (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1),
    ]


def test_cartesian_product_empty_side():
    assert list(cartesian_product(range(3), [])) == []
    assert list(cartesian_product([], range(3))) == []


def test_batching_pairs():
    def pairs(it):
        first = next(it, None)
        if first is None:
            return None
        second = next(it, None)
        return (first, second)

    assert list(batching([1, 2, 3, 4, 5], pairs)) == [(1, 2), (3, 4), (5, None)]


def test_step():
    assert list(step(range(0, 10), 4)) == [0, 4, 8]
    assert list(step(range(3, 10), 4)) == [3, 7]
    assert list(step([], 2)) == []


def test_step_zero_raises():
    with pytest.raises(ValueError):
        step([1, 2], 0)


def test_take_while_ref_keeps_failing_element():
    pb = put_back([1, 2, 3, 4, 1])
    assert list(take_while_ref(pb, lambda x: x < 3)) == [1, 2]
    assert list(pb) == [3, 4, 1]


def test_take_while_ref_requires_put_back():
    with pytest.raises(TypeError):
        take_while_ref(iter([1, 2]), lambda x: True)


def test_while_some():
    values = (x if x % 5 != 0 else None for x in range(1, 10))
    assert list(while_some(values)) == [1, 2, 3, 4]


def test_tuple_combinations():
    assert list(tuple_combinations(range(0), 2)) == []
    assert list(tuple_combinations(range(1), 2)) == []
    assert list(tuple_combinations(range(2), 2)) == [(0, 1)]
    assert list(tuple_combinations(range(3), 1)) == [(0,), (1,), (2,)]


def test_tuple_combinations_rejects_zero():
    with pytest.raises(ValueError):
        tuple_combinations([1, 2], 0)


def test_positions():
    assert list(positions([1, 2, 3, 4, 6], lambda x: x % 2 == 0)) == [1, 3, 4]
    assert list(positions([], bool)) == []


def test_update_mutates_each_element():
    data = [[1], [2], []]
    result = list(update(data, lambda item: item.append(0)))
    assert result == [[1, 0], [2, 0], [0]]
    assert result[0] is data[0]