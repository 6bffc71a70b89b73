import itertools

from iterkit.flatten import flatten_ok
from iterkit.results import Err, Ok


def test_flattens_ok_and_keeps_errors_in_place():
    data = [Ok([1, 2]), Err("bad"), Ok([]), Ok((3,))]
    assert list(flatten_ok(data)) == [Ok(1), Ok(2), Err("bad"), Ok(3)]


def test_empty_input_yields_nothing():
    assert list(flatten_ok([])) == []


def test_only_empty_ok_values_yield_nothing():
    assert list(flatten_ok([Ok([]), Ok(()), Ok("")])) == []


def test_only_errors_pass_through_unchanged():
    data = [Err(1), Err(2)]
    assert list(flatten_ok(data)) == data


def test_count_matches_total_inner_length():
    inner = [[1, 2, 3], [], [4], [5, 6]]
    data = [Ok(values) for values in inner]
    result = list(flatten_ok(data))
    assert len(result) == sum(len(values) for values in inner)
    assert [item.value for item in result] == [v for values in inner for v in values]


def test_is_lazy_over_infinite_source():
    source = (Ok([n, n]) for n in itertools.count())
    first = list(itertools.islice(flatten_ok(source), 4))
    assert first == [Ok(0), Ok(0), Ok(1), Ok(1)]


def test_strings_inside_ok_are_split_into_characters():
    assert list(flatten_ok([Ok("ab")])) == [Ok("a"), Ok("b")]