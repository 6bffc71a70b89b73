from iterkit.diff import FirstMismatch, Longer, Shorter, diff_with


def _as_int(values):
    return (int(v) for v in values)


def test_diff_mismatch():
    a = [1, 2, 3, 4]
    b = _as_int([1.0, 5.0, 3.0, 4.0])
    diff = diff_with(a, b, lambda x, y: x == y)
    assert isinstance(diff, FirstMismatch)
    assert diff.index == 1
    assert list(diff.second_remaining) == [5, 3, 4]
    assert list(diff.first_remaining) == [2, 3, 4]


def test_diff_longer():
    a = [1, 2, 3, 4]
    b = _as_int([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    diff = diff_with(a, b, lambda x, y: x == y)
    assert isinstance(diff, Longer)
    assert diff.index == 4
    assert list(diff.second_remaining) == [5, 6]


def test_diff_shorter():
    a = [1, 2, 3, 4]
    b = _as_int([1.0, 2.0])
    diff = diff_with(a, b, lambda x, y: x == y)
    assert isinstance(diff, Shorter)
    assert diff.index == 2
    assert list(diff.first_remaining) == [3, 4]


def test_diff_equal_is_none():
    assert diff_with([1, 2, 3], iter([1, 2, 3])) is None
    assert diff_with([], []) is None


def test_diff_default_equality():
    diff = diff_with("abc", "abd")
    assert isinstance(diff, FirstMismatch)
    assert diff.index == 2
    assert list(diff.first_remaining) == ["c"]
    assert list(diff.second_remaining) == ["d"]