import pytest

from gogo.lang.equality import equal


def test_none_handling():
    assert equal(None, None) is True
    assert equal(1, None) is False
    assert equal(None, "") is False


def test_type_mismatch_is_unequal():
    assert equal(1, "1") is False
    assert equal(1, 1.0) is False
    assert equal(1, True) is False


def test_scalars():
    assert equal(1, 1) is True
    assert equal("1", "1") is True
    assert equal(2, 3) is False


def test_functions_compare_by_identity():
    def fn1():
        pass

    def fn2():
        pass

    assert equal(fn1, fn2) is False
    assert equal(fn1, fn1) is True


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ([1, 2, 3], [1, 2, 3], True),
        ([1, 2, 3], [1, 2], False),
        ([1, [2, 3]], [1, [2, 3]], True),
        ([1, [2, 3]], [1, [2, 4]], False),
        ({"a": [1]}, {"a": [1]}, True),
        ({"a": 1}, {"b": 1}, False),
        ({"a": 1}, {"a": 1, "b": 2}, False),
        ((1, None), (1, None), True),
        ((1, None), (1, 0), False),
        ([1], (1,), False),
    ],
)
def test_containers(left, right, expected):
    assert equal(left, right) is expected


def test_self_referencing_lists():
    a = [1]
    a.append(a)
    b = [1]
    b.append(b)
    assert equal(a, b) is True


def test_same_exception_instance():
    err = ValueError("boom")
    assert equal(err, err) is True
    assert equal(err, ValueError("boom")) is False