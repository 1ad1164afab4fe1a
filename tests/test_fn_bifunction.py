import pytest

from gogo.fn.bifunction import BiFunction


def test_bifunction_of():
    fn = BiFunction(lambda a, b: a + len(b))
    assert fn.checked_apply(5, "hello") == 10


def test_bifunction_cast():
    fn = BiFunction(lambda a, b: a + len(b), checked=True, default=0)
    assert fn.apply(5, "hello") == 10


def test_bifunction_cast_failure_gives_default():
    def failing(a, b):
        raise ValueError("error")

    fn = BiFunction(failing, checked=True, default=-1)
    assert fn.apply(1, "x") == -1
    with pytest.raises(ValueError):
        fn.checked_apply(1, "x")


def test_bifunction_fn_curry():
    fn = BiFunction(lambda t, u: True)
    assert fn.curry()(1).apply("test") is True


def test_bifunction_fn_partial():
    fn = BiFunction(lambda t, u: True)
    assert fn.partial(1).apply("test") is True


def test_bifunction_checked_fn_curry():
    fn = BiFunction(lambda t, u: True, checked=True, default=False)
    assert fn.curry()(1).checked_apply("test") is True


def test_bifunction_checked_fn_partial():
    fn = BiFunction(lambda t, u: True, checked=True, default=False)
    assert fn.partial(1).checked_apply("test") is True


def test_partial_passes_first_argument():
    fn = BiFunction(lambda t, u: f"{t}-{u}")
    assert fn.partial("a").apply("b") == "a-b"