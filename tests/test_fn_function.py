import pytest

from gogo.fn.function import Function, compose_function, identity, y_combinator


def test_function_of():
    length = Function(len)
    assert length.checked_apply("Hello") == 5

    parity = Function(lambda n: "even" if n % 2 == 0 else "odd")
    assert parity.checked_apply(7) == "odd"


def test_function_cast():
    greet = Function(lambda t: "Hello, " + t, checked=True, default="")
    assert greet.apply("World") == "Hello, World"

    double = Function(lambda n: n * 2, checked=True, default=0)
    assert double.apply(5) == 10

    def failing(text):
        raise ValueError("error")

    broken = Function(failing, checked=True, default=0)
    assert broken.apply("5") == 0
    with pytest.raises(ValueError):
        broken.checked_apply("5")


def test_compose_function():
    to_int = Function(int, checked=True, default=0)
    stars = Function(lambda n: "*" * n, checked=True, default="")
    composed = compose_function(to_int, stars)

    assert composed.apply("a") == ""
    with pytest.raises(ValueError):
        composed.checked_apply("a")
    assert composed.checked_apply("2") == "**"


def test_identity():
    assert identity().apply(5) == 5
    assert identity().checked_apply("hello") == "hello"


def test_y_combinator():
    def fac(g):
        return lambda n: 1 if n == 0 else n * g(n - 1)

    assert y_combinator(fac).apply(5) == 120

    def fib(g):
        return lambda i: 1 if i <= 2 else g(i - 1) + g(i - 2)

    assert y_combinator(fib).apply(10) == 55