import pytest

from practicum.quadratic import solve_quadratic


def test_discriminant_positive():
    assert solve_quadratic(1, 3, -4) == "1.000000_-4.000000"


def test_discriminant_zero():
    assert solve_quadratic(1, -4, 4) == "2.000000"


def test_discriminant_negative():
    assert solve_quadratic(1, -5, 9) == "No solution"


@pytest.mark.parametrize("a, b, c", [(2, -7, 3), (1, 0, -9), (-1, 2, 8)])
def test_roots_satisfy_equation(a, b, c):
    roots = [float(part) for part in solve_quadratic(a, b, c).split("_")]
    assert len(roots) == 2
    for x in roots:
        assert a * x * x + b * x + c == pytest.approx(0, abs=1e-4)


def test_two_roots_ordered_by_sign_of_a():
    x1, x2 = (float(p) for p in solve_quadratic(1, 3, -4).split("_"))
    assert x1 > x2