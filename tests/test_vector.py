import pytest

from lavajump.domain.vector import ZERO, Vector


def test_plus_adds_componentwise():
    assert Vector(1, 2).plus(Vector(0.5, -3)) == Vector(1.5, -1)


def test_times_scalar_and_vector():
    v = Vector(2, -4)
    assert v.times(0.5) == Vector(1, -2)
    assert v.times(Vector(3, 0.25)) == Vector(6, -1)
    assert v.times(-1) == Vector(-2, 4)


def test_vector_is_immutable():
    v = Vector(1, 1)
    with pytest.raises(AttributeError):
        v.x = 3  # type: ignore[misc]
    v.plus(Vector(1, 1))
    assert v == Vector(1, 1)


def test_center_of_rectangle():
    pos, size = Vector(2, 3), Vector(0.8, 1.5)
    center = pos.plus(size.times(0.5))
    assert center.x == pytest.approx(2.4)
    assert center.y == pytest.approx(3.75)
    assert ZERO.plus(pos) == pos
