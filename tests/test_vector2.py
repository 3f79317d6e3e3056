import pytest

from ev3finder.vector2 import Vector2


def test_default_constructor():
    v = Vector2()
    assert v.x == 0.0
    assert v.y == 0.0


def test_constructor():
    v = Vector2(1.0, 2.0)
    assert v.x == 1.0
    assert v.y == 2.0


def test_assign():
    v1 = Vector2(1.0, 2.0)
    v2 = v1
    assert v2.x == 1.0
    assert v2.y == 2.0


def test_magnitude():
    assert Vector2(1.0, 2.0).magnitude() == pytest.approx(2.23606797749979)


def test_normalize():
    n = Vector2(1.0, 2.0).normalize()
    assert n.x == pytest.approx(0.4472135954999579)
    assert n.y == pytest.approx(0.8944271909999159)


def test_normalize_has_unit_length():
    assert Vector2(-3.0, 7.5).normalize().magnitude() == pytest.approx(1.0)


def test_dot():
    assert Vector2(1.0, 2.0).dot(Vector2(3.0, 4.0)) == pytest.approx(11.0)


def test_distance_to():
    assert Vector2(0.0, 0.0).distance_to(Vector2(3.0, 4.0)) == pytest.approx(5.0)


def test_addition():
    v3 = Vector2(1.0, 2.0) + Vector2(3.0, 4.0)
    assert (v3.x, v3.y) == pytest.approx((4.0, 6.0))


def test_subtraction():
    v3 = Vector2(1.0, 2.0) - Vector2(3.0, 4.0)
    assert (v3.x, v3.y) == pytest.approx((-2.0, -2.0))


def test_multiplication():
    v2 = Vector2(1.0, 2.0) * 2.0
    assert (v2.x, v2.y) == pytest.approx((2.0, 4.0))


def test_division():
    v2 = Vector2(1.0, 2.0) / 2.0
    assert (v2.x, v2.y) == pytest.approx((0.5, 1.0))


def test_addition_assign():
    v1 = Vector2(1.0, 2.0)
    original = v1
    v1 += Vector2(3.0, 4.0)
    assert (v1.x, v1.y) == pytest.approx((4.0, 6.0))
    assert original is v1


def test_subtraction_assign():
    v1 = Vector2(1.0, 2.0)
    v1 -= Vector2(3.0, 4.0)
    assert (v1.x, v1.y) == pytest.approx((-2.0, -2.0))


def test_multiplication_assign():
    v = Vector2(1.0, 2.0)
    v *= 2.0
    assert (v.x, v.y) == pytest.approx((2.0, 4.0))


def test_division_assign():
    v = Vector2(1.0, 2.0)
    v /= 2.0
    assert (v.x, v.y) == pytest.approx((0.5, 1.0))


def test_equality():
    assert (Vector2(1.0, 2.0) == Vector2(1.0, 2.0)) is True
    assert (Vector2(1.0, 2.0) == Vector2(1.0, 3.0)) is False
    assert (Vector2(0.5, 1.0) * 2.0 == Vector2(1.0, 2.0)) is True


def test_inequality():
    assert Vector2(1.0, 2.0) != Vector2(3.0, 4.0)


def test_less_than():
    assert Vector2(1.0, 2.0) < Vector2(3.0, 4.0)


def test_greater_than():
    assert Vector2(3.0, 4.0) > Vector2(1.0, 2.0)


def test_less_than_or_equal():
    assert Vector2(1.0, 2.0) <= Vector2(3.0, 4.0)


def test_greater_than_or_equal():
    assert Vector2(3.0, 4.0) >= Vector2(1.0, 2.0)


def test_comparisons_are_component_wise():
    a = Vector2(1.0, 5.0)
    b = Vector2(3.0, 4.0)
    assert not a < b
    assert not a > b
    assert not a <= b
    assert not a >= b


def test_stream_output():
    assert str(Vector2(1.0, 2.0)) == "Vector2(1, 2)"


def test_lerp():
    v3 = Vector2.lerp(Vector2(1.0, 2.0), Vector2(3.0, 4.0), 0.5)
    assert (v3.x, v3.y) == pytest.approx((2.0, 3.0))


def test_lerp_endpoints():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 4.0)
    assert Vector2.lerp(a, b, 0.0) == a
    assert Vector2.lerp(a, b, 1.0) == b


def test_iteration_unpacks_coordinates():
    x, y = Vector2(7.0, -1.5)
    assert (x, y) == (7.0, -1.5)