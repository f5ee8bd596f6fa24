import math
import random

from stellar.vector_utils import Vector3, clamp


def test_pure_operations_leave_operands_untouched() -> None:
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)

    assert a + b == Vector3(-3.0, 2.5, 5.0)
    assert a - b == Vector3(5.0, 1.5, 1.0)
    assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
    assert 2.0 * a == a.scale(2.0)
    assert -a == Vector3(-1.0, -2.0, -3.0)
    assert a == Vector3(1.0, 2.0, 3.0)
    assert b == Vector3(-4.0, 0.5, 2.0)


def test_accumulating_operations_mutate_receiver() -> None:
    total = Vector3()
    returned = total.accumulate(Vector3(1.0, 1.0, 0.0), 3.0)
    assert returned is total
    total.accumulate(Vector3(0.0, 2.0, 1.0))
    assert total == Vector3(3.0, 5.0, 1.0)

    total.scale_in_place(0.5)
    assert total == Vector3(1.5, 2.5, 0.5)

    other = Vector3(9.0, 8.0, 7.0)
    total.set(other)
    other.x = 0.0
    assert total == Vector3(9.0, 8.0, 7.0)


def test_cross_dot_and_length() -> None:
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
    assert y.cross(x) == Vector3(0.0, 0.0, -1.0)
    assert x.dot(y) == 0.0
    assert Vector3(3.0, 4.0, 12.0).length() == 13.0
    assert Vector3(1.0, 1.0, 1.0).distance_to(Vector3(1.0, 1.0, 3.0)) == 2.0


def test_normalized() -> None:
    n = Vector3(0.0, 3.0, 4.0).normalized()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.y, 0.6) and math.isclose(n.z, 0.8)
    assert Vector3().normalized() == Vector3()


def test_copy_is_independent() -> None:
    a = Vector3(1.0, 2.0, 3.0)
    c = a.copy()
    c.accumulate(Vector3(1.0, 1.0, 1.0))
    assert a == Vector3(1.0, 2.0, 3.0)


def test_random_in_range_bounds_and_seeding() -> None:
    rng = random.Random(7)
    for _ in range(200):
        v = Vector3.random_in_range(-1.0, 1.0, rng)
        for component in v:
            assert -1.0 <= component <= 1.0

    a = Vector3.random_in_range(-5.0, 5.0, random.Random(99))
    b = Vector3.random_in_range(-5.0, 5.0, random.Random(99))
    assert a == b


def test_is_finite_and_clamp() -> None:
    assert Vector3(1.0, 2.0, 3.0).is_finite()
    assert not Vector3(float("nan"), 0.0, 0.0).is_finite()
    assert not Vector3(0.0, float("inf"), 0.0).is_finite()
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
