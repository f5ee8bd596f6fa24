import math

import pytest

from stellar import Body, EmptyInput, MassCenter, Vector3, center_of_mass, center_of_positions


def test_center_of_mass_weighted_position() -> None:
    bodies = [
        Body(mass=100.0, position=Vector3(0.0, 0.0, 0.0)),
        Body(mass=300.0, position=Vector3(4.0, 0.0, 0.0)),
    ]
    center = center_of_mass(bodies)

    assert isinstance(center, MassCenter)
    assert center.mass == 400.0
    assert math.isclose(center.position.x, 3.0)
    assert center.position.y == 0.0 and center.position.z == 0.0


def test_center_of_mass_weighted_velocity() -> None:
    bodies = [
        Body(mass=1.0, velocity=Vector3(0.0, 4.0, 0.0)),
        Body(mass=3.0, velocity=Vector3(0.0, 0.0, 0.0)),
    ]
    center = center_of_mass(bodies)
    assert math.isclose(center.velocity.y, 1.0)


def test_center_of_mass_does_not_mutate_inputs() -> None:
    a = Body(mass=2.0, position=Vector3(1.0, 1.0, 1.0), velocity=Vector3(1.0, 0.0, 0.0))
    b = Body(mass=2.0, position=Vector3(3.0, 1.0, 1.0), velocity=Vector3(-1.0, 0.0, 0.0))
    center_of_mass([a, b])
    assert a.position == Vector3(1.0, 1.0, 1.0)
    assert b.velocity == Vector3(-1.0, 0.0, 0.0)


def test_mass_center_is_read_only() -> None:
    center = center_of_mass([Body(mass=1.0)])
    with pytest.raises(AttributeError):
        center.mass = 5.0


def test_center_of_mass_rejects_empty_input() -> None:
    with pytest.raises(EmptyInput):
        center_of_mass([])


def test_center_of_positions_is_unweighted() -> None:
    bodies = [
        Body(mass=1.0, position=Vector3(0.0, 0.0, 0.0)),
        Body(mass=1000.0, position=Vector3(4.0, 2.0, -6.0)),
    ]
    center = center_of_positions(bodies)
    assert center == Vector3(2.0, 1.0, -3.0)

    with pytest.raises(EmptyInput):
        center_of_positions([])


def test_center_of_mass_rejects_weightless_aggregate() -> None:
    class Weightless:
        def __init__(self, mass: float) -> None:
            self.mass = mass
            self.position = Vector3(1.0, 2.0, 3.0)
            self.velocity = Vector3()

    with pytest.raises(EmptyInput):
        center_of_mass([Weightless(0.0), Weightless(0.0)])
    with pytest.raises(EmptyInput):
        center_of_mass([Weightless(5.0), Weightless(-5.0)])


def test_reductions_accept_generators() -> None:
    bodies = [
        Body(mass=1.0, position=Vector3(0.0, 0.0, 0.0)),
        Body(mass=3.0, position=Vector3(4.0, 0.0, 0.0)),
    ]
    assert math.isclose(center_of_mass(b for b in bodies).position.x, 3.0)
    assert center_of_positions(b for b in bodies) == Vector3(2.0, 0.0, 0.0)
    with pytest.raises(EmptyInput):
        center_of_mass(b for b in [])
