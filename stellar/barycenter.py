#!/usr/bin/env python3
"""
Barycenter reductions over bodies.
"""
from typing import Iterable

from .data_models import Body, MassCenter
from .errors import EmptyInput
from .vector_utils import Vector3


def center_of_mass(bodies: Iterable[Body]) -> MassCenter:
    """
    Reduce bodies to one virtual aggregate.

    mass = sum(m_i), position = sum(m_i * p_i) / mass, velocity = sum(m_i * v_i) / mass

    Args:
        bodies: Non-empty iterable of bodies (anything with mass/position/velocity).

    Returns:
        A MassCenter; it is never part of a BodySystem.

    Raises:
        EmptyInput: if bodies is empty or their total mass is not positive.
    """
    bodies = list(bodies)
    if not bodies:
        raise EmptyInput("center of mass of zero bodies")

    mass = 0.0
    position = Vector3()
    velocity = Vector3()
    for b in bodies:
        mass += b.mass
        position.accumulate(b.position, b.mass)
        velocity.accumulate(b.velocity, b.mass)

    if mass <= 0.0:
        raise EmptyInput(f"center of mass needs a positive total mass, got {mass!r}")

    return MassCenter(mass=mass, position=position / mass, velocity=velocity / mass)


def center_of_positions(bodies: Iterable[Body]) -> Vector3:
    """Unweighted mean position of bodies."""
    bodies = list(bodies)
    if not bodies:
        raise EmptyInput("center of positions of zero bodies")
    center = Vector3()
    for b in bodies:
        center.accumulate(b.position)
    return center / len(bodies)
