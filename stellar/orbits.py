#!/usr/bin/env python3
"""
Orbit initialization helpers.

orbit_around places a body on a circular two-body orbit around a parent (a real
Body or a MassCenter). Once the rest of the system is switched on, the other
bodies perturb that orbit into a bound, generally non-circular trajectory.
add_velocity_jitter then nudges the result so the system does not settle into
an exactly periodic motion.
"""
import math
import random
from typing import Optional, Union

from .constants import (
    DEGENERATE_AXIS_TOLERANCE,
    FALLBACK_AXIS,
    G,
    JITTER_FLOOR,
    REFERENCE_AXIS,
)
from .data_models import Body, MassCenter
from .errors import InvalidOrbit
from .vector_utils import Vector3

Parent = Union[Body, MassCenter]


def circular_orbit_velocity(central_mass: float, orbital_radius: float, g: float = G) -> float:
    """
    Calculate the velocity needed for a circular orbit.

    For a circular orbit, gravity provides exactly the centripetal force:
    g * M / r = v^2 / r, therefore v = sqrt(g * M / r).

    Args:
        central_mass: Mass that the orbit is computed against
        orbital_radius: Orbital radius
        g: Gravitational constant

    Returns:
        Orbital speed for a circular orbit (0.0 for a non-positive radius)
    """
    if orbital_radius <= 0:
        return 0.0

    return math.sqrt(g * central_mass / orbital_radius)


def _radial_direction(normal: Vector3) -> Vector3:
    """Unit vector lying in the plane whose unit normal is `normal`."""
    radial = normal.cross(Vector3.from_tuple(REFERENCE_AXIS))
    if radial.length() < DEGENERATE_AXIS_TOLERANCE:
        # normal is parallel to the reference axis
        radial = normal.cross(Vector3.from_tuple(FALLBACK_AXIS))
    return radial.normalized()


def orbit_around(body: Body, parent: Parent, distance: float,
                 plane_normal_hint: Vector3, g: float = G) -> None:
    """
    Place body on a circular orbit around parent.

    The offset from the parent has length `distance` and lies in the plane whose
    normal is `plane_normal_hint`. The velocity relative to the parent is
    perpendicular to both the offset and the normal, with the two-body circular
    speed sqrt(g * (parent.mass + body.mass) / distance).

    Args:
        body: Body to place (position and velocity are overwritten).
        parent: Real body or barycenter to orbit.
        distance: Target separation, > 0.
        plane_normal_hint: Any non-zero vector; it need not be unit length.
        g: Gravitational constant, shared with the integrator.

    Raises:
        InvalidOrbit: for a non-positive distance, a non-positive combined mass
            or a zero-length or non-finite plane hint.
    """
    if not math.isfinite(distance) or distance <= 0:
        raise InvalidOrbit(f"orbit distance must be positive, got {distance!r}")
    total_mass = parent.mass + body.mass
    if total_mass <= 0:
        raise InvalidOrbit(f"combined mass must be positive, got {total_mass!r}")
    if not plane_normal_hint.is_finite() or plane_normal_hint.length() == 0:
        raise InvalidOrbit(f"orbit plane hint must be finite and non-zero, got {plane_normal_hint!r}")

    normal = plane_normal_hint.normalized()
    offset = _radial_direction(normal).scale(distance)
    tangent = normal.cross(offset).normalized()
    speed = circular_orbit_velocity(total_mass, distance, g)

    body.position = parent.position.add(offset)
    body.velocity = parent.velocity.add(tangent.scale(speed))


def add_velocity_jitter(body: Body, fraction: float,
                        rng: Optional[random.Random] = None,
                        floor: float = JITTER_FLOOR) -> None:
    """
    Perturb body.velocity by a random vector of magnitude fraction * |velocity|.

    Bodies that are (nearly) at rest get `floor` instead, so the jitter never
    vanishes. A zero fraction leaves the velocity untouched.
    """
    if fraction < 0:
        raise ValueError(f"jitter fraction must be >= 0, got {fraction!r}")
    if fraction == 0:
        return

    direction = Vector3()
    while direction.length() == 0:
        direction = Vector3.random_in_range(-1.0, 1.0, rng).normalized()

    magnitude = max(fraction * body.velocity.length(), floor)
    body.velocity = body.velocity.add(direction.scale(magnitude))
