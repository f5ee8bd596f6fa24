#!/usr/bin/env python3
"""
Data models for the star system simulator.

This module defines the Body dataclass owned by the physics core and the
MassCenter value produced by barycenter reductions.

Units and usage
- Masses, positions and velocities are in simulation units (see constants.G).
- A Body has no identity beyond its index in a BodySystem; the viewer maps that
  index to a marker and a trail buffer.
- Body.mass is fixed after construction. position and velocity are written once
  by the orbit initializer and then only by the integrator.
- MassCenter is a separate, read-only type so a barycenter can never be fed to
  the integrator or drawn as if it were a star.
"""
import math
from dataclasses import dataclass, field

from .errors import InvalidBody
from .vector_utils import Vector3


@dataclass
class Body:
    """
    A point mass taking part in the simulation.

    Fields:
    - mass: Mass, strictly positive
    - position: Current position
    - velocity: Current velocity
    """
    mass: float
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        if not math.isfinite(self.mass) or self.mass <= 0.0:
            raise InvalidBody(f"body mass must be positive and finite, got {self.mass!r}")

    def momentum(self) -> Vector3:
        return self.velocity.scale(self.mass)

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * self.velocity.length_squared()


@dataclass(frozen=True)
class MassCenter:
    """Virtual aggregate of several bodies: total mass, weighted position and velocity."""
    mass: float
    position: Vector3
    velocity: Vector3
