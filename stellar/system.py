#!/usr/bin/env python3
"""
BodySystem: the ordered, fixed-length set of bodies for one run.

Index i is stable for the whole run: it is the construction order that set up
the orbital hierarchy and the key a viewer uses for marker i and trail i. The
system never grows, shrinks or reorders; after construction every body
interacts with every other one symmetrically.

Observers should poll positions() after step() has returned and must not
mutate the bodies themselves.
"""
from typing import Iterable, Iterator, Optional, Tuple

from .barycenter import center_of_mass, center_of_positions
from .data_models import Body, MassCenter
from .physics import GravityIntegrator, is_finite_state, total_energy, total_momentum
from .vector_utils import Vector3


class BodySystem:
    def __init__(self, bodies: Iterable[Body], integrator: Optional[GravityIntegrator] = None):
        self._bodies: Tuple[Body, ...] = tuple(bodies)
        self.integrator = integrator or GravityIntegrator()
        self.elapsed = 0.0
        self.steps = 0

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def __getitem__(self, index: int) -> Body:
        return self._bodies[index]

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return self._bodies

    def step(self, dt: float) -> None:
        """Advance every body by one RK4 step of size dt, in place."""
        self.integrator.step(self._bodies, dt)
        self.elapsed += dt
        self.steps += 1

    def positions(self) -> Tuple[Tuple[float, float, float], ...]:
        """Snapshot of positions as plain tuples, safe to hand to a renderer."""
        return tuple(b.position.as_tuple() for b in self._bodies)

    def center_of_mass(self) -> MassCenter:
        return center_of_mass(self._bodies)

    def center_of_positions(self) -> Vector3:
        return center_of_positions(self._bodies)

    def total_momentum(self) -> Vector3:
        return total_momentum(self._bodies)

    def total_energy(self) -> float:
        return total_energy(self._bodies, self.integrator.g, self.integrator.separation_floor)

    def is_finite(self) -> bool:
        return is_finite_state(self._bodies)

    def __repr__(self) -> str:
        return f"BodySystem(n={len(self)}, elapsed={self.elapsed:.3f}, steps={self.steps})"
