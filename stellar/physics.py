#!/usr/bin/env python3
"""
Core Physics Engine for the star system simulator

Responsibilities
- Compute pairwise gravitational accelerations with a separation floor.
- Advance body states using a fourth-order Runge–Kutta (RK4) time integrator.
- Provide conserved-quantity diagnostics (momentum, energy, angular momentum).

Units and conventions
- Simulation units throughout; G comes from constants and must match the value
  used to initialize orbits.
- The RK4 state is the list of (position, velocity) pairs over all bodies, in
  body order; its derivative is the list of (velocity, acceleration) pairs.

Numerical notes
- Separation floor: when two bodies come closer than eps the distance used in
  the force law is clamped to eps. Acceleration is then bounded by
  G * m / eps^2 instead of diverging. This is not a collision model.
- Complexity: acceleration computation is O(N^2) per evaluation, which is fine
  for the handful of bodies in a star system.
- Energy: RK4 is not symplectic; total energy will slowly drift over long runs.
  Momentum is conserved to rounding because every pair contributes equal and
  opposite terms.
- dt is assumed to be bounded by the caller (the render-loop driver clips frame
  intervals); the integrator does not re-clip it.

Threading
- This module is pure compute. step() mutates the bodies it is given and
  nothing else; it performs no I/O and never blocks.
"""

from typing import List, Sequence, Tuple

from .constants import G, SEPARATION_FLOOR
from .data_models import Body
from .vector_utils import Vector3

State = List[Tuple[Vector3, Vector3]]


class GravityIntegrator:
    """
    Fixed-step RK4 integrator for mutual Newtonian gravity.

    The acceleration of body i is:
    a_i = Σ_j G * m_j * r_ij / max(|r_ij|, eps)^3

    where r_ij = p_j - p_i and eps is the separation floor.
    """

    def __init__(self, g: float = G, separation_floor: float = SEPARATION_FLOOR):
        """
        Initialize the integrator.

        Args:
            g: Gravitational constant
            separation_floor: Minimum distance used in the force law (> 0)
        """
        self.g = float(g)
        self.separation_floor = self._checked_floor(separation_floor)

    @staticmethod
    def _checked_floor(value: float) -> float:
        value = float(value)
        if not value > 0.0:
            raise ValueError(f"separation floor must be positive, got {value!r}")
        return value

    def set_separation_floor(self, separation_floor: float) -> None:
        """
        Update the separation floor.

        Args:
            separation_floor: New floor (must be > 0)
        """
        self.separation_floor = self._checked_floor(separation_floor)

    def compute_accelerations(self, masses: Sequence[float],
                              positions: Sequence[Vector3]) -> List[Vector3]:
        """
        Compute gravitational accelerations for all bodies.

        Each unordered pair is visited once and its contribution applied with
        opposite signs to both bodies, so the momentum change sums to zero.

        Args:
            masses: Body masses, same order as positions.
            positions: Positions to evaluate at.

        Returns:
            List of accelerations for each body, same order as inputs.
        """
        n = len(positions)
        accelerations = [Vector3() for _ in range(n)]
        floor = self.separation_floor

        for i in range(n):
            pi = positions[i]
            for j in range(i + 1, n):
                # Vector from body i to body j
                d = positions[j].sub(pi)

                r = max(d.length(), floor)
                coupling = self.g / (r * r * r)

                accelerations[i].accumulate(d, coupling * masses[j])
                accelerations[j].accumulate(d, -coupling * masses[i])

        return accelerations

    def derivative(self, masses: Sequence[float], state: State) -> State:
        """Time derivative of a state: (velocity, acceleration) per body."""
        accelerations = self.compute_accelerations(masses, [p for p, _ in state])
        return [(v, a) for (_, v), a in zip(state, accelerations)]

    @staticmethod
    def _offset(state: State, slope: State, h: float) -> State:
        """state + h * slope"""
        return [(p.add(dp.scale(h)), v.add(dv.scale(h)))
                for (p, v), (dp, dv) in zip(state, slope)]

    def step(self, bodies: Sequence[Body], dt: float) -> None:
        """
        Perform one Runge-Kutta 4th order integration step.

        Workflow:
        1) k1 at t
        2) k2 at t + dt/2 using k1
        3) k3 at t + dt/2 using k2
        4) k4 at t + dt using k3
        Combine state + dt/6 * (k1 + 2*k2 + 2*k3 + k4).

        Args:
            bodies: Bodies to integrate (modified in place, order preserved).
            dt: Step size, already bounded by the caller.
        """
        if not bodies or dt == 0:
            return

        masses = [b.mass for b in bodies]
        state = [(b.position, b.velocity) for b in bodies]

        k1 = self.derivative(masses, state)
        k2 = self.derivative(masses, self._offset(state, k1, dt * 0.5))
        k3 = self.derivative(masses, self._offset(state, k2, dt * 0.5))
        k4 = self.derivative(masses, self._offset(state, k3, dt))

        w = dt / 6.0
        for i, b in enumerate(bodies):
            (p, v) = state[i]
            dp = k1[i][0].add(k2[i][0].scale(2.0)).add(k3[i][0].scale(2.0)).add(k4[i][0])
            dv = k1[i][1].add(k2[i][1].scale(2.0)).add(k3[i][1].scale(2.0)).add(k4[i][1])
            b.position = p.add(dp.scale(w))
            b.velocity = v.add(dv.scale(w))


def total_momentum(bodies: Sequence[Body]) -> Vector3:
    """Σ m_i * v_i"""
    total = Vector3()
    for b in bodies:
        total.accumulate(b.velocity, b.mass)
    return total


def total_angular_momentum(bodies: Sequence[Body]) -> Vector3:
    """Σ m_i * (p_i × v_i) about the origin."""
    total = Vector3()
    for b in bodies:
        total.accumulate(b.position.cross(b.velocity), b.mass)
    return total


def total_energy(bodies: Sequence[Body], g: float = G,
                 separation_floor: float = SEPARATION_FLOOR) -> float:
    """
    Kinetic plus pairwise potential energy.

    Pair distances are clamped to the separation floor; outside the floor this
    is the quantity the integrator approximately conserves.
    """
    kinetic = sum(b.kinetic_energy() for b in bodies)
    potential = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            r = max(bodies[i].position.distance_to(bodies[j].position), separation_floor)
            potential -= g * bodies[i].mass * bodies[j].mass / r
    return kinetic + potential


def is_finite_state(bodies: Sequence[Body]) -> bool:
    """True when every position and velocity component is finite."""
    return all(b.position.is_finite() and b.velocity.is_finite() for b in bodies)
