#!/usr/bin/env python3
"""
Builds the canonical hierarchical star system.

Layout, in body order:
0. star A
1. star B on a close orbit around A (the double star)
2. star C on a wide orbit around the barycenter of A and B
3. a planet on a close orbit around C

Masses are drawn from [max_mass / 5, max_mass]; orbit radii are the configured
radius times a factor from orbit_factor_range. Every body but A gets a velocity
jitter after placement. The star:planet mass ratio is roughly 10^5..10^6.

All randomness comes from one random.Random, so a seed reproduces the system
and, with the same dt, the whole trajectory.
"""
import logging
import random
from typing import Optional

from .barycenter import center_of_mass
from .config import SystemConfig
from .data_models import Body
from .orbits import add_velocity_jitter, orbit_around
from .physics import GravityIntegrator
from .system import BodySystem
from .vector_utils import Vector3

logger = logging.getLogger(__name__)


def _random_star_mass(rng: random.Random, config: SystemConfig) -> float:
    return rng.uniform(config.max_mass / 5, config.max_mass)


def _random_orbit(rng: random.Random, radius: float, config: SystemConfig) -> float:
    low, high = config.orbit_factor_range
    return rng.uniform(radius * low, radius * high)


def _random_plane_hint(rng: random.Random) -> Vector3:
    hint = Vector3.random_in_range(-1.0, 1.0, rng)
    while hint.length() == 0:
        hint = Vector3.random_in_range(-1.0, 1.0, rng)
    return hint


def create_stable_star_system(rng: Optional[random.Random] = None,
                              config: Optional[SystemConfig] = None) -> BodySystem:
    """
    Return a BodySystem with three somewhat stable stars and one planet.

    Args:
        rng: Random source for masses, orbit radii, plane hints and jitter.
            Defaults to random.Random(config.seed).
        config: Tunables; defaults to SystemConfig().

    Raises:
        InvalidOrbit: if the configuration leads to an impossible orbit.
        ValueError: if the configuration is out of range.
    """
    config = (config or SystemConfig()).validate()
    if rng is None:
        rng = random.Random(config.seed)
    g = config.g

    # double star
    star_a = Body(mass=_random_star_mass(rng, config))
    star_b = Body(mass=_random_star_mass(rng, config))
    orbit_around(star_b, star_a, _random_orbit(rng, config.inner_orbit, config),
                 _random_plane_hint(rng), g)

    # third star at the outer orbit
    center = center_of_mass([star_a, star_b])
    star_c = Body(mass=_random_star_mass(rng, config))
    orbit_around(star_c, center, _random_orbit(rng, config.outer_orbit, config),
                 _random_plane_hint(rng), g)

    # planet at the third star
    planet = Body(mass=config.planet_mass)
    orbit_around(planet, star_c, _random_orbit(rng, config.planet_orbit, config),
                 _random_plane_hint(rng), g)

    for body in (star_b, star_c, planet):
        add_velocity_jitter(body, config.velocity_jitter_fraction, rng, config.jitter_floor)

    logger.debug("center mass %s", center)
    logger.debug("3rd star %s", star_c)
    logger.info(
        "Created star system: masses %.1f, %.1f, %.1f, planet %.3g",
        star_a.mass, star_b.mass, star_c.mass, planet.mass,
    )

    integrator = GravityIntegrator(g, config.separation_floor)
    return BodySystem([star_a, star_b, star_c, planet], integrator)
