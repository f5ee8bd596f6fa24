import logging
import math
import random

import pytest

from stellar import SystemConfig, Vector3, center_of_mass, create_stable_star_system
from stellar.constants import INNER_ORBIT, MAX_MASS, OUTER_ORBIT, PLANET_MASS, PLANET_ORBIT


def test_layout_follows_construction_order(rng: random.Random) -> None:
    system = create_stable_star_system(rng)
    star_a, star_b, star_c, planet = system

    assert len(system) == 4
    for star in (star_a, star_b, star_c):
        assert MAX_MASS / 5 <= star.mass <= MAX_MASS
    assert planet.mass == PLANET_MASS

    # jitter only touches velocities, so construction distances are intact
    inner = star_b.position.distance_to(star_a.position)
    assert INNER_ORBIT * 0.8 - 1e-9 <= inner <= INNER_ORBIT * 1.2 + 1e-9

    barycenter = center_of_mass([star_a, star_b])
    outer = star_c.position.distance_to(barycenter.position)
    assert OUTER_ORBIT * 0.8 - 1e-9 <= outer <= OUTER_ORBIT * 1.2 + 1e-9

    planet_orbit = planet.position.distance_to(star_c.position)
    assert PLANET_ORBIT * 0.8 - 1e-9 <= planet_orbit <= PLANET_ORBIT * 1.2 + 1e-9


def test_first_star_gets_no_jitter(rng: random.Random) -> None:
    system = create_stable_star_system(rng)
    assert system[0].velocity == Vector3()
    assert system[0].position == Vector3()
    for body in list(system)[1:]:
        assert body.velocity.length() > 0


def test_seeded_systems_are_reproducible() -> None:
    first = create_stable_star_system(random.Random(42))
    second = create_stable_star_system(random.Random(42))
    for _ in range(50):
        first.step(0.05)
        second.step(0.05)
    assert first.positions() == second.positions()
    assert [b.velocity for b in first] == [b.velocity for b in second]


def test_config_seed_is_used_when_rng_omitted() -> None:
    a = create_stable_star_system(config=SystemConfig(seed=9))
    b = create_stable_star_system(config=SystemConfig(seed=9))
    c = create_stable_star_system(config=SystemConfig(seed=10))
    assert a.positions() == b.positions()
    assert a.positions() != c.positions()


def test_config_overrides_reach_orbits_and_integrator() -> None:
    config = SystemConfig(g=4.0, separation_floor=0.5, velocity_jitter_fraction=0.0,
                          orbit_factor_range=(1.0, 1.0))
    system = create_stable_star_system(random.Random(1), config)
    star_a, star_b = system[0], system[1]

    assert system.integrator.g == 4.0
    assert system.integrator.separation_floor == 0.5
    assert math.isclose(star_b.position.distance_to(star_a.position), INNER_ORBIT)
    expected = math.sqrt(4.0 * (star_a.mass + star_b.mass) / INNER_ORBIT)
    assert math.isclose(star_b.velocity.length(), expected)


def test_system_stays_finite(rng: random.Random) -> None:
    system = create_stable_star_system(rng)
    for _ in range(500):
        system.step(0.1)
    for body in system:
        assert body.position.is_finite()
        assert body.velocity.is_finite()


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ValueError):
        create_stable_star_system(random.Random(1), SystemConfig(inner_orbit=0.0))


def test_construction_is_logged(rng: random.Random, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="stellar.factory"):
        create_stable_star_system(rng)
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("center mass") for m in messages)
    assert any(m.startswith("Created star system") for m in messages)
