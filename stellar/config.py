#!/usr/bin/env python3
"""
Run configuration for the star system simulator.

SystemConfig bundles every tunable from constants so one run can override a
few of them (a seed, a different G) without touching module globals. The
factory, the BodySystem and the render-loop driver all read from it, so orbit
initialization and integration always share the same G.
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from . import constants


@dataclass
class SystemConfig:
    g: float = constants.G
    max_mass: float = constants.MAX_MASS
    inner_orbit: float = constants.INNER_ORBIT
    outer_orbit: float = constants.OUTER_ORBIT
    planet_orbit: float = constants.PLANET_ORBIT
    orbit_factor_range: Tuple[float, float] = constants.ORBIT_FACTOR_RANGE
    planet_mass: float = constants.PLANET_MASS
    velocity_jitter_fraction: float = constants.VELOCITY_JITTER_FRACTION
    jitter_floor: float = constants.JITTER_FLOOR
    dt: float = constants.DT
    separation_floor: float = constants.SEPARATION_FLOOR
    max_frame_dt: float = constants.MAX_FRAME_DT
    seed: Optional[int] = None

    def copy(self, **changes) -> "SystemConfig":
        return replace(self, **changes)

    def validate(self) -> "SystemConfig":
        """Raise ValueError naming the first out-of-range field; return self otherwise."""
        positive = (
            "g", "max_mass", "inner_orbit", "outer_orbit", "planet_orbit",
            "planet_mass", "dt", "separation_floor", "max_frame_dt",
        )
        for name in positive:
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        low, high = self.orbit_factor_range
        if not 0 < low <= high:
            raise ValueError(f"orbit_factor_range must satisfy 0 < low <= high, got {self.orbit_factor_range!r}")
        if self.velocity_jitter_fraction < 0:
            raise ValueError(f"velocity_jitter_fraction must be >= 0, got {self.velocity_jitter_fraction!r}")
        if self.jitter_floor < 0:
            raise ValueError(f"jitter_floor must be >= 0, got {self.jitter_floor!r}")
        return self
