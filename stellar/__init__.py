"""stellar package: physics core for a hierarchical star system simulation."""

from .barycenter import center_of_mass, center_of_positions
from .config import SystemConfig
from .controller import SimulationController
from .data_models import Body, MassCenter
from .errors import EmptyInput, InvalidBody, InvalidOrbit, StarSystemError
from .factory import create_stable_star_system
from .orbits import add_velocity_jitter, circular_orbit_velocity, orbit_around
from .physics import GravityIntegrator, total_angular_momentum, total_energy, total_momentum
from .system import BodySystem
from .vector_utils import Vector3

__all__ = [
    "Vector3",
    "Body",
    "MassCenter",
    "BodySystem",
    "GravityIntegrator",
    "SystemConfig",
    "SimulationController",
    "StarSystemError",
    "InvalidBody",
    "InvalidOrbit",
    "EmptyInput",
    "center_of_mass",
    "center_of_positions",
    "orbit_around",
    "add_velocity_jitter",
    "circular_orbit_velocity",
    "create_stable_star_system",
    "total_momentum",
    "total_energy",
    "total_angular_momentum",
]
__version__ = "0.1.0"
