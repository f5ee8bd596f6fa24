#!/usr/bin/env python3
"""
Shared constants for the star system simulator (simulation units).

Masses, distances and times are dimensionless simulation units; G is chosen so
that the default configuration completes an inner orbit in a few hundred time
units. Keeping constants in one place keeps the orbit initializer and the
integrator consistent with each other.
"""

# Physical constants
G = 1.0  # gravitational constant shared by orbit setup and integration

# System construction
MAX_MASS = 1000.0
INNER_ORBIT = 200.0  # double star separation
OUTER_ORBIT = 1000.0  # third star around the double star barycenter
PLANET_ORBIT = 100.0  # planet around the third star
ORBIT_FACTOR_RANGE = (0.8, 1.2)
PLANET_MASS = 0.001  # star:planet mass ratio is roughly 10^5..10^6
VELOCITY_JITTER_FRACTION = 0.2
JITTER_FLOOR = 1e-3  # absolute jitter for bodies that are (nearly) at rest

# Orbit plane construction
REFERENCE_AXIS = (0.0, 1.0, 0.0)
FALLBACK_AXIS = (1.0, 0.0, 0.0)
DEGENERATE_AXIS_TOLERANCE = 1e-9

# Physics controls
DT = 1 / 60.0  # default fixed step
SEPARATION_FLOOR = 1.0  # minimum distance used in force evaluation
MAX_FRAME_DT = 0.1  # cap for a measured frame interval

# Render loop
DEFAULT_SPEED = 10  # integrator steps per displayed frame
MAX_SPEED = 1000
DEFAULT_TRAIL_LENGTH = 300  # frames
MAX_TRAIL_LENGTH = 10000

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
BACKGROUND_COLOR = (0, 0, 0)
TRAIL_COLOR = (90, 110, 160)
STAR_COLORS = [
    (255, 214, 140),
    (255, 170, 120),
    (170, 200, 255),
    (120, 220, 140),
]
MAX_STAR_SIZE = 20  # marker radius of a MAX_MASS star, world units

# Camera zoom bounds (world units per pixel)
DEFAULT_UNITS_PER_PIXEL = 3.0
MIN_UNITS_PER_PIXEL = 0.05
MAX_UNITS_PER_PIXEL = 500.0

# Bounds on a single zoom gesture
MIN_ZOOM_FACTOR = 0.05
MAX_ZOOM_FACTOR = 20.0

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
