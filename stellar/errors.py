#!/usr/bin/env python3
"""
Exceptions raised while building a star system.

All of them subclass ValueError so callers that only care about bad input can
catch that instead of the specific condition.
"""


class StarSystemError(ValueError):
    """Base class for construction-time failures."""


class InvalidBody(StarSystemError):
    """A body was given a non-positive or non-finite mass."""


class InvalidOrbit(StarSystemError):
    """An orbit cannot be initialized (bad distance, mass or plane hint)."""


class EmptyInput(StarSystemError):
    """A reduction over bodies received nothing to reduce."""
