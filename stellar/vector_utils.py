#!/usr/bin/env python3
"""
Vector helpers for 3D operations.

Vector3 is immutable by convention: the named operations and operators return
new vectors. The few methods that mutate the receiver (accumulate,
scale_in_place, set) say so and return the receiver, which keeps running sums
such as the barycenter reduction free of temporaries.
"""
import math
import random
from typing import Iterator, Optional, Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


class Vector3:
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float, float]) -> "Vector3":
        return cls(t[0], t[1], t[2])

    @classmethod
    def random_in_range(cls, low: float, high: float,
                        rng: Optional[random.Random] = None) -> "Vector3":
        """
        Return a vector whose components are drawn independently from U[low, high].

        Args:
            low: Lower bound for every component.
            high: Upper bound for every component.
            rng: Random source; the module-level generator is used when omitted.
        """
        rng = rng or random
        return cls(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))

    # Pure operations

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, s: float) -> "Vector3":
        return Vector3(self.x * s, self.y * s, self.z * s)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3()
        return Vector3(self.x / l, self.y / l, self.z / l)

    def distance_to(self, other: "Vector3") -> float:
        return self.sub(other).length()

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # Accumulating operations (mutate and return self)

    def accumulate(self, other: "Vector3", weight: float = 1.0) -> "Vector3":
        """In place: self += weight * other."""
        self.x += other.x * weight
        self.y += other.y * weight
        self.z += other.z * weight
        return self

    def scale_in_place(self, s: float) -> "Vector3":
        self.x *= s
        self.y *= s
        self.z *= s
        return self

    def set(self, other: "Vector3") -> "Vector3":
        self.x, self.y, self.z = other.x, other.y, other.z
        return self

    # Operator forms of the pure operations

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __mul__(self, s: float) -> "Vector3":
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> "Vector3":
        return Vector3(self.x / s, self.y / s, self.z / s)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"
