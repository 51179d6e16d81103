"""Scalar helpers and small 2, 3 and 4 component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def lerp(start: float, end: float, amount: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + amount * (end - start)


def normalize(value: float, start: float, end: float) -> float:
    """Position of ``value`` within ``[start, end]`` as a fraction."""
    return (value - start) / (end - start)


def remap(
    value: float,
    input_start: float,
    input_end: float,
    output_start: float,
    output_end: float,
) -> float:
    """Map ``value`` from one range onto another."""
    return (value - input_start) / (input_end - input_start) * (
        output_end - output_start
    ) + output_start


def wrap(value: float, minimum: float, maximum: float) -> float:
    """Wrap ``value`` into the half-open range ``[minimum, maximum)``."""
    span = maximum - minimum
    return value - span * math.floor((value - minimum) / span)


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def distance(self, other: Vec2) -> float:
        return (other - self).length()

    def distance_signed(self, other: Vec2, reference: Vec2) -> float:
        """Distance to ``other``, negative when ``reference`` lies on the right of the line."""
        dx = other.x - self.x
        dy = other.y - self.y
        distance = math.sqrt(dx * dx + dy * dy)
        sign = (reference.x - self.x) * dy - (reference.y - self.y) * dx
        return -distance if sign < 0 else distance


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def scale(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def scale_xyz(self, scale_x: float, scale_y: float, scale_z: float) -> Vec3:
        return Vec3(self.x * scale_x, self.y * scale_y, self.z * scale_z)

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        inverse = 1.0 / length
        return Vec3(self.x * inverse, self.y * inverse, self.z * inverse)

    def rotate_by_axis(self, axis: Vec3, radians: float) -> Vec3:
        """Rotate about ``axis`` by ``radians`` using the Euler-Rodrigues formula."""
        length = axis.length()
        if length == 0.0:
            length = 1.0
        axis = axis.scale(1.0 / length)

        half = radians / 2.0
        s = math.sin(half)
        w = Vec3(axis.x * s, axis.y * s, axis.z * s)
        a = math.cos(half)

        wv = w.cross(self)
        wwv = w.cross(wv)
        return self + wv.scale(2.0 * a) + wwv.scale(2.0)

    def lerp(self, other: Vec3, t: float) -> Vec3:
        return Vec3(
            self.x + t * (other.x - self.x),
            self.y + t * (other.y - self.y),
            self.z + t * (other.z - self.z),
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: Vec3) -> float:
        return (other - self).length()

    def angle(self, other: Vec3) -> float:
        """Unsigned angle in radians between the two vectors."""
        return math.atan2(self.cross(other).length(), self.dot(other))

    def to_vec4(self) -> Vec4:
        """Extend to four components with ``w`` set to zero."""
        return Vec4(self.x, self.y, self.z, 0.0)


@dataclass(frozen=True)
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def __truediv__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w)

    def scale(self, scalar: float) -> Vec4:
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def normalize(self) -> Vec4:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length > 0:
            return self.scale(1.0 / length)
        return self

    def lerp(self, other: Vec4, t: float) -> Vec4:
        return Vec4(
            self.x + t * (other.x - self.x),
            self.y + t * (other.y - self.y),
            self.z + t * (other.z - self.z),
            self.w + t * (other.w - self.w),
        )

    def dot(self, other: Vec4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance(self, other: Vec4) -> float:
        return (self - other).length()

    def to_vec3(self) -> Vec3:
        """Drop the ``w`` component."""
        return Vec3(self.x, self.y, self.z)