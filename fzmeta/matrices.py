"""4x4 matrices and the usual transform, projection and view constructors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from fzmeta.vectors import Vec3, Vec4


def _identity_values() -> tuple[float, ...]:
    return tuple(1.0 if i % 5 == 0 else 0.0 for i in range(16))


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix whose element ``m[n]`` is the element called ``m<n>``.

    ``m[0..3]`` hold the first column of the transform (x basis), and
    ``m[12..14]`` hold the translation.
    """

    m: tuple[float, ...] = field(default_factory=_identity_values)

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.m)
        if len(values) != 16:
            raise ValueError(f"Mat4 needs 16 values, got {len(values)}")
        object.__setattr__(self, "m", values)

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    @classmethod
    def identity(cls) -> Mat4:
        return cls.diagonal(1.0)

    @classmethod
    def diagonal(cls, value: float) -> Mat4:
        """Matrix with ``value`` on the diagonal and zero elsewhere."""
        return cls(tuple(value if i % 5 == 0 else 0.0 for i in range(16)))

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.m, other.m
        return Mat4(
            tuple(
                sum(a[4 * i + k] * b[4 * k + j] for k in range(4))
                for i in range(4)
                for j in range(4)
            )
        )

    def transpose(self) -> Mat4:
        return Mat4(tuple(self.m[4 * j + i] for i in range(4) for j in range(4)))

    def transform_vec3(self, vec: Vec3) -> Vec3:
        """Apply the rotation and scale part, ignoring translation."""
        m = self.m
        components = tuple(vec)
        x, y, z = (
            sum(m[i + 4 * k] * components[k] for k in range(3)) for i in range(3)
        )
        return Vec3(x, y, z)

    def transform_vec4(self, vec: Vec4) -> Vec4:
        """Apply the full matrix to a four component vector."""
        m = self.m
        components = tuple(vec)
        x, y, z, w = (
            sum(m[i + 4 * k] * components[k] for k in range(4)) for i in range(4)
        )
        return Vec4(x, y, z, w)

    def format(self, label: str) -> str:
        """Multi-line text listing the matrix, one line per row."""
        lines = [f"{label}: Mat4f32"]
        for row in range(4):
            cells = "".join(f"{self.m[4 * row + col]:.6f} " for col in range(4))
            lines.append("  " + cells)
        return "\n".join(lines) + "\n"


def _brace(values: Iterable[float]) -> Mat4:
    """Build a matrix from values listed in storage order (m0, m4, m8, m12, m1, ...)."""
    ordered = tuple(values)
    result = [0.0] * 16
    for k, value in enumerate(ordered):
        result[(k % 4) * 4 + k // 4] = value
    return Mat4(tuple(result))


def _with(base: Mat4, **elements: float) -> Mat4:
    values = list(base.m)
    for name, value in elements.items():
        values[int(name[1:])] = value
    return Mat4(tuple(values))


def translate(x: float, y: float, z: float) -> Mat4:
    return _brace(
        (1.0, 0.0, 0.0, x, 0.0, 1.0, 0.0, y, 0.0, 0.0, 1.0, z, 0.0, 0.0, 0.0, 1.0)
    )


def scale(x: float, y: float, z: float) -> Mat4:
    return _brace(
        (x, 0.0, 0.0, 0.0, 0.0, y, 0.0, 0.0, 0.0, 0.0, z, 0.0, 0.0, 0.0, 0.0, 1.0)
    )


def rotate_axis(axis: Vec3, radians: float) -> Mat4:
    """Rotation by ``radians`` about ``axis``, which is normalised if needed."""
    x, y, z = axis.x, axis.y, axis.z
    length_squared = x * x + y * y + z * z
    if length_squared != 1.0 and length_squared != 0.0:
        inverse = 1.0 / math.sqrt(length_squared)
        x, y, z = x * inverse, y * inverse, z * inverse

    s = math.sin(radians)
    c = math.cos(radians)
    t = 1.0 - c
    return Mat4(
        (
            x * x * t + c, y * x * t + z * s, z * x * t - y * s, 0.0,
            x * y * t - z * s, y * y * t + c, z * y * t + x * s, 0.0,
            x * z * t + y * s, y * z * t - x * s, z * z * t + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def rotate_x(radians: float) -> Mat4:
    c, s = math.cos(radians), math.sin(radians)
    return _with(Mat4.identity(), m5=c, m6=s, m9=-s, m10=c)


def rotate_y(radians: float) -> Mat4:
    c, s = math.cos(radians), math.sin(radians)
    return _with(Mat4.identity(), m0=c, m2=-s, m8=s, m10=c)


def rotate_z(radians: float) -> Mat4:
    c, s = math.cos(radians), math.sin(radians)
    return _with(Mat4.identity(), m0=c, m1=s, m4=-s, m5=c)


def rotate_xyz(radians: Vec3) -> Mat4:
    cosz, sinz = math.cos(-radians.z), math.sin(-radians.z)
    cosy, siny = math.cos(-radians.y), math.sin(-radians.y)
    cosx, sinx = math.cos(-radians.x), math.sin(-radians.x)
    return _with(
        Mat4.identity(),
        m0=cosz * cosy,
        m1=cosz * siny * sinx - sinz * cosx,
        m2=cosz * siny * cosx + sinz * sinx,
        m4=sinz * cosy,
        m5=sinz * siny * sinx + cosz * cosx,
        m6=sinz * siny * cosx - cosz * sinx,
        m8=-siny,
        m9=cosy * sinx,
        m10=cosy * cosx,
    )


def rotate_zyx(radians: Vec3) -> Mat4:
    cz, sz = math.cos(radians.z), math.sin(radians.z)
    cy, sy = math.cos(radians.y), math.sin(radians.y)
    cx, sx = math.cos(radians.x), math.sin(radians.x)
    return Mat4(
        (
            cz * cy, cy * sz, -sy, 0.0,
            cz * sy * sx - cx * sz, cz * cx + sz * sy * sx, cy * sx, 0.0,
            sz * sx + cz * cx * sy, cx * sz * sy - cz * sx, cy * cx, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def frustum(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near_plane: float,
    far_plane: float,
) -> Mat4:
    rl = right - left
    tb = top - bottom
    fn = far_plane - near_plane
    return Mat4(
        (
            near_plane * 2.0 / rl, 0.0, 0.0, 0.0,
            0.0, near_plane * 2.0 / tb, 0.0, 0.0,
            (right + left) / rl, (top + bottom) / tb, -(far_plane + near_plane) / fn, -1.0,
            0.0, 0.0, -(far_plane * near_plane * 2.0) / fn, 0.0,
        )
    )


def perspective(
    fov_degrees: float,
    window_width: float,
    window_height: float,
    near_plane: float,
    far_plane: float,
) -> Mat4:
    """Perspective projection from a horizontal field of view in degrees."""
    aspect = window_width / window_height
    fov_rad = math.radians(fov_degrees)
    half_fovy = math.atan(math.tan(fov_rad / 2.0) / aspect)
    fovy = half_fovy * 2.0

    top = near_plane * math.tan(fovy * 0.5)
    bottom = -top
    right = top * (window_width / window_height)
    left = -right

    rl = right - left
    tb = top - bottom
    fn = far_plane - near_plane
    return _with(
        Mat4.diagonal(0.0),
        m0=near_plane * 2.0 / rl,
        m5=near_plane * 2.0 / tb,
        m8=(right + left) / rl,
        m9=(top + bottom) / tb,
        m10=-(far_plane + near_plane) / fn,
        m11=-1.0,
        m14=-(far_plane * near_plane * 2.0) / fn,
    )


def orthographic(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near_plane: float,
    far_plane: float,
) -> Mat4:
    rl = right - left
    tb = top - bottom
    fn = far_plane - near_plane
    return Mat4(
        (
            2.0 / rl, 0.0, 0.0, 0.0,
            0.0, 2.0 / tb, 0.0, 0.0,
            0.0, 0.0, -2.0 / fn, 0.0,
            -(left + right) / rl, -(top + bottom) / tb, -(far_plane + near_plane) / fn, 1.0,
        )
    )


def _normalized_or_unit(v: Vec3) -> Vec3:
    length = v.length()
    if length == 0.0:
        length = 1.0
    return v.scale(1.0 / length)


def look_at(eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
    """View matrix for a camera at ``eye`` looking towards ``target``."""
    vz = _normalized_or_unit(eye - target)
    vx = _normalized_or_unit(up.cross(vz))
    vy = vz.cross(vx)
    return Mat4(
        (
            vx.x, vy.x, vz.x, 0.0,
            vx.y, vy.y, vz.y, 0.0,
            vx.z, vy.z, vz.z, 0.0,
            -vx.dot(eye), -vy.dot(eye), -vz.dot(eye), 1.0,
        )
    )


def unproject(source: Vec3, projection: Mat4, view: Mat4) -> Vec3:
    """Map a point in normalised device space back to world space.

    Raises ZeroDivisionError when the combined matrix cannot be inverted.
    """
    combined = _brace((view @ projection).m)
    (a00, a01, a02, a03,
     a10, a11, a12, a13,
     a20, a21, a22, a23,
     a30, a31, a32, a33) = combined.m

    b00 = a00 * a11 - a01 * a10
    b01 = a00 * a12 - a02 * a10
    b02 = a00 * a13 - a03 * a10
    b03 = a01 * a12 - a02 * a11
    b04 = a01 * a13 - a03 * a11
    b05 = a02 * a13 - a03 * a12
    b06 = a20 * a31 - a21 * a30
    b07 = a20 * a32 - a22 * a30
    b08 = a20 * a33 - a23 * a30
    b09 = a21 * a32 - a22 * a31
    b10 = a21 * a33 - a23 * a31
    b11 = a22 * a33 - a23 * a32

    inv_det = 1.0 / (b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06)

    inverse = _brace(
        value * inv_det
        for value in (
            a11 * b11 - a12 * b10 + a13 * b09,
            -a01 * b11 + a02 * b10 - a03 * b09,
            a31 * b05 - a32 * b04 + a33 * b03,
            -a21 * b05 + a22 * b04 - a23 * b03,
            -a10 * b11 + a12 * b08 - a13 * b07,
            a00 * b11 - a02 * b08 + a03 * b07,
            -a30 * b05 + a32 * b02 - a33 * b01,
            a20 * b05 - a22 * b02 + a23 * b01,
            a10 * b10 - a11 * b08 + a13 * b06,
            -a00 * b10 + a01 * b08 - a03 * b06,
            a30 * b04 - a31 * b02 + a33 * b00,
            -a20 * b04 + a21 * b02 - a23 * b00,
            -a10 * b09 + a11 * b07 - a12 * b06,
            a00 * b09 - a01 * b07 + a02 * b06,
            -a30 * b03 + a31 * b01 - a32 * b00,
            a20 * b03 - a21 * b01 + a22 * b00,
        )
    )

    q = inverse.transform_vec4(Vec4(source.x, source.y, source.z, 1.0))
    return Vec3(q.x / q.w, q.y / q.w, q.z / q.w)