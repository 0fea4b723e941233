"""Small vector and matrix types for 3D rendering, with GPU-layout packing."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, Sequence

__all__ = [
    "MATH_EPSILON",
    "MATH_PI",
    "Vector2",
    "Vector3",
    "Matrix4x4",
    "Vertex",
    "GlobalUbo",
    "InstanceUbo",
    "DirectionalLightUbo",
    "is_nearly_equal",
    "radians",
    "degrees",
]

# Single-precision machine epsilon.
MATH_EPSILON = 2.0**-23
MATH_PI = math.pi

_VEC2 = struct.Struct("<2f")
_VEC3 = struct.Struct("<4f")  # three components padded to 16 bytes
_MAT4 = struct.Struct("<16f")
_INT = struct.Struct("<i")


def is_nearly_equal(x: float, y: float, epsilon: float = MATH_EPSILON) -> bool:
    """Tell whether ``x`` and ``y`` differ by less than ``epsilon``."""
    return abs(x - y) < epsilon


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (MATH_PI / 180.0)


def degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / MATH_PI)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(eq=False)
class Vector2:
    """Two-component vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)  # type: ignore[operator]

    def __iadd__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        self.x *= scalar  # type: ignore[operator]
        self.y *= scalar  # type: ignore[operator]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return is_nearly_equal(self.x, other.x) and is_nearly_equal(self.y, other.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def pack(self) -> bytes:
        """Return the two components as little-endian 32-bit floats (8 bytes)."""
        return _VEC2.pack(self.x, self.y)


@dataclass(eq=False)
class Vector3:
    """Three-component vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: object) -> Vector3:
        if not _is_scalar(scalar):
            return NotImplemented
        s = scalar
        return Vector3(self.x * s, self.y * s, self.z * s)  # type: ignore[operator]

    def __iadd__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: object) -> Vector3:
        if not _is_scalar(scalar):
            return NotImplemented
        self.x *= scalar  # type: ignore[operator]
        self.y *= scalar  # type: ignore[operator]
        self.z *= scalar  # type: ignore[operator]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            is_nearly_equal(self.x, other.x)
            and is_nearly_equal(self.y, other.y)
            and is_nearly_equal(self.z, other.z)
        )

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def normalize(self) -> Vector3:
        """Return the unit vector in this direction, or the zero vector if too short."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if length > MATH_EPSILON:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return Vector3(0.0, 0.0, 0.0)

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    @staticmethod
    def up() -> Vector3:
        """Return the default up direction, +Y."""
        return Vector3(0.0, 1.0, 0.0)

    def pack(self) -> bytes:
        """Return x, y, z and a zero pad as little-endian 32-bit floats (16 bytes)."""
        return _VEC3.pack(self.x, self.y, self.z, 0.0)


class Matrix4x4:
    """A 4x4 matrix stored row by row as ``values[row][column]``; equality is approximate."""

    __slots__ = ("values",)

    def __init__(self, values: Iterable[Sequence[float]] | None = None) -> None:
        if values is None:
            self.values = [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]
            return
        rows = [[float(v) for v in row] for row in values]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        self.values = rows

    def __repr__(self) -> str:
        return f"Matrix4x4({self.values!r})"

    def __add__(self, other: object) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self.values, other.values)
        )

    def __sub__(self, other: object) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            [a - b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self.values, other.values)
        )

    def __mul__(self, other: object) -> Matrix4x4:
        if isinstance(other, Matrix4x4):
            columns = list(zip(*other.values))
            return Matrix4x4(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self.values
            )
        if _is_scalar(other):
            # Every entry of a row becomes the scalar times that row's sum.
            return Matrix4x4(
                [sum(v * other for v in row)] * 4  # type: ignore[operator]
                for row in self.values
            )
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return all(
            is_nearly_equal(a, b)
            for a, b in zip(chain.from_iterable(self.values), chain.from_iterable(other.values))
        )

    __hash__ = None  # type: ignore[assignment]

    def transpose(self) -> Matrix4x4:
        """Return the transposed matrix."""
        return Matrix4x4(list(column) for column in zip(*self.values))

    def pack(self) -> bytes:
        """Return the 16 entries, row by row, as little-endian 32-bit floats (64 bytes)."""
        return _MAT4.pack(*chain.from_iterable(self.values))

    @staticmethod
    def perspective(
        fov_radians: float, aspect_ratio: float, near: float, far: float
    ) -> Matrix4x4:
        """Return a perspective projection with the Y axis flipped."""
        result = Matrix4x4()
        tan_half_fov = math.tan(fov_radians / 2.0)
        v = result.values
        v[0][0] = 1.0 / (aspect_ratio * tan_half_fov)
        v[1][1] = -1.0 / tan_half_fov
        v[2][2] = -(far + near) / (far - near)
        v[2][3] = -1.0
        v[3][2] = -(2.0 * far * near) / (far - near)
        v[3][3] = 0.0
        return result

    @staticmethod
    def look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4x4:
        """Return a view matrix for a camera at ``eye`` looking at ``target``."""
        forward = (eye - target).normalize()
        right = up.cross(forward).normalize()
        up_corrected = forward.cross(right)

        result = Matrix4x4()
        v = result.values
        v[0][0], v[1][0], v[2][0] = right.x, right.y, right.z
        v[0][1], v[1][1], v[2][1] = up_corrected.x, up_corrected.y, up_corrected.z
        v[0][2], v[1][2], v[2][2] = forward.x, forward.y, forward.z
        v[3][0] = -right.dot(eye)
        v[3][1] = -up_corrected.dot(eye)
        v[3][2] = -forward.dot(eye)
        v[3][3] = 1.0
        return result

    @staticmethod
    def identity() -> Matrix4x4:
        """Return the identity matrix."""
        return Matrix4x4()


@dataclass(eq=False)
class Vertex:
    """A mesh vertex with position, normal, tangent and texture coordinates."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    tangent: Vector3 = field(default_factory=Vector3)
    texture_coordinates: Vector2 = field(default_factory=Vector2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return (
            self.position == other.position
            and self.normal == other.normal
            and self.texture_coordinates == other.texture_coordinates
            and self.tangent == other.tangent
        )

    def __hash__(self) -> int:
        return hash((self.position, self.normal, self.texture_coordinates, self.tangent))

    def pack(self) -> bytes:
        """Return the vertex in GPU layout: three padded vectors, UVs, padding (64 bytes)."""
        data = (
            self.position.pack()
            + self.normal.pack()
            + self.tangent.pack()
            + self.texture_coordinates.pack()
        )
        return data + bytes(-len(data) % 16)


@dataclass
class GlobalUbo:
    """Per-frame uniform data: camera view, projection and position."""

    view: Matrix4x4 = field(default_factory=Matrix4x4)
    projection: Matrix4x4 = field(default_factory=Matrix4x4)
    camera_position: Vector3 = field(default_factory=Vector3)
    debug: int = 0

    def pack(self) -> bytes:
        """Return the buffer contents, padded to a multiple of 16 bytes (160 bytes)."""
        data = (
            self.view.pack()
            + self.projection.pack()
            + self.camera_position.pack()
            + _INT.pack(self.debug)
        )
        return data + bytes(-len(data) % 16)


@dataclass
class InstanceUbo:
    """Per-object uniform data: model and normal matrices."""

    model: Matrix4x4 = field(default_factory=Matrix4x4)
    normal: Matrix4x4 = field(default_factory=Matrix4x4)

    def pack(self) -> bytes:
        """Return the buffer contents (128 bytes)."""
        return self.model.pack() + self.normal.pack()


@dataclass
class DirectionalLightUbo:
    """Uniform data for a directional light."""

    color: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)

    def pack(self) -> bytes:
        """Return the buffer contents (32 bytes)."""
        return self.color.pack() + self.direction.pack()