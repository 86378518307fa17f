"""
Vector and rotation algebra for the renderer.

Vectors are plain immutable triples and rotations are 3×3 orthonormal matrices stored
row by row. Rotations act on column vectors, so `compose(a, b)` is the rotation that
applies `b` first and `a` second.
"""

from math import cos, sin, sqrt
from typing import NamedTuple


class Vector3(NamedTuple):
    """Immutable 3-component vector."""

    x: float
    y: float
    z: float


class SurfacePoint(NamedTuple):
    """
    One sample of a surface: where it is and which way it faces.

    Attributes:
        position (Vector3): Location of the sample.
        normal (Vector3): Outward surface normal at the sample.
    """

    position: Vector3
    normal: Vector3


class Rotation(NamedTuple):
    """
    3×3 rotation matrix, one `Vector3` per row.

    Only build rotations from the generators below (`rotation_x`, `rotation_y`,
    `rotation_z`) and `compose`; that keeps every matrix orthonormal.
    """

    row0: Vector3
    row1: Vector3
    row2: Vector3

    def column(self, index: int) -> Vector3:
        return Vector3(self.row0[index], self.row1[index], self.row2[index])

    def transpose(self) -> "Rotation":
        """Return the inverse rotation (the transpose of an orthonormal matrix)."""
        return Rotation(self.column(0), self.column(1), self.column(2))


ZERO = Vector3(0.0, 0.0, 0.0)

IDENTITY = Rotation(
    Vector3(1.0, 0.0, 0.0),
    Vector3(0.0, 1.0, 0.0),
    Vector3(0.0, 0.0, 1.0),
)


def dot(v: Vector3, w: Vector3) -> float:
    """
    Inner product of two vectors.

    Args:
        v (Vector3): First vector.
        w (Vector3): Second vector.

    Returns:
        float: `v.x * w.x + v.y * w.y + v.z * w.z`.
    """
    return v.x * w.x + v.y * w.y + v.z * w.z


def length(v: Vector3) -> float:
    """Euclidean length of `v`."""
    return sqrt(dot(v, v))


def add(v: Vector3, w: Vector3) -> Vector3:
    """Component-wise sum of two vectors."""
    return Vector3(v.x + w.x, v.y + w.y, v.z + w.z)


def apply(rotation: Rotation, v: Vector3) -> Vector3:
    """Multiply a single vector by a rotation matrix."""
    return Vector3(dot(rotation.row0, v), dot(rotation.row1, v), dot(rotation.row2, v))


def rotate(point: SurfacePoint, rotation: Rotation) -> SurfacePoint:
    """
    Rotate a surface point.

    Position and normal are rotated independently by the same matrix. Rotations are
    linear, so the rotated normal is exactly the normal of the rotated surface.

    Args:
        point (SurfacePoint): Point to rotate.
        rotation (Rotation): Rotation to apply.

    Returns:
        SurfacePoint: A new point; the input is left untouched.
    """
    return SurfacePoint(apply(rotation, point.position), apply(rotation, point.normal))


def translate(point: SurfacePoint, offset: Vector3) -> SurfacePoint:
    """
    Shift a surface point by `offset`.

    The same offset is added to the normal as to the position. This is not a pure
    rigid-body move: it tilts the shading normals towards the direction of travel, so
    highlights slide across the solid as it moves. Animations rely on that look.
    """
    return SurfacePoint(add(point.position, offset), add(point.normal, offset))


def compose(a: Rotation, b: Rotation) -> Rotation:
    """
    Return the matrix product `a·b`.

    The result applies `b` first, then `a`. Order matters: rotations about different
    axes do not commute.
    """
    columns = (b.column(0), b.column(1), b.column(2))
    return Rotation(
        *(Vector3(*(dot(row, column) for column in columns)) for row in (a.row0, a.row1, a.row2))
    )


def rotation_x(angle: float) -> Rotation:
    """Rotation by `angle` radians about the X axis (counter-clockwise looking down +X)."""
    c, s = cos(angle), sin(angle)
    return Rotation(
        Vector3(1.0, 0.0, 0.0),
        Vector3(0.0, c, -s),
        Vector3(0.0, s, c),
    )


def rotation_y(angle: float) -> Rotation:
    """Rotation by `angle` radians about the Y axis."""
    c, s = cos(angle), sin(angle)
    return Rotation(
        Vector3(c, 0.0, s),
        Vector3(0.0, 1.0, 0.0),
        Vector3(-s, 0.0, c),
    )


def rotation_z(angle: float) -> Rotation:
    """Rotation by `angle` radians about the Z axis."""
    c, s = cos(angle), sin(angle)
    return Rotation(
        Vector3(c, -s, 0.0),
        Vector3(s, c, 0.0),
        Vector3(0.0, 0.0, 1.0),
    )


def spin_rotation(angle_a: float, angle_b: float) -> Rotation:
    """
    Combined per-frame rotation for the two animation angles.

    Tilts by `angle_a` about X first, then spins by `angle_b` about Z. Every renderer
    path (materialized and fused) uses this one order.
    """
    return compose(rotation_z(angle_b), rotation_x(angle_a))


def is_orthonormal(rotation: Rotation, tolerance: float = 1e-9) -> bool:
    """Check that `rotation·rotationᵀ` is the identity within `tolerance`."""
    product = compose(rotation, rotation.transpose())
    return all(
        abs(product[i][j] - IDENTITY[i][j]) <= tolerance for i in range(3) for j in range(3)
    )
