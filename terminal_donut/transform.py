"""Rigid posing of a sampled point cloud for one frame."""

from typing import Iterable, Optional

from terminal_donut.vector import Rotation, SurfacePoint, Vector3, rotate, translate


def transform(
    points: Iterable[SurfacePoint],
    rotation: Rotation,
    translation: Optional[Vector3] = None,
) -> tuple[SurfacePoint, ...]:
    """
    Rotate, then optionally translate, every point of a lattice.

    The translation is added to normals as well as positions (see
    `terminal_donut.vector.translate`).

    Args:
        points: Object-space samples; never modified.
        rotation (Rotation): Rotation applied to positions and normals.
        translation (Optional[Vector3]): Offset added after rotating.

    Returns:
        tuple[SurfacePoint, ...]: The posed points, in input order.
    """
    if translation is None:
        return tuple(rotate(point, rotation) for point in points)
    return tuple(translate(rotate(point, rotation), translation) for point in points)
