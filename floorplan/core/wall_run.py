"""Wall runs: one rectangle edge split into solid pieces around door gaps.

Offsets are measured along the edge from its midpoint, so a run over an
edge of length L lives in [-L/2, +L/2]. Door gaps on the same edge are not
merged with each other: the walk only moves forward, and any piece no longer
than half a wall thickness is dropped.
"""

from __future__ import annotations
from typing import NamedTuple, Sequence

from floorplan.models import (
    ElementKind, PlacedElement, Point2D, Point3D, Side, Vector3D, lerp,
)


class RunSegment(NamedTuple):
    offset: float  # Center, relative to the edge midpoint
    length: float


def edge_length(side: Side, box_min: Point2D, box_max: Point2D) -> float:
    if side.runs_along_x:
        return box_max.x - box_min.x
    return box_max.z - box_min.z


def compute_door_gaps(
    length: float,
    door_offsets: Sequence[float],
    door_width: float,
    wall_thickness: float,
) -> list[tuple[float, float]]:
    """Gap intervals [a, b] for each door, sorted by door offset."""
    half = length * 0.5
    half_gap = min(door_width, length - wall_thickness) * 0.5
    gaps: list[tuple[float, float]] = []
    for t in sorted(door_offsets):
        center = lerp(-half, half, t)
        a = max(center - half_gap, -half)
        b = min(center + half_gap, half)
        gaps.append((a, b))
    return gaps


def build_wall_run(
    side: Side,
    box_min: Point2D,
    box_max: Point2D,
    door_offsets: Sequence[float],
    door_width: float,
    wall_thickness: float,
) -> list[RunSegment]:
    """Solid pieces of one edge after cutting a gap at every door."""
    length = edge_length(side, box_min, box_max)
    if not door_offsets:
        return [RunSegment(0.0, length)]

    min_piece = wall_thickness * 0.5
    segments: list[RunSegment] = []
    cursor = -length * 0.5

    for a, b in compute_door_gaps(length, door_offsets, door_width, wall_thickness):
        span = a - cursor
        if span > min_piece:
            segments.append(RunSegment(cursor + span * 0.5, span))
        cursor = b

    tail = length * 0.5 - cursor
    if tail > min_piece:
        segments.append(RunSegment(cursor + tail * 0.5, tail))

    return segments


def materialize_run_segment(
    segment: RunSegment,
    side: Side,
    box_min: Point2D,
    box_max: Point2D,
    wall_height: float,
    wall_thickness: float,
    group: str = "",
    name: str = "Wall",
) -> PlacedElement:
    """Place one run piece as a wall box on its edge of the box."""
    if side.runs_along_x:
        z = box_min.z if side == Side.SOUTH else box_max.z
        x = (box_min.x + box_max.x) * 0.5 + segment.offset
        scale = Vector3D(x=segment.length, y=wall_height, z=wall_thickness)
    else:
        x = box_min.x if side == Side.WEST else box_max.x
        z = (box_min.z + box_max.z) * 0.5 + segment.offset
        scale = Vector3D(x=wall_thickness, y=wall_height, z=segment.length)

    return PlacedElement(
        name=name,
        group=group,
        kind=ElementKind.WALL,
        position=Point3D(x=x, y=wall_height * 0.5, z=z),
        rotation_y=0.0,
        scale=scale,
    )
