"""Grid cell to world coordinate mapping."""

from __future__ import annotations

from floorplan.models import Point2D, RectDef, Side, lerp


def cell_to_world(x: int, y: int, cell_size: float) -> Point2D:
    """
    Map grid cell (x, y) to world (X, Z).

    Cell indices are inclusive, so a rectangle's far corner is the
    mapping of (x_max + 1, y_max + 1).
    """
    return Point2D(x=(x - 0.5) * cell_size, z=(y - 0.5) * cell_size)


def rect_bounds(rect: RectDef, cell_size: float) -> tuple[Point2D, Point2D]:
    """World-space (min, max) corners of a rectangle of cells."""
    return (
        cell_to_world(rect.x_min, rect.y_min, cell_size),
        cell_to_world(rect.x_max + 1, rect.y_max + 1, cell_size),
    )


def grid_bounds(grid_width: int, grid_height: int, cell_size: float) -> tuple[Point2D, Point2D]:
    """World-space box of the whole map (cells 1..width, 1..height)."""
    return (
        cell_to_world(1, 1, cell_size),
        cell_to_world(grid_width + 1, grid_height + 1, cell_size),
    )


def door_pose(box_min: Point2D, box_max: Point2D, side: Side, t: float) -> tuple[Point2D, float]:
    """World position and yaw (degrees) of a door at offset t on one edge."""
    if side == Side.SOUTH:
        return Point2D(x=lerp(box_min.x, box_max.x, t), z=box_min.z), 0.0
    if side == Side.NORTH:
        return Point2D(x=lerp(box_min.x, box_max.x, t), z=box_max.z), 180.0
    if side == Side.WEST:
        return Point2D(x=box_min.x, z=lerp(box_min.z, box_max.z, t)), 90.0
    return Point2D(x=box_max.x, z=lerp(box_min.z, box_max.z, t)), -90.0
