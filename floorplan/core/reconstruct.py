"""Wall reconstruction: rebuild a minimal wall set from placed transforms.

The pipeline runs in four stages:
1. Classify each instance as a horizontal or vertical interval
   (markers and off-axis instances are dropped).
2. Optionally snap the line coordinate and both endpoints to the grid.
3. Bucket intervals by orientation and grid-rounded line coordinate.
4. Merge overlapping or near-touching intervals within each bucket.
"""

from __future__ import annotations
import logging
from typing import Iterable

from floorplan.models import (
    ElementKind, LayoutRecord, Orientation, OrientationMode, PlacedElement,
    PlacedInstanceRecord, Point3D, ReconstructParams, ReconstructionResult,
    ReconstructionStats, Vector3D, WallSegment, WALLS_GROUP, snap,
)

logger = logging.getLogger(__name__)

RECONSTRUCTED_GROUP = "Reconstructed"


def is_marker(item: PlacedInstanceRecord, min_size: float) -> bool:
    """Both horizontal extents below `min_size`: a parent or marker, not a wall."""
    return max(abs(item.sx), abs(item.sz)) < min_size


def yaw_axis(ry: float, tolerance: float) -> Orientation | None:
    """
    World axis of the instance's local X, or None when the yaw is not
    within `tolerance` degrees of a multiple of 90.
    """
    yaw = ry % 360.0
    nearest = round(yaw / 90.0) * 90.0
    if abs(yaw - nearest) > tolerance:
        return None
    quadrant = int(nearest / 90.0) % 4
    return Orientation.HORIZONTAL if quadrant % 2 == 0 else Orientation.VERTICAL


def _other(orientation: Orientation) -> Orientation:
    if orientation == Orientation.HORIZONTAL:
        return Orientation.VERTICAL
    return Orientation.HORIZONTAL


def classify_instance(
    item: PlacedInstanceRecord, params: ReconstructParams,
) -> WallSegment | None:
    """Turn one placed instance into an unsnapped wall interval."""
    sx, sz = abs(item.sx), abs(item.sz)
    mode = params.orientation_mode

    if mode == OrientationMode.SCALE:
        if sx >= sz:
            orientation, length = Orientation.HORIZONTAL, sx
        else:
            orientation, length = Orientation.VERTICAL, sz
    else:
        axis = yaw_axis(item.ry, params.angle_tolerance)
        if axis is None:
            return None
        if mode == OrientationMode.ROTATION:
            orientation = axis
            length = sx if axis == Orientation.HORIZONTAL else sz
        elif sx >= sz:
            orientation, length = axis, sx
        else:
            orientation, length = _other(axis), sz

    half = length * 0.5
    if orientation == Orientation.HORIZONTAL:
        center, line = item.px, item.pz
    else:
        center, line = item.pz, item.px

    return WallSegment(
        orientation=orientation, line=line,
        start=center - half, end=center + half,
    )


def snap_segment(segment: WallSegment, grid_size: float) -> WallSegment:
    start = snap(segment.start, grid_size)
    end = snap(segment.end, grid_size)
    return WallSegment(
        orientation=segment.orientation,
        line=snap(segment.line, grid_size),
        start=min(start, end),
        end=max(start, end),
    )


def bucket_segments(
    segments: Iterable[WallSegment], grid_size: float,
) -> dict[tuple[Orientation, float], list[WallSegment]]:
    """Group collinear intervals by orientation and grid-rounded line."""
    buckets: dict[tuple[Orientation, float], list[WallSegment]] = {}
    for seg in segments:
        key = (seg.orientation, snap(seg.line, grid_size))
        buckets.setdefault(key, []).append(seg)
    return buckets


def merge_bucket(
    orientation: Orientation,
    line: float,
    segments: list[WallSegment],
    merge_tolerance: float,
    min_segment_length: float,
) -> list[WallSegment]:
    """Merge one bucket's intervals into non-overlapping runs."""
    if not segments:
        return []

    ordered = sorted(segments, key=lambda s: s.start)
    merged: list[WallSegment] = []

    def flush(start: float, end: float) -> None:
        if end - start >= min_segment_length:
            merged.append(WallSegment(
                orientation=orientation, line=line, start=start, end=end,
            ))

    cur_start, cur_end = ordered[0].start, ordered[0].end
    for seg in ordered[1:]:
        if seg.start <= cur_end + merge_tolerance:
            cur_end = max(cur_end, seg.end)
        else:
            flush(cur_start, cur_end)
            cur_start, cur_end = seg.start, seg.end
    flush(cur_start, cur_end)

    return merged


def merge_segments(
    segments: Iterable[WallSegment],
    grid_size: float,
    merge_tolerance: float,
    min_segment_length: float,
) -> list[WallSegment]:
    """Bucket and merge; output is ordered by orientation, line, then start."""
    result: list[WallSegment] = []
    buckets = bucket_segments(segments, grid_size)
    for key in sorted(buckets, key=lambda k: (k[0].value, k[1])):
        orientation, line = key
        result.extend(merge_bucket(
            orientation, line, buckets[key], merge_tolerance, min_segment_length,
        ))
    return result


def reconstruct(
    instances: Iterable[PlacedInstanceRecord],
    params: ReconstructParams | None = None,
) -> ReconstructionResult:
    """Classify, snap, bucket and merge placed wall instances."""
    if params is None:
        params = ReconstructParams()

    stats = ReconstructionStats()
    raw: list[WallSegment] = []

    for item in instances:
        stats.instances_seen += 1
        if params.require_wall_name and "wall" not in item.name.lower():
            stats.markers_skipped += 1
            continue
        if is_marker(item, params.min_marker_size):
            stats.markers_skipped += 1
            continue

        seg = classify_instance(item, params)
        if seg is None:
            stats.unclassifiable += 1
            logger.debug("Skipping %r: yaw %.1f is not axis-aligned", item.name, item.ry)
            continue

        if params.snap_to_grid:
            seg = snap_segment(seg, params.grid_size)
        if seg.length < params.min_segment_length:
            stats.too_short += 1
            continue
        raw.append(seg)

    stats.raw_segments = len(raw)
    if not raw:
        logger.warning("No wall segments found in %d instances", stats.instances_seen)
        return ReconstructionResult(grid_size=params.grid_size, stats=stats)

    merged = merge_segments(
        raw, params.grid_size, params.merge_tolerance, params.min_segment_length,
    )
    stats.merged_segments = len(merged)

    logger.info(
        "Reconstructed %d merged walls from %d raw segments",
        stats.merged_segments, stats.raw_segments,
    )
    return ReconstructionResult(grid_size=params.grid_size, segments=merged, stats=stats)


def reconstruct_record(
    record: LayoutRecord, params: ReconstructParams | None = None,
) -> ReconstructionResult:
    """Reconstruct from the Walls group of a record; its gridSize wins when positive."""
    if params is None:
        params = ReconstructParams()
    if record.grid_size is not None and record.grid_size > 0:
        params = params.model_copy(update={"grid_size": record.grid_size})
    return reconstruct(record.items_in(WALLS_GROUP), params)


def segments_to_elements(
    segments: Iterable[WallSegment],
    wall_height: float,
    wall_thickness: float,
    group: str = RECONSTRUCTED_GROUP,
) -> list[PlacedElement]:
    """Materialize merged segments as axis-aligned wall boxes."""
    elements: list[PlacedElement] = []
    for seg in segments:
        if seg.orientation == Orientation.HORIZONTAL:
            position = Point3D(x=seg.midpoint, y=wall_height * 0.5, z=seg.line)
            scale = Vector3D(x=seg.length, y=wall_height, z=wall_thickness)
        else:
            position = Point3D(x=seg.line, y=wall_height * 0.5, z=seg.midpoint)
            scale = Vector3D(x=wall_thickness, y=wall_height, z=seg.length)
        elements.append(PlacedElement(
            name="Wall",
            group=group,
            kind=ElementKind.WALL,
            position=position,
            scale=scale,
        ))
    return elements
