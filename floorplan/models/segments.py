"""Reconstruction-time wall intervals."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"  # Runs along X at a fixed Z
    VERTICAL = "vertical"      # Runs along Z at a fixed X


class WallSegment(BaseModel):
    """A 1D wall interval on a fixed line."""
    orientation: Orientation
    line: float   # z for horizontal, x for vertical
    start: float  # x for horizontal, z for vertical
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) * 0.5


class ReconstructionStats(BaseModel):
    """Counts reported by one reconstruction run."""
    instances_seen: int = 0
    markers_skipped: int = 0
    unclassifiable: int = 0
    too_short: int = 0
    raw_segments: int = 0
    merged_segments: int = 0


class ReconstructionResult(BaseModel):
    grid_size: float
    segments: list[WallSegment] = []
    stats: ReconstructionStats = Field(default_factory=ReconstructionStats)

    @property
    def empty(self) -> bool:
        """True when the record held no usable wall instances."""
        return self.stats.raw_segments == 0
