"""Errors raised at the input boundary of the builder and reconstructor."""

from __future__ import annotations


class FloorPlanError(ValueError):
    """A floor plan definition could not be loaded or validated."""


class LayoutRecordError(ValueError):
    """A layout record is missing, unparsable, or has no groups."""
