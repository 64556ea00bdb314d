"""Stadium seating layout: risers and seat slots computed from a handful of numbers.

Rows are numbered from the viewer-entry side toward the screen wall. Every row
except the last stands on a solid riser block that runs from the floor up to the
row's riser top; the last row sits at a fixed floor height with no platform.
Nothing here touches meshes or renderers: the functions return plain value
records that a scene host turns into geometry.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass, fields
from numbers import Integral, Real
from typing import Any, Dict, Iterator, List, NamedTuple, Tuple, Union

from .constants import (
    DEFAULT_ROOM_DEPTH,
    DEFAULT_ROOM_HEIGHT,
    DEFAULT_ROOM_WIDTH,
    DEFAULT_ROW_COUNT,
    DEFAULT_ROW_ELEVATION,
    DEFAULT_ROW_SPACING,
    DEFAULT_SEAT_SPACING,
    DEFAULT_SEATS_PER_ROW,
    FLOOR_ROW_SEAT_HEIGHT,
    MIN_ROW_COUNT,
    MIN_SEATS_PER_ROW,
    RISER_MARGIN,
    SEAT_HEIGHT_OFFSET,
    SEAT_VERTICAL_OFFSET,
    SEAT_YAW,
    get_row_anchor_depth,
)

Vector3 = Tuple[float, float, float]


class InvalidParameters(ValueError):
    """Raised when layout parameters cannot describe a seating arrangement."""


@dataclass(frozen=True)
class LayoutParameters:
    room_width: float = DEFAULT_ROOM_WIDTH
    room_depth: float = DEFAULT_ROOM_DEPTH
    room_height: float = DEFAULT_ROOM_HEIGHT
    row_count: int = DEFAULT_ROW_COUNT
    seats_per_row: int = DEFAULT_SEATS_PER_ROW
    seat_spacing: float = DEFAULT_SEAT_SPACING
    row_spacing: float = DEFAULT_ROW_SPACING
    row_elevation: float = DEFAULT_ROW_ELEVATION

    @classmethod
    def from_config(cls, config: Any) -> "LayoutParameters":
        """Build parameters from the DEFAULT_* settings of a Config object."""
        return cls(
            room_width=config.DEFAULT_ROOM_WIDTH,
            room_depth=config.DEFAULT_ROOM_DEPTH,
            room_height=config.DEFAULT_ROOM_HEIGHT,
            row_count=config.DEFAULT_ROW_COUNT,
            seats_per_row=config.DEFAULT_SEATS_PER_ROW,
            seat_spacing=config.DEFAULT_SEAT_SPACING,
            row_spacing=config.DEFAULT_ROW_SPACING,
            row_elevation=config.DEFAULT_ROW_ELEVATION,
        )


class RiserElevation(NamedTuple):
    top_height: float
    thickness: float
    center_y: float


@dataclass(frozen=True)
class RiserSpec:
    row: int
    position: Vector3  # Block center
    size: Vector3  # Width (X), thickness (Y), depth (Z)


@dataclass(frozen=True)
class SeatSlot:
    row: int
    seat: int
    position: Vector3
    yaw: float  # Radians about +Y


@dataclass(frozen=True)
class Layout:
    risers: Tuple[RiserSpec, ...]
    seats: Tuple[SeatSlot, ...]


Placement = Union[RiserSpec, SeatSlot]


def validate_parameters(params: LayoutParameters) -> None:
    """
    Reject parameters that cannot produce a layout.

    Counts must be integers of at least one, spacings strictly positive, and
    every numeric field finite. A negative row elevation is accepted: the
    resulting risers may be degenerate, see get_layout_metrics().

    Raises:
        InvalidParameters: On the first offending field.
    """
    for item in fields(params):
        value = getattr(params, item.name)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidParameters(f"{item.name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidParameters(f"{item.name} must be finite, got {value!r}")

    if not isinstance(params.row_count, Integral):
        raise InvalidParameters(f"row_count must be an integer, got {params.row_count!r}")
    if not isinstance(params.seats_per_row, Integral):
        raise InvalidParameters(f"seats_per_row must be an integer, got {params.seats_per_row!r}")
    if params.row_count < MIN_ROW_COUNT:
        raise InvalidParameters(f"row_count must be at least {MIN_ROW_COUNT}, got {params.row_count}")
    if params.seats_per_row < MIN_SEATS_PER_ROW:
        raise InvalidParameters(
            f"seats_per_row must be at least {MIN_SEATS_PER_ROW}, got {params.seats_per_row}"
        )
    if params.seat_spacing <= 0:
        raise InvalidParameters(f"seat_spacing must be positive, got {params.seat_spacing}")
    if params.row_spacing <= 0:
        raise InvalidParameters(f"row_spacing must be positive, got {params.row_spacing}")


# --- Riser elevation model ---

def row_elevation(row: int, elevation_step: float) -> float:
    """Cumulative elevation of a row."""
    return row * elevation_step


def riser_elevation(row: int, elevation_step: float) -> RiserElevation:
    """
    Vertical extent of the riser under a row.

    The riser is a solid block pinned to the floor, so its thickness equals its
    top height and its center sits halfway up. Negative steps are not clamped;
    the thickness can reach zero or go negative for later rows.
    """
    top_height = row_elevation(row, elevation_step) + SEAT_HEIGHT_OFFSET
    return RiserElevation(top_height=top_height, thickness=top_height, center_y=top_height / 2.0)


def has_riser(row: int, params: LayoutParameters) -> bool:
    return row < params.row_count - 1


# --- Placement grid ---

def seat_x(seat: int, params: LayoutParameters) -> float:
    return (seat - (params.seats_per_row - 1) / 2.0) * params.seat_spacing


def row_depth(row: int, params: LayoutParameters) -> float:
    return get_row_anchor_depth(params.room_depth) - row * params.row_spacing


def seat_height(row: int, params: LayoutParameters) -> float:
    if not has_riser(row, params):
        return FLOOR_ROW_SEAT_HEIGHT
    return riser_elevation(row, params.row_elevation).top_height + SEAT_VERTICAL_OFFSET


def seat_slot(row: int, seat: int, params: LayoutParameters) -> SeatSlot:
    position = (seat_x(seat, params), seat_height(row, params), row_depth(row, params))
    return SeatSlot(row=row, seat=seat, position=position, yaw=SEAT_YAW)


def riser_spec(row: int, params: LayoutParameters) -> RiserSpec:
    """
    Riser block for a row. The last row has none; asking for it is an error.

    Adjacent risers share a face: each is row_spacing deep and centered on its
    row's depth coordinate.
    """
    if not has_riser(row, params):
        raise ValueError(f"Row {row} is the floor-level row and has no riser")
    elevation = riser_elevation(row, params.row_elevation)
    return RiserSpec(
        row=row,
        position=(0.0, elevation.center_y, row_depth(row, params)),
        size=(params.room_width - RISER_MARGIN, elevation.thickness, params.row_spacing),
    )


# --- Assembly ---

def _placements(params: LayoutParameters) -> Iterator[Placement]:
    for row in range(params.row_count):
        if has_riser(row, params):
            yield riser_spec(row, params)
        for seat in range(params.seats_per_row):
            yield seat_slot(row, seat, params)


def iter_placements(params: LayoutParameters) -> Iterator[Placement]:
    """
    Lazily yield every riser and seat, row by row.

    Parameters are checked before the iterator is returned, so a bad
    configuration fails here rather than on the first next().
    """
    validate_parameters(params)
    return _placements(params)


def generate_layout(params: LayoutParameters) -> Layout:
    """
    Compute every riser and seat placement for a parameter set.

    Returns:
        Layout with R - 1 risers and R * S seats, both in row order.

    Raises:
        InvalidParameters: If the parameters are rejected by validate_parameters().
    """
    validate_parameters(params)
    return _build_layout(params)


# Keyed on dataclass equality, so 5 and 5.0 share an entry; callers validate first
@functools.lru_cache(maxsize=64)
def _build_layout(params: LayoutParameters) -> Layout:
    risers: List[RiserSpec] = []
    seats: List[SeatSlot] = []
    for placement in _placements(params):
        if isinstance(placement, RiserSpec):
            risers.append(placement)
        else:
            seats.append(placement)
    return Layout(risers=tuple(risers), seats=tuple(seats))


def _bounds(points: List[Vector3]) -> Dict[str, List[float]]:
    if not points:
        return {"min": [0.0, 0.0, 0.0], "max": [0.0, 0.0, 0.0]}
    return {
        "min": [min(p[axis] for p in points) for axis in range(3)],
        "max": [max(p[axis] for p in points) for axis in range(3)],
    }


def get_layout_metrics(layout: Layout, params: LayoutParameters) -> Dict[str, Any]:
    """Summary numbers for a generated layout, including degenerate riser rows."""
    riser_corners: List[Vector3] = []
    for riser in layout.risers:
        x, y, z = riser.position
        width, thickness, depth = riser.size
        riser_corners.append((x - width / 2.0, y - thickness / 2.0, z - depth / 2.0))
        riser_corners.append((x + width / 2.0, y + thickness / 2.0, z + depth / 2.0))

    row_heights: Dict[int, float] = {}
    for slot in layout.seats:
        row_heights.setdefault(slot.row, slot.position[1])

    return {
        "rows": params.row_count,
        "seats_per_row": params.seats_per_row,
        "seat_count": len(layout.seats),
        "riser_count": len(layout.risers),
        "seat_bounds": _bounds([slot.position for slot in layout.seats]),
        "riser_bounds": _bounds(riser_corners),
        "row_seat_heights": [row_heights[row] for row in sorted(row_heights)],
        "degenerate_riser_rows": [riser.row for riser in layout.risers if riser.size[1] <= 0],
    }
