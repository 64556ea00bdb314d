"""
Auditorium Constants Module

Centralized constants for the auditorium layout generator.
Keeps the fixed offsets, room defaults and renderer settings in one place.

Usage:
    from auditorium.constants import SEAT_HEIGHT_OFFSET, RISER_MARGIN
"""

import math

# =============================================================================
# Room Envelope
# =============================================================================

DEFAULT_ROOM_WIDTH = 20.0  # X extent
DEFAULT_ROOM_HEIGHT = 10.0  # Y extent (walls and screen only)
DEFAULT_ROOM_DEPTH = 25.0  # Z extent

FLOOR_LEVEL = 0.0  # Y-coordinate of the room floor
WALL_THICKNESS = 0.1
FLOOR_THICKNESS = 0.05

# Screen on the -Z wall
SCREEN_WIDTH_RATIO = 0.8  # Fraction of room width
SCREEN_HEIGHT_RATIO = 0.6  # Fraction of room height
SCREEN_CENTER_HEIGHT_RATIO = 0.5  # Screen center Y as fraction of room height
SCREEN_WALL_OFFSET = 0.1  # Distance in front of the back wall
SCREEN_THICKNESS = 0.02

# =============================================================================
# Seating Arrangement Defaults
# =============================================================================

DEFAULT_ROW_COUNT = 5
DEFAULT_SEATS_PER_ROW = 8
DEFAULT_SEAT_SPACING = 2.0  # Lateral distance between seat centers
DEFAULT_ROW_SPACING = 2.5  # Depth distance between row centers
DEFAULT_ROW_ELEVATION = 0.5  # Height gained per row index

# First row sits a quarter of the room depth in front of the room center
ROW_ANCHOR_DEPTH_RATIO = 0.25

# =============================================================================
# Riser and Seat Offsets
# =============================================================================

SEAT_HEIGHT_OFFSET = 0.5  # Riser top above the row's cumulative elevation
SEAT_VERTICAL_OFFSET = 0.5  # Seat origin above the riser top
FLOOR_ROW_SEAT_HEIGHT = 0.5  # Seat origin height for the riser-less row
RISER_MARGIN = 2.0  # Riser width is the room width minus this inset

# Yaw about +Y that turns a +X facing seat toward the -Z screen wall
SEAT_YAW = 0.5 * math.pi

# =============================================================================
# Seat Prototype (procedural fallback, faces +X, centered on its origin)
# =============================================================================

SEAT_PROTOTYPE_WIDTH = 0.9  # Along Z once unrotated (shoulder width)
SEAT_PROTOTYPE_DEPTH = 0.9  # Along X
SEAT_PROTOTYPE_HEIGHT = 1.0  # Total height, so the base is half of it below the origin
SEAT_PAN_THICKNESS = 0.15
SEAT_PAN_HEIGHT = 0.45  # Pan top above the prototype base
SEAT_BACK_THICKNESS = 0.12
SEAT_ARM_WIDTH = 0.08
SEAT_ARM_HEIGHT = 0.65

DEFAULT_SEAT_MODEL_SCALE = 1.0

# =============================================================================
# Camera and Lighting (Scene Host)
# =============================================================================

CAMERA_FOV = 75.0  # Vertical field of view in degrees
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
CAMERA_POSITION = (0.0, 5.0, 15.0)
CAMERA_FOCAL_POINT = (0.0, 0.0, 0.0)
CAMERA_VIEW_UP = (0.0, 1.0, 0.0)

AMBIENT_LIGHT_INTENSITY = 0.5
SPOT_LIGHT_INTENSITY = 1.0
SPOT_LIGHT_POSITION = (0.0, 10.0, 10.0)

# =============================================================================
# Object Kinds
# =============================================================================

KIND_FLOOR = "floor"
KIND_WALL = "wall"
KIND_SCREEN = "screen"
KIND_RISER = "riser"
KIND_SEAT = "seat"

# =============================================================================
# File I/O
# =============================================================================

FILE_EXT_GLB = ".glb"
FILE_EXT_PNG = ".png"
DEFAULT_EXPORT_NAME = "auditorium"

# =============================================================================
# Validation
# =============================================================================

MIN_ROW_COUNT = 1
MIN_SEATS_PER_ROW = 1

# Rows beyond this are accepted but flagged by Config.validate()
MAX_ROWS_WARNING = 200
MAX_SEATS_WARNING = 10000

# =============================================================================
# Utility Functions
# =============================================================================

def get_screen_dimensions(room_width: float, room_height: float) -> tuple:
    """
    Calculate the screen size for a room.

    Args:
        room_width: Room extent along X
        room_height: Room extent along Y

    Returns:
        (screen_width, screen_height)
    """
    return room_width * SCREEN_WIDTH_RATIO, room_height * SCREEN_HEIGHT_RATIO


def get_row_anchor_depth(room_depth: float) -> float:
    """Depth coordinate of row 0."""
    return room_depth * ROW_ANCHOR_DEPTH_RATIO


# =============================================================================
# Version Information
# =============================================================================

AUDITORIUM_VERSION = "0.3.0"