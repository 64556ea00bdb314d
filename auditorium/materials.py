from typing import List, Tuple

# Define a type hint for colors (e.g., RGBA)
ColorTuple = Tuple[int, int, int, int]


def hex_to_rgba(value: int, alpha: int = 255) -> ColorTuple:
    """Converts a 0xRRGGBB integer to an RGBA tuple."""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)


BACKGROUND_COLOR: ColorTuple = hex_to_rgba(0x111111)
FLOOR_COLOR: ColorTuple = hex_to_rgba(0x4A4A4A)
WALL_COLOR: ColorTuple = hex_to_rgba(0x8B4513)   # Saddle brown
SCREEN_COLOR: ColorTuple = hex_to_rgba(0xFFFFFF)
RISER_COLOR: ColorTuple = hex_to_rgba(0x3A2F2A)
SEAT_COLOR: ColorTuple = hex_to_rgba(0x9E1B1B)   # Cinema red

# Alternative seat upholstery
SEAT_PALETTE: List[ColorTuple] = [
    SEAT_COLOR,
    hex_to_rgba(0x1B3F9E),  # Blue
    hex_to_rgba(0x2E2E2E),  # Charcoal
    hex_to_rgba(0x6B4E9E),  # Purple
]
