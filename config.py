"""
Auditorium Configuration Module

Centralized configuration management for the auditorium layout generator.
Loads settings from environment variables with sensible defaults.

Usage:
    from config import config
    rows = config.DEFAULT_ROW_COUNT
    seat_model = config.SEAT_MODEL_PATH
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from auditorium.constants import (
    DEFAULT_ROOM_DEPTH,
    DEFAULT_ROOM_HEIGHT,
    DEFAULT_ROOM_WIDTH,
    DEFAULT_ROW_COUNT,
    DEFAULT_ROW_ELEVATION,
    DEFAULT_ROW_SPACING,
    DEFAULT_SEAT_MODEL_SCALE,
    DEFAULT_SEAT_SPACING,
    DEFAULT_SEATS_PER_ROW,
    MAX_ROWS_WARNING,
    MAX_SEATS_WARNING,
)

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

_TRUE_VALUES = ('true', '1', 'yes')


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_is_malformed(name: str, cast) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return False
    try:
        cast(raw)
    except ValueError:
        return True
    return False


class Config:
    """
    Configuration class for the auditorium generator.

    Attributes are loaded from environment variables with fallback defaults.
    """

    # =============================================================================
    # Assets
    # =============================================================================

    @property
    def SEAT_MODEL_PATH(self) -> Optional[str]:
        """Path to a seat model (GLB/GLTF/OBJ); procedural seat when unset"""
        return os.getenv('SEAT_MODEL_PATH', None)

    @property
    def SEAT_MODEL_SCALE(self) -> float:
        """Uniform scale applied to the loaded seat model"""
        return _env_float('SEAT_MODEL_SCALE', DEFAULT_SEAT_MODEL_SCALE)

    # =============================================================================
    # Room Defaults
    # =============================================================================

    @property
    def DEFAULT_ROOM_WIDTH(self) -> float:
        return _env_float('DEFAULT_ROOM_WIDTH', DEFAULT_ROOM_WIDTH)

    @property
    def DEFAULT_ROOM_HEIGHT(self) -> float:
        return _env_float('DEFAULT_ROOM_HEIGHT', DEFAULT_ROOM_HEIGHT)

    @property
    def DEFAULT_ROOM_DEPTH(self) -> float:
        return _env_float('DEFAULT_ROOM_DEPTH', DEFAULT_ROOM_DEPTH)

    # =============================================================================
    # Seating Defaults
    # =============================================================================

    @property
    def DEFAULT_ROW_COUNT(self) -> int:
        """Number of seat rows"""
        return _env_int('DEFAULT_ROW_COUNT', DEFAULT_ROW_COUNT)

    @property
    def DEFAULT_SEATS_PER_ROW(self) -> int:
        return _env_int('DEFAULT_SEATS_PER_ROW', DEFAULT_SEATS_PER_ROW)

    @property
    def DEFAULT_SEAT_SPACING(self) -> float:
        """Lateral distance between seat centers"""
        return _env_float('DEFAULT_SEAT_SPACING', DEFAULT_SEAT_SPACING)

    @property
    def DEFAULT_ROW_SPACING(self) -> float:
        """Depth distance between rows"""
        return _env_float('DEFAULT_ROW_SPACING', DEFAULT_ROW_SPACING)

    @property
    def DEFAULT_ROW_ELEVATION(self) -> float:
        """Height gained per row (may be negative)"""
        return _env_float('DEFAULT_ROW_ELEVATION', DEFAULT_ROW_ELEVATION)

    # =============================================================================
    # File Paths
    # =============================================================================

    @property
    def PROJECT_ROOT(self) -> Path:
        """Project root directory"""
        return Path(__file__).parent

    @property
    def EXPORT_DIR(self) -> Path:
        """Default directory for GLB exports and snapshots"""
        export_dir = Path(os.getenv('EXPORT_DIR', 'exports'))
        if not export_dir.is_absolute():
            export_dir = self.PROJECT_ROOT / export_dir
        export_dir.mkdir(parents=True, exist_ok=True)
        return export_dir

    # =============================================================================
    # Debug/Development
    # =============================================================================

    @property
    def DEBUG(self) -> bool:
        """Enable debug mode"""
        return os.getenv('DEBUG', 'False').lower() in _TRUE_VALUES

    @property
    def VERBOSE(self) -> bool:
        """Print one line per placed object while building the scene"""
        return os.getenv('VERBOSE', 'False').lower() in _TRUE_VALUES

    # =============================================================================
    # Helper Methods
    # =============================================================================

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of warnings/errors.

        Returns:
            List of warning/error messages (empty if all OK)
        """
        issues = []

        if self.SEAT_MODEL_PATH:
            model_path = Path(self.SEAT_MODEL_PATH)
            if not model_path.exists():
                issues.append(f"Seat model path does not exist: {self.SEAT_MODEL_PATH}")
            elif not model_path.is_file():
                issues.append(f"Seat model path is not a file: {self.SEAT_MODEL_PATH}")

        float_settings = ('SEAT_MODEL_SCALE', 'DEFAULT_ROOM_WIDTH', 'DEFAULT_ROOM_HEIGHT', 'DEFAULT_ROOM_DEPTH',
                          'DEFAULT_SEAT_SPACING', 'DEFAULT_ROW_SPACING', 'DEFAULT_ROW_ELEVATION')
        for name in float_settings:
            if _env_is_malformed(name, float):
                issues.append(f"{name} is not a number: {os.getenv(name)!r} (using default)")
        for name in ('DEFAULT_ROW_COUNT', 'DEFAULT_SEATS_PER_ROW'):
            if _env_is_malformed(name, int):
                issues.append(f"{name} is not an integer: {os.getenv(name)!r} (using default)")

        if self.SEAT_MODEL_SCALE <= 0:
            issues.append("Seat model scale must be positive")
        if self.DEFAULT_ROOM_WIDTH <= 0 or self.DEFAULT_ROOM_HEIGHT <= 0 or self.DEFAULT_ROOM_DEPTH <= 0:
            issues.append("Default room dimensions must be positive")
        if self.DEFAULT_ROW_COUNT < 1 or self.DEFAULT_SEATS_PER_ROW < 1:
            issues.append("Default row count and seats per row must be at least 1")
        if self.DEFAULT_SEAT_SPACING <= 0 or self.DEFAULT_ROW_SPACING <= 0:
            issues.append("Default seat and row spacing must be positive")
        if self.DEFAULT_ROW_COUNT > MAX_ROWS_WARNING:
            issues.append(f"Default row count {self.DEFAULT_ROW_COUNT} exceeds {MAX_ROWS_WARNING}")
        if self.DEFAULT_ROW_COUNT * self.DEFAULT_SEATS_PER_ROW > MAX_SEATS_WARNING:
            issues.append(f"Default layout has more than {MAX_SEATS_WARNING} seats")
        if self.DEFAULT_ROW_ELEVATION < 0:
            issues.append("Default row elevation is negative; later risers may be degenerate")

        return issues

    def get_summary(self) -> str:
        """
        Get human-readable configuration summary.

        Returns:
            Formatted configuration summary string
        """
        lines = [
            "Auditorium Configuration:",
            f"  Project Root: {self.PROJECT_ROOT}",
            f"  Export Dir: {self.EXPORT_DIR}",
            "",
            "Assets:",
            f"  Seat Model: {self.SEAT_MODEL_PATH if self.SEAT_MODEL_PATH else '✗ Not set (procedural seat)'}",
            f"  Seat Model Scale: {self.SEAT_MODEL_SCALE}",
            "",
            "Room:",
            f"  Dimensions: {self.DEFAULT_ROOM_WIDTH}x{self.DEFAULT_ROOM_HEIGHT}x{self.DEFAULT_ROOM_DEPTH}",
            "",
            "Seating:",
            f"  Rows x Seats: {self.DEFAULT_ROW_COUNT}x{self.DEFAULT_SEATS_PER_ROW}",
            f"  Seat Spacing: {self.DEFAULT_SEAT_SPACING}",
            f"  Row Spacing: {self.DEFAULT_ROW_SPACING}",
            f"  Row Elevation: {self.DEFAULT_ROW_ELEVATION}",
            "",
            "Debug:",
            f"  Debug mode: {self.DEBUG}",
            f"  Verbose: {self.VERBOSE}",
        ]
        return "\n".join(lines)


# Global config instance
config = Config()


def check_config():
    """
    Check configuration and print warnings.
    Call this at application startup.
    """
    issues = config.validate()
    if issues:
        print("⚠️  Configuration Warnings:")
        for issue in issues:
            print(f"   - {issue}")
        print()


if __name__ == "__main__":
    # Allow running as script to check configuration
    print(config.get_summary())
    print()

    issues = config.validate()
    if issues:
        print("⚠️  Issues found:")
        for issue in issues:
            print(f"   - {issue}")
    else:
        print("✅ Configuration valid!")
