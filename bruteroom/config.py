"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

import logging
import math
import sys
from pathlib import Path

from bruteroom.types import BonePath

# =============================================================================
# GENERAL
# =============================================================================

PROJECT_ROOT_PATH = Path(__file__).resolve().parent.parent

# Test environment detection
IS_TEST_ENVIRONMENT = "pytest" in sys.modules

# Root logger level applied by the entry point.
LOG_LEVEL = logging.INFO

# =============================================================================
# DISPLAY
# =============================================================================

# Main window
WINDOW_TITLE = "Brute Room"

# Window size in pixels
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

VSYNC = True
TARGET_FPS: float | None = 60

FPS_SAMPLE_SIZE = 256  # Number of frame time samples to track

# =============================================================================
# CHARACTER CONTROL
# =============================================================================

# Time reserved at the end of a bounded action (turn, attack, jump) for
# blending back to Idle. Turns also perform their visual rotation in it.
TRANSITION_OVERLAP = 1.0

# Blend used when starting or stopping locomotion.
LOCOMOTION_BLEND = 0.25
STOP_BLEND = 0.25

# Blend used when starting a bounded action.
ONE_SHOT_BLEND = 0.5

# Bone that carries root motion in the brute rig.
ROOT_MOTION_BONE_PATH: BonePath = ("Armature", "mixamorig:Hips")

# The rig's skeleton root lies on its back: every canonical orientation is
# combined with this rotation about +X.
RIG_TILT = math.pi / 2

# =============================================================================
# WORLD
# =============================================================================

CHARACTER_ASSET = "brute.glb"

# Floor and wall tile edge length in metres.
TILE_SIZE = 6.0

# Tiles from the centre to each wall; the floor is (2 * TILE_COUNT + 1)^2 tiles.
TILE_COUNT = 8

# Stacked rows of wall tiles around the room.
WALL_ROWS = 2

FLOOR_TEXTURE = "ground.jpg"
WALL_TEXTURE = "wall.jpg"
SURFACE_ROUGHNESS = 1.0

FOG_COLOR = (0.05, 0.05, 0.05, 1.0)

# Directional light
LIGHT_TILT = -math.pi / 4
LIGHT_INITIAL_YAW = 1.0
LIGHT_ROTATION_PERIOD = 100.0  # Seconds per full turn of the sun
LIGHT_SHADOWS_ENABLED = True
SHADOW_CASCADE_COUNT = 20  # first cascade covers 1/20 of the shadow range

# =============================================================================
# CAMERA
# =============================================================================

CAMERA_DISTANCE = 4.0  # Behind the character
CAMERA_HEIGHT = 2.0  # Above the character's origin
CAMERA_TARGET_HEIGHT = 1.0  # Look-at point above the character's origin

# 0.0 follows exactly; values towards 1.0 lag further behind.
CAMERA_LAG_WEIGHT = 0.0
