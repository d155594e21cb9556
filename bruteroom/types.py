from __future__ import annotations

from typing import NewType, TypeAlias

import numpy as np

# =============================================================================
# SPATIAL TYPES
# =============================================================================

# World-space vector (x, y, z). +Y is up, matching the scene's floor plane.
Vec3: TypeAlias = np.ndarray

# Unit quaternion stored as (x, y, z, w).
Quat: TypeAlias = np.ndarray

# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Represents the real-world time elapsed between two rendered frames.
# Every timer in the character controller advances by this value, never by a
# frame count, so clip playback speed matches real animation time.
DeltaTime = NewType("DeltaTime", float)

# Seconds, used for clip lengths and blend durations.
Seconds: TypeAlias = float

# =============================================================================
# ANIMATION-RELATED TYPES
# =============================================================================

# Identifier of an animation clip inside the loaded character asset.
ClipId: TypeAlias = str

# Names from the scene root down to a skeleton bone,
# e.g. ("Armature", "mixamorig:Hips").
BonePath: TypeAlias = tuple[str, ...]
