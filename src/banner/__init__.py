"""Banner package: re-export the animation entities and scene.

    from banner import BannerState, BANNER_VARIANTS
"""

from .sky import Star, ShootingStar
from .orbit import Planet, Moon, moon_radius, angular_velocity, darker_shade
from .shutter import Shutter, ShutterState
from .state import BannerConfig, BannerState, BANNER_VARIANTS

__all__ = [
    "Star",
    "ShootingStar",
    "Planet",
    "Moon",
    "moon_radius",
    "angular_velocity",
    "darker_shade",
    "Shutter",
    "ShutterState",
    "BannerConfig",
    "BannerState",
    "BANNER_VARIANTS",
]
