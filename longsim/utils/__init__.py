"""
LongSim Utilities Package.
Internal utilities - not part of public API.
"""

from . import validators, visualization

__all__ = [
    "validators",
    "visualization",
]
