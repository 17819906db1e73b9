# Seekr Utilities Package
"""
Shared utility functions for acting on Seekr results.
"""

from .helpers import activate
from .icons import get_icon_path

__all__ = ["activate", "get_icon_path"]
