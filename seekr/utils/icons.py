"""
Icon lookup - Resolve desktop-entry icon names to image files.

Only used to decorate results; ranking and dispatch never depend on it.
"""

import os
from typing import Optional

ICON_DIRS = (
    "/usr/share/pixmaps",
    "/usr/share/icons/hicolor/48x48/apps",
    "/usr/share/icons/hicolor/scalable/apps",
)
ICON_EXTENSIONS = ("", ".png", ".svg", ".xpm")


def get_icon_path(icon_name: Optional[str], icon_dirs=ICON_DIRS) -> Optional[str]:
    """
    Resolve an icon name to a readable file.

    Args:
        icon_name: Icon= value from a desktop entry
        icon_dirs: Directories to look in, in order

    Returns:
        Full path of the first readable match, or None
    """
    if not icon_name:
        return None

    for directory in icon_dirs:
        for ext in ICON_EXTENSIONS:
            full_path = os.path.join(directory, icon_name + ext)
            if os.path.isfile(full_path) and os.access(full_path, os.R_OK):
                return full_path

    return None
