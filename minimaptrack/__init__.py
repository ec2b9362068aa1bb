"""Screen-region detection, minimap calibration and position filtering for game screenshots."""

__version__ = "0.1.0"

__all__ = [
    "api",
    "bmp",
    "cailb",
    "filters",
    "layout",
    "matching",
    "paimon",
    "position",
    "resources",
    "screen",
    "uid_label",
]