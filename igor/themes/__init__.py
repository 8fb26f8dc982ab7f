"""
Igor Org Tooling

Copyright (c) 2025.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import DEFAULT_STYLES, VALID_STYLES, get_igor_theme

__all__ = [
    "DEFAULT_STYLES",
    "VALID_STYLES",
    "get_igor_theme",
]
