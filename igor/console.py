# Igor Org Tooling — (c) 2025 — MIT Licensed
"""Global console instance for Igor and user color configuration."""
from rich.color import Color, ColorParseError
from rich.console import Console

from igor.logger import logger
from igor.themes import DEFAULT_STYLES, VALID_STYLES, get_igor_theme

console = Console(theme=get_igor_theme())


def apply_color_overrides(colors: dict[str, str] | None) -> dict[str, str]:
    """
    Validate user supplied style colors and push them onto the console theme.

    Unknown style names and colors rich cannot parse are skipped with a warning.

    Args:
        colors (dict[str, str] | None): Mapping of style name to color.

    Returns:
        dict[str, str]: The effective style mapping after overrides.
    """
    validated: dict[str, str] = {}
    for style, color in (colors or {}).items():
        if style not in VALID_STYLES:
            logger.warning("Invalid style 'config.colors.%s'.", style)
            continue
        try:
            Color.parse(color)
        except ColorParseError:
            logger.warning(
                "Invalid color '%s' for option 'config.colors.%s'.", color, style
            )
            continue
        validated[style] = color

    if validated:
        console.push_theme(get_igor_theme(validated))
    return {**DEFAULT_STYLES, **validated}
