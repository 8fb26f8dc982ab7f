# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Output styles used by the Igor console.

Every message Igor prints to the terminal is rendered with one of seven named
styles. The defaults can be overridden per user through the `colors` section of
the Igor config file (see `igor.console.apply_color_overrides`).

Styles:
- title: command names, section headers
- gen: general output
- success: completed steps
- warn: warnings and cancellations
- error: error reports
- debug: diagnostic output
- complete: final "all done" messages
"""
from rich.theme import Theme

DEFAULT_STYLES: dict[str, str] = {
    "title": "cyan",
    "gen": "white",
    "success": "green",
    "warn": "yellow",
    "error": "red",
    "debug": "grey50",
    "complete": "magenta",
}

VALID_STYLES = frozenset(DEFAULT_STYLES)


def get_igor_theme(overrides: dict[str, str] | None = None) -> Theme:
    """Build the rich Theme for the console, applying any style overrides."""
    return Theme({**DEFAULT_STYLES, **(overrides or {})})
