# Igor Org Tooling — (c) 2025 — MIT Licensed
"""Global logger instance for Igor."""
import logging

logger: logging.Logger = logging.getLogger("igor")
