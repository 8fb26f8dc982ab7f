"""
Igor Org Tooling

Copyright (c) 2025.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import Command
from .context import ExecutionContext, build_context
from .dispatcher import Dispatcher
from .registry import CommandRegistry

__all__ = [
    "Command",
    "CommandRegistry",
    "Dispatcher",
    "ExecutionContext",
    "build_context",
]
