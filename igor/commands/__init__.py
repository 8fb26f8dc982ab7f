"""
Igor Org Tooling

Copyright (c) 2025.
Licensed under the MIT License. See LICENSE file for details.
"""

from igor.registry import CommandRegistry

from .addmember import AddMemberCommand
from .help import HelpCommand
from .listmembers import ListMembersCommand
from .printversion import PrintVersionCommand
from .removemember import RemoveMemberCommand
from .searchrepos import SearchReposCommand


def build_registry() -> CommandRegistry:
    """Build the static table of Igor commands."""
    return CommandRegistry(
        [
            AddMemberCommand(),
            HelpCommand(),
            ListMembersCommand(),
            PrintVersionCommand(),
            RemoveMemberCommand(),
            SearchReposCommand(),
        ]
    )


__all__ = [
    "AddMemberCommand",
    "HelpCommand",
    "ListMembersCommand",
    "PrintVersionCommand",
    "RemoveMemberCommand",
    "SearchReposCommand",
    "build_registry",
]
