# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Registration records for the inputs a command declares.

- `ParameterRegistration`: type and help for a positional parameter of the pattern.
- `ArgumentRegistration`: a named, value-bearing input (`--team acme`, `-t acme`).
- `FlagRegistration`: a named, boolean input (`--admins`, `-a`).

Arguments and flags are registered with a combined identifier of the form
`"longHand[|shortHand]"`; `split_identifier` breaks it apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from igor.exceptions import MissingNameError
from igor.parser.parser_types import ValueType

Validator = Callable[[Any], bool]


def split_identifier(name: str | None, kind: str) -> tuple[str, str | None]:
    """
    Split "longHand|shortHand" into its parts.

    Raises:
        MissingNameError: If `name` is empty or has no long-hand part.
    """
    if not name:
        raise MissingNameError(f"no name found in {kind} registration")
    long_hand, _, short_hand = name.partition("|")
    if not long_hand:
        raise MissingNameError(f"no name found in {kind} registration")
    return long_hand, short_hand or None


@dataclass
class ParameterRegistration:
    """
    Represents a registered positional parameter.

    Attributes:
        name (str): Parameter name; must appear in the command pattern.
        type (ValueType | str): Declared type, "string" by default.
        description (str): Help text.
        validate (Validator | None): Predicate applied to the coerced value.
    """

    name: str
    type: ValueType | str = ValueType.STRING
    description: str = ""
    validate: Validator | None = None


@dataclass
class ArgumentRegistration:
    """
    Represents a registered named argument.

    Attributes:
        long_hand (str): Matched as `--{long_hand}`.
        short_hand (str | None): Matched as `-{short_hand}`.
        type (ValueType | str): Declared type, "string" by default.
        description (str): Help text.
        validate (Validator | None): Predicate applied to the coerced value.
    """

    long_hand: str
    short_hand: str | None = None
    type: ValueType | str = ValueType.STRING
    description: str = ""
    validate: Validator | None = None

    @property
    def tokens(self) -> list[str]:
        """The command line tokens that select this argument."""
        tokens = [f"--{self.long_hand}"]
        if self.short_hand:
            tokens.append(f"-{self.short_hand}")
        return tokens

    @property
    def dest(self) -> str:
        """Key the parsed value is stored under."""
        return self.long_hand.replace("-", "")


@dataclass
class FlagRegistration:
    """
    Represents a registered boolean flag.

    Attributes:
        long_hand (str): Matched as `--{long_hand}`.
        short_hand (str | None): Matched as `-{short_hand}`.
        description (str): Help text.
    """

    long_hand: str
    short_hand: str | None = None
    description: str = ""

    @property
    def tokens(self) -> list[str]:
        tokens = [f"--{self.long_hand}"]
        if self.short_hand:
            tokens.append(f"-{self.short_hand}")
        return tokens
