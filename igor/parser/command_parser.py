# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
This module implements `CommandParser`, the declaration and parsing engine behind
every Igor command.

A command declares three kinds of input:

- Parameters: positional values, bound in the order given by the pattern.
- Arguments: named values, `--longHand value` or `-shortHand value`.
- Flags: named booleans, present (`--longHand` / `-shortHand`) or absent.

Parsing is destructive on a working copy of the token list and always runs in
the same order: arguments, then flags, then parameters. Each stage removes the
tokens it consumed, so later stages only see what earlier stages left behind and
an argument value can never be mistaken for a positional parameter.

Example Usage:
    parser = CommandParser("<greet> <name> <times?>")
    parser.parameter("name")
    parser.parameter("times", type="int")
    parser.flag("loud|l")

    parsed = parser.parse_tokens(["Ada", "--loud"])

    # parsed.parameters == {"name": "Ada"}
    # parsed.flags == {"loud": True}
    # parsed.arguments == {}
"""
from __future__ import annotations

from typing import Any

from igor.context import ExecutionContext, ParsedInput
from igor.exceptions import (
    DuplicateIdentifierError,
    DuplicateParameterError,
    MissingNameError,
    MissingRequiredParameterError,
    MissingValueError,
    TooManyParametersError,
    UnknownParameterError,
    UnregisteredParameterError,
    ValidationError,
)
from igor.logger import logger
from igor.parser.pattern import CompiledPattern, compile_pattern
from igor.parser.registration import (
    ArgumentRegistration,
    FlagRegistration,
    ParameterRegistration,
    split_identifier,
)
from igor.parser.utils import cast_to_type


class CommandParser:
    """
    Declares and parses the input of a single command.

    Registration methods return the parser so declarations can be chained:

        parser.argument("team|t").flag("admins|a")

    Attributes:
        pattern (CompiledPattern): Command name and positional descriptors.
        parameters (dict[str, ParameterRegistration]): Keyed by parameter name.
        arguments (dict[str, ArgumentRegistration]): Keyed by long-hand, in
            registration order.
        flags (dict[str, FlagRegistration]): Keyed by long-hand, in registration
            order.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern: CompiledPattern = compile_pattern(pattern)
        self.parameters: dict[str, ParameterRegistration] = {}
        self.arguments: dict[str, ArgumentRegistration] = {}
        self.flags: dict[str, FlagRegistration] = {}

    @property
    def command_name(self) -> str:
        return self.pattern.command_name

    def _registered_identifiers(self) -> dict[str, str]:
        identifiers: dict[str, str] = {}
        for kind, registry in (("argument", self.arguments), ("flag", self.flags)):
            for registration in registry.values():
                identifiers[registration.long_hand] = kind
                if registration.short_hand:
                    identifiers[registration.short_hand] = kind
        return identifiers

    def assert_unregistered(self, long_hand: str, short_hand: str | None = None) -> None:
        """
        Check that neither identifier is used by a registered argument or flag.

        Raises:
            DuplicateIdentifierError: Naming the colliding identifier and its kind.
        """
        taken = self._registered_identifiers()
        for identifier in (long_hand, short_hand):
            if identifier and identifier in taken:
                raise DuplicateIdentifierError(identifier, taken[identifier])

    def argument(
        self,
        name: str,
        *,
        type: Any = "string",
        description: str = "",
        validate: Any = None,
    ) -> CommandParser:
        """
        Register a named, value-bearing argument.

        Args:
            name (str): "longHand[|shortHand]", e.g. "team|t".
            type (ValueType | str): Declared type of the value.
            description (str): Help text.
            validate (Callable[[Any], bool] | None): Predicate for the coerced value.

        Raises:
            MissingNameError: If `name` is empty.
            DuplicateIdentifierError: If either identifier is already taken.
        """
        long_hand, short_hand = split_identifier(name, "argument")
        self.assert_unregistered(long_hand, short_hand)
        self.arguments[long_hand] = ArgumentRegistration(
            long_hand=long_hand,
            short_hand=short_hand,
            type=type,
            description=description,
            validate=validate,
        )
        return self

    def flag(self, name: str, *, description: str = "") -> CommandParser:
        """
        Register a boolean flag.

        Raises:
            MissingNameError: If `name` is empty.
            DuplicateIdentifierError: If either identifier is already taken.
        """
        long_hand, short_hand = split_identifier(name, "flag")
        self.assert_unregistered(long_hand, short_hand)
        self.flags[long_hand] = FlagRegistration(
            long_hand=long_hand, short_hand=short_hand, description=description
        )
        return self

    def parameter(
        self,
        name: str,
        *,
        type: Any = "string",
        description: str = "",
        validate: Any = None,
    ) -> CommandParser:
        """
        Register type and help for a parameter declared in the pattern.

        Raises:
            MissingNameError: If `name` is empty.
            UnknownParameterError: If the pattern has no parameter called `name`.
            DuplicateParameterError: If `name` is already registered.
        """
        if not name:
            raise MissingNameError("no name found in parameter registration")
        if name not in self.pattern:
            raise UnknownParameterError(f"{name} was not specified in pattern")
        if name in self.parameters:
            raise DuplicateParameterError(f"{name} is already a registered parameter")
        self.parameters[name] = ParameterRegistration(
            name=name, type=type, description=description, validate=validate
        )
        return self

    def parse_arguments(self, tokens: list[str]) -> dict[str, Any]:
        """
        Extract registered arguments and their values from `tokens`.

        Consumed tokens are removed from `tokens` in place.

        Raises:
            MissingValueError: If an argument token is the last token.
            InvalidTypeError: If the value does not coerce to the declared type.
            ValidationError: If the value fails the argument's validator.
        """
        parsed: dict[str, Any] = {}
        for registration in self.arguments.values():
            for token in registration.tokens:
                if token not in tokens:
                    continue
                index = tokens.index(token)
                if index + 1 >= len(tokens):
                    raise MissingValueError(f"no value passed to {token}")
                value = cast_to_type(tokens[index + 1], registration.type)
                if registration.validate is not None and not registration.validate(value):
                    raise ValidationError(f"{registration.long_hand} failed validation")
                parsed[registration.dest] = value
                del tokens[index : index + 2]
        return parsed

    def parse_flags(self, tokens: list[str]) -> dict[str, bool]:
        """
        Resolve every registered flag to True or False.

        One occurrence of each matching form (`--long`, `-short`) is removed from
        `tokens` in place.
        """
        parsed: dict[str, bool] = {}
        for registration in self.flags.values():
            parsed[registration.long_hand] = False
            for token in registration.tokens:
                if token in tokens:
                    tokens.remove(token)
                    parsed[registration.long_hand] = True
        return parsed

    def parse_parameters(self, tokens: list[str]) -> dict[str, Any]:
        """
        Bind the remaining tokens to the pattern's parameters by position.

        Raises:
            TooManyParametersError: If more tokens remain than the pattern declares.
            UnregisteredParameterError: If a value binds to an unregistered parameter.
            MissingRequiredParameterError: If a required parameter has no value.
            InvalidTypeError: If a value does not coerce to the declared type.
            ValidationError: If a value fails the parameter's validator.
        """
        descriptors = self.pattern.parameters
        if len(tokens) > len(descriptors):
            raise TooManyParametersError(
                f"invalid command structure - expected {len(descriptors)} "
                f"parameters, but found {len(tokens)}"
            )

        parsed: dict[str, Any] = {}
        for index, descriptor in enumerate(descriptors):
            if index >= len(tokens):
                if descriptor.required:
                    raise MissingRequiredParameterError(f"{descriptor.name} is required")
                continue
            registration = self.parameters.get(descriptor.name)
            if registration is None:
                raise UnregisteredParameterError(
                    f"{descriptor.name} is not a registered parameter"
                )
            value = cast_to_type(tokens[index], registration.type)
            if registration.validate is not None and not registration.validate(value):
                raise ValidationError(f"{descriptor.name} failed validation")
            parsed[descriptor.name] = value
        return parsed

    def parse_tokens(self, tokens: list[str]) -> ParsedInput:
        """Parse a token list without modifying it."""
        working = list(tokens)
        arguments = self.parse_arguments(working)
        flags = self.parse_flags(working)
        parameters = self.parse_parameters(working)
        return ParsedInput(parameters=parameters, arguments=arguments, flags=flags)

    def parse(self, context: ExecutionContext) -> ExecutionContext:
        """Parse `context.args` and store the result on `context.arguments`."""
        context.arguments = self.parse_tokens(context.args)
        logger.debug(
            "[%s] Parsed %r -> %r",
            self.command_name,
            context.args,
            context.arguments.model_dump(),
        )
        return context

    def __str__(self) -> str:
        return (
            f"CommandParser(command={self.command_name!r}, "
            f"parameters={list(self.parameters)}, arguments={list(self.arguments)}, "
            f"flags={list(self.flags)})"
        )
