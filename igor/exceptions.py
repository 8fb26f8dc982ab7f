# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Defines all custom exception classes used by Igor.

Every error carries a `fatal` marker. The dispatcher reports every error it
catches, but only fatal errors end the process with a non-zero exit status;
ordinary errors (e.g. "no results found") are reported and the process exits 0.

Exception Hierarchy:
- IgorError                       (fatal=False)
    ├── NoResultsError
    └── FatalError                (fatal=True)
        ├── CommandDeclarationError
        │   ├── PatternOrderError
        │   ├── MissingNameError
        │   ├── UnknownParameterError
        │   ├── DuplicateParameterError
        │   └── DuplicateIdentifierError
        ├── CommandArgumentError
        │   ├── InvalidTypeError
        │   ├── MissingValueError
        │   ├── ValidationError
        │   ├── TooManyParametersError
        │   ├── MissingRequiredParameterError
        │   └── UnregisteredParameterError
        ├── DispatchError
        ├── ConfigError
        └── GithubError

Declaration errors are command-author mistakes raised while a command registers
its parameters, arguments and flags. Argument errors are end-user input mistakes
raised while parsing a command line.
"""


class IgorError(Exception):
    """Base exception for Igor."""

    fatal: bool = False

    def __init__(self, message: str = "", *, fatal: bool | None = None):
        super().__init__(message)
        if fatal is not None:
            self.fatal = fatal


class FatalError(IgorError):
    """Error that ends the process with a non-zero exit status once reported."""

    fatal = True


class NoResultsError(IgorError):
    """Raised when a lookup finds nothing. Reported, but not fatal."""


class CommandDeclarationError(FatalError):
    """Exception raised when a command declares its inputs incorrectly."""


class PatternOrderError(CommandDeclarationError):
    """Exception raised when a required parameter follows an optional one."""


class MissingNameError(CommandDeclarationError):
    """Exception raised when an argument, flag or parameter is registered without a name."""


class UnknownParameterError(CommandDeclarationError):
    """Exception raised when a parameter is registered that is not in the pattern."""


class DuplicateParameterError(CommandDeclarationError):
    """Exception raised when a parameter is registered twice."""


class DuplicateIdentifierError(CommandDeclarationError):
    """Exception raised when an argument or flag identifier is already taken."""

    def __init__(self, identifier: str, kind: str):
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"{kind} with identifier {identifier} already exists")


class CommandArgumentError(FatalError):
    """Exception raised when the tokens passed to a command cannot be parsed."""


class InvalidTypeError(CommandArgumentError):
    """Exception raised for an unsupported type or a value that does not parse as it."""


class MissingValueError(CommandArgumentError):
    """Exception raised when a named argument is given without a value."""


class ValidationError(CommandArgumentError):
    """Exception raised when a value fails its registered validator."""


class TooManyParametersError(CommandArgumentError):
    """Exception raised when more positional values are given than the pattern allows."""


class MissingRequiredParameterError(CommandArgumentError):
    """Exception raised when a required positional parameter is missing."""


class UnregisteredParameterError(CommandArgumentError):
    """Exception raised when a positional value binds to a parameter with no registration."""


class DispatchError(FatalError):
    """Exception raised when the top-level command is absent or unknown."""


class ConfigError(FatalError):
    """Exception raised when the config file cannot be read or is invalid."""


class GithubError(FatalError):
    """Exception raised when a GitHub API request fails."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status
