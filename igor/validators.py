# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Input validators used by Igor commands.

prompt_toolkit validators (interactive prompts):
- int_range_validator: Enforces numeric input within a range.
- yes_no_validator: Accepts only 'Y' / 'N' (any case).

Registration predicates (`validate=` on arguments and parameters):
- is_github_login: GitHub login syntax.
- is_positive: Strictly positive numbers.
"""
import re

from prompt_toolkit.validation import Validator

GITHUB_LOGIN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")


def int_range_validator(minimum: int, maximum: int) -> Validator:
    """Validator for integer ranges."""

    def validate(text: str) -> bool:
        try:
            value = int(text)
        except ValueError:
            return False
        return minimum <= value <= maximum

    return Validator.from_callable(
        validate,
        error_message=f"Invalid input. Enter a number between {minimum} and {maximum}.",
    )


def yes_no_validator() -> Validator:
    """Validator for yes/no inputs."""

    def validate(text: str) -> bool:
        return text.strip().upper() in ("Y", "N")

    return Validator.from_callable(validate, error_message="Enter 'Y', 'y' or 'N', 'n'.")


def is_github_login(value: str) -> bool:
    """Alphanumerics and single inner hyphens, at most 39 characters."""
    return bool(GITHUB_LOGIN.match(value))


def is_positive(value: int | float) -> bool:
    return value > 0
