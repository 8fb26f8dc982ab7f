# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Defines flow control signals used by Igor commands.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
`except Exception` blocks inside command lifecycles and reach the dispatcher,
which treats them as a clean stop rather than an error.

Signals:
- CancelSignal: The user cancelled an interactive prompt.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Igor."""


class CancelSignal(FlowSignal):
    """Raised to cancel the current command."""

    def __init__(self, message: str = "Cancel signal received."):
        super().__init__(message)
