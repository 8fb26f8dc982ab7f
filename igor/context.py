# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Execution context for Igor commands.

An `ExecutionContext` is created once per process invocation from the raw argv,
then threaded through parsing and the before/main/after lifecycle of the
selected command. Each lifecycle stage receives the context, may add its own
domain data to it, and hands it on to the next stage; only one stage owns the
context at a time.

- `ParsedInput`: The validated parameters, arguments and flags of a command line.
- `ExecutionContext`: Raw tokens, config, parsed input and stage-owned data.
- `build_context`: Maps a process argv into an `ExecutionContext`.
"""
from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from igor.config import IgorConfig
from igor.exceptions import DispatchError


class ParsedInput(BaseModel):
    """
    Parsed command line input, split by kind.

    Attributes:
        parameters (dict): Positional values keyed by parameter name.
        arguments (dict): Named argument values keyed by long-hand name
            (hyphens removed).
        flags (dict): Boolean flag values keyed by long-hand name.
    """

    parameters: dict[str, Any] = Field(default_factory=dict)
    arguments: dict[str, Any] = Field(default_factory=dict)
    flags: dict[str, bool] = Field(default_factory=dict)


class ExecutionContext(BaseModel):
    """
    Represents the state of a single Igor invocation.

    Attributes:
        namespace (str): Name the tool was invoked as (basename of argv[0]).
        command (str | None): The top-level command token.
        args (list[str]): Raw tokens that followed the command token.
        config (IgorConfig | None): User configuration, if any was loaded.
        arguments (ParsedInput): Parsed input, filled in by the command parser.
        registry (Any): The command registry, set by the dispatcher.
        prevent_completion (bool): Skip the post-completion hook when True.
        extra (dict): Domain data written by lifecycle stages.
    """

    namespace: str = ""
    command: str | None = None
    args: list[str] = Field(default_factory=list)
    config: IgorConfig | None = None
    arguments: ParsedInput = Field(default_factory=ParsedInput)
    registry: Any = None
    prevent_completion: bool = False
    extra: dict[str, Any] = Field(default_factory=dict)

    start_time: float | None = None
    end_time: float | None = None
    start_wall: datetime | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.extra[key] = value

    def start_timer(self):
        self.start_wall = datetime.now()
        self.start_time = time.perf_counter()

    def stop_timer(self):
        self.end_time = time.perf_counter()

    @property
    def duration(self) -> float | None:
        if self.start_time is None:
            return None
        if self.end_time is None:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time

    def to_log_line(self) -> str:
        """Structured flat-line format for logging."""
        duration_str = f"{self.duration:.3f}s" if self.duration is not None else "n/a"
        return (
            f"[{self.command}] args={self.args!r} "
            f"parsed={self.arguments.model_dump()!r} duration={duration_str}"
        )

    def __str__(self) -> str:
        return f"<ExecutionContext '{self.namespace} {self.command}' args={self.args!r}>"


def build_context(argv: list[str], config: IgorConfig | None = None) -> ExecutionContext:
    """
    Build the execution context from process arguments.

    Args:
        argv (list[str]): The process argv (`sys.argv`).
        config (IgorConfig | None): The loaded user config.

    Raises:
        DispatchError: If argv is empty.
    """
    if not argv or not argv[0]:
        raise DispatchError("no command found")

    return ExecutionContext(
        namespace=Path(argv[0]).name,
        command=argv[1] if len(argv) > 1 else None,
        args=list(argv[2:]),
        config=config,
    )
