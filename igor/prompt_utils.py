# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Utilities for interactive prompts in Igor commands.

`select_async()` shows a numbered list and returns the chosen value.
`confirm_async()` asks a yes/no question.

Neither raises when the user presses Ctrl-C or Ctrl-D: selection returns None
and confirmation returns False. The calling command decides what cancelling
means.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

from prompt_toolkit import PromptSession
from rich.table import Table

from igor.console import console
from igor.validators import int_range_validator, yes_no_validator

T = TypeVar("T")


async def select_async(
    message: str,
    choices: Sequence[tuple[str, T]],
    session: PromptSession | None = None,
) -> T | None:
    """
    Show numbered `(title, value)` choices and return the chosen value.

    Returns:
        The value of the selected choice, or None if the prompt was cancelled.
    """
    if not choices:
        return None

    table = Table(show_header=False, box=None)
    for index, (title, _) in enumerate(choices, start=1):
        table.add_row(f"[title]{index}[/]", title)
    if message:
        console.print(message, style="gen")
    console.print(table)

    session = session or PromptSession()
    try:
        answer = await session.prompt_async(
            "> ", validator=int_range_validator(1, len(choices))
        )
    except (KeyboardInterrupt, EOFError):
        return None
    return choices[int(answer) - 1][1]


async def confirm_async(
    message: str = "are you sure?",
    session: PromptSession | None = None,
) -> bool:
    """
    Ask a yes/no question and return True for 'Y'.

    Ctrl-C and Ctrl-D count as 'N'.
    """
    console.print(message, style="warn", markup=False)
    session = session or PromptSession()
    try:
        answer = await session.prompt_async("[Y/n] > ", validator=yes_no_validator())
    except (KeyboardInterrupt, EOFError):
        return False
    return answer.strip().upper() == "Y"
