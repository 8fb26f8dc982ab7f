"""
Igor Org Tooling

Copyright (c) 2025.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import sys

from igor.commands import build_registry
from igor.completion import VersionCheck
from igor.config import find_igor_config, load_config
from igor.console import apply_color_overrides
from igor.context import build_context
from igor.dispatcher import EXIT_FATAL, EXIT_OK, Dispatcher, report_error
from igor.exceptions import IgorError
from igor.utils import set_console_level, setup_logging


def run(argv: list[str]) -> int:
    """Bootstrap config, build the registry and dispatch `argv`. Returns the exit code."""
    try:
        config = load_config(find_igor_config())
        if config is not None:
            apply_color_overrides(config.colors)
            if config.log_level:
                set_console_level(config.log_level)
        registry = build_registry()
        context = build_context(argv, config)
    except IgorError as error:
        report_error(error)
        return EXIT_FATAL if error.fatal else EXIT_OK

    dispatcher = Dispatcher(registry, completion_hook=VersionCheck())
    return asyncio.run(dispatcher.dispatch(context))


def main() -> None:
    setup_logging()
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    main()
