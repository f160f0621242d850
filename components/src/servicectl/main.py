# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
servicectl console entry point.

``main`` parses and validates one invocation and runs its handler; ``cli``
wraps it and is the only place that turns exceptions into exit codes.
"""

import logging
import sys
from typing import Callable, Dict, List, Optional

from servicectl import __version__
from servicectl.client.params import ClientArgs
from servicectl.client.params.arguments import ACTION_HELP, ACTION_VERSION
from servicectl.common.config_dump import dump_config, format_config
from servicectl.common.logging import configure_servicectl_logging
from servicectl.exceptions import (
    EXIT_EXCEPTION_THROWN,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    ServiceLaunchException,
)

logger = logging.getLogger(__name__)

Handler = Callable[[ClientArgs], int]


def _handle_help(client_args: ClientArgs) -> int:
    print(client_args.usage(client_args.core_action.get_cluster_name()))
    return EXIT_SUCCESS


def _handle_version(client_args: ClientArgs) -> int:
    print(f"servicectl {__version__}")
    return EXIT_SUCCESS


def _handle_describe(client_args: ClientArgs) -> int:
    # Service lifecycle operations live in the service client; report what
    # would be sent to it.
    action = client_args.core_action
    logger.info(
        "Resolved action %s for service %s",
        action.get_action_name(),
        action.get_cluster_name(),
    )
    print(format_config(client_args))
    return EXIT_SUCCESS


HANDLERS: Dict[str, Handler] = {
    ACTION_HELP: _handle_help,
    ACTION_VERSION: _handle_version,
}


def main(
    argv: Optional[List[str]] = None,
    handlers: Optional[Dict[str, Handler]] = None,
) -> int:
    """
    Run one servicectl invocation.

    Args:
        argv: Command line without the program name; ``sys.argv[1:]`` when None.
        handlers: Action name to handler overrides; unknown actions fall back
            to describing the resolved invocation.

    Returns:
        Process exit code.
    """
    client_args = ClientArgs(sys.argv[1:] if argv is None else argv)
    action = client_args.parse()

    level = "DEBUG" if action.debug else client_args.config.log_level
    configure_servicectl_logging(level)
    client_args.validate()

    definitions = action.get_definition_map()
    if definitions:
        logger.debug("Definitions: %s", definitions)
    sysprops = action.get_sysprop_map()
    if sysprops:
        logger.debug("System properties: %s", sysprops)

    dump_config(client_args.config.dump_config_to, client_args)

    table = dict(HANDLERS)
    table.update(handlers or {})
    handler = table.get(action.get_action_name(), _handle_describe)
    return handler(client_args)


def cli() -> None:
    """Console-script entry point: run ``main`` and exit with its status."""
    try:
        code = main()
    except ServiceLaunchException as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error")
        print(f"Unexpected error: {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(EXIT_EXCEPTION_THROWN)
    sys.exit(code)
