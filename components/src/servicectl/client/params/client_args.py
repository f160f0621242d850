# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Top-level command line of the servicectl client."""

import argparse
import logging
from typing import Any, Dict, List, Optional, Sequence, Type

from servicectl import __version__
from servicectl.client.params.action_args import ActionArgs, build_action_parser
from servicectl.client.params.actions import ACTIONS
from servicectl.client.params.arguments import ARG_DUMP_CONFIG_TO, ARG_LOG_LEVEL
from servicectl.common.config_dump import register_encoder
from servicectl.common.configuration import ArgGroup, ConfigBase, add_argument
from servicectl.exceptions import ErrorStrings, UsageException

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _summary(action_cls: Type[ActionArgs]) -> Optional[str]:
    doc = action_cls.__doc__
    return doc.strip().splitlines()[0] if doc else None


class _ClientArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageException instead of exiting."""

    def error(self, message):
        raise UsageException(f"{self.prog}: {message}")


class ClientConfig(ConfigBase):
    """Options that apply to the client itself rather than to an action."""

    log_level: str = "INFO"
    dump_config_to: Optional[str] = None


class ClientArgGroup(ArgGroup):
    """Global client options, given before the action name."""

    dests = ("log_level", "dump_config_to")

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--version", action="version", version=f"servicectl {__version__}"
        )
        g = parser.add_argument_group("Client Options")

        add_argument(
            g,
            flag_name=ARG_LOG_LEVEL,
            env_var="SERVICECTL_LOG_LEVEL",
            default="INFO",
            help="Logging level of the client.",
            choices=LOG_LEVELS,
            arg_type=str.upper,
        )
        add_argument(
            g,
            flag_name=ARG_DUMP_CONFIG_TO,
            env_var="SERVICECTL_DUMP_CONFIG_TO",
            default=None,
            help="Dump the resolved arguments to the specified file path.",
        )


class ClientArgs:
    """
    Parses a full client command line into the arguments of one action.

    Usage::

        client_args = ClientArgs(sys.argv[1:])
        client_args.parse()
        client_args.validate()
        action = client_args.core_action
    """

    def __init__(
        self,
        argv: Sequence[str],
        actions: Optional[Dict[str, Type[ActionArgs]]] = None,
    ) -> None:
        self.argv: List[str] = list(argv)
        self.actions = ACTIONS if actions is None else actions
        self.parser = self._build_parser()
        self.config: Optional[ClientConfig] = None
        self.core_action: Optional[ActionArgs] = None

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _ClientArgumentParser(
            prog="servicectl",
            description="Manage long-running services on a cluster",
            formatter_class=argparse.RawTextHelpFormatter,
        )
        ClientArgGroup().add_arguments(parser)

        self._subparsers = parser.add_subparsers(dest="action", metavar="<action>")
        for name, action_cls in sorted(self.actions.items()):
            sub = self._subparsers.add_parser(
                name,
                help=_summary(action_cls),
                formatter_class=argparse.RawTextHelpFormatter,
            )
            build_action_parser(action_cls, sub)
        return parser

    def parse(self) -> ActionArgs:
        """
        Parse the command line and bind it to the selected action.

        Returns:
            The populated, not yet validated, action arguments.

        Raises:
            UsageException: If the command line cannot be parsed or names no action.
        """
        # argparse stops filling a "*" positional at the first option, so
        # names after an option come back as leftovers.
        namespace, extras = self.parser.parse_known_args(self.argv)
        values = vars(namespace)

        action_name = values.pop("action", None)
        if action_name is None:
            raise UsageException(ErrorStrings.ERROR_NO_ACTION)
        if action_name not in self.actions:
            raise UsageException(ErrorStrings.ERROR_UNKNOWN_ACTION + action_name)

        unknown = [arg for arg in extras if arg.startswith("-")]
        if unknown:
            self.parser.error(f"unrecognized arguments: {' '.join(unknown)}")
        values["parameters"] = list(values.get("parameters") or []) + extras

        client_values = {k: values.pop(k) for k in ClientArgGroup.dests if k in values}
        self.config = ClientConfig.from_cli_args(argparse.Namespace(**client_values))
        if self.config.log_level not in LOG_LEVELS:
            raise UsageException(
                f"Invalid log level '{self.config.log_level}', "
                f"choose from {', '.join(LOG_LEVELS)}"
            )
        self.core_action = self.actions[action_name].from_cli_args(
            argparse.Namespace(**values)
        )
        logger.debug("Parsed %s", self.core_action)
        return self.core_action

    def validate(self, log: Optional[logging.Logger] = None) -> None:
        if self.core_action is None:
            raise UsageException(ErrorStrings.ERROR_NO_ACTION)
        self.core_action.validate(log)

    def get_action(self) -> Optional[str]:
        return self.core_action.get_action_name() if self.core_action else None

    def usage(self, action: Optional[str] = None) -> str:
        """Help text for the whole client, or for a single action."""
        if action is None:
            return self.parser.format_help()
        if action not in self.actions:
            raise UsageException(ErrorStrings.ERROR_UNKNOWN_ACTION + action)
        return self._subparsers.choices[action].format_help()


@register_encoder(ConfigBase)
def _preprocess_for_encode_config(config: ConfigBase) -> Dict[str, Any]:
    """Convert a config object to a dictionary for encoding."""
    return dict(config.__dict__)


@register_encoder(ClientArgs)
def _preprocess_for_encode_client_args(client_args: ClientArgs) -> Dict[str, Any]:
    return {
        "action": client_args.get_action(),
        "client": client_args.config,
        "arguments": client_args.core_action,
    }
