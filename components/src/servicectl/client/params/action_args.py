# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Base arguments shared by every servicectl action."""

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from servicectl.client.params import arg_ops
from servicectl.client.params.arguments import (
    ARG_DEBUG,
    ARG_DEFINE,
    ARG_DEFINE_SHORT,
    ARG_SYSPROP,
    ARG_SYSPROP_SHORT,
    UNBOUNDED,
)
from servicectl.common.configuration import (
    ArgGroup,
    ConfigBase,
    add_flag,
    add_repeatable_argument,
)
from servicectl.exceptions import (
    ErrorStrings,
    InsufficientArgumentsError,
    TooManyArgumentsError,
)

logger = logging.getLogger(__name__)


class CommonActionArgGroup(ArgGroup):
    """Options accepted by every action: the positional list plus hidden overrides."""

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "parameters",
            nargs="*",
            metavar="name",
            help="Service name, followed by any action-specific values.",
        )

        # Persisted configuration overrides, only used on create or reconfigure.
        add_repeatable_argument(
            parser,
            flag_name=ARG_DEFINE,
            aliases=[ARG_DEFINE_SHORT],
            dest="definitions",
            help="Definitions",
            metavar="name=value",
            hidden=True,
        )
        # Applied once the service process is running; never persisted.
        add_repeatable_argument(
            parser,
            flag_name=ARG_SYSPROP,
            aliases=[ARG_SYSPROP_SHORT],
            dest="sysprops",
            help="system properties in the form name value."
            " These are set after the process is started.",
            metavar="property",
            hidden=True,
        )
        add_flag(parser, flag_name=ARG_DEBUG, help="Debug mode", hidden=True)


class ActionArgs(ConfigBase, ABC):
    """
    Base arguments for all actions.

    Instances are built from a parsed namespace with ``from_cli_args`` or
    directly from keyword arguments, then validated once before the action
    runs. The first positional parameter is always the service name.
    """

    parameters: List[str] = []
    definitions: List[str] = []
    sysprops: List[str] = []
    debug: bool = False

    def __init__(self, parameters: Optional[List[str]] = None, **fields: Any) -> None:
        self._populate({"parameters": parameters, **fields})

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        """Register options specific to this action. Most actions have none."""

    def get_cluster_name(self) -> Optional[str]:
        """
        Get the name: relies on arg 1 being the cluster name in all operations.

        Returns:
            The first positional parameter, None if there is none
        """
        return self.parameters[0] if self.parameters else None

    def get_min_params(self) -> int:
        """Minimum number of entries expected in ``parameters``."""
        return 1

    def get_max_params(self) -> int:
        """Maximum number of entries accepted in ``parameters``."""
        return self.get_min_params()

    @abstractmethod
    def get_action_name(self) -> str:
        """Name of the action, as typed on the command line."""

    def get_definition_map(self) -> dict[str, str]:
        return arg_ops.split_pairs(self.definitions)

    def get_sysprop_map(self) -> dict[str, str]:
        return arg_ops.split_properties(self.sysprops)

    def validate(self, log: Optional[logging.Logger] = None) -> None:
        """
        Check the number of positional parameters against the action's bounds.

        Args:
            log: Logger receiving the diagnostics of a rejected invocation.
                Defaults to this module's logger.

        Raises:
            InsufficientArgumentsError: Fewer parameters than get_min_params().
            TooManyArgumentsError: More parameters than get_max_params().
        """
        log = log or logger

        min_args = self.get_min_params()
        action_arg_size = len(self.parameters)
        if min_args > action_arg_size:
            raise InsufficientArgumentsError(
                f"{ErrorStrings.ERROR_NOT_ENOUGH_ARGUMENTS}{self.get_action_name()}"
                f", Expected minimum {min_args} but got {action_arg_size}"
            )

        max_args = self.get_max_params()
        if max_args == UNBOUNDED:
            max_args = min_args
        if action_arg_size > max_args:
            message = (
                f"{ErrorStrings.ERROR_TOO_MANY_ARGUMENTS} for action "
                f"{self.get_action_name()}: limit is {max_args} "
                f"but saw {action_arg_size}: "
            )
            parts = [message]
            for index, action_arg in enumerate(self.parameters, start=1):
                log.error('[%d] "%s"', index, action_arg)
                parts.append(f' "{action_arg}" ')
            raise TooManyArgumentsError("".join(parts))

    def __str__(self) -> str:
        return f"{super().__str__()}: {self.get_action_name()}"


def build_action_parser(action_cls: type, parser: argparse.ArgumentParser) -> None:
    """Register the shared and the action-specific options of ``action_cls``."""
    CommonActionArgGroup().add_arguments(parser)
    action_cls.add_action_arguments(parser)
