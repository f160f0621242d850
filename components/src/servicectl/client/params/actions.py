# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Arguments of the individual servicectl actions.

Each action is a subclass of :class:`ActionArgs` registered under the name
typed on the command line. Subclasses declare their own options in
``add_action_arguments`` and annotate the matching fields with defaults.
"""

import logging
from typing import Callable, Dict, List, Optional, Type

from servicectl.client.params import arguments
from servicectl.client.params.action_args import ActionArgs
from servicectl.common.configuration import (
    add_argument,
    add_flag,
    add_repeatable_argument,
)
from servicectl.exceptions import BadCommandArgumentsException

logger = logging.getLogger(__name__)

ACTIONS: Dict[str, Type[ActionArgs]] = {}


def register_action(name: str) -> Callable[[Type[ActionArgs]], Type[ActionArgs]]:
    def _register(cls: Type[ActionArgs]) -> Type[ActionArgs]:
        if name in ACTIONS:
            raise ValueError(f"Action '{name}' is already registered")
        ACTIONS[name] = cls
        return cls

    return _register


def _add_appdef(parser) -> None:
    add_argument(
        parser,
        flag_name=arguments.ARG_APPDEF,
        aliases=[arguments.ARG_APPDEF_SHORT],
        default=None,
        help="Path to the service definition file.",
    )


@register_action(arguments.ACTION_BUILD)
class ActionBuildArgs(ActionArgs):
    """Build a service definition without starting it."""

    appdef: Optional[str] = None

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        _add_appdef(parser)

    def get_action_name(self) -> str:
        return arguments.ACTION_BUILD


@register_action(arguments.ACTION_CREATE)
class ActionCreateArgs(ActionArgs):
    """Create and start a service."""

    appdef: Optional[str] = None
    queue: Optional[str] = None
    lifetime: Optional[int] = None

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        _add_appdef(parser)
        add_argument(
            parser,
            flag_name=arguments.ARG_QUEUE,
            default=None,
            help="Queue to submit the service to.",
        )
        add_argument(
            parser,
            flag_name=arguments.ARG_LIFETIME,
            default=None,
            arg_type=int,
            help="Lifetime of the service in seconds.",
        )

    def get_action_name(self) -> str:
        return arguments.ACTION_CREATE


@register_action(arguments.ACTION_DEPENDENCY)
class ActionDependencyArgs(ActionArgs):
    """Upload the client's dependency tarball to shared storage."""

    upload: bool = False
    overwrite: bool = False

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_flag(
            parser,
            flag_name=arguments.ARG_UPLOAD,
            help="Upload the dependency tarball.",
        )
        add_flag(
            parser,
            flag_name=arguments.ARG_OVERWRITE,
            help="Overwrite a tarball that is already present.",
        )

    def get_min_params(self) -> int:
        return 0

    def get_action_name(self) -> str:
        return arguments.ACTION_DEPENDENCY


@register_action(arguments.ACTION_DESTROY)
class ActionDestroyArgs(ActionArgs):
    """Destroy a stopped service and its persisted state."""

    force: bool = False

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_flag(parser, flag_name=arguments.ARG_FORCE, help="Destroy even if running.")

    def get_action_name(self) -> str:
        return arguments.ACTION_DESTROY


@register_action(arguments.ACTION_EXISTS)
class ActionExistsArgs(ActionArgs):
    """Probe whether a service exists, optionally in a given state."""

    live: bool = False
    state: Optional[str] = None

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_flag(
            parser, flag_name=arguments.ARG_LIVE, help="Only match running services."
        )
        add_argument(
            parser,
            flag_name=arguments.ARG_STATE,
            default=None,
            help="Only match services in this state.",
        )

    def get_action_name(self) -> str:
        return arguments.ACTION_EXISTS


@register_action(arguments.ACTION_FLEX)
class ActionFlexArgs(ActionArgs):
    """Change the number of instances of one or more components."""

    component: List[List[str]] = []

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_repeatable_argument(
            parser,
            flag_name=arguments.ARG_COMPONENT,
            nargs=2,
            metavar=("NAME", "COUNT"),
            help="Component name and its desired instance count.",
        )

    def get_action_name(self) -> str:
        return arguments.ACTION_FLEX

    def get_component_map(self) -> Dict[str, int]:
        """
        Map each component to its requested count.

        Raises:
            BadCommandArgumentsException: If a count is not an integer.
        """
        counts: Dict[str, int] = {}
        for name, count in self.component:
            try:
                counts[name] = int(count)
            except ValueError:
                raise BadCommandArgumentsException(
                    f"Requested count of component {name} is not a number: {count}"
                ) from None
        return counts

    def validate(self, log: Optional[logging.Logger] = None) -> None:
        super().validate(log)
        if not self.component:
            raise BadCommandArgumentsException(
                f"Usage: {arguments.ACTION_FLEX} <name> "
                f"{arguments.ARG_COMPONENT} <component> <count>"
            )
        self.get_component_map()


@register_action(arguments.ACTION_HELP)
class ActionHelpArgs(ActionArgs):
    """Print usage, optionally for a single action."""

    def get_min_params(self) -> int:
        return 0

    def get_max_params(self) -> int:
        return 1

    def get_action_name(self) -> str:
        return arguments.ACTION_HELP


@register_action(arguments.ACTION_LIST)
class ActionListArgs(ActionArgs):
    """List all services, or the named one."""

    live: bool = False
    state: Optional[str] = None

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_flag(
            parser, flag_name=arguments.ARG_LIVE, help="List only running services."
        )
        add_argument(
            parser,
            flag_name=arguments.ARG_STATE,
            default=None,
            help="List only services in this state.",
        )

    def get_min_params(self) -> int:
        return 0

    def get_max_params(self) -> int:
        return 1

    def get_action_name(self) -> str:
        return arguments.ACTION_LIST


@register_action(arguments.ACTION_START)
class ActionStartArgs(ActionArgs):
    """Start a stopped service."""

    def get_action_name(self) -> str:
        return arguments.ACTION_START


@register_action(arguments.ACTION_STATUS)
class ActionStatusArgs(ActionArgs):
    """Report the status of a service."""

    out: Optional[str] = None

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_argument(
            parser,
            flag_name=arguments.ARG_OUTPUT,
            default=None,
            help="Write the status to this file instead of stdout.",
        )

    def get_action_name(self) -> str:
        return arguments.ACTION_STATUS


@register_action(arguments.ACTION_STOP)
class ActionStopArgs(ActionArgs):
    """Stop a running service."""

    force: bool = False
    message: Optional[str] = None

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        add_flag(parser, flag_name=arguments.ARG_FORCE, help="Stop without waiting.")
        add_argument(
            parser,
            flag_name=arguments.ARG_MESSAGE,
            default=None,
            help="Reason recorded with the stop request.",
        )

    def get_action_name(self) -> str:
        return arguments.ACTION_STOP


@register_action(arguments.ACTION_UPGRADE)
class ActionUpgradeArgs(ActionArgs):
    """Upgrade a running service to a new definition."""

    appdef: Optional[str] = None
    autofinalize: bool = False

    @classmethod
    def add_action_arguments(cls, parser) -> None:
        _add_appdef(parser)
        add_flag(
            parser,
            flag_name=arguments.ARG_AUTOFINALIZE,
            help="Finalize the upgrade once every instance is upgraded.",
        )

    def get_action_name(self) -> str:
        return arguments.ACTION_UPGRADE


@register_action(arguments.ACTION_VERSION)
class ActionVersionArgs(ActionArgs):
    """Print the client version."""

    def get_min_params(self) -> int:
        return 0

    def get_action_name(self) -> str:
        return arguments.ACTION_VERSION
