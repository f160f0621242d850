# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for ArgGroup configuration."""

import argparse
import os
from typing import Any, Optional, Sequence, TypeVar

T = TypeVar("T")


def env_or_default(env_var: Optional[str], default: T) -> T:
    """
    Get value from environment variable or return default.

    Performs type conversion based on the default value's type.

    Args:
        env_var: Environment variable name (e.g., "SERVICECTL_LOG_LEVEL"), or None
        default: Default value if env var not set

    Returns:
        Environment variable value (type-converted) or default

    Examples:
        >>> env_or_default("SERVICECTL_LOG_LEVEL", "INFO")
        "INFO"  # if SERVICECTL_LOG_LEVEL not set
        >>> env_or_default("SERVICECTL_LIFETIME", 0)
        3600  # if SERVICECTL_LIFETIME="3600"
    """
    if env_var is None:
        return default
    value = os.environ.get(env_var)
    if value is None:
        return default

    # Type conversion based on default type
    if isinstance(default, bool):
        return value.lower() in ("true", "1", "yes", "on")  # type: ignore
    elif isinstance(default, int):
        return int(value)  # type: ignore
    elif isinstance(default, float):
        return float(value)  # type: ignore
    elif isinstance(default, list):
        return [x.strip() for x in value.split() if x.strip()]  # type: ignore
    else:
        return value  # type: ignore


def add_argument(
    parser,
    *,
    flag_name: str,
    default: Any,
    help: str,
    env_var: Optional[str] = None,
    aliases: Sequence[str] = (),
    arg_type: Optional[type] = str,
    **kwargs: Any,
) -> None:
    """
    Add a CLI argument with optional env var default, aliases, and help message construction.

    Args:
        parser: ArgumentParser or argument group
        flag_name: Primary flag (must start with '--', e.g., "--queue")
        default: Default value
        help: Help text
        env_var: Optional environment variable name (e.g., "SERVICECTL_QUEUE")
        aliases: Extra option strings accepted for the flag (e.g., ["-f"])
        dest: Optional destination name (defaults to flag_name with dashes replaced by underscores)
        choices: Optional list of valid values for the argument.
        arg_type: Type for the argument (default: str)
    """
    arg_dest = _get_dest_name(flag_name, kwargs.get("dest"))
    default_with_env = env_or_default(env_var, default)

    names = [flag_name, *aliases]

    add_arg_opts = {
        "dest": arg_dest,
        "default": default_with_env,
        "help": _build_help_message(help, env_var, default),
        "type": arg_type,
    }
    kwargs.update(add_arg_opts)

    parser.add_argument(*names, **kwargs)


def add_flag(
    parser,
    *,
    flag_name: str,
    help: str,
    aliases: Sequence[str] = (),
    hidden: bool = False,
    dest: Optional[str] = None,
) -> None:
    """
    Add a boolean switch that is False unless given on the command line.

    Hidden switches are accepted but left out of the generated help.
    """
    parser.add_argument(
        flag_name,
        *aliases,
        dest=_get_dest_name(flag_name, dest),
        action="store_true",
        default=False,
        help=argparse.SUPPRESS if hidden else help,
    )


def add_repeatable_argument(
    parser,
    *,
    flag_name: str,
    help: str,
    aliases: Sequence[str] = (),
    hidden: bool = False,
    dest: Optional[str] = None,
    nargs: Optional[int] = None,
    metavar: Optional[Any] = None,
) -> None:
    """
    Add an option that may be given any number of times.

    Every occurrence appends its value(s) to a list in command-line order.
    The default is None, so an option that never occurs falls back to the
    owning config's class default.

    Args:
        parser: ArgumentParser or argument group
        flag_name: Primary flag (e.g. "--define")
        help: Help text
        aliases: Extra option strings (e.g. ["-D"])
        hidden: Accept the flag but leave it out of --help output
        dest: Optional destination name
        nargs: Values consumed per occurrence (default: one)
        metavar: Display name(s) for the values in help output
    """
    kwargs: dict[str, Any] = {}
    if nargs is not None:
        kwargs["nargs"] = nargs
    if metavar is not None:
        kwargs["metavar"] = metavar

    parser.add_argument(
        flag_name,
        *aliases,
        dest=_get_dest_name(flag_name, dest),
        action="append",
        default=None,
        help=argparse.SUPPRESS if hidden else help,
        **kwargs,
    )


def _build_help_message(help_text: str, env_var: Optional[str], default: Any) -> str:
    """
    Build help message with env var and default value.
    """
    if env_var is None:
        return f"{help_text}\ndefault: {default}"
    return f"{help_text}\nenv var: {env_var} | default: {default}"


def _get_dest_name(flag_name: str, dest: Optional[str] = None) -> str:
    """
    Get the destination name for the flag.
    """
    return dest if dest else flag_name.lstrip("-").replace("-", "_")
