# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy and process exit codes for servicectl.

Every error that should terminate a client invocation derives from
:class:`ServiceLaunchException` and carries the exit code the process
reports. Only ``servicectl.main.cli`` turns these into an exit status.

Hierarchy
---------
ServiceLaunchException
├── BadCommandArgumentsException
│   ├── InsufficientArgumentsError
│   └── TooManyArgumentsError
└── UsageException
"""

from typing import Optional

EXIT_SUCCESS = 0
EXIT_EXCEPTION_THROWN = 32
EXIT_COMMAND_ARGUMENT_ERROR = 40
EXIT_USAGE = 42
# 128 + SIGINT
EXIT_INTERRUPTED = 130


class ErrorStrings:
    """Message prefixes shared by argument validation errors."""

    ERROR_NOT_ENOUGH_ARGUMENTS = "Not enough arguments for action: "
    ERROR_TOO_MANY_ARGUMENTS = "Too many arguments"
    ERROR_NO_ACTION = "No action specified"
    ERROR_UNKNOWN_ACTION = "Unknown command: "


class ServiceLaunchException(Exception):
    """Base exception for all servicectl errors."""

    exit_code = EXIT_EXCEPTION_THROWN

    def __init__(self, message: str, exit_code: Optional[int] = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class BadCommandArgumentsException(ServiceLaunchException):
    """Raised when the arguments of a command are invalid."""

    exit_code = EXIT_COMMAND_ARGUMENT_ERROR


class InsufficientArgumentsError(BadCommandArgumentsException):
    """Raised when fewer positional arguments were given than an action needs."""


class TooManyArgumentsError(BadCommandArgumentsException):
    """Raised when more positional arguments were given than an action accepts."""


class UsageException(ServiceLaunchException):
    """Raised when the command line cannot be parsed at all."""

    exit_code = EXIT_USAGE
