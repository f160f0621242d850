# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Logging setup for the servicectl console entry point."""

import logging
import sys
from typing import Optional, TextIO, Union

from servicectl.common.configuration import env_or_default

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "servicectl"


def configure_servicectl_logging(
    level: Optional[Union[int, str]] = None, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Send servicectl log records to stderr (or ``stream``) at ``level``.

    The level defaults to SERVICECTL_LOG_LEVEL, then INFO. Calling this more
    than once replaces the handler installed by the previous call.
    """
    if level is None:
        level = env_or_default("SERVICECTL_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger("servicectl")
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
