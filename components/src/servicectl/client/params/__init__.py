# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Command-line arguments of the servicectl client actions."""

from .action_args import ActionArgs, CommonActionArgGroup
from .actions import ACTIONS, register_action
from .arguments import UNBOUNDED
from .client_args import ClientArgs

__all__ = [
    "ACTIONS",
    "ActionArgs",
    "ClientArgs",
    "CommonActionArgGroup",
    "UNBOUNDED",
    "register_action",
]
