# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
ArgGroup-based configuration system for servicectl.

This module provides a modular configuration architecture where:
- Each ArgGroup owns a specific set of command-line options
- Config classes declare their fields as annotations, with defaults
- Parsed namespaces are materialized into config objects via ConfigBase
"""

from .arg_group import ArgGroup
from .config_base import ConfigBase
from .utils import add_argument, add_flag, add_repeatable_argument, env_or_default

__all__ = [
    # Base classes
    "ArgGroup",
    "ConfigBase",
    # Utilities
    "add_argument",
    "add_flag",
    "add_repeatable_argument",
    "env_or_default",
]
