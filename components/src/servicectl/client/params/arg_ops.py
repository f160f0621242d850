# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Helpers that turn raw ``name=value`` option strings into maps."""

import logging
import re
from typing import Iterable, Tuple

from servicectl.exceptions import BadCommandArgumentsException

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def split_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Split ``name=value`` strings into a dict.

    The split happens on the first ``=``, so values may themselves contain
    ``=`` or be empty. Later duplicates override earlier ones.

    Raises:
        BadCommandArgumentsException: If a pair has no ``=`` or an empty name.
    """
    result: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            raise BadCommandArgumentsException(f"Missing '=' in {pair}")
        name = name.strip()
        if not name:
            raise BadCommandArgumentsException(f"Empty name in {pair}")
        if name in result:
            logger.debug("Definition %s overrides earlier value", name)
        result[name] = value
    return result


def split_property(entry: str) -> Tuple[str, str]:
    """Split one system property given as ``name=value`` or ``name value``."""
    if "=" in entry:
        name, _, value = entry.partition("=")
    else:
        parts = _WHITESPACE.split(entry.strip(), maxsplit=1)
        if len(parts) != 2:
            raise BadCommandArgumentsException(
                f"System property must be 'name value' or 'name=value': {entry}"
            )
        name, value = parts
    name = name.strip()
    if not name:
        raise BadCommandArgumentsException(f"Empty name in {entry}")
    return name, value


def split_properties(entries: Iterable[str]) -> dict[str, str]:
    return dict(split_property(entry) for entry in entries)
