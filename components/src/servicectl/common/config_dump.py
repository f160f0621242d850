# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Serialization of resolved configuration objects.

Config classes register an encoder that turns an instance into plain
dicts/lists/scalars; the dump helpers then write it as JSON, or as YAML when
the target path ends in ``.yaml`` / ``.yml``.
"""

import json
import logging
import pathlib
from typing import Any, Callable, Dict, Optional, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ENCODERS: Dict[type, Callable[[Any], Any]] = {}

YAML_SUFFIXES = (".yaml", ".yml")


def register_encoder(cls: type) -> Callable[[Callable[[T], Any]], Callable[[T], Any]]:
    """
    Register ``func`` as the encoder for instances of ``cls`` and its subclasses.

    Example:
        >>> @register_encoder(ClientConfig)
        ... def _encode(config):
        ...     return config.__dict__
    """

    def _register(func: Callable[[T], Any]) -> Callable[[T], Any]:
        _ENCODERS[cls] = func
        return func

    return _register


def encode_config(obj: Any) -> Any:
    """Recursively convert ``obj`` into JSON/YAML friendly values."""
    for klass in type(obj).__mro__:
        if klass in _ENCODERS:
            return encode_config(_ENCODERS[klass](obj))
    if isinstance(obj, dict):
        return {str(k): encode_config(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [encode_config(v) for v in obj]
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)


def format_config(obj: Any) -> str:
    return json.dumps(encode_config(obj), indent=2, sort_keys=True)


def dump_config(path: Optional[str], obj: Any) -> Optional[pathlib.Path]:
    """
    Write the encoded form of ``obj`` to ``path``.

    Args:
        path: Target file; nothing is written when None or empty.
        obj: Object with a registered encoder, or plain data.

    Returns:
        The path written to, or None.
    """
    if not path:
        return None

    target = pathlib.Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = encode_config(obj)
    with open(target, "w") as f:
        if target.suffix.lower() in YAML_SUFFIXES:
            yaml.safe_dump(data, f, sort_keys=True)
        else:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")

    logger.info("Dumped resolved configuration to %s", target)
    return target
