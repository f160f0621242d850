# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import argparse
import copy
from typing import Any, Mapping


class ConfigBase:
    """Base configuration class that allows properties with and without defaults in arbitrary order."""

    @classmethod
    def from_cli_args(cls, args: argparse.Namespace):
        obj = cls.__new__(cls)
        obj._populate(vars(args))
        return obj

    def _populate(self, values: Mapping[str, Any]) -> None:
        cls = type(self)

        # 1) Set everything provided by argparse. argparse leaves None for
        #    repeatable options that never occurred; those fall through to
        #    the class defaults below.
        for k, v in values.items():
            if v is None and cls._has_default(k):
                continue
            setattr(self, k, v)

        # 2) Populate annotated defaults from the class (and base classes)
        #    only if not already set by argparse.
        for base in reversed(cls.__mro__):
            anns = getattr(base, "__annotations__", {})
            for name in anns:
                if name.startswith("_"):
                    continue

                # IMPORTANT: only skip if it's already set on the INSTANCE
                if name in self.__dict__:
                    continue

                # If the class defines a default, materialize a private copy
                # onto the instance so list defaults are never shared.
                if name in getattr(base, "__dict__", {}):
                    setattr(self, name, copy.copy(getattr(base, name)))

    @classmethod
    def _has_default(cls, name: str) -> bool:
        return any(
            name in getattr(base, "__annotations__", {}) and name in base.__dict__
            for base in cls.__mro__
        )

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in sorted(self.__dict__.items()))
        return f"{self.__class__.__name__}({items})"
