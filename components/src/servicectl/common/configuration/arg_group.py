# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Base ArgGroup interface."""
from abc import ABC, abstractmethod


class ArgGroup(ABC):
    """
    Base interface for groups of command-line options.

    Each ArgGroup owns the flags of one concern (global client options, the
    options shared by every action, the options of one action).
    """

    @abstractmethod
    def add_arguments(self, parser) -> None:
        """
        Register CLI arguments owned by this group.

        This method must be side-effect free beyond parser mutation.
        It must not depend on runtime state or other groups.

        Args:
            parser: argparse.ArgumentParser, sub-parser or argument group
        """
        ...
