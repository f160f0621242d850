# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Option and action names understood by the servicectl client."""

# Options shared by every action
ARG_DEFINE = "--define"
ARG_DEFINE_SHORT = "-D"
ARG_SYSPROP = "--sysprop"
ARG_SYSPROP_SHORT = "-S"
ARG_DEBUG = "--debug"

# Action-specific options
ARG_APPDEF = "--appdef"
ARG_APPDEF_SHORT = "-f"
ARG_AUTOFINALIZE = "--autofinalize"
ARG_COMPONENT = "--component"
ARG_FORCE = "--force"
ARG_LIFETIME = "--lifetime"
ARG_LIVE = "--live"
ARG_MESSAGE = "--message"
ARG_OUTPUT = "--out"
ARG_OVERWRITE = "--overwrite"
ARG_QUEUE = "--queue"
ARG_STATE = "--state"
ARG_UPLOAD = "--upload"

# Global client options
ARG_LOG_LEVEL = "--log-level"
ARG_DUMP_CONFIG_TO = "--dump-config-to"

ACTION_BUILD = "build"
ACTION_CREATE = "create"
ACTION_DEPENDENCY = "dependency"
ACTION_DESTROY = "destroy"
ACTION_EXISTS = "exists"
ACTION_FLEX = "flex"
ACTION_HELP = "help"
ACTION_LIST = "list"
ACTION_START = "start"
ACTION_STATUS = "status"
ACTION_STOP = "stop"
ACTION_UPGRADE = "upgrade"
ACTION_VERSION = "version"

# Value of get_max_params() meaning "no upper bound". validate() collapses it
# to get_min_params().
UNBOUNDED = -1
