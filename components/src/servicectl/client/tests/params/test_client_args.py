# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the top-level ClientArgs parser."""
import logging

import pytest

from servicectl.client.params import ClientArgs
from servicectl.client.params.actions import ActionDestroyArgs, ActionListArgs
from servicectl.exceptions import (
    InsufficientArgumentsError,
    TooManyArgumentsError,
    UsageException,
)

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


class TestParse:
    def test_selects_action(self):
        client_args = ClientArgs(["destroy", "svc", "--force"])

        action = client_args.parse()

        assert isinstance(action, ActionDestroyArgs)
        assert client_args.core_action is action
        assert client_args.get_action() == "destroy"
        assert action.parameters == ["svc"]
        assert action.force is True

    def test_global_options_kept_off_the_action(self, monkeypatch):
        monkeypatch.delenv("SERVICECTL_LOG_LEVEL", raising=False)
        client_args = ClientArgs(["--log-level", "debug", "list"])

        action = client_args.parse()

        assert isinstance(action, ActionListArgs)
        assert client_args.config.log_level == "DEBUG"
        assert client_args.config.dump_config_to is None
        assert not hasattr(action, "log_level")
        assert not hasattr(action, "action")

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("SERVICECTL_LOG_LEVEL", "WARNING")
        client_args = ClientArgs(["list"])

        client_args.parse()

        assert client_args.config.log_level == "WARNING"

    def test_hidden_shared_options(self):
        client_args = ClientArgs(["create", "svc", "-D", "a=1", "-S", "p v", "--debug"])

        action = client_args.parse()

        assert action.definitions == ["a=1"]
        assert action.sysprops == ["p v"]
        assert action.debug is True

    def test_no_action(self):
        with pytest.raises(UsageException):
            ClientArgs([]).parse()

    def test_unknown_action(self):
        with pytest.raises(UsageException, match="invalid choice"):
            ClientArgs(["explode", "svc"]).parse()

    def test_unknown_option(self):
        with pytest.raises(UsageException):
            ClientArgs(["destroy", "svc", "--no-such-flag"]).parse()

    def test_unknown_option_after_names(self):
        with pytest.raises(UsageException, match="--bogus"):
            ClientArgs(["destroy", "a", "--force", "b", "--bogus"]).parse()

    def test_names_after_options_are_collected(self):
        """Test that names are bound wherever they appear on the command line."""
        action = ClientArgs(["destroy", "a", "--force", "b"]).parse()

        assert action.parameters == ["a", "b"]
        assert action.force is True

    def test_name_after_hidden_options(self):
        action = ClientArgs(["create", "-D", "x=1", "svc"]).parse()

        assert action.parameters == ["svc"]
        assert action.definitions == ["x=1"]
        assert action.get_cluster_name() == "svc"

    def test_invalid_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("SERVICECTL_LOG_LEVEL", "verbose")

        with pytest.raises(UsageException, match="VERBOSE"):
            ClientArgs(["list"]).parse()


class TestValidate:
    def test_missing_name(self):
        client_args = ClientArgs(["destroy"])
        client_args.parse()

        with pytest.raises(InsufficientArgumentsError):
            client_args.validate()

    def test_extra_names(self):
        client_args = ClientArgs(["start", "a", "b"])
        client_args.parse()

        with pytest.raises(TooManyArgumentsError):
            client_args.validate()

    def test_extra_names_split_by_option(self, caplog):
        client_args = ClientArgs(["destroy", "a", "--force", "b"])
        client_args.parse()

        with caplog.at_level(logging.ERROR):
            with pytest.raises(TooManyArgumentsError) as exc_info:
                client_args.validate()

        assert "limit is 1 but saw 2" in str(exc_info.value)
        assert [r.getMessage() for r in caplog.records] == ['[1] "a"', '[2] "b"']

    def test_validate_before_parse(self):
        with pytest.raises(UsageException):
            ClientArgs(["start", "svc"]).validate()


class TestUsage:
    def test_lists_actions(self):
        text = ClientArgs([]).usage()

        for name in ("create", "destroy", "flex", "list"):
            assert name in text

    def test_action_usage(self):
        text = ClientArgs([]).usage("create")

        assert "--queue" in text
        assert "--define" not in text

    def test_unknown_action_usage(self):
        with pytest.raises(UsageException):
            ClientArgs([]).usage("explode")
