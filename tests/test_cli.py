# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""End-to-end tests of the servicectl entry point."""
import json
import logging
import sys

import pytest
import yaml

from servicectl import __version__
from servicectl.exceptions import (
    EXIT_COMMAND_ARGUMENT_ERROR,
    EXIT_EXCEPTION_THROWN,
    EXIT_SUCCESS,
    EXIT_USAGE,
    InsufficientArgumentsError,
)
from servicectl.main import cli, main

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


@pytest.fixture(autouse=True)
def reset_servicectl_logger(monkeypatch):
    monkeypatch.delenv("SERVICECTL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SERVICECTL_DUMP_CONFIG_TO", raising=False)
    root = logging.getLogger("servicectl")
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _run_cli(monkeypatch, argv):
    monkeypatch.setattr(sys, "argv", ["servicectl", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return exc_info.value.code


class TestMain:
    def test_version(self, capsys):
        assert main(["version"]) == EXIT_SUCCESS

        assert capsys.readouterr().out.strip() == f"servicectl {__version__}"

    def test_help_for_action(self, capsys):
        assert main(["help", "flex"]) == EXIT_SUCCESS

        assert "--component" in capsys.readouterr().out

    def test_describes_resolved_invocation(self, capsys):
        code = main(["create", "svc", "--queue", "batch", "-D", "a=1"])

        assert code == EXIT_SUCCESS
        resolved = json.loads(capsys.readouterr().out)
        assert resolved["action"] == "create"
        assert resolved["client"]["log_level"] == "INFO"
        assert resolved["arguments"]["parameters"] == ["svc"]
        assert resolved["arguments"]["queue"] == "batch"
        assert resolved["arguments"]["definitions"] == ["a=1"]

    def test_custom_handler(self):
        seen = []

        def _record(client_args):
            seen.append(client_args.core_action.get_cluster_name())
            return 3

        assert main(["stop", "svc"], handlers={"stop": _record}) == 3
        assert seen == ["svc"]

    def test_debug_flag_enables_debug_logging(self, capsys):
        main(["start", "svc", "--debug", "-D", "x=1"])

        assert logging.getLogger("servicectl").level == logging.DEBUG
        assert "Definitions: {'x': '1'}" in capsys.readouterr().err

    def test_dump_config(self, tmp_path, capsys):
        target = tmp_path / "resolved.yaml"

        main(["--dump-config-to", str(target), "destroy", "svc", "--force"])

        dumped = yaml.safe_load(target.read_text())
        assert dumped["action"] == "destroy"
        assert dumped["arguments"]["force"] is True

    def test_validation_errors_propagate(self):
        with pytest.raises(InsufficientArgumentsError):
            main(["destroy"])


class TestCli:
    def test_success_exit_code(self, monkeypatch, capsys):
        assert _run_cli(monkeypatch, ["version"]) == EXIT_SUCCESS

    def test_too_many_arguments(self, monkeypatch, capsys):
        code = _run_cli(monkeypatch, ["destroy", "a", "b"])

        assert code == EXIT_COMMAND_ARGUMENT_ERROR
        err = capsys.readouterr().err
        assert "Too many arguments for action destroy" in err
        assert '[1] "a"' in err
        assert '[2] "b"' in err

    def test_usage_error(self, monkeypatch, capsys):
        assert _run_cli(monkeypatch, ["explode"]) == EXIT_USAGE
        assert "Error:" in capsys.readouterr().err

    def test_too_many_arguments_around_option(self, monkeypatch, capsys):
        code = _run_cli(monkeypatch, ["destroy", "a", "--force", "b"])

        assert code == EXIT_COMMAND_ARGUMENT_ERROR
        err = capsys.readouterr().err
        assert '[1] "a"' in err
        assert '[2] "b"' in err

    def test_invalid_log_level_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("SERVICECTL_LOG_LEVEL", "verbose")

        assert _run_cli(monkeypatch, ["version"]) == EXIT_USAGE
        assert "Invalid log level 'VERBOSE'" in capsys.readouterr().err

    def test_malformed_definition(self, monkeypatch, capsys):
        code = _run_cli(monkeypatch, ["create", "svc", "-D", "novalue"])

        assert code == EXIT_COMMAND_ARGUMENT_ERROR
        assert "Missing '='" in capsys.readouterr().err

    def test_unexpected_error(self, monkeypatch, capsys):
        def _boom(argv=None, handlers=None):
            raise RuntimeError("boom")

        monkeypatch.setattr("servicectl.main.main", _boom)

        assert _run_cli(monkeypatch, ["version"]) == EXIT_EXCEPTION_THROWN
        assert "RuntimeError: boom" in capsys.readouterr().err
