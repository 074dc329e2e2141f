"""Unit tests for the config show and version commands."""

import pytest

from snapaio.api.config.cmd_show import cmd_show
from snapaio.api.config.cmd_version import cmd_version
from tests.conftest import run_cmd, write_script

pytestmark = pytest.mark.config


def test_show_lists_sections(snap_env):  # noqa: ARG001
    result = run_cmd(cmd_show)
    assert result.success is True
    assert result.output["content"]["sections"] == [
        "array",
        "thresholds",
        "scrub",
        "hooks",
        "postprocess",
        "report",
        "notify",
        "state",
        "log",
    ]


def test_show_single_section(snap_env):
    result = run_cmd(cmd_show, section="thresholds")
    assert result.success is True
    assert result.output["content"] == snap_env["config_dict"]["thresholds"]


def test_show_unknown_section(snap_env):  # noqa: ARG001
    result = run_cmd(cmd_show, section="mongo")
    assert result.success is False
    assert result.output["errors"] == ["Unknown section: mongo"]


def test_show_without_config():
    result = run_cmd(cmd_show, section="array")
    assert result.success is False
    assert result.output["content"] == {}


def test_version_includes_tool_version(snap_env):
    write_script(snap_env["base"] / "snapraid", 'echo "snapraid v11.6 by Andrea Mazzoleni, https://www.snapraid.it"\n')
    result = run_cmd(cmd_version)
    assert result.success is True
    assert result.output["tool_version"] == "11.6"
    assert result.output["version"]


def test_version_without_config_still_succeeds():
    result = run_cmd(cmd_version)
    assert result.success is True
    assert result.output["tool_version"] == ""
    assert result.output["warnings"]
