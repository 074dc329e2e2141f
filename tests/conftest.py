"""Shared pytest configuration and fixtures for all tests."""

import json
import stat
from pathlib import Path

import pytest

from snapaio.api.array.ArrayTool import ArrayTool, has_completion_marker
from snapaio.api.array.StepResult import StepResult
from snapaio.api.config.SnapConfig import SnapConfig
from snapaio.api.notify.Notifier import Notifier
from snapaio.api.notify.NotifyConfig import NotifyConfig


def pytest_configure(config):
    for marker in ("unit", "integration", "config", "counter", "policy", "array", "report", "run", "notify"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(base: Path) -> dict:
    """Minimal valid snapaio configuration dict with every path under ``base``.

    Notifications are disabled and post-processing is off so a run only
    touches DIFF, SYNC and SCRUB unless a test opts in.
    """
    return {
        "array": {
            "binary": str(base / "snapraid"),
            "config_file": str(base / "snapraid.conf"),
            "prehash": True,
            "quiet": True,
        },
        "thresholds": {
            "delete_threshold": 500,
            "update_threshold": 500,
            "sync_warn_threshold": -1,
        },
        "scrub": {"percent": 5, "age_days": 10, "delayed_runs": 0},
        "hooks": {"pre_sync": []},
        "postprocess": {"touch": False, "smart": False, "status": False, "spindown": False},
        "report": {
            "verbose": False,
            "subject_prefix": "(SnapRAID on test)",
            "output_file": str(base / "snapaio.out"),
        },
        "notify": {"recipient": "", "type": "smtp", "data": {}},
        "state": {
            "sync_warn_file": str(base / "snapRAID.warnCount"),
            "scrub_count_file": str(base / "snapRAID.scrubCount"),
        },
        "log": {"level": "INFO", "operator_log": str(base / "snapraid.log")},
    }


def write_array(base: Path, with_parity: bool = True) -> dict[str, Path]:
    """Create an array configuration plus its content and parity files."""
    disk = base / "disks" / "d1"
    disk.mkdir(parents=True, exist_ok=True)
    content = disk / "snapraid.content"
    content.write_text("content\n")
    parity = base / "parity" / "snapraid.parity"
    parity.parent.mkdir(parents=True, exist_ok=True)
    if with_parity:
        parity.write_text("parity\n")

    conf = base / "snapraid.conf"
    conf.write_text(
        "# test array\n"
        f"parity {parity}\n"
        f"content {content}\n"
        f"data d1 {disk}/\n"
        "exclude *.tmp\n"
    )
    return {"conf": conf, "content": content, "parity": parity}


def write_script(path: Path, body: str) -> Path:
    """Write an executable shell script standing in for the array tool."""
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def diff_output(added=0, removed=0, updated=0, moved=0, copied=0, skip: str = "") -> str:
    """DIFF listing with a trailing summary block; ``skip`` leaves one count out."""
    counts = {"added": added, "removed": removed, "updated": updated, "moved": moved, "copied": copied}
    lines = ["Loading state from snapraid.content...", "Comparing...", "add some/new/file.mkv", ""]
    lines += [f"{value:>8} {name}" for name, value in counts.items() if name != skip]
    lines += ["       0 restored", "There are differences!" if sum(counts.values()) else "No differences", ""]
    return "\n".join(lines)


# =============================================================================
# Test Doubles
# =============================================================================


class FakeArrayTool(ArrayTool):
    """ArrayTool that replays scripted output instead of running a binary."""

    def __init__(self, binary: Path, outputs: dict[str, str] | None = None, statuses: dict[str, int] | None = None):
        super().__init__(binary)
        self.outputs = dict(outputs or {})
        self.statuses = dict(statuses or {})
        self.calls: list[tuple[str, tuple[str, ...], bool]] = []

    def version(self) -> str:
        return "12.3"

    def run(self, name: str, *args: str, tee: bool = True) -> StepResult:
        self.calls.append((name, args, tee))
        output = self.outputs.get(name, "")
        if tee and self.sink is not None and output:
            self.sink.write(output)
        return StepResult(
            name=name,
            exit_status=self.statuses.get(name, 0),
            output=output,
            saw_completion_marker=has_completion_marker(output),
        )

    @property
    def names(self) -> list[str]:
        return [name for name, _, _ in self.calls]


class RecordingNotifier(Notifier):
    """Notifier that keeps sent reports instead of delivering them."""

    def __init__(self, recipient: str = "admin@example.com", error: Exception | None = None):
        super().__init__(NotifyConfig(recipient=recipient))
        self.sent: list[tuple[str, str, str]] = []
        self.error = error

    def send(self, subject: str, text: str, html: str) -> bool:
        if not self.enabled:
            return False
        if self.error is not None:
            raise self.error
        self.sent.append((subject, text, html))
        return True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def snap_home(tmp_path: Path, monkeypatch) -> Path:
    """Point SNAPAIO_HOME at a per-test directory."""
    home = tmp_path / ".snapaio"
    monkeypatch.setenv("SNAPAIO_HOME", str(home))
    return home


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    """Pytest fixture returning a fresh minimal config dict rooted at tmp_path."""
    return minimal_config_dict(tmp_path)


@pytest.fixture
def snap_env(tmp_path: Path, snap_home: Path, minimal_config_dict: dict) -> dict:
    """Array files, a placeholder tool binary and config.json in SNAPAIO_HOME.

    Returns dict with:
        - home: SNAPAIO_HOME
        - base: directory holding array files and state
        - config_dict: the written configuration
        - array: paths from write_array
    """
    array = write_array(tmp_path)
    write_script(tmp_path / "snapraid", "exit 0\n")
    snap_home.mkdir(parents=True, exist_ok=True)
    (snap_home / "config.json").write_text(json.dumps(minimal_config_dict, indent=2))
    return {"home": snap_home, "base": tmp_path, "config_dict": minimal_config_dict, "array": array}


@pytest.fixture
def snap_config(minimal_config_dict: dict, tmp_path: Path) -> SnapConfig:
    """SnapConfig with array files in place, not written to disk."""
    write_array(tmp_path)
    write_script(tmp_path / "snapraid", "exit 0\n")
    return SnapConfig.model_validate(minimal_config_dict)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    return cmd_func(*args, **kwargs).drain()
