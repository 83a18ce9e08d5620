"""Unit tests for environment snapshots."""

import dataclasses
import os
import threading

import pytest

from osfamily import snapshot
from osfamily.errors import InvalidArgumentError
from osfamily.snapshot import Snapshot, capture_snapshot, current_snapshot


class TestSnapshot:
    """Tests for the Snapshot value."""

    def test_lowercases_fields(self):
        snap = Snapshot(name="Windows 10", arch="AMD64", version="10.0 Build", path_separator=";")
        assert snap.name == "windows 10"
        assert snap.arch == "amd64"
        assert snap.version == "10.0 build"
        assert snap.path_separator == ";"

    def test_is_frozen(self, linux):
        with pytest.raises(dataclasses.FrozenInstanceError):
            linux.name = "windows"

    def test_rejects_missing_values(self):
        with pytest.raises(InvalidArgumentError):
            Snapshot(name=None, arch="x86", version="1", path_separator=":")

    def test_as_dict(self, linux):
        assert linux.as_dict() == {
            "name": "linux",
            "arch": "x86_64",
            "version": "6.8.0",
            "path_separator": ":",
        }


class TestCapture:
    """Tests for capture_snapshot()."""

    def test_uses_host_path_separator(self):
        assert capture_snapshot(environ={}).path_separator == os.pathsep

    def test_values_are_lowercase(self):
        snap = capture_snapshot(environ={})
        assert snap.name == snap.name.lower()
        assert snap.arch == snap.arch.lower()

    def test_overrides(self):
        snap = capture_snapshot(environ={
            "OSFAMILY_OS_NAME": "Windows 95",
            "OSFAMILY_OS_ARCH": "X86",
            "OSFAMILY_OS_VERSION": "4.0",
            "OSFAMILY_PATH_SEPARATOR": ";",
        })
        assert snap == Snapshot(name="windows 95", arch="x86", version="4.0", path_separator=";")

    def test_empty_override_ignored(self):
        snap = capture_snapshot(environ={"OSFAMILY_OS_NAME": ""})
        assert snap.name == snapshot.host_os_name().lower()

    def test_windows_name_includes_release(self, monkeypatch):
        monkeypatch.setattr(snapshot._platform, "system", lambda: "Windows")
        monkeypatch.setattr(snapshot._platform, "release", lambda: "10")
        assert snapshot.host_os_name() == "Windows 10"

    def test_os400_alias(self, monkeypatch):
        monkeypatch.setattr(snapshot._platform, "system", lambda: "OS400")
        assert snapshot.host_os_name() == "os/400"


class TestHostValues:
    """Tests for arch and version spelling."""

    @pytest.mark.parametrize("system, machine, expected", [
        ("Linux", "x86_64", "amd64"),
        ("Windows", "AMD64", "amd64"),
        ("Linux", "i686", "i386"),
        ("Linux", "aarch64", "aarch64"),
        ("Windows", "ARM64", "aarch64"),
        ("Darwin", "x86_64", "x86_64"),
        ("Darwin", "arm64", "aarch64"),
    ])
    def test_arch_aliases(self, monkeypatch, system, machine, expected):
        monkeypatch.setattr(snapshot._platform, "system", lambda: system)
        monkeypatch.setattr(snapshot._platform, "machine", lambda: machine)
        assert snapshot.host_os_arch() == expected

    def test_windows_version_is_major_minor(self, monkeypatch):
        monkeypatch.setattr(snapshot._platform, "system", lambda: "Windows")
        monkeypatch.setattr(snapshot._platform, "version", lambda: "10.0.19045")
        assert snapshot.host_os_version() == "10.0"

    def test_linux_version_is_release(self, monkeypatch):
        monkeypatch.setattr(snapshot._platform, "system", lambda: "Linux")
        monkeypatch.setattr(snapshot._platform, "release", lambda: "6.8.0-45-generic")
        assert snapshot.host_os_version() == "6.8.0-45-generic"

    def test_capture_uses_aliases(self, monkeypatch):
        monkeypatch.setattr(snapshot._platform, "system", lambda: "Linux")
        monkeypatch.setattr(snapshot._platform, "machine", lambda: "x86_64")
        assert capture_snapshot(environ={}).arch == "amd64"


class TestCurrentSnapshot:
    """Tests for the process-wide snapshot."""

    def test_idempotent(self, fresh_state):
        assert current_snapshot() is current_snapshot()

    def test_captured_once(self, fresh_state, monkeypatch):
        calls = []
        real_capture = snapshot.capture_snapshot

        def counting_capture():
            calls.append(1)
            return real_capture()

        monkeypatch.setattr(snapshot, "capture_snapshot", counting_capture)

        results = []
        threads = [threading.Thread(target=lambda: results.append(current_snapshot())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert all(r is results[0] for r in results)

    def test_not_affected_by_later_env_changes(self, fresh_state, monkeypatch):
        first = current_snapshot()
        monkeypatch.setenv("OSFAMILY_OS_NAME", "something else")
        assert current_snapshot() is first
