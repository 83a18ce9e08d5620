"""
Shared test fixtures: synthetic snapshots for the platforms the family
rules distinguish, and a reset of the process-wide snapshot state.
"""

import pytest

from osfamily import resolver, snapshot
from osfamily.snapshot import Snapshot


@pytest.fixture
def windows10() -> Snapshot:
    return Snapshot(name="Windows 10", arch="amd64", version="10.0", path_separator=";")


@pytest.fixture
def windows_me() -> Snapshot:
    return Snapshot(name="Windows Me", arch="x86", version="4.90", path_separator=";")


@pytest.fixture
def mac_os_x() -> Snapshot:
    return Snapshot(name="Mac OS X", arch="aarch64", version="14.5", path_separator=":")


@pytest.fixture
def linux() -> Snapshot:
    return Snapshot(name="Linux", arch="x86_64", version="6.8.0", path_separator=":")


@pytest.fixture
def zos() -> Snapshot:
    return Snapshot(name="z/OS", arch="s390x", version="02.05.00", path_separator=":")


@pytest.fixture
def fresh_state(monkeypatch):
    """Forget the captured host snapshot and resolved family."""
    monkeypatch.setattr(snapshot, "_current", None)
    monkeypatch.setattr(resolver, "_resolved", False)
    monkeypatch.setattr(resolver, "_current_family", None)
    for env_var in (
        snapshot.ENV_OS_NAME,
        snapshot.ENV_OS_ARCH,
        snapshot.ENV_OS_VERSION,
        snapshot.ENV_PATH_SEPARATOR,
    ):
        monkeypatch.delenv(env_var, raising=False)
