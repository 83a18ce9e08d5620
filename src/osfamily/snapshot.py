"""
Environment snapshot.

Captures the four host values that family classification works from: the
OS name, architecture, version and path-list separator. The process-wide
snapshot is captured once on first use and never changes afterwards; any
other snapshot (synthetic ones in tests, facts loaded from a file) can be
passed explicitly to the classifier and evaluator.
"""

import logging
import os
import platform as _platform
import threading
from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional

from osfamily.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# Environment variables that override individual host values
ENV_OS_NAME = "OSFAMILY_OS_NAME"
ENV_OS_ARCH = "OSFAMILY_OS_ARCH"
ENV_OS_VERSION = "OSFAMILY_OS_VERSION"
ENV_PATH_SEPARATOR = "OSFAMILY_PATH_SEPARATOR"

# platform.system() spellings that differ from the names build tools use
_SYSTEM_ALIASES: Dict[str, str] = {
    "os400": "os/400",
}

# platform.machine() spellings mapped to the arch names build tools report.
# macOS keeps "x86_64".
_ARCH_ALIASES: Dict[str, str] = {
    "x86_64": "amd64",
    "arm64": "aarch64",
    "i486": "i386",
    "i586": "i386",
    "i686": "i386",
}


@dataclass(frozen=True)
class Snapshot:
    """Immutable host description used as classification input."""

    name: str
    arch: str
    version: str
    path_separator: str

    def __post_init__(self) -> None:
        for field_name in ("name", "arch", "version", "path_separator"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise InvalidArgumentError(field_name, value)
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "name", self.name.lower())
        object.__setattr__(self, "arch", self.arch.lower())
        object.__setattr__(self, "version", self.version.lower())

    def as_dict(self) -> Dict[str, str]:
        """Return the snapshot as a plain dictionary."""
        return asdict(self)


def host_os_name() -> str:
    """
    Get the OS name the way build conditions expect it.

    Windows reports its release in the name ("windows 10", "windows 95"),
    which the win9x/winnt split depends on.
    """
    system = _platform.system()
    if system == "Windows":
        return f"{system} {_platform.release()}".strip()
    if not system:
        return _platform.platform()
    return _SYSTEM_ALIASES.get(system.lower(), system)


def host_os_arch() -> str:
    """Get the architecture, e.g. "amd64" rather than "x86_64" on Linux."""
    machine = _platform.machine().lower()
    if _platform.system() == "Darwin" and machine == "x86_64":
        return machine
    return _ARCH_ALIASES.get(machine, machine)


def host_os_version() -> str:
    """
    Get the OS version.

    Windows reports "major.minor" ("10.0") from platform.version(); other
    systems use the kernel release.
    """
    if _platform.system() == "Windows":
        parts = _platform.version().split(".")
        if len(parts) >= 2:
            return ".".join(parts[:2])
    return _platform.release()


def capture_snapshot(environ: Optional[Mapping[str, str]] = None) -> Snapshot:
    """
    Build a fresh snapshot from the host.

    Values are spelled the way JVM-based build tools report them, so
    existing configurations keep matching: arch "amd64" for x86_64 and
    Windows versions as "10.0".

    Args:
        environ: Environment to read overrides from (default: os.environ)

    Returns:
        Snapshot of the host with any OSFAMILY_* overrides applied
    """
    if environ is None:
        environ = os.environ

    values = {
        "name": host_os_name(),
        "arch": host_os_arch(),
        "version": host_os_version(),
        "path_separator": os.pathsep,
    }

    overrides = {
        "name": ENV_OS_NAME,
        "arch": ENV_OS_ARCH,
        "version": ENV_OS_VERSION,
        "path_separator": ENV_PATH_SEPARATOR,
    }
    for key, env_var in overrides.items():
        override = environ.get(env_var)
        if override:
            logger.debug("Overriding host %s with %s=%r", key, env_var, override)
            values[key] = override

    snapshot = Snapshot(**values)
    logger.debug("Captured snapshot: %s", snapshot)
    return snapshot


_current: Optional[Snapshot] = None
_lock = threading.Lock()


def current_snapshot() -> Snapshot:
    """Get the process-wide snapshot, capturing it on first call."""
    global _current
    if _current is None:
        with _lock:
            if _current is None:
                _current = capture_snapshot()
    return _current
