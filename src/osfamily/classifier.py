"""
Family classifier.

Decides whether a snapshot belongs to a family using substring and path
separator heuristics. The rules are evaluated independently per family, so
one snapshot can belong to several families at once: a Windows NT host is
"windows", "winnt" and "dos"; a POSIX z/OS host is both "unix" and "z/os".
"""

from typing import Callable, Dict

from osfamily.errors import ClassificationError, InvalidArgumentError
from osfamily.families import (
    FAMILY_DOS,
    FAMILY_MAC,
    FAMILY_NETWARE,
    FAMILY_NT,
    FAMILY_OPENVMS,
    FAMILY_OS2,
    FAMILY_OS400,
    FAMILY_TANDEM,
    FAMILY_UNIX,
    FAMILY_WIN9X,
    FAMILY_WINDOWS,
    FAMILY_ZOS,
)
from osfamily.snapshot import Snapshot

# Some JDKs and Python itself report macOS as "Darwin"
DARWIN = "darwin"

# The only 9x-style platforms looked for. CE isn't 9x, but close enough.
_WIN9X_MARKERS = ("95", "98", "me", "ce")


def _is_windows(snapshot: Snapshot) -> bool:
    return FAMILY_WINDOWS in snapshot.name


def _is_win9x(snapshot: Snapshot) -> bool:
    return _is_windows(snapshot) and any(m in snapshot.name for m in _WIN9X_MARKERS)


def _is_winnt(snapshot: Snapshot) -> bool:
    return _is_windows(snapshot) and not _is_win9x(snapshot)


def _is_os2(snapshot: Snapshot) -> bool:
    return FAMILY_OS2 in snapshot.name


def _is_netware(snapshot: Snapshot) -> bool:
    return FAMILY_NETWARE in snapshot.name


def _is_dos(snapshot: Snapshot) -> bool:
    return snapshot.path_separator == ";" and not _is_netware(snapshot)


def _is_mac(snapshot: Snapshot) -> bool:
    return FAMILY_MAC in snapshot.name or DARWIN in snapshot.name


def _is_tandem(snapshot: Snapshot) -> bool:
    return "nonstop_kernel" in snapshot.name


def _is_openvms(snapshot: Snapshot) -> bool:
    return FAMILY_OPENVMS in snapshot.name


def _is_unix(snapshot: Snapshot) -> bool:
    if snapshot.path_separator != ":" or _is_openvms(snapshot):
        return False
    # Classic Mac OS is not unix, Mac OS X and Darwin are
    return (
        not _is_mac(snapshot)
        or snapshot.name.endswith("x")
        or DARWIN in snapshot.name
    )


def _is_zos(snapshot: Snapshot) -> bool:
    return FAMILY_ZOS in snapshot.name or "os/390" in snapshot.name


def _is_os400(snapshot: Snapshot) -> bool:
    return FAMILY_OS400 in snapshot.name


FAMILY_RULES: Dict[str, Callable[[Snapshot], bool]] = {
    FAMILY_WINDOWS: _is_windows,
    FAMILY_WIN9X: _is_win9x,
    FAMILY_NT: _is_winnt,
    FAMILY_OS2: _is_os2,
    FAMILY_NETWARE: _is_netware,
    FAMILY_DOS: _is_dos,
    FAMILY_MAC: _is_mac,
    FAMILY_TANDEM: _is_tandem,
    FAMILY_UNIX: _is_unix,
    FAMILY_ZOS: _is_zos,
    FAMILY_OS400: _is_os400,
    FAMILY_OPENVMS: _is_openvms,
}


def classify(family: str, snapshot: Snapshot) -> bool:
    """
    Check whether a snapshot belongs to an OS family.

    Args:
        family: One of the registered family identifiers
        snapshot: Host description to classify

    Returns:
        True if the snapshot matches the family's rule

    Raises:
        InvalidArgumentError: If family is None or not a string
        ClassificationError: If family is not a registered identifier
    """
    if not isinstance(family, str):
        raise InvalidArgumentError("family", family)
    rule = FAMILY_RULES.get(family)
    if rule is None:
        raise ClassificationError(family)
    return rule(snapshot)
