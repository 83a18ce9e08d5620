"""
Family registry.

The closed set of OS family identifiers that conditions may test for.
The literal spellings are shared with build configuration files and must
not change.
"""

from typing import Any, FrozenSet, Tuple

FAMILY_WINDOWS = "windows"
FAMILY_WIN9X = "win9x"
FAMILY_NT = "winnt"
FAMILY_OS2 = "os/2"
FAMILY_NETWARE = "netware"
FAMILY_DOS = "dos"
FAMILY_MAC = "mac"
FAMILY_TANDEM = "tandem"
FAMILY_UNIX = "unix"
FAMILY_OPENVMS = "openvms"
FAMILY_ZOS = "z/os"
FAMILY_OS400 = "os/400"

# Resolution order for picking one representative family. Sub-families and
# hosts that also look like dos or unix come before the broad families.
FAMILY_PRIORITY: Tuple[str, ...] = (
    FAMILY_WIN9X,
    FAMILY_NT,
    FAMILY_WINDOWS,
    FAMILY_OS2,
    FAMILY_NETWARE,
    FAMILY_DOS,
    FAMILY_ZOS,
    FAMILY_OS400,
    FAMILY_OPENVMS,
    FAMILY_TANDEM,
    FAMILY_MAC,
    FAMILY_UNIX,
)

_VALID_FAMILIES: FrozenSet[str] = frozenset(FAMILY_PRIORITY)


def valid_families() -> FrozenSet[str]:
    """Return the set of family identifiers that can be tested for."""
    return _VALID_FAMILIES


def is_valid_family(family: Any) -> bool:
    """
    Check whether ``family`` is one of the registered identifiers.

    Never raises: ``None``, empty strings and non-string values are simply
    not valid families. The comparison is exact, so ``"Windows"`` is not valid.
    """
    if not isinstance(family, str):
        return False
    return family in _VALID_FAMILIES
