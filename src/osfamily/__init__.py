# Copyright (c) 2024 osfamily Contributors
# MIT License

"""
osfamily: OS family classification for build-time platform conditions.

Answers questions like "is this a unix host?" or "is this Windows 9x on
x86?" without hard-coding raw OS name strings at each call site.

Features:
    - 12 canonical families (windows, win9x, winnt, os/2, netware, dos,
      mac, tandem, unix, openvms, z/os, os/400)
    - Pure functions over an explicit, immutable host snapshot
    - OsCondition builder and Jinja2 condition expressions
    - YAML facts files to evaluate conditions for another platform
"""

from __future__ import annotations

from osfamily.release import __version__, __author__, __codename__
from osfamily.classifier import classify
from osfamily.condition import OsCondition
from osfamily.errors import (
    ClassificationError,
    ConditionError,
    ConfigError,
    InvalidArgumentError,
    OsFamilyError,
)
from osfamily.evaluator import (
    MatchResult,
    Query,
    check,
    is_arch,
    is_family,
    is_name,
    is_os,
    is_version,
    matches,
)
from osfamily.families import (
    FAMILY_DOS,
    FAMILY_MAC,
    FAMILY_NETWARE,
    FAMILY_NT,
    FAMILY_OPENVMS,
    FAMILY_OS2,
    FAMILY_OS400,
    FAMILY_PRIORITY,
    FAMILY_TANDEM,
    FAMILY_UNIX,
    FAMILY_WIN9X,
    FAMILY_WINDOWS,
    FAMILY_ZOS,
    is_valid_family,
    valid_families,
)
from osfamily.resolver import current_family, resolve_current_family
from osfamily.snapshot import Snapshot, capture_snapshot, current_snapshot

__all__ = [
    "__version__",
    "__author__",
    "__codename__",
    "FAMILY_DOS",
    "FAMILY_MAC",
    "FAMILY_NETWARE",
    "FAMILY_NT",
    "FAMILY_OPENVMS",
    "FAMILY_OS2",
    "FAMILY_OS400",
    "FAMILY_PRIORITY",
    "FAMILY_TANDEM",
    "FAMILY_UNIX",
    "FAMILY_WIN9X",
    "FAMILY_WINDOWS",
    "FAMILY_ZOS",
    "ClassificationError",
    "ConditionError",
    "ConfigError",
    "InvalidArgumentError",
    "MatchResult",
    "OsCondition",
    "OsFamilyError",
    "Query",
    "Snapshot",
    "capture_snapshot",
    "check",
    "classify",
    "current_family",
    "current_snapshot",
    "is_arch",
    "is_family",
    "is_name",
    "is_os",
    "is_valid_family",
    "is_version",
    "matches",
    "resolve_current_family",
    "valid_families",
]
