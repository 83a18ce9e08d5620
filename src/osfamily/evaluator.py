"""
Predicate evaluator.

Combines the optional family, name, arch and version criteria of a query
against a snapshot. Present criteria are ANDed; absent ones are ignored.
A query with no criteria at all never matches, so a condition that was left
empty by mistake does not silently turn into "always true".
"""

from dataclasses import dataclass
from typing import Optional

from osfamily.classifier import classify
from osfamily.errors import ClassificationError, InvalidArgumentError
from osfamily.snapshot import Snapshot, current_snapshot


@dataclass(frozen=True)
class Query:
    """
    Match criteria. Each field is optional; ``None`` means "don't care".

    name, arch and version are lowercased. The family token is kept as given
    and must be one of the registered identifiers.
    """

    family: Optional[str] = None
    name: Optional[str] = None
    arch: Optional[str] = None
    version: Optional[str] = None

    def __post_init__(self) -> None:
        for field_name in ("family", "name", "arch", "version"):
            value = getattr(self, field_name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidArgumentError(field_name, value)
            if field_name != "family":
                object.__setattr__(self, field_name, value.lower())

    @property
    def is_empty(self) -> bool:
        """True if no criteria were given."""
        return (
            self.family is None
            and self.name is None
            and self.arch is None
            and self.version is None
        )


@dataclass
class MatchResult:
    """Outcome of evaluating a query without raising."""

    success: bool
    value: bool
    error: Optional[ClassificationError]

    def __bool__(self) -> bool:
        return self.success and self.value


def matches(query: Query, snapshot: Snapshot) -> bool:
    """
    Evaluate a query against a snapshot.

    Raises:
        ClassificationError: If the query names an unknown family
    """
    if query.is_empty:
        return False

    if query.family is not None and not classify(query.family, snapshot):
        return False
    if query.name is not None and query.name != snapshot.name:
        return False
    if query.arch is not None and query.arch != snapshot.arch:
        return False
    if query.version is not None and query.version != snapshot.version:
        return False
    return True


def check(query: Query, snapshot: Snapshot) -> MatchResult:
    """
    Evaluate a query, returning classification errors instead of raising.

    Useful for configuration-driven callers that want to report an unknown
    family token rather than abort.
    """
    try:
        value = matches(query, snapshot)
    except ClassificationError as e:
        return MatchResult(success=False, value=False, error=e)
    return MatchResult(success=True, value=value, error=None)


def is_os(
    family: Optional[str] = None,
    name: Optional[str] = None,
    arch: Optional[str] = None,
    version: Optional[str] = None,
    snapshot: Optional[Snapshot] = None,
) -> bool:
    """Check the given criteria against a snapshot (default: the host)."""
    if snapshot is None:
        snapshot = current_snapshot()
    return matches(Query(family=family, name=name, arch=arch, version=version), snapshot)


def _require(argument: str, value: Optional[str]) -> str:
    if value is None:
        raise InvalidArgumentError(argument)
    return value


def is_family(family: str, snapshot: Optional[Snapshot] = None) -> bool:
    """Check whether the host (or snapshot) belongs to ``family``."""
    return is_os(family=_require("family", family), snapshot=snapshot)


def is_name(name: str, snapshot: Optional[Snapshot] = None) -> bool:
    """Check whether the OS name is exactly ``name`` (case-insensitive)."""
    return is_os(name=_require("name", name), snapshot=snapshot)


def is_arch(arch: str, snapshot: Optional[Snapshot] = None) -> bool:
    """Check whether the OS architecture is exactly ``arch``."""
    return is_os(arch=_require("arch", arch), snapshot=snapshot)


def is_version(version: str, snapshot: Optional[Snapshot] = None) -> bool:
    """Check whether the OS version is exactly ``version``."""
    return is_os(version=_require("version", version), snapshot=snapshot)
