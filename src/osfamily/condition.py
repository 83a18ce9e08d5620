"""
OS condition builder.

An object-style wrapper over the evaluator for callers that assemble a
condition step by step, e.g. from attributes of a build file element.
"""

from typing import Optional

from osfamily.errors import InvalidArgumentError
from osfamily.evaluator import Query, matches
from osfamily.snapshot import Snapshot, current_snapshot


class OsCondition:
    """
    Mutable holder for family, name, arch and version criteria.

    Each setter lowercases its value and returns the condition, so calls
    can be chained::

        OsCondition().set_family("unix").set_arch("x86_64").evaluate()

    Instances are not meant to be shared between threads.
    """

    def __init__(
        self,
        family: Optional[str] = None,
        name: Optional[str] = None,
        arch: Optional[str] = None,
        version: Optional[str] = None,
    ):
        self.family: Optional[str] = None
        self.name: Optional[str] = None
        self.arch: Optional[str] = None
        self.version: Optional[str] = None

        if family is not None:
            self.set_family(family)
        if name is not None:
            self.set_name(name)
        if arch is not None:
            self.set_arch(arch)
        if version is not None:
            self.set_version(version)

    @staticmethod
    def _normalize(argument: str, value: Optional[str]) -> str:
        if not isinstance(value, str):
            raise InvalidArgumentError(argument, value)
        return value.lower()

    def set_family(self, family: str) -> "OsCondition":
        """Set the OS family to look for (see osfamily.families)."""
        self.family = self._normalize("family", family)
        return self

    def set_name(self, name: str) -> "OsCondition":
        """Set the exact OS name to look for."""
        self.name = self._normalize("name", name)
        return self

    def set_arch(self, arch: str) -> "OsCondition":
        """Set the exact OS architecture to look for."""
        self.arch = self._normalize("arch", arch)
        return self

    def set_version(self, version: str) -> "OsCondition":
        """Set the exact OS version to look for."""
        self.version = self._normalize("version", version)
        return self

    def to_query(self) -> Query:
        """Freeze the current criteria into a Query."""
        return Query(
            family=self.family,
            name=self.name,
            arch=self.arch,
            version=self.version,
        )

    def evaluate(self, snapshot: Optional[Snapshot] = None) -> bool:
        """
        Check the criteria against a snapshot (default: the host).

        Raises:
            ClassificationError: If the family is not a registered identifier
        """
        if snapshot is None:
            snapshot = current_snapshot()
        return matches(self.to_query(), snapshot)

    def __repr__(self) -> str:
        return (
            f"OsCondition(family={self.family!r}, name={self.name!r}, "
            f"arch={self.arch!r}, version={self.version!r})"
        )
