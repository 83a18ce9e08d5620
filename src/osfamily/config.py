"""
Snapshot facts files.

Loads a synthetic snapshot from YAML so conditions can be checked for a
host other than the one running, for example in CI or when previewing a
build on another platform::

    name: windows 98
    arch: x86
    version: "4.10"
    path_separator: ";"

Keys that are left out fall back to the host's own values.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from osfamily.errors import ConfigError, OsFamilyError
from osfamily.snapshot import Snapshot, current_snapshot

logger = logging.getLogger(__name__)

SNAPSHOT_KEYS = ("name", "arch", "version", "path_separator")


def snapshot_from_mapping(
    data: Any,
    base: Optional[Snapshot] = None,
    source: Optional[str] = None,
) -> Snapshot:
    """
    Build a snapshot from loaded facts.

    Args:
        data: Mapping with any of name, arch, version, path_separator
        base: Snapshot supplying missing keys (default: the host)
        source: File the data came from, for error messages

    Raises:
        ConfigError: If data is not a mapping or has unknown keys or bad values
    """
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"Expected a mapping of snapshot facts, got {type(data).__name__}",
            file_path=source,
        )

    unknown = sorted(str(k) for k in data if k not in SNAPSHOT_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown snapshot keys: {', '.join(unknown)}",
            file_path=source,
            details=f"Allowed keys: {', '.join(SNAPSHOT_KEYS)}",
        )

    if base is None:
        base = current_snapshot()
    values = base.as_dict()
    for key, value in data.items():
        # YAML turns bare versions like 10.0 into floats
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        values[key] = value

    try:
        return Snapshot(**values)
    except OsFamilyError as e:
        raise ConfigError(e.message, file_path=source)


def load_snapshot_file(
    path: Union[str, Path],
    base: Optional[Snapshot] = None,
) -> Snapshot:
    """
    Load a snapshot from a YAML facts file.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read facts file: {e}", file_path=str(path))

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML", file_path=str(path), details=str(e))

    snapshot = snapshot_from_mapping(data or {}, base=base, source=str(path))
    logger.debug("Loaded snapshot from %s: %s", path, snapshot)
    return snapshot
