"""
Family resolver.

Picks one representative family for display and logging. Several families
can match the same host, so the answer depends on FAMILY_PRIORITY and should
not drive behaviour; query a specific family with is_family() instead.
"""

import logging
import threading
from typing import Optional

from osfamily.classifier import classify
from osfamily.families import FAMILY_PRIORITY
from osfamily.snapshot import Snapshot, current_snapshot

logger = logging.getLogger(__name__)


def resolve_current_family(snapshot: Snapshot) -> Optional[str]:
    """Return the first family in priority order that matches, or None."""
    for family in FAMILY_PRIORITY:
        if classify(family, snapshot):
            return family
    logger.warning("No OS family matched snapshot %s", snapshot)
    return None


_resolved = False
_current_family: Optional[str] = None
_lock = threading.Lock()


def current_family() -> Optional[str]:
    """
    Get the resolved family of the host.

    Resolved once per process. None means the platform is unsupported.
    """
    global _resolved, _current_family
    if not _resolved:
        with _lock:
            if not _resolved:
                _current_family = resolve_current_family(current_snapshot())
                logger.debug("Resolved current OS family: %s", _current_family)
                _resolved = True
    return _current_family
