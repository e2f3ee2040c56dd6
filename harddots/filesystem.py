"""File-system helpers for placing configuration files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


def create_hardlink(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """Hard-link ``target`` to ``source``, creating parents and replacing an existing file.

    A symbolic link at ``target`` that already points at ``source`` is left alone.
    """
    source_path = Path(source)
    target_path = Path(target)
    log.debug("Creating hardlink from %s to %s", source_path, target_path)

    parent = target_path.parent
    if str(parent):
        parent.mkdir(parents=True, exist_ok=True)
        log.debug("Created parent directory %s", parent)

    if target_path.exists():
        try:
            existing = Path(os.readlink(target_path))
        except OSError:
            existing = None
        if existing == source_path:
            log.debug("Hardlink from %s to %s already exists", source_path, target_path)
            return
        target_path.unlink()
        log.debug("Removed existing file at %s", target_path)

    os.link(source_path, target_path)
    log.debug("Successfully created hardlink from %s to %s", source_path, target_path)