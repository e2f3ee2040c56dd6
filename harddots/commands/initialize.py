"""The ``init`` command: clone the dotfiles repository into the cache."""

from __future__ import annotations

import logging
from pathlib import Path

from harddots.config import HarddotsConfig
from harddots.git import clone_repo

log = logging.getLogger(__name__)


def run(config: HarddotsConfig) -> None:
    """Clone the configured repository unless the cache already holds one."""
    log.debug(
        "Running init command with git_repo: %s and cache_dir: %r",
        config.git_repo,
        config.cache_dir,
    )
    cache_dir = config.expanded_cache_dir()
    log.debug("Expanded cache_dir: %s", cache_dir)

    cache_path = Path(cache_dir)
    if cache_path.exists() and (cache_path / ".git").exists():
        log.debug("Cache directory %s already contains a Git repository, skipping clone", cache_dir)
        print(f"Repository already initialized at {cache_dir}")
        return

    log.debug("Cloning repository %s to %s", config.git_repo, cache_dir)
    clone_repo(config.git_repo, cache_dir)
    print(f"Successfully cloned repository to {cache_dir}")