"""Cloning and inspecting the dotfiles Git repository."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from harddots.errors import HarddotsError

log = logging.getLogger(__name__)


def get_remote_url(cache_dir: str) -> str:
    """The URL of the ``origin`` remote of the repository in ``cache_dir``."""
    log.debug("Checking remote URL for repository at %s", cache_dir)
    result = subprocess.run(
        ["git", "-C", cache_dir, "remote", "get-url", "origin"],
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        message = f"Failed to get remote URL for {cache_dir}: {stderr}"
        log.error(message)
        raise HarddotsError(message)
    url = result.stdout.decode("utf-8", errors="replace")
    log.debug("Remote URL: %s", url)
    return url


def clone_repo(url: str, cache_dir: str) -> None:
    """Clone ``url`` into ``cache_dir`` unless the same repository is already there."""
    log.debug("Preparing to clone repository %s to %s", url, cache_dir)
    cache_path = Path(cache_dir)

    if cache_path.exists() and (cache_path / ".git").exists():
        current_url = get_remote_url(cache_dir)
        if current_url.strip() == url.strip():
            log.debug("Existing repository matches URL %s, skipping clone", url)
            return
        message = (
            f"Cache directory {cache_dir} contains a different repository "
            f"(remote: {current_url})"
        )
        log.error(message)
        raise HarddotsError(message)

    cache_path.parent.mkdir(parents=True, exist_ok=True)

    log.debug("Executing git clone %s %s", url, cache_dir)
    result = subprocess.run(["git", "clone", url, cache_dir], check=False)
    if result.returncode != 0:
        message = (
            f"Failed to clone repository {url} to {cache_dir}: "
            f"git exited with exit status: {result.returncode}"
        )
        log.error(message)
        raise HarddotsError(message)
    log.debug("Successfully cloned repository %s to %s", url, cache_dir)