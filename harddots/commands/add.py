"""The ``add`` command: register a new application in the configuration file."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from harddots.config import HarddotsConfig
from harddots.errors import ConfigError, HarddotsError

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "harddots.toml"


def _application_entry(
    name: str,
    target_path: str,
    source_git_path: str,
    packages: dict[str, str],
) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "name": name,
        "target_path": target_path,
        "source_git_path": source_git_path,
    }
    if packages:
        entry["packages"] = packages
    return entry


def run(
    config: HarddotsConfig,
    name: str,
    target_path: str,
    source_git_path: str,
    macos_pkg: str | None = None,
    debian_pkg: str | None = None,
    alpine_pkg: str | None = None,
    config_path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH,
) -> None:
    """Append a new application to the configuration file at ``config_path``."""
    log.debug("Running add command for application: %s", name)
    log.debug(
        "Arguments: target_path=%s, source_git_path=%s, macos_pkg=%r, "
        "debian_pkg=%r, alpine_pkg=%r",
        target_path,
        source_git_path,
        macos_pkg,
        debian_pkg,
        alpine_pkg,
    )

    path = Path(config_path)
    log.info("Reading existing configuration from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"IO error: {exc}") from exc
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"TOML parsing error: {exc}") from exc

    applications = document.setdefault("applications", [])
    if not isinstance(applications, list):
        raise ConfigError("field `applications` must be an array of tables")

    if any(isinstance(app, dict) and app.get("name") == name for app in applications):
        log.error("Application '%s' already exists in %s", name, path)
        raise HarddotsError(f"Application '{name}' already exists")

    candidates = (("macos", macos_pkg), ("debian", debian_pkg), ("alpine", alpine_pkg))
    packages = {os_name: pkg for os_name, pkg in candidates if pkg is not None}

    applications.append(_application_entry(name, target_path, source_git_path, packages))

    content = tomli_w.dumps(document)
    log.debug("Updated TOML content: %s", content)

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise HarddotsError(f"IO error: {exc}") from exc
    log.debug("Successfully wrote updated configuration to %s", path)

    print(f"Added application '{name}' to {path.name}")