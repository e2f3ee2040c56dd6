"""The ``deploy`` command: install packages and link configuration files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from harddots.config import Application, HarddotsConfig
from harddots.errors import HarddotsError
from harddots.filesystem import create_hardlink
from harddots.host import Host
from harddots.package import install_package, is_package_installed

log = logging.getLogger(__name__)

ALL = "all"


def select_applications(config: HarddotsConfig, application: str) -> list[Application]:
    """The applications named by ``application``, or every one for ``"all"``."""
    if application == ALL:
        return list(config.applications)
    for app in config.applications:
        if app.name == application:
            return [app]
    log.error("Application '%s' not found in harddots.toml", application)
    raise HarddotsError(f"Application '{application}' not found")


def _ensure_package(host: Host, app: Application, dry_run: bool) -> None:
    pkg = app.packages.get(host.os_type.value)
    if pkg is None:
        log.debug("No package specified for %s on %s", app.name, host.os_type)
        return
    log.debug("Checking package '%s' for %s", pkg, app.name)
    if is_package_installed(host, pkg):
        log.debug("Package '%s' already installed for %s", pkg, app.name)
    elif dry_run:
        log.info("Dry run: Would install package '%s' for %s", pkg, app.name)
    else:
        log.info("Installing package '%s' for %s", pkg, app.name)
        install_package(host, pkg)


def run(config: HarddotsConfig, application: str = ALL, dry_run: bool = False) -> None:
    """Deploy one application, or all of them, onto this host."""
    log.info(
        "Deploying with configuration: %r Application: %s Dry run: %s",
        config,
        application,
        dry_run,
    )
    host = Host.detect()
    log.debug("Detected host: %r", host)

    apps = select_applications(config, application)
    cache_dir = config.expanded_cache_dir()

    for app in apps:
        log.debug("Processing application: %s", app.name)
        _ensure_package(host, app, dry_run)

        source_path = f"{cache_dir}/{app.source_git_path}"
        target_path = os.path.expanduser(app.target_path)
        log.debug("Preparing to link: %s -> %s", source_path, target_path)

        if not Path(source_path).exists():
            log.error("Source file %s does not exist in cache", source_path)
            raise HarddotsError(f"Source file {source_path} not found")

        if dry_run:
            log.info(
                "Dry run: Would create hardlink from %s to %s for %s",
                source_path,
                target_path,
                app.name,
            )
        else:
            log.info(
                "Creating hardlink from %s to %s for %s",
                source_path,
                target_path,
                app.name,
            )
            create_hardlink(source_path, target_path)

    if dry_run:
        print("Dry run completed, no changes made.")
    else:
        print(f"Successfully deployed {application}")