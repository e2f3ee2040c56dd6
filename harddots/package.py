"""Checking for and installing system packages."""

from __future__ import annotations

import logging
import subprocess

from harddots.errors import HarddotsError
from harddots.host import Host, OsType

log = logging.getLogger(__name__)

_CHECK_COMMANDS = {
    OsType.MACOS: ("brew", "info"),
    OsType.DEBIAN: ("dpkg", "-l"),
    OsType.ALPINE: ("apk", "info", "-e"),
}


def installed_check_command(host: Host, package: str) -> list[str]:
    """The command whose success means ``package`` is installed."""
    prefix = _CHECK_COMMANDS.get(host.os_type)
    if prefix is None:
        log.error("Cannot check package status on unknown OS")
        raise HarddotsError("Unsupported OS")
    return [*prefix, package]


def install_command(host: Host, package: str) -> list[str]:
    """The command that installs ``package``, prefixed by the root command if any."""
    cmd = host.package_manager_cmd()
    if cmd is None:
        log.error("No package manager available for %s", host.os_type)
        raise HarddotsError("Unsupported OS")
    parts = cmd.split()
    if host.root_cmd:
        parts.insert(0, host.root_cmd)
    return [*parts, package]


def is_package_installed(host: Host, package: str) -> bool:
    """Whether the host's package manager reports ``package`` as installed."""
    log.debug("Checking if package %r is installed on %s", package, host.os_type)
    result = subprocess.run(installed_check_command(host, package), check=False)
    return result.returncode == 0


def install_package(host: Host, package: str) -> None:
    """Install ``package`` with the host's package manager."""
    log.debug("Installing package %r on %s", package, host.os_type)
    result = subprocess.run(install_command(host, package), check=False)
    if result.returncode != 0:
        message = f"Failed to install package '{package}'"
        log.error(message)
        raise HarddotsError(message)
    log.debug("Successfully installed package %r", package)