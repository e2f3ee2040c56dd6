import subprocess
from unittest.mock import patch

import pytest

from harddots.errors import HarddotsError
from harddots.host import Host, OsType
from harddots.package import (
    install_command,
    install_package,
    installed_check_command,
    is_package_installed,
)


@pytest.mark.parametrize(
    "os_type, expected",
    [
        (OsType.MACOS, ["brew", "info", "vim"]),
        (OsType.DEBIAN, ["dpkg", "-l", "vim"]),
        (OsType.ALPINE, ["apk", "info", "-e", "vim"]),
    ],
)
def test_installed_check_command(os_type, expected):
    assert installed_check_command(Host(os_type), "vim") == expected


def test_installed_check_command_unknown():
    with pytest.raises(HarddotsError, match="Unsupported OS"):
        installed_check_command(Host(OsType.UNKNOWN), "vim")


def test_install_command_with_root():
    host = Host(OsType.DEBIAN, "sudo")
    assert install_command(host, "vim") == ["sudo", "apt", "install", "-y", "vim"]


def test_install_command_without_root():
    assert install_command(Host(OsType.ALPINE), "vim") == ["apk", "add", "vim"]


def test_install_command_unknown():
    with pytest.raises(HarddotsError, match="Unsupported OS"):
        install_command(Host(OsType.UNKNOWN, "sudo"), "vim")


@pytest.mark.parametrize("code, expected", [(0, True), (1, False)])
def test_is_package_installed(code, expected):
    with patch(
        "harddots.package.subprocess.run",
        return_value=subprocess.CompletedProcess([], code),
    ) as run:
        assert is_package_installed(Host(OsType.MACOS), "git") is expected
    assert run.call_args.args[0] == ["brew", "info", "git"]


def test_install_package_runs_command():
    with patch(
        "harddots.package.subprocess.run",
        return_value=subprocess.CompletedProcess([], 0),
    ) as run:
        result = install_package(Host(OsType.ALPINE, "doas"), "git")
    assert result is None
    assert run.call_args.args[0] == ["doas", "apk", "add", "git"]


def test_install_package_failure():
    with patch(
        "harddots.package.subprocess.run",
        return_value=subprocess.CompletedProcess([], 100),
    ):
        with pytest.raises(HarddotsError, match="Failed to install package 'git'"):
            install_package(Host(OsType.DEBIAN), "git")