"""Detection of the host operating system and privilege command."""

from __future__ import annotations

import logging
import shutil
import sys
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

log = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"


class OsType(StrEnum):
    """Operating systems harddots knows how to install packages on."""

    MACOS = "macos"
    DEBIAN = "debian"
    ALPINE = "alpine"
    UNKNOWN = "unknown"


_PACKAGE_MANAGERS = {
    OsType.MACOS: "brew install",
    OsType.DEBIAN: "apt install -y",
    OsType.ALPINE: "apk add",
}

_LINUX_IDS = {"debian": OsType.DEBIAN, "alpine": OsType.ALPINE}


def read_os_release_id(path: str = OS_RELEASE_PATH) -> str | None:
    """Return the ID field of an os-release file, "" if absent, None if unreadable."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    for line in text.splitlines():
        key, sep, value = line.strip().partition("=")
        if sep and key.strip() == "ID":
            return value.strip().strip("\"'")
    return ""


@dataclass(frozen=True)
class Host:
    """The machine harddots runs on."""

    os_type: OsType
    root_cmd: str = ""

    @classmethod
    def detect(cls) -> Host:
        """Inspect the running system."""
        log.debug("Detecting host OS")
        if sys.platform == "darwin":
            os_type = OsType.MACOS
        elif sys.platform.startswith("linux"):
            os_id = read_os_release_id(OS_RELEASE_PATH)
            if os_id is None:
                log.debug("Failed to read %s", OS_RELEASE_PATH)
                os_type = OsType.UNKNOWN
            else:
                os_type = _LINUX_IDS.get(os_id, OsType.UNKNOWN)
                if os_type is OsType.UNKNOWN:
                    log.debug("Unknown Linux distribution: %s", os_id)
        else:
            log.debug("Unknown OS: %s", sys.platform)
            os_type = OsType.UNKNOWN

        root_cmd = next(
            (name for name in ("sudo", "doas") if shutil.which(name)), ""
        )
        log.debug("Root command: %r", root_cmd)
        return cls(os_type=os_type, root_cmd=root_cmd)

    def package_manager_cmd(self) -> str | None:
        """The install command for this OS, or None when unknown."""
        cmd = _PACKAGE_MANAGERS.get(self.os_type)
        if cmd is None:
            log.debug("No package manager for unknown OS")
        return cmd