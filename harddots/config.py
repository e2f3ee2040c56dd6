"""Loading and validating the harddots.toml configuration."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from harddots.errors import ConfigError

DEFAULT_CACHE_DIR = "~/.cache/harddots"


@dataclass
class Application:
    """One managed application and where its configuration lives."""

    name: str
    target_path: str
    source_git_path: str
    packages: dict[str, str] = field(default_factory=dict)
    version: str | None = None
    custom_install: dict[str, str] | None = None


@dataclass
class HarddotsConfig:
    """The whole harddots configuration."""

    git_repo: str
    cache_dir: str | None = None
    applications: list[Application] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> HarddotsConfig:
        """Read and validate a TOML configuration file."""
        try:
            with open(path, "rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            raise ConfigError(f"IO error: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"TOML parsing error: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HarddotsConfig:
        """Build a configuration from an already parsed TOML table."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a table")
        where = "configuration"
        git_repo = _required_str(data, "git_repo", where)
        cache_dir = _optional_str(data, "cache_dir", where)
        if "applications" not in data:
            raise ConfigError(f"missing field `applications` in {where}")
        raw_apps = data["applications"]
        if not isinstance(raw_apps, list):
            raise ConfigError("field `applications` must be an array of tables")
        applications = [
            _parse_application(entry, index) for index, entry in enumerate(raw_apps)
        ]
        return cls(git_repo=git_repo, cache_dir=cache_dir, applications=applications)

    def expanded_cache_dir(self) -> str:
        """The cache directory with a leading ~ expanded."""
        return os.path.expanduser(self.cache_dir or DEFAULT_CACHE_DIR)


def _required_str(data: Mapping[str, Any], key: str, where: str) -> str:
    if key not in data:
        raise ConfigError(f"missing field `{key}` in {where}")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"field `{key}` in {where} must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str, where: str) -> str | None:
    if key not in data:
        return None
    return _required_str(data, key, where)


def _str_table(value: Any, key: str, where: str) -> dict[str, str]:
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ConfigError(f"field `{key}` in {where} must be a table of strings")
    return dict(value)


def _parse_application(entry: Any, index: int) -> Application:
    where = f"applications[{index}]"
    if not isinstance(entry, Mapping):
        raise ConfigError(f"{where} must be a table")
    if "packages" not in entry:
        raise ConfigError(f"missing field `packages` in {where}")
    custom_install = None
    if "custom_install" in entry:
        custom_install = _str_table(entry["custom_install"], "custom_install", where)
    return Application(
        name=_required_str(entry, "name", where),
        target_path=_required_str(entry, "target_path", where),
        source_git_path=_required_str(entry, "source_git_path", where),
        packages=_str_table(entry["packages"], "packages", where),
        version=_optional_str(entry, "version", where),
        custom_install=custom_install,
    )