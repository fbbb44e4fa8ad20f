"""
TOML-based config file loading for deploypick.

Searches for `.deploypick.toml`, `deploypick.toml`, or `pyproject.toml
[tool.deploypick]` walking up from the workspace root. A config declares
packages and targets as arrays of tables:

    exclude-mode = "resolved"

    [[packages]]
    name = "site"
    files = ["index.html", "assets/app.js"]
    exclude = ["assets/app.js"]

    [[targets]]
    name = "production"
    type = "sftp"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

from deploypick.package_filter import ExcludeMode
from deploypick.quick_picks import DeployPackage, DeployTarget
from deploypick.strings import parse_target_type, to_string_safe


@dataclass
class DeployConfig:
    """
    Parsed config. `exclude_mode` is `None` when not set in the file, so
    callers can tell "not configured" from an explicit choice.
    """

    packages: list[DeployPackage] = field(default_factory=list)
    targets: list[DeployTarget] = field(default_factory=list)
    exclude_mode: ExcludeMode | None = None

    def find_package(self, name: str) -> DeployPackage | None:
        """First package whose trimmed name equals `name`."""
        for pkg in self.packages:
            if to_string_safe(pkg.name).strip() == name:
                return pkg
        return None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".deploypick.toml", "deploypick.toml", "pyproject.toml"]

def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.deploypick.toml` >
    `deploypick.toml` > `pyproject.toml` (only if it has `[tool.deploypick]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_deploypick_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_deploypick_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.deploypick] section."""
    try:
        data = tomllib.loads(path.read_text())
        return "deploypick" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> DeployConfig:
    """
    Load a `DeployConfig` from a TOML file, either a standalone
    `deploypick.toml` / `.deploypick.toml` or the `[tool.deploypick]` table of
    a `pyproject.toml`.
    """
    data = tomllib.loads(config_path.read_text())

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("deploypick", {})

    return _parse_config_data(data)


def _parse_config_data(data: dict[str, Any]) -> DeployConfig:
    mapped = {key.replace("-", "_"): value for key, value in data.items()}

    packages = [_parse_package(entry) for entry in _tables(mapped.get("packages"))]
    targets = [_parse_target(entry) for entry in _tables(mapped.get("targets"))]

    exclude_mode: ExcludeMode | None = None
    raw_mode = mapped.get("exclude_mode")
    if raw_mode is not None:
        exclude_mode = parse_exclude_mode(raw_mode)

    return DeployConfig(packages=packages, targets=targets, exclude_mode=exclude_mode)


def parse_exclude_mode(value: Any) -> ExcludeMode:
    """Parse an exclude mode name, case-insensitively. Raises `ValueError` if unknown."""
    try:
        return ExcludeMode(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(mode.value for mode in ExcludeMode)
        raise ValueError(f"Invalid exclude-mode {value!r} (expected one of: {valid})") from None


def _tables(value: Any) -> list[dict[str, Any]]:
    """Keep only the table entries of a TOML array of tables."""
    if not isinstance(value, list):
        return []
    return [cast(dict[str, Any], v) for v in cast(list[Any], value) if isinstance(v, dict)]


def _string_list(value: Any) -> list[Any]:
    # A single string is accepted as a one-entry list.
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return list(cast(list[Any], value))
    return []


def _parse_package(entry: dict[str, Any]) -> DeployPackage:
    return DeployPackage(
        name=entry.get("name"),
        description=entry.get("description"),
        files=_string_list(entry.get("files")),
        exclude=_string_list(entry.get("exclude")),
    )


def _parse_target(entry: dict[str, Any]) -> DeployTarget:
    return DeployTarget(
        name=entry.get("name"),
        description=entry.get("description"),
        type=parse_target_type(entry.get("type")) or None,
    )
