"""
Deploy targets, packages, and the picker items built from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from deploypick.strings import to_string_safe


@dataclass
class DeployTarget:
    """A configured deploy destination."""

    name: str | None = None
    description: str | None = None
    type: str | None = None


@dataclass
class DeployPackage:
    """
    A named set of files to deploy. `files` lists the paths the package
    covers (empty means everything); `exclude` lists paths removed again.
    """

    name: str | None = None
    description: str | None = None
    files: list[Any] | None = field(default_factory=list)
    exclude: list[Any] | None = field(default_factory=list)


@dataclass
class TargetQuickPickItem:
    label: str
    description: str
    target: DeployTarget


@dataclass
class FileQuickPickItem(TargetQuickPickItem):
    file: str = ""


@dataclass
class PackageQuickPickItem:
    label: str
    description: str
    package: DeployPackage


def _label_and_description(name: Any, description: Any, fallback: str) -> tuple[str, str]:
    label = to_string_safe(name).strip() or fallback
    return label, to_string_safe(description).strip()


def create_target_quick_pick(target: DeployTarget, index: int) -> TargetQuickPickItem:
    """Picker item for a target; unnamed targets get `(Target #n)`, 1-based."""
    label, description = _label_and_description(
        target.name, target.description, f"(Target #{index + 1})"
    )
    return TargetQuickPickItem(label=label, description=description, target=target)


def create_file_quick_pick(file: str, target: DeployTarget, index: int) -> FileQuickPickItem:
    """Picker item for deploying a single `file` to `target`."""
    item = create_target_quick_pick(target, index)
    return FileQuickPickItem(
        label=item.label, description=item.description, target=target, file=file
    )


def create_package_quick_pick(pkg: DeployPackage, index: int) -> PackageQuickPickItem:
    """Picker item for a package; unnamed packages get `(Package #n)`, 1-based."""
    label, description = _label_and_description(
        pkg.name, pkg.description, f"(Package #{index + 1})"
    )
    return PackageQuickPickItem(label=label, description=description, package=pkg)
