"""Types for package file filtering."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from deploypick.strings import to_string_safe

if TYPE_CHECKING:
    from deploypick.quick_picks import DeployPackage


class ExcludeMode(Enum):
    """
    How exclude entries are compared once a candidate has matched an include.

    `RESOLVED` resolves each exclude entry against the workspace root before
    comparing it with the matched include, so relative and absolute spellings
    of the same file are equivalent.

    `VERBATIM` compares the raw exclude string with the matched include's
    resolved path. Only an exclude written exactly as that absolute path has
    any effect; relative excludes never do.
    """

    RESOLVED = "resolved"
    VERBATIM = "verbatim"


def _normalize_entries(entries: Sequence[Any] | None) -> list[str]:
    if not entries:
        return []
    normalized = (to_string_safe(entry).strip() for entry in entries)
    return [entry for entry in normalized if entry]


@dataclass(frozen=True)
class PackageFilterSpec:
    """
    Include and exclude lists of a deploy package.

    Raw entries may be `None` or non-strings; `effective_includes` and
    `effective_excludes` give the trimmed, non-empty strings in their
    original order. An empty include list means every file is included.
    """

    includes: Sequence[Any] | None = field(default_factory=list)
    excludes: Sequence[Any] | None = field(default_factory=list)

    @classmethod
    def from_package(cls, pkg: DeployPackage) -> PackageFilterSpec:
        return cls(includes=pkg.files, excludes=pkg.exclude)

    @property
    def effective_includes(self) -> list[str]:
        return _normalize_entries(self.includes)

    @property
    def effective_excludes(self) -> list[str]:
        return _normalize_entries(self.excludes)
