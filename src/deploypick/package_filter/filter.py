"""
PackageFileFilter: selects the candidate files a deploy package covers.

A candidate is kept when its absolute path equals one of the package's
include entries and that include is not cancelled by an exclude entry. Only
the first matching include is considered. Results keep the candidates'
original order, duplicates included.
"""

from __future__ import annotations

from collections.abc import Iterable

from deploypick.package_filter.types import ExcludeMode, PackageFilterSpec
from deploypick.paths import resolve_path, to_absolute
from deploypick.strings import to_string_safe


class PackageFileFilter:
    """
    Filters candidate file lists against one `PackageFilterSpec`.

    Include and exclude entries are normalized once at construction; they are
    resolved against `root_path` on first use, so a filter whose includes are
    empty never needs a root at all.
    """

    def __init__(
        self,
        spec: PackageFilterSpec,
        root_path: str | None,
        mode: ExcludeMode = ExcludeMode.RESOLVED,
    ) -> None:
        self._root_path: str | None = root_path
        self._mode: ExcludeMode = mode
        self._includes: list[str] = spec.effective_includes
        self._excludes: list[str] = spec.effective_excludes

    @property
    def includes_everything(self) -> bool:
        return not self._includes

    def filter(self, all_files: Iterable[str]) -> list[str]:
        """
        Return the files from `all_files` covered by the package.

        Raises `WorkspaceRootError` if a relative candidate or pattern has to
        be resolved and no usable root was given.
        """
        if self.includes_everything:
            return list(all_files)

        includes = [
            (resolve_path(i, self._root_path), to_absolute(i, self._root_path))
            for i in self._includes
        ]
        exclude_keys = self._exclude_keys()

        result: list[str] = []
        for candidate in all_files:
            if self._is_covered(candidate, includes, exclude_keys):
                result.append(candidate)
        return result

    def _exclude_keys(self) -> list[str]:
        if self._mode is ExcludeMode.VERBATIM:
            return list(self._excludes)
        return [resolve_path(e, self._root_path) for e in self._excludes]

    def _is_covered(
        self, candidate: str, includes: list[tuple[str, str]], exclude_keys: list[str]
    ) -> bool:
        path = to_string_safe(candidate).strip()
        if not path:
            return False

        resolved = resolve_path(path, self._root_path)
        for include, written in includes:
            if include == resolved:
                # First matching include decides. Verbatim excludes compare
                # against the include as written, made absolute but not normalized.
                if self._mode is ExcludeMode.VERBATIM:
                    return written not in exclude_keys
                return include not in exclude_keys
        return False


def filter_files_by_package(
    all_files: Iterable[str],
    spec: PackageFilterSpec,
    root_path: str | None,
    mode: ExcludeMode = ExcludeMode.RESOLVED,
) -> list[str]:
    """Filter `all_files` by a package's include/exclude lists."""
    return PackageFileFilter(spec, root_path, mode).filter(all_files)
