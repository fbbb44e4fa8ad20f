"""
Filtering of candidate files against a deploy package's `files` and
`exclude` lists.

Patterns are exact paths, absolute or relative to the workspace root. There is
no glob matching.

Usage::

    from deploypick.package_filter import PackageFilterSpec, filter_files_by_package

    spec = PackageFilterSpec(includes=["src/app.py"], excludes=[])
    files = filter_files_by_package(all_files, spec, root_path="/home/me/project")
"""

from deploypick.package_filter.filter import PackageFileFilter, filter_files_by_package
from deploypick.package_filter.types import ExcludeMode, PackageFilterSpec

__all__ = [
    "ExcludeMode",
    "PackageFileFilter",
    "PackageFilterSpec",
    "filter_files_by_package",
]
