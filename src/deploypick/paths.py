"""
Workspace path helpers.

The workspace root is always passed in explicitly. Resolution that needs a root
and has none raises `WorkspaceRootError`; relative-path conversion never raises
and returns `None` when no relative form is available.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from deploypick.logs import log


class WorkspaceRootError(ValueError):
    """The workspace root is missing or unusable for resolving a relative path."""


def to_absolute(path: str, root: str | None) -> str:
    """
    Return `path` unchanged if it is absolute, otherwise join it onto `root`.

    Raises `WorkspaceRootError` when `path` is relative and `root` is missing,
    relative, or not an existing directory.
    """
    if os.path.isabs(path):
        return path
    if not root:
        raise WorkspaceRootError(f"No workspace root to resolve relative path: {path!r}")
    if not os.path.isabs(root):
        raise WorkspaceRootError(f"Workspace root is not an absolute path: {root!r}")
    if not os.path.isdir(root):
        raise WorkspaceRootError(f"Workspace root is not a directory: {root!r}")
    return os.path.join(root, path)


def normalize_path(path: str) -> str:
    """
    Comparison form of a path: forward slashes, redundant separators and
    `.`/`..` segments collapsed.
    """
    normalized = os.path.normpath(path.replace("\\", "/"))
    return normalized.replace("\\", "/")


def resolve_path(path: str, root: str | None) -> str:
    """Absolute, normalized form of `path` for exact comparison."""
    return normalize_path(to_absolute(path.replace("\\", "/"), root))


def to_relative_path(path: str, root: str | None) -> str | None:
    """
    Convert `path` to a workspace-relative path with `/` separators.

    Returns `None` if `root` is unset, does not exist, is not a directory, or
    is not a prefix of `path`. The leading separator is kept, so
    `/ws/src/a.txt` under `/ws` becomes `/src/a.txt`.
    """
    result: str | None = None
    try:
        if root:
            root_dir = Path(root)
            if root_dir.exists() and stat.S_ISDIR(root_dir.lstat().st_mode):
                if path.startswith(root):
                    result = "/".join(path[len(root) :].split(os.sep))
    except Exception as e:
        log(f"[ERROR] paths.to_relative_path(): {e}")
        result = None

    return result
