#!/usr/bin/env python3
"""
deploypick: Pick deploy packages and targets, and select the files a package covers

Common usage:
  deploypick --list-packages
  deploypick --list-targets
  deploypick --package site src/index.html src/app.js
  git ls-files | deploypick --package site --relative -

Packages and targets are read from `.deploypick.toml`, `deploypick.toml`, or
`[tool.deploypick]` in `pyproject.toml`, searched upward from the workspace root.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from deploypick.config import DeployConfig, find_config_file, load_config, parse_exclude_mode
from deploypick.logs import log, setup_logging
from deploypick.package_filter import ExcludeMode, PackageFilterSpec, filter_files_by_package
from deploypick.paths import to_relative_path
from deploypick.quick_picks import create_package_quick_pick, create_target_quick_pick


@dataclass
class Options:
    """Command-line options for the deploypick tool."""

    files: list[str]
    root: str
    config: str | None
    package: str | None
    exclude_mode: ExcludeMode | None
    relative: bool
    list_packages: bool
    list_targets: bool
    verbose: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        default=[],
        help="Candidate files to filter (use '-' to read one path per line from stdin)",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=str,
        default=None,
        metavar="DIR",
        help="Workspace root used to resolve relative paths (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="FILE",
        help="Config file to use instead of searching upward from the workspace root",
    )
    parser.add_argument(
        "-p",
        "--package",
        type=str,
        default=None,
        metavar="NAME",
        help="Name of the package whose files/exclude lists filter the candidates",
    )
    parser.add_argument(
        "--exclude-mode",
        type=str,
        choices=[mode.value for mode in ExcludeMode],
        default=None,
        dest="exclude_mode",
        help="How exclude entries are compared: 'resolved' resolves them against the "
        "workspace root, 'verbatim' compares them as written (default: config or resolved)",
    )
    parser.add_argument(
        "--relative",
        action="store_true",
        help="Print paths relative to the workspace root where possible",
    )
    parser.add_argument(
        "--list-packages",
        action="store_true",
        dest="list_packages",
        help="List configured packages and exit",
    )
    parser.add_argument(
        "--list-targets",
        action="store_true",
        dest="list_targets",
        help="List configured deploy targets and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    return Options(
        files=opts.files,
        root=os.path.abspath(opts.root) if opts.root else os.getcwd(),
        config=opts.config,
        package=opts.package,
        exclude_mode=parse_exclude_mode(opts.exclude_mode) if opts.exclude_mode else None,
        relative=opts.relative,
        list_packages=opts.list_packages,
        list_targets=opts.list_targets,
        verbose=opts.verbose,
        version=opts.version,
    )


def _load_config(options: Options) -> DeployConfig:
    if options.config:
        return load_config(Path(options.config))
    config_path = find_config_file(Path(options.root))
    if config_path is None:
        return DeployConfig()
    log(f"Using config {config_path}")
    return load_config(config_path)


def _read_candidates(files: list[str]) -> list[str]:
    """Expand a '-' argument into the lines read from stdin."""
    candidates: list[str] = []
    for f in files:
        if f == "-":
            candidates.extend(line.rstrip("\r\n") for line in sys.stdin)
        else:
            candidates.append(f)
    return candidates


def _display_path(path: str, root: str, relative: bool) -> str:
    if not relative:
        return path
    rel = to_relative_path(path, root)
    return rel if rel is not None else path


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the deploypick CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options = _parse_args(args)

    setup_logging(logging.INFO if options.verbose else logging.WARNING)

    if options.version:
        try:
            version = importlib.metadata.version("deploypick")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    try:
        config = _load_config(options)
    except (ValueError, OSError) as e:
        # TOMLDecodeError is a ValueError.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if options.list_packages or options.list_targets:
        if options.list_packages:
            for i, pkg in enumerate(config.packages):
                item = create_package_quick_pick(pkg, i)
                print(f"{item.label}\t{item.description}".rstrip())
        if options.list_targets:
            for i, target in enumerate(config.targets):
                item = create_target_quick_pick(target, i)
                print(f"{item.label}\t{item.description}".rstrip())
        return 0

    if not options.package:
        print(
            "Error: No package specified. Use --package NAME, or --list-packages to see "
            "the configured packages.",
            file=sys.stderr,
        )
        return 1

    pkg = config.find_package(options.package)
    if pkg is None:
        print(f"Error: Unknown package: {options.package}", file=sys.stderr)
        return 1

    mode = options.exclude_mode or config.exclude_mode or ExcludeMode.RESOLVED
    candidates = _read_candidates(options.files)

    try:
        selected = filter_files_by_package(
            candidates, PackageFilterSpec.from_package(pkg), options.root, mode
        )
    except ValueError as e:
        # WorkspaceRootError for relative paths that cannot be resolved.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log(f"Package '{options.package}': {len(selected)} of {len(candidates)} file(s) selected")

    for f in selected:
        print(_display_path(f, options.root, options.relative))

    return 0


if __name__ == "__main__":
    sys.exit(main())
