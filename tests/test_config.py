"""Tests for config file discovery and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from deploypick.config import DeployConfig, find_config_file, load_config, parse_exclude_mode
from deploypick.package_filter import ExcludeMode
from deploypick.quick_picks import DeployPackage


def test_find_config_deploypick_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "deploypick.toml"
    config_file.write_text("[[packages]]\nname = 'site'\n")
    assert find_config_file(tmp_path) == config_file


def test_find_config_dot_file_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "deploypick.toml").write_text("")
    dot_config = tmp_path / ".deploypick.toml"
    dot_config.write_text("")
    assert find_config_file(tmp_path) == dot_config


def test_find_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text("[tool.deploypick]\nexclude-mode = 'verbatim'\n")
    assert find_config_file(tmp_path) == config_file


def test_find_config_pyproject_without_section_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
    assert find_config_file(tmp_path) is None


def test_find_config_invalid_pyproject_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.deploypick\n")
    assert find_config_file(tmp_path) is None


def test_find_config_walks_up(tmp_path: Path) -> None:
    config_file = tmp_path / "deploypick.toml"
    config_file.write_text("")
    subdir = tmp_path / "sub" / "deep"
    subdir.mkdir(parents=True)
    assert find_config_file(subdir) == config_file


def test_find_config_none_when_missing(tmp_path: Path) -> None:
    assert find_config_file(tmp_path) is None


def test_load_config_packages_and_targets(tmp_path: Path) -> None:
    config_file = tmp_path / "deploypick.toml"
    config_file.write_text(
        "exclude-mode = 'Verbatim'\n"
        "\n"
        "[[packages]]\n"
        "name = 'site'\n"
        "description = 'Static site'\n"
        "files = ['index.html', 'assets/app.js']\n"
        "exclude = ['assets/app.js']\n"
        "\n"
        "[[packages]]\n"
        "name = 'docs'\n"
        "\n"
        "[[targets]]\n"
        "name = 'production'\n"
        "type = ' SFTP '\n"
    )
    config = load_config(config_file)
    assert config.exclude_mode is ExcludeMode.VERBATIM
    assert [p.name for p in config.packages] == ["site", "docs"]
    site = config.packages[0]
    assert site.description == "Static site"
    assert site.files == ["index.html", "assets/app.js"]
    assert site.exclude == ["assets/app.js"]
    assert config.packages[1].files == []
    assert config.packages[1].exclude == []
    assert config.targets[0].name == "production"
    assert config.targets[0].type == "sftp"


def test_load_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        "[project]\nname = 'x'\n\n[[tool.deploypick.packages]]\nname = 'site'\nfiles = 'a.txt'\n"
    )
    config = load_config(config_file)
    assert config.packages[0].files == ["a.txt"]
    assert config.exclude_mode is None


def test_load_config_empty(tmp_path: Path) -> None:
    config_file = tmp_path / "deploypick.toml"
    config_file.write_text("")
    config = load_config(config_file)
    assert config == DeployConfig()


def test_load_config_invalid_exclude_mode(tmp_path: Path) -> None:
    config_file = tmp_path / "deploypick.toml"
    config_file.write_text("exclude-mode = 'fuzzy'\n")
    with pytest.raises(ValueError, match="exclude-mode"):
        load_config(config_file)


def test_parse_exclude_mode() -> None:
    assert parse_exclude_mode("resolved") is ExcludeMode.RESOLVED
    assert parse_exclude_mode(" VERBATIM ") is ExcludeMode.VERBATIM


def test_find_package_by_trimmed_name() -> None:
    site = DeployPackage(name=" site ")
    config = DeployConfig(packages=[DeployPackage(name=None), site])
    assert config.find_package("site") is site
    assert config.find_package("other") is None
