"""Pytest fixtures for winrt-pack tests."""

from pathlib import Path

import pytest


@pytest.fixture
def nuget_tree(tmp_path: Path) -> tuple[Path, Path]:
    """Project root with nuget/Component.nuspec and nuget/VERSION = "1.2.3". Returns (root, nuget_dir)."""
    nuget = tmp_path / "nuget"
    nuget.mkdir()
    (nuget / "Component.nuspec").write_text("<package />\n")
    (nuget / "VERSION").write_text("1.2.3")
    return tmp_path, nuget
