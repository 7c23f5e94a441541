"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user settings never leak in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for listing and search tests.

    Layout::

        root/
            alpha.txt
            beta.py
            sub/
                alpha2.txt
                deep/
                    gamma.txt
    """
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "alpha.txt").write_text("a")
    (root / "beta.py").write_text("b")
    (root / "sub" / "alpha2.txt").write_text("a2")
    (root / "sub" / "deep" / "gamma.txt").write_text("g")
    return root
