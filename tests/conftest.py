"""Test configuration and fixtures for dirtree."""

import os

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/ with a.txt (10 bytes), b.go (5 bytes) and sub/c.go."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "b.go").write_bytes(b"y" * 5)
    (root / "sub").mkdir()
    (root / "sub" / "c.go").write_text("package sub\n")
    return root


@pytest.fixture
def symlinks_supported(tmp_path):
    """Skip the test when symlinks cannot be created in this environment."""
    probe = tmp_path / "symlink_probe"
    try:
        os.symlink(tmp_path, probe)
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    probe.unlink()
    return True
