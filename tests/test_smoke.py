"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import importlib
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 9), f"Python 3.9+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "pytest",
        "sparse_life",
        "sparse_life.core",
        "sparse_life.patterns",
        "sparse_life.display",
        "sparse_life.scenarios",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_public_api():
    """Test that the top-level package exposes the engine."""
    import sparse_life
    assert sparse_life.__version__
    engine = sparse_life.LifeEngine([(0, 0), (1, 0), (-1, 0)])
    engine.advance_to(2)
    assert engine.live_cell_count() == 3


def test_project_structure():
    """Test that required files and directories exist."""
    required = ["sparse_life", "tests", "scripts", "pyproject.toml"]

    missing = [name for name in required if not (REPO_ROOT / name).exists()]
    if missing:
        pytest.fail(f"Missing required paths: {missing}")
