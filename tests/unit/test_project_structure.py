"""
Unit tests for project structure validation.

Tests verify that the package modules exist and import cleanly.
"""

import importlib
from pathlib import Path

import pytest

PACKAGE_MODULES = [
    "cli",
    "config",
    "logging_config",
    "render_utils",
    "template_engine",
    "transport",
    "utils",
]


class TestProjectStructure:
    """Test suite for validating project directory structure."""

    def test_module_directories_have_init(self, project_root: Path) -> None:
        """
        Test that every package directory contains an __init__.py file.

        Args:
            project_root: Project root directory fixture.
        """
        # Arrange
        package_dir = project_root / "src" / "template_renderers"

        # Act
        missing = [
            m for m in PACKAGE_MODULES if not (package_dir / m / "__init__.py").exists()
        ]

        # Assert
        assert not missing, f"Modules without __init__.py: {missing}"

    @pytest.mark.parametrize("module", PACKAGE_MODULES)
    def test_modules_import(self, module: str) -> None:
        """
        Test that each package module can be imported.

        Args:
            module: Module name under template_renderers.
        """
        imported = importlib.import_module(f"template_renderers.{module}")

        assert imported is not None

    def test_package_version(self) -> None:
        import template_renderers

        assert template_renderers.__version__ == "0.1.0"
