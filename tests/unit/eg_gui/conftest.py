"""Pytest configuration for eg_gui tests."""

from pathlib import Path

import pytest

from tests.helpers.optional_imports import module_available

HAS_PYSIDE6 = module_available("PySide6")

# Skip collection of test files if GUI deps are missing.
if not HAS_PYSIDE6:
    collect_ignore = [
        path.name
        for path in Path(__file__).parent.glob("test_*.py")
        if path.name != "test_dependencies.py"
    ]


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtCore import QCoreApplication

    return QCoreApplication.instance() or QCoreApplication([])
