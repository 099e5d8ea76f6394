"""Shared pytest configuration and fixtures for the TreeText test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetext.testing import sample_tree as _sample_tree, project_tree as _project_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: tests that take noticeably longer to run")


@pytest.fixture
def sample_tree():
    """root -> [a, sub -> [b]]"""
    return _sample_tree()


@pytest.fixture
def project_tree():
    return _project_tree()
