"""
Pytest configuration for catalogue tests.

Provides the committed glyph metadata as fixtures so tests can check the
generated catalogue against its source of truth.
"""

import pytest
import json
import os
import sys


# Add the project root to Python path for imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)


@pytest.fixture(scope="session")
def glyphnames_path():
    """Path to the committed glyphnames.json"""
    return os.path.join(project_root, "metadata", "glyphnames.json")


@pytest.fixture(scope="session")
def glyphnames(glyphnames_path):
    """Raw glyph metadata: glyph name -> entry"""
    with open(glyphnames_path, 'r', encoding='utf-8') as f:
        return json.load(f)
