"""
Shared pytest fixtures for bracket builder tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from core.models import Team
from core.formats import FormatOptions


def make_teams(count):
    """Teams with ids 1..count named T1..Tn."""
    return [Team(id=i + 1, name=f"T{i + 1}") for i in range(count)]


@pytest.fixture
def teams_8():
    return make_teams(8)


@pytest.fixture
def default_formats():
    return FormatOptions()


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create a test client that ignores any builder.yaml in the repo."""
    import app as app_module
    monkeypatch.setattr(app_module, 'BUILDER_FILE', str(tmp_path / 'builder.yaml'))
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client
