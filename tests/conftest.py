"""
Student Records API - Test Configuration and Fixtures
"""
import os

import pytest
from fastapi.testclient import TestClient

# Set testing environment before the settings are read
os.environ['APP_ENV'] = 'testing'
os.environ['SEED_STUDENTS'] = 'true'
os.environ['LOG_LEVEL'] = 'WARNING'

from student_records_api.app.main import app
from student_records_api.app.core.store import StudentStore, build_store, get_store


@pytest.fixture
def store() -> StudentStore:
    """Fresh store holding the five seed students"""
    return build_store()


@pytest.fixture
def client(store: StudentStore):
    """Test client whose routes all use the ``store`` fixture"""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
