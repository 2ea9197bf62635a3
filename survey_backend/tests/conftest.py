import pytest
from fastapi.testclient import TestClient

from survey_backend.config import Settings
from survey_backend.main import create_app
from survey_backend.services.response_store import ResponseStore


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    return ResponseStore(data_dir)


@pytest.fixture
def client(data_dir):
    app = create_app(Settings(data_dir=str(data_dir)))
    return TestClient(app)
