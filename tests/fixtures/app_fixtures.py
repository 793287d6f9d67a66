"""Settings, service and HTTP client fixtures."""
import pytest
from fastapi.testclient import TestClient

from file_links_api.dependencies import get_service
from file_links_api.main import create_app
from file_links_api.services import FileService
from file_links_api.settings import Settings
from tests.consts import TEST_BUCKET_NAME, TEST_MONGODB_URI, TEST_REGION


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    return Settings(
        MONGODB_URI=TEST_MONGODB_URI,
        BUCKET_NAME=TEST_BUCKET_NAME,
        REGION=TEST_REGION,
    )


@pytest.fixture
def file_service(fake_collection, mocked_aws) -> FileService:
    return FileService(fake_collection, TEST_BUCKET_NAME, s3_client=mocked_aws)


@pytest.fixture
def client(settings, file_service):
    app = create_app(settings)
    app.dependency_overrides[get_service] = lambda: file_service

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
