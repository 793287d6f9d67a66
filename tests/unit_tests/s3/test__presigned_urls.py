from urllib.parse import parse_qs, urlparse

from file_links_api.s3.client import get_s3_client
from file_links_api.s3.delete_objects import delete_s3_object
from file_links_api.s3.presigned_urls import generate_download_url, generate_upload_url
from file_links_api.s3.read_objects import object_exists_in_s3
from file_links_api.settings import get_settings
from tests.consts import TEST_BUCKET_NAME, TEST_MONGODB_URI, TEST_REGION

TEST_KEY = "abc123.txt"


def _query(url: str) -> dict:
    return parse_qs(urlparse(url).query)


def test_generate_upload_url(mocked_aws):
    url = generate_upload_url(TEST_BUCKET_NAME, TEST_KEY, "text/plain", 12, s3_client=mocked_aws)

    parsed = urlparse(url)
    assert parsed.path.endswith(f"/{TEST_KEY}")
    assert TEST_BUCKET_NAME in parsed.netloc + parsed.path
    query = _query(url)
    assert query["X-Amz-Expires"] == ["60"]
    assert query["X-Amz-Algorithm"] == ["AWS4-HMAC-SHA256"]


def test_generate_download_url(mocked_aws):
    url = generate_download_url(TEST_BUCKET_NAME, TEST_KEY, s3_client=mocked_aws)

    assert urlparse(url).path.endswith(f"/{TEST_KEY}")
    query = _query(url)
    assert query["X-Amz-Expires"] == ["86400"]
    assert query["response-content-disposition"] == ["attachment"]


def test_generate_download_url_custom_lifetime(mocked_aws):
    url = generate_download_url(TEST_BUCKET_NAME, TEST_KEY, expires_in=300, s3_client=mocked_aws)

    assert _query(url)["X-Amz-Expires"] == ["300"]


def test_delete_s3_object(mocked_aws):
    mocked_aws.put_object(Bucket=TEST_BUCKET_NAME, Key=TEST_KEY, Body=b"hello")
    assert object_exists_in_s3(TEST_BUCKET_NAME, TEST_KEY, s3_client=mocked_aws)

    response = delete_s3_object(TEST_BUCKET_NAME, TEST_KEY, s3_client=mocked_aws)

    assert response["ResponseMetadata"]["HTTPStatusCode"] == 204
    assert not object_exists_in_s3(TEST_BUCKET_NAME, TEST_KEY, s3_client=mocked_aws)


def test_delete_missing_object_is_acknowledged(mocked_aws):
    response = delete_s3_object(TEST_BUCKET_NAME, "never-uploaded.png", s3_client=mocked_aws)

    assert response["ResponseMetadata"]["HTTPStatusCode"] == 204


def test_region_client_signs_with_sigv4(mocked_aws):
    s3_client = get_s3_client(TEST_REGION)
    assert s3_client is mocked_aws

    query = _query(generate_download_url(TEST_BUCKET_NAME, TEST_KEY, s3_client=s3_client))

    assert query["X-Amz-Algorithm"] == ["AWS4-HMAC-SHA256"]
    assert f"/{TEST_REGION}/s3/aws4_request" in query["X-Amz-Credential"][0]
    assert "Signature" not in query


def test_upload_url_without_client_uses_settings(mocked_aws, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONGODB_URI", TEST_MONGODB_URI)
    monkeypatch.setenv("BUCKET_NAME", TEST_BUCKET_NAME)
    monkeypatch.setenv("REGION", TEST_REGION)
    get_settings.cache_clear()
    try:
        url = generate_upload_url(TEST_BUCKET_NAME, TEST_KEY, "text/plain", 12)
    finally:
        get_settings.cache_clear()

    query = _query(url)
    assert query["X-Amz-Algorithm"] == ["AWS4-HMAC-SHA256"]
    assert query["X-Amz-Expires"] == ["60"]
