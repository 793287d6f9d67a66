import threading
from unittest.mock import MagicMock, patch

import pytest

from file_links_api.database import mongo
from file_links_api.database.mongo import (
    DEFAULT_DATABASE_NAME,
    MongoConnection,
    ensure_indexes,
    get_connection,
    reset_connection,
)
from tests.consts import TEST_MONGODB_URI


@pytest.fixture(autouse=True)
def clean_connection():
    reset_connection()
    yield
    reset_connection()


@pytest.fixture
def mongo_client_cls():
    with patch.object(mongo, "MongoClient") as client_cls:
        yield client_cls


def test_connection_is_created_once(mongo_client_cls):
    connection = MongoConnection(TEST_MONGODB_URI)

    first = connection.get_database()
    second = connection.get_database()

    assert first is second
    mongo_client_cls.assert_called_once_with(TEST_MONGODB_URI, tz_aware=True)
    mongo_client_cls.return_value.get_default_database.assert_called_once_with(default=DEFAULT_DATABASE_NAME)


def test_connection_is_created_once_across_threads(mongo_client_cls):
    connection = MongoConnection(TEST_MONGODB_URI)
    barrier = threading.Barrier(8)

    def connect():
        barrier.wait()
        connection.get_database()

    threads = [threading.Thread(target=connect) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    mongo_client_cls.assert_called_once()


def test_get_connection_is_process_wide(mongo_client_cls):
    first = get_connection(TEST_MONGODB_URI)
    second = get_connection("mongodb://elsewhere/other")

    assert first is second
    assert second.connection_string == TEST_MONGODB_URI


def test_reset_connection_closes_client(mongo_client_cls):
    get_connection(TEST_MONGODB_URI).get_database()

    reset_connection()

    mongo_client_cls.return_value.close.assert_called_once()
    assert get_connection(TEST_MONGODB_URI).is_connected is False


def test_connection_string_required():
    with pytest.raises(ValueError):
        MongoConnection("")


def test_connect_error_is_raised_and_not_cached(mongo_client_cls):
    mongo_client_cls.side_effect = [RuntimeError("bad uri"), MagicMock()]
    connection = MongoConnection(TEST_MONGODB_URI)

    with pytest.raises(RuntimeError):
        connection.get_database()
    assert connection.is_connected is False

    connection.get_database()
    assert connection.is_connected is True


def test_ensure_indexes(fake_collection):
    ensure_indexes(fake_collection)

    assert fake_collection.indexes == [{"keys": [("file_name", 1)], "unique": True}]
