"""Metadata store access for the File Links API."""

from .mongo import (
    MongoConnection,
    ensure_indexes,
    get_connection,
    get_files_collection,
    reset_connection,
)

__all__ = [
    'MongoConnection', 'get_connection', 'reset_connection',
    'get_files_collection', 'ensure_indexes',
]
