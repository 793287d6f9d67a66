"""
File service for the File Links API.
Keeps file records in MongoDB and hands out pre-signed S3 links for the bytes.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from file_links_api.database import get_files_collection
from file_links_api.s3.client import get_s3_client
from file_links_api.s3.delete_objects import delete_s3_object
from file_links_api.s3.presigned_urls import generate_download_url, generate_upload_url
from file_links_api.schemas import FileRecord
from file_links_api.settings import Settings, get_settings

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)

FILE_ID_BYTES = 6


def generate_file_id() -> str:
    """Short random url-safe identifier, e.g. ``'q1Zr_8Kd'``."""
    return secrets.token_urlsafe(FILE_ID_BYTES)


def extension_from_file_type(file_type: str) -> str:
    """
    Everything after the last ``/`` of a MIME type.

    Only right for simple types: ``image/png`` gives ``png`` but
    ``image/svg+xml`` gives ``svg+xml`` and parameters are kept as-is.
    """
    return file_type.split("/")[-1]


class DeleteStatus(str, Enum):
    """Outcome of deleting a file"""
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    PARTIAL = "partial"


@dataclass
class DeleteResult:
    status: DeleteStatus
    record: Optional[FileRecord] = None


class FileService:
    """Service for file records and the pre-signed links to their objects"""

    def __init__(self, collection: Collection, bucket_name: str, s3_client: Optional["S3Client"] = None):
        self.collection = collection
        self.bucket_name = bucket_name
        self.s3_client = s3_client

    def _with_download_url(self, document: dict) -> FileRecord:
        record = FileRecord.model_validate(document)
        record.url = generate_download_url(
            self.bucket_name,
            record.file_name,
            s3_client=self.s3_client,
        )
        return record

    def get_file(self, file_name: str) -> Optional[FileRecord]:
        """Get one file record with a download URL, or None if unknown"""
        document = self.collection.find_one({"file_name": file_name})
        if not document:
            logger.debug(f"No file record for {file_name}")
            return None
        return self._with_download_url(document)

    def list_files(self) -> List[FileRecord]:
        """All file records with download URLs, oldest first"""
        records = [self._with_download_url(document) for document in self.collection.find({})]
        # sorted() is stable: records created at the same instant keep store order
        return sorted(records, key=lambda record: record.created_at)

    def create_file(self, file_size: int, file_type: str) -> Optional[str]:
        """
        Register a new file and return a URL the client can upload it to.

        The object itself is uploaded out-of-band; nothing here confirms the
        upload ever happens. Returns None if the record could not be stored.
        """
        file_name = f"{generate_file_id()}.{extension_from_file_type(file_type)}"
        try:
            result = self.collection.insert_one({
                "file_name": file_name,
                "created_at": datetime.now(timezone.utc),
            })
        except PyMongoError as e:
            logger.error(f"Error creating file record {file_name}: {e}")
            return None

        if not result.acknowledged:
            logger.error(f"Insert of file record {file_name} was not acknowledged")
            return None

        logger.info(f"Created file record: {file_name}")
        return generate_upload_url(
            self.bucket_name,
            file_name,
            content_type=file_type,
            content_length=file_size,
            s3_client=self.s3_client,
        )

    def delete_file(self, file_name: str) -> DeleteResult:
        """
        Delete the object, then its record.

        S3 errors propagate. A failure removing the record after the object is
        gone is reported as PARTIAL together with the record.
        """
        document = self.collection.find_one({"file_name": file_name})
        if not document:
            return DeleteResult(DeleteStatus.NOT_FOUND)
        record = FileRecord.model_validate(document)

        delete_s3_object(self.bucket_name, file_name, s3_client=self.s3_client)
        logger.info(f"Deleted object {file_name} from bucket {self.bucket_name}")

        try:
            result = self.collection.delete_one({"file_name": file_name})
        except PyMongoError as e:
            logger.error(f"Object {file_name} deleted but its record was not: {e}")
            return DeleteResult(DeleteStatus.PARTIAL, record)

        if result.deleted_count == 0:
            logger.error(f"Object {file_name} deleted but its record was already gone")
            return DeleteResult(DeleteStatus.PARTIAL, record)

        logger.info(f"Deleted file record: {file_name}")
        return DeleteResult(DeleteStatus.DELETED, record)


def get_file_service(settings: Optional[Settings] = None) -> FileService:
    """Build a FileService on the process-wide Mongo connection and S3 client"""
    settings = settings or get_settings()
    return FileService(
        collection=get_files_collection(settings),
        bucket_name=settings.bucket_name,
        s3_client=get_s3_client(settings.region, settings.aws_endpoint_url),
    )
