"""Functions for deleting objects from an S3 bucket--the "D" in CRUD."""

from typing import Optional

from file_links_api.s3.client import get_default_s3_client

try:
    from mypy_boto3_s3 import S3Client
    from mypy_boto3_s3.type_defs import DeleteObjectOutputTypeDef
except ImportError:
    ...


def delete_s3_object(
    bucket_name: str,
    object_key: str,
    s3_client: Optional["S3Client"] = None,
) -> "DeleteObjectOutputTypeDef":
    """
    Delete an object from an S3 bucket.

    S3 acknowledges deletes of keys that do not exist, so a successful
    response does not prove an object was there.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: path to the object in the S3 bucket.
    :param s3_client: An optional boto3 S3 client. If not provided, the configured one is used.
    """
    s3_client = s3_client or get_default_s3_client()
    return s3_client.delete_object(Bucket=bucket_name, Key=object_key)
