"""Functions for reading objects from an S3 bucket--the "R" in CRUD."""

from typing import Optional

from botocore.exceptions import ClientError

from file_links_api.s3.client import get_default_s3_client

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...


def object_exists_in_s3(
    bucket_name: str,
    object_key: str,
    s3_client: Optional["S3Client"] = None,
) -> bool:
    """
    Check if an object exists in the S3 bucket using head_object.

    :param bucket_name: Name of the S3 bucket.
    :param object_key: Key of the object to check.
    :param s3_client: Optional S3 client to use. If not provided, the configured one is used.

    :return: True if the object exists, False otherwise.
    """
    s3_client = s3_client or get_default_s3_client()
    try:
        s3_client.head_object(Bucket=bucket_name, Key=object_key)
        return True
    except ClientError as err:
        error_code = err.response.get("Error", {}).get("Code")
        if error_code in ("404", "NoSuchKey", "NotFound"):
            return False
        raise
