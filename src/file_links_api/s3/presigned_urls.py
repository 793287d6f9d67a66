"""Functions for handing out time-limited links to objects in an S3 bucket."""

from typing import Optional

from file_links_api.s3.client import get_default_s3_client

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

UPLOAD_URL_EXPIRES_IN = 60
DOWNLOAD_URL_EXPIRES_IN = 86400


def generate_upload_url(
    bucket_name: str,
    object_key: str,
    content_type: str,
    content_length: int,
    expires_in: int = UPLOAD_URL_EXPIRES_IN,
    s3_client: Optional["S3Client"] = None,
) -> str:
    """
    Generate a pre-signed URL a client can PUT the file bytes to.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: The key the upload is bound to.
    :param content_type: The MIME type the client must send.
    :param content_length: The declared size of the upload in bytes.
    :param expires_in: Lifetime of the URL in seconds.
    :param s3_client: An optional boto3 S3 client. If not provided, the configured one is used.
    """
    s3_client = s3_client or get_default_s3_client()
    return s3_client.generate_presigned_url(
        ClientMethod="put_object",
        Params={
            "Bucket": bucket_name,
            "Key": object_key,
            "ContentType": content_type,
            "ContentLength": content_length,
        },
        ExpiresIn=expires_in,
    )


def generate_download_url(
    bucket_name: str,
    object_key: str,
    expires_in: int = DOWNLOAD_URL_EXPIRES_IN,
    s3_client: Optional["S3Client"] = None,
) -> str:
    """
    Generate a pre-signed URL for downloading an object.

    The response is forced to ``Content-Disposition: attachment`` so browsers
    save the file instead of rendering it.
    """
    s3_client = s3_client or get_default_s3_client()
    return s3_client.generate_presigned_url(
        ClientMethod="get_object",
        Params={
            "Bucket": bucket_name,
            "Key": object_key,
            "ResponseContentDisposition": "attachment",
        },
        ExpiresIn=expires_in,
    )
