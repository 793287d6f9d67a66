"""File Links API: file metadata in MongoDB, file bytes behind pre-signed S3 links."""
