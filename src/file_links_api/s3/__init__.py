"""S3 helpers: client construction, pre-signed URLs and object deletion."""
