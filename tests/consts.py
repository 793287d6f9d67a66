TEST_BUCKET_NAME = "test-file-links-bucket"
TEST_REGION = "us-east-1"
TEST_MONGODB_URI = "mongodb://localhost:27017/file_links_test"
