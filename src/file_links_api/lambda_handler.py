"""Lambda handler for the File Links API using Mangum."""
from mangum import Mangum

from file_links_api.main import create_app

# Built once per execution environment and reused by warm invocations,
# together with the cached Mongo connection and S3 client.
app = create_app()

handler = Mangum(app, lifespan="off")

# Export handler for Lambda runtime
lambda_handler = handler
