from fastapi import APIRouter

from file_links_api.schemas import FALLBACK_MESSAGE, DataResponse

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("/{full_path:path}", methods=ALL_METHODS, response_model=DataResponse)
async def fallback(full_path: str) -> DataResponse:
    """Any path and method pair the service does not route. Doubles as a liveness check."""
    return DataResponse(data=FALLBACK_MESSAGE)
