from fastapi import APIRouter, Depends

from file_links_api.dependencies import get_service, request_body
from file_links_api.errors import PartialDeletionError
from file_links_api.schemas import (
    CreateFileRequest,
    DeleteFileRequest,
    FileListResponse,
    FileResponse,
    GetFileRequest,
    Route,
    UploadUrlResponse,
)
from file_links_api.services import DeleteStatus, FileService

router = APIRouter()


@router.api_route(Route.GET_FILE.path, methods=[Route.GET_FILE.method], response_model=FileResponse)
def get_file(
    body: GetFileRequest = Depends(request_body(Route.GET_FILE)),
    service: FileService = Depends(get_service),
) -> FileResponse:
    """
    Fetch one file record with a download URL valid for a day.

    Unknown file names give `{"data": null}`, not an error.
    """
    return FileResponse(data=service.get_file(body.file_name))


@router.api_route(Route.LIST_FILES.path, methods=[Route.LIST_FILES.method], response_model=FileListResponse)
def list_files(service: FileService = Depends(get_service)) -> FileListResponse:
    """List every file record with a download URL, oldest first."""
    return FileListResponse(data=service.list_files())


@router.api_route(Route.CREATE_FILE.path, methods=[Route.CREATE_FILE.method], response_model=UploadUrlResponse)
def create_file(
    body: CreateFileRequest = Depends(request_body(Route.CREATE_FILE)),
    service: FileService = Depends(get_service),
) -> UploadUrlResponse:
    """
    Register a new file and return a URL to PUT its bytes to.

    The URL is valid for 60 seconds and bound to the generated key, the
    declared content type and the declared size.
    """
    return UploadUrlResponse(data=service.create_file(body.file_size, body.file_type))


@router.api_route(Route.DELETE_FILE.path, methods=[Route.DELETE_FILE.method], response_model=FileResponse)
def delete_file(
    body: DeleteFileRequest = Depends(request_body(Route.DELETE_FILE)),
    service: FileService = Depends(get_service),
) -> FileResponse:
    """
    Delete a file's object and then its record.

    Returns the deleted record, or `{"data": null}` if the file was unknown.
    """
    result = service.delete_file(body.file_name)
    if result.status is DeleteStatus.PARTIAL:
        raise PartialDeletionError(
            f"File {body.file_name} was deleted from storage but its record could not be removed",
            data=result.record,
        )
    return FileResponse(data=result.record)
