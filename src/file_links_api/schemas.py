####################################
# --- Request/response schemas --- #
####################################

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, List, Optional, Type

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

FALLBACK_MESSAGE = "It is working fine"


class FileRecord(BaseModel):
    """A file known to the metadata store, with a freshly signed download link."""
    file_name: str = Field(
        description="Generated object key, `<random_id>.<extension>`.",
        json_schema_extra={"example": "Xk3vQ9aLp.png"},
    )
    created_at: datetime = Field(description="When the record was created (UTC).")
    url: Optional[str] = Field(
        None,
        description="Pre-signed download URL. Computed per response, never stored.",
    )

    model_config = ConfigDict(extra="ignore")


class FileRequest(BaseModel):
    """Base class for route bodies with required fields."""
    MISSING_FIELDS_MESSAGE: ClassVar[str] = "Please make sure to provide the required fields!"

    model_config = ConfigDict(extra="ignore")


class GetFileRequest(FileRequest):
    """Body of `GET /get`."""
    MISSING_FIELDS_MESSAGE: ClassVar[str] = "Please make sure to provide file_name!"

    file_name: str = Field(min_length=1)


class CreateFileRequest(FileRequest):
    """Body of `POST /create`."""
    MISSING_FIELDS_MESSAGE: ClassVar[str] = "Please make sure to provide file_type and file_size!"

    file_size: int = Field(gt=0, description="Declared size of the upload in bytes.")
    file_type: str = Field(
        min_length=1,
        description="MIME type of the upload, e.g. `image/png`.",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"file_size": 1024, "file_type": "image/png"}}
    )


class DeleteFileRequest(FileRequest):
    """Body of `DELETE /delete`."""
    MISSING_FIELDS_MESSAGE: ClassVar[str] = "Please make sure to provide file_name!"

    file_name: str = Field(min_length=1)


class Route(Enum):
    """The closed set of routes the service answers, keyed by path and method."""
    GET_FILE = ("/get", "GET", GetFileRequest)
    LIST_FILES = ("/list", "GET", None)
    CREATE_FILE = ("/create", "POST", CreateFileRequest)
    DELETE_FILE = ("/delete", "DELETE", DeleteFileRequest)

    def __init__(self, path: str, method: str, request_model: Optional[Type[FileRequest]]):
        self.path = path
        self.method = method
        self.request_model = request_model


class DataResponse(BaseModel):
    """Success envelope."""
    data: Any = None


class FileResponse(DataResponse):
    """Response model for `GET /get` and `DELETE /delete`."""
    data: Optional[FileRecord] = None


class FileListResponse(DataResponse):
    """Response model for `GET /list`."""
    data: List[FileRecord] = Field(default_factory=list)


class UploadUrlResponse(DataResponse):
    """Response model for `POST /create`."""
    data: Optional[str] = Field(None, description="Pre-signed upload URL, valid for 60 seconds.")


class ErrorResponse(BaseModel):
    """Error envelope. `data` carries the record on a partial deletion."""
    error: str
    data: Optional[Any] = None
