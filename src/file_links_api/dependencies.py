"""FastAPI dependencies: request body parsing and the file service."""
import json
import logging
from typing import Any, Callable, Coroutine, Dict, Type

import pydantic
from fastapi import Request

from file_links_api.errors import MalformedBodyError, MissingFieldsError
from file_links_api.schemas import FileRequest, Route
from file_links_api.services import FileService, get_file_service

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as JSON.

    An empty body, ``null`` or any non-object JSON value counts as an empty
    object, so required fields are reported missing rather than malformed.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedBodyError(f"Request body is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        logger.debug(f"Ignoring non-object request body of type {type(parsed).__name__}")
        return {}
    return parsed


def describe_validation_error(model: Type[FileRequest], error: pydantic.ValidationError) -> str:
    """
    Message for a rejected body.

    Missing, empty or zero fields get the route's own message; values of the
    wrong shape (`1024.5`, `-3`, `"big"`) say which field was wrong and why.
    """
    errors = error.errors()
    if any(e["type"] == "missing" or not e.get("input") for e in errors):
        return model.MISSING_FIELDS_MESSAGE
    details = "; ".join(
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in errors
    )
    return f"Invalid request body: {details}"


def request_body(route: Route) -> Callable[[Request], Coroutine[Any, Any, FileRequest]]:
    """Build a dependency that parses and validates the body of ``route``."""
    model = route.request_model
    if model is None:
        raise ValueError(f"Route {route.name} takes no request body")

    async def parse(request: Request) -> FileRequest:
        body = await read_json_body(request)
        try:
            return model.model_validate(body)
        except pydantic.ValidationError as e:
            logger.debug(f"{route.name} body rejected: {e}")
            raise MissingFieldsError(describe_validation_error(model, e)) from e

    return parse


def get_service(request: Request) -> FileService:
    """File service bound to the settings of the running app."""
    return get_file_service(request.app.state.settings)
