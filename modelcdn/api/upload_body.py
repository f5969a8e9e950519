"""Parse an upload request body as multipart (file) or JSON (url).

Routes read the body themselves, after the access guard has run, so an
unauthorized caller never has its upload parsed.
"""

from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

from modelcdn.application.dtos.storage import DirectUpload, UrlUpload
from modelcdn.domain.exceptions import InvalidInputException, MissingInputException

INVALID_CONTENT_TYPE = "Invalid content type. Use multipart/form-data or application/json"


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


async def _read_json(request: Request, accept_filename: bool, accept_type: bool) -> UrlUpload:
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInputException("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise InvalidInputException("Invalid JSON body")
    url = body.get("url")
    if not url:
        raise MissingInputException("URL is required", field="url")
    if not isinstance(url, str):
        raise InvalidInputException("Invalid URL provided", field="url")
    return UrlUpload(
        source_url=url.strip(),
        suggested_name=_optional_str(body.get("filename")) if accept_filename else None,
        declared_type=_optional_str(body.get("type")) if accept_type else None,
    )


async def _read_multipart(request: Request, accept_type: bool) -> DirectUpload:
    async with request.form() as form:
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise MissingInputException("No file provided", field="file")
        data = await file.read()
        declared = form.get("type") if accept_type else None
        return DirectUpload(
            data=data,
            suggested_name=file.filename or "",
            declared_type=_optional_str(declared),
        )


async def read_upload_body(
    request: Request,
    *,
    accept_filename: bool = False,
    accept_type: bool = False,
) -> DirectUpload | UrlUpload:
    """Return a DirectUpload for multipart bodies or a UrlUpload for JSON bodies.

    Args:
        request: Incoming request.
        accept_filename: Whether the JSON body may name the stored file.
        accept_type: Whether a ``type`` field (form or JSON) is honored.

    Raises:
        InvalidInputException: Any other content type, or a malformed JSON body.
        MissingInputException: No ``file`` part, or no ``url``.
    """
    content_type = request.headers.get("content-type", "").lower()
    if "application/json" in content_type:
        return await _read_json(request, accept_filename, accept_type)
    if "multipart/form-data" in content_type:
        return await _read_multipart(request, accept_type)
    raise InvalidInputException(INVALID_CONTENT_TYPE, field="content-type")
