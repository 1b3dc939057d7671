"""Translate endpoint.

Processing order for a request on /:
1. OPTIONS: CORS preflight, empty 200
2. Any method other than POST: 405
3. Parse the JSON body (undecodable or null body is a 500, not a 400)
4. TranslationService.handle(): validation (400), detection, translation
5. Any other failure: generic 500 with the failure message in 'details'

Every response carries the CORS headers.
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.api.deps import get_translation_service
from app.core.cors import get_cors_headers, get_json_headers
from app.core.exceptions import (
    InvalidRequestBodyError,
    MethodNotAllowedError,
    TranslateAPIError,
    internal_error_body,
)
from app.schemas.translate import (
    SupportedLanguages,
    SupportedLanguagesResponse,
    TranslationRequest,
    TranslationResponse,
)
from app.services.language.codes import get_supported_language_codes
from app.services.translation import TranslationService

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["translate"])

_ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _json_response(content: dict[str, Any], status_code: int) -> JSONResponse:
    return JSONResponse(
        content=content,
        status_code=status_code,
        headers=get_json_headers(),
    )


async def _parse_body(request: Request) -> TranslationRequest:
    """Decode the request body into a TranslationRequest.

    A JSON value other than an object carries no fields, so it fails text
    validation downstream. A null body cannot be read at all.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise InvalidRequestBodyError(f"Request body is not valid JSON: {e}") from e
    if payload is None:
        raise InvalidRequestBodyError("Request body must not be null")
    if not isinstance(payload, dict):
        payload = {}
    return TranslationRequest.model_validate(payload)


@router.api_route("/", methods=_ROUTE_METHODS, include_in_schema=False)
async def translate(
    request: Request,
    service: TranslationService = Depends(get_translation_service),
) -> Response:
    """Translate a text payload, detecting its source language if needed."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=get_cors_headers())

    try:
        if request.method != "POST":
            raise MethodNotAllowedError()

        body = await _parse_body(request)
        result = await service.handle(body)
    except TranslateAPIError as e:
        if e.status_code < 500:
            return _json_response(e.to_dict(), e.status_code)
        logger.error("translation_api_error", error=str(e), error_type=type(e).__name__)
        return _json_response(internal_error_body(e), 500)
    except Exception as e:
        logger.exception("translation_api_error", error=str(e), error_type=type(e).__name__)
        return _json_response(internal_error_body(e), 500)

    response = TranslationResponse(data=result)
    return _json_response(response.model_dump(by_alias=True), 200)


@router.get("/languages", response_model=SupportedLanguagesResponse)
async def list_languages() -> JSONResponse:
    """List every supported ISO 639-1 code, sorted."""
    response = SupportedLanguagesResponse(
        data=SupportedLanguages(languages=get_supported_language_codes())
    )
    return _json_response(response.model_dump(), 200)
