"""Validate API — analyze a code snippet and list supported languages."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

import structlog

from app.models.requests import ValidateRequest
from app.models.responses import LanguageResponse
from app.services.code_review import CodeReviewService, get_code_review_service
from app.validators.models import ValidationResult
from app.validators.profiles import DEFAULT_LANGUAGE, list_profiles

logger = structlog.get_logger()

router = APIRouter()


def _degraded_response() -> JSONResponse:
    """500 carrying the fixed degraded result, so the editor can still render it."""
    return JSONResponse(
        status_code=500,
        content=ValidationResult.degraded_result().model_dump(by_alias=True, mode="json"),
    )


@router.post(
    "/validate",
    response_model=ValidationResult,
    responses={500: {"model": ValidationResult, "description": "Analysis failed"}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ValidateRequest.model_json_schema()}},
        }
    },
)
async def validate_code(
    request: Request,
    service: CodeReviewService = Depends(get_code_review_service),
):
    """Analyze code and return diagnostics, corrected code, and an explanation.

    Findings in the code are data: they come back with 200. Only a malformed
    request or a failure inside the analysis returns 500.
    """
    # Malformed bodies map to the degraded result (500), not FastAPI's 422
    try:
        payload = ValidateRequest.model_validate(await request.json())
    except ValueError as e:
        logger.warning("validate_request_malformed", error=str(e))
        return _degraded_response()

    result = await service.validate(payload.code, payload.language)
    if result.degraded:
        return _degraded_response()
    return result


@router.get("/languages", response_model=list[LanguageResponse])
async def list_languages():
    """Languages with a dedicated rule profile."""
    return [
        LanguageResponse(
            id=profile.id,
            display_name=profile.display_name,
            file_extension=profile.file_extension,
            rule_count=len(profile.rules),
            rewrite_count=len(profile.corrector_rules),
            is_default=profile.id == DEFAULT_LANGUAGE,
        )
        for profile in list_profiles()
    ]
