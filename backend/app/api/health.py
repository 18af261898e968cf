"""Health check endpoint."""

import time
from fastapi import APIRouter, Depends

from app.models.responses import HealthResponse, HealthDependency
from app.services.code_review import CodeReviewService, get_code_review_service
from app.validators.profiles import list_profiles

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(service: CodeReviewService = Depends(get_code_review_service)):
    """System health check with dependency status."""
    dependencies = {}

    # Rule profiles
    profiles = list_profiles()
    if profiles:
        dependencies["rule_profiles"] = HealthDependency(
            status="healthy",
            message=f"{len(profiles)} profiles loaded: {', '.join(p.id for p in profiles)}",
        )
    else:
        dependencies["rule_profiles"] = HealthDependency(status="unhealthy", message="No rule profiles loaded")

    # Enrichment backend
    try:
        if service.enrichment.configured:
            dependencies["enrichment"] = HealthDependency(
                status="healthy",
                message=f"model {service.enrichment.model_name}",
            )
        else:
            dependencies["enrichment"] = HealthDependency(
                status="degraded",
                message="Enrichment not configured; heuristic analysis only",
            )
    except Exception as e:
        dependencies["enrichment"] = HealthDependency(status="degraded", message=str(e))

    # Overall status
    if any(d.status == "unhealthy" for d in dependencies.values()):
        status = "unhealthy"
    elif any(d.status == "degraded" for d in dependencies.values()):
        status = "degraded"
    else:
        status = "healthy"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
