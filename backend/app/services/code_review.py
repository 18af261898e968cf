"""Code review service — the single entry point for validating a snippet.

    profile → RuleEngine + Corrector → ValidationResult.build → optional enrichment override

Usage:
    from app.services.code_review import code_review_service

    result = await code_review_service.validate(code, "python")
"""

import time
from typing import Optional

import structlog

from app.services.enrichment import EnrichmentAdapter
from app.validators.corrector import Corrector
from app.validators.engine import RuleEngine
from app.validators.models import ValidationResult
from app.validators.profiles import get_profile, is_supported

logger = structlog.get_logger()


class CodeReviewService:
    """Composes the heuristic pipeline with the optional enrichment backend."""

    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        corrector: Optional[Corrector] = None,
        enrichment: Optional[EnrichmentAdapter] = None,
    ):
        self.engine = engine or RuleEngine()
        self.corrector = corrector or Corrector()
        self._enrichment = enrichment

    @property
    def enrichment(self) -> EnrichmentAdapter:
        """Lazy-initialize the adapter so settings are read on first use."""
        if self._enrichment is None:
            self._enrichment = EnrichmentAdapter()
        return self._enrichment

    def analyze(self, code: str, language: Optional[str]) -> ValidationResult:
        """Heuristic analysis only. Deterministic; may raise on internal faults."""
        profile = get_profile(language)
        diagnostics = self.engine.run(code, profile)
        corrected = self.corrector.apply(code, profile)
        return ValidationResult.build(diagnostics, corrected)

    async def validate(self, code: str, language: Optional[str]) -> ValidationResult:
        """Validate a snippet. Never raises.

        Processing failures produce ValidationResult.degraded_result().
        An enriched result, when one is accepted, replaces the heuristic result wholesale.
        """
        start_time = time.perf_counter()
        try:
            result = self.analyze(code, language)
        except Exception as e:
            logger.error(
                "code_review_failed",
                language=language,
                error=str(e),
                error_type=type(e).__name__,
            )
            return ValidationResult.degraded_result()

        source = "heuristic"
        try:
            enriched = await self.enrichment.review(code, get_profile(language).display_name)
        except Exception as e:
            # Adapter construction errors mean no override
            logger.warning("enrichment_unavailable", error=str(e), error_type=type(e).__name__)
            enriched = None

        if enriched is not None:
            result = enriched
            source = "enrichment"

        logger.info(
            "code_review_complete",
            language=language,
            recognized_language=is_supported(language),
            code_length=len(code),
            source=source,
            error_count=result.error_count,
            warning_count=result.warning_count,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result


# Module-level singleton
code_review_service = CodeReviewService()


def get_code_review_service() -> CodeReviewService:
    """FastAPI dependency for the shared service."""
    return code_review_service
