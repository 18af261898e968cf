"""Enrichment adapter — optional LLM review that may replace the heuristic result.

The adapter makes a single, time-bounded call. A response is used only if it is
well-formed JSON matching the ValidationResult model; anything else (network
error, timeout, bad JSON, wrong shape, inconsistent counts) means "no override".
"""

import asyncio
import json
import re
import time
from typing import Optional

import structlog
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from app.config import get_settings
from app.validators.models import ValidationResult

logger = structlog.get_logger()

SYSTEM_PROMPT = """You are a code reviewer. Analyze the following {language} code for errors and provide a corrected version.

Respond with a single JSON object and nothing else, in exactly this shape:
{{"hasErrors": boolean, "errorCount": number, "warningCount": number, "errors": [{{"line": number, "message": string, "severity": "error" | "warning"}}], "correctedCode": string, "explanation": string}}

Rules:
- "line" is 1-based.
- "errorCount" and "warningCount" must equal the number of entries in "errors" with that severity.
- "hasErrors" is true exactly when "errorCount" is greater than 0.
- "correctedCode" is the full corrected source, or the original source if nothing needs fixing."""


class EnrichmentAdapter:
    """Wraps the external LLM backend behind an all-or-nothing override contract."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        min_code_length: Optional[int] = None,
        enabled: Optional[bool] = None,
        llm=None,
    ):
        settings = get_settings()
        self.api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        self.model_name = model_name or settings.ENRICHMENT_MODEL
        self.timeout_seconds = settings.ENRICHMENT_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
        self.min_code_length = settings.ENRICHMENT_MIN_CODE_LENGTH if min_code_length is None else min_code_length
        self.enabled = settings.ENRICHMENT_ENABLED if enabled is None else enabled
        self._llm = llm

    @property
    def configured(self) -> bool:
        """True when a backend is available to call."""
        return self.enabled and (bool(self.api_key) or self._llm is not None)

    def is_eligible(self, code: str) -> bool:
        return self.configured and len(code.strip()) > self.min_code_length

    @property
    def llm(self):
        """Lazy-initialize the LLM client."""
        if self._llm is None:
            self._llm = self._create_llm()
        return self._llm

    def _create_llm(self):
        settings = get_settings()
        return ChatOpenAI(
            model=self.model_name,
            api_key=self.api_key,
            temperature=settings.ENRICHMENT_TEMPERATURE,
            max_tokens=settings.ENRICHMENT_MAX_OUTPUT_TOKENS,
            timeout=self.timeout_seconds,
            max_retries=0,
            model_kwargs={"response_format": {"type": "json_object"}},
        )

    async def _call_llm(self, code: str, language: str):
        messages = [
            SystemMessage(content=SYSTEM_PROMPT.format(language=language)),
            HumanMessage(content=code),
        ]
        response = await self.llm.ainvoke(messages)
        return response.content

    async def review(self, code: str, language: str) -> Optional[ValidationResult]:
        """Ask the backend for a full review.

        Returns:
            A ValidationResult to use instead of the heuristic one, or None
        """
        if not self.is_eligible(code):
            return None

        start_time = time.perf_counter()
        try:
            content = await asyncio.wait_for(
                self._call_llm(code, language),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "enrichment_timeout",
                language=language,
                timeout_seconds=self.timeout_seconds,
            )
            return None
        except Exception as e:
            logger.warning(
                "enrichment_call_failed",
                language=language,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        result = self.parse_response(content)
        if result is not None:
            logger.info(
                "enrichment_received",
                language=language,
                model=self.model_name,
                error_count=result.error_count,
                warning_count=result.warning_count,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
        return result

    def parse_response(self, raw) -> Optional[ValidationResult]:
        """Validate the raw backend output against the ValidationResult model."""
        if not isinstance(raw, str) or not raw.strip():
            logger.warning("enrichment_response_rejected", reason="empty_or_non_text")
            return None

        cleaned = self._strip_code_fences(raw)
        if cleaned.startswith("["):
            logger.warning("enrichment_response_rejected", reason="top_level_array")
            return None
        candidate = self._extract_json_object(cleaned)
        if candidate is None:
            logger.warning(
                "enrichment_response_rejected",
                reason="no_json_object",
                response_preview=cleaned[:200],
            )
            return None

        try:
            return ValidationResult.model_validate(json.loads(candidate))
        except json.JSONDecodeError as e:
            logger.warning("enrichment_response_rejected", reason="invalid_json", error=str(e))
        except ValidationError as e:
            logger.warning(
                "enrichment_response_rejected",
                reason="shape_mismatch",
                error_count=e.error_count(),
                first_error=e.errors()[0]["msg"] if e.errors() else None,
            )
        return None

    @staticmethod
    def _strip_code_fences(text: str) -> str:
        """Remove markdown code fences from LLM output."""
        cleaned = text.strip()
        if cleaned.startswith("```json"):
            cleaned = cleaned[7:]
        elif cleaned.startswith("```"):
            cleaned = cleaned[3:]
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
        return cleaned.strip()

    @staticmethod
    def _extract_json_object(text: str) -> Optional[str]:
        """Find and extract the first complete JSON object from text."""
        match = re.search(r"\{", text)
        if not match:
            return None
        # Track brace depth outside of strings
        depth, in_string, escape_next = 0, False, False
        start = match.start()
        for i in range(start, len(text)):
            ch = text[i]
            if escape_next:
                escape_next = False
            elif ch == "\\":
                escape_next = True
            elif ch == '"':
                in_string = not in_string
            elif not in_string and ch == "{":
                depth += 1
            elif not in_string and ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]
        return None
