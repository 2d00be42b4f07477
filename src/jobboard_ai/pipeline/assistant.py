"""Career assistant: runs the four AI operations end to end."""

from __future__ import annotations

import asyncio
import logging
import time

from jobboard_ai.clients.llm_client import LLMClient, LLMResponse
from jobboard_ai.errors import UpstreamGenerationError
from jobboard_ai.logging.cost_calculator import calculate_cost
from jobboard_ai.logging.models import UsageLog
from jobboard_ai.logging.usage_store import UsageStore
from jobboard_ai.models.analysis import ATSAnalysisResult
from jobboard_ai.models.generation import EmptyGeneration, TextResult
from jobboard_ai.models.requests import (
    ATSAnalysisRequest,
    CoverLetterRequest,
    ImprovementRequest,
    ResumeRequest,
)
from jobboard_ai.operations import GENERATION_SETTINGS, Operation
from jobboard_ai.pipeline import prompts
from jobboard_ai.pipeline.normalizer import normalize_ats_analysis, normalize_text

logger = logging.getLogger(__name__)


class CareerAssistant:
    """Validates a request, makes one model call, and normalizes the reply.

    Validation failures raise ``ValidationError`` before the model is
    contacted. Upstream failures raise the operation's
    ``UpstreamGenerationError`` subclass; nothing is retried.
    """

    def __init__(self, llm: LLMClient, usage_store: UsageStore | None = None):
        self.llm = llm
        self.usage_store = usage_store

    async def generate_cover_letter(
        self, request: CoverLetterRequest, user_id: str = "anonymous"
    ) -> TextResult:
        request.validate_required()
        prompt = prompts.build_cover_letter_prompt(request)
        return await self._generate_text(Operation.COVER_LETTER, prompt, user_id)

    async def generate_resume(
        self, request: ResumeRequest, user_id: str = "anonymous"
    ) -> TextResult:
        request.validate_required()
        prompt = prompts.build_resume_prompt(request)
        return await self._generate_text(Operation.RESUME, prompt, user_id)

    async def improve_cover_letter(
        self, request: ImprovementRequest, user_id: str = "anonymous"
    ) -> TextResult:
        request.validate_required()
        prompt = prompts.build_improvement_prompt(request)
        return await self._generate_text(Operation.IMPROVE_COVER_LETTER, prompt, user_id)

    async def analyze_resume(
        self, request: ATSAnalysisRequest, user_id: str = "anonymous"
    ) -> ATSAnalysisResult:
        request.validate_required()
        operation = Operation.ATS_ANALYSIS
        start = time.monotonic()
        response = await self._call(
            operation, prompts.build_ats_prompt(request), user_id, start,
            system=prompts.ATS_SYSTEM_PROMPT,
        )
        result, defaulted = normalize_ats_analysis(response.text)
        await self._record(operation, user_id, start, response, defaulted=defaulted)
        return result

    async def _generate_text(
        self, operation: Operation, prompt: str, user_id: str
    ) -> TextResult:
        start = time.monotonic()
        response = await self._call(operation, prompt, user_id, start)
        result = normalize_text(response.text, operation)
        if isinstance(result, EmptyGeneration):
            await self._record(
                operation, user_id, start, response,
                success=False, error_message="empty model output",
            )
        else:
            await self._record(operation, user_id, start, response)
        return result

    async def _call(
        self,
        operation: Operation,
        prompt: str,
        user_id: str,
        start: float,
        system: str = "",
    ) -> LLMResponse:
        logger.info("Running %s for user %s", operation.value, user_id)
        try:
            return await self.llm.generate(
                prompt,
                GENERATION_SETTINGS[operation],
                operation,
                system=system,
            )
        except UpstreamGenerationError as exc:
            await self._record(
                operation, user_id, start, None, success=False, error_message=str(exc)
            )
            raise

    async def _record(
        self,
        operation: Operation,
        user_id: str,
        start: float,
        response: LLMResponse | None,
        *,
        success: bool = True,
        error_message: str | None = None,
        defaulted: list[str] | None = None,
    ) -> None:
        if self.usage_store is None:
            return
        log = UsageLog(
            user_id=user_id,
            operation=operation,
            elapsed_seconds=time.monotonic() - start,
            success=success,
            error_message=error_message,
            defaulted_fields=defaulted or [],
        )
        if response is not None:
            log.model = response.model
            log.input_tokens = response.input_tokens
            log.output_tokens = response.output_tokens
            log.estimated_cost_usd = calculate_cost(
                [(response.model, response.input_tokens, response.output_tokens)]
            )
        # Recording must never change what an operation returns.
        try:
            await asyncio.to_thread(self.usage_store.save_log, log)
        except Exception:
            logger.warning("Failed to record usage for %s", operation.value, exc_info=True)
