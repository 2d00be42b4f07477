"""HTTP endpoints for the four AI operations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from jobboard_ai.errors import upstream_error_for
from jobboard_ai.models.generation import EmptyGeneration, TextResult
from jobboard_ai.models.requests import (
    ATSAnalysisRequest,
    CoverLetterRequest,
    ImprovementRequest,
    ResumeRequest,
)
from jobboard_ai.pipeline.assistant import CareerAssistant

router = APIRouter(prefix="/api/ai", tags=["AI"])


async def current_user(request: Request) -> str:
    return await request.app.state.authenticator(request)


def get_assistant(request: Request) -> CareerAssistant:
    return request.app.state.assistant


def _text_or_raise(result: TextResult) -> str:
    if isinstance(result, EmptyGeneration):
        raise upstream_error_for(result.operation)("model returned no text")
    return result.text


@router.post("/generate-cover-letter")
async def generate_cover_letter(
    payload: CoverLetterRequest,
    user_id: str = Depends(current_user),
    assistant: CareerAssistant = Depends(get_assistant),
) -> dict:
    result = await assistant.generate_cover_letter(payload, user_id=user_id)
    return {"coverLetter": _text_or_raise(result)}


@router.post("/generate-resume")
async def generate_resume(
    payload: ResumeRequest,
    user_id: str = Depends(current_user),
    assistant: CareerAssistant = Depends(get_assistant),
) -> dict:
    result = await assistant.generate_resume(payload, user_id=user_id)
    return {"resume": _text_or_raise(result)}


@router.post("/analyze-resume")
async def analyze_resume(
    payload: ATSAnalysisRequest,
    user_id: str = Depends(current_user),
    assistant: CareerAssistant = Depends(get_assistant),
) -> dict:
    analysis = await assistant.analyze_resume(payload, user_id=user_id)
    return analysis.model_dump(by_alias=True)


@router.post("/improve-cover-letter")
async def improve_cover_letter(
    payload: ImprovementRequest,
    user_id: str = Depends(current_user),
    assistant: CareerAssistant = Depends(get_assistant),
) -> dict:
    result = await assistant.improve_cover_letter(payload, user_id=user_id)
    return {"improvedCoverLetter": _text_or_raise(result)}
