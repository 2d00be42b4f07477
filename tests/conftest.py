"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from jobboard_ai.clients.llm_client import LLMClient, LLMResponse
from jobboard_ai.models.requests import (
    ATSAnalysisRequest,
    CoverLetterRequest,
    Education,
    Experience,
    ImprovementRequest,
    PersonalInfo,
    ResumeRequest,
)

TEST_MODEL = "claude-sonnet-4-5-20250929"


def make_response(text: str | None, input_tokens: int = 100, output_tokens: int = 50) -> LLMResponse:
    return LLMResponse(
        text=text,
        model=TEST_MODEL,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
    )


@pytest.fixture
def cover_letter_request() -> CoverLetterRequest:
    return CoverLetterRequest(
        job_title="Backend Engineer",
        company_name="Acme",
        job_description="Build and operate Go services backed by PostgreSQL.",
        user_background="5 years Go",
        user_skills=["Go", "SQL"],
        user_name="Jane Doe",
    )


@pytest.fixture
def resume_request() -> ResumeRequest:
    return ResumeRequest(
        personal_info=PersonalInfo(
            name="John Smith",
            email="john@example.com",
            phone="555-0100",
            location="Austin, TX",
            summary="Backend engineer focused on reliability.",
        ),
        experience=[
            Experience(
                title="Software Engineer",
                company="Initech",
                duration="2020-2024",
                description="Built payment APIs handling 2M requests/day.",
            ),
        ],
        education=[
            Education(degree="BSc Computer Science", institution="UT Austin", year="2019"),
        ],
        skills=["Python", "PostgreSQL", "AWS"],
        target_role="Senior Backend Engineer",
    )


@pytest.fixture
def ats_request() -> ATSAnalysisRequest:
    return ATSAnalysisRequest(resume_text="John Smith, Software Engineer, 5 years of Python.")


@pytest.fixture
def improvement_request() -> ImprovementRequest:
    return ImprovementRequest(
        original_cover_letter="Dear Hiring Manager, I want this job.",
        job_description="Backend Engineer at Acme.",
        feedback="Make it more specific about distributed systems.",
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(return_value=make_response("Generated text"))
    return client


@pytest.fixture
def llm_response():
    """Factory for LLMResponse objects returned by the mocked client."""
    return make_response
