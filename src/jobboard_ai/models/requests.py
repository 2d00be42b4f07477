"""Pydantic models for the four AI request bodies.

Inbound JSON uses camelCase keys; Python code uses snake_case names.
``null`` values coerce to empty strings / lists so the prompt builder
never sees ``None``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jobboard_ai.errors import ValidationError

DEFAULT_TARGET_ROLE = "Professional"


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class _RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any, info) -> Any:
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        if field.default_factory is not None:
            return field.default_factory()
        return field.default


class CoverLetterRequest(_RequestModel):
    job_title: str = ""
    company_name: str = ""
    job_description: str = ""
    user_background: str = ""
    user_skills: list[str] = Field(default_factory=list)
    user_name: str = ""

    def validate_required(self) -> None:
        if any(
            _blank(v)
            for v in (self.job_title, self.company_name, self.job_description, self.user_name)
        ):
            raise ValidationError("Missing required fields")


class PersonalInfo(_RequestModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""


class Experience(_RequestModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class Education(_RequestModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class ResumeRequest(_RequestModel):
    personal_info: PersonalInfo | None = None
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    target_role: str = DEFAULT_TARGET_ROLE

    @field_validator("target_role", mode="after")
    @classmethod
    def _default_role(cls, value: str) -> str:
        return DEFAULT_TARGET_ROLE if _blank(value) else value

    def validate_required(self) -> None:
        if self.personal_info is None or _blank(self.personal_info.name):
            raise ValidationError("Personal information is required")


class ATSAnalysisRequest(_RequestModel):
    resume_text: str = ""
    target_job: str | None = None

    def validate_required(self) -> None:
        if _blank(self.resume_text):
            raise ValidationError("Resume text is required")


class ImprovementRequest(_RequestModel):
    original_cover_letter: str = ""
    job_description: str = ""
    feedback: str = ""

    def validate_required(self) -> None:
        if any(
            _blank(v)
            for v in (self.original_cover_letter, self.job_description, self.feedback)
        ):
            raise ValidationError("Missing required fields")
