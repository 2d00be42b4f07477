"""Error taxonomy for the AI assistance endpoints."""

from __future__ import annotations

from jobboard_ai.operations import Operation


class JobBoardAIError(Exception):
    """Base class for all errors raised by jobboard_ai."""


class ConfigError(JobBoardAIError):
    """Configuration or credentials are missing or invalid."""


class ValidationError(JobBoardAIError):
    """Caller-supplied data is missing required fields."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamGenerationError(JobBoardAIError):
    """The model provider could not be reached or returned nothing usable."""

    operation: Operation
    user_message = "Failed to generate content"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.user_message)


class CoverLetterGenerationError(UpstreamGenerationError):
    operation = Operation.COVER_LETTER
    user_message = "Failed to generate cover letter"


class ResumeGenerationError(UpstreamGenerationError):
    operation = Operation.RESUME
    user_message = "Failed to generate resume"


class ResumeAnalysisError(UpstreamGenerationError):
    operation = Operation.ATS_ANALYSIS
    user_message = "Failed to analyze resume"


class CoverLetterImprovementError(UpstreamGenerationError):
    operation = Operation.IMPROVE_COVER_LETTER
    user_message = "Failed to improve cover letter"


_UPSTREAM_ERRORS: dict[Operation, type[UpstreamGenerationError]] = {
    cls.operation: cls
    for cls in (
        CoverLetterGenerationError,
        ResumeGenerationError,
        ResumeAnalysisError,
        CoverLetterImprovementError,
    )
}


def upstream_error_for(operation: Operation) -> type[UpstreamGenerationError]:
    """Return the error class raised when *operation* fails upstream."""
    return _UPSTREAM_ERRORS[operation]
