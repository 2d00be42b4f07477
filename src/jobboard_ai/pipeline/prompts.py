"""Prompt templates for the four AI operations.

Every builder is a pure function of its request: identical input always
renders identical text. Empty lists render as ``None provided``.
"""

from __future__ import annotations

from jobboard_ai.models.requests import (
    ATSAnalysisRequest,
    CoverLetterRequest,
    Education,
    Experience,
    ImprovementRequest,
    PersonalInfo,
    ResumeRequest,
)

NONE_PROVIDED = "None provided"

ATS_SYSTEM_PROMPT = (
    "You are an expert ATS and resume analysis specialist. Provide detailed, "
    "actionable feedback for improving resume ATS compatibility. "
    "Always respond with valid JSON only, with no surrounding prose."
)

ATS_RESPONSE_SCHEMA = """\
{
  "score": number,
  "recommendations": ["recommendation1", "recommendation2"],
  "keywordMatches": ["keyword1", "keyword2"],
  "missingKeywords": ["missing1", "missing2"],
  "formatIssues": ["issue1", "issue2"],
  "sectionsAnalysis": {
    "contact": number,
    "summary": number,
    "experience": number,
    "education": number,
    "skills": number
  }
}"""


def _join(items: list[str], sep: str = ", ") -> str:
    items = [item for item in items if item and item.strip()]
    return sep.join(items) if items else NONE_PROVIDED


def _experience_line(exp: Experience) -> str:
    return f"- {exp.title} at {exp.company} ({exp.duration}): {exp.description}"


def _education_line(edu: Education) -> str:
    return f"- {edu.degree} from {edu.institution} ({edu.year})"


def build_cover_letter_prompt(req: CoverLetterRequest) -> str:
    return f"""Create a professional cover letter for {req.user_name} applying for the position of {req.job_title} at {req.company_name}.

Job Description:
{req.job_description}

Applicant Background:
{req.user_background or NONE_PROVIDED}

Applicant Skills:
{_join(req.user_skills)}

Requirements:
- Make it professional and engaging
- Match the tone to the company and role
- Highlight relevant skills and experience
- Include specific examples when possible
- Keep it concise (3-4 paragraphs)
- End with a strong call to action
- Use proper business letter format

Please create a personalized cover letter that effectively matches the candidate's background to the job requirements."""


def build_resume_prompt(req: ResumeRequest) -> str:
    info = req.personal_info or PersonalInfo()
    experience = _join([_experience_line(e) for e in req.experience], sep="\n")
    education = _join([_education_line(e) for e in req.education], sep="\n")
    return f"""Create a professional, ATS-optimized resume for {info.name} targeting the role of {req.target_role}.

Personal Information:
- Name: {info.name}
- Email: {info.email}
- Phone: {info.phone}
- Location: {info.location}
- Summary: {info.summary}

Work Experience:
{experience}

Education:
{education}

Skills:
{_join(req.skills)}

Requirements:
- Use a clean, ATS-friendly format
- Include quantifiable achievements where possible
- Use strong action verbs
- Optimize for the target role
- Include relevant keywords
- Use standard section headers
- Keep it professional and concise
- Format as plain text with clear section divisions

Create a compelling resume that highlights the candidate's strengths for the target role."""


def build_ats_prompt(req: ATSAnalysisRequest) -> str:
    target = ""
    if req.target_job and req.target_job.strip():
        target = f"Target Job Description:\n{req.target_job}\n\n"
    return f"""Analyze this resume for ATS (Applicant Tracking System) compatibility and provide a detailed scoring and recommendations.

Resume Text:
{req.resume_text}

{target}Please provide a comprehensive ATS analysis with:
1. Overall ATS compatibility score (0-100)
2. Specific recommendations for improvement
3. Keywords found that match common job requirements
4. Missing keywords that should be added
5. Format issues that could cause ATS problems
6. Section-by-section analysis (contact, summary, experience, education, skills) with scores 0-100

Respond in JSON format with this structure:
{ATS_RESPONSE_SCHEMA}"""


def build_improvement_prompt(req: ImprovementRequest) -> str:
    return f"""Improve this cover letter based on the specific feedback provided.

Original Cover Letter:
{req.original_cover_letter}

Job Description:
{req.job_description}

Improvement Feedback:
{req.feedback}

Requirements:
- Apply the specific feedback requested
- Maintain the professional tone and structure
- Keep the same length or make it more concise
- Ensure it remains relevant to the job description
- Preserve the core message while enhancing weak areas
- Make the improvements natural and seamless

Please provide the improved cover letter that addresses the feedback while maintaining professionalism."""
