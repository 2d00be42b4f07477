"""AI assistance for the job board: cover letters, resumes and ATS analysis."""

__version__ = "1.0.0"
