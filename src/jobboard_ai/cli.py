"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import uvicorn
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from jobboard_ai.clients.llm_client import LLMClient
from jobboard_ai.config import load_config, require_api_key
from jobboard_ai.errors import ConfigError, UpstreamGenerationError, ValidationError
from jobboard_ai.logging.usage_store import UsageStore
from jobboard_ai.models.generation import EmptyGeneration, TextResult
from jobboard_ai.models.requests import (
    ATSAnalysisRequest,
    CoverLetterRequest,
    ImprovementRequest,
    ResumeRequest,
)
from jobboard_ai.pipeline.assistant import CareerAssistant

app = typer.Typer(
    name="jobboard-ai",
    help="AI cover letters, resumes and ATS analysis for the job board",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _assistant() -> CareerAssistant:
    config = load_config()
    try:
        api_key = require_api_key()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    llm = LLMClient(
        api_key=api_key,
        timeout=config.llm.timeout,
        model=config.llm.model,
        default_max_tokens=config.llm.default_max_tokens,
    )
    store = UsageStore(config.usage.resolved_db_path) if config.usage.enabled else None
    return CareerAssistant(llm, usage_store=store)


def _run(coro):
    try:
        return asyncio.run(coro)
    except ValidationError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1)
    except UpstreamGenerationError as exc:
        console.print(f"[red]{exc.user_message}[/red]")
        raise typer.Exit(1)


def _read(path: Path | None) -> str:
    if path is None:
        return ""
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _print_text(result: TextResult, title: str, output: Path | None) -> None:
    if isinstance(result, EmptyGeneration):
        console.print("[yellow]The model returned no text.[/yellow]")
        raise typer.Exit(1)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.text, encoding="utf-8")
        console.print(f"[green]Saved: {output}[/green]")
    else:
        console.print(Panel(result.text, title=title))


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int = typer.Option(None, "--port", help="Port (default from config)"),
) -> None:
    """Run the HTTP API."""
    config = load_config()
    try:
        require_api_key()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    uvicorn.run(
        "jobboard_ai.api.app:build_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
    )


@app.command("cover-letter")
def cover_letter(
    job_title: str = typer.Option(..., "--job-title", help="Position applied for"),
    company: str = typer.Option(..., "--company", help="Company name"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    name: str = typer.Option(..., "--name", help="Applicant name"),
    background: Path = typer.Option(None, "--background", help="Applicant background text file"),
    skill: list[str] = typer.Option([], "--skill", "-s", help="Skill (repeatable)"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the letter to this file"),
) -> None:
    """Generate a cover letter."""
    request = CoverLetterRequest(
        job_title=job_title,
        company_name=company,
        job_description=_read(jd),
        user_background=_read(background),
        user_skills=skill,
        user_name=name,
    )
    result = _run(_assistant().generate_cover_letter(request, user_id="cli"))
    _print_text(result, "Cover letter", output)


@app.command()
def resume(
    profile: Path = typer.Argument(help="JSON file with personalInfo, experience, education, skills"),
    target_role: str = typer.Option(None, "--target-role", "-r", help="Role to target"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the resume to this file"),
) -> None:
    """Generate a resume from a JSON profile."""
    try:
        data = json.loads(_read(profile))
        if not isinstance(data, dict):
            raise ValueError("profile must be a JSON object")
        if target_role:
            data["targetRole"] = target_role
        request = ResumeRequest.model_validate(data)
    except ValueError as exc:
        # json and pydantic errors are both ValueErrors
        console.print(f"[red]Invalid profile {profile}: {escape(str(exc))}[/red]")
        raise typer.Exit(1)
    result = _run(_assistant().generate_resume(request, user_id="cli"))
    _print_text(result, "Resume", output)


@app.command()
def analyze(
    resume_file: Path = typer.Argument(help="Resume text file"),
    job: Path = typer.Option(None, "--job", help="Target job description text file"),
) -> None:
    """Score a resume for ATS compatibility."""
    request = ATSAnalysisRequest(resume_text=_read(resume_file), target_job=_read(job) or None)
    analysis = _run(_assistant().analyze_resume(request, user_id="cli"))

    sections = analysis.sections_analysis
    console.print(Panel(
        f"[bold]Score: {analysis.score}[/bold]\n"
        f"Contact: {sections.contact} | Summary: {sections.summary} | "
        f"Experience: {sections.experience} | Education: {sections.education} | "
        f"Skills: {sections.skills}",
        title="ATS analysis",
    ))
    for label, items in (
        ("Recommendations", analysis.recommendations),
        ("Matched keywords", analysis.keyword_matches),
        ("Missing keywords", analysis.missing_keywords),
        ("Format issues", analysis.format_issues),
    ):
        if items:
            console.print(f"\n[bold]{label}:[/bold]")
            for item in items:
                console.print(f"  - {item}")


@app.command()
def improve(
    letter: Path = typer.Argument(help="Existing cover letter text file"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    feedback: str = typer.Option(..., "--feedback", "-f", help="What to change"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the letter to this file"),
) -> None:
    """Improve a cover letter based on feedback."""
    request = ImprovementRequest(
        original_cover_letter=_read(letter),
        job_description=_read(jd),
        feedback=feedback,
    )
    result = _run(_assistant().improve_cover_letter(request, user_id="cli"))
    _print_text(result, "Improved cover letter", output)


@app.command()
def usage(
    user: str = typer.Option(None, "--user", help="Only show this user's calls"),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of recent calls"),
) -> None:
    """Show AI usage for the current month and recent calls."""
    config = load_config()
    store = UsageStore(config.usage.resolved_db_path)
    stats = store.get_monthly_stats()
    console.print(Panel(
        f"Calls: {stats['total_calls']} | Success: {stats['success_rate']:.1f}% | "
        f"Degraded analyses: {stats['degraded_analyses']}\n"
        f"Tokens: {stats['total_input_tokens']} in / {stats['total_output_tokens']} out | "
        f"Cost: ${stats['total_cost_usd']:.4f}",
        title=f"Usage {stats['month']}",
    ))

    table = Table("Time", "User", "Operation", "OK", "Tokens", "Defaults")
    for log in store.get_logs(user_id=user, limit=limit):
        table.add_row(
            log.timestamp.strftime("%Y-%m-%d %H:%M"),
            log.user_id,
            log.operation.value,
            "yes" if log.success else "no",
            f"{log.input_tokens}/{log.output_tokens}",
            str(len(log.defaulted_fields)),
        )
    console.print(table)


if __name__ == "__main__":
    app()
