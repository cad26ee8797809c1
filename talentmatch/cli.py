"""
talentmatch Command Line Interface

Provides CLI commands for scoring skills, ranking talent for a posting and
scoring postings for a talent from JSON files.
"""

import json
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="talentmatch",
    help="Talent/posting matching engine CLI",
    add_completion=False,
)
console = Console()


def _split_skills(value: str) -> list[str]:
    """Split a comma-separated skill list, dropping blanks."""
    return [s.strip() for s in value.split(",") if s.strip()]


def _load_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _badge_style(badge: str) -> str:
    return {"high": "green", "medium": "yellow"}.get(badge, "dim")


@app.callback()
def main():
    """Initialize logging before any command runs."""
    from talentmatch.utils.logger import setup_logging

    setup_logging()


@app.command()
def version():
    """Show application version."""
    from talentmatch import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show matching configuration."""
    from talentmatch.utils.config import get_settings

    settings = get_settings()
    matching = settings.matching

    table = Table(title="talentmatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Fuzzy Threshold", str(matching.fuzzy_threshold))
    table.add_row("Exact / Partial Weight", f"{matching.exact_weight} / {matching.partial_weight}")
    table.add_row("Min Skill Score", str(matching.min_skill_score))
    table.add_row("Max Recommendations", str(matching.max_recommendations))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def similarity(
    first: str = typer.Argument(..., help="First skill"),
    second: str = typer.Argument(..., help="Second skill"),
):
    """Show the fuzzy similarity of two skills."""
    from talentmatch.core.matching import similarity as skill_similarity

    value = skill_similarity(first.lower().strip(), second.lower().strip())
    console.print(f"Similarity: [cyan]{value:.3f}[/cyan]")


@app.command()
def score(
    required: str = typer.Option(..., "--required", "-r", help="Comma-separated required skills"),
    skills: str = typer.Option(..., "--skills", "-s", help="Comma-separated candidate skills"),
):
    """Score candidate skills against required skills."""
    from talentmatch.core.matching import get_matching_engine
    from talentmatch.utils.constants import MatchBadge

    engine = get_matching_engine()
    required_skills = _split_skills(required)
    evaluation = engine.scorer.evaluate(required_skills, _split_skills(skills))
    badge = MatchBadge.from_score(
        evaluation.score,
        high_threshold=engine.settings.badge_high_threshold,
        medium_threshold=engine.settings.badge_medium_threshold,
    ).value

    console.print(f"Match score: [{_badge_style(badge)}]{evaluation.score}%[/{_badge_style(badge)}] ({badge})")
    console.print(f"  Exact matches: {evaluation.exact_matches}/{len(required_skills)}")
    console.print(f"  Fuzzy matches: {evaluation.partial_matches}/{len(required_skills)}")
    if evaluation.matched_skills:
        console.print(f"  Matched: {', '.join(evaluation.matched_skills)}")


@app.command()
def recommend(
    posting_file: Path = typer.Argument(..., help="Posting JSON file"),
    candidates_file: Path = typer.Argument(..., help="Candidates JSON file (list of records)"),
    verified_only: bool = typer.Option(
        False, "--verified-only", help="Only rank records flagged isEmailVerified"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Recommend talent for a posting."""
    from talentmatch.core.matching import get_matching_engine
    from talentmatch.data.models import CandidateProfile, PostingRequirement

    try:
        posting = PostingRequirement.model_validate(_load_json(posting_file))
        records = _load_json(candidates_file)
        if not isinstance(records, list):
            _fail("Candidates file must contain a JSON list")
        if not all(isinstance(r, dict) for r in records):
            _fail("Each candidate record must be a JSON object")
        candidates = [
            CandidateProfile.from_user_document(r) if "talentProfile" in r
            else CandidateProfile.model_validate(r)
            for r in records
        ]
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        _fail(str(e))

    eligibility = None
    if verified_only:
        # Ids may repeat across records, so track the profile objects themselves
        verified = {
            id(c) for c, r in zip(candidates, records) if r.get("isEmailVerified") is True
        }

        def eligibility(candidate: CandidateProfile) -> bool:
            return id(candidate) in verified

    engine = get_matching_engine()
    results = engine.recommend(posting, candidates, eligibility=eligibility)

    if as_json:
        typer.echo(json.dumps([r.model_dump() for r in results], indent=2))
        return

    if not results:
        console.print("[yellow]No recommendations found for this posting.[/yellow]")
        return

    table = Table(title=f"Recommendations for {posting.title or posting.id or 'posting'}")
    table.add_column("#", style="dim")
    table.add_column("Candidate", style="cyan")
    table.add_column("Score")
    table.add_column("Skills")
    table.add_column("Avail.")
    table.add_column("Rate")
    table.add_column("Exp.")
    table.add_column("Matched Skills")

    for rank, r in enumerate(results, start=1):
        style = _badge_style(
            r.get_badge(
                high_threshold=engine.settings.badge_high_threshold,
                medium_threshold=engine.settings.badge_medium_threshold,
            ).value
        )
        table.add_row(
            str(rank),
            str(r.candidate_id),
            f"[{style}]{r.final_score}[/{style}]",
            str(r.skill_match_score),
            str(r.availability_score),
            str(r.rate_compatibility),
            str(r.experience_bonus),
            ", ".join(r.matched_skills),
        )

    console.print(table)


@app.command()
def postings(
    skills: str = typer.Argument(..., help="Comma-separated talent skills"),
    postings_file: Path = typer.Argument(..., help="Postings JSON file (list of postings)"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Score open postings against a talent's skills."""
    from talentmatch.core.matching import get_matching_engine
    from talentmatch.data.models import PostingRequirement

    try:
        records = _load_json(postings_file)
        if not isinstance(records, list):
            _fail("Postings file must contain a JSON list")
        items = [PostingRequirement.model_validate(r) for r in records]
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        _fail(str(e))

    scores = get_matching_engine().score_postings(_split_skills(skills), items)

    if as_json:
        typer.echo(json.dumps([s.model_dump() for s in scores], indent=2))
        return

    table = Table(title="Posting Matches")
    table.add_column("Posting", style="cyan")
    table.add_column("Title")
    table.add_column("Match")

    for s in scores:
        style = _badge_style(s.badge)
        table.add_row(str(s.posting_id), s.title or "", f"[{style}]{s.match_score}%[/{style}]")

    console.print(table)


@app.command()
def parse_resume(
    text_file: Path = typer.Argument(..., help="Plain text resume file"),
):
    """Extract known skills from a plain text resume."""
    from talentmatch.nlp import get_resume_parser

    try:
        raw_text = text_file.read_text(encoding="utf-8")
    except OSError as e:
        _fail(str(e))

    parsed = get_resume_parser().parse(raw_text)

    if not parsed.skills:
        console.print("[yellow]No known skills found.[/yellow]")
        return

    console.print(f"Skills found: [cyan]{len(parsed.skills)}[/cyan]")
    console.print(f"  {', '.join(parsed.skills)}")


if __name__ == "__main__":
    app()
