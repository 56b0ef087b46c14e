"""
Job Recommender - Main entry point.
Ranks job postings for an applicant profile.
"""

import json
import sys
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
from loguru import logger
from pydantic import ValidationError

from shared.config import get_settings
from shared.log import setup_logging
from shared.rules import RuleBook
from recommender.loader import load_jobs, load_profile
from recommender.scorer import RecommendationSummary, get_match_label, summarize_recommendations


def render_summary(summary: RecommendationSummary) -> str:
    """Format ranked recommendations for the terminal."""
    lines = [
        f"{summary.matched_jobs} of {summary.total_jobs} jobs match "
        f"(average score {summary.average_score})",
    ]
    if not summary.profile_complete:
        lines.append("Profile incomplete: add category, location and skills for better matches")

    for rank, rec in enumerate(summary.recommendations, start=1):
        job = rec.job
        lines.append("")
        lines.append(
            f"{rank:>2}. [{rec.score:>3}] {job.title or job.id} - {job.company} "
            f"({get_match_label(rec.score)})"
        )
        lines.extend(f"      + {reason}" for reason in rec.match_reasons)
        lines.extend(f"      - {reason}" for reason in rec.mismatch_reasons)

    return "\n".join(lines)


@click.command()
@click.option(
    "--profile",
    "profile_path",
    "-p",
    type=click.Path(path_type=Path),
    required=True,
    help="Applicant profile file (YAML or JSON)",
)
@click.option(
    "--jobs",
    "jobs_path",
    "-j",
    type=click.Path(path_type=Path),
    required=True,
    help="Job postings file (YAML or JSON)",
)
@click.option(
    "--limit",
    "-l",
    type=int,
    default=None,
    help="Maximum recommendations (overrides settings)",
)
@click.option(
    "--min-score",
    "-m",
    type=int,
    default=None,
    help="Drop jobs scoring at or below this (overrides settings)",
)
@click.option(
    "--rules",
    "rules_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Rule tables file (overrides settings)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print recommendations as JSON",
)
def main(
    profile_path: Path,
    jobs_path: Path,
    limit: Optional[int],
    min_score: Optional[int],
    rules_path: Optional[Path],
    as_json: bool,
):
    """Job Recommender - Ranks jobs by how well they fit a profile."""
    setup_logging()
    settings = get_settings()

    try:
        rules = RuleBook.from_yaml(rules_path or settings.rules_path)
        profile = load_profile(profile_path)
        jobs = load_jobs(jobs_path)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Could not load input: {e}")
        raise click.ClickException(str(e))

    summary = summarize_recommendations(
        profile,
        jobs,
        limit=settings.recommendation_limit if limit is None else limit,
        min_score=settings.recommendation_min_score if min_score is None else min_score,
        rules=rules,
    )

    if as_json:
        click.echo(json.dumps(summary.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(render_summary(summary))


if __name__ == "__main__":
    main()
