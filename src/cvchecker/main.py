"""
CV Checker - Main entry point.
Scores a CV file and prints the quality report.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
from loguru import logger
from pydantic import ValidationError

from shared.config import get_settings
from shared.log import setup_logging
from shared.rules import RuleBook
from cvchecker.analyzer import CVFeedback, analyze_cv_quality
from cvchecker.completeness import calculate_cv_completeness, get_completeness_status
from cvchecker.grading import get_score_label
from cvchecker.loader import load_cv


def render_report(feedback: CVFeedback, completeness: int) -> str:
    """Format a quality report for the terminal."""
    label, _ = get_completeness_status(completeness)
    lines = [
        f"Score: {feedback.score}/100 (grade {feedback.grade.value}, {get_score_label(feedback.score)})",
        f"Completeness: {completeness}% ({label})",
        feedback.overall_message,
        "",
        "Sections:",
    ]
    for section in feedback.sections:
        lines.append(f"  {section.section.value:<15} {section.score:>3}  {section.status.value}")

    if feedback.strengths:
        lines.append("")
        lines.append("Strengths:")
        lines.extend(f"  + {s}" for s in feedback.strengths)

    if feedback.improvements:
        lines.append("")
        lines.append("Improvements:")
        lines.extend(f"  - {s}" for s in feedback.improvements)

    return "\n".join(lines)


@click.command()
@click.option(
    "--cv",
    "cv_path",
    "-c",
    type=click.Path(path_type=Path),
    required=True,
    help="CV file (YAML or JSON)",
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
    help="Print the report as JSON",
)
def main(cv_path: Path, rules_path: Path, as_json: bool):
    """CV Checker - Scores CV quality and suggests improvements."""
    setup_logging()
    settings = get_settings()

    try:
        rules = RuleBook.from_yaml(rules_path or settings.rules_path)
        cv = load_cv(cv_path)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Could not load input: {e}")
        raise click.ClickException(str(e))

    feedback = analyze_cv_quality(cv, rules)
    completeness = calculate_cv_completeness(cv)
    logger.info(f"CV scored {feedback.score} (grade {feedback.grade.value})")

    if as_json:
        report = feedback.to_dict()
        report["completeness"] = completeness
        click.echo(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        click.echo(render_report(feedback, completeness))


if __name__ == "__main__":
    main()
