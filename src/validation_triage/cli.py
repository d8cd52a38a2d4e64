# validation_triage/cli.py

import logging
from pathlib import Path

import typer

from validation_triage.domain.triage import (
    TriagePaths,
    analyse_validation_report,
    curate_analysis,
    exclusion_candidates,
    rank_by_weakness,
    run_triage,
    strongest,
)
from validation_triage.exceptions import TriageError
from validation_triage.storage import load_validation_report

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Triage component dataset folders from a validation report.")

RootOption = typer.Option(
    Path("."),
    "--root",
    "-r",
    envvar="TRIAGE_DATA_DIR",
    help="Directory holding the dataset folders and report files",
)


def _paths(
    root: Path,
    report: Path | None = None,
    analysis: Path | None = None,
    checklist: Path | None = None,
) -> TriagePaths:
    defaults = TriagePaths.under(root)
    return TriagePaths(
        data_dir=defaults.data_dir,
        report_path=report or defaults.report_path,
        analysis_path=analysis or defaults.analysis_path,
        checklist_path=checklist or defaults.checklist_path,
        curated_json_path=defaults.curated_json_path,
        curated_markdown_path=defaults.curated_markdown_path,
    )


@app.command()
def analyse(
    root: Path = RootOption,
    report: Path | None = typer.Option(
        None, "--report", help="Validation report (defaults to VALIDATION_REPORT.json)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Analysis JSON (defaults to ANALYSIS_REPORT.json)"
    ),
    checklist: Path | None = typer.Option(
        None, "--checklist", help="Review checklist (defaults to REVIEW_CHECKLIST.md)"
    ),
):
    """Classify every folder and write the analysis and review checklist."""
    paths = _paths(root, report, output, checklist)
    try:
        artifacts = analyse_validation_report(paths)
    except TriageError as error:
        logger.error("Analysis failed: %s", error)
        raise typer.Exit(code=1) from error

    analysis = artifacts.analysis
    typer.echo(f"Tier 1 (High Confidence): {len(analysis.tier1)}")
    typer.echo(f"Tier 2 (Medium Confidence): {len(analysis.tier2)}")
    typer.echo(f"Tier 3 (Low Confidence): {len(analysis.tier3)}")
    typer.echo(f"Review items: {len(analysis.review_checklist)}")


@app.command()
def rank(
    root: Path = RootOption,
    report: Path | None = typer.Option(None, "--report", help="Validation report"),
    tier: int = typer.Option(1, "--tier", "-t", min=1, max=3, help="Tier to rank"),
    weakest: int = typer.Option(8, "--weakest", help="Exclusion candidates to list"),
    best: int = typer.Option(20, "--strongest", help="Strongest folders to list"),
):
    """Rank one tier's folders by weakness score without writing anything."""
    paths = _paths(root, report)
    try:
        validation_report = load_validation_report(paths.report_path)
    except TriageError as error:
        logger.error("Ranking failed: %s", error)
        raise typer.Exit(code=1) from error

    result = run_triage(validation_report, paths.data_dir)
    verdicts = {1: result.tier1, 2: result.tier2, 3: result.tier3}[tier]
    ranked = rank_by_weakness(verdicts)

    typer.echo(f"Tier {tier} folders ranked by weakness (weakest first):")
    for position, verdict in enumerate(ranked, start=1):
        signals = verdict.weakness.signals
        typer.echo(f"{position}. {verdict.folder_name}")
        typer.echo(f"   Weakness Score: {verdict.weakness.score:.2f}")
        typer.echo(f"   Safe Mismatches: {signals.safe_mismatches}")
        typer.echo(f"   Missing Files: {signals.missing_files}")
        typer.echo(
            f"   Components: {signals.component_count}, "
            f"Avg Props: {signals.avg_props_per_component}"
        )
        typer.echo(
            f"   Messages: {signals.message_count}, "
            f"Component Uses: {signals.component_usage_count}"
        )
        typer.echo(f"   Has Grading Guidance: {signals.has_grading_guidance}")

    typer.echo(f"\n=== {weakest} WEAKEST (Candidates for Exclusion) ===")
    for position, verdict in enumerate(exclusion_candidates(ranked, weakest), start=1):
        typer.echo(f"{position}. {verdict.folder_name} ({verdict.weakness.score:.2f})")

    typer.echo(f"\n=== {best} STRONGEST (Recommended) ===")
    for position, verdict in enumerate(strongest(ranked, best), start=1):
        typer.echo(f"{position}. {verdict.folder_name} ({verdict.weakness.score:.2f})")


@app.command()
def curate(
    root: Path = RootOption,
    analysis: Path | None = typer.Option(
        None, "--analysis", help="Analysis JSON (defaults to ANALYSIS_REPORT.json)"
    ),
):
    """Partition an existing analysis into a curated delivery list."""
    paths = _paths(root, analysis=analysis)
    try:
        curated = curate_analysis(paths)
    except TriageError as error:
        logger.error("Curation failed: %s", error)
        raise typer.Exit(code=1) from error

    typer.echo(f"High Confidence: {len(curated.high_confidence)}")
    typer.echo(f"Medium Confidence: {len(curated.medium_confidence)}")
    typer.echo(f"Excluded: {len(curated.excluded)}")
    typer.echo(f"Total Included: {curated.summary.included}")


if __name__ == "__main__":
    app()
