"""
ClaimDesk CLI - Main command-line interface for ClaimDesk.

Commands for running the API server, seeding demo data, and running the
AI analyses from a terminal.
"""

import asyncio
import json

import typer
from rich.console import Console
from rich.table import Table

from claimdesk.logging_config import setup_logging

app = typer.Typer(
    name="claimdesk",
    help="ClaimDesk - Trucking claims management with AI insights",
    no_args_is_help=True,
)

console = Console()


def _init_logging() -> None:
    # Fall back to console logging if the log directory is not writable
    try:
        setup_logging(context="cli")
    except PermissionError:
        import logging

        logging.basicConfig(level=logging.INFO)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
) -> None:
    """
    Start the FastAPI server.

    Runs the ClaimDesk API server for claims, tasks and AI insights.
    """
    import uvicorn

    console.print("[bold green]Starting ClaimDesk API server...[/bold green]")
    console.print(f"  Host: {host}")
    console.print(f"  Port: {port}")
    console.print(f"  Reload: {reload}")
    console.print(f"\n  API docs: http://{host}:{port}/docs")

    uvicorn.run(
        "claimdesk.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def seed() -> None:
    """
    Load demo claims, tasks and activities.

    Does nothing if the database already contains claims.
    """
    from claimdesk.db.connection import db_session, init_db
    from claimdesk.db.seed import seed_database

    _init_logging()
    init_db()

    with db_session() as session:
        inserted = seed_database(session)

    if inserted:
        console.print("[green]✓ Demo data loaded[/green]")
    else:
        console.print("[yellow]Database already contains claims; nothing to do[/yellow]")


@app.command()
def insights(
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
) -> None:
    """
    Generate AI insights for every stored claim, task and activity.
    """
    from claimdesk.db.connection import db_session
    from claimdesk.insights import InsightsGenerator
    from claimdesk.services.claims_service import load_snapshots

    _init_logging()

    with db_session() as session:
        claims, tasks, activities = load_snapshots(session)

    generator = InsightsGenerator.from_settings()
    result = asyncio.run(generator.generate_claim_insights(claims, tasks, activities))

    if as_json:
        console.print_json(result.model_dump_json(by_alias=True))
        return

    if result.diagnostic:
        console.print(f"[yellow]⚠ AI analysis unavailable:[/yellow] {result.diagnostic}\n")

    table = Table(title="Insights")
    table.add_column("Category", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Insight")
    for item in result.insights:
        table.add_row(item.category, f"{item.confidence_score:.0%}", item.insight)
    console.print(table)

    table = Table(title="Recommendations")
    table.add_column("Priority", style="magenta")
    table.add_column("Area")
    table.add_column("Recommendation")
    table.add_column("Estimated Impact")
    for rec in result.recommendations:
        table.add_row(rec.priority, rec.impact_area, rec.recommendation, rec.estimated_impact)
    console.print(table)

    console.print(f"\n[bold]Summary:[/bold] {result.summary_text}")
    console.print(f"[dim]Processed in {result.processing_duration}ms[/dim]")


@app.command()
def predict(
    claim_json: str = typer.Option(
        ..., "--claim-json", help="New claim as a JSON object"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
) -> None:
    """
    Predict the outcome of a new claim using stored claims as history.
    """
    from claimdesk.db.connection import db_session
    from claimdesk.insights import InsightsGenerator
    from claimdesk.services.claims_service import load_snapshots

    try:
        new_claim = json.loads(claim_json)
    except json.JSONDecodeError as e:
        console.print(f"[bold red]Error:[/bold red] Invalid claim JSON: {e}")
        raise typer.Exit(1)

    if not isinstance(new_claim, dict):
        console.print("[bold red]Error:[/bold red] Claim JSON must be an object")
        raise typer.Exit(1)

    _init_logging()

    with db_session() as session:
        claims, _, _ = load_snapshots(session)

    generator = InsightsGenerator.from_settings()
    prediction = asyncio.run(generator.predict_claim_outcome(claims, new_claim))

    if as_json:
        console.print_json(prediction.model_dump_json(by_alias=True))
        return

    if prediction.diagnostic:
        console.print(
            f"[yellow]⚠ AI prediction unavailable:[/yellow] {prediction.diagnostic}\n"
        )

    console.print(f"[bold]Likely outcome:[/bold] {prediction.likely_outcome}")
    console.print(
        f"[bold]Estimated processing:[/bold] {prediction.estimated_processing_days} days"
    )
    console.print(f"[bold]Confidence:[/bold] {prediction.confidence_score:.0%}")

    if prediction.potential_issues:
        console.print("\n[bold]Potential issues:[/bold]")
        for issue in prediction.potential_issues:
            console.print(f"  • {issue}")

    if prediction.recommended_actions:
        console.print("\n[bold]Recommended actions:[/bold]")
        for action in prediction.recommended_actions:
            console.print(f"  • {action}")


@app.command()
def check() -> None:
    """
    Run startup dependency checks without starting the server.
    """
    from claimdesk.startup import run_all_startup_checks

    run_all_startup_checks()


if __name__ == "__main__":
    app()
