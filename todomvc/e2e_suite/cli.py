"""CLI entry point for the TodoMVC report tooling."""

import logging
import sys
from pathlib import Path

import typer

from todomvc.e2e_suite.models.suite_config import SuiteConfig
from todomvc.e2e_suite.report_generator import generate_report
from todomvc.e2e_suite.results_cleaner import clean_results

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Allure result tooling for the TodoMVC browser suite.")


@app.command()
def generate(
    results_dir: Path | None = typer.Option(  # noqa: B008
        None, help="Allure results directory (default: allure-results)"
    ),
    report_dir: Path | None = typer.Option(  # noqa: B008
        None, help="Report output directory (default: allure-report)"
    ),
) -> None:
    """Generate the HTML dashboard from Allure JSON results."""
    config = SuiteConfig.from_env()
    results_path = results_dir or Path(config.results_dir)
    report_path = report_dir or Path(config.report_dir)

    logger.info("Generating enhanced Allure HTML report...")
    logger.info(f"Results directory: {results_path}")
    logger.info(f"Report directory: {report_path}")

    try:
        report_file = generate_report(results_path, report_path)
    except Exception as e:
        logger.error(f"❌ Error generating report: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(report_file))


@app.command()
def clean(
    results_dir: Path | None = typer.Option(  # noqa: B008
        None, help="Allure results directory (default: allure-results)"
    ),
) -> None:
    """Remove stale JSON results before a new test run."""
    config = SuiteConfig.from_env()
    results_path = results_dir or Path(config.results_dir)

    logger.info("Cleaning old Allure results...")
    try:
        removed = clean_results(results_path)
    except OSError as e:
        logger.error(f"❌ Error cleaning results: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info("Ready for new test execution")
    typer.echo(f"Removed {removed} result files")


if __name__ == "__main__":  # pragma: no cover
    app()
