import logging
from typing import Optional

import typer

from suppr.config import Config
from suppr.errors import SupprError
from suppr.logging import setup_logger
from suppr.modules.checks import run_checks
from suppr.modules.report import build_report
from suppr.utils.kube import resolve_kubeconfig

app = typer.Typer(add_completion=False, help="Debugger for Kubernetes!")

logger = logging.getLogger("suppr.cli")


def setup_logging() -> None:
    """Configure the package logger from Config."""
    Config.validate()
    setup_logger("suppr", Config.LOG_LEVEL)


@app.command()
def main(
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", "-k", metavar="FILE", help="Specify a kubeconfig file to use"
    ),
):
    """Run the cluster checks with kubectl and print a diagnostic report."""
    try:
        setup_logging()
        path = resolve_kubeconfig(kubeconfig)
        outcomes = run_checks(path)
        report = build_report(outcomes, verbose=Config.VERBOSE)
    except SupprError as e:
        logger.debug("Aborting", exc_info=True)
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(report)


def run() -> None:
    app(prog_name="suppr")


if __name__ == "__main__":
    run()
