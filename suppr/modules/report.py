"""Render check outcomes as a colorized text report."""
from typing import Iterable, List, Optional

import typer

from suppr.config import Config
from suppr.modules.checks import CheckOutcome

TITLE = "Kubernetes Diagnostic"
PASS_SYMBOL = "✓"
FAIL_SYMBOL = "✘"


def colorize(result: bool) -> str:
    if result:
        return typer.style(PASS_SYMBOL, fg=typer.colors.GREEN)
    return typer.style(FAIL_SYMBOL, fg=typer.colors.RED)


class Report:
    """Accumulates the report text line by line."""

    def __init__(self, title: str = TITLE, verbose: Optional[bool] = None):
        self.verbose = Config.VERBOSE if verbose is None else verbose
        self._parts: List[str] = [f"{title}\n"]

    def add_status(self, label: str, result: bool) -> None:
        self._parts.append(f"{label}: {colorize(result)}\n")

    def add_output(self, output: str) -> None:
        self._parts.append(f"\n{output}\n")

    def add_outcome(self, outcome: CheckOutcome) -> None:
        self.add_status(outcome.check.label, outcome.status)
        if outcome.shows_output(self.verbose):
            self.add_output(outcome.result.stdout)

    def render(self) -> str:
        return "".join(self._parts)


def build_report(outcomes: Iterable[CheckOutcome], verbose: Optional[bool] = None) -> str:
    """Build the full report for ``outcomes`` in the order given."""
    report = Report(verbose=verbose)
    for outcome in outcomes:
        report.add_outcome(outcome)
    return report.render()
