"""The four cluster checks and the sequential runner that executes them."""
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple

from suppr.config import Config
from suppr.modules import kubectl
from suppr.modules.kubectl import CheckResult

logger = logging.getLogger("suppr.checks")

# When to append the captured output below the status line
OUTPUT_NEVER = "never"
OUTPUT_ALWAYS = "always"
OUTPUT_VERBOSE_OR_SUCCESS = "verbose-or-success"

# A text filter takes kubectl output and returns (matched, kept output)
TextFilter = Callable[[str], Tuple[bool, str]]


def _join(lines: List[str]) -> str:
    return "".join(line + "\n" for line in lines)


def grep(*patterns: str, keep_header: bool = False) -> TextFilter:
    """Keep lines containing any of ``patterns``, like ``grep -e a -e b``."""
    def apply(text: str) -> Tuple[bool, str]:
        lines = text.splitlines()
        header, body = (lines[:1], lines[1:]) if keep_header else ([], lines)
        matched = [line for line in body if any(p in line for p in patterns)]
        return bool(matched), _join(header + matched)
    return apply


def restarted_pods(text: str) -> Tuple[bool, str]:
    """Keep the header and every pod row whose RESTARTS column is above zero.

    Output without a RESTARTS header column is dropped entirely.
    """
    lines = text.splitlines()
    if not lines:
        return False, ""
    header = lines[0].split()
    if "RESTARTS" not in header:
        return False, ""
    column = header.index("RESTARTS")

    matched = []
    for line in lines[1:]:
        fields = line.split()
        if len(fields) <= column:
            continue
        digits = ""
        for char in fields[column]:
            if not char.isdigit():
                break
            digits += char
        if digits and int(digits) > 0:
            matched.append(line)
    return bool(matched), _join(lines[:1] + matched)


@dataclass(frozen=True)
class Check:
    name: str
    label: str
    args: Tuple[str, ...]
    failure_message: str
    invert: bool = False
    always_pass: bool = False
    output: str = OUTPUT_NEVER
    # Used instead of the literal args when local filtering is enabled
    filter_args: Optional[Tuple[str, ...]] = None
    text_filter: Optional[TextFilter] = None

    def status(self, success: bool) -> bool:
        """The boolean shown in the report for a raw invocation result."""
        if self.always_pass:
            return True
        if self.invert:
            return not success
        return success

    def shows_output(self, success: bool, verbose: bool) -> bool:
        if self.output == OUTPUT_ALWAYS:
            return True
        if self.output == OUTPUT_VERBOSE_OR_SUCCESS:
            return verbose or success
        return False


@dataclass
class CheckOutcome:
    check: Check
    result: CheckResult

    @property
    def status(self) -> bool:
        return self.check.status(self.result.success)

    def shows_output(self, verbose: bool) -> bool:
        return self.check.shows_output(self.result.success, verbose)


CONNECTIVITY = Check(
    name="connectivity",
    label="Master connectivity check",
    args=("get", "nodes"),
    failure_message="Master connectivity failed",
)

# The pipe is handed to kubectl as plain arguments, not to a shell.
# A successful run therefore means "NotReady found", hence the inversion.
NODE_HEALTH = Check(
    name="nodes",
    label="Node health check",
    args=("get", "nodes", "|", "grep", "NotReady"),
    failure_message="Nodes are unhealthy",
    invert=True,
    output=OUTPUT_VERBOSE_OR_SUCCESS,
    filter_args=("get", "nodes"),
    text_filter=grep("NotReady"),
)

EVENTS = Check(
    name="events",
    label="Events",
    args=("get", "events", "-A"),
    failure_message="Get events failed",
    always_pass=True,
    output=OUTPUT_ALWAYS,
    text_filter=grep("Warning", "Error", keep_header=True),
)

POD_RESTARTS = Check(
    name="pods",
    label="Pods",
    args=("get", "pods", "-A"),
    failure_message="Get pods failed",
    always_pass=True,
    output=OUTPUT_ALWAYS,
    text_filter=restarted_pods,
)

CHECKS: Tuple[Check, ...] = (CONNECTIVITY, NODE_HEALTH, EVENTS, POD_RESTARTS)


def apply_filter(check: Check, result: CheckResult) -> CheckResult:
    """Filter captured output locally; ``success`` becomes "at least one line matched".

    For inverted checks a failed kubectl run also counts as a match,
    so an unreachable cluster is never reported as healthy.
    """
    if check.text_filter is None:
        return result
    matched, kept = check.text_filter(result.stdout)
    logger.debug("%s: local filter kept %d line(s)", check.name, len(kept.splitlines()))
    if check.invert and not result.success:
        matched = True
    return replace(result, success=matched, stdout=kept)


def run_check(
    check: Check,
    kubeconfig: str,
    local_filter: bool = False,
    executable: Optional[str] = None,
) -> CheckOutcome:
    args = check.args
    if local_filter and check.filter_args is not None:
        args = check.filter_args

    result = kubectl.run(args, kubeconfig, executable=executable, failure_message=check.failure_message)
    if local_filter:
        result = apply_filter(check, result)
    logger.info("%s check: %s", check.name, "ok" if result.success else "failed")
    return CheckOutcome(check=check, result=result)


def run_checks(
    kubeconfig: str,
    checks: Sequence[Check] = CHECKS,
    local_filter: Optional[bool] = None,
    executable: Optional[str] = None,
) -> List[CheckOutcome]:
    """Run every check in order, one kubectl process at a time."""
    if local_filter is None:
        local_filter = Config.LOCAL_FILTER
    return [run_check(check, kubeconfig, local_filter, executable) for check in checks]
