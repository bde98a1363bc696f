"""Synchronous kubectl invocation."""
import logging
import subprocess
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from suppr.config import Config
from suppr.errors import LaunchError, OutputDecodeError

logger = logging.getLogger("suppr.kubectl")


@dataclass
class CheckResult:
    success: bool
    stdout: str
    stderr: str = ""
    argv: List[str] = field(default_factory=list)


def build_argv(executable: str, args: Sequence[str], kubeconfig: str) -> List[str]:
    return [executable, "--kubeconfig", kubeconfig, *args]


def run(
    args: Sequence[str],
    kubeconfig: str,
    executable: Optional[str] = None,
    failure_message: str = "kubectl failed to start",
) -> CheckResult:
    """Run kubectl once and capture its exit status and output.

    Args:
        args: Arguments following ``--kubeconfig <file>``
        kubeconfig: Path handed to ``--kubeconfig``
        executable: kubectl binary (default: Config.KUBECTL)
        failure_message: Message for the LaunchError raised when the process can't start

    Returns:
        CheckResult; a non-zero exit status is reported as ``success=False``, not raised

    Raises:
        LaunchError: the executable is missing or could not be started
        OutputDecodeError: stdout is not valid UTF-8
    """
    argv = build_argv(executable or Config.KUBECTL, args, kubeconfig)
    logger.debug("Running: %s", " ".join(argv))

    try:
        result = subprocess.run(argv, capture_output=True)
    except OSError as e:
        raise LaunchError(f"{failure_message}: {e}") from e

    try:
        stdout = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputDecodeError(f"{failure_message}: output of '{' '.join(argv)}' is not valid UTF-8") from e
    stderr = result.stderr.decode("utf-8", errors="replace")

    if result.returncode != 0:
        logger.debug("%s exited with %d: %s", argv[0], result.returncode, stderr.strip())

    return CheckResult(success=result.returncode == 0, stdout=stdout, stderr=stderr, argv=argv)
