import logging
import os
from typing import Mapping, Optional

from suppr.errors import KubeconfigError

logger = logging.getLogger("suppr.kube")


def default_kubeconfig(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return ``$HOME/.kube/config``, or raise if HOME is not set."""
    if environ is None:
        environ = os.environ
    home = environ.get("HOME")
    if not home:
        raise KubeconfigError("No kubeconfig provided and HOME environment variable not set")
    return f"{home}/.kube/config"


def resolve_kubeconfig(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the kubeconfig passed to every kubectl call.
    The explicit path wins; otherwise fall back to ~/.kube/config.
    The path is used as given and is not checked for existence, kubectl reports that itself.
    """
    if path:
        resolved = path
    else:
        resolved = default_kubeconfig(environ)
    logger.info("Using kubeconfig: %s", resolved)
    return resolved
