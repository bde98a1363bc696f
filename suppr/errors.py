"""Fatal errors raised while producing a diagnostic report."""


class SupprError(Exception):
    """Base class for conditions that abort the run before any report is printed."""


class KubeconfigError(SupprError, ValueError):
    """No kubeconfig was given and none could be derived from HOME."""


class LaunchError(SupprError, RuntimeError):
    """kubectl could not be started at all."""


class OutputDecodeError(SupprError, RuntimeError):
    """kubectl produced output that is not valid UTF-8."""


class ConfigError(SupprError, ValueError):
    """A configuration value from the environment is unusable."""
