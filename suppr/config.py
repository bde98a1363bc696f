"""Configuration management for the suppr application."""
import logging
import os

from dotenv import load_dotenv

from suppr.errors import ConfigError

# Load environment variables from .env file if it exists
load_dotenv()


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``1``/``true``/``yes``/``on`` from the environment."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration with sensible defaults."""

    # kubectl
    KUBECTL: str = os.getenv("SUPPR_KUBECTL", "kubectl")

    # Report
    # Only decides whether the node health output is appended to the report;
    # the "Using kubeconfig" line is logged at INFO regardless
    VERBOSE: bool = env_flag("SUPPR_VERBOSE", True)
    LOCAL_FILTER: bool = env_flag("SUPPR_LOCAL_FILTER", False)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {cls.LOG_LEVEL}")
        if not cls.KUBECTL:
            raise ConfigError("SUPPR_KUBECTL must not be empty")

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
