"""
Configuration for the console and command line front end.

The graph core takes no configuration; these settings only shape how the
console drives it and how the command line sets up logging.
"""

import logging
from dataclasses import dataclass

from .core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConsoleConfig:
    """
    Configuration for a graph console session.

    Attributes:
        weighted: Drive a WeightedGraph and require a weight for edge operations
        check_integrity: Validate graph consistency after every mutation
        log_level: Name of the logging level for the session
    """

    weighted: bool = False
    check_integrity: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.log_level}', expected one of: {', '.join(LOG_LEVELS)}"
            )

    def configure_logging(self) -> None:
        """Configure root logging with the package's log format."""
        logging.basicConfig(level=getattr(logging, self.log_level), format=LOG_FORMAT)
