"""
Configuration management.
"""

import logging
import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """
    Application configuration.

    Loads from environment variables with sensible defaults.
    """

    # Listings and report
    input_file: str = field(default_factory=lambda: os.getenv("INPUT_FILE", "realestates.txt"))
    output_file: str = field(
        default_factory=lambda: os.getenv("OUTPUT_FILE", "outputRealEstate.txt")
    )
    report_city: str = field(default_factory=lambda: os.getenv("REPORT_CITY", "Budapest"))

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv(
            "LOG_LEVEL", "DEBUG" if os.getenv("DEBUG", "false").lower() == "true" else "INFO"
        ).upper()
    )

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "input_file": self.input_file,
            "output_file": self.output_file,
            "report_city": self.report_city,
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "log_level": self.log_level,
        }


def configure_logging(config: Config) -> None:
    """Send diagnostics to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
