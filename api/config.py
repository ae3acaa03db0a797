"""
PC Catalog API Configuration
Environment variable loading with validation and safe defaults
"""
import math
import os
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Configuration validation error"""
    pass


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


class Settings:
    """Application configuration with environment variable validation"""

    # Application configuration
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080
    APP_LOG_LEVEL: str = "INFO"

    # Rate limiting: token refill rate and burst capacity
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_SECOND: float = 1.0
    RATE_LIMIT_BURST: int = 3

    # Seconds in-flight requests get to finish after SIGINT/SIGTERM
    SHUTDOWN_GRACE_SECONDS: int = 5

    TEMPLATES_DIR: Path = DEFAULT_TEMPLATES_DIR

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Initialize and validate configuration"""
        self._environ = os.environ if environ is None else environ
        self._load_optional_env_vars()
        self._validate_config()

    def _get(self, name: str, default) -> str:
        return self._environ.get(name, str(default))

    def _load_optional_env_vars(self) -> None:
        """Load optional environment variables with defaults"""
        try:
            self.APP_ENV = self._get("APP_ENV", self.APP_ENV)
            self.APP_HOST = self._get("APP_HOST", self.APP_HOST)
            self.APP_PORT = int(self._get("APP_PORT", self.APP_PORT))
            self.APP_LOG_LEVEL = self._get("APP_LOG_LEVEL", self.APP_LOG_LEVEL).upper()

            self.RATE_LIMIT_ENABLED = _parse_bool(
                self._get("RATE_LIMIT_ENABLED", self.RATE_LIMIT_ENABLED)
            )
            self.RATE_LIMIT_PER_SECOND = float(
                self._get("RATE_LIMIT_PER_SECOND", self.RATE_LIMIT_PER_SECOND)
            )
            self.RATE_LIMIT_BURST = int(self._get("RATE_LIMIT_BURST", self.RATE_LIMIT_BURST))

            self.SHUTDOWN_GRACE_SECONDS = int(
                self._get("SHUTDOWN_GRACE_SECONDS", self.SHUTDOWN_GRACE_SECONDS)
            )
        except ValueError as e:
            raise ConfigError(f"Invalid numeric configuration value: {e}") from e

        self.TEMPLATES_DIR = Path(self._get("TEMPLATES_DIR", self.TEMPLATES_DIR))

    def _validate_config(self) -> None:
        """Validate configuration values"""
        if not 1 <= self.APP_PORT <= 65535:
            raise ConfigError("APP_PORT must be between 1 and 65535")

        if self.APP_LOG_LEVEL not in LOG_LEVELS:
            raise ConfigError(f"Invalid APP_LOG_LEVEL: {self.APP_LOG_LEVEL}")

        if self.RATE_LIMIT_PER_SECOND <= 0:
            raise ConfigError("RATE_LIMIT_PER_SECOND must be positive")

        per_minute = self.RATE_LIMIT_PER_SECOND * 60
        if abs(per_minute - round(per_minute)) > 1e-9:
            raise ConfigError("RATE_LIMIT_PER_SECOND must be a whole number of requests per minute")

        if self.RATE_LIMIT_BURST < 1:
            raise ConfigError("RATE_LIMIT_BURST must be at least 1")

        if self.SHUTDOWN_GRACE_SECONDS < 0:
            raise ConfigError("SHUTDOWN_GRACE_SECONDS must be non-negative")

    def rate_limit_expressions(self) -> List[str]:
        """
        Render the token bucket as two ``limits`` moving windows.

        A bucket holding ``burst`` tokens refilled at ``rate`` per second
        never admits more than ``burst + ceil(rate) - 1`` requests in one
        second, nor more than ``burst + 60 * rate - 1`` in one minute. The
        first window bounds the burst, the second holds the sustained rate.
        Rate 1 and burst 3 gives ["3/1 second", "62/60 second"].
        """
        per_second = self.RATE_LIMIT_BURST + math.ceil(self.RATE_LIMIT_PER_SECOND) - 1
        per_minute = self.RATE_LIMIT_BURST + round(self.RATE_LIMIT_PER_SECOND * 60) - 1
        return [f"{per_second}/1 second", f"{per_minute}/60 second"]

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.APP_ENV.lower() == "production"

