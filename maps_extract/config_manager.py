"""
Configuration manager for library usage.

Bundles the module-level defaults from config.py into a single object that
is passed explicitly through the pipeline, one per extractor.
"""

from typing import Optional
from dataclasses import dataclass

from . import config
from .exceptions import ConfigurationError


@dataclass
class ExtractorConfig:
    """Configuration for MapsExtractor.

    For the API key: explicit arg > GOOGLE_MAPS_API_KEY env var.
    The key is resolved when the config is created, not at import time, so a
    long-running server picks up the environment it is started with.

    Args:
        api_key: Google Maps web services key. If None, falls back to the
                 GOOGLE_MAPS_API_KEY env var.
        delay_between_pages: Pause before each continuation search request (seconds).
        request_timeout: Timeout for each outbound HTTP request (seconds).
        max_results_cap: Hard upper bound for max_results.
        default_max_results: max_results used when the caller gives none.
        verbose: Whether to log progress at INFO level.
    """

    api_key: Optional[str] = None
    delay_between_pages: float = config.DELAY_BETWEEN_PAGES
    request_timeout: float = config.REQUEST_TIMEOUT
    max_results_cap: int = config.MAX_RESULTS_CAP
    default_max_results: int = config.DEFAULT_MAX_RESULTS
    verbose: bool = True

    def __post_init__(self):
        """Resolve the API key from the environment if not explicitly set."""
        if self.api_key is None:
            self.api_key = config.get_api_key()

        if self.delay_between_pages < 0:
            raise ConfigurationError("delay_between_pages cannot be negative")

    def require_api_key(self) -> str:
        """Return the API key or raise ConfigurationError if it is missing."""
        if not self.api_key:
            raise ConfigurationError(
                f"{config.API_KEY_ENV_VAR} is not configured on the server."
            )
        return self.api_key
