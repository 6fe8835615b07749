"""Configuration for talking to a Contentful space."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# ============================================
# DEFAULTS
# ============================================

DEFAULT_CMA_URL = "https://api.contentful.com"
DEFAULT_CDA_URL = "https://cdn.contentful.com"
DEFAULT_ENVIRONMENT = "master"
DEFAULT_LOCALE = "en-US"
DEFAULT_LOG_FILE = "cleanup_log.txt"
PAGE_SIZE = 100  # Contentful caps list endpoints at 1000
MAX_PAGE_SIZE = 1000
REQUEST_TIMEOUT = 30


def _parse_int_env(name: str, default: int, min_value: Optional[int] = None,
                   max_value: Optional[int] = None) -> int:
    """Read an int environment variable, clamped, falling back on bad input."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        value = default
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = default

    if min_value is not None and value < min_value:
        value = min_value
    if max_value is not None and value > max_value:
        value = max_value

    return value


@dataclass(frozen=True)
class ContentfulConfig:
    """Everything a command needs to reach one space/environment.

    Built once at startup and passed to the client and commands. Missing
    tokens or ids are not checked here; Contentful rejects the request and
    the failure surfaces as a FetchFailed.
    """

    space_id: str = ""
    environment_id: str = DEFAULT_ENVIRONMENT
    cma_token: str = ""
    cda_token: str = ""
    cma_base_url: str = DEFAULT_CMA_URL
    cda_base_url: str = DEFAULT_CDA_URL
    locale: str = DEFAULT_LOCALE
    page_size: int = PAGE_SIZE
    request_timeout: int = REQUEST_TIMEOUT
    log_file: str = DEFAULT_LOG_FILE

    @classmethod
    def from_env(cls) -> "ContentfulConfig":
        """Create configuration from environment variables."""
        return cls(
            space_id=os.getenv("CONTENTFUL_SPACE_ID", ""),
            environment_id=os.getenv("CONTENTFUL_ENVIRONMENT_ID", DEFAULT_ENVIRONMENT),
            cma_token=os.getenv("CONTENTFUL_CMA_TOKEN", ""),
            cda_token=os.getenv("CONTENTFUL_CDA_TOKEN", ""),
            cma_base_url=os.getenv("CONTENTFUL_BASE_URL_CMA", DEFAULT_CMA_URL).rstrip("/"),
            cda_base_url=os.getenv("CONTENTFUL_BASE_URL_CDA", DEFAULT_CDA_URL).rstrip("/"),
            locale=os.getenv("CONTENTFUL_LOCALE", DEFAULT_LOCALE),
            page_size=_parse_int_env("CONTENTFUL_PAGE_SIZE", PAGE_SIZE,
                                     min_value=1, max_value=MAX_PAGE_SIZE),
            request_timeout=_parse_int_env("CONTENTFUL_REQUEST_TIMEOUT", REQUEST_TIMEOUT,
                                           min_value=1),
            log_file=os.getenv("CONTENTFUL_CLEANUP_LOG", DEFAULT_LOG_FILE),
        )


def load_config(env_file: Optional[str] = ".env") -> ContentfulConfig:
    """Load a dotenv file (if present) and build the config from the environment.

    Variables already set in the process environment win over the file.
    """
    if env_file:
        load_dotenv(env_file, override=False)
    return ContentfulConfig.from_env()
