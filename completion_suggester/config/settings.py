import os
from typing import Optional, Tuple
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VALID_SCHEMES = ("http", "https")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """Application settings and configuration"""

    def __init__(self):
        self.elasticsearch_host = os.getenv("ELASTICSEARCH_HOST", "localhost")
        self.elasticsearch_port = int(os.getenv("ELASTICSEARCH_PORT", 9200))
        self.elasticsearch_scheme = os.getenv("ELASTICSEARCH_SCHEME", "http").lower()
        self.elasticsearch_username = os.getenv("ELASTICSEARCH_USERNAME")
        self.elasticsearch_password = os.getenv("ELASTICSEARCH_PASSWORD")
        # None leaves the transport default in place
        self.elasticsearch_timeout = _env_float("ELASTICSEARCH_TIMEOUT")

        if self.elasticsearch_scheme not in VALID_SCHEMES:
            raise ValueError(
                f"ELASTICSEARCH_SCHEME must be one of {VALID_SCHEMES}, got {self.elasticsearch_scheme!r}"
            )

        # Completion target
        self.completion_index = os.getenv("COMPLETION_INDEX", "test2")
        self.completion_field = os.getenv("COMPLETION_FIELD", "title")
        self.completion_skip_duplicates = _env_bool("COMPLETION_SKIP_DUPLICATES", True)
        self.max_autocomplete_results = int(os.getenv("COMPLETION_MAX_RESULTS", 10))
        if self.max_autocomplete_results < 1:
            raise ValueError(
                f"COMPLETION_MAX_RESULTS must be at least 1, got {self.max_autocomplete_results}"
            )

        # API settings
        self.api_title = "Completion Suggester API"
        self.api_description = "Prefix autocompletion backed by the Elasticsearch completion suggester"
        self.api_version = "1.0.0"

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def elasticsearch_url(self) -> str:
        """Endpoint URL assembled from scheme, host and port"""
        return f"{self.elasticsearch_scheme}://{self.elasticsearch_host}:{self.elasticsearch_port}"

    @property
    def elasticsearch_auth(self) -> Optional[Tuple[str, str]]:
        """Get Elasticsearch authentication tuple"""
        if self.elasticsearch_username and self.elasticsearch_password:
            return (self.elasticsearch_username, self.elasticsearch_password)
        return None


# Global settings instance
settings = Settings()
