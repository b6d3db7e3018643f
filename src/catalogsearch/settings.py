"""Settings loader for the search client.

Reads defaults from environment variables or a local .env file:
- CATALOGSEARCH_BASE_URL: search service base URL
- CATALOGSEARCH_TIMEOUT: timeout in seconds for the client-owned transport
  (unset means no timeout)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://search.b17g.services/"


class Settings(BaseSettings):
    """Environment settings for :class:`catalogsearch.client.SearchClient`."""

    BASE_URL: str = DEFAULT_BASE_URL
    TIMEOUT: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="CATALOGSEARCH_", env_file=".env", extra="ignore"
    )
