import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Wave
    wave_access_token: str | None = os.getenv("WAVE_ACCESS_TOKEN")
    wave_graphql_url: str = os.getenv("WAVE_GRAPHQL_URL", "https://gql.waveapps.com/graphql/public")
    wave_timeout: float = float(os.getenv("WAVE_TIMEOUT", "30"))

    # Auth
    internal_api_secret: str | None = os.getenv("INTERNAL_API_SECRET")

    # Cache (TTLs in seconds)
    cache_max_entries: int = int(os.getenv("CACHE_MAX_ENTRIES", "200"))
    businesses_ttl: int = int(os.getenv("BUSINESSES_TTL", "900"))
    accounts_ttl: int = int(os.getenv("ACCOUNTS_TTL", "900"))
    customers_ttl: int = int(os.getenv("CUSTOMERS_TTL", "300"))
    products_ttl: int = int(os.getenv("PRODUCTS_TTL", "900"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    @property
    def has_wave_token(self) -> bool:
        return bool(self.wave_access_token)

    @property
    def has_internal_secret(self) -> bool:
        return bool(self.internal_api_secret)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_max_entries < 1:
            raise ValueError("CACHE_MAX_ENTRIES must be at least 1")

        for name in ("businesses_ttl", "accounts_ttl", "customers_ttl", "products_ttl"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name.upper()} must not be negative, got {getattr(self, name)}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
