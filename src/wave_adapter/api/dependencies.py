"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The response cache is created once here and injected, never global
"""

import secrets
from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Header, Request

from wave_adapter.cache import ExpiringCache
from wave_adapter.config import Settings, get_settings
from wave_adapter.errors import ConfigError, UnauthorizedError
from wave_adapter.handlers import WaveHandler
from wave_adapter.repositories import WaveClient
from wave_adapter.services import BusinessResolver, ExpenseService, LedgerDirectory

logger = structlog.get_logger()


def get_handler(request: Request) -> WaveHandler:
    """Dependency injection for WaveHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "wave_handler", None)
    if handler is None:
        raise RuntimeError("WaveHandler not initialized. Check lifespan setup.")
    return handler


SettingsDep = Annotated[Settings, Depends(get_settings)]


def require_internal_secret(
    settings: SettingsDep,
    x_internal_secret: Annotated[str | None, Header()] = None,
) -> None:
    """Reject callers that do not present the shared secret.

    Raises:
        ConfigError: If INTERNAL_API_SECRET is not configured
        UnauthorizedError: If the x-internal-secret header is missing or wrong
    """
    expected = settings.internal_api_secret
    if not expected:
        raise ConfigError("INTERNAL_API_SECRET is not configured")
    if not x_internal_secret or not secrets.compare_digest(x_internal_secret.encode(), expected.encode()):
        raise UnauthorizedError("Unauthorized")


def get_request_id(x_request_id: Annotated[str | None, Header()] = None) -> str | None:
    """Correlation id supplied by the caller, if any."""
    return x_request_id


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Response cache (process-wide, bounded)
    2. Wave client (data access)
    3. Resolver, directory and expense service (business logic)
    4. Handler (HTTP endpoints) - stored in app.state.wave_handler

    Cleanup:
        Closes the HTTP client and removes everything from app.state
    """
    settings = get_settings()

    cache = ExpiringCache(max_entries=settings.cache_max_entries)
    client = WaveClient.create(access_token=settings.wave_access_token, endpoint=settings.wave_graphql_url)
    resolver = BusinessResolver(accounting=client, cache=cache, ttl=settings.businesses_ttl)
    directory = LedgerDirectory(
        accounting=client,
        cache=cache,
        accounts_ttl=settings.accounts_ttl,
        customers_ttl=settings.customers_ttl,
        products_ttl=settings.products_ttl,
    )
    expenses = ExpenseService(accounting=client, resolver=resolver, directory=directory)

    app.state.cache = cache
    app.state.wave_client = client
    app.state.wave_handler = WaveHandler(
        accounting=client,
        resolver=resolver,
        directory=directory,
        expenses=expenses,
    )

    logger.info(
        "wave_adapter_started",
        cache_max_entries=settings.cache_max_entries,
        has_wave_token=settings.has_wave_token,
    )

    yield

    await client.close()
    del app.state.wave_handler
    del app.state.wave_client
    del app.state.cache
    logger.info("wave_adapter_stopped")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[WaveHandler, Depends(get_handler)]
RequestIdDep = Annotated[str | None, Depends(get_request_id)]
