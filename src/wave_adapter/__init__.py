"""Wave Adapter - resolution and suggestion engine for Wave accounting.

This package lets an internal caller create and look up accounting records
in Wave without knowing its GraphQL schema. Ambiguous input (a business
name, a free-text expense description) is resolved to concrete ids, or the
caller is asked to choose.

Layers:
    - protocols: Interface contracts (AccountingService, ResponseCache)
    - repositories: Wave GraphQL client
    - services: Business resolution, account ranking, expense orchestration
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from wave_adapter.cache import ExpiringCache
    from wave_adapter.repositories import WaveClient
    from wave_adapter.services import BusinessResolver

    resolver = BusinessResolver(accounting=WaveClient.create(), cache=ExpiringCache())
    business = await resolver.resolve(business_name="Acme")
    ```

For HTTP API:
    ```python
    from wave_adapter.api.app import app
    ```
"""

__version__ = "0.1.0"

from wave_adapter.cache import ExpiringCache
from wave_adapter.config import get_settings, settings
from wave_adapter.entities import (
    AccountSummary,
    BusinessSummary,
    ExpenseRequest,
    ExpenseTransaction,
    SelectionRequired,
    Suggestion,
)
from wave_adapter.errors import (
    AdapterError,
    ConfigError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
    UpstreamInputRejected,
)
from wave_adapter.handlers import WaveHandler
from wave_adapter.protocols import AccountingService, ResponseCache
from wave_adapter.repositories import WaveClient
from wave_adapter.services import (
    BusinessResolver,
    ExpenseService,
    LedgerDirectory,
    rank_expense_accounts,
    suggest_anchor,
)

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "AccountingService",
    "ResponseCache",
    # Cache
    "ExpiringCache",
    # Services (business logic)
    "BusinessResolver",
    "ExpenseService",
    "LedgerDirectory",
    "rank_expense_accounts",
    "suggest_anchor",
    # Handlers (HTTP)
    "WaveHandler",
    # Repositories (data access)
    "WaveClient",
    # Entities (domain models)
    "AccountSummary",
    "BusinessSummary",
    "ExpenseRequest",
    "ExpenseTransaction",
    "SelectionRequired",
    "Suggestion",
    # Errors
    "AdapterError",
    "ConfigError",
    "NotFoundError",
    "UnauthorizedError",
    "UpstreamError",
    "UpstreamInputRejected",
]
