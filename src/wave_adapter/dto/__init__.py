"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    BusinessRefRequest,
    CreateExpenseRequest,
    FindOrCreateCustomerRequest,
    FindOrCreateProductRequest,
    SuggestExpenseAccountsRequest,
)
from .responses import (
    AccountItem,
    AccountsResponse,
    BusinessesResponse,
    BusinessItem,
    CreateExpenseResponse,
    CustomerItem,
    CustomerResponse,
    EnvCheckResponse,
    ErrorResponse,
    HealthCheckResponse,
    ProductItem,
    ProductResponse,
    SchemaResponse,
    SuggestionItem,
    SuggestionsResponse,
    UsedIds,
)

__all__ = [
    "BusinessRefRequest",
    "SuggestExpenseAccountsRequest",
    "CreateExpenseRequest",
    "FindOrCreateCustomerRequest",
    "FindOrCreateProductRequest",
    "AccountItem",
    "AccountsResponse",
    "BusinessItem",
    "BusinessesResponse",
    "CreateExpenseResponse",
    "CustomerItem",
    "CustomerResponse",
    "EnvCheckResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "ProductItem",
    "ProductResponse",
    "SchemaResponse",
    "SuggestionItem",
    "SuggestionsResponse",
    "UsedIds",
]
