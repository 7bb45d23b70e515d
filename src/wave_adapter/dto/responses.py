"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import Field

from .requests import CamelModel


class BusinessItem(CamelModel):
    id: str
    name: str
    is_active: bool


class AccountItem(CamelModel):
    id: str
    name: str
    type: str
    subtype: str | None = None


class SuggestionItem(CamelModel):
    """Single ranked account suggestion."""

    account_id: str
    name: str
    type: str
    score: int = Field(..., ge=0, description="Confidence score, higher is better")
    reason: str | None = Field(None, description="Why the account scored what it did")


class CustomerItem(CamelModel):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None


class ProductItem(CamelModel):
    id: str
    name: str
    unit_price: float | None = None


class BusinessesResponse(CamelModel):
    ok: bool = True
    businesses: list[BusinessItem]


class AccountsResponse(CamelModel):
    ok: bool = True
    business: BusinessItem
    accounts: list[AccountItem]


class SuggestionsResponse(CamelModel):
    ok: bool = True
    business: BusinessItem
    suggestions: list[SuggestionItem]


class UsedIds(CamelModel):
    business_id: str
    anchor_account_id: str
    expense_account_id: str


class CreateExpenseResponse(CamelModel):
    """Response DTO for a created expense."""

    ok: bool = True
    transaction_id: str
    external_id: str
    used: UsedIds
    wave: dict[str, Any] = Field(default_factory=lambda: {"didSucceed": True})


class CustomerResponse(CamelModel):
    ok: bool = True
    created: bool
    customer_id: str
    customer: CustomerItem


class ProductResponse(CamelModel):
    ok: bool = True
    created: bool
    product_id: str
    product: ProductItem


class SchemaResponse(CamelModel):
    ok: bool = True
    schema_: dict[str, Any] = Field(..., alias="schema")


class ErrorResponse(CamelModel):
    """Body of every failure and of SelectionRequired (HTTP 300)."""

    ok: bool = False
    message: str
    details: dict[str, Any] | None = None
    code: str | None = None


class HealthCheckResponse(CamelModel):
    ok: bool = True
    service: str
    version: str


class EnvCheckResponse(CamelModel):
    has_wave_token: bool
    has_internal_secret: bool
