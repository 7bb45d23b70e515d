"""Request DTOs for API endpoints.

JSON keys are camelCase (``businessId``); Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BusinessRefRequest(CamelModel):
    """Loose business reference shared by every business-scoped request."""

    business_id: str | None = Field(None, description="Exact business id (wins over name)")
    business_name: str | None = Field(None, description="Business name, case-insensitive exact match")


class SuggestExpenseAccountsRequest(BusinessRefRequest):
    """Request DTO for ranking expense accounts."""

    text: str | None = Field(None, description="Free-text description of the expense")
    amount: float = Field(..., gt=0, description="Expense amount")
    vendor: str | None = Field(None, description="Vendor name")
    category_hint: str | None = Field(None, description="Caller's guess at the expense category")
    top_k: int | None = Field(None, ge=1, le=10, description="Number of suggestions to return")


class CreateExpenseRequest(BusinessRefRequest):
    """Request DTO for creating an expense transaction."""

    date: str = Field(..., min_length=1, description="Transaction date (YYYY-MM-DD)")
    amount: float = Field(..., gt=0, description="Expense amount")
    description: str = Field(..., description="Transaction description")
    vendor: str | None = None
    notes: str | None = None
    anchor_account_id: str | None = Field(None, description="Explicit asset/liability account id")
    expense_account_id: str | None = Field(None, description="Explicit expense account id")
    external_id: str | None = Field(None, description="Idempotency token; generated when absent")
    category_hint: str | None = None
    text: str | None = Field(None, description="Ranking text; defaults to the description")


class FindOrCreateCustomerRequest(BusinessRefRequest):
    """Request DTO for customer find-or-create."""

    name: str = Field(..., min_length=1)
    email: str | None = Field(None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str | None = None
    currency: str | None = None


class FindOrCreateProductRequest(BusinessRefRequest):
    """Request DTO for product find-or-create."""

    name: str = Field(..., min_length=1)
    unit_price: float | None = None
    description: str | None = None
    income_account_id: str | None = None
