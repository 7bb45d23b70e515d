"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .account import ANCHOR_TYPES, AccountSummary, AccountType
from .business import BusinessSummary
from .contact import CustomerSummary, ProductSummary
from .selection import SelectionRequired
from .suggestion import MatchReason, NameMatch, NoMatch, Suggestion, SubtypeMatch, TokenOverlap
from .transaction import ExpenseRequest, ExpenseTransaction

__all__ = [
    "ANCHOR_TYPES",
    "AccountSummary",
    "AccountType",
    "BusinessSummary",
    "CustomerSummary",
    "ProductSummary",
    "SelectionRequired",
    "MatchReason",
    "NameMatch",
    "SubtypeMatch",
    "TokenOverlap",
    "NoMatch",
    "Suggestion",
    "ExpenseRequest",
    "ExpenseTransaction",
]
