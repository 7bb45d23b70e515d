"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the Accounting Service client (Wave, in-memory fake)
- Unit testing services without network access
- Clear separation of concerns
"""

from .accounting_service import AccountingService
from .response_cache import ResponseCache

__all__ = [
    "AccountingService",
    "ResponseCache",
]
