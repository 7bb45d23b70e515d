"""Repository layer for data access.

This layer hides the Accounting Service wire protocol behind the
AccountingService protocol. Any class implementing the required methods
satisfies the protocol; no inheritance is needed.
"""

from wave_adapter.protocols import AccountingService

from .wave_client import WaveClient

__all__ = [
    "AccountingService",
    "WaveClient",
]
