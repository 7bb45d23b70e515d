"""Turns a loose business reference into exactly one business."""

import structlog

from wave_adapter.config import settings
from wave_adapter.entities import BusinessSummary, SelectionRequired
from wave_adapter.errors import NotFoundError
from wave_adapter.protocols import AccountingService, ResponseCache

logger = structlog.get_logger()

BUSINESSES_CACHE_KEY = "businesses"


class BusinessResolver:
    """Resolve an explicit id, an explicit name, or nothing to one business.

    Precedence: explicit id > single case-insensitive exact name match >
    the only active business. It never guesses between businesses of equal
    standing; those cases return ``SelectionRequired``.

    Example:
        ```python
        resolver = BusinessResolver(accounting=WaveClient.create(), cache=ExpiringCache())
        result = await resolver.resolve(business_name="Acme")
        if isinstance(result, SelectionRequired):
            ...  # ask the caller to pick one of result.options
        ```
    """

    def __init__(
        self,
        accounting: AccountingService,
        cache: ResponseCache,
        ttl: int | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            accounting: Accounting Service client (required).
            cache: Shared response cache (required).
            ttl: Lifetime of the cached business list in seconds. Defaults to settings.
        """
        self._accounting = accounting
        self._cache = cache
        self._ttl = settings.businesses_ttl if ttl is None else ttl

    async def list_businesses(self, request_id: str | None = None) -> list[BusinessSummary]:
        """Return the business list, fetching and caching it on a miss."""
        businesses = self._cache.get(BUSINESSES_CACHE_KEY)
        if businesses is None:
            logger.info("businesses_cache_miss", request_id=request_id)
            businesses = await self._accounting.list_businesses(request_id=request_id)
            self._cache.set(BUSINESSES_CACHE_KEY, businesses, self._ttl)
        return businesses

    async def resolve(
        self,
        business_id: str | None = None,
        business_name: str | None = None,
        request_id: str | None = None,
    ) -> BusinessSummary | SelectionRequired[BusinessSummary]:
        """Resolve a business reference.

        Args:
            business_id: Exact business id; wins over everything else
            business_name: Business name, matched case-insensitively and exactly
            request_id: Correlation id forwarded to the Accounting Service

        Returns:
            The single matching business, or SelectionRequired listing the
            candidates the caller has to choose from

        Raises:
            NotFoundError: If ``business_id`` matches no business
        """
        businesses = await self.list_businesses(request_id=request_id)

        if business_id:
            for business in businesses:
                if business.id == business_id:
                    return business
            logger.warning("business_not_found", business_id=business_id)
            raise NotFoundError("Business not found", {"businessId": business_id})

        if business_name:
            wanted = business_name.lower()
            matches = [b for b in businesses if b.name.lower() == wanted]
            if len(matches) == 1:
                return matches[0]
            if len(matches) > 1:
                logger.info("business_selection_required", reason="ambiguous_name", count=len(matches))
                return SelectionRequired("Multiple businesses match name", tuple(matches))

        active = [b for b in businesses if b.is_active]
        if len(active) == 1:
            return active[0]

        logger.info("business_selection_required", reason="no_default", count=len(active))
        return SelectionRequired("Multiple businesses available, please choose", tuple(active))
