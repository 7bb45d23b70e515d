"""
Tests for business resolution.
"""

import pytest

from wave_adapter.entities import BusinessSummary, SelectionRequired
from wave_adapter.errors import NotFoundError
from wave_adapter.services import BusinessResolver

from .conftest import FakeAccountingService

ACME_US = BusinessSummary(id="b-us", name="Acme", is_active=True)
ACME_CA = BusinessSummary(id="b-ca", name="ACME", is_active=True)
GLOBEX = BusinessSummary(id="b-gx", name="Globex", is_active=True)
DORMANT = BusinessSummary(id="b-old", name="Dormant Ltd", is_active=False)


def make_resolver(businesses, cache):
    accounting = FakeAccountingService(businesses=businesses)
    return BusinessResolver(accounting=accounting, cache=cache, ttl=900), accounting


@pytest.mark.asyncio
class TestBusinessResolver:
    """Tests for BusinessResolver"""

    async def test_explicit_id_wins(self, cache):
        resolver, _ = make_resolver([ACME_US, GLOBEX], cache)

        result = await resolver.resolve(business_id="b-gx", business_name="Acme")

        assert result == GLOBEX

    async def test_unknown_id_is_not_found_even_with_name(self, cache):
        resolver, _ = make_resolver([ACME_US, GLOBEX], cache)

        with pytest.raises(NotFoundError):
            await resolver.resolve(business_id="b1", business_name="Acme")

    async def test_single_name_match_is_case_insensitive(self, cache):
        resolver, _ = make_resolver([ACME_US, GLOBEX], cache)

        assert await resolver.resolve(business_name="globex") == GLOBEX

    async def test_name_is_exact_not_substring(self, cache):
        resolver, _ = make_resolver([GLOBEX, DORMANT], cache)

        # "Glob" matches nothing, falls through to the single active business
        assert await resolver.resolve(business_name="Glob") == GLOBEX

    async def test_duplicate_names_require_selection(self, cache):
        resolver, _ = make_resolver([ACME_US, GLOBEX, ACME_CA], cache)

        result = await resolver.resolve(business_name="Acme")

        assert isinstance(result, SelectionRequired)
        assert result.message == "Multiple businesses match name"
        assert result.options == (ACME_US, ACME_CA)

    async def test_single_active_business_is_default(self, cache):
        resolver, _ = make_resolver([DORMANT, GLOBEX], cache)

        assert await resolver.resolve() == GLOBEX

    async def test_multiple_active_businesses_require_selection(self, cache):
        resolver, _ = make_resolver([ACME_US, DORMANT, GLOBEX], cache)

        result = await resolver.resolve()

        assert isinstance(result, SelectionRequired)
        assert result.message == "Multiple businesses available, please choose"
        assert result.options == (ACME_US, GLOBEX)

    async def test_no_active_business_requires_selection(self, cache):
        resolver, _ = make_resolver([DORMANT], cache)

        result = await resolver.resolve()

        assert isinstance(result, SelectionRequired)
        assert result.options == ()

    async def test_business_list_is_cached(self, cache, clock):
        resolver, accounting = make_resolver([GLOBEX], cache)

        await resolver.resolve()
        await resolver.resolve(business_name="Globex")
        assert accounting.count("list_businesses") == 1

        clock.advance(900)
        await resolver.resolve()
        assert accounting.count("list_businesses") == 2

    async def test_list_businesses_passes_request_id(self, cache):
        resolver, accounting = make_resolver([GLOBEX], cache)

        businesses = await resolver.list_businesses(request_id="req-1")

        assert businesses == [GLOBEX]
        assert accounting.calls == [("list_businesses", "req-1")]
