from datetime import date, datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.exceptions.custom import (
    AgodaDataMissingError,
    AgodaError,
    InvalidDateFormatError,
    InvalidSearchParameterError,
)
from app.schemas.search import SearchContext, SearchQuery
from app.services.hotel_search import HotelSearchService

NOW = datetime(2025, 11, 1, 9, 0, 0, tzinfo=timezone.utc)
TODAY = date(2025, 11, 1)


def _service(return_value=None, side_effect=None, context=None):
    fetcher = AsyncMock()
    fetcher.fetch = AsyncMock(return_value=return_value, side_effect=side_effect)
    if context is None:
        return HotelSearchService(fetcher), fetcher
    return HotelSearchService(fetcher, context), fetcher


@pytest.mark.asyncio
async def test_search_success(make_property, make_response):
    service, fetcher = _service(
        make_response([make_property(property_id=1), make_property(property_id=2)])
    )

    result = await service.search(SearchQuery(city="4923", adults="3"), now=NOW, today=TODAY)

    assert result.success is True
    assert result.count == 2
    assert [h.PropertyId for h in result.hotels] == ["1", "2"]
    assert result.hotels[0].SearchDate == TODAY
    assert result.searchParams.model_dump() == {
        "city": "4923",
        "checkin": "2025-11-19",
        "checkout": "2025-11-20",
        "adults": "3",
        "rooms": "1",
    }

    payload, params = fetcher.fetch.call_args.args
    assert payload["operationName"] == "citySearch"
    assert payload["variables"]["CitySearchRequest"]["cityId"] == 4923
    assert payload["variables"]["CitySearchRequest"]["searchRequest"]["searchCriteria"]["bookingDate"] == (
        "2025-11-01T09:00:00.000Z"
    )
    assert params.adults == 3


@pytest.mark.asyncio
async def test_search_defaults(make_response):
    service, fetcher = _service(make_response([]))

    result = await service.search(SearchQuery())

    assert result.count == 0
    assert result.hotels == []
    payload = fetcher.fetch.call_args.args[0]
    criteria = payload["variables"]["CitySearchRequest"]["searchRequest"]["searchCriteria"]
    assert payload["variables"]["CitySearchRequest"]["cityId"] == 9395
    assert criteria["adults"] == 2
    assert criteria["rooms"] == 1


@pytest.mark.asyncio
async def test_invalid_date_skips_upstream():
    service, fetcher = _service({})

    with pytest.raises(InvalidDateFormatError):
        await service.search(SearchQuery(checkin="2025-13-40"))

    fetcher.fetch.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_adults_skips_upstream():
    service, fetcher = _service({})

    with pytest.raises(InvalidSearchParameterError):
        await service.search(SearchQuery(adults="two"))

    fetcher.fetch.assert_not_called()


@pytest.mark.asyncio
async def test_missing_properties():
    service, _ = _service({"data": {"citySearch": {}}})

    with pytest.raises(AgodaDataMissingError) as exc_info:
        await service.search(SearchQuery())

    assert exc_info.value.message == "No hotel data received from Agoda"


@pytest.mark.asyncio
async def test_malformed_response():
    service, _ = _service({"data": {"citySearch": {"properties": "not-a-list"}}})

    with pytest.raises(AgodaError, match="Unexpected Agoda response"):
        await service.search(SearchQuery())


@pytest.mark.asyncio
async def test_upstream_error_propagates():
    service, _ = _service(side_effect=AgodaError("Agoda API responded with status: 500", 500))

    with pytest.raises(AgodaError) as exc_info:
        await service.search(SearchQuery())

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_injected_context(make_response):
    service, fetcher = _service(make_response([]), context=SearchContext(currency="USD"))

    await service.search(SearchQuery())

    payload = fetcher.fetch.call_args.args[0]
    assert payload["variables"]["PricingSummaryRequest"]["pricing"]["currency"] == "USD"


@pytest.mark.asyncio
async def test_malformed_item_does_not_fail_search(make_property, make_response):
    broken = make_property(property_id=2, review_count=12.5)
    service, _ = _service(make_response([make_property(property_id=1), broken, {"content": []}]))

    result = await service.search(SearchQuery(), today=TODAY)

    assert result.count == 3
    assert [h.PropertyId for h in result.hotels] == ["1", "2", ""]
    assert result.hotels[1].ReviewCount is None
