import logging
from datetime import date, datetime
from typing import Any, Protocol

from pydantic import ValidationError

from app.exceptions.custom import AgodaDataMissingError, AgodaError
from app.mappers.hotel_mapper import shape_properties
from app.mappers.query_builder import build_city_search_payload
from app.mappers.validation import parse_search_parameters
from app.schemas.responses import HotelSearchResponse, SearchParamsEcho
from app.schemas.search import DEFAULT_CONTEXT, SearchContext, SearchParameters, SearchQuery

logger = logging.getLogger(__name__)


class UpstreamFetcher(Protocol):
    async def fetch(self, payload: dict[str, Any], params: SearchParameters) -> dict[str, Any]:
        ...


class HotelSearchService:
    def __init__(self, fetcher: UpstreamFetcher, context: SearchContext = DEFAULT_CONTEXT):
        self._fetcher = fetcher
        self._context = context

    async def search(
        self,
        query: SearchQuery,
        now: datetime | None = None,
        today: date | None = None,
    ) -> HotelSearchResponse:
        """Validate, query Agoda, and flatten the result.

        Raises InvalidSearchParameterError before any upstream call,
        AgodaError on transport/status/decoding failures and
        AgodaDataMissingError when no properties list comes back.
        """
        params = parse_search_parameters(query)
        payload = build_city_search_payload(params, self._context, now)

        logger.info(
            "Searching city %s from %s to %s (%d adults, %d rooms)",
            params.city, params.checkin, params.checkout, params.adults, params.rooms,
        )
        data = await self._fetcher.fetch(payload, params)

        try:
            hotels = shape_properties(data, params, today)
        except ValidationError as exc:
            raise AgodaError(f"Unexpected Agoda response: {exc.error_count()} invalid fields") from exc

        if hotels is None:
            raise AgodaDataMissingError()

        logger.info("Found %d hotels for city %s", len(hotels), params.city)
        return HotelSearchResponse(
            count=len(hotels),
            searchParams=SearchParamsEcho(**query.model_dump()),
            hotels=hotels,
        )
