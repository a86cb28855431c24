from typing import Annotated

from fastapi import APIRouter, Query, Response

from app.dependencies import HotelSearchDep
from app.schemas.responses import HotelSearchResponse
from app.schemas.search import SearchQuery

router = APIRouter()

HOTELS_PATH = "/api/hotels"


@router.get(HOTELS_PATH, response_model=HotelSearchResponse)
async def search_hotels(
    service: HotelSearchDep,
    query: Annotated[SearchQuery, Query()],
) -> HotelSearchResponse:
    return await service.search(query)


@router.options(HOTELS_PATH)
async def preflight() -> Response:
    return Response(status_code=200)
