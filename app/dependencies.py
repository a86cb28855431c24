from typing import Annotated

from fastapi import Depends, Request

from app.services.hotel_search import HotelSearchService


def get_hotel_search_service(request: Request) -> HotelSearchService:
    return request.app.state.hotel_search_service


HotelSearchDep = Annotated[HotelSearchService, Depends(get_hotel_search_service)]
