from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class HotelRecord(BaseModel):
    PropertyId: str
    HotelName: str
    StarRating: float | None = None
    AccommodationType: str | None = None
    CityName: str
    AreaName: str
    ReviewCount: int | None = None
    ReviewScore: float | None = None
    IsAvailable: bool
    PricePerNight: str | None = None
    Currency: str
    SearchDate: date
    CheckInDate: date
    CheckOutDate: date


class SearchParamsEcho(BaseModel):
    city: str
    checkin: str
    checkout: str
    adults: str
    rooms: str


class HotelSearchResponse(BaseModel):
    success: bool = True
    count: int
    searchParams: SearchParamsEcho
    hotels: list[HotelRecord]


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
    suggestion: str | None = None
