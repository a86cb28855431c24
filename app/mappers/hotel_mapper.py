from datetime import date, datetime, timezone

from app.schemas.agoda import (
    AgodaProperty,
    CitySearchResponse,
    InformationSummary,
    PropertyPricing,
    RoomPricing,
)
from app.schemas.responses import HotelRecord
from app.schemas.search import SearchParameters

UNKNOWN_HOTEL = "Unknown Hotel"
DEFAULT_CURRENCY = "INR"


def _first_room_pricing(pricing: PropertyPricing) -> RoomPricing:
    # Only the first offer is used; no min/aggregation across offers.
    offers = pricing.offers.roomOffers if pricing.offers else None
    if not offers or offers[0] is None or offers[0].room is None:
        return RoomPricing()
    return offers[0].room.pricing or RoomPricing()


def _per_night_exclusive(room_pricing: RoomPricing) -> str | None:
    price = room_pricing.price
    per_night = price.perNight if price else None
    exclusive = per_night.exclusive if per_night else None
    return (exclusive.display if exclusive else None) or None


def map_property(
    item: AgodaProperty | None,
    params: SearchParameters,
    today: date,
) -> HotelRecord:
    """Flatten one Agoda property into a HotelRecord, defaulting anything absent."""
    item = item or AgodaProperty()
    content = item.content
    info = (content.informationSummary if content else None) or InformationSummary()
    reviews = content.reviews if content else None
    cumulative = reviews.cumulative if reviews else None
    address = info.address
    city = address.city if address else None
    area = address.area if address else None
    pricing = item.pricing or PropertyPricing()
    room_pricing = _first_room_pricing(pricing)

    return HotelRecord(
        PropertyId=str(item.propertyId) if item.propertyId is not None else "",
        HotelName=info.displayName or UNKNOWN_HOTEL,
        StarRating=info.rating,
        AccommodationType=info.accommodationType or None,
        CityName=(city.name if city else None) or "",
        AreaName=(area.name if area else None) or "",
        ReviewCount=cumulative.reviewCount if cumulative else None,
        ReviewScore=cumulative.score if cumulative else None,
        IsAvailable=bool(pricing.isAvailable),
        PricePerNight=_per_night_exclusive(room_pricing),
        Currency=room_pricing.currency or DEFAULT_CURRENCY,
        SearchDate=today,
        CheckInDate=params.checkin,
        CheckOutDate=params.checkout,
    )


def shape_properties(
    response: dict,
    params: SearchParameters,
    today: date | None = None,
) -> list[HotelRecord] | None:
    """Map every property in a citySearch response, in order.

    Returns None when the response carries no properties list at
    ``data.citySearch.properties``; an empty list is a valid result.
    """
    parsed = CitySearchResponse.model_validate(response)
    city_search = parsed.data.citySearch if parsed.data else None
    if city_search is None or city_search.properties is None:
        return None

    today = today or datetime.now(timezone.utc).date()
    return [
        map_property(AgodaProperty.from_item(item), params, today)
        for item in city_search.properties
    ]
