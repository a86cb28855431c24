from typing import Annotated, Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError, WrapValidator

T = TypeVar("T")


def _none_on_error(value: Any, handler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


# Field that degrades to None when the upstream value has an unexpected shape.
Lenient = Annotated[Optional[T], WrapValidator(_none_on_error)]


class Named(BaseModel):
    name: Lenient[str] = None


class Address(BaseModel):
    city: Lenient[Named] = None
    area: Lenient[Named] = None


class InformationSummary(BaseModel):
    displayName: Lenient[str] = None
    rating: Lenient[float] = None
    accommodationType: Lenient[str] = None
    address: Lenient[Address] = None


class CumulativeReviews(BaseModel):
    reviewCount: Lenient[int] = None
    score: Lenient[float] = None


class Reviews(BaseModel):
    cumulative: Lenient[CumulativeReviews] = None


class PropertyContent(BaseModel):
    informationSummary: Lenient[InformationSummary] = None
    reviews: Lenient[Reviews] = None


class DisplayPrice(BaseModel):
    display: Lenient[str] = None


class PriceBasis(BaseModel):
    exclusive: Lenient[DisplayPrice] = None
    inclusive: Lenient[DisplayPrice] = None


class RoomPrice(BaseModel):
    perNight: Lenient[PriceBasis] = None
    perRoomPerNight: Lenient[PriceBasis] = None


class RoomPricing(BaseModel):
    currency: Lenient[str] = None
    price: Lenient[RoomPrice] = None


class Room(BaseModel):
    pricing: Lenient[RoomPricing] = None


class RoomOffer(BaseModel):
    room: Lenient[Room] = None


class Offers(BaseModel):
    roomOffers: Lenient[list[Lenient[RoomOffer]]] = None


class PropertyPricing(BaseModel):
    isAvailable: Lenient[bool] = None
    offers: Lenient[Offers] = None


class AgodaProperty(BaseModel):
    propertyId: Lenient[int | str] = None
    content: Lenient[PropertyContent] = None
    pricing: Lenient[PropertyPricing] = None

    @classmethod
    def from_item(cls, item: Any) -> "AgodaProperty":
        """Parse one raw property item; anything but an object maps to defaults."""
        if not isinstance(item, dict):
            return cls()
        return cls.model_validate(item)


class CitySearch(BaseModel):
    # Items are parsed one by one so a malformed item cannot sink the rest.
    properties: list[Any] | None = None


class CitySearchData(BaseModel):
    citySearch: CitySearch | None = None


class CitySearchResponse(BaseModel):
    data: CitySearchData | None = None
