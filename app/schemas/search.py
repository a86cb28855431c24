from datetime import date

from pydantic import BaseModel, Field


class SearchQuery(BaseModel):
    """Raw inbound parameters, as received on the query string."""

    city: str = "9395"
    checkin: str = "2025-11-19"
    checkout: str = "2025-11-20"
    adults: str = "2"
    rooms: str = "1"


class SearchParameters(BaseModel):
    city: int
    checkin: date
    checkout: date
    adults: int = Field(ge=1)
    rooms: int = Field(ge=1)

    @property
    def length_of_stay(self) -> int:
        return (self.checkout - self.checkin).days


class Sorting(BaseModel):
    sortField: str = "Ranking"
    sortOrder: str = "Desc"


class SearchContext(BaseModel):
    """Fixed market/platform constants embedded in every upstream query."""

    locale: str = "en-us"
    origin: str = "IN"
    currency: str = "INR"
    traveller_type: str = "Couple"
    sorting: Sorting = Sorting()
    required_basis: str = "PRPN"
    required_price: str = "Exclusive"
    platform_id: int = 1
    device_type_id: int = 1
    storefront_id: int = 3
    page_type_id: int = 103
    language_id: int = 1
    check_in_time_utc: str = "18:30:00.000"
    price_attribute_ids: list[int] = [8, 1, 18, 7, 11, 2, 3]


DEFAULT_CONTEXT = SearchContext()
