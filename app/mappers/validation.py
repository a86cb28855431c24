import re
from datetime import date

from app.exceptions.custom import (
    InvalidDateFormatError,
    InvalidDateRangeError,
    InvalidSearchParameterError,
)
from app.schemas.search import SearchParameters, SearchQuery

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
# GraphQL Int is 32-bit signed.
_INT_RE = re.compile(r"\d{1,9}")


def is_valid_date(value: str) -> bool:
    """Check for a YYYY-MM-DD string naming a real calendar date."""
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _positive_int(field: str, value: str) -> int:
    value = value.strip()
    number = int(value) if _INT_RE.fullmatch(value) else 0
    if number < 1:
        raise InvalidSearchParameterError(
            f"Invalid {field}: must be a positive integer"
        )
    return number


def parse_search_parameters(query: SearchQuery) -> SearchParameters:
    if not is_valid_date(query.checkin) or not is_valid_date(query.checkout):
        raise InvalidDateFormatError()

    params = SearchParameters(
        city=_positive_int("city", query.city),
        checkin=date.fromisoformat(query.checkin),
        checkout=date.fromisoformat(query.checkout),
        adults=_positive_int("adults", query.adults),
        rooms=_positive_int("rooms", query.rooms),
    )
    if params.checkout <= params.checkin:
        raise InvalidDateRangeError()
    return params
