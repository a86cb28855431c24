from datetime import date, datetime, timezone
from typing import Any

from app.schemas.search import DEFAULT_CONTEXT, SearchContext, SearchParameters

OPERATION_NAME = "citySearch"

CITY_SEARCH_QUERY = """
query citySearch($CitySearchRequest: CitySearchRequest!, $ContentSummaryRequest: ContentSummaryRequest!, $PricingSummaryRequest: PricingRequestParameters, $PriceStreamMetaLabRequest: PriceStreamMetaLabRequest) {
  citySearch(CitySearchRequest: $CitySearchRequest) {
    properties(ContentSummaryRequest: $ContentSummaryRequest, PricingSummaryRequest: $PricingSummaryRequest, PriceStreamMetaLabRequest: $PriceStreamMetaLabRequest) {
      propertyId
      content {
        informationSummary {
          displayName
          rating
          accommodationType
          address {
            city { name }
            area { name }
          }
        }
        reviews {
          cumulative {
            reviewCount
            score
          }
        }
      }
      pricing {
        isAvailable
        offers {
          roomOffers {
            room {
              pricing {
                currency
                price {
                  perNight {
                    exclusive { display }
                    inclusive { display }
                  }
                  perRoomPerNight {
                    exclusive { display }
                    inclusive { display }
                  }
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


def format_booking_date(now: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision."""
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _utc_check_time(day: date, context: SearchContext) -> str:
    return f"{day.isoformat()}T{context.check_in_time_utc}Z"


def build_city_search_variables(
    params: SearchParameters,
    context: SearchContext = DEFAULT_CONTEXT,
    now: datetime | None = None,
) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    check_in = _utc_check_time(params.checkin, context)
    check_out = _utc_check_time(params.checkout, context)
    local_check_in = params.checkin.isoformat()
    local_check_out = params.checkout.isoformat()

    return {
        "CitySearchRequest": {
            "cityId": params.city,
            "searchRequest": {
                "searchCriteria": {
                    "isAllowBookOnRequest": True,
                    "bookingDate": format_booking_date(now),
                    "checkInDate": check_in,
                    "localCheckInDate": local_check_in,
                    "los": params.length_of_stay,
                    "rooms": params.rooms,
                    "adults": params.adults,
                    "children": 0,
                    "childAges": [],
                    "ratePlans": [],
                    "currency": context.currency,
                    "travellerType": context.traveller_type,
                    "isUserLoggedIn": False,
                    "isAPSPeek": False,
                    "enableOpaqueChannel": False,
                    "sorting": context.sorting.model_dump(),
                    "requiredBasis": context.required_basis,
                    "requiredPrice": context.required_price,
                },
                "searchContext": {
                    "locale": context.locale,
                    "origin": context.origin,
                    "platform": context.platform_id,
                    "deviceTypeId": context.device_type_id,
                    "storeFrontId": context.storefront_id,
                    "pageTypeId": context.page_type_id,
                },
            },
        },
        "ContentSummaryRequest": {
            "context": {
                "locale": context.locale,
                "userOrigin": context.origin,
                "platform": {"id": context.platform_id},
                "storeFrontId": context.storefront_id,
                "occupancy": {
                    "numberOfAdults": params.adults,
                    "numberOfChildren": 0,
                    "checkIn": check_in,
                },
            }
        },
        "PricingSummaryRequest": {
            "cheapestOnly": True,
            "context": {
                "clientInfo": {
                    "languageId": context.language_id,
                    "origin": context.origin,
                    "platform": context.platform_id,
                    "storefront": context.storefront_id,
                }
            },
            "pricing": {
                "checkIn": check_in,
                "checkout": check_out,
                "localCheckInDate": local_check_in,
                "localCheckoutDate": local_check_out,
                "currency": context.currency,
                "occupancy": {
                    "adults": params.adults,
                    "children": 0,
                    "childAges": [],
                    "rooms": params.rooms,
                },
            },
        },
        "PriceStreamMetaLabRequest": {
            "attributesId": list(context.price_attribute_ids),
        },
    }


def build_city_search_payload(
    params: SearchParameters,
    context: SearchContext = DEFAULT_CONTEXT,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the GraphQL request body for Agoda's citySearch operation."""
    return {
        "operationName": OPERATION_NAME,
        "variables": build_city_search_variables(params, context, now),
        "query": CITY_SEARCH_QUERY,
    }
