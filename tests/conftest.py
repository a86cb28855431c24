import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("AGODA_TIMEOUT", "5")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def unraised_client(mock_env):
    """Client that receives the 500 body instead of the re-raised app error."""
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            yield c


def build_property(
    property_id=101,
    name="Taj Palace",
    rating=5.0,
    accommodation_type="Hotel",
    city="New Delhi",
    area="Chanakyapuri",
    review_count=2314,
    score=8.9,
    available=True,
    price="9,450",
    currency="INR",
):
    """Build one Agoda citySearch property item."""
    return {
        "propertyId": property_id,
        "content": {
            "informationSummary": {
                "displayName": name,
                "rating": rating,
                "accommodationType": accommodation_type,
                "address": {"city": {"name": city}, "area": {"name": area}},
            },
            "reviews": {"cumulative": {"reviewCount": review_count, "score": score}},
        },
        "pricing": {
            "isAvailable": available,
            "offers": {
                "roomOffers": [
                    {
                        "room": {
                            "pricing": {
                                "currency": currency,
                                "price": {
                                    "perNight": {
                                        "exclusive": {"display": price},
                                        "inclusive": {"display": "11,151"},
                                    },
                                },
                            }
                        }
                    }
                ]
            },
        },
    }


def build_response(properties):
    return {"data": {"citySearch": {"properties": properties}}}


@pytest.fixture
def make_property():
    return build_property


@pytest.fixture
def make_response():
    return build_response
