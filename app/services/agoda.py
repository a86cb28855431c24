import logging
from typing import Any

import httpx

from app.exceptions.custom import AgodaError
from app.schemas.search import SearchParameters

logger = logging.getLogger(__name__)

GRAPHQL_URL = "https://www.agoda.com/graphql/search"
SITE_URL = "https://www.agoda.com"

_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/140.0.0.0 Safari/537.36"
)

_BASE_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate, br, zstd",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
    "Origin": SITE_URL,
    "Pragma": "no-cache",
    "Sec-Ch-Ua": '"Chromium";v="140", "Not=A?Brand";v="24", "Google Chrome";v="140"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
    "User-Agent": _USER_AGENT,
    "Ag-Language-Locale": "en-us",
    "Ag-Debug-Override-Origin": "IN",
}


def build_referer(params: SearchParameters) -> str:
    return (
        f"{SITE_URL}/search?city={params.city}"
        f"&checkIn={params.checkin.isoformat()}"
        f"&checkOut={params.checkout.isoformat()}"
        f"&adults={params.adults}"
    )


def build_headers(params: SearchParameters) -> dict[str, str]:
    return {**_BASE_HEADERS, "Referer": build_referer(params)}


class AgodaClient:
    def __init__(self, client: httpx.AsyncClient, url: str = GRAPHQL_URL):
        self._client = client
        self._url = url

    async def fetch(self, payload: dict[str, Any], params: SearchParameters) -> dict[str, Any]:
        """POST a GraphQL payload to Agoda and return the decoded JSON body."""
        try:
            resp = await self._client.post(
                self._url,
                json=payload,
                headers=build_headers(params),
            )
        except httpx.HTTPError as exc:
            raise AgodaError(f"Request to Agoda failed: {exc}") from exc

        if not resp.is_success:
            raise AgodaError(
                f"Agoda API responded with status: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise AgodaError("Agoda returned a non-JSON response") from exc
