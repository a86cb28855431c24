import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.exceptions.custom import (
    AgodaDataMissingError,
    AgodaError,
    InvalidSearchParameterError,
)
from app.exceptions.handlers import (
    agoda_data_missing_handler,
    agoda_error_handler,
    http_error_handler,
    invalid_search_parameter_handler,
    unexpected_error_handler,
)
from app.routers.hotels import router as hotels_router
from app.services.agoda import AgodaClient
from app.services.hotel_search import HotelSearchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.agoda_timeout) as client:
        agoda = AgodaClient(client)
        app.state.hotel_search_service = HotelSearchService(agoda)

        yield


app = FastAPI(title="Agoda Hotel Proxy", lifespan=lifespan)

app.add_exception_handler(InvalidSearchParameterError, invalid_search_parameter_handler)
app.add_exception_handler(AgodaError, agoda_error_handler)
app.add_exception_handler(AgodaDataMissingError, agoda_data_missing_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.include_router(hotels_router)
