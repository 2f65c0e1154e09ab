"""Client for the weatherapi.com current weather endpoint."""

from .errors import (
    BadRequestError,
    ConfigurationError,
    DataParseFailedError,
    FailedResponseToStringError,
    RequestFailedError,
    UrlParsingError,
    WeatherAPIError,
)
from .models import Condition, Current, Location, Response
from .weather import WeatherClient, build_url

__all__ = [
    "BadRequestError",
    "Condition",
    "ConfigurationError",
    "Current",
    "DataParseFailedError",
    "FailedResponseToStringError",
    "Location",
    "RequestFailedError",
    "Response",
    "UrlParsingError",
    "WeatherAPIError",
    "WeatherClient",
    "build_url",
]
