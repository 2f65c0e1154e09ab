from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from urllib.parse import urlsplit

import requests
from pydantic import ValidationError

from .config import DEFAULT_BASE_URL, Settings
from .errors import (
    ConfigurationError,
    DataParseFailedError,
    FailedResponseToStringError,
    RequestFailedError,
    UrlParsingError,
    error_code_from_body,
    map_response_error,
)
from .models import Response


logger = logging.getLogger(__name__)


def build_url(api_key: str, location: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Return the current weather URL with `key`, `q` and `aqi=no` encoded."""
    try:
        parts = urlsplit(base_url)
    except ValueError as exc:
        raise UrlParsingError() from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlParsingError()

    params = {"key": api_key, "q": location, "aqi": "no"}
    try:
        prepared = requests.Request("GET", base_url, params=params).prepare()
    except ValueError as exc:  # MissingSchema, InvalidURL
        raise UrlParsingError() from exc
    return prepared.url


@dataclass(frozen=True)
class WeatherClient:
    """weatherapi.com current weather client for a single location."""

    api_key: str = field(repr=False)
    location: str
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_settings(cls, settings: Settings) -> "WeatherClient":
        if not settings.api_key:
            raise ConfigurationError("API_KEY is not set.")
        if not settings.location:
            raise ConfigurationError("LOCATION is not set.")
        return cls(api_key=settings.api_key, location=settings.location, base_url=settings.base_url)

    def prepare_url(self) -> str:
        return build_url(self.api_key, self.location, self.base_url)

    def fetch(self) -> Response:
        """Fetch the current weather.

        Raises:
            UrlParsingError: the base URL is malformed
            RequestFailedError: no response was received
            FailedResponseToStringError: the body could not be read
            DataParseFailedError: the body is not JSON or not the expected shape
            BadRequestError: the API answered with anything other than 200
        """
        url = self.prepare_url()
        logger.debug("Requesting current weather for %r from %s", self.location, self.base_url)

        try:
            response = requests.get(url, stream=True)
        except requests.RequestException as exc:
            raise RequestFailedError(str(exc)) from exc

        with response:
            try:
                body = response.content
            except requests.RequestException as exc:
                raise FailedResponseToStringError() from exc

        logger.debug("weatherapi answered HTTP %s (%d bytes)", response.status_code, len(body))

        if response.status_code == 200:
            try:
                return Response.model_validate_json(body)
            except ValidationError as exc:
                raise DataParseFailedError() from exc

        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise DataParseFailedError() from exc

        error = map_response_error(error_code_from_body(payload))
        logger.warning("weatherapi rejected request (HTTP %s): %s", response.status_code, error.reason)
        raise error
