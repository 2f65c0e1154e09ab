from __future__ import annotations

from typing import Any, Optional


UNKNOWN_ERROR = "Unknown error"

# weatherapi.com error codes returned in the body of non-200 responses.
ERROR_CODE_MESSAGES: dict[str, str] = {
    "1002": "API key not provided",
    "1003": "Parameter 'q' not provided",
    "1005": "API request url is invalid",
    "1006": "No location found matching parameter 'q'",
    "2006": "API key provided is invalid",
    "2007": "API key has exceeded calls per month quota",
    "2008": "API key has been disabled",
    "2009": (
        "API key does not have access to the resource. Please check pricing page "
        "for what is allowed in your API subscription plan"
    ),
    "9000": (
        "Json body passed in bulk request is invalid. Please make sure it is valid "
        "json with utf-8 encoding"
    ),
    "9001": (
        "Json body contains too many locations for bulk request. Please keep it "
        "below 50 in a single request"
    ),
    "9999": "Internal application error",
}


class WeatherAPIError(Exception):
    """Raised when the weather API call fails."""


class UrlParsingError(WeatherAPIError):
    """The endpoint string could not be parsed as a URL."""

    def __init__(self) -> None:
        super().__init__("Url parsing failed")


class BadRequestError(WeatherAPIError):
    """The API rejected the request."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Request failed: {reason}")


class RequestFailedError(WeatherAPIError):
    """The transport failed before a response was obtained."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Request failed before a response was received: {detail}")


class FailedResponseToStringError(WeatherAPIError):
    """The response body could not be read."""

    def __init__(self) -> None:
        super().__init__("Failed converting response to string")


class DataParseFailedError(WeatherAPIError):
    """The response body was not valid JSON or did not match the schema."""

    def __init__(self) -> None:
        super().__init__("Data parsing failed")


class ConfigurationError(WeatherAPIError):
    """Required settings (API key, location) are missing."""


def normalize_error_code(code: Any) -> Optional[str]:
    """Render an API error code as the string used for table lookup.

    The API documents integer codes but some proxies re-encode them as
    strings, so both ``1002`` and ``"1002"`` normalize to ``"1002"``.
    Anything that is not an integer, an integral float or a string is
    treated as absent.
    """
    # bool is an int subclass; JSON true/false is never a code
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return str(code)
    if isinstance(code, float):
        return str(int(code)) if code.is_integer() else None
    if isinstance(code, str):
        return code.strip() or None
    return None


def map_response_error(code: Any) -> BadRequestError:
    normalized = normalize_error_code(code)
    if normalized is None:
        return BadRequestError(UNKNOWN_ERROR)
    return BadRequestError(ERROR_CODE_MESSAGES.get(normalized, UNKNOWN_ERROR))


def error_code_from_body(body: Any) -> Any:
    """Pull ``error.code`` out of a decoded error body, or None."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    return error.get("code")
