"""Pydantic models for the weatherapi.com current weather response."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    # strict: numeric strings and booleans are not floats; NaN/inf are rejected
    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)


class Condition(_Frozen):
    """Textual description of the weather and the icon that represents it."""

    text: str
    icon: str

    @property
    def icon_url(self) -> str:
        """Absolute icon URL; the API returns protocol-relative paths."""
        if self.icon.startswith("//"):
            return f"https:{self.icon}"
        return self.icon


class Location(_Frozen):
    """Location data under the `location` key."""

    name: str
    region: str
    country: str
    lat: float
    lon: float


class Current(_Frozen):
    """Current weather data under the `current` key."""

    temp_c: float
    temp_f: float
    feelslike_c: float
    feelslike_f: float
    wind_mph: float
    wind_kph: float
    wind_degree: float
    wind_dir: str
    condition: Condition
    pressure_mb: float
    pressure_in: float


class Response(_Frozen):
    """Location and current weather returned by the API."""

    location: Location
    current: Current
