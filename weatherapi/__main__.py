from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .config import settings
from .errors import WeatherAPIError
from .models import Response
from .weather import WeatherClient


def format_response(data: Response) -> str:
    loc = data.location
    cur = data.current
    return "\n".join(
        [
            f"{loc.name}, {loc.region}, {loc.country} ({loc.lat}, {loc.lon})",
            f"Condition: {cur.condition.text}",
            f"Temperature: {cur.temp_c}°C / {cur.temp_f}°F "
            f"(feels like {cur.feelslike_c}°C / {cur.feelslike_f}°F)",
            f"Wind: {cur.wind_kph} kph / {cur.wind_mph} mph from {cur.wind_dir} ({cur.wind_degree}°)",
            f"Pressure: {cur.pressure_mb} mb / {cur.pressure_in} in",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="weatherapi", description="Show current weather from weatherapi.com")
    ap.add_argument("--location", "-q", help="location query (defaults to $LOCATION)")
    ap.add_argument("--api-key", help="weatherapi.com key (defaults to $API_KEY)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    overrides = {}
    if args.location:
        overrides["location"] = args.location
    if args.api_key:
        overrides["api_key"] = args.api_key

    try:
        client = WeatherClient.from_settings(replace(settings, **overrides))
        data = client.fetch()
    except WeatherAPIError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_response(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())
