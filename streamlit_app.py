from __future__ import annotations

import streamlit as st

# Note: assuming the repository root is on the Python path
from weatherapi.config import settings
from weatherapi.errors import WeatherAPIError
from weatherapi.weather import WeatherClient


def main() -> None:
    st.set_page_config(page_title="Current Weather", page_icon="☁️")
    st.title("Current Weather")

    st.sidebar.header("Configuration")
    api_key = st.sidebar.text_input("weatherapi.com API key", value=settings.api_key or "", type="password")
    location = st.text_input("Location (city, postcode or 'lat,lon'):", value=settings.location or "")

    if st.button("Get weather") and location:
        if not api_key:
            st.error("API_KEY is not set. Enter a key in the sidebar.")
            return

        client = WeatherClient(api_key=api_key, location=location, base_url=settings.base_url)
        try:
            with st.spinner("Fetching current weather..."):
                data = client.fetch()
        except WeatherAPIError as e:
            st.error(str(e))
            return

        loc = data.location
        cur = data.current
        st.subheader(f"{loc.name}, {loc.region}, {loc.country}")
        st.caption(f"{loc.lat}, {loc.lon}")

        col_icon, col_text = st.columns([1, 4])
        col_icon.image(cur.condition.icon_url)
        col_text.write(cur.condition.text)

        temp, feels, wind, pressure = st.columns(4)
        temp.metric("Temperature", f"{cur.temp_c} °C", help=f"{cur.temp_f} °F")
        feels.metric("Feels like", f"{cur.feelslike_c} °C", help=f"{cur.feelslike_f} °F")
        wind.metric("Wind", f"{cur.wind_kph} kph {cur.wind_dir}", help=f"{cur.wind_mph} mph, {cur.wind_degree}°")
        pressure.metric("Pressure", f"{cur.pressure_mb} mb", help=f"{cur.pressure_in} in")


if __name__ == "__main__":
    main()
