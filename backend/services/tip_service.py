"""Service for requesting natural-language fishing tips from a text-generation API."""
import logging
from typing import Any, Dict, Optional, Set

import httpx

from forecast_core.models.forecast import DailyForecast

logger = logging.getLogger(__name__)

MALFORMED_RESPONSE_TIP = "Could not generate a tip. Please try again."
REQUEST_FAILED_TIP = "Failed to generate tip due to an error."


class TipRequestInFlight(Exception):
    """Raised when a tip for the same day is already being generated."""

    def __init__(self, date_key: str):
        super().__init__(f"A tip request for {date_key} is already in progress")
        self.date_key = date_key


def build_tip_prompt(day: DailyForecast, location_name: str) -> str:
    """Build the tip prompt from a day's conditions."""
    return (
        f"Given the weather conditions for {day.date_key}: {day.description}, "
        f"wind {day.wind_direction} at {day.wind_speed} km/h "
        f"(gusts up to {day.wind_gust} km/h), and temperature {day.temp}°C, "
        "provide a concise fishing tip (2-3 sentences) for beach fishing at "
        f"{location_name} using a drone or long line. Focus on strategies, gear, "
        "or general advice suitable for these conditions. If conditions are "
        'generally "Poor" for fishing, suggest an alternative activity or how to '
        "prepare for better conditions."
    )


def extract_tip_text(payload: Any) -> Optional[str]:
    """
    Pull the first candidate's text out of a generateContent response.

    Returns None when any level of candidates[0].content.parts[0].text
    is missing or empty.
    """
    if not isinstance(payload, dict):
        return None
    candidates = payload.get("candidates")
    if not candidates or not isinstance(candidates, list):
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not parts or not isinstance(parts, list) or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    return text


class TipService:
    """Single-flight tip generation with a fixed fallback on any failure.

    No timeout is applied unless configured, and failed requests are not
    retried.
    """

    def __init__(
        self,
        api_url: str,
        model: str,
        api_key: str = "",
        location_name: str = "",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.location_name = location_name
        self.timeout = timeout
        self.transport = transport
        self._in_flight: Set[str] = set()
        self._latest: Dict[str, str] = {}

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.model}:generateContent"

    def is_in_flight(self, date_key: str) -> bool:
        return date_key in self._in_flight

    def latest_tip(self, date_key: str) -> Optional[str]:
        return self._latest.get(date_key)

    def clear_tip(self, date_key: str) -> None:
        self._latest.pop(date_key, None)

    def clear_all(self) -> None:
        """Drop every stored tip, e.g. after the forecast is replaced."""
        self._latest.clear()

    async def generate_tip(self, day: DailyForecast) -> str:
        """
        Request a tip for a forecast day.

        Raises:
            TipRequestInFlight: if a request for the same day is pending
        """
        date_key = day.date_key
        if date_key in self._in_flight:
            raise TipRequestInFlight(date_key)

        self._in_flight.add(date_key)
        self._latest.pop(date_key, None)
        try:
            tip = await self._request_tip(build_tip_prompt(day, self.location_name))
        finally:
            self._in_flight.discard(date_key)

        self._latest[date_key] = tip
        return tip

    async def _request_tip(self, prompt: str) -> str:
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                )
                result = response.json()
        except Exception as e:
            logger.error(f"Error generating fishing tip: {e}")
            return REQUEST_FAILED_TIP

        text = extract_tip_text(result)
        if text is None:
            logger.warning("Tip response had no usable candidate text")
            return MALFORMED_RESPONSE_TIP
        return text
