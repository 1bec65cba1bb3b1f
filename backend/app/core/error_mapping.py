"""
Upstream error translation.
Maps an OpenWeatherMap failure onto the status and message this API returns.
"""
from typing import Any

from app.core.weather_schema import UpstreamFailure

CITY_NOT_FOUND = "City not found"
INVALID_API_KEY = "Invalid API key"
GENERIC_UPSTREAM_ERROR = "Error from weather service"
INTERNAL_SERVER_ERROR = "Internal server error"
CITY_REQUIRED = "City parameter is required"


def translate_upstream_error(status_code: int, body: Any = None) -> UpstreamFailure:
	"""Translate a non-2xx provider response.

	`body` is the decoded JSON payload, or None when the provider sent
	nothing parseable. Only its `message` field is ever read.
	"""
	if status_code == 404:
		return UpstreamFailure(404, CITY_NOT_FOUND)
	if status_code == 401:
		return UpstreamFailure(401, INVALID_API_KEY)

	message = body.get("message") if isinstance(body, dict) else None
	if not message:
		message = GENERIC_UPSTREAM_ERROR
	return UpstreamFailure(status_code, str(message))


def transport_failure() -> UpstreamFailure:
	"""No response reached us (timeout, DNS, refused connection)."""
	return UpstreamFailure(500, INTERNAL_SERVER_ERROR)
