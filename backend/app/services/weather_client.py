"""
OpenWeatherMap gateway.
Handles:
- current weather lookup by city
- 5-day / 3-hour forecast lookup by city
- provider error translation
- connection pooling
"""

import httpx
import logging
from typing import Any, Dict, Optional

from app.core.error_mapping import CITY_REQUIRED, transport_failure, translate_upstream_error
from app.core.weather_schema import UpstreamSuccess, WeatherServiceError

logger = logging.getLogger(__name__)


class WeatherClient:
	"""Forward city lookups to OpenWeatherMap and pass the payload through."""

	def __init__(
		self,
		api_key: str,
		weather_url: str,
		forecast_url: str,
		default_forecast_city: str = "Dhaka",
		timeout: float = 20.0,
		http_client: Optional[httpx.AsyncClient] = None,
	) -> None:
		self.api_key = api_key
		self.weather_url = weather_url
		self.forecast_url = forecast_url
		self.default_forecast_city = default_forecast_city
		self.timeout = timeout
		# Reusable client; an injected one is owned by the caller
		self._client = http_client
		self._owns_client = http_client is None

	@classmethod
	def from_settings(cls, settings, http_client: Optional[httpx.AsyncClient] = None) -> "WeatherClient":
		return cls(
			api_key=settings.OPENWEATHERMAP_API_KEY,
			weather_url=settings.weather_url,
			forecast_url=settings.forecast_url,
			default_forecast_city=settings.DEFAULT_FORECAST_CITY,
			timeout=settings.WEATHER_TIMEOUT_SECONDS,
			http_client=http_client,
		)

	def _get_client(self) -> httpx.AsyncClient:
		if self._client is None:
			# Use connection pooling to prevent file descriptor exhaustion
			limits = httpx.Limits(max_keepalive_connections=5, max_connections=10)
			self._client = httpx.AsyncClient(timeout=self.timeout, limits=limits)
		return self._client

	def _build_params(self, city: str, units: Optional[str], lang: Optional[str]) -> Dict[str, Any]:
		params = {"q": city, "appid": self.api_key}
		if units:
			params["units"] = units
		if lang:
			params["lang"] = lang
		return params

	async def _request(self, url: str, params: Dict[str, Any], operation: str) -> UpstreamSuccess:
		"""Single attempt against the provider; failures raise WeatherServiceError."""
		try:
			response = await self._get_client().get(url, params=params)
		except httpx.RequestError as e:
			logger.error(f"Error fetching {operation} data: {e.__class__.__name__}: {e}")
			raise WeatherServiceError.from_failure(transport_failure()) from e

		if response.is_success:
			return UpstreamSuccess(
				content=response.content,
				media_type=response.headers.get("content-type", "application/json"),
			)

		try:
			body = response.json()
		except ValueError:
			body = None
		failure = translate_upstream_error(response.status_code, body)
		logger.error(
			f"Error fetching {operation} data: upstream returned {response.status_code}: {failure.message}"
		)
		raise WeatherServiceError.from_failure(failure)

	async def get_current_weather(
		self, city: Optional[str], units: Optional[str] = None, lang: Optional[str] = None
	) -> UpstreamSuccess:
		"""Get current weather for a city. Missing city is rejected before any call."""
		if not city:
			raise WeatherServiceError(400, CITY_REQUIRED)
		return await self._request(self.weather_url, self._build_params(city, units, lang), "weather")

	async def get_forecast(
		self, city: Optional[str] = None, units: Optional[str] = None, lang: Optional[str] = None
	) -> UpstreamSuccess:
		"""Get the 5-day / 3-hour forecast, falling back to the default city."""
		city = city or self.default_forecast_city
		return await self._request(self.forecast_url, self._build_params(city, units, lang), "forecast")

	async def close(self):
		if self._client is not None and self._owns_client:
			await self._client.aclose()
			self._client = None
