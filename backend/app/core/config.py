import os
import logging
from typing import List, Optional
from dotenv import load_dotenv

# Reload .env file to pick up changes
load_dotenv(override=True)  # override=True ensures new values replace old ones

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "https://mosam-weather-for-micro-it.vercel.app,http://localhost:5173"


def _env_bool(name: str, default: str) -> bool:
	return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
	"""Process-wide configuration, read from the environment once."""

	def __init__(self):
		self.APP_NAME: str = os.getenv("APP_NAME", "Mosam Weather")
		self.ENV: str = os.getenv("ENV", "dev")
		self.API_PREFIX: str = os.getenv("API_PREFIX", "/api")
		self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

		self.HOST: str = os.getenv("HOST", "0.0.0.0")
		self.PORT: int = int(os.getenv("PORT", "3000"))

		# Weather API configuration
		self.OPENWEATHERMAP_API_KEY: str = os.getenv("OPENWEATHERMAP_API_KEY", "")
		self.OPENWEATHER_BASE_URL: str = os.getenv(
			"OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5"
		).rstrip("/")
		self.WEATHER_TIMEOUT_SECONDS: float = float(os.getenv("WEATHER_TIMEOUT_SECONDS", "20"))
		self.DEFAULT_FORECAST_CITY: str = os.getenv("DEFAULT_FORECAST_CITY", "Dhaka")

		# Comma-separated; "*" allows every origin
		raw_origins = os.getenv("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
		self.CORS_ALLOW_ORIGINS: List[str] = [o.strip() for o in raw_origins.split(",") if o.strip()]
		self.CORS_ALLOW_CREDENTIALS: bool = _env_bool("CORS_ALLOW_CREDENTIALS", "true")

		self.FRONTEND_DIST: Optional[str] = os.getenv("FRONTEND_DIST", "frontend/dist")

		self._validate_weather_config()

	def _validate_weather_config(self):
		"""Log configuration problems that would otherwise only show up as upstream 401s"""
		if not self.OPENWEATHERMAP_API_KEY:
			logger.warning(
				"OPENWEATHERMAP_API_KEY is not set. Upstream calls will be rejected "
				"and clients will receive 'Invalid API key'."
			)
		if self.allow_all_origins and self.CORS_ALLOW_CREDENTIALS:
			# Wildcard with credentials is not permitted by browsers
			logger.warning("CORS_ALLOW_ORIGINS is '*'; disabling CORS credentials")
			self.CORS_ALLOW_CREDENTIALS = False

	@property
	def allow_all_origins(self) -> bool:
		return "*" in self.CORS_ALLOW_ORIGINS

	@property
	def is_production(self) -> bool:
		return self.ENV.lower() == "production"

	@property
	def weather_url(self) -> str:
		return f"{self.OPENWEATHER_BASE_URL}/weather"

	@property
	def forecast_url(self) -> str:
		return f"{self.OPENWEATHER_BASE_URL}/forecast"


settings = Settings()
