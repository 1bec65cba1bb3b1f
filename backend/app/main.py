from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from typing import Optional
import httpx
import os
import logging

from .api.routes import weather
from .core.config import Settings, settings as default_settings
from .core.error_mapping import INTERNAL_SERVER_ERROR
from .core.weather_schema import HealthResponse, WeatherServiceError
from .services.weather_client import WeatherClient

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
	logging.basicConfig(
		level=level,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
	)


def create_app(settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
	settings = settings or default_settings
	configure_logging(settings.LOG_LEVEL)

	app = FastAPI(
		title=f"{settings.APP_NAME} API",
		description="Relay for OpenWeatherMap current weather and forecast lookups",
		version="1.0.0",
	)
	app.state.settings = settings
	app.state.weather_client = WeatherClient.from_settings(settings, http_client=http_client)

	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.CORS_ALLOW_ORIGINS,
		allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
		allow_methods=["GET", "POST"],
		allow_headers=["*"],
	)

	@app.exception_handler(WeatherServiceError)
	async def weather_service_error_handler(request: Request, exc: WeatherServiceError) -> JSONResponse:
		return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

	@app.exception_handler(Exception)
	async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
		logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
		return JSONResponse(status_code=500, content={"message": INTERNAL_SERVER_ERROR})

	app.include_router(weather.router, prefix=settings.API_PREFIX, tags=["weather"])

	# Serve the pre-built frontend bundle in production
	if settings.is_production and settings.FRONTEND_DIST:
		if os.path.isdir(settings.FRONTEND_DIST):
			app.mount("/app", StaticFiles(directory=settings.FRONTEND_DIST, html=True), name="frontend")
			logger.info(f"Serving frontend bundle from {settings.FRONTEND_DIST} at /app")
		else:
			logger.warning(f"FRONTEND_DIST={settings.FRONTEND_DIST} does not exist; frontend not served")

	@app.on_event("startup")
	async def on_startup() -> None:
		logger.info(
			f"Weather configuration: ENV={settings.ENV}, upstream={settings.OPENWEATHER_BASE_URL}, "
			f"api_key_set={bool(settings.OPENWEATHERMAP_API_KEY)}"
		)
		logger.info(f"CORS allowed origins: {', '.join(settings.CORS_ALLOW_ORIGINS)}")

	@app.on_event("shutdown")
	async def on_shutdown() -> None:
		await app.state.weather_client.close()

	@app.get("/health")
	def health() -> dict:
		return {"status": "ok"}

	@app.get("/", response_model=HealthResponse)
	def root() -> HealthResponse:
		return HealthResponse(message=f"Welcome to {settings.APP_NAME} API")

	return app


app = create_app()


def run() -> None:
	"""Start the API with uvicorn on the configured host and port."""
	import uvicorn

	logger.info(f"Server running on port {default_settings.PORT}")
	uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_level=default_settings.LOG_LEVEL.lower())


if __name__ == "__main__":
	run()
