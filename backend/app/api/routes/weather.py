from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from app.core.weather_schema import ErrorResponse
from app.services.weather_client import WeatherClient

router = APIRouter()

_error_responses = {
	400: {"model": ErrorResponse},
	401: {"model": ErrorResponse},
	404: {"model": ErrorResponse},
	500: {"model": ErrorResponse},
}


def get_weather_client(request: Request) -> WeatherClient:
	return request.app.state.weather_client


@router.get("/weather", responses=_error_responses)
async def get_weather(
	city: Optional[str] = Query(None, description="City name, e.g. 'London'"),
	units: Optional[str] = Query(None, description="standard, metric or imperial"),
	lang: Optional[str] = Query(None, description="Provider language code"),
	weather_client: WeatherClient = Depends(get_weather_client),
):
	"""Return current weather for a city, exactly as the provider sent it."""
	result = await weather_client.get_current_weather(city, units=units, lang=lang)
	return Response(content=result.content, media_type=result.media_type)


@router.get("/forecast", responses=_error_responses)
async def get_forecast(
	city: Optional[str] = Query(None, description="City name; defaults to the configured city"),
	units: Optional[str] = Query(None),
	lang: Optional[str] = Query(None),
	weather_client: WeatherClient = Depends(get_weather_client),
):
	"""Return the 5-day / 3-hour forecast for a city."""
	result = await weather_client.get_forecast(city, units=units, lang=lang)
	return Response(content=result.content, media_type=result.media_type)
