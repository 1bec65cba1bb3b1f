from dataclasses import dataclass
from pydantic import BaseModel, Field


@dataclass(frozen=True)
class UpstreamSuccess:
	"""Raw provider body, returned to the caller untouched."""
	content: bytes
	media_type: str = "application/json"


@dataclass(frozen=True)
class UpstreamFailure:
	status_code: int
	message: str


class WeatherServiceError(Exception):
	"""Carries the outbound status and message for a failed lookup."""

	def __init__(self, status_code: int, message: str):
		super().__init__(message)
		self.status_code = status_code
		self.message = message

	@classmethod
	def from_failure(cls, failure: UpstreamFailure) -> "WeatherServiceError":
		return cls(failure.status_code, failure.message)


class ErrorResponse(BaseModel):
	message: str = Field(..., description="Human readable error message")


class HealthResponse(BaseModel):
	status: str = "API is running"
	message: str
