"""
Custom exceptions for the flight_planner package.

Provides a hierarchy of exceptions for clear error handling
of backend calls and search criteria validation.
"""


class FlightPlannerError(Exception):
    """Base exception for all flight planner errors."""

    pass


class FlightApiError(FlightPlannerError):
    """Raised when the flight backend returns an HTTP error or cannot be reached."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        self.message = message or f"Flight API returned status code {status_code}"
        super().__init__(self.message)

    @property
    def is_transport_error(self) -> bool:
        """True when no HTTP response was received at all."""
        return self.status_code == -1


class InvalidResponseError(FlightApiError):
    """Raised when the backend answers with a body that cannot be decoded."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.detail = detail
        super().__init__(status_code, f"Invalid response payload: {detail}")


class CriteriaValidationError(FlightPlannerError):
    """Raised when search criteria fail the pre-submission checks."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
