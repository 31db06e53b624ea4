"""
Random error injection used by frontend developers to exercise error states.
"""

from datetime import datetime, timezone

from .base import CoffeeHouseException

SIMULATED_ERROR_MESSAGE = "Simulated API error for testing purposes"


class SimulatedApiErrorException(CoffeeHouseException):
    """Raised by utils.error_simulation; rendered as HTTP 500 with isTestError=true."""

    def __init__(self):
        super().__init__(SIMULATED_ERROR_MESSAGE)
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_response_body(self) -> dict:
        return {
            "error": self.message,
            "isTestError": True,
            "timestamp": self.timestamp,
        }
