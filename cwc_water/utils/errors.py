"""Exceptions raised by the water data service."""


class WaterDataError(Exception):
    """Base error for the service."""


class ConfigurationError(WaterDataError):
    """Required configuration is missing."""


class WaterApiError(WaterDataError):
    """Non-2xx response from the water data API."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
