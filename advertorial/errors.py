"""Exceptions raised by the generation and research services."""


class AdvertorialError(Exception):
    """Base class for service errors."""


class ConfigurationError(AdvertorialError):
    """A required credential or setting is missing."""


class UpstreamServiceError(AdvertorialError):
    """An external provider call failed or returned an unusable response."""

    def __init__(self, service: str, message: str):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.message = message
