"""Exceptions raised by the EnergyAtIt request adapter."""

from typing import Optional


class EnergyApiError(Exception):
    """Base class for every failure of a single remote call."""


class RemoteError(EnergyApiError):
    """The platform answered with ``success: false``."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TransportFailure(EnergyApiError):
    """The request never produced a response (DNS, connect, proxy, timeout)."""


class InvalidResponse(EnergyApiError):
    """The platform answered, but the body was not JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
