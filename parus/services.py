"""A service locator keyed by the exact type of each registered service."""

from __future__ import annotations

from typing import TypeVar

__all__ = ["Service", "ServiceNotFoundError", "Services"]


class Service:
    """Base class for services held by a Services registry."""


class ServiceNotFoundError(LookupError):
    """Raised when no service of the requested type has been registered."""


S = TypeVar("S", bound=Service)


class Services:
    """Holds one instance per service type."""

    def __init__(self) -> None:
        self._services: dict[type, Service] = {}

    def register(self, service: Service) -> None:
        """Register ``service`` under its own type, replacing any earlier one."""
        self._services[type(service)] = service

    def get(self, service_type: type[S]) -> S:
        """Return the service registered under exactly ``service_type``."""
        try:
            return self._services[service_type]  # type: ignore[return-value]
        except KeyError:
            raise ServiceNotFoundError(
                f"ServiceLocator: failed to get instance of service {service_type.__name__}"
            ) from None

    def clear(self) -> None:
        """Forget every registered service."""
        self._services.clear()